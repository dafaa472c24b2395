"""Shared FastAPI dependencies for the routers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from portfolio_backend.database import get_db
from portfolio_backend.services.skill_populator import SkillPopulator
from portfolio_backend.services.skill_service import SkillService


def get_skill_service(db: Session = Depends(get_db)) -> SkillService:
    """Build a ``SkillService`` bound to the request's session."""
    return SkillService(db)


def get_skill_populator(
    service: SkillService = Depends(get_skill_service),
) -> SkillPopulator:
    """Build a ``SkillPopulator`` bound to the request's skill service."""
    return SkillPopulator(service)
