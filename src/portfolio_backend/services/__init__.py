"""Services package."""

from portfolio_backend.services.errors import (
    DuplicateNameError,
    NotFoundError,
    PersistenceError,
    SkillServiceError,
    ValidationError,
)
from portfolio_backend.services.skill_populator import PopulateError, SkillPopulator
from portfolio_backend.services.skill_service import SkillService
from portfolio_backend.services.validation import validate_skill

__all__ = [
    "DuplicateNameError",
    "NotFoundError",
    "PersistenceError",
    "PopulateError",
    "SkillPopulator",
    "SkillService",
    "SkillServiceError",
    "ValidationError",
    "validate_skill",
]
