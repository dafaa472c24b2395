"""Admin router - bulk load and clear the skills table."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from portfolio_backend.config import settings
from portfolio_backend.routers.dependencies import get_skill_populator
from portfolio_backend.schemas.admin import ResetResult
from portfolio_backend.services.skill_populator import SkillPopulator
from portfolio_backend.utils.responses import success_response

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/populate-skills")
def populate_skills(populator: SkillPopulator = Depends(get_skill_populator)) -> JSONResponse:
    """Load skills from the configured seed file, skipping existing names."""
    return success_response(populator.populate_from_file(settings.skills_data_file))


@router.post("/clear-skills")
def clear_skills(populator: SkillPopulator = Depends(get_skill_populator)) -> JSONResponse:
    """Delete every skill."""
    return success_response(populator.clear_all())


@router.post("/reset-and-populate")
def reset_and_populate(populator: SkillPopulator = Depends(get_skill_populator)) -> JSONResponse:
    """Delete every skill, then load the seed file."""
    clear_result = populator.clear_all()
    populate_result = populator.populate_from_file(settings.skills_data_file)
    return success_response(
        ResetResult(clear_result=clear_result, populate_result=populate_result)
    )
