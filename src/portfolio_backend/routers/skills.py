"""Skills API router - listing, filtering, aggregate and CRUD endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse

from portfolio_backend.routers.dependencies import get_skill_service
from portfolio_backend.schemas.admin import HealthStatus
from portfolio_backend.schemas.skill import (
    CategoryStat,
    DeleteResult,
    ExistsResult,
    Skill as SkillSchema,
    SkillCreate,
)
from portfolio_backend.services.errors import NotFoundError
from portfolio_backend.services.skill_service import (
    DEFAULT_MIN_PROFICIENCY,
    DEFAULT_TOP_LIMIT,
    SkillService,
)
from portfolio_backend.services.validation import MAX_DB_INTEGER
from portfolio_backend.utils.responses import success_response

router = APIRouter(prefix="/skills", tags=["skills"])

SkillId = Annotated[int, Path(le=MAX_DB_INTEGER)]


def _serialize(skills) -> list[SkillSchema]:
    return [SkillSchema.model_validate(skill) for skill in skills]


# Fixed paths are declared before /{skill_id} so they are not read as ids.


@router.get("")
def list_skills(service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    """List every skill."""
    return success_response(_serialize(service.get_all_skills()))


@router.get("/health")
def health_check() -> JSONResponse:
    """Liveness probe for the skills API."""
    return success_response(HealthStatus(status="healthy", service="Skills API"))


@router.get("/category/{category}")
def list_skills_by_category(
    category: str, service: SkillService = Depends(get_skill_service)
) -> JSONResponse:
    """List skills in a category (case-insensitive)."""
    return success_response(_serialize(service.get_skills_by_category(category)))


@router.get("/bubbles")
def list_bubble_skills(
    min_proficiency: int = Query(default=DEFAULT_MIN_PROFICIENCY, alias="minProficiency"),
    service: SkillService = Depends(get_skill_service),
) -> JSONResponse:
    """
    List skills for the bubble visualization.

    Args:
        min_proficiency: Lowest proficiency level to include (``minProficiency``).
    """
    return success_response(_serialize(service.get_skills_for_bubble_display(min_proficiency)))


@router.get("/ordered")
def list_ordered_skills(service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    """List skills by proficiency (desc) then name (asc)."""
    return success_response(_serialize(service.get_skills_ordered_by_proficiency()))


@router.get("/categories")
def list_categories(service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    """List distinct categories alphabetically."""
    return success_response(service.get_all_categories())


@router.get("/top")
def list_top_skills(
    limit: int = Query(default=DEFAULT_TOP_LIMIT),
    service: SkillService = Depends(get_skill_service),
) -> JSONResponse:
    """List the top ``limit`` skills by proficiency then experience."""
    return success_response(_serialize(service.get_top_skills(limit)))


@router.get("/search")
def search_skills(
    name: str = Query(default=""),
    service: SkillService = Depends(get_skill_service),
) -> JSONResponse:
    """Search skills by name substring; a blank term lists everything."""
    return success_response(_serialize(service.search_skills_by_name(name)))


@router.get("/stats")
def skill_stats(service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    """Count skills per category."""
    stats = [
        CategoryStat(category=category, count=count)
        for category, count in service.get_skill_stats_by_category()
    ]
    return success_response(stats)


@router.post("")
def create_skill(
    candidate: SkillCreate, service: SkillService = Depends(get_skill_service)
) -> JSONResponse:
    """
    Create a skill.

    Returns:
        201 with the stored skill.

    Raises:
        ValidationError / DuplicateNameError: mapped to 400.
    """
    skill = service.create_skill(candidate)
    return success_response(SkillSchema.model_validate(skill), status_code=201)


@router.get("/{skill_id}")
def get_skill(skill_id: SkillId, service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    """
    Get a single skill.

    Raises:
        NotFoundError: mapped to 404 when the id is unknown.
    """
    skill = service.get_skill_by_id(skill_id)
    if skill is None:
        raise NotFoundError(f"No skill found with ID: {skill_id}")
    return success_response(SkillSchema.model_validate(skill))


@router.put("/{skill_id}")
def update_skill(
    skill_id: SkillId,
    candidate: SkillCreate,
    service: SkillService = Depends(get_skill_service),
) -> JSONResponse:
    """Replace the mutable fields of a skill."""
    skill = service.update_skill(skill_id, candidate)
    return success_response(SkillSchema.model_validate(skill))


@router.delete("/{skill_id}")
def delete_skill(skill_id: SkillId, service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    """Delete a skill."""
    service.delete_skill(skill_id)
    return success_response(DeleteResult(deleted_id=skill_id))


@router.get("/{skill_id}/exists")
def skill_exists(skill_id: SkillId, service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    """Report whether a skill id exists."""
    return success_response(ExistsResult(skill_id=skill_id, exists=service.skill_exists(skill_id)))
