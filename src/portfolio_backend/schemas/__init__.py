"""Pydantic schemas package."""

from portfolio_backend.schemas.admin import (
    ClearResult,
    DatabaseStatus,
    HealthStatus,
    PopulateResult,
    ResetResult,
)
from portfolio_backend.schemas.envelope import ErrorEnvelope, SuccessEnvelope
from portfolio_backend.schemas.skill import (
    CategoryStat,
    DeleteResult,
    ExistsResult,
    Skill,
    SkillBase,
    SkillCreate,
)

__all__ = [
    "CategoryStat",
    "ClearResult",
    "DatabaseStatus",
    "DeleteResult",
    "ErrorEnvelope",
    "ExistsResult",
    "HealthStatus",
    "PopulateResult",
    "ResetResult",
    "Skill",
    "SkillBase",
    "SkillCreate",
    "SuccessEnvelope",
]
