"""Skill Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillBase(CamelModel):
    """
    Base skill schema with the mutable fields.

    Only JSON types are checked here; the business rules (required fields,
    ranges, lengths, color format) live in ``services.validation`` so that
    violations are reported as a 400 envelope.
    """

    name: str | None = None
    category: str | None = None
    proficiency_level: int | None = None
    years_experience: int | None = None
    description: str | None = None
    icon_url: str | None = None
    color_hex: str | None = None


class SkillCreate(SkillBase):
    """Schema for a candidate skill sent to create or update."""

    pass


class Skill(SkillBase):
    """Complete skill schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    created_at: datetime
    updated_at: datetime


class CategoryStat(CamelModel):
    """Number of skills recorded under one category."""

    category: str
    count: int


class DeleteResult(CamelModel):
    """Confirmation returned after a skill is deleted."""

    message: str = "Skill deleted successfully"
    deleted_id: int


class ExistsResult(CamelModel):
    """Result of an existence check by id."""

    skill_id: int
    exists: bool
