"""Field rules for candidate skills."""

from __future__ import annotations

import re
from typing import Any

from portfolio_backend.services.errors import ValidationError

COLOR_HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")

MIN_PROFICIENCY = 1
MAX_PROFICIENCY = 5

# Upper bound of the INTEGER columns
MAX_DB_INTEGER = 2**31 - 1

# attribute -> (label, max length)
MAX_LENGTHS: dict[str, tuple[str, int]] = {
    "name": ("Skill name", 100),
    "category": ("Category", 50),
    "description": ("Description", 1000),
    "icon_url": ("Icon URL", 255),
}


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_skill(skill: Any) -> None:
    """
    Check a candidate skill against the field rules.

    Works with anything exposing the skill attributes (a ``SkillCreate``
    schema or a ``Skill`` ORM instance).  Has no side effects.

    Args:
        skill: Candidate skill

    Raises:
        ValidationError: On the first rule the candidate breaks
    """
    if _is_blank(skill.name):
        raise ValidationError("Skill name is required")

    if _is_blank(skill.category):
        raise ValidationError("Skill category is required")

    level = skill.proficiency_level
    if level is not None and not MIN_PROFICIENCY <= level <= MAX_PROFICIENCY:
        raise ValidationError(
            f"Proficiency level must be between {MIN_PROFICIENCY} and {MAX_PROFICIENCY}"
        )

    if skill.years_experience is not None and skill.years_experience < 0:
        raise ValidationError("Years of experience cannot be negative")

    if skill.years_experience is not None and skill.years_experience > MAX_DB_INTEGER:
        raise ValidationError(f"Years of experience must be at most {MAX_DB_INTEGER}")

    if skill.color_hex is not None and not COLOR_HEX_PATTERN.fullmatch(skill.color_hex):
        raise ValidationError("Color must be a valid hex color code")

    for attribute, (label, limit) in MAX_LENGTHS.items():
        value = getattr(skill, attribute)
        if value is not None and len(value) > limit:
            raise ValidationError(f"{label} must be less than {limit} characters")
