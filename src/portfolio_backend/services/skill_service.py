"""Skill query and CRUD service."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_backend.models.skill import Skill, fold_case
from portfolio_backend.repositories.skill_repository import SkillRepository
from portfolio_backend.schemas.skill import SkillBase
from portfolio_backend.services.errors import (
    DuplicateNameError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from portfolio_backend.services.validation import validate_skill

logger = logging.getLogger(__name__)

DEFAULT_MIN_PROFICIENCY = 1
DEFAULT_TOP_LIMIT = 10

# Unrated skills sort after rated ones; id keeps equal keys deterministic
BY_PROFICIENCY_THEN_NAME = (
    Skill.proficiency_level.desc().nulls_last(),
    Skill.name.asc(),
    Skill.id.asc(),
)
BY_PROFICIENCY_THEN_EXPERIENCE = (
    Skill.proficiency_level.desc().nulls_last(),
    Skill.years_experience.desc().nulls_last(),
    Skill.id.asc(),
)
BY_CATEGORY_THEN_PROFICIENCY = (
    Skill.category.asc(),
    Skill.proficiency_level.desc().nulls_last(),
    Skill.id.asc(),
)

MUTABLE_FIELDS = (
    "name",
    "category",
    "proficiency_level",
    "years_experience",
    "description",
    "icon_url",
    "color_hex",
)


def _name_matches(name: str):
    return Skill.name_key == fold_case(name)


class SkillService:
    """
    Service orchestrating validation and persistence for skills.

    Handles:
    - Read-only listings, filters and aggregates over the skills table
    - Create/update/delete, each committed as its own transaction
    - Translating database failures into the service error types
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the skill service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.repository = SkillRepository(db)

    @contextmanager
    def _translate_errors(self, name: str | None = None) -> Iterator[None]:
        """Roll back and re-raise database failures as service errors."""
        try:
            yield
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateNameError(f"Skill with name '{name}' already exists") from exc
        except OverflowError as exc:
            # Integers beyond the driver's 64-bit range never reach the database
            self.db.rollback()
            raise ValidationError(f"Value out of range: {exc}") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError(str(exc)) from exc

    # ------------------------------------------------------------------ reads

    def get_all_skills(self) -> list[Skill]:
        """Return every skill ordered by id."""
        with self._translate_errors():
            return self.repository.find(order_by=[Skill.id.asc()])

    def get_skill_by_id(self, skill_id: int) -> Skill | None:
        """
        Get a skill by id.

        Returns:
            The skill, or None if no skill has this id
        """
        with self._translate_errors():
            return self.repository.get(skill_id)

    def get_skills_by_category(self, category: str) -> list[Skill]:
        """Return skills whose category equals ``category`` ignoring case."""
        with self._translate_errors():
            return self.repository.find(
                Skill.category_key == fold_case(category),
                order_by=[Skill.id.asc()],
            )

    def get_skills_for_bubble_display(self, min_proficiency: int | None = None) -> list[Skill]:
        """
        Get skills for the frontend bubble visualization.

        Args:
            min_proficiency: Minimum proficiency level, 1 when None

        Returns:
            Skills at or above the level, ordered by category then proficiency desc
        """
        if min_proficiency is None:
            min_proficiency = DEFAULT_MIN_PROFICIENCY
        with self._translate_errors():
            return self.repository.find(
                Skill.proficiency_level >= min_proficiency,
                order_by=BY_CATEGORY_THEN_PROFICIENCY,
            )

    def get_skills_ordered_by_proficiency(self) -> list[Skill]:
        """Return every skill by proficiency desc, then name asc."""
        with self._translate_errors():
            return self.repository.find(order_by=BY_PROFICIENCY_THEN_NAME)

    def get_all_categories(self) -> list[str]:
        """Return the distinct categories in alphabetical order."""
        with self._translate_errors():
            return self.repository.distinct(Skill.category)

    def get_top_skills(self, limit: int | None = None) -> list[Skill]:
        """
        Get the top skills by proficiency, then years of experience.

        Args:
            limit: Number of skills to return; 10 when None or not positive

        Returns:
            At most ``limit`` skills
        """
        if limit is None or limit <= 0:
            limit = DEFAULT_TOP_LIMIT
        with self._translate_errors():
            return self.repository.find(order_by=BY_PROFICIENCY_THEN_EXPERIENCE, limit=limit)

    def search_skills_by_name(self, name: str | None) -> list[Skill]:
        """
        Search skills whose name contains ``name`` ignoring case.

        A blank search term returns every skill.
        """
        if name is None or not name.strip():
            return self.get_all_skills()
        with self._translate_errors():
            return self.repository.find(
                Skill.name_key.contains(fold_case(name.strip()), autoescape=True),
                order_by=[Skill.id.asc()],
            )

    def get_skill_stats_by_category(self) -> list[tuple[str, int]]:
        """Return ``(category, count)`` pairs ordered by category."""
        with self._translate_errors():
            return self.repository.count_by(Skill.category)

    def skill_exists(self, skill_id: int) -> bool:
        """Return True if a skill with this id exists."""
        with self._translate_errors():
            return self.repository.exists(Skill.id == skill_id)

    def skill_exists_by_name(self, name: str) -> bool:
        """Return True if a skill with this name exists, ignoring case."""
        with self._translate_errors():
            return self.repository.exists(_name_matches(name))

    # ----------------------------------------------------------------- writes

    def create_skill(self, candidate: SkillBase) -> Skill:
        """
        Validate and persist a new skill.

        Args:
            candidate: Skill fields to store

        Returns:
            The stored skill with its generated id and timestamps

        Raises:
            ValidationError: If a field rule is broken
            DuplicateNameError: If the name is already taken
            PersistenceError: If the database write fails
        """
        validate_skill(candidate)

        if self.skill_exists_by_name(candidate.name):
            logger.warning("Rejected duplicate skill name %r", candidate.name)
            raise DuplicateNameError(f"Skill with name '{candidate.name}' already exists")

        skill = Skill(**{field: getattr(candidate, field) for field in MUTABLE_FIELDS})
        with self._translate_errors(candidate.name):
            self.repository.add(skill)
            self.db.commit()
            self.db.refresh(skill)

        logger.info("Created skill %s (%s)", skill.id, skill.name)
        return skill

    def update_skill(self, skill_id: int, candidate: SkillBase) -> Skill:
        """
        Replace every mutable field of an existing skill.

        ``id`` and ``created_at`` are preserved, ``updated_at`` is refreshed.

        Raises:
            NotFoundError: If no skill has this id
            ValidationError: If a field rule is broken
            DuplicateNameError: If the new name belongs to another skill
            PersistenceError: If the database write fails
        """
        skill = self.get_skill_by_id(skill_id)
        if skill is None:
            raise NotFoundError(f"Skill with ID {skill_id} not found")

        validate_skill(candidate)

        with self._translate_errors(candidate.name):
            taken = self.repository.exists(_name_matches(candidate.name), Skill.id != skill_id)
        if taken:
            logger.warning("Rejected rename of skill %s to %r", skill_id, candidate.name)
            raise DuplicateNameError(f"Skill with name '{candidate.name}' already exists")

        for field in MUTABLE_FIELDS:
            setattr(skill, field, getattr(candidate, field))
        # Set explicitly so the timestamp moves even when no field changed
        skill.updated_at = func.now()

        with self._translate_errors(candidate.name):
            self.db.commit()
            self.db.refresh(skill)

        logger.info("Updated skill %s", skill.id)
        return skill

    def delete_skill(self, skill_id: int) -> None:
        """
        Delete a skill by id.

        Raises:
            NotFoundError: If no skill has this id
            PersistenceError: If the database write fails
        """
        skill = self.get_skill_by_id(skill_id)
        if skill is None:
            raise NotFoundError(f"Skill with ID {skill_id} not found")

        with self._translate_errors():
            self.repository.delete(skill)
            self.db.commit()

        logger.info("Deleted skill %s", skill_id)
