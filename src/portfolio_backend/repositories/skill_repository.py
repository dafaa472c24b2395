"""
Skill repository providing generic query primitives over the skills table.

Callers describe what they want with SQLAlchemy predicates and orderings
instead of one method per query shape:

    repository.find(Skill.proficiency_level >= 4, order_by=[Skill.category])
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from portfolio_backend.models.skill import Skill


class SkillRepository:
    """Thin data-access layer for ``Skill`` rows bound to one session."""

    def __init__(self, db: Session) -> None:
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def get(self, skill_id: int) -> Skill | None:
        """Return the skill with the given primary key, or None."""
        return self.db.get(Skill, skill_id)

    def find(
        self,
        *where: Any,
        order_by: Sequence[Any] = (),
        limit: int | None = None,
    ) -> list[Skill]:
        """
        Query skills matching every predicate.

        Args:
            *where: SQLAlchemy boolean expressions combined with AND
            order_by: Ordering clauses applied in sequence
            limit: Maximum number of rows, or None for all

        Returns:
            Matching skills, fully loaded
        """
        statement = select(Skill).where(*where).order_by(*order_by)
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.db.scalars(statement).all())

    def exists(self, *where: Any) -> bool:
        """Return True if at least one skill matches every predicate."""
        statement = select(Skill.id).where(*where).limit(1)
        return self.db.scalar(statement) is not None

    def distinct(self, column: Any) -> list[Any]:
        """Return the distinct values of a column in ascending order."""
        statement = select(column).distinct().order_by(column)
        return list(self.db.scalars(statement).all())

    def count_by(self, column: Any) -> list[tuple[Any, int]]:
        """
        Count skills grouped by a column.

        Returns:
            ``(value, count)`` pairs ordered by value
        """
        statement = (
            select(column, func.count(Skill.id)).group_by(column).order_by(column)
        )
        return [(value, count) for value, count in self.db.execute(statement).all()]

    def add(self, skill: Skill) -> Skill:
        """Stage a new skill and flush it so its id is assigned."""
        self.db.add(skill)
        self.db.flush()
        return skill

    def delete(self, skill: Skill) -> None:
        """Stage removal of a skill."""
        self.db.delete(skill)
        self.db.flush()
