"""Skill database model."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func
from sqlalchemy.orm import validates

from portfolio_backend.database import Base


def fold_case(value: str | None) -> str | None:
    """Return the caseless matching key for a name or category."""
    return value.casefold() if value is not None else None


class Skill(Base):
    """
    Skill model representing one competency shown on the portfolio.

    Attributes:
        id: Primary key
        name: Skill name (unique, case-insensitive)
        name_key: Case-folded name; its unique constraint enforces uniqueness
        category: Free-form grouping label (e.g. "Backend", "Frontend")
        category_key: Case-folded category used for lookups
        proficiency_level: Self-assessed level on a 1-5 scale
        years_experience: Whole years of hands-on experience
        description: Longer free-text description
        icon_url: URL of the skill's icon/logo
        color_hex: Bubble color in ``#RRGGBB`` form
        created_at: Timestamp when record was created
        updated_at: Timestamp of the last successful write
    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    # casefold() can expand a string (e.g. "ß" -> "ss")
    name_key = Column(String(300), nullable=False, unique=True)
    category = Column(String(50), nullable=False, index=True)
    category_key = Column(String(150), nullable=False, index=True)
    proficiency_level = Column(Integer, nullable=True, index=True)
    years_experience = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    icon_url = Column(String(255), nullable=True)
    color_hex = Column(String(7), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    @validates("name")
    def _set_name_key(self, key: str, value: str | None) -> str | None:
        self.name_key = fold_case(value)
        return value

    @validates("category")
    def _set_category_key(self, key: str, value: str | None) -> str | None:
        self.category_key = fold_case(value)
        return value

    def __eq__(self, other: object) -> bool:
        """Skills are equal when they share the same database id."""
        if not isinstance(other, Skill):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """
        Hash by database id.

        An unsaved skill hashes by identity and its hash changes once a flush
        assigns the id, so only put saved skills in sets or dict keys.
        """
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        """String representation of Skill."""
        return (
            f"<Skill(id={self.id}, name='{self.name}', category='{self.category}', "
            f"proficiency_level={self.proficiency_level})>"
        )
