"""Data access package."""

from portfolio_backend.repositories.skill_repository import SkillRepository

__all__ = ["SkillRepository"]
