"""Database models package."""

from portfolio_backend.models.skill import Skill

__all__ = ["Skill"]
