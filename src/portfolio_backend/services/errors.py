"""Exceptions raised by the skill services."""


class SkillServiceError(Exception):
    """Base class for errors reported by the skill service."""


class ValidationError(SkillServiceError):
    """Raised when a candidate skill breaks a field rule."""


class DuplicateNameError(SkillServiceError):
    """Raised when a skill name is already taken (case-insensitive)."""


class NotFoundError(SkillServiceError):
    """Raised when no skill exists with the requested id."""


class PersistenceError(SkillServiceError):
    """Raised when the underlying database operation fails."""
