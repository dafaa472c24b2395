"""Schemas for the administrative bulk-load endpoints."""

from pydantic import BaseModel

from portfolio_backend.schemas.skill import CamelModel


class PopulateResult(CamelModel):
    """Counters reported by a bulk load."""

    message: str = "Skills population completed"
    total_processed: int = 0
    successfully_added: int = 0
    skipped: int = 0
    errors: int = 0


class ClearResult(CamelModel):
    """Outcome of deleting every skill."""

    message: str = "All skills cleared from database"
    deleted_count: int


class ResetResult(CamelModel):
    """Outcome of a clear followed by a populate."""

    clear_result: ClearResult
    populate_result: PopulateResult


class HealthStatus(BaseModel):
    """Liveness payload."""

    status: str
    service: str


class DatabaseStatus(BaseModel):
    """Database connectivity payload."""

    status: str
    dialect: str
