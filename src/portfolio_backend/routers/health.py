"""Health router - database connectivity check."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_backend.database import get_db
from portfolio_backend.schemas.admin import DatabaseStatus
from portfolio_backend.services.errors import PersistenceError
from portfolio_backend.utils.responses import success_response

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/db")
def database_health(db: Session = Depends(get_db)) -> JSONResponse:
    """
    Run ``SELECT 1`` against the configured database.

    Raises:
        PersistenceError: mapped to 500 when the database is unreachable.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        raise PersistenceError(str(exc)) from exc
    return success_response(DatabaseStatus(status="ok", dialect=db.get_bind().dialect.name))
