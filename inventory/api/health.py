from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from inventory.database import get_db
from inventory.utils.sessions import SessionStore, get_session_store

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check if the database and the session store are reachable."
)
def readiness_check(
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store)
):
    """
    Readiness check for all dependencies.

    Returns status of:
    - Database connection
    - Session store
    """
    checks = {
        "database": False,
        "session_store": False
    }

    # Check database
    try:
        db.execute(text("SELECT 1"))
        checks["database"] = True
    except Exception as e:
        checks["database_error"] = str(e)

    checks["session_store"] = store.ping()

    all_healthy = checks["database"] and checks["session_store"]

    return {
        "status": "ready" if all_healthy else "not_ready",
        "checks": checks
    }
