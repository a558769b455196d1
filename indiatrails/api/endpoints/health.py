"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness verifies the database answers.
"""

from fastapi import APIRouter
from sqlalchemy import text

from indiatrails.config import get_settings
from indiatrails.db.session import DbSession

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can we reach the database?"""
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}
