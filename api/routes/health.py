"""Health check and greeting routes"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
import logging

from adapters import mongo_adapter
from api.responses import HealthResponse
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("messledger.api.health")

GREETING = "MessLedger server is open..."


@router.get("/", response_class=PlainTextResponse)
def root():
    return GREETING


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint; reports whether MongoDB answers a ping."""
    try:
        mongo_adapter.get_db().client.admin.command("ping")
        database = "ok"
    except Exception as e:
        logger.warning("MongoDB ping failed: %s", e)
        database = "unavailable"
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        database=database,
    )
