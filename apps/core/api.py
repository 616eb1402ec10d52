"""
Health endpoints.

- GET /        : welcome message
- GET /health  : liveness, never touches the database
- GET /ready   : readiness, runs a trivial query against the database
"""
import logging
import time
from datetime import datetime, timezone

from django.conf import settings
from django.db import connection
from django.http import HttpRequest
from ninja import Router, Schema

logger = logging.getLogger(__name__)

router = Router(tags=["health"])

# Captured at import, i.e. when the process loads the URLconf
_STARTED_AT = time.monotonic()


class HealthOut(Schema):
    status: str
    timestamp: str
    uptime: float
    environment: str


class ReadinessOut(Schema):
    status: str
    timestamp: str
    database: str


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_uptime() -> float:
    return time.monotonic() - _STARTED_AT


def check_database() -> str:
    """Return "connected" if `SELECT 1` succeeds, "error" otherwise."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except Exception:
        logger.exception("Database connection check failed")
        return "error"
    return "connected"


@router.get("/", response=str, summary="Endpoint raiz da aplicação")
def root(request: HttpRequest):
    return "Hello World!"


@router.get("/health", response=HealthOut, summary="Health check da aplicação")
def health(request: HttpRequest):
    """
    Liveness probe. Does not depend on the database.
    """
    return HealthOut(
        status="ok",
        timestamp=_now_iso(),
        uptime=round(get_uptime(), 3),
        environment=settings.ENVIRONMENT,
    )


@router.get("/ready", response=ReadinessOut, summary="Readiness check da aplicação")
def ready(request: HttpRequest):
    """
    Readiness probe. A database failure is reported as a degraded status,
    never as an error response.
    """
    database = check_database()
    return ReadinessOut(
        status="ready" if database == "connected" else "not_ready",
        timestamp=_now_iso(),
        database=database,
    )
