"""
Tuiter Backend — Health Check Route
=====================================

    GET /health → HealthResponse, always 200

Status levels:
    healthy    database answers and every Tuiter table exists
    degraded   database answers but tables are missing (migrations not run)
    unhealthy  database does not answer
"""

import logging
import time
from typing import List

from fastapi import APIRouter, Request
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine

from tuiter import __version__
from tuiter.database import Base
from tuiter.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_started_at = time.monotonic()


async def _missing_tables(engine: AsyncEngine) -> List[str]:
    """Tables declared by the models but absent from the database."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
        present = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    return sorted(set(Base.metadata.tables) - set(present))


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(request: Request) -> HealthResponse:
    missing: List[str] = []
    try:
        missing = await _missing_tables(request.app.state.context.engine)
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        status, database = "unhealthy", "disconnected"
    else:
        database = "connected"
        status = "degraded" if missing else "healthy"
        if missing:
            logger.warning("Health check: missing tables %s", ", ".join(missing))

    return HealthResponse(
        status=status,
        version=__version__,
        database=database,
        missing_tables=missing,
        uptime_seconds=round(time.monotonic() - _started_at, 2),
    )
