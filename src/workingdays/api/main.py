"""
Working Days FastAPI Service

REST API for Colombian working-time calculations.

Endpoints:
    GET /               - Service banner
    GET /health         - Liveness probe
    GET /working-days   - Add working days/hours to a date

Run:
    uvicorn workingdays.api.main:app --port 3000
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from workingdays import __version__
from workingdays.api.routes import working_days
from workingdays.api.schemas import HealthResponse, IndexResponse
from workingdays.clock import COLOMBIA_CLOCK, ColombiaClock
from workingdays.config import Settings, build_holiday_source
from workingdays.engine import WorkingTimeCalculator
from workingdays.exceptions import WorkingDaysError
from workingdays.holidays import HolidayOracle

# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

# Extra record attributes copied into the JSON entry when present
LOG_EXTRA_FIELDS = ("request_id", "method", "path", "status_code", "duration_ms", "error_code")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in LOG_EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


logger = logging.getLogger("workingdays")


def configure_logging(level: str) -> None:
    """Attach the JSON handler to the package logger (once)."""
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)


# =============================================================================
# FastAPI App
# =============================================================================

def create_app(
    settings: Optional[Settings] = None,
    oracle: Optional[HolidayOracle] = None,
    clock: Optional[ColombiaClock] = None,
) -> FastAPI:
    """
    Build the service.

    Args:
        settings: Configuration (default: from environment)
        oracle: Holiday oracle (default: built from settings)
        clock: Clock used for "now" and zone conversion
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    if oracle is None:
        oracle = HolidayOracle(build_holiday_source(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Working days service starting (holiday source: {settings.holiday_source})")
        yield
        logger.info("Working days service shutting down")

    app = FastAPI(
        title="Working Days",
        description="Colombian working days and hours calculator",
        version=__version__,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.oracle = oracle
    app.state.calculator = WorkingTimeCalculator(oracle=oracle, clock=clock or COLOMBIA_CLOCK)

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Add request ID and access log to all requests."""
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            },
        )
        return response

    @app.exception_handler(WorkingDaysError)
    async def working_days_error_handler(request: Request, exc: WorkingDaysError):
        logger.warning(
            str(exc),
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "error_code": exc.code,
            },
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.get("/", response_model=IndexResponse, tags=["Health"])
    async def index():
        return IndexResponse(
            message="Working Days API - Colombia",
            endpoints={
                "health": "/health",
                "workingDays": "/working-days?days=<number>&hours=<number>&date=<ISO8601>",
            },
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Liveness probe. Never touches the holiday source."""
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=__version__,
            holidays_loaded=app.state.oracle.loaded,
        )

    app.include_router(working_days.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
