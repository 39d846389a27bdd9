"""Response schemas for the API."""

from pydantic import BaseModel


class WorkingDaysResponse(BaseModel):
    """Resulting instant, ISO 8601 UTC with Z suffix."""
    date: str


class ErrorResponse(BaseModel):
    """Error body: InvalidParameters | ServiceUnavailable."""
    error: str
    message: str


class HealthResponse(BaseModel):
    """Liveness probe response."""
    status: str
    timestamp: str
    version: str
    holidays_loaded: bool


class IndexResponse(BaseModel):
    """Service banner."""
    message: str
    endpoints: dict[str, str]
