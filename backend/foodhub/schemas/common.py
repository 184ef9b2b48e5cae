"""
FoodHub Backend — Shared Schemas
==================================

What:  Base model configuration, pagination envelope, and error/health models
       shared by every resource.
How:   CamelModel converts snake_case attributes to camelCase JSON keys.
       populate_by_name lets Python code (and tests) construct models with
       either spelling; from_attributes lets responses be built straight
       from ORM objects.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request and response body exchanged as JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    """
    Offset pagination metadata.

    total_pages = ceil(total_count / per_page); an empty result set has
    zero pages.
    """
    current_page: int = Field(description="1-based page number that was returned")
    total_pages: int = Field(description="Number of pages for the current filters")
    total_count: int = Field(description="Total records matching the filters")
    per_page: int = Field(description="Page size used for this response")


class MessageResponse(CamelModel):
    """Plain acknowledgement, e.g. after a delete."""
    message: str


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Please provide all required fields",
            "details": {"missing": ["image"]},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
