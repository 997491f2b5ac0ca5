"""
Tuiter Backend — Shared Pydantic Schemas
=========================================

What:  Base model configuration, mutation status objects, and the error and
       health response bodies used across every resource.

Naming:
    Python attributes are snake_case; JSON is camelCase (`ownerId`,
    `modifiedCount`). ApiModel sets the alias generator once and every schema
    inherits it. FastAPI serializes responses by alias.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for response schemas: camelCase aliases, built from ORM rows."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PayloadModel(ApiModel):
    """Base for request bodies: unknown fields are rejected with 422."""

    model_config = ConfigDict(extra="forbid")


def reject_null(value: Any) -> Any:
    """
    Field validator body for optional update fields.

    An absent field means "leave unchanged"; an explicit null would write
    NULL into a NOT NULL column, so it is refused.
    """
    if value is None:
        raise ValueError("may not be null")
    return value


# ══════════════════════════════════════════════════════════════════════════
# Status Objects: what mutations report
# ══════════════════════════════════════════════════════════════════════════


class UpdateStatus(ApiModel):
    """
    What:  Result of PUT on a single record.

    Example:
        {"acknowledged": true, "matchedCount": 1, "modifiedCount": 0}
        → the record exists but the payload changed nothing.
    """
    acknowledged: bool = Field(default=True)
    matched_count: int = Field(ge=0, description="Records matching the id (0 or 1)")
    modified_count: int = Field(ge=0, description="Records whose stored values changed (0 or 1)")


class DeleteStatus(ApiModel):
    """
    What:  Result of DELETE / unlike / unfollow / unbookmark.

    Deleting an unknown id is not an error: deletedCount is 0.
    """
    acknowledged: bool = Field(default=True)
    deleted_count: int = Field(ge=0, description="Records removed")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(ApiModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Users cannot follow themselves",
            "details": {"field": "uid2"},
            "requestId": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(ApiModel):
    """Returned by GET /health."""
    status: str = Field(description="healthy, degraded or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="connected or disconnected")
    missing_tables: List[str] = Field(default_factory=list, description="Tables not yet created")
    uptime_seconds: float = Field(description="Seconds since service started")
