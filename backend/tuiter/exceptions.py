"""
Tuiter Backend — Exception Hierarchy
======================================

    TuiterError                 500 server_error
    ├── ValidationError         400 validation_error  (business rule broken)
    ├── NotFoundError           404 not_found         (STRICT_NOT_FOUND only)
    └── DatabaseError           500 server_error      (persistence failed)

Each class declares its HTTP mapping; main.register_exception_handlers turns
any TuiterError into the ErrorResponse body from these attributes.

Schema problems in request bodies never reach this hierarchy: FastAPI raises
RequestValidationError and the client gets 422. ValidationError is for rules
a schema cannot express, such as a taken username or a self-follow.
"""

from typing import Any, Dict, Optional


class TuiterError(Exception):
    """
    Base for every error the API reports on purpose.

    Attributes:
        message:  description of what went wrong
        context:  structured detail, always logged
        status_code / error_code:  HTTP status and the `error` field
        expose_context:  whether `context` is returned as `details`
    """

    status_code = 500
    error_code = "server_error"
    expose_context = False

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        """The message placed in the response body."""
        return self.message


class ValidationError(TuiterError):
    """
    Client input breaks a business rule.

        {"error": "validation_error",
         "message": "Username 'alice' is already taken",
         "details": {"field": "username"}, "requestId": "a1b2c3d4"}
    """

    status_code = 400
    error_code = "validation_error"
    expose_context = True

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(TuiterError):
    """
    A single-record read found nothing. Raised by the tuit and user
    controllers only when STRICT_NOT_FOUND is on; otherwise they answer null.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(self, resource: str = "record", resource_id: Optional[str] = None):
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        else:
            message = f"The requested {resource} was not found"
        context = {"resource": resource}
        if resource_id:
            context["resource_id"] = resource_id
        super().__init__(message=message, context=context)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(TuiterError):
    """
    A query, insert, update or delete failed (connection lost, driver error,
    constraint violation). BaseDao raises it with the resource, operation and
    underlying error type in `context`; none of that reaches the client.
    """

    def __init__(
        self,
        message: str = "A database operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @property
    def public_message(self) -> str:
        return "An internal error occurred. Please try again later."
