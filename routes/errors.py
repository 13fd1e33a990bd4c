"""
Shared error-to-response conversion for route handlers.
"""

from fastapi.responses import JSONResponse
import pydantic
import structlog

from exceptions import AppError, ValidationError

logger = structlog.get_logger(__name__)


def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    # Models built inside a handler (e.g. credentials) fail as 422, not 500
    if isinstance(e, pydantic.ValidationError):
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", "")
            }
            for err in e.errors()
        ]
        e = ValidationError(
            message=errors[0]["message"] if errors else "Invalid request",
            details={"errors": errors}
        )

    if isinstance(e, AppError):
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )
    # Unexpected error
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred"
            }
        }
    )
