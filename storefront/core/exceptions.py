"""
Application Exception Handling

AppException hierarchy for catalog errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


# Module logger
logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides a consistent error response format across the API:

        {"error": "Product not found", "code": "PRODUCT_NOT_FOUND"}

    Error Codes:
        Validation:
            - VALIDATION_ERROR (400)
            - INVALID_PRODUCT_ID (400)

        Lookup:
            - PRODUCT_NOT_FOUND (404)

        Constraint:
            - USERNAME_EXISTS (409)

        General:
            - INTERNAL_ERROR (500)
    """

    status_code = 400
    code = "BAD_REQUEST"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (defaults to the class code)
            status_code: HTTP status code (defaults to the class status)
            details: Additional error context (optional)
        """
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "error": self.message,
            "code": self.code,
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict


class ValidationError(AppException):
    """Caller-supplied data failed a documented constraint."""

    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(AppException):
    """Lookup by identifier found no matching record."""

    status_code = 404
    code = "NOT_FOUND"


class ConflictError(AppException):
    """A uniqueness constraint would be violated."""

    status_code = 409
    code = "CONFLICT"


class UnexpectedError(AppException):
    """Failure not anticipated by the contract, e.g. storage unavailable."""

    status_code = 500
    code = "INTERNAL_ERROR"


# ============================================
# EXCEPTION HANDLERS
# ============================================

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to a JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as validation failures."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())[1:]) or "body",
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=validation_failed(details).to_dict()
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=internal_error().to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def validation_failed(details: List[dict]) -> ValidationError:
    """Create validation failure exception with per-field details."""
    return ValidationError("Validation failed", details=details)


def invalid_product_id(raw_id: str) -> ValidationError:
    """Create invalid product id exception."""
    return ValidationError(
        "Invalid product ID",
        "INVALID_PRODUCT_ID",
        details={"product_id": raw_id}
    )


def product_not_found(product_id: int) -> NotFoundError:
    """Create product not found exception."""
    return NotFoundError(
        "Product not found",
        "PRODUCT_NOT_FOUND",
        details={"product_id": product_id}
    )


def username_exists(username: str) -> ConflictError:
    """Create username already exists exception."""
    return ConflictError(
        f"Username '{username}' already exists",
        "USERNAME_EXISTS",
        details={"username": username}
    )


def internal_error(message: str = "Internal server error") -> UnexpectedError:
    """Create internal server error exception."""
    return UnexpectedError(message)
