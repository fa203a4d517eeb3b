#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class RecordNotFoundException(ServiceException):
    """Raised when a record does not exist or belongs to another user."""
    pass


class EmailAlreadyExistsException(ServiceException):
    """Raised when registering with an email that is already taken."""

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message)


class InvalidCredentialsException(ServiceException):
    """Raised when login credentials do not match."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class ReadinessComputationException(ServiceException):
    """Raised when stored records cannot be scored."""
    pass


def _status_code_for(exc: ServiceException) -> int:
    if isinstance(exc, RecordNotFoundException):
        return 404
    if isinstance(exc, EmailAlreadyExistsException):
        return 400
    if isinstance(exc, InvalidCredentialsException):
        return 401
    if isinstance(exc, ReadinessComputationException):
        return 422
    return 500


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = _status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        },
        headers=getattr(exc, "headers", None)
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
