#!/usr/bin/env python3
"""
Auth endpoints - register, login, logout and the current session.
"""

import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from database.uow import UnitOfWork
from ..config import AppConfig, get_config
from ..dependencies import get_current_user, get_uow
from ..models.requests import LoginRequest, RegisterRequest
from ..models.responses import MessageResponse, UserResponse
from ..security import CurrentUser
from ..services.auth_service import AuthService

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": f"Rate limit exceeded: {exc.detail}",
            "type": "RateLimitExceeded"
        }
    )


def _login_rate_limit() -> str:
    return get_config().auth.login_rate_limit


def _set_session_cookie(response: Response, token: str, config: AppConfig) -> None:
    response.set_cookie(
        key=config.auth.cookie_name,
        value=token,
        max_age=config.auth.token_ttl_hours * 3600,
        httponly=True,
        secure=config.auth.cookie_secure,
        samesite=config.auth.cookie_samesite,
    )


@router.post("/register", response_model=UserResponse)
@limiter.limit(_login_rate_limit)
def register(
    request: Request,
    response: Response,
    body: RegisterRequest,
    uow: UnitOfWork = Depends(get_uow),
    config: AppConfig = Depends(get_config)
):
    """
    Create an account and start a session.

    Returns 400 if the email is already registered.
    """
    service = AuthService(uow, config.auth)
    user = service.register(name=body.name, email=body.email, password=body.password)
    _set_session_cookie(response, service.issue_token(user), config)
    return UserResponse(id=user.id, name=user.name, email=user.email)


@router.post("/login", response_model=UserResponse)
@limiter.limit(_login_rate_limit)
def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    uow: UnitOfWork = Depends(get_uow),
    config: AppConfig = Depends(get_config)
):
    """
    Start a session for an existing account.

    Returns 401 on an unknown email or wrong password.
    """
    service = AuthService(uow, config.auth)
    user = service.login(email=body.email, password=body.password)
    _set_session_cookie(response, service.issue_token(user), config)
    return UserResponse(id=user.id, name=user.name, email=user.email)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response, config: AppConfig = Depends(get_config)):
    """Clear the session cookie."""
    response.delete_cookie(
        key=config.auth.cookie_name,
        httponly=True,
        secure=config.auth.cookie_secure,
        samesite=config.auth.cookie_samesite,
    )
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserResponse)
def me(user: CurrentUser = Depends(get_current_user)):
    """Return the identity carried by the session cookie."""
    return UserResponse(id=user.id, name=user.name, email=user.email)
