"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, Request
from slowapi.util import get_remote_address

from app.core import config
from app.core.errors import AppError, InternalError
from app.core.rate_limit import limiter
from app.core.responses import ErrorResponse, SuccessResponse
from app.features.auth.dependencies import get_authenticator, get_bearer_token
from app.features.auth.schemas import LoginData, LoginRequest
from app.features.auth.service import Authenticator
from app.features.users.schemas import UserProfile
from app.utils import get_logger


log = get_logger(__name__)
router = APIRouter(tags=["auth"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/login", responses={200: {"model": SuccessResponse[LoginData]}, **ERROR_RESPONSES})
@limiter.limit(config.LOGIN_RATE_LIMIT, key_func=get_remote_address)
async def login(
    request: Request,
    body: LoginRequest,
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Authenticate and return {token, user, permisos}."""
    identifier, password = body.credentials()
    log.info("Login attempt: %s", identifier)
    try:
        return await authenticator.login(identifier, password)
    except AppError:
        raise
    except Exception as exc:
        log.exception("Login error for %s", identifier)
        raise InternalError("Login failed") from exc


@router.get("/me", responses={200: {"model": SuccessResponse[UserProfile]}, 401: {"model": ErrorResponse}})
async def get_me(
    token: str = Depends(get_bearer_token),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Get the profile of the user owning the bearer token."""
    return await authenticator.profile(token)


@router.post("/logout", response_model=SuccessResponse[None])
async def logout(
    token: str = Depends(get_bearer_token),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Forget the bearer token."""
    await authenticator.logout(token)
    return SuccessResponse[None](message="Logged out successfully")
