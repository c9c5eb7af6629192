"""
Login strategies.

`LocalAuthenticator` checks credentials against the entity store and mints
an opaque token; `DelegatedAuthenticator` forwards them to the external
identity authority and relays its answer verbatim.

Both collapse every credential failure into a single 401 so callers can't
tell an unknown user from a wrong password.
"""
from abc import ABC, abstractmethod
from typing import Any

from starlette.responses import JSONResponse

from app.core.errors import AuthenticationError, UpstreamError
from app.core.responses import SuccessResponse
from app.core.store.base import EntityStore
from app.core.store.service import Clock, utcnow
from app.features.auth.external_api import ExternalAuthClient
from app.features.auth.schemas import LoginData
from app.features.auth.tokens import TokenRegistry
from app.features.permissions.assembler import PermissionAssembler
from app.features.users.models import User
from app.features.users.schemas import UserProfile
from app.features.users.security import verify_password
from app.features.users.service import UserService
from app.utils import get_logger


log = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class Authenticator(ABC):

    @abstractmethod
    async def login(self, identifier: str, password: str) -> Any:
        """Authenticate and return the response body for the client."""

    @abstractmethod
    async def profile(self, token: str) -> Any:
        """Return the profile of the user owning ``token``."""

    @abstractmethod
    async def logout(self, token: str) -> None:
        ...


class LocalAuthenticator(Authenticator):
    """Validates credentials against users kept in the entity store."""

    def __init__(self, store: EntityStore, tokens: TokenRegistry, clock: Clock = utcnow):
        self.store = store
        self.tokens = tokens
        self.now = clock
        self.users = UserService(store, clock)

    async def login(self, identifier: str, password: str) -> SuccessResponse[LoginData]:
        user = await self.store.find_user_by_login(identifier)
        if user is None or not user.is_active:
            log.info("Login rejected for %s: unknown or inactive user", identifier)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(password, user.password_hash):
            user.failed_login_attempts += 1
            user.updated_at = self.now()
            await self.store.save(user)
            log.info("Login rejected for %s: wrong password (attempt %s)", identifier, user.failed_login_attempts)
            raise AuthenticationError(INVALID_CREDENTIALS)

        user.failed_login_attempts = 0
        user.last_access_at = user.updated_at = self.now()
        await self.store.save(user)

        permisos = await PermissionAssembler(self.store).for_roles(user.role_ids)
        token = self.tokens.issue(user.id)
        log.info("Login successful for %s (id=%s, roles=%s)", identifier, user.id, len(permisos))
        return SuccessResponse[LoginData](
            data=LoginData(token=token, user=await self.users.profile(user), permisos=permisos)
        )

    async def profile(self, token: str) -> SuccessResponse[UserProfile]:
        user_id = self.tokens.resolve(token)
        user = await self.store.get(User, user_id) if user_id else None
        if user is None or not user.is_active:
            raise AuthenticationError("Invalid or expired token")
        return SuccessResponse[UserProfile](data=await self.users.profile(user))

    async def logout(self, token: str) -> None:
        self.tokens.revoke(token)


class DelegatedAuthenticator(Authenticator):
    """Forwards credentials to the external identity authority."""

    def __init__(self, client: ExternalAuthClient):
        self.client = client

    async def login(self, identifier: str, password: str) -> JSONResponse:
        try:
            payload = await self.client.login(identifier, password)
        except UpstreamError as exc:
            log.info("Delegated login rejected for %s: %s", identifier, exc.message)
            raise AuthenticationError(exc.message) from exc
        log.info("Delegated login successful for %s", identifier)
        return JSONResponse(content=payload)

    async def profile(self, token: str) -> JSONResponse:
        try:
            payload = await self.client.get_profile(token)
        except UpstreamError as exc:
            raise AuthenticationError(exc.message) from exc
        return JSONResponse(content=payload)

    async def logout(self, token: str) -> None:
        # Tokens belong to the authority; nothing is held locally.
        return None
