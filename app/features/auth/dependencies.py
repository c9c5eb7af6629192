"""
FastAPI dependencies for authentication.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core import config
from app.core.errors import AuthenticationError
from app.core.store.base import EntityStore
from app.core.store.dependencies import get_store
from app.features.auth.external_api import ExternalAuthClient
from app.features.auth.service import Authenticator, DelegatedAuthenticator, LocalAuthenticator
from app.features.auth.tokens import TokenRegistry


security = HTTPBearer(auto_error=False)

_token_registry = TokenRegistry()


def get_token_registry() -> TokenRegistry:
    return _token_registry


def get_external_client() -> ExternalAuthClient:
    return ExternalAuthClient()


def get_authenticator(
    store: EntityStore = Depends(get_store),
    tokens: TokenRegistry = Depends(get_token_registry),
    client: ExternalAuthClient = Depends(get_external_client),
) -> Authenticator:
    """Pick the login strategy configured by AUTH_MODE."""
    if config.AUTH_MODE == "delegated":
        return DelegatedAuthenticator(client)
    return LocalAuthenticator(store, tokens)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Extract the bearer token, failing with 401 when absent."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")
    return credentials.credentials
