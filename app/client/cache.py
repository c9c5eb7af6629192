"""
Client permission cache.

Holds the logged-in user, token and permission tree, mirrors them into
durable storage under a fixed key and notifies listeners on every change.

    cache = PermissionCache(AuthApi("http://localhost:8000"), FileStorage("~/.access-admin"))
    cache.restore()
    if not cache.is_authenticated:
        await cache.login("admin", "admin123")
"""
import json
from dataclasses import dataclass
from typing import Any, Callable, Optional

from app.client.api import AuthApi
from app.client.storage import Storage
from app.utils import get_logger


log = get_logger(__name__)

AUTH_STORAGE_KEY = "auth"


@dataclass(frozen=True)
class AuthState:
    """Immutable snapshot of the session handed to listeners."""
    user: Optional[dict[str, Any]] = None
    permisos: Optional[list[dict[str, Any]]] = None
    token: Optional[str] = None
    is_loading: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


Listener = Callable[[AuthState], None]


def _parse_stored(raw: str) -> AuthState:
    """Decode a stored entry; raises ValueError when it is not a valid session."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("stored session is not an object")
    user = data.get("user")
    permisos = data.get("permisos")
    token = data.get("token")
    if not isinstance(user, dict):
        raise ValueError("stored session has no user")
    if permisos is not None and not isinstance(permisos, list):
        raise ValueError("stored permisos is not a list")
    if token is not None and not isinstance(token, str):
        raise ValueError("stored token is not a string")
    return AuthState(user=user, permisos=permisos, token=token)


class PermissionCache:
    """
    Session state for UI consumers (menu renderer, route guard).

    Consumers must treat ``permisos`` as read-only and re-read it on every
    render; login and logout are the only invalidation points.
    """

    def __init__(self, api: AuthApi, storage: Storage, storage_key: str = AUTH_STORAGE_KEY):
        self.api = api
        self.storage = storage
        self.storage_key = storage_key
        self._state = AuthState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def user(self) -> Optional[dict[str, Any]]:
        return self._state.user

    @property
    def permisos(self) -> Optional[list[dict[str, Any]]]:
        return self._state.permisos

    @property
    def token(self) -> Optional[str]:
        return self._state.token

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: AuthState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def restore(self) -> bool:
        """
        Load a previously stored session.

        Absent or corrupt entries leave the cache logged out (a corrupt entry
        is also removed); this method never raises. Returns whether a
        session was restored.
        """
        try:
            raw = self.storage.get_item(self.storage_key)
            if raw is None:
                self._set_state(AuthState())
                return False
            state = _parse_stored(raw)
        except OSError as exc:
            log.warning("Could not read stored session: %s", exc)
            self._set_state(AuthState())
            return False
        except ValueError as exc:
            # Undecodable bytes surface here too (UnicodeDecodeError)
            log.warning("Discarding corrupt stored session: %s", exc)
            try:
                self.storage.remove_item(self.storage_key)
            except OSError as remove_exc:
                log.warning("Could not remove corrupt session: %s", remove_exc)
            self._set_state(AuthState())
            return False

        self._set_state(state)
        return True

    async def login(self, username: str, password: str) -> Optional[list[dict[str, Any]]]:
        """
        Log in through the API, persist the result and return the permission tree.

        On failure the previous state is kept and the error propagates.
        """
        previous = self._state
        self._set_state(AuthState(previous.user, previous.permisos, previous.token, is_loading=True))
        try:
            log.info("Login attempt: %s", username)
            data = await self.api.login(username, password)
            state = AuthState(
                user=data.get("user"),
                permisos=data.get("permisos"),
                token=data.get("token"),
            )
            self.storage.set_item(
                self.storage_key,
                json.dumps({"user": state.user, "permisos": state.permisos, "token": state.token}),
            )
        except Exception:
            self._set_state(previous)
            raise
        self._set_state(state)
        log.info("Login successful: %s", username)
        return state.permisos

    def logout(self) -> None:
        """Forget the session, in storage and in memory."""
        try:
            self.storage.remove_item(self.storage_key)
        except OSError as exc:
            log.warning("Could not remove stored session: %s", exc)
        self._set_state(AuthState())
