"""
Opaque session tokens for local logins.
"""
import secrets
from datetime import datetime, timedelta
from typing import Optional

from app.core import config
from app.core.store.service import Clock, utcnow


class TokenRegistry:
    """
    Maps opaque tokens to user ids until they expire.

    Tokens are random (``secrets.token_urlsafe``) and carry no data. Each one
    lives ``ttl`` seconds from issue; expired entries are dropped on lookup
    and swept whenever a new token is issued.
    """

    def __init__(self, ttl: Optional[int] = None, clock: Clock = utcnow) -> None:
        self.ttl = timedelta(seconds=ttl if ttl is not None else config.TOKEN_TTL_SECONDS)
        self.now = clock
        self._tokens: dict[str, tuple[str, datetime]] = {}

    def _prune(self, now: datetime) -> None:
        expired = [token for token, (_, expires_at) in self._tokens.items() if expires_at <= now]
        for token in expired:
            del self._tokens[token]

    def issue(self, user_id: str) -> str:
        now = self.now()
        self._prune(now)
        token = secrets.token_urlsafe(32)
        self._tokens[token] = (user_id, now + self.ttl)
        return token

    def resolve(self, token: str) -> Optional[str]:
        entry = self._tokens.get(token)
        if entry is None:
            return None
        user_id, expires_at = entry
        if expires_at <= self.now():
            del self._tokens[token]
            return None
        return user_id

    def revoke(self, token: str) -> bool:
        return self._tokens.pop(token, None) is not None

    def __len__(self) -> int:
        return len(self._tokens)
