"""
Shared slowapi limiter.

Login is anonymous, so limits are keyed on the client address; any header
the caller sends could be rotated to dodge the limit.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core import config


limiter = Limiter(key_func=get_remote_address, enabled=config.RATE_LIMIT_ENABLED)
