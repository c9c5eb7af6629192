"""
Pydantic schemas for login requests and responses.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from app.core.errors import ValidationError
from app.features.permissions.schemas import RoleGrant
from app.features.users.schemas import UserProfile


class LoginRequest(BaseModel):
    """Credentials: a username or an email, plus the password."""
    username: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, max_length=1024)

    def credentials(self) -> tuple[str, str]:
        """
        Return (identifier, password), failing fast on missing fields.

        Raises:
            ValidationError: identifier or password absent or blank
        """
        identifier = (self.username or self.email or "").strip()
        if not identifier:
            raise ValidationError("Username or email is required")
        if not self.password or not self.password.strip():
            raise ValidationError("Password is required")
        return identifier, self.password


class LoginData(BaseModel):
    """Login payload: opaque token, user profile and permission tree."""
    token: str
    user: UserProfile
    permisos: List[RoleGrant] = []
