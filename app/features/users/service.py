"""
Local user management used by seeding and the local login strategy.
"""
from app.core.errors import NotFoundError, ValidationError
from app.core.store.service import EntityService, require_text
from app.core.database.base import generate_ulid
from app.features.roles.models import Role
from app.features.roles.schemas import RoleResponse
from app.features.users.models import User
from app.features.users.schemas import UserCreate, UserProfile
from app.features.users.security import hash_password
from app.utils import get_logger


log = get_logger(__name__)


class UserService(EntityService[User]):
    model = User
    label = "User"

    async def create(self, data: UserCreate) -> User:
        username = require_text(data.username, "Username is required")
        email = require_text(data.email, "Email is required")
        if await self.store.find_user_by_login(username) or await self.store.find_user_by_login(email):
            raise ValidationError("A user with this username or email already exists")
        for role_id in data.role_ids:
            if await self.store.get(Role, role_id) is None:
                raise NotFoundError(f"Role {role_id} not found")

        now = self.now()
        user = User(
            id=generate_ulid(),
            username=username,
            email=email,
            password_hash=hash_password(data.password),
            person=data.person,
            role_ids=list(dict.fromkeys(data.role_ids)),
            failed_login_attempts=0,
            is_active=data.is_active,
            last_access_at=None,
            created_at=now,
            updated_at=now,
        )
        await self.store.add(user)
        log.info("Created user %s (%s)", user.id, user.username)
        return user

    async def profile(self, user: User) -> UserProfile:
        roles = await self.store.get_many(Role, user.role_ids)
        return UserProfile(
            id=user.id,
            username=user.username,
            email=user.email,
            person=user.person,
            roles=[RoleResponse.model_validate(roles[r]) for r in user.role_ids if r in roles],
            failed_login_attempts=user.failed_login_attempts,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_access_at=user.last_access_at,
        )
