from dataclasses import dataclass

from ..ports.user_repo import UserRepository, UserDto
from ...exceptions import NotFoundError, PermissionDeniedError, store_boundary


@dataclass
class UserService:
    user_repo: UserRepository
    admin_role: str = "admin"

    def get_profile(self, user_id: str) -> UserDto:
        with store_boundary("Internal server error"):
            user = self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def require_admin(self, user_id: str) -> UserDto:
        with store_boundary("Internal server error"):
            user = self.user_repo.get_by_id(user_id)
        if not user or user.role != self.admin_role:
            raise PermissionDeniedError()
        return user
