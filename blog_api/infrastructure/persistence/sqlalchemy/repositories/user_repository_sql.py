from typing import Optional
from sqlmodel import Session

from .....db.models import User
from .....application.ports.user_repo import UserRepository, UserDto

class SqlUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        user = self.session.get(User, user_id)
        if not user:
            return None
        return UserDto(
            id=user.id,
            username=user.username,
            name=user.name,
            role=user.role,
            profile_pic=user.profile_pic,
            bio=user.bio,
        )
