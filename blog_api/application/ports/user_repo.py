from typing import Protocol, Optional

class UserDto:
    def __init__(self, id: str, username: str, name: Optional[str], role: str,
                 profile_pic: Optional[str], bio: Optional[str]):
        self.id = id
        self.username = username
        self.name = name
        self.role = role
        self.profile_pic = profile_pic
        self.bio = bio

class UserRepository(Protocol):
    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        ...
