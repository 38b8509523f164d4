# blog_api/schemas/users/user.py
from pydantic import BaseModel
from typing import Optional

class CurrentUserResponse(BaseModel):
    id: str
    email: Optional[str] = None
    username: str
    name: Optional[str] = None
    role: str
    profilePic: Optional[str] = None
    bio: Optional[str] = None
