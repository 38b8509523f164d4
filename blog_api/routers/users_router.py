from fastapi import APIRouter, Depends

from ..application.ports.identity_provider import Identity
from ..application.services.user_service import UserService
from ..dependencies import get_current_identity, get_user_service
from ..schemas.users.user import CurrentUserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get("/get-user", response_model=CurrentUserResponse)
def get_user(
    identity: Identity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
):
    user = users.get_profile(identity.id)
    return CurrentUserResponse(
        id=identity.id,
        email=identity.email,
        username=user.username,
        name=user.name,
        role=user.role,
        profilePic=user.profile_pic,
        bio=user.bio,
    )
