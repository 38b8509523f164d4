import logging
from typing import Optional

from ...application.ports.identity_provider import Identity, IdentityProvider
from ...exceptions import AuthError
from ...utils import decode_jwt_token

logger = logging.getLogger(__name__)


class JwtIdentityProvider(IdentityProvider):
    def __init__(self, secret: Optional[str] = None, audience: Optional[str] = None) -> None:
        self.secret = secret
        self.audience = audience

    def resolve(self, token: str) -> Identity:
        if not token:
            raise AuthError("Unauthorized: Token missing")
        payload = decode_jwt_token(token, secret=self.secret, audience=self.audience)
        if not payload:
            logger.warning("JWT token decode failed - invalid or expired token")
            raise AuthError("Unauthorized or token expired")
        user_id = payload.get("sub")
        if not user_id:
            logger.warning("JWT token missing user ID")
            raise AuthError("Invalid token: missing user ID")
        return Identity(id=str(user_id), email=payload.get("email"))
