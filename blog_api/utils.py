import jwt
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from .config import settings


# =========================
# JWT Token Handling
# =========================
def decode_jwt_token(token: str, secret: Optional[str] = None, audience: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Decode and verify an access token issued by the identity provider"""
    secret = secret or settings.SECRET_KEY
    audience = settings.JWT_AUDIENCE if audience is None else audience
    # Refuse to verify against the placeholder secret
    if not secret or secret == "change-me-in-prod":
        return None
    try:
        if audience:
            return jwt.decode(token, secret, algorithms=[settings.ALGORITHM], audience=audience)
        return jwt.decode(token, secret, algorithms=[settings.ALGORITHM], options={"verify_aud": False})
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)
