from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class Identity:
    id: str
    email: Optional[str]


class IdentityProvider(Protocol):
    def resolve(self, token: str) -> Identity:
        """Return the token's identity or raise AuthError."""
        ...
