"""Port for turning an opaque session token into a user id and role."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SessionUser:
    user_id: str
    role: str


class SessionVerifier(Protocol):
    def verify(self, token: str) -> SessionUser:
        """Verify ``token`` and return the user it was issued to.

        Raises:
            AuthenticationError: token expired, invalid, or missing user claims.
        """
        ...
