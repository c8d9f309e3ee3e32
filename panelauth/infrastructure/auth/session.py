"""JWT-backed session verification."""

import logging

import jwt

from panelauth.config import SessionConfig
from panelauth.domain.auth.port.session_verifier import SessionUser, SessionVerifier
from panelauth.domain.shared.error import AuthenticationError

logger = logging.getLogger(__name__)


class JwtSessionVerifier(SessionVerifier):
    """Verifies HS256 session tokens carrying a ``user`` claim.

    Expected payload: ``{"user": {"id": "...", "role": "..."}, "exp": ...}``.
    """

    def __init__(self, config: SessionConfig) -> None:
        self._config = config

    def verify(self, token: str) -> SessionUser:
        try:
            payload = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Session has expired", code="token_expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token: %s", e)
            raise AuthenticationError("Invalid session", code="invalid_token") from e

        user = payload.get("user")
        if not isinstance(user, dict) or not user.get("id") or not user.get("role"):
            raise AuthenticationError("User not found in session", code="missing_claims")

        return SessionUser(user_id=str(user["id"]), role=str(user["role"]))
