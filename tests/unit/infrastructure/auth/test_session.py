"""Tests for JWT session verification."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from panelauth.config import SessionConfig
from panelauth.domain.auth.port.session_verifier import SessionUser
from panelauth.domain.shared.error import AuthenticationError
from panelauth.infrastructure.auth.session import JwtSessionVerifier

SECRET = "unit-test-session-secret-0123456789"


@pytest.fixture
def verifier() -> JwtSessionVerifier:
    return JwtSessionVerifier(SessionConfig(secret=SECRET))


def _token(payload: dict, secret: str = SECRET) -> str:
    return jwt.encode(payload, secret, algorithm="HS256")


class TestJwtSessionVerifier:
    def test_valid_token(self, verifier: JwtSessionVerifier) -> None:
        token = _token({"user": {"id": "ad-1", "role": "ADMIN"}})

        assert verifier.verify(token) == SessionUser(user_id="ad-1", role="ADMIN")

    def test_numeric_id_is_stringified(self, verifier: JwtSessionVerifier) -> None:
        token = _token({"user": {"id": 42, "role": "AGENT"}})

        assert verifier.verify(token).user_id == "42"

    def test_unknown_role_passes_through(self, verifier: JwtSessionVerifier) -> None:
        token = _token({"user": {"id": "x", "role": "LEGACY"}})

        assert verifier.verify(token).role == "LEGACY"

    def test_expired_token(self, verifier: JwtSessionVerifier) -> None:
        token = _token(
            {
                "user": {"id": "ad-1", "role": "ADMIN"},
                "exp": datetime.now(UTC) - timedelta(minutes=5),
            }
        )

        with pytest.raises(AuthenticationError) as exc_info:
            verifier.verify(token)

        assert exc_info.value.code == "token_expired"

    def test_wrong_secret(self, verifier: JwtSessionVerifier) -> None:
        token = _token({"user": {"id": "ad-1", "role": "ADMIN"}}, secret="another-secret-of-enough-length-xx")

        with pytest.raises(AuthenticationError) as exc_info:
            verifier.verify(token)

        assert exc_info.value.code == "invalid_token"

    def test_garbage_token(self, verifier: JwtSessionVerifier) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            verifier.verify("not-a-jwt")

        assert exc_info.value.code == "invalid_token"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"user": "ad-1"},
            {"user": {"id": "ad-1"}},
            {"user": {"role": "ADMIN"}},
            {"user": {"id": "", "role": "ADMIN"}},
        ],
    )
    def test_missing_claims(self, verifier: JwtSessionVerifier, payload: dict) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            verifier.verify(_token(payload))

        assert exc_info.value.code == "missing_claims"
