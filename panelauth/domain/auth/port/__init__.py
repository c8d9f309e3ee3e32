"""Auth domain ports."""

from .account_repository import AccountRepository
from .session_verifier import SessionUser, SessionVerifier

__all__ = ["AccountRepository", "SessionUser", "SessionVerifier"]
