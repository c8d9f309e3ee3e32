"""Identity hierarchy — base types for all request identities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Base for all request identities."""


@dataclass(frozen=True)
class Anonymous(Identity):
    """Request without a valid session."""
