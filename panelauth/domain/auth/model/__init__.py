"""Auth domain models."""

from .account import AccountRef
from .decision import AccessDecision
from .feature import FEATURE_MIN_ROLE, Feature
from .identity import Anonymous, Identity
from .principal import Principal
from .role import Role

__all__ = [
    "FEATURE_MIN_ROLE",
    "AccessDecision",
    "AccountRef",
    "Anonymous",
    "Feature",
    "Identity",
    "Principal",
    "Role",
]
