"""Composable policy types for handler-level authorization gates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from panelauth.domain.shared.authorization.access import (
    can_access_feature,
    can_access_restricted_sections,
    can_access_role,
)

if TYPE_CHECKING:
    from panelauth.domain.auth.model.feature import Feature
    from panelauth.domain.auth.model.principal import Principal
    from panelauth.domain.auth.model.role import Role


class Policy(ABC):
    """Base class for composable authorization policies.

    Policies are evaluated at the handler level against the session
    principal only; no resource is loaded yet.
    """

    @abstractmethod
    def evaluate(self, principal: "Principal") -> bool:
        """Return True if principal satisfies this policy."""
        ...

    def describe(self) -> str:
        """Short reason used in access-denied messages."""
        return type(self).__name__

    def __and__(self, other: Policy) -> AllOf:
        return AllOf(policies=(self, other))

    def __or__(self, other: Policy) -> AnyOf:
        return AnyOf(policies=(self, other))

    def __invert__(self) -> Not:
        return Not(policy=self)


@dataclass(frozen=True)
class Authenticated(Policy):
    """Any principal with a verified session."""

    def evaluate(self, principal: "Principal") -> bool:
        return True

    def describe(self) -> str:
        return "authenticated session"


@dataclass(frozen=True)
class RequiresFeature(Policy):
    """Principal's role may use the given feature."""

    feature: "Feature | str"

    def evaluate(self, principal: "Principal") -> bool:
        return can_access_feature(principal.role, self.feature)

    def describe(self) -> str:
        return f"feature '{self.feature}'"


@dataclass(frozen=True)
class CanManageRole(Policy):
    """Principal's role outranks the given role.

    With ``allow_same_role`` a principal holding exactly ``role`` also passes.
    """

    role: "Role | str"
    allow_same_role: bool = False

    def evaluate(self, principal: "Principal") -> bool:
        if can_access_role(principal.role, self.role):
            return True
        return self.allow_same_role and principal.role == self.role

    def describe(self) -> str:
        return f"role '{self.role}'"


@dataclass(frozen=True)
class RestrictedSections(Policy):
    """Principal may open commissions, old data and login reports."""

    def evaluate(self, principal: "Principal") -> bool:
        return can_access_restricted_sections(principal.role)

    def describe(self) -> str:
        return "restricted sections"


@dataclass(frozen=True)
class AllOf(Policy):
    """Policy that requires ALL sub-policies to pass."""

    policies: tuple[Policy, ...]

    def evaluate(self, principal: "Principal") -> bool:
        return all(p.evaluate(principal) for p in self.policies)

    def describe(self) -> str:
        return " and ".join(p.describe() for p in self.policies)


@dataclass(frozen=True)
class AnyOf(Policy):
    """Policy that requires at least ONE sub-policy to pass."""

    policies: tuple[Policy, ...]

    def evaluate(self, principal: "Principal") -> bool:
        return any(p.evaluate(principal) for p in self.policies)

    def describe(self) -> str:
        return " or ".join(p.describe() for p in self.policies)


@dataclass(frozen=True)
class Not(Policy):
    """Policy that inverts another policy."""

    policy: Policy

    def evaluate(self, principal: "Principal") -> bool:
        return not self.policy.evaluate(principal)

    def describe(self) -> str:
        return f"not {self.policy.describe()}"


_AUTHENTICATED = Authenticated()


def authenticated() -> Authenticated:
    """Policy: any verified session."""
    return _AUTHENTICATED


def requires_feature(feature: "Feature | str") -> RequiresFeature:
    """Factory: policy requiring access to the given feature."""
    return RequiresFeature(feature=feature)


def can_manage(role: "Role | str", *, allow_same_role: bool = False) -> CanManageRole:
    """Factory: policy requiring authority over the given role."""
    return CanManageRole(role=role, allow_same_role=allow_same_role)


def restricted_sections() -> RestrictedSections:
    return RestrictedSections()
