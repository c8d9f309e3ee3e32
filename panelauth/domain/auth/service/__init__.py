"""Auth domain services."""

from .access import AccessService, RoleAccess
from .hierarchy import CreationPlan, HierarchyService

__all__ = ["AccessService", "CreationPlan", "HierarchyService", "RoleAccess"]
