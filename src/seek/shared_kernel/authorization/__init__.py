"""Authorization primitives for asset visibility.

This module provides shared authorization types and the predicate
abstraction used by bounded contexts that render permission-aware views.
"""

from shared_kernel.authorization.protocols import VisibilityPredicate
from shared_kernel.authorization.types import Permission, format_resource
from shared_kernel.authorization.visibility import ObjectPermissionPredicate

__all__ = [
    "ObjectPermissionPredicate",
    "Permission",
    "VisibilityPredicate",
    "format_resource",
]
