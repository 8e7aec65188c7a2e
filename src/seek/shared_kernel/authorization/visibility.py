"""Default visibility predicate backed by the domain objects themselves."""

from __future__ import annotations

from typing import Any

from shared_kernel.authorization.types import Permission


class ObjectPermissionPredicate:
    """Visibility predicate that delegates to `can_<permission>` on the object.

    Domain objects of the hosting application carry their own policy checks
    (e.g. `study.can_view()`), already bound to the current user. A missing
    check method raises AttributeError.
    """

    def __init__(self, permission: Permission = Permission.VIEW):
        self._permission = permission

    @property
    def permission(self) -> Permission:
        return self._permission

    def __call__(self, obj: Any) -> bool:
        check = getattr(obj, f"can_{self._permission}")
        result = check() if callable(check) else check
        return bool(result)
