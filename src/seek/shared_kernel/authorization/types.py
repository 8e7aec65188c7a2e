"""Authorization type definitions for research assets.

Defines the permissions an asset can be checked against. These enums keep
permission names out of hardcoded strings across the codebase.
"""

from enum import StrEnum
from typing import Any


class Permission(StrEnum):
    """Asset permissions understood by the policy layer.

    Each value corresponds to a `can_<permission>` check exposed by the
    domain objects of the hosting application.
    """

    VIEW = "view"
    DOWNLOAD = "download"
    EDIT = "edit"
    MANAGE = "manage"
    DELETE = "delete"


def format_resource(asset_type: str, resource_id: Any) -> str:
    """Format an asset identifier for logs and observation contexts.

    Args:
        asset_type: The type of asset (e.g. "Study")
        resource_id: The identifier of the asset

    Returns:
        Formatted resource string (e.g., "Study:42")

    Example:
        >>> format_resource("Study", 42)
        "Study:42"
    """
    return f"{asset_type}:{resource_id}"
