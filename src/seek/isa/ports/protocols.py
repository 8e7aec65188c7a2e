"""Collaborator protocols for the ISA graph bounded context.

The graph engine reads domain objects owned by the hosting application.
These protocols describe the little it relies on, allowing plain model
instances, ORM rows or test doubles to be passed in unchanged.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DomainObject(Protocol):
    """An entity participating in the ISA graph.

    Identity is the pair (asset type, id). The asset type is read from an
    optional `asset_type` attribute and falls back to the class name.

    Relations are exposed as attributes or zero-argument methods named after
    the relation (e.g. `study.assays`, `assay.study`). A missing relation is
    treated as empty; a relation may return a single object, None, or any
    iterable of objects.
    """

    @property
    def id(self) -> Any:
        """Stable identifier, unique within the asset type."""
        ...
