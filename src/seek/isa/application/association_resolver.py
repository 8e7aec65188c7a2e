"""Association resolver for the ISA graph.

Resolves the relations of a domain object through the static relationship
table and follows them by name on the object itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from isa.application.observability import DefaultIsaGraphProbe, IsaGraphProbe
from isa.domain.relationships import lookup_asset_type, relationship_spec_for
from isa.domain.value_objects import RelationshipSpec, asset_type_of, identity_of

_MISSING = object()


def _unique(objects: Iterable[Any]) -> list[Any]:
    seen: set[Any] = set()
    result = []
    for obj in objects:
        key = identity_of(obj)
        if key not in seen:
            seen.add(key)
            result.append(obj)
    return result


class AssociationResolver:
    """Looks up and follows the configured relations of domain objects.

    The resolver is stateless apart from its probe and can be shared
    between requests.
    """

    def __init__(self, probe: IsaGraphProbe | None = None):
        self._probe = probe or DefaultIsaGraphProbe()

    def resolve(self, obj: Any) -> RelationshipSpec:
        """Return the relationship spec for the object's asset type.

        Objects of a type missing from the table get the empty spec and are
        treated as leaves.
        """
        asset_type = lookup_asset_type(obj)
        if asset_type is None:
            self._probe.unknown_asset_type(asset_type_of(obj))
        return relationship_spec_for(asset_type)

    def children_of(
        self, obj: Any, spec: RelationshipSpec | None = None
    ) -> list[Any]:
        """Direct children followed by related objects, without duplicates.

        A spec already resolved for obj can be passed to skip the lookup.
        """
        if spec is None:
            spec = self.resolve(obj)
        return _unique(
            child
            for relation in (*spec.children, *spec.related)
            for child in self.follow_relation(obj, relation)
        )

    def parents_of(self, obj: Any, spec: RelationshipSpec | None = None) -> list[Any]:
        """Direct parents, without duplicates."""
        if spec is None:
            spec = self.resolve(obj)
        return _unique(
            parent
            for relation in spec.parents
            for parent in self.follow_relation(obj, relation)
        )

    def aggregated_children_of(
        self, obj: Any, spec: RelationshipSpec | None = None
    ) -> dict[str, list[Any]]:
        """Aggregated relations of an object keyed by label, in table order."""
        if spec is None:
            spec = self.resolve(obj)
        return {
            label: self.follow_relation(obj, relation)
            for label, relation in spec.aggregated_children.items()
        }

    def follow_relation(self, obj: Any, relation: str) -> list[Any]:
        """Follow a named relation on an object.

        Args:
            obj: The domain object
            relation: Attribute or zero-argument method name

        Returns:
            The related objects with None entries removed. A missing
            relation yields an empty list and a single object is wrapped
            into a one-element list.
        """
        value = getattr(obj, relation, _MISSING)
        if value is _MISSING:
            return []
        if callable(value):
            value = value()
        if value is None:
            return []
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            return [value]
        return [item for item in value if item is not None]
