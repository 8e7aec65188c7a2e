"""Static relationship table of the ISA graph.

Maps each asset type to the relations the graph follows from it. The tiers
Programme > Project > Investigation > Study > Assay > assets are disjoint:
no type lists a relation that leads back to one of its own descendants in
the same direction, which is what keeps traversal finite.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from isa.domain.value_objects import AssetType, RelationshipSpec, asset_type_of

EMPTY_RELATIONSHIP_SPEC = RelationshipSpec()

_ASSET_SPEC = RelationshipSpec(
    parents=("assays",),
    related=("publications", "events"),
    aggregated_children={"samples": "extracted_samples"},
)

RELATIONSHIP_TABLE: Mapping[AssetType, RelationshipSpec] = MappingProxyType(
    {
        AssetType.PROGRAMME: RelationshipSpec(children=("projects",)),
        AssetType.PROJECT: RelationshipSpec(
            children=("investigations",),
            parents=("programme",),
        ),
        AssetType.INVESTIGATION: RelationshipSpec(
            children=("studies",),
            parents=("projects",),
            related=("publications",),
        ),
        AssetType.STUDY: RelationshipSpec(
            children=("assays",),
            parents=("investigation",),
            related=("publications",),
        ),
        AssetType.ASSAY: RelationshipSpec(
            children=("data_files", "models", "sops", "publications", "documents"),
            parents=("study",),
            related=("publications",),
            aggregated_children={"samples": "samples"},
        ),
        AssetType.PUBLICATION: RelationshipSpec(
            parents=(
                "assays",
                "studies",
                "investigations",
                "data_files",
                "models",
                "presentations",
            ),
            related=("events",),
        ),
        AssetType.DATA_FILE: _ASSET_SPEC,
        AssetType.DOCUMENT: _ASSET_SPEC,
        AssetType.MODEL: _ASSET_SPEC,
        AssetType.SOP: _ASSET_SPEC,
        AssetType.SAMPLE: _ASSET_SPEC,
        AssetType.PRESENTATION: _ASSET_SPEC,
        AssetType.EVENT: RelationshipSpec(
            parents=("presentations", "publications", "data_files"),
        ),
    }
)


def lookup_asset_type(obj: Any) -> AssetType | None:
    """Return the AssetType of an object, or None if it is not part of the table."""
    try:
        return AssetType(asset_type_of(obj))
    except ValueError:
        return None


def relationship_spec_for(asset_type: AssetType | None) -> RelationshipSpec:
    """Return the relationship spec of a type; unknown types get the empty spec."""
    if asset_type is None:
        return EMPTY_RELATIONSHIP_SPEC
    return RELATIONSHIP_TABLE.get(asset_type, EMPTY_RELATIONSHIP_SPEC)
