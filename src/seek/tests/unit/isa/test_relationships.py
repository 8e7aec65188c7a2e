"""Unit tests for the ISA relationship table."""

from types import SimpleNamespace

import pytest

from isa.domain.relationships import (
    EMPTY_RELATIONSHIP_SPEC,
    RELATIONSHIP_TABLE,
    lookup_asset_type,
    relationship_spec_for,
)
from isa.domain.value_objects import AssetType, RelationshipSpec
from tests.unit.isa.conftest import Sample, Study, Widget

# Asset type reached through each relation name of the table.
RELATION_TARGETS = {
    "programme": AssetType.PROGRAMME,
    "projects": AssetType.PROJECT,
    "investigations": AssetType.INVESTIGATION,
    "investigation": AssetType.INVESTIGATION,
    "studies": AssetType.STUDY,
    "study": AssetType.STUDY,
    "assays": AssetType.ASSAY,
    "publications": AssetType.PUBLICATION,
    "events": AssetType.EVENT,
    "data_files": AssetType.DATA_FILE,
    "documents": AssetType.DOCUMENT,
    "models": AssetType.MODEL,
    "sops": AssetType.SOP,
    "presentations": AssetType.PRESENTATION,
}


def _has_cycle(edges):
    visiting, done = set(), set()

    def visit(node):
        if node in done:
            return False
        if node in visiting:
            return True
        visiting.add(node)
        found = any(visit(target) for target in edges.get(node, ()))
        visiting.discard(node)
        done.add(node)
        return found

    return any(visit(node) for node in edges)


class TestRelationshipTable:
    """Tests for the static table."""

    def test_every_asset_type_is_configured(self):
        """All asset types should have an entry."""
        assert set(RELATIONSHIP_TABLE) == set(AssetType)

    def test_table_is_read_only(self):
        """The table should not be modifiable at runtime."""
        with pytest.raises(TypeError):
            RELATIONSHIP_TABLE[AssetType.STUDY] = RelationshipSpec()

    def test_assets_share_one_spec(self):
        """Data files, documents, models, SOPs, samples and presentations behave alike."""
        specs = {
            id(RELATIONSHIP_TABLE[t])
            for t in (
                AssetType.DATA_FILE,
                AssetType.DOCUMENT,
                AssetType.MODEL,
                AssetType.SOP,
                AssetType.SAMPLE,
                AssetType.PRESENTATION,
            )
        }
        assert len(specs) == 1

    def test_assay_aggregates_samples(self):
        """Assays should collapse their samples."""
        spec = RELATIONSHIP_TABLE[AssetType.ASSAY]

        assert spec.aggregated_children == {"samples": "samples"}

    def test_every_relation_name_is_known(self):
        """Every relation should lead to a configured asset type."""
        for spec in RELATIONSHIP_TABLE.values():
            for relation in (*spec.children, *spec.parents, *spec.related):
                assert relation in RELATION_TARGETS

    @pytest.mark.parametrize("direction", ["descent", "ascent"])
    def test_relations_are_acyclic(self, direction):
        """Following one direction should never lead back to a type."""
        edges = {}
        for asset_type, spec in RELATIONSHIP_TABLE.items():
            relations = (
                (*spec.children, *spec.related) if direction == "descent" else spec.parents
            )
            edges[asset_type] = {RELATION_TARGETS[r] for r in relations}

        assert not _has_cycle(edges)


class TestLookup:
    """Tests for lookup_asset_type and relationship_spec_for."""

    def test_known_class_name(self):
        assert lookup_asset_type(Study(1)) is AssetType.STUDY

    def test_unknown_class_name(self):
        assert lookup_asset_type(Widget(1)) is None

    def test_explicit_attribute(self):
        obj = SimpleNamespace(id=1, asset_type="Sample")

        assert lookup_asset_type(obj) is AssetType.SAMPLE

    def test_sample_is_an_asset(self):
        spec = relationship_spec_for(lookup_asset_type(Sample(1)))

        assert spec.parents == ("assays",)

    def test_unknown_gets_empty_spec(self):
        assert relationship_spec_for(None) is EMPTY_RELATIONSHIP_SPEC
