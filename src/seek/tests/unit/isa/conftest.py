"""Fake research assets for ISA graph tests.

The fakes mimic the models of the hosting application: relations are plain
attributes named after the relation, visibility is answered by `can_view`.
Relations that are not set are simply absent from the object.
"""

from unittest.mock import create_autospec

import pytest


class FakeAsset:
    """Stand-in for a persisted research asset."""

    def __init__(self, id, viewable=True, **relations):
        self.id = id
        self.title = f"{type(self).__name__} {id}"
        self.viewable = viewable
        for name, value in relations.items():
            setattr(self, name, value)

    def can_view(self):
        return self.viewable

    def __repr__(self):
        return f"<{type(self).__name__} {self.id}>"


class Programme(FakeAsset):
    pass


class Project(FakeAsset):
    pass


class Investigation(FakeAsset):
    pass


class Study(FakeAsset):
    pass


class Assay(FakeAsset):
    pass


class DataFile(FakeAsset):
    pass


class Model(FakeAsset):
    pass


class Sop(FakeAsset):
    pass


class Sample(FakeAsset):
    pass


class Publication(FakeAsset):
    pass


class Event(FakeAsset):
    pass


class Widget(FakeAsset):
    """An asset type unknown to the relationship table."""


def key(obj):
    """Identity key of a fake asset."""
    return (type(obj).__name__, obj.id)


def node_keys(graph):
    return {node.key for node in graph.nodes}


def edge_keys(graph):
    return {edge.key for edge in graph.edges}


def linear_chain():
    """Programme -> Project -> Investigation -> Study, one child per tier."""
    study = Study(1, assays=[])
    investigation = Investigation(1, studies=[study])
    project = Project(1, investigations=[investigation])
    programme = Programme(1, projects=[project])
    study.investigation = investigation
    investigation.projects = [project]
    project.programme = programme
    return programme, project, investigation, study


def branching_investigation():
    """Investigation with two studies, each with two assays."""
    assays = [Assay(i) for i in range(1, 5)]
    study_1 = Study(1, assays=assays[:2])
    study_2 = Study(2, assays=assays[2:])
    investigation = Investigation(1, studies=[study_1, study_2])
    study_1.investigation = investigation
    study_2.investigation = investigation
    for assay in assays[:2]:
        assay.study = study_1
    for assay in assays[2:]:
        assay.study = study_2
    return investigation, study_1, study_2, assays


@pytest.fixture
def mock_probe():
    """Create a mock probe."""
    from isa.application.observability import IsaGraphProbe

    return create_autospec(IsaGraphProbe, instance=True)
