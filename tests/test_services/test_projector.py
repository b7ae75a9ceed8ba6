"""Unit tests for field directives and projection."""

import pytest

from app.models.enums import FieldMode
from app.models.outcomes import (
    LibraryFound,
    TutorialFound,
    TutorialListFound,
    VersionFound,
)
from app.services.projector import FieldDirective, FieldProjector


class TestFieldDirective:
    @pytest.mark.parametrize("raw", [None, "", ",", " , "])
    def test_empty_values_mean_default(self, raw):
        assert FieldDirective.parse(raw) == FieldDirective()
        assert FieldDirective.parse(raw).mode is FieldMode.DEFAULT

    def test_wildcard(self):
        assert FieldDirective.parse("*").mode is FieldMode.WILDCARD
        assert FieldDirective.parse("name,*").mode is FieldMode.WILDCARD

    def test_explicit_names_collapse_duplicates(self):
        directive = FieldDirective.parse("files, sri,files,,")

        assert directive.mode is FieldMode.EXPLICIT
        assert directive.names == frozenset({"files", "sri"})

    def test_names_are_case_sensitive(self):
        assert FieldDirective.parse("Name").names == frozenset({"Name"})


class TestFieldProjector:
    @pytest.fixture()
    def projector(self):
        return FieldProjector()

    def test_default_and_wildcard_are_equivalent(self, projector, backbone):
        outcomes = [
            LibraryFound(backbone),
            VersionFound(backbone, backbone.get_version("1.1.0")),
            TutorialFound(backbone, backbone.get_tutorial("what-is-a-view")),
        ]
        for outcome in outcomes:
            assert projector.project(outcome, FieldDirective()) == projector.project(
                outcome, FieldDirective.parse("*")
            )

    def test_version_representation(self, projector, backbone):
        version = backbone.get_version("1.1.0")
        payload = projector.project(VersionFound(backbone, version), FieldDirective())

        assert set(payload) == {"name", "version", "files", "rawFiles", "sri"}
        assert payload["name"] == "backbone.js"
        assert payload["rawFiles"] == list(version.raw_files)

    @pytest.mark.parametrize(
        "requested",
        [
            {"name"},
            {"assets", "tutorials"},
            {"license", "unknown"},
            {"description", "homepage", "keywords", "repository"},
        ],
    )
    def test_explicit_subset_of_library(self, projector, backbone, requested):
        full = projector.project(LibraryFound(backbone), FieldDirective())
        directive = FieldDirective(FieldMode.EXPLICIT, frozenset(requested))

        payload = projector.project(LibraryFound(backbone), directive)

        assert set(payload) == requested & set(full)
        for key, value in payload.items():
            assert value == full[key]

    def test_library_projection_does_not_force_identifier(self, projector, backbone):
        payload = projector.project(
            LibraryFound(backbone), FieldDirective.parse("version")
        )

        assert payload == {"version": "1.1.2"}

    def test_tutorial_detail_projection(self, projector, backbone):
        tutorial = backbone.get_tutorial("what-is-a-view")
        payload = projector.project(
            TutorialFound(backbone, tutorial), FieldDirective.parse("content,author")
        )

        assert payload == {"content": tutorial.content, "author": {"name": "Thomas Davis"}}

    def test_tutorial_list_projection_keeps_id(self, projector, backbone):
        outcome = TutorialListFound(backbone, tuple(backbone.tutorials))

        payload = projector.project(outcome, FieldDirective.parse("name"))

        assert payload == [
            {"id": "what-is-a-view", "name": "What is a view?"},
            {"id": "what-is-a-model", "name": "What is a model?"},
        ]

    def test_tutorial_list_default_is_full(self, projector, backbone):
        outcome = TutorialListFound(backbone, tuple(backbone.tutorials))

        payload = projector.project(outcome, FieldDirective())

        assert payload == [t.to_payload() for t in backbone.tutorials]

    def test_tutorial_list_has_no_single_representation(self, backbone):
        with pytest.raises(TypeError):
            FieldProjector.full_representation(TutorialListFound(backbone, ()))
