"""Tests for the tailwind-merge backed conflict resolver."""

from __future__ import annotations

import pytest

from tailwind_variants import ClassMerger, merge_class_names, tv, tw
from tailwind_variants.conflicts import TailwindConflictResolver, plain_join


@pytest.fixture
def resolve_conflicts() -> TailwindConflictResolver:
    return TailwindConflictResolver()


class TestTailwindConflictResolver:
    @pytest.mark.parametrize(
        "classes,expected",
        [
            ("p-4 p-6", "p-6"),
            ("px-2 p-4", "p-4"),
            ("text-sm text-lg", "text-lg"),
            ("text-red-500 text-lg", "text-red-500 text-lg"),
            ("font-medium font-bold", "font-bold"),
            ("block hidden", "hidden"),
            ("shadow-lg shadow-2xl", "shadow-2xl"),
            ("hover:bg-red-500 bg-blue-500 hover:bg-green-500", "bg-blue-500 hover:bg-green-500"),
            ("md:p-4 p-2", "md:p-4 p-2"),
        ],
    )
    def test_later_conflicting_class_wins(
        self, resolve_conflicts: TailwindConflictResolver, classes: str, expected: str
    ) -> None:
        assert resolve_conflicts(classes.split()) == expected

    @pytest.mark.parametrize(
        "classes",
        [
            "bg-red-500 bg-opacity-50",
            "text-red-500 text-opacity-50",
            "border-red-500 border-opacity-50",
            "flex-1 flex-grow",
        ],
    )
    def test_opacity_and_grow_utilities_keep_their_partner(
        self, resolve_conflicts: TailwindConflictResolver, classes: str
    ) -> None:
        assert resolve_conflicts(classes.split()) == classes

    def test_unknown_classes_kept(self, resolve_conflicts: TailwindConflictResolver) -> None:
        assert resolve_conflicts(["card", "btn", "p-4"]) == "card btn p-4"

    def test_empty(self, resolve_conflicts: TailwindConflictResolver) -> None:
        assert resolve_conflicts([]) == ""

    def test_deterministic(self, resolve_conflicts: TailwindConflictResolver) -> None:
        tokens = ["p-4", "text-red-500", "p-6", "text-lg"]
        assert resolve_conflicts(tokens) == resolve_conflicts(list(tokens))

    def test_accepts_tuples(self, resolve_conflicts: TailwindConflictResolver) -> None:
        assert resolve_conflicts(("p-4", "p-6")) == "p-6"

    def test_wraps_given_tailwind_merge(self) -> None:
        calls: list[str] = []

        class RecordingMerge:
            def merge(self, classes: str) -> str:
                calls.append(classes)
                return classes.upper()

        resolver = TailwindConflictResolver(RecordingMerge())  # type: ignore[arg-type]
        assert resolver(["p-4", "p-6"]) == "P-4 P-6"
        assert calls == ["p-4 p-6"]


class TestDefaultMergerIntegration:
    def test_merge_class_names_keeps_background_color(self) -> None:
        assert merge_class_names(["bg-red-500", "bg-opacity-50"]) == "bg-red-500 bg-opacity-50"

    def test_variant_does_not_drop_base_color(self) -> None:
        component = tv({"base": "bg-red-500", "variants": {"faded": {True: "bg-opacity-50"}}})
        assert tw(component, {"faded": True}) == "bg-red-500 bg-opacity-50"

    def test_class_merger_defaults_to_tailwind_resolver(self) -> None:
        assert isinstance(ClassMerger().conflict_resolver, TailwindConflictResolver)


class TestPlainJoin:
    def test_keeps_everything(self) -> None:
        assert plain_join(["p-4", "p-6", "p-4"]) == "p-4 p-6 p-4"

    def test_empty(self) -> None:
        assert plain_join([]) == ""
