"""
Class merging.

Flattens ordered class fragments into tokens and joins them, either through
the conflict resolver or with plain spaces when conflict merging is off.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from .config import VariantsConfig, resolve_config
from .conflicts import TailwindConflictResolver, plain_join

# A fragment is a class string, None, or a (nested) sequence of fragments
ClassFragment = Any


class ConflictResolver(Protocol):
    """Callable turning an ordered token sequence into a merged class string."""

    def __call__(self, tokens: Sequence[str], /) -> str: ...


def flatten_classes(fragments: ClassFragment) -> list[str]:
    """
    Flatten fragments into an ordered list of class tokens.

    Strings are split on whitespace. None, booleans and empty strings are
    dropped at every nesting level.

    Examples:
        >>> flatten_classes(["font-bold", None, ["text-lg", "p-4"]])
        ['font-bold', 'text-lg', 'p-4']
    """
    tokens: list[str] = []
    _collect(fragments, tokens)
    return tokens


def _collect(fragment: ClassFragment, tokens: list[str]) -> None:
    if fragment is None or isinstance(fragment, bool):
        return
    if isinstance(fragment, str):
        tokens.extend(fragment.split())
    elif isinstance(fragment, (list, tuple)):
        for item in fragment:
            _collect(item, tokens)
    elif isinstance(fragment, (set, frozenset)):
        for item in sorted(fragment, key=str):
            _collect(item, tokens)
    elif isinstance(fragment, Mapping):
        # Per-slot maps are resolved before merging; a stray one adds nothing
        return
    else:
        tokens.extend(str(fragment).split())


def join_class_names(fragments: ClassFragment) -> str:
    """Join fragments with single spaces, keeping order and duplicates."""
    return plain_join(flatten_classes(fragments))


@dataclass(frozen=True)
class ClassMerger:
    """
    Joins class fragments, delegating conflicts to an injected resolver.

    Example:
        merger = ClassMerger()
        merger.merge(["p-4", "p-6"])                                   # "p-6"
        merger.merge(["p-4", "p-6"], merge_conflicting_classes=False)  # "p-4 p-6"
    """

    conflict_resolver: ConflictResolver = field(default_factory=TailwindConflictResolver)

    def merge(self, fragments: ClassFragment, merge_conflicting_classes: bool = True) -> str:
        """
        Merge ordered class fragments into one class string.

        Args:
            fragments: String, None, or nested sequence of fragments
            merge_conflicting_classes: Resolve conflicts (last wins) when True

        Returns:
            Space-separated class string ("" when nothing contributes)
        """
        tokens = flatten_classes(fragments)
        if not tokens:
            return ""
        if merge_conflicting_classes:
            return self.conflict_resolver(tokens)
        return plain_join(tokens)


DEFAULT_MERGER = ClassMerger()


def merge_class_names(
    fragments: ClassFragment,
    config: VariantsConfig | Mapping[str, Any] | None = None,
) -> str:
    """
    Merge fragments with the shared default merger.

    Examples:
        >>> merge_class_names(["p-4", "p-6"])
        'p-6'
        >>> merge_class_names(["p-4", "p-6"], {"merge_conflicting_classes": False})
        'p-4 p-6'
    """
    resolved = resolve_config(config)
    return DEFAULT_MERGER.merge(fragments, resolved.merge_conflicting_classes)


__all__ = [
    "DEFAULT_MERGER",
    "ClassFragment",
    "ClassMerger",
    "ConflictResolver",
    "flatten_classes",
    "join_class_names",
    "merge_class_names",
]
