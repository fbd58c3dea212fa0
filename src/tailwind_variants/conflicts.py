"""
Conflict resolution for Tailwind utility classes.

Adapts tailwind-merge to the resolver call shape used by ClassMerger: an
ordered token sequence in, one class string out. Later classes win
conflicts with earlier ones under the same variant modifiers:

    p-4 text-red-500 p-6 text-lg  ->  text-red-500 p-6 text-lg
"""

from __future__ import annotations

from collections.abc import Sequence

from tailwind_merge import TailwindMerge


def plain_join(tokens: Sequence[str]) -> str:
    """Join tokens with single spaces, keeping order and duplicates."""
    return " ".join(tokens)


class TailwindConflictResolver:
    """
    Default conflict resolver, backed by tailwind-merge.

    Example:
        resolver = TailwindConflictResolver()
        resolver(["px-2", "p-4"])                 # "p-4"
        resolver(["bg-red-500", "bg-opacity-50"])  # both kept
    """

    def __init__(self, tailwind_merge: TailwindMerge | None = None) -> None:
        self._tailwind_merge = tailwind_merge if tailwind_merge is not None else TailwindMerge()

    def __call__(self, tokens: Sequence[str], /) -> str:
        if not tokens:
            return ""
        return str(self._tailwind_merge.merge(plain_join(tokens)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["TailwindConflictResolver", "plain_join"]
