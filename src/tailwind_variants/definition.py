"""
Component definition types.

A ComponentDefinition is the fully merged, read-only description of a
styleable component: base or slot classes, variants, defaults, compound
rules and config. It is produced once by build() and then resolved any
number of times.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any

from .config import DEFAULT_CONFIG, VariantsConfig

# Keys of a compound rule that are not variant conditions
RESERVED_RULE_KEYS = frozenset({"class", "slots"})


def variant_key(value: Any) -> str | None:
    """
    Canonical form used to compare variant values and declared keys.

    Booleans and their string forms are equivalent, enum members compare by
    value, and other scalars compare by their string form.

    Examples:
        >>> variant_key(True) == variant_key("true")
        True
        >>> variant_key(None) is None
        True
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return variant_key(value.value)
    if isinstance(value, str):
        return str.__str__(value)
    return str(value)


def freeze(value: Any) -> Any:
    """
    Deep-copy plain data into read-only containers.

    Mappings become MappingProxyType, lists and tuples become tuples, sets
    become frozensets. Scalars are returned unchanged.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    return value


def hash_key(value: Any) -> Any:
    """
    Hashable stand-in for frozen data, equal wherever the data is equal.

    Read-only mappings hash by their items regardless of order, matching
    mapping equality.
    """
    if isinstance(value, Mapping):
        return frozenset((key, hash_key(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(hash_key(item) for item in value)
    return value


def _empty_mapping() -> Mapping[Any, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ComponentDefinition:
    """
    Immutable component definition.

    Example:
        ComponentDefinition(
            base="font-medium rounded-full",
            variants=freeze({"color": {"primary": "bg-blue-500"}}),
            default_variants=freeze({"color": "primary"}),
        )

    Use build() rather than constructing this directly, so that nested
    structures are frozen and extension is applied.
    """

    base: Any = None
    slots: Mapping[str, Any] | None = None
    variants: Mapping[str, Mapping[Any, Any]] = field(default_factory=_empty_mapping)
    default_variants: Mapping[str, Any] = field(default_factory=_empty_mapping)
    compound_variants: tuple[Mapping[str, Any], ...] = ()
    compound_slots: tuple[Mapping[str, Any], ...] = ()
    config: VariantsConfig = DEFAULT_CONFIG

    def __hash__(self) -> int:
        return hash(tuple(hash_key(getattr(self, f.name)) for f in fields(self)))

    @property
    def has_slots(self) -> bool:
        """Check if this component resolves to per-slot class strings."""
        return self.slots is not None

    @property
    def slot_names(self) -> tuple[str, ...]:
        """Declared slot names, in declaration order."""
        return tuple(self.slots) if self.slots is not None else ()

    @property
    def variant_names(self) -> tuple[str, ...]:
        """Declared variant names, in declaration order."""
        return tuple(self.variants)


__all__ = ["RESERVED_RULE_KEYS", "ComponentDefinition", "freeze", "hash_key", "variant_key"]
