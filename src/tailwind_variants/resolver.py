"""
Resolution engine.

Turns a ComponentDefinition plus props into class strings. Fragments are
merged in a fixed precedence order, later ones winning conflicts:

1. base (or the slot's own classes)
2. matched variants, in declaration order
3. matched compound variants, in declaration order
4. matched compound slots, in declaration order (slot components only)
5. the "class" override from props (or slot props)

Unknown variant names, unknown values and missing slot entries contribute
nothing. Resolution never fails on them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .definition import RESERVED_RULE_KEYS, ComponentDefinition, freeze, hash_key, variant_key
from .errors import ComponentTypeError
from .merger import DEFAULT_MERGER, ClassFragment, ClassMerger

logger = logging.getLogger(__name__)

_MISSING = object()

# Either a whole-component class string or one resolver per slot
Resolution = str | dict[str, "SlotResolver"]


# =============================================================================
# Matching
# =============================================================================


def _effective_value(name: Any, props: Mapping[str, Any], defaults: Mapping[str, Any]) -> Any:
    """Prop value for a variant, falling back to its default when absent or None."""
    value = props.get(name)
    if value is None:
        value = defaults.get(name)
    return value


def _lookup(values: Mapping[Any, Any], value: Any) -> Any:
    key = variant_key(value)
    for declared, classes in values.items():
        if variant_key(declared) == key:
            return classes
    return _MISSING


def conditions_match(
    rule: Mapping[str, Any],
    props: Mapping[str, Any],
    defaults: Mapping[str, Any],
) -> bool:
    """
    Check whether every variant condition of a compound rule holds.

    A condition given as a list (or tuple/set) matches any of its members.
    A rule without conditions always matches.

    Examples:
        >>> conditions_match({"color": ["primary", "secondary"]}, {"color": "primary"}, {})
        True
        >>> conditions_match({"disabled": True}, {"disabled": "true"}, {})
        True
    """
    for name, required in rule.items():
        if name in RESERVED_RULE_KEYS:
            continue
        actual = variant_key(_effective_value(name, props, defaults))
        if isinstance(required, (list, tuple, set, frozenset)):
            if actual not in {variant_key(option) for option in required}:
                return False
        elif actual != variant_key(required):
            return False
    return True


def _variant_entries(definition: ComponentDefinition, props: Mapping[str, Any]) -> Iterator[Any]:
    """Entries of every variant whose effective value is declared."""
    for name, values in definition.variants.items():
        value = _effective_value(name, props, definition.default_variants)
        if value is None or not isinstance(values, Mapping):
            continue
        entry = _lookup(values, value)
        if entry is _MISSING:
            logger.debug("Variant %r has no value %r, skipping", name, value)
            continue
        yield entry


def _compound_variant_classes(
    definition: ComponentDefinition, props: Mapping[str, Any]
) -> Iterator[Any]:
    for rule in definition.compound_variants:
        if conditions_match(rule, props, definition.default_variants):
            yield rule.get("class")


def _in_slots(slot_name: str, slots: Any) -> bool:
    if not isinstance(slots, (list, tuple, set, frozenset)):
        slots = (slots,)
    key = variant_key(slot_name)
    return any(variant_key(slot) == key for slot in slots)


def _for_slot(entry: Any, slot_name: str) -> ClassFragment:
    # Slot-shaped entries are looked up per slot, anything else applies to every slot
    if isinstance(entry, Mapping):
        return entry.get(slot_name)
    return entry


def _whole(entry: Any) -> ClassFragment:
    # Slot-shaped entries have no meaning without slots
    return None if isinstance(entry, Mapping) else entry


# =============================================================================
# Resolution
# =============================================================================


def _component_classes(
    definition: ComponentDefinition,
    props: Mapping[str, Any],
    merger: ClassMerger,
) -> str:
    fragments: list[ClassFragment] = [definition.base]
    fragments.extend(_whole(entry) for entry in _variant_entries(definition, props))
    fragments.extend(_whole(classes) for classes in _compound_variant_classes(definition, props))
    fragments.append(props.get("class"))
    return merger.merge(fragments, definition.config.merge_conflicting_classes)


def _slot_classes(
    definition: ComponentDefinition,
    props: Mapping[str, Any],
    slot_name: str,
    slot_props: Mapping[str, Any],
    merger: ClassMerger,
) -> str:
    slots = definition.slots or {}
    fragments: list[ClassFragment] = [slots.get(slot_name)]
    fragments.extend(
        _for_slot(entry, slot_name) for entry in _variant_entries(definition, props)
    )
    fragments.extend(
        _for_slot(classes, slot_name)
        for classes in _compound_variant_classes(definition, props)
    )
    for rule in definition.compound_slots:
        if not _in_slots(slot_name, rule.get("slots", ())):
            continue
        if conditions_match(rule, props, definition.default_variants):
            fragments.append(_whole(rule.get("class")))
    fragments.append(slot_props.get("class"))
    return merger.merge(fragments, definition.config.merge_conflicting_classes)


def _frozen_props(props: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if props is None:
        return freeze({})
    if not isinstance(props, Mapping):
        raise ComponentTypeError(f"Props must be a mapping, got {type(props).__name__}")
    return freeze(props)


@dataclass(frozen=True)
class SlotResolver:
    """
    Class resolver for one slot of a component.

    Captures the definition and the component-level props; calling it with
    optional slot props returns the slot's class string.

    Example:
        slots = resolve(card, {"size": "lg"})
        slots["header"]()                          # "p-6 font-semibold ..."
        slots["header"]({"class": "text-red-500"})  # override applied last
    """

    definition: ComponentDefinition = field(repr=False)
    props: Mapping[str, Any] = field(repr=False)
    slot_name: str
    merger: ClassMerger = field(default=DEFAULT_MERGER, repr=False)

    def __hash__(self) -> int:
        return hash((self.definition, hash_key(self.props), self.slot_name, self.merger))

    def __call__(self, slot_props: Mapping[str, Any] | None = None) -> str:
        return _slot_classes(
            self.definition,
            self.props,
            self.slot_name,
            _frozen_props(slot_props),
            self.merger,
        )


def resolve(
    definition: ComponentDefinition,
    props: Mapping[str, Any] | None = None,
    *,
    merger: ClassMerger | None = None,
) -> Resolution:
    """
    Resolve a definition against props.

    Args:
        definition: Definition created with build()
        props: Variant values by name, plus an optional "class" override
        merger: Class merger to use instead of the shared default

    Returns:
        Class string for components without slots, otherwise a dict of
        slot name -> SlotResolver

    Examples:
        >>> from tailwind_variants.builder import build
        >>> button = build({
        ...     "base": "font-medium",
        ...     "variants": {"color": {"primary": "bg-blue-500", "secondary": "bg-purple-500"}},
        ... })
        >>> resolve(button, {"color": "primary"})
        'font-medium bg-blue-500'
    """
    if not isinstance(definition, ComponentDefinition):
        raise ComponentTypeError(
            f"Expected a ComponentDefinition, got {type(definition).__name__}"
        )

    frozen = _frozen_props(props)
    merger = merger or DEFAULT_MERGER

    if definition.slots is not None:
        return {
            name: SlotResolver(definition=definition, props=frozen, slot_name=name, merger=merger)
            for name in definition.slots
        }
    return _component_classes(definition, frozen, merger)


def class_list(
    component_or_slot: ComponentDefinition | Callable[..., str],
    props: Mapping[str, Any] | None = None,
) -> Resolution:
    """
    Resolve a definition, or call a slot resolver with slot props.

    Examples:
        class_list(button, {"color": "primary"})
        class_list(slots["base"], {"class": "mt-2"})
    """
    if isinstance(component_or_slot, ComponentDefinition):
        return resolve(component_or_slot, props)
    if callable(component_or_slot):
        return component_or_slot(props)
    raise ComponentTypeError(
        f"Expected a ComponentDefinition or slot resolver, got {type(component_or_slot).__name__}"
    )


# Alias matching the tailwind-variants API
tw = class_list


__all__ = ["Resolution", "SlotResolver", "class_list", "conditions_match", "resolve", "tw"]
