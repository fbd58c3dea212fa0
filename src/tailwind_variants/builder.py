"""
Component definition builder.

Builds an immutable ComponentDefinition from plain options, merging in a
previously built definition when one is extended:

1. base and shared slot classes are merge-joined (parent first)
2. variants overlay per value, child wins
3. default variants overlay per name, child wins
4. compound variants and compound slots concatenate (parent rules first)
5. config is the component's own, layered over the defaults

Extension copies the parent's values at build time. Nothing links the new
definition back to its parent afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import VariantsConfig, resolve_config
from .definition import ComponentDefinition, freeze, variant_key
from .errors import ComponentTypeError
from .merger import DEFAULT_MERGER, ClassMerger, flatten_classes

logger = logging.getLogger(__name__)


def build(
    options: Mapping[str, Any] | None = None,
    parent: ComponentDefinition | None = None,
    *,
    merger: ClassMerger | None = None,
) -> ComponentDefinition:
    """
    Build a component definition.

    Args:
        options: Mapping with optional keys base, slots, variants,
            default_variants, compound_variants, compound_slots, extend, config
        parent: Definition to extend (takes precedence over options["extend"])
        merger: Class merger used to join inherited base and slot classes

    Returns:
        Frozen ComponentDefinition

    Examples:
        >>> button = build({"base": "font-medium", "variants": {"size": {"sm": "text-sm"}}})
        >>> button.base
        'font-medium'
        >>> dict(button.variants["size"])
        {'sm': 'text-sm'}
    """
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise ComponentTypeError(
            f"Component options must be a mapping, got {type(options).__name__}"
        )

    merger = merger or DEFAULT_MERGER
    config = resolve_config(options.get("config"))

    if parent is None:
        parent = options.get("extend")
    if parent is not None and not isinstance(parent, ComponentDefinition):
        logger.warning("Ignoring extend value of type %s", type(parent).__name__)
        parent = None

    base = options.get("base", "")
    slots = _mapping_option(options, "slots")
    variants = _mapping_option(options, "variants") or {}
    default_variants = _mapping_option(options, "default_variants") or {}
    compound_variants = _rules_option(options, "compound_variants")
    compound_slots = _rules_option(options, "compound_slots")

    if parent is not None:
        logger.debug(
            "Extending component: %d parent variants, %d parent compound variants",
            len(parent.variants),
            len(parent.compound_variants),
        )
        base = _merge_base(parent.base, base, config, merger)
        slots = _merge_slots(parent.slots, slots, config, merger)
        variants = _merge_variants(parent.variants, variants)
        default_variants = {**parent.default_variants, **default_variants}
        compound_variants = [*parent.compound_variants, *compound_variants]
        compound_slots = [*parent.compound_slots, *compound_slots]

    return ComponentDefinition(
        base=freeze(base),
        slots=freeze(slots) if slots is not None else None,
        variants=freeze(variants),
        default_variants=freeze(default_variants),
        compound_variants=freeze(compound_variants),
        compound_slots=freeze(compound_slots),
        config=config,
    )


# Alias matching the tailwind-variants API
tv = build


def _mapping_option(options: Mapping[str, Any], key: str) -> dict[str, Any] | None:
    value = options.get(key)
    if isinstance(value, Mapping):
        return dict(value)
    if value is not None:
        logger.debug("Ignoring %s of type %s", key, type(value).__name__)
    return None


def _rules_option(options: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = options.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [rule for rule in value if isinstance(rule, Mapping)]


def _merge_base(parent_base: Any, base: Any, config: VariantsConfig, merger: ClassMerger) -> Any:
    if not flatten_classes(parent_base):
        return base
    return merger.merge([parent_base, base], config.merge_conflicting_classes)


def _merge_slots(
    parent_slots: Mapping[str, Any] | None,
    slots: dict[str, Any] | None,
    config: VariantsConfig,
    merger: ClassMerger,
) -> dict[str, Any] | None:
    if parent_slots is None:
        return slots

    merged = dict(parent_slots)
    for name, classes in (slots or {}).items():
        if name in merged:
            merged[name] = merger.merge([merged[name], classes], config.merge_conflicting_classes)
        else:
            merged[name] = classes
    return merged


def _merge_variants(
    parent_variants: Mapping[str, Mapping[Any, Any]],
    variants: dict[str, Any],
) -> dict[str, Any]:
    merged: dict[str, Any] = {
        name: dict(values) if isinstance(values, Mapping) else values
        for name, values in parent_variants.items()
    }

    for name, values in variants.items():
        inherited = merged.get(name)
        if not isinstance(inherited, dict) or not isinstance(values, Mapping):
            merged[name] = values
            continue
        for value, classes in values.items():
            # "true" in the child replaces True in the parent
            key = variant_key(value)
            for existing in [k for k in inherited if k != value and variant_key(k) == key]:
                del inherited[existing]
            inherited[value] = classes

    return merged


__all__ = ["build", "tv"]
