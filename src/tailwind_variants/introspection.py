"""
Read-only views over component definitions, for documentation and
validation tooling.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .definition import ComponentDefinition


def variant_options(definition: ComponentDefinition) -> dict[str, tuple[Any, ...]]:
    """
    List every declared variant and its possible values.

    Args:
        definition: Definition created with build()

    Returns:
        Variant name -> declared values, both in declaration order

    Examples:
        >>> from tailwind_variants.builder import build
        >>> button = build({"variants": {"color": {"primary": "", "secondary": ""}}})
        >>> variant_options(button)
        {'color': ('primary', 'secondary')}
    """
    options: dict[str, tuple[Any, ...]] = {}
    for name in definition.variant_names:
        values = definition.variants[name]
        options[name] = tuple(values) if isinstance(values, Mapping) else ()
    return options


__all__ = ["variant_options"]
