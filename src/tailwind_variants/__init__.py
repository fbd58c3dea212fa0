"""
tailwind-variants - declarative class composition for utility-first CSS.

Declare a component once as base classes, variants, compound rules and
slots, then resolve it against props to get conflict-free class strings.

    button = tv({
        "base": "font-medium rounded-full",
        "variants": {"color": {"primary": "bg-blue-500", "secondary": "bg-purple-500"}},
        "default_variants": {"color": "primary"},
    })
    tw(button)                          # "font-medium rounded-full bg-blue-500"
    tw(button, {"color": "secondary"})  # "font-medium rounded-full bg-purple-500"
"""

from __future__ import annotations

from ._version import get_version
from .builder import build, tv
from .config import DEFAULT_CONFIG, VariantsConfig, resolve_config
from .conflicts import TailwindConflictResolver, plain_join
from .definition import ComponentDefinition, freeze, variant_key
from .errors import ComponentTypeError, TailwindVariantsError
from .introspection import variant_options
from .merger import (
    DEFAULT_MERGER,
    ClassMerger,
    ConflictResolver,
    flatten_classes,
    join_class_names,
    merge_class_names,
)
from .resolver import SlotResolver, class_list, resolve, tw

__version__ = get_version()

__all__ = [
    "__version__",
    # Building
    "build",
    "tv",
    "ComponentDefinition",
    "freeze",
    "variant_key",
    # Resolving
    "resolve",
    "class_list",
    "tw",
    "SlotResolver",
    "variant_options",
    # Merging
    "ClassMerger",
    "ConflictResolver",
    "DEFAULT_MERGER",
    "TailwindConflictResolver",
    "flatten_classes",
    "join_class_names",
    "merge_class_names",
    "plain_join",
    # Config
    "DEFAULT_CONFIG",
    "VariantsConfig",
    "resolve_config",
    # Errors
    "TailwindVariantsError",
    "ComponentTypeError",
]
