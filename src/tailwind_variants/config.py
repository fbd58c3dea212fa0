"""
Component configuration.

Every definition carries a resolved VariantsConfig. A component's own config
is layered over the defaults; it is never inherited from an extended parent.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class VariantsConfig(BaseModel):
    """
    Resolved component configuration.

    Example:
        VariantsConfig(merge_conflicting_classes=False)
        VariantsConfig.model_validate({"tw_merge": False})
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    merge_conflicting_classes: bool = Field(
        default=True,
        validation_alias=AliasChoices("merge_conflicting_classes", "tw_merge"),
        description="Resolve conflicting utility classes (last wins) instead of plain joining",
    )


DEFAULT_CONFIG = VariantsConfig()


def resolve_config(custom: VariantsConfig | Mapping[str, Any] | None = None) -> VariantsConfig:
    """
    Layer a component's config over the defaults.

    Args:
        custom: Config instance, plain mapping of options, or None

    Returns:
        Resolved VariantsConfig. Invalid mappings fall back to the defaults.
    """
    if custom is None:
        return DEFAULT_CONFIG
    if isinstance(custom, VariantsConfig):
        return custom
    if not isinstance(custom, Mapping):
        logger.warning("Ignoring config of type %s, using defaults", type(custom).__name__)
        return DEFAULT_CONFIG

    try:
        return VariantsConfig.model_validate(dict(custom))
    except ValidationError as e:
        logger.warning("Invalid component config %r, using defaults: %s", dict(custom), e)
        return DEFAULT_CONFIG


__all__ = ["DEFAULT_CONFIG", "VariantsConfig", "resolve_config"]
