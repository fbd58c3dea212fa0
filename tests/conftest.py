"""Shared pytest fixtures for tailwind-variants tests."""

import pytest

from tailwind_variants import ComponentDefinition, tv


@pytest.fixture
def button() -> ComponentDefinition:
    """Return a button with color, size and boolean disabled variants."""
    return tv(
        {
            "base": "font-medium text-white rounded-full",
            "variants": {
                "color": {
                    "primary": "bg-blue-500",
                    "secondary": "bg-purple-500",
                },
                "size": {
                    "sm": "text-sm px-3 py-1",
                    "md": "text-base px-4 py-2",
                    "lg": "text-lg px-6 py-3",
                },
                "disabled": {
                    True: "opacity-50 cursor-not-allowed",
                    False: "cursor-pointer",
                },
            },
            "default_variants": {"color": "primary", "size": "md"},
        }
    )


@pytest.fixture
def card() -> ComponentDefinition:
    """Return a slot-based card with per-slot variants and rules."""
    return tv(
        {
            "slots": {
                "base": "rounded-xl border p-4",
                "header": "font-semibold",
                "body": "text-sm",
            },
            "variants": {
                "size": {
                    "sm": {"base": "p-2", "header": "text-base"},
                    "lg": {"base": "p-8", "header": "text-2xl", "body": "text-base"},
                },
                "elevated": {True: "shadow-lg"},
            },
            "compound_variants": [
                {"size": "lg", "elevated": True, "class": {"base": "shadow-2xl"}},
            ],
            "compound_slots": [
                {"slots": ["header", "body"], "class": "px-1"},
                {"slots": ["base", "header"], "size": "sm", "class": "gap-1"},
            ],
            "default_variants": {"size": "sm"},
        }
    )
