"""Tests for variant introspection."""

from __future__ import annotations

from tailwind_variants import ComponentDefinition, tv, variant_options


class TestVariantOptions:
    def test_lists_variants_and_values(self) -> None:
        component = tv(
            {
                "variants": {
                    "color": {
                        "primary": "text-blue-500",
                        "secondary": "text-purple-500",
                        "success": "text-green-500",
                    },
                    "size": {"sm": "text-sm", "md": "text-base", "lg": "text-lg"},
                }
            }
        )
        assert variant_options(component) == {
            "color": ("primary", "secondary", "success"),
            "size": ("sm", "md", "lg"),
        }

    def test_keeps_declared_keys(self, button: ComponentDefinition) -> None:
        assert variant_options(button)["disabled"] == (True, False)

    def test_no_variants(self) -> None:
        assert variant_options(tv({"base": "flex"})) == {}

    def test_includes_inherited_variants(self, button: ComponentDefinition) -> None:
        component = tv({"extend": button, "variants": {"shape": {"pill": "rounded-full"}}})
        assert list(variant_options(component)) == ["color", "size", "disabled", "shape"]

    def test_slot_variants(self, card: ComponentDefinition) -> None:
        assert variant_options(card) == {"size": ("sm", "lg"), "elevated": (True,)}

    def test_follows_variant_names(self, button: ComponentDefinition) -> None:
        assert tuple(variant_options(button)) == button.variant_names

    def test_non_mapping_variant_has_no_values(self) -> None:
        component = ComponentDefinition(variants={"tone": "loud"})  # type: ignore[dict-item]
        assert component.variant_names == ("tone",)
        assert variant_options(component) == {"tone": ()}
