"""
Tests for configuration classes.
"""

import pytest
from pydantic import ValidationError

from theme_tokens import (
    CompositeColorToken,
    DarkModeConfig,
    DarkModeStrategy,
    KeyframeDefinition,
    SimpleColorToken,
    TokenConfig,
    create_default_config,
)


class TestDarkModeConfig:
    """Tests for DarkModeConfig native forms."""

    def test_string_form(self):
        config = DarkModeConfig.model_validate("media")

        assert config.strategy == DarkModeStrategy.MEDIA
        assert config.model_dump() == "media"
        assert config.dark_selector() is None

    def test_single_entry_list(self):
        config = DarkModeConfig.model_validate(["class"])

        assert config.strategy == DarkModeStrategy.CLASS
        assert config.model_dump() == ["class"]
        assert config.dark_selector() == ".dark"

    def test_list_with_selector(self):
        config = DarkModeConfig.model_validate(["selector", "[data-mode='dark']"])

        assert config.dark_selector() == "[data-mode='dark']"
        assert config.model_dump() == ["selector", "[data-mode='dark']"]

    def test_media_rejects_selector(self):
        with pytest.raises(ValidationError, match="does not take a selector"):
            DarkModeConfig.model_validate(["media", ".dark"])

    @pytest.mark.parametrize("bad", [[], ["class", ".a", ".b"], "auto"])
    def test_invalid(self, bad):
        with pytest.raises(ValidationError):
            DarkModeConfig.model_validate(bad)


class TestColorTokens:
    """Tests for color token parsing."""

    def test_native_forms(self):
        config = TokenConfig.model_validate(
            {
                "theme": {
                    "extend": {
                        "colors": {
                            "ring": "oklch(var(--ring) / <alpha-value>)",
                            "chart": {1: "oklch(var(--chart-1))"},
                        }
                    }
                }
            }
        )
        colors = config.extend.colors

        assert isinstance(colors["ring"], SimpleColorToken)
        assert isinstance(colors["chart"], CompositeColorToken)
        assert colors["chart"].sub_keys == ["1"]
        assert not colors["chart"].has_default

    def test_empty_composite_rejected(self):
        with pytest.raises(ValidationError, match="at least one sub-key"):
            TokenConfig.model_validate({"theme": {"extend": {"colors": {"brand": {}}}}})


class TestKeyframeDefinition:
    """Tests for KeyframeDefinition."""

    def test_values_stringified(self):
        definition = KeyframeDefinition.model_validate({"from": {"opacity": 0}, "to": {"opacity": 1}})

        assert definition.steps == {"from": {"opacity": "0"}, "to": {"opacity": "1"}}

    def test_single_step_rejected(self):
        with pytest.raises(ValidationError, match="at least two"):
            KeyframeDefinition.model_validate({"from": {"opacity": "0"}})

    def test_bad_selector_rejected(self):
        with pytest.raises(ValidationError):
            KeyframeDefinition.model_validate({"from": {}, "halfway": {}})


class TestThemeExtensionValidation:
    """Tests for construction-time checks on scale and animation entries."""

    def test_invalid_radius(self):
        with pytest.raises(ValidationError, match="borderRadius 'md'"):
            TokenConfig.model_validate(
                {"theme": {"extend": {"borderRadius": {"md": "calc(var(--radius) * 2)"}}}}
            )

    def test_invalid_animation(self):
        with pytest.raises(ValidationError, match="animation 'spin'"):
            TokenConfig.model_validate({"theme": {"extend": {"animation": {"spin": "1s linear"}}}})

    def test_font_stack_string_split(self):
        config = TokenConfig.model_validate(
            {"theme": {"extend": {"fontFamily": {"mono": "JetBrains Mono, monospace"}}}}
        )

        assert config.extend.font_family["mono"] == ["JetBrains Mono", "monospace"]

    def test_unknown_keys_forbidden(self):
        with pytest.raises(ValidationError):
            TokenConfig.model_validate({"theme": {"extend": {"spacing": {}}}})

    def test_malformed_content_glob(self):
        """Test globs that do not compile fail at construction."""
        with pytest.raises(ValidationError, match="Invalid glob pattern"):
            TokenConfig.model_validate({"content": ["src/[z-a].js"]})

    @pytest.mark.parametrize("bad", ["", "  ", "!"])
    def test_empty_content_pattern(self, bad):
        with pytest.raises(ValidationError, match="must not be empty"):
            TokenConfig.model_validate({"content": [bad]})


class TestDefaultConfig:
    """Tests for create_default_config."""

    def test_structure(self, default_config: TokenConfig):
        assert default_config.dark_mode.strategy == DarkModeStrategy.CLASS
        assert default_config.content == ["index.html", "src/**/*.{js,ts,jsx,tsx,html,css}"]
        assert default_config.plugins == ["typography", "container-queries", "animate"]
        assert default_config.theme.container.center is True
        assert default_config.theme.container.screens == {"2xl": "1400px"}

    def test_colors(self, default_config: TokenConfig):
        colors = default_config.extend.colors

        assert colors["ring"].expression == "oklch(var(--ring) / <alpha-value>)"
        assert colors["border"].expression == "oklch(var(--border))"
        assert colors["primary"].entries["DEFAULT"] == "oklch(var(--primary) / <alpha-value>)"
        assert colors["primary"].entries["foreground"] == "oklch(var(--primary-foreground))"
        assert colors["muted"].entries["foreground"] == (
            "oklch(var(--muted-foreground) / <alpha-value>)"
        )
        assert colors["card"].entries["DEFAULT"] == "oklch(var(--card))"
        assert colors["chart"].sub_keys == ["1", "2", "3", "4", "5"]
        assert "primary-foreground" in colors["sidebar"].entries

    def test_scales(self, default_config: TokenConfig):
        assert default_config.extend.border_radius == {
            "lg": "var(--radius)",
            "md": "calc(var(--radius) - 2px)",
            "sm": "calc(var(--radius) - 4px)",
        }
        assert set(default_config.extend.box_shadow) == {"xs", "soft", "medium"}
        assert default_config.extend.font_family["sans"][0] == "Inter"

    def test_animations(self, default_config: TokenConfig):
        assert default_config.animation_names == ["accordion-down", "accordion-up", "fade-in"]
        assert set(default_config.extend.keyframes) == set(default_config.animation_names)

    def test_immutable(self, default_config: TokenConfig):
        with pytest.raises(ValidationError):
            default_config.plugins = []

    def test_native_round_trip(self, default_config: TokenConfig):
        native = default_config.to_native()

        assert native["darkMode"] == ["class"]
        assert native["theme"]["extend"]["borderRadius"]["md"] == "calc(var(--radius) - 2px)"
        assert native["theme"]["extend"]["colors"]["ring"] == "oklch(var(--ring) / <alpha-value>)"
        assert TokenConfig.model_validate(native) == default_config
