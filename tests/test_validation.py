"""
Tests for token table validation.
"""

import pytest

from theme_tokens import (
    BaseVariables,
    TokenConfig,
    TokenConfigBuilder,
    TokenConfigValidationError,
    validate_config,
)


class TestValidateConfig:
    """Tests for validate_config."""

    def test_default_config_is_valid(self, default_config: TokenConfig, light_variables):
        result = validate_config(default_config, light_variables)

        assert result.valid
        assert result.errors == []
        # chart only has numbered entries
        assert result.warnings == [
            "Color 'chart' has no DEFAULT entry; usages must name a sub-key"
        ]

    def test_dangling_animation(self):
        config = TokenConfigBuilder().with_animation("wiggle", "1s").build()

        result = validate_config(config)

        assert not result
        assert result.errors == [
            "Animation 'wiggle' references undefined keyframes 'wiggle'"
        ]

    def test_malformed_color_template(self):
        config = TokenConfigBuilder().with_color("ring", "oklch(var(--ring) <alpha-value>)").build()

        result = validate_config(config)

        assert not result.valid
        assert "ring" in result.errors[0]

    def test_unused_keyframes_warning(self):
        config = (
            TokenConfigBuilder()
            .with_keyframes("pulse", {"0%, 100%": {"opacity": 1}, "50%": {"opacity": 0.5}})
            .build()
        )

        result = validate_config(config)

        assert result.valid
        assert result.warnings == ["Keyframes 'pulse' are not used by any animation"]

    def test_duplicate_content_warning(self):
        config = TokenConfigBuilder().with_content("src/**/*.{ts,tsx}", "src/**/*.ts").build()

        result = validate_config(config)

        assert result.warnings == ["Content pattern 'src/**/*.ts' is declared more than once"]

    def test_undefined_variables_warning(self, default_config: TokenConfig):
        result = validate_config(default_config, BaseVariables({"radius": "8px"}))

        assert result.valid
        assert "'ring' references undefined variable '--ring'" in result.warnings
        assert not any("borderRadius" in w for w in result.warnings)

    def test_variables_not_checked_without_snapshot(self):
        config = TokenConfigBuilder().with_oklch_color("ring").build()

        assert validate_config(config).warnings == []


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_raise_if_invalid(self):
        config = TokenConfigBuilder().with_animation("wiggle", "1s").build()
        result = validate_config(config)

        with pytest.raises(TokenConfigValidationError, match="wiggle") as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.errors == result.errors

    def test_valid_does_not_raise(self, default_config: TokenConfig):
        validate_config(default_config).raise_if_invalid()
