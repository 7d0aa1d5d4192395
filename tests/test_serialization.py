"""
Tests for token table serialization.
"""

import json
from pathlib import Path

import pytest

from theme_tokens import (
    BaseVariables,
    ThemeVariables,
    TokenConfig,
    TokenConfigSerializer,
)


class TestTokenConfigSerializer:
    """Tests for TokenConfigSerializer."""

    def test_to_dict_uses_native_keys(self, default_config: TokenConfig):
        data = TokenConfigSerializer.to_dict(default_config)

        assert data["_format_version"] == "1.0"
        assert data["darkMode"] == ["class"]
        assert "borderRadius" in data["theme"]["extend"]
        assert data["theme"]["extend"]["colors"]["chart"]["1"] == "oklch(var(--chart-1))"

    def test_save_and_load(self, default_config: TokenConfig, tmp_path: Path):
        path = TokenConfigSerializer.save(default_config, tmp_path / "theme" / "tokens.json")

        assert path.exists()
        assert TokenConfigSerializer.load(path) == default_config

    def test_load_hand_written(self, tmp_path: Path):
        """Test files without a version tag load as native configurations."""
        path = tmp_path / "tokens.json"
        path.write_text(
            json.dumps(
                {
                    "darkMode": "media",
                    "content": ["src/**/*.tsx"],
                    "theme": {"extend": {"borderRadius": {"lg": "var(--radius)"}}},
                }
            )
        )

        config = TokenConfigSerializer.load(path)

        assert config.content == ["src/**/*.tsx"]
        assert config.extend.border_radius == {"lg": "var(--radius)"}

    def test_unsupported_version(self):
        with pytest.raises(ValueError, match="Unsupported format version"):
            TokenConfigSerializer.from_dict({"_format_version": "9.9"})

    def test_variables_round_trip(self, theme_variables: ThemeVariables, tmp_path: Path):
        path = TokenConfigSerializer.save_variables(theme_variables, tmp_path / "vars.json")

        loaded = TokenConfigSerializer.load_variables(path)

        assert loaded.light == theme_variables.light
        assert loaded.dark == theme_variables.dark

    def test_load_css_variables(self, tmp_path: Path):
        path = tmp_path / "index.css"
        path.write_text(
            ":root {\n  --radius: 0.5rem;\n}\n.theme-dark {\n  --primary: 0.7 0.12 250;\n}\n",
            encoding="utf-8",
        )

        theme = TokenConfigSerializer.load_css_variables(path, dark_selector=".theme-dark")

        assert theme.light == BaseVariables({"radius": "0.5rem"})
        assert theme.dark["primary"] == "0.7 0.12 250"

    def test_load_css_variables_uses_configured_dark_mode(self, tmp_path: Path):
        """Test the darkMode selector of a configuration drives CSS loading."""
        path = tmp_path / "index.css"
        path.write_text(
            ":root { --primary: 0.6 0.15 250; }\n"
            "[data-theme='dark'] { --primary: 0.7 0.12 250; }\n"
            "@media (prefers-color-scheme: dark) { :root { --primary: 0.5 0.1 250; } }\n",
            encoding="utf-8",
        )
        selector_config = TokenConfig.model_validate({"darkMode": ["selector", "[data-theme='dark']"]})
        media_config = TokenConfig.model_validate({"darkMode": "media"})

        by_selector = TokenConfigSerializer.load_css_variables(path, config=selector_config)
        by_media = TokenConfigSerializer.load_css_variables(path, config=media_config)

        assert by_selector.light["primary"] == "0.6 0.15 250"
        assert by_selector.dark["primary"] == "0.7 0.12 250"
        assert by_media.light["primary"] == "0.6 0.15 250"
        assert by_media.dark["primary"] == "0.5 0.1 250"
