"""
Tests for base variable snapshots.
"""

import pytest

from theme_tokens import BaseVariables, ColorMode, ThemeVariables, parse_css_variables

INDEX_CSS = """
@tailwind base;

@layer base {
  :root {
    --background: 1 0 0;
    --primary: 0.6 0.15 250; /* brand */
    --radius: 0.625rem;
  }

  .dark {
    --background: 0.145 0 0;
    --primary: 0.7 0.12 250;
  }

  body {
    --not-a-theme-var: 1;
  }
}
"""


class TestBaseVariables:
    """Tests for BaseVariables."""

    def test_names_accept_either_form(self):
        variables = BaseVariables({"--primary": "0.6 0.15 250"})

        assert variables["primary"] == "0.6 0.15 250"
        assert variables["--primary"] == "0.6 0.15 250"
        assert "--primary" in variables
        assert list(variables) == ["primary"]

    def test_values_are_stripped(self):
        assert BaseVariables(radius="  8px ")["radius"] == "8px"

    def test_immutable(self):
        variables = BaseVariables({"radius": "8px"})

        with pytest.raises(TypeError):
            variables["radius"] = "10px"

    def test_with_overrides_returns_new_snapshot(self):
        original = BaseVariables({"radius": "8px", "primary": "0.6 0.15 250"})
        updated = original.with_overrides({"--radius": "10px"})

        assert updated["radius"] == "10px"
        assert updated["primary"] == "0.6 0.15 250"
        assert original["radius"] == "8px"

    def test_equality_and_hash(self):
        a = BaseVariables({"radius": "8px"})
        b = BaseVariables({"--radius": "8px"})

        assert a == b
        assert hash(a) == hash(b)

    def test_to_css(self):
        css = BaseVariables({"radius": "8px"}).to_css(".dark")

        assert css == ".dark {\n  --radius: 8px;\n}"


class TestThemeVariables:
    """Tests for ThemeVariables."""

    def test_for_mode(self):
        theme = ThemeVariables(
            light=BaseVariables({"primary": "0.6 0.15 250", "radius": "8px"}),
            dark=BaseVariables({"primary": "0.7 0.12 250"}),
        )

        assert theme.for_mode("light")["primary"] == "0.6 0.15 250"
        assert theme.for_mode(ColorMode.DARK)["primary"] == "0.7 0.12 250"
        # Dark falls back to light for names it does not redefine
        assert theme.for_mode("dark")["radius"] == "8px"
        assert theme.missing_in_dark == ["radius"]

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            ThemeVariables().for_mode("sepia")


class TestParseCssVariables:
    """Tests for parse_css_variables."""

    def test_root_and_dark_blocks(self):
        theme = parse_css_variables(INDEX_CSS)

        assert dict(theme.light) == {
            "background": "1 0 0",
            "primary": "0.6 0.15 250",
            "radius": "0.625rem",
        }
        assert dict(theme.dark) == {"background": "0.145 0 0", "primary": "0.7 0.12 250"}

    def test_custom_dark_selector(self):
        css = ":root { --a: 1 0 0; }\n.theme-dark, [data-theme='dark'] { --a: 0 0 0 }"
        theme = parse_css_variables(css, dark_selector=".theme-dark")

        assert theme.dark["a"] == "0 0 0"

    def test_other_blocks_ignored(self):
        theme = parse_css_variables(INDEX_CSS)

        assert "not-a-theme-var" not in theme.light
        assert "not-a-theme-var" not in theme.dark

    def test_media_blocks_do_not_override_light(self):
        """Test :root inside a media query never leaks into the light set."""
        css = (
            ":root { --background: 1 0 0; }\n"
            "@media (prefers-color-scheme: dark) {\n"
            "  :root { --background: 0.145 0 0; }\n"
            "}\n"
            "@media print { :root { --background: 1 0 0; --ink: 0 0 0; } }\n"
        )
        theme = parse_css_variables(css)

        assert dict(theme.light) == {"background": "1 0 0"}
        assert dict(theme.dark) == {}

    def test_dark_media_root_is_dark(self):
        """Test prefers-color-scheme: dark blocks supply dark values for media mode."""
        css = (
            "@layer base {\n"
            "  :root { --background: 1 0 0; }\n"
            "  @media (prefers-color-scheme:dark) {\n"
            "    :root { --background: 0.145 0 0; }\n"
            "  }\n"
            "}\n"
        )
        theme = parse_css_variables(css, dark_media=True)

        assert theme.light["background"] == "1 0 0"
        assert theme.dark["background"] == "0.145 0 0"
