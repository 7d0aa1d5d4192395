"""
Pytest configuration and fixtures for theme_tokens tests.

The variable sets cover every variable the default configuration
references, so the whole reference theme resolves.
"""

import pytest

from theme_tokens import (
    BaseVariables,
    Settings,
    ThemeVariables,
    TokenResolver,
    create_default_config,
)

_SEMANTIC = [
    "border",
    "input",
    "ring",
    "background",
    "foreground",
    "sidebar",
    "sidebar-foreground",
    "sidebar-primary",
    "sidebar-primary-foreground",
    "sidebar-accent",
    "sidebar-accent-foreground",
    "sidebar-border",
    "sidebar-ring",
    *[f"chart-{i}" for i in range(1, 6)],
]
_PAIRS = [
    "primary",
    "secondary",
    "destructive",
    "muted",
    "accent",
    "popover",
    "card",
    "success",
    "warning",
]


def _variables(lightness: str) -> dict[str, str]:
    values = {name: f"{lightness} 0.02 260" for name in _SEMANTIC}
    for name in _PAIRS:
        values[name] = f"{lightness} 0.1 200"
        values[f"{name}-foreground"] = f"{lightness} 0.01 200"
    return values


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment."""
    return Settings(root_font_size_px=16.0, strict_plugins=False)


@pytest.fixture
def default_config():
    """The reference theme configuration."""
    return create_default_config()


@pytest.fixture
def light_variables() -> BaseVariables:
    """Light theme snapshot."""
    values = _variables("0.9")
    values["primary"] = "0.6 0.15 250"
    values["radius"] = "8px"
    return BaseVariables(values)


@pytest.fixture
def dark_variables() -> BaseVariables:
    """Dark theme overrides."""
    values = _variables("0.2")
    values["primary"] = "0.7 0.12 250"
    return BaseVariables(values)


@pytest.fixture
def theme_variables(light_variables, dark_variables) -> ThemeVariables:
    return ThemeVariables(light=light_variables, dark=dark_variables)


@pytest.fixture
def resolver(default_config, light_variables, settings) -> TokenResolver:
    """Resolver over the reference theme bound to the light snapshot."""
    return TokenResolver(default_config, light_variables, settings)
