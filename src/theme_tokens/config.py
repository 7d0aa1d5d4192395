"""
Configuration classes for design-token themes.

Mirrors the shape of a utility-CSS theme configuration (dark-mode
strategy, content globs, ``theme.extend`` token tables and plugins).
Uses Pydantic for validation; models accept and emit the native
camelCase keys (``darkMode``, ``borderRadius``) so existing
configurations load unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    Field,
    RootModel,
    field_validator,
    model_serializer,
    model_validator,
)

from .content import ContentScope
from .expressions import (
    parse_animation_shorthand,
    parse_dimension_expression,
    parse_keyframe_selector,
)
from .settings import get_settings

DEFAULT_SUB_KEY = "DEFAULT"


# =============================================================================
# Dark mode
# =============================================================================


class DarkModeStrategy(str, Enum):
    """How the consuming generator detects dark mode."""

    CLASS = "class"  # ancestor class presence
    SELECTOR = "selector"  # arbitrary ancestor selector
    MEDIA = "media"  # prefers-color-scheme


class DarkModeConfig(BaseModel):
    """Stored dark-mode selection; detection itself is not implemented here."""

    strategy: DarkModeStrategy = DarkModeStrategy.MEDIA
    selector: str | None = None

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _from_native(cls, data: Any) -> Any:
        # "media", "class", ["class"], ["class", ".theme-dark"]
        if isinstance(data, str):
            return {"strategy": data}
        if isinstance(data, (list, tuple)):
            if not 1 <= len(data) <= 2:
                raise ValueError(f"darkMode list must have one or two entries: {data}")
            return {"strategy": data[0], "selector": data[1] if len(data) == 2 else None}
        return data

    @model_validator(mode="after")
    def _check_selector(self) -> DarkModeConfig:
        if self.strategy is DarkModeStrategy.MEDIA and self.selector is not None:
            raise ValueError("darkMode 'media' does not take a selector")
        return self

    @model_serializer
    def _to_native(self) -> str | list[str]:
        if self.strategy is DarkModeStrategy.MEDIA:
            return self.strategy.value
        if self.selector is None:
            return [self.strategy.value]
        return [self.strategy.value, self.selector]

    def dark_selector(self, default: str | None = None) -> str | None:
        """
        Selector carrying dark variables; ``None`` for the media strategy.

        Without an explicit selector, ``default`` applies, then the
        ``default_dark_selector`` setting.
        """
        if self.strategy is DarkModeStrategy.MEDIA:
            return None
        return self.selector or default or get_settings().default_dark_selector


# =============================================================================
# Color tokens
# =============================================================================


class SimpleColorToken(BaseModel):
    """A token bound to a single color expression."""

    kind: Literal["simple"] = "simple"
    expression: str

    model_config = {"extra": "forbid", "frozen": True}

    @model_serializer
    def _to_native(self) -> str:
        return self.expression

    @property
    def sub_keys(self) -> list[str]:
        return []


class CompositeColorToken(BaseModel):
    """A token whose sub-keys each bind to their own color expression."""

    kind: Literal["composite"] = "composite"
    entries: dict[str, str]

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("entries", mode="before")
    @classmethod
    def _stringify_keys(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(k): val for k, val in v.items()}
        return v

    @field_validator("entries")
    @classmethod
    def _not_empty(cls, v: dict[str, str]) -> dict[str, str]:
        if not v:
            raise ValueError("A composite color token needs at least one sub-key")
        return v

    @model_serializer
    def _to_native(self) -> dict[str, str]:
        return dict(self.entries)

    @property
    def sub_keys(self) -> list[str]:
        return list(self.entries)

    @property
    def has_default(self) -> bool:
        return DEFAULT_SUB_KEY in self.entries


ColorToken = Annotated[
    Union[SimpleColorToken, CompositeColorToken], Field(discriminator="kind")
]


def _color_token_from_native(value: Any) -> Any:
    if isinstance(value, str):
        return {"kind": "simple", "expression": value}
    if isinstance(value, dict) and value.get("kind") not in ("simple", "composite"):
        return {"kind": "composite", "entries": value}
    return value


# =============================================================================
# Keyframes
# =============================================================================


class KeyframeDefinition(RootModel[dict[str, dict[str, str]]]):
    """Ordered style snapshots keyed by step selector (``from``, ``50%``)."""

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _stringify_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                str(step): (
                    {prop: str(val) for prop, val in styles.items()}
                    if isinstance(styles, dict)
                    else styles
                )
                for step, styles in data.items()
            }
        return data

    @model_validator(mode="after")
    def _check_steps(self) -> KeyframeDefinition:
        offsets = [o for step in self.root for o in parse_keyframe_selector(step)]
        if len(offsets) < 2:
            raise ValueError("Keyframes need at least two style snapshots")
        return self

    @property
    def steps(self) -> dict[str, dict[str, str]]:
        return self.root


# =============================================================================
# Theme
# =============================================================================


class ContainerConfig(BaseModel):
    """Settings for the ``container`` utility."""

    center: bool = False
    padding: str | dict[str, str] | None = None
    screens: dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "forbid", "frozen": True}


class ThemeExtension(BaseModel):
    """Token tables under ``theme.extend``."""

    colors: dict[str, ColorToken] = Field(default_factory=dict)
    border_radius: dict[str, str] = Field(default_factory=dict, alias="borderRadius")
    box_shadow: dict[str, str] = Field(default_factory=dict, alias="boxShadow")
    font_family: dict[str, list[str]] = Field(default_factory=dict, alias="fontFamily")
    keyframes: dict[str, KeyframeDefinition] = Field(default_factory=dict)
    animation: dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    @field_validator("colors", mode="before")
    @classmethod
    def _colors_from_native(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(k): _color_token_from_native(val) for k, val in v.items()}
        return v

    @field_validator("border_radius")
    @classmethod
    def _check_radius(cls, v: dict[str, str]) -> dict[str, str]:
        for name, expression in v.items():
            try:
                parse_dimension_expression(expression)
            except ValueError as e:
                raise ValueError(f"borderRadius '{name}': {e}") from e
        return v

    @field_validator("font_family", mode="before")
    @classmethod
    def _split_font_stacks(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {
                k: [f.strip() for f in val.split(",")] if isinstance(val, str) else val
                for k, val in v.items()
            }
        return v

    @field_validator("animation")
    @classmethod
    def _check_animation(cls, v: dict[str, str]) -> dict[str, str]:
        for name, value in v.items():
            try:
                parse_animation_shorthand(value)
            except ValueError as e:
                raise ValueError(f"animation '{name}': {e}") from e
        return v


class ThemeConfig(BaseModel):
    """The ``theme`` section."""

    container: ContainerConfig | None = None
    extend: ThemeExtension = Field(default_factory=ThemeExtension)

    model_config = {"extra": "forbid", "frozen": True}


class TokenConfig(BaseModel):
    """Complete token table configuration.

    Constructed once per build and never mutated; a theme switch selects a
    different variable snapshot under the same token names.
    """

    dark_mode: DarkModeConfig = Field(default_factory=DarkModeConfig, alias="darkMode")
    content: list[str] = Field(default_factory=list)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    plugins: list[str] = Field(default_factory=list)

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    @field_validator("content")
    @classmethod
    def _check_content(cls, v: list[str]) -> list[str]:
        if any(not p.strip() or p.strip() == "!" for p in v):
            raise ValueError("Content patterns must not be empty")
        ContentScope(v)  # compiles every expanded glob
        return v

    @property
    def extend(self) -> ThemeExtension:
        return self.theme.extend

    @property
    def color_names(self) -> list[str]:
        return list(self.extend.colors)

    @property
    def animation_names(self) -> list[str]:
        return list(self.extend.animation)

    def to_native(self) -> dict[str, Any]:
        """Dump using the native camelCase keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# Factory functions
# =============================================================================


def _oklch(variable: str, alpha: bool = False) -> str:
    if alpha:
        return f"oklch(var(--{variable}) / <alpha-value>)"
    return f"oklch(var(--{variable}))"


def _pair(name: str, default_alpha: bool, foreground_alpha: bool = False) -> dict[str, str]:
    return {
        "DEFAULT": _oklch(name, default_alpha),
        "foreground": _oklch(f"{name}-foreground", foreground_alpha),
    }


def create_default_config() -> TokenConfig:
    """
    Create the reference theme configuration.

    Semantic colors indirect through ``oklch`` custom properties; only
    ``ring`` and the DEFAULT entries of ``primary``, ``secondary``,
    ``destructive``, ``muted`` and ``accent`` (plus
    ``muted.foreground``) accept a requested alpha. Radii derive from
    ``--radius``.
    """
    font_stack = ["Inter", "-apple-system", "BlinkMacSystemFont", "Segoe UI", "sans-serif"]
    sidebar_keys = [
        "primary",
        "primary-foreground",
        "accent",
        "accent-foreground",
        "border",
        "ring",
    ]

    colors: dict[str, Any] = {
        "border": _oklch("border"),
        "input": _oklch("input"),
        "ring": _oklch("ring", alpha=True),
        "background": _oklch("background"),
        "foreground": _oklch("foreground"),
        "primary": _pair("primary", True),
        "secondary": _pair("secondary", True),
        "destructive": _pair("destructive", True),
        "muted": _pair("muted", True, foreground_alpha=True),
        "accent": _pair("accent", True),
        "popover": _pair("popover", False),
        "card": _pair("card", False),
        "success": _pair("success", False),
        "warning": _pair("warning", False),
        "chart": {str(i): _oklch(f"chart-{i}") for i in range(1, 6)},
        "sidebar": {
            "DEFAULT": _oklch("sidebar"),
            "foreground": _oklch("sidebar-foreground"),
            **{key: _oklch(f"sidebar-{key}") for key in sidebar_keys},
        },
    }

    return TokenConfig.model_validate(
        {
            "darkMode": ["class"],
            "content": ["index.html", "src/**/*.{js,ts,jsx,tsx,html,css}"],
            "theme": {
                "container": {
                    "center": True,
                    "padding": "2rem",
                    "screens": {"2xl": "1400px"},
                },
                "extend": {
                    "colors": colors,
                    "borderRadius": {
                        "lg": "var(--radius)",
                        "md": "calc(var(--radius) - 2px)",
                        "sm": "calc(var(--radius) - 4px)",
                    },
                    "boxShadow": {
                        "xs": "0 1px 2px 0 rgba(0,0,0,0.05)",
                        "soft": "0 2px 8px -2px rgba(0,0,0,0.1)",
                        "medium": "0 4px 16px -4px rgba(0,0,0,0.15)",
                    },
                    "fontFamily": {"sans": font_stack, "display": list(font_stack)},
                    "keyframes": {
                        "accordion-down": {
                            "from": {"height": "0"},
                            "to": {"height": "var(--radix-accordion-content-height)"},
                        },
                        "accordion-up": {
                            "from": {"height": "var(--radix-accordion-content-height)"},
                            "to": {"height": "0"},
                        },
                        "fade-in": {
                            "from": {"opacity": "0", "transform": "translateY(10px)"},
                            "to": {"opacity": "1", "transform": "translateY(0)"},
                        },
                    },
                    "animation": {
                        "accordion-down": "accordion-down 0.2s ease-out",
                        "accordion-up": "accordion-up 0.2s ease-out",
                        "fade-in": "fade-in 0.5s ease-out",
                    },
                },
            },
            "plugins": ["typography", "container-queries", "animate"],
        }
    )


__all__ = [
    "DEFAULT_SUB_KEY",
    "DarkModeStrategy",
    "DarkModeConfig",
    "SimpleColorToken",
    "CompositeColorToken",
    "ColorToken",
    "KeyframeDefinition",
    "ContainerConfig",
    "ThemeExtension",
    "ThemeConfig",
    "TokenConfig",
    "create_default_config",
]
