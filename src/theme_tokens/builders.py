"""
Token configuration builder.

Provides a fluent builder for TokenConfig objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from .config import DarkModeStrategy, TokenConfig

if TYPE_CHECKING:
    from typing import Self


class TokenConfigBuilder:
    """
    Builder for TokenConfig objects.

    Examples
    --------
    >>> config = (TokenConfigBuilder()
    ...     .with_dark_mode("class")
    ...     .with_content("src/**/*.{ts,tsx}")
    ...     .with_composite_color("primary", {
    ...         "DEFAULT": "oklch(var(--primary) / <alpha-value>)",
    ...         "foreground": "oklch(var(--primary-foreground))",
    ...     })
    ...     .with_radius_scale("radius", {"lg": 0, "md": -2, "sm": -4})
    ...     .build())
    """

    def __init__(self) -> None:
        self._dark_mode: Any = DarkModeStrategy.MEDIA.value
        self._content: list[str] = []
        self._container: dict[str, Any] | None = None
        self._colors: dict[str, Any] = {}
        self._border_radius: dict[str, str] = {}
        self._box_shadow: dict[str, str] = {}
        self._font_family: dict[str, list[str]] = {}
        self._keyframes: dict[str, dict[str, dict[str, str]]] = {}
        self._animation: dict[str, str] = {}
        self._plugins: list[str] = []

    def with_dark_mode(
        self, strategy: DarkModeStrategy | str, selector: str | None = None
    ) -> Self:
        """Set dark-mode strategy and, for class/selector, the selector."""
        strategy = DarkModeStrategy(strategy)
        if strategy is DarkModeStrategy.MEDIA and selector is None:
            self._dark_mode = strategy.value
        else:
            self._dark_mode = [strategy.value] + ([selector] if selector else [])
        return self

    def with_content(self, *patterns: str) -> Self:
        """Append content glob patterns."""
        self._content.extend(patterns)
        return self

    def with_container(
        self,
        center: bool = True,
        padding: str | dict[str, str] | None = None,
        screens: dict[str, str] | None = None,
    ) -> Self:
        """Configure the container utility."""
        self._container = {
            "center": center,
            "padding": padding,
            "screens": dict(screens or {}),
        }
        return self

    def with_color(self, name: str, expression: str) -> Self:
        """Add a simple color token."""
        self._colors[name] = expression
        return self

    def with_oklch_color(
        self, name: str, variable: str | None = None, alpha: bool = False
    ) -> Self:
        """Add a simple token bound to ``oklch(var(--variable))``."""
        variable = variable or name
        suffix = " / <alpha-value>" if alpha else ""
        return self.with_color(name, f"oklch(var(--{variable}){suffix})")

    def with_composite_color(self, name: str, entries: Mapping[Any, str]) -> Self:
        """Add a composite color token."""
        self._colors[name] = {str(k): v for k, v in entries.items()}
        return self

    def with_radius(self, name: str, expression: str) -> Self:
        """Add a single border-radius entry."""
        self._border_radius[name] = expression
        return self

    def with_radius_scale(
        self, root: str, steps: Mapping[str, float], unit: str = "px"
    ) -> Self:
        """
        Add radius entries derived from ``--root``.

        Parameters
        ----------
        root : str
            Root variable name, with or without ``--``.
        steps : Mapping[str, float]
            Offsets from the root; 0 binds the root itself.
        unit : str
            Unit of the offsets.
        """
        root = root[2:] if root.startswith("--") else root
        for name, offset in steps.items():
            if offset == 0:
                self._border_radius[name] = f"var(--{root})"
            else:
                op = "-" if offset < 0 else "+"
                self._border_radius[name] = (
                    f"calc(var(--{root}) {op} {abs(offset):g}{unit})"
                )
        return self

    def with_shadow(self, name: str, value: str) -> Self:
        """Add a box-shadow entry."""
        self._box_shadow[name] = value
        return self

    def with_font_family(self, name: str, *families: str) -> Self:
        """Add a font stack."""
        self._font_family[name] = list(families)
        return self

    def with_keyframes(self, name: str, steps: Mapping[str, Mapping[str, Any]]) -> Self:
        """Add a keyframes definition (``{"from": {...}, "to": {...}}``)."""
        self._keyframes[name] = {
            step: {prop: str(value) for prop, value in styles.items()}
            for step, styles in steps.items()
        }
        return self

    def with_animation(
        self,
        name: str,
        duration: str = "0.2s",
        easing: str = "ease-out",
        keyframes: str | None = None,
        extra: str = "",
    ) -> Self:
        """Add an animation bound to ``keyframes`` (defaults to ``name``)."""
        value = f"{keyframes or name} {duration} {easing}"
        self._animation[name] = f"{value} {extra}".strip()
        return self

    def with_plugins(self, *names: str) -> Self:
        """Append plugin names."""
        self._plugins.extend(names)
        return self

    def build(self) -> TokenConfig:
        """Build the TokenConfig object."""
        theme: dict[str, Any] = {
            "extend": {
                "colors": dict(self._colors),
                "borderRadius": dict(self._border_radius),
                "boxShadow": dict(self._box_shadow),
                "fontFamily": dict(self._font_family),
                "keyframes": dict(self._keyframes),
                "animation": dict(self._animation),
            }
        }
        if self._container is not None:
            theme["container"] = {
                k: v for k, v in self._container.items() if v is not None
            }
        return TokenConfig.model_validate(
            {
                "darkMode": self._dark_mode,
                "content": list(self._content),
                "theme": theme,
                "plugins": list(self._plugins),
            }
        )


__all__ = ["TokenConfigBuilder"]
