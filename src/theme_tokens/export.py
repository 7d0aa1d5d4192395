"""
Resolved theme output.

A :class:`ResolvedTheme` is the fully concrete view of a token table
for one variable snapshot: the values a utility-class generator
consumes, keyed by the same token names used in the configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from loguru import logger

from .settings import get_settings

if TYPE_CHECKING:
    from .resolver import ResolvedAnimation, TokenResolver


@dataclass(frozen=True)
class ResolvedTheme:
    """
    Concrete token values for one theme snapshot.

    Colors are keyed by flattened utility names (``primary``,
    ``primary-foreground``, ``chart-1``) and resolved at full opacity.
    """

    colors: dict[str, str] = field(default_factory=dict)
    radii: dict[str, str] = field(default_factory=dict)
    shadows: dict[str, str] = field(default_factory=dict)
    fonts: dict[str, str] = field(default_factory=dict)
    animations: dict[str, ResolvedAnimation] = field(default_factory=dict)
    dark_mode: str | list[str] = "media"

    @classmethod
    def from_resolver(cls, resolver: TokenResolver) -> ResolvedTheme:
        """
        Resolve every declared token.

        Any resolution error propagates; a theme is never exported with
        holes in it.
        """
        extend = resolver.config.extend
        colors = {
            name: resolver.resolve_utility_color(name) for name in resolver.color_names()
        }
        theme = cls(
            colors=colors,
            radii={n: str(resolver.resolve_derived(n)) for n in extend.border_radius},
            shadows={n: resolver.resolve_shadow(n) for n in extend.box_shadow},
            fonts={n: resolver.resolve_font_family(n) for n in extend.font_family},
            animations={n: resolver.resolve_animation(n) for n in extend.animation},
            dark_mode=resolver.config.dark_mode.model_dump(),
        )
        logger.debug(
            f"Resolved theme with {len(theme.colors)} colors, "
            f"{len(theme.radii)} radii, {len(theme.animations)} animations"
        )
        return theme

    def to_dict(self) -> dict[str, Any]:
        return {
            "darkMode": self.dark_mode,
            "colors": dict(self.colors),
            "borderRadius": dict(self.radii),
            "boxShadow": dict(self.shadows),
            "fontFamily": dict(self.fonts),
            "animation": {n: a.shorthand for n, a in self.animations.items()},
        }

    def to_css_variables(self, prefix: str | None = None, selector: str = ":root") -> str:
        """Render colors, radii, shadows and fonts as custom properties."""
        if prefix is None:
            prefix = get_settings().css_variable_prefix
        groups = [
            ("color", self.colors),
            ("radius", self.radii),
            ("shadow", self.shadows),
            ("font", self.fonts),
        ]
        lines = [
            f"  {prefix}-{group}-{name}: {value};"
            for group, values in groups
            for name, value in values.items()
        ]
        return "\n".join([f"{selector} {{", *lines, "}"])


__all__ = ["ResolvedTheme"]
