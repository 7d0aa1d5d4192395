"""
Base variable snapshots.

A theme is a set of CSS custom properties (``--primary: 0.6 0.15 250``)
that semantic tokens indirect through. Snapshots are immutable: a theme
switch selects another snapshot instead of mutating the active one, so
parallel light and dark builds never share state.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from loguru import logger

from .settings import get_settings

_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_DARK_MEDIA = re.compile(r"prefers-color-scheme\s*:\s*dark", re.IGNORECASE)
_DECLARATION = re.compile(r"--(?P<name>[\w-]+)\s*:\s*(?P<value>[^;]+?)\s*(?:;|$)")


def normalize_variable_name(name: str) -> str:
    """Strip the leading ``--`` from a custom property name."""
    return name[2:] if name.startswith("--") else name


class BaseVariables(Mapping[str, str]):
    """
    Immutable snapshot of base variable values.

    Names are stored without the leading ``--``; lookups accept either
    form. Values are kept verbatim and only validated when a token that
    references them is resolved.

    Examples
    --------
    >>> light = BaseVariables({"--primary": "0.6 0.15 250", "radius": "8px"})
    >>> light["primary"]
    '0.6 0.15 250'
    >>> light.with_overrides(radius="10px")["--radius"]
    '10px'
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None, **kwargs: str):
        merged: dict[str, str] = {}
        for source in (values or {}, kwargs):
            for name, value in source.items():
                merged[normalize_variable_name(name)] = str(value).strip()
        self._values = MappingProxyType(merged)

    def __getitem__(self, name: str) -> str:
        return self._values[normalize_variable_name(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_variable_name(name) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BaseVariables):
            return dict(self._values) == dict(other._values)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"BaseVariables({dict(self._values)!r})"

    def with_overrides(
        self, values: Mapping[str, str] | None = None, **kwargs: str
    ) -> BaseVariables:
        """Return a new snapshot with ``values`` layered over this one."""
        merged = dict(self._values)
        merged.update(BaseVariables(values, **kwargs))
        return BaseVariables(merged)

    def to_css(self, selector: str = ":root") -> str:
        """Render the snapshot as a CSS rule."""
        lines = [f"  --{name}: {value};" for name, value in self._values.items()]
        return "\n".join([f"{selector} {{", *lines, "}"])


class ColorMode(str, Enum):
    """Which variable set of a theme is active."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ThemeVariables:
    """
    Light and dark variable sets sharing the same names.

    The dark set only needs the names it redefines: like ``.dark`` over
    ``:root`` in a stylesheet, it falls back to the light value.
    """

    light: BaseVariables = field(default_factory=BaseVariables)
    dark: BaseVariables = field(default_factory=BaseVariables)

    def for_mode(self, mode: ColorMode | str) -> BaseVariables:
        """Select the snapshot for ``mode``."""
        mode = ColorMode(mode)
        if mode is ColorMode.LIGHT:
            return self.light
        return self.light.with_overrides(self.dark)

    @property
    def missing_in_dark(self) -> list[str]:
        """Light variables the dark set does not redefine."""
        return [name for name in self.light if name not in self.dark]


def _iter_leaf_rules(css: str) -> Iterator[tuple[str, list[str], str]]:
    """Yield ``(prelude, enclosing preludes, body)`` for rules without nested blocks."""
    stack: list[tuple[str, int]] = []
    prelude_start = 0
    for i, char in enumerate(css):
        if char == "{":
            # Statements such as "@tailwind base;" or declarations precede the prelude
            prelude = css[prelude_start:i].rsplit(";", 1)[-1].strip()
            stack.append((prelude, i + 1))
            prelude_start = i + 1
        elif char == "}":
            prelude_start = i + 1
            if not stack:
                continue
            prelude, body_start = stack.pop()
            body = css[body_start:i]
            if "{" not in body:
                yield prelude, [p for p, _ in stack], body


def _at_rule_context(enclosing: list[str], dark_media: bool) -> str | None:
    """``"light"``, ``"dark"`` or ``None`` (ignored) for a nesting context."""
    context = "light"
    for prelude in enclosing:
        keyword = prelude.split(None, 1)[0].lower() if prelude else ""
        if keyword in ("@layer", "@supports"):
            continue
        if keyword == "@media" and dark_media and _DARK_MEDIA.search(prelude):
            context = "dark"
            continue
        return None
    return context


def parse_css_variables(
    css: str, dark_selector: str | None = None, *, dark_media: bool = False
) -> ThemeVariables:
    """
    Extract custom properties from ``:root`` and dark-mode blocks.

    Rules nested in ``@layer`` or ``@supports`` are read as if they were
    top level. Rules inside any other at-rule are ignored, except that
    with ``dark_media`` a ``:root`` block inside
    ``@media (prefers-color-scheme: dark)`` supplies dark values.

    Parameters
    ----------
    css : str
        Stylesheet text.
    dark_selector : str | None
        Selector that carries the dark-mode overrides. Defaults to the
        ``default_dark_selector`` setting.
    dark_media : bool
        Read dark values from ``prefers-color-scheme: dark`` media blocks,
        as the ``media`` dark-mode strategy does.

    Returns
    -------
    ThemeVariables
        Light values from ``:root`` and dark values from ``dark_selector``.
    """
    if dark_selector is None:
        dark_selector = get_settings().default_dark_selector
    css = _COMMENT.sub("", css)
    light: dict[str, str] = {}
    dark: dict[str, str] = {}

    for prelude, enclosing, body in _iter_leaf_rules(css):
        context = _at_rule_context(enclosing, dark_media)
        if context is None:
            continue
        selectors = {s.strip() for s in prelude.split(",")}
        declarations = {
            m.group("name"): m.group("value") for m in _DECLARATION.finditer(body)
        }
        if ":root" in selectors:
            (dark if context == "dark" else light).update(declarations)
        if dark_selector in selectors:
            dark.update(declarations)

    logger.debug(
        f"Parsed {len(light)} light and {len(dark)} dark variables "
        f"(dark selector {dark_selector!r})"
    )
    return ThemeVariables(light=BaseVariables(light), dark=BaseVariables(dark))


__all__ = [
    "BaseVariables",
    "ColorMode",
    "ThemeVariables",
    "normalize_variable_name",
    "parse_css_variables",
]
