"""
Parsing of the expression strings found in a token table.

Color expressions indirect through CSS custom properties
(``oklch(var(--primary) / <alpha-value>)``), radius scales are offsets
from a root variable (``calc(var(--radius) - 2px)``) and animations use
the CSS ``animation`` shorthand. Everything here is a pure function of
its input strings; evaluation against variable snapshots happens in
:mod:`theme_tokens.resolver`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Mapping

from .exceptions import (
    InvalidColorExpressionError,
    InvalidDimensionError,
    UndefinedVariableError,
)

if TYPE_CHECKING:
    from .variables import BaseVariables


ALPHA_PLACEHOLDER = "<alpha-value>"

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"

_COLOR_EXPRESSION = re.compile(
    r"^\s*(?P<space>[a-zA-Z][\w-]*)\(\s*var\(\s*--(?P<var>[\w-]+)\s*\)\s*"
    r"(?:/\s*(?P<alpha>" + re.escape(ALPHA_PLACEHOLDER) + r"|" + _NUMBER + r"%?)\s*)?"
    r"\)\s*$"
)
_VAR_REFERENCE = re.compile(r"var\(\s*--(?P<var>[\w-]+)\s*(?:,\s*(?P<fallback>[^()]*))?\)")
_CHANNEL = re.compile(
    r"^(?:none|" + _NUMBER + r"(?:%|deg|rad|grad|turn)?)$", re.IGNORECASE
)
_DIMENSION = re.compile(r"^\s*(?P<value>" + _NUMBER + r")(?P<unit>px|rem|em|%)?\s*$")
_DERIVED = re.compile(
    r"^\s*calc\(\s*var\(\s*--(?P<var>[\w-]+)\s*\)\s*(?P<op>[+-])\s*"
    r"(?P<offset>" + _NUMBER + r"(?:px|rem|em|%)?)\s*\)\s*$"
)
_ROOT_ONLY = re.compile(r"^\s*var\(\s*--(?P<var>[\w-]+)\s*\)\s*$")
_TIME = re.compile(r"^" + _NUMBER + r"m?s$")
_PERCENT = re.compile(r"^(?P<value>" + _NUMBER + r")%$")

EASING_KEYWORDS = frozenset(
    {"linear", "ease", "ease-in", "ease-out", "ease-in-out", "step-start", "step-end"}
)
EASING_FUNCTIONS = ("cubic-bezier(", "steps(", "linear(")
DIRECTIONS = frozenset({"normal", "reverse", "alternate", "alternate-reverse"})
FILL_MODES = frozenset({"none", "forwards", "backwards", "both"})
PLAY_STATES = frozenset({"running", "paused"})


def format_number(value: float) -> str:
    """Format a number the way CSS authors write it (``6``, ``0.4``)."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_alpha(value: float) -> str:
    """
    Format an alpha value at full precision in plain decimal notation.

    Examples
    --------
    >>> format_alpha(1.0)
    '1'
    >>> format_alpha(1e-7)
    '0.0000001'
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# =============================================================================
# Color expressions
# =============================================================================


class AlphaMode(str, Enum):
    """How a color expression treats the alpha channel."""

    OPAQUE = "opaque"  # no alpha component, requested alpha is ignored
    PLACEHOLDER = "placeholder"  # substituted with the requested alpha
    FIXED = "fixed"  # a fixed multiplier, requested alpha is ignored


@dataclass(frozen=True)
class ColorExpression:
    """A parsed color template.

    Attributes
    ----------
    source : str
        The expression as written in the token table.
    space : str | None
        Color function name (``oklch``); ``None`` for literals.
    variable : str | None
        Base variable name without the leading ``--``.
    alpha_mode : AlphaMode
        How requested alpha values are applied.
    fixed_alpha : str | None
        The literal alpha for ``AlphaMode.FIXED``.
    """

    source: str
    space: str | None = None
    variable: str | None = None
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    fixed_alpha: str | None = None

    @property
    def is_literal(self) -> bool:
        return self.variable is None

    @property
    def has_placeholder(self) -> bool:
        return self.alpha_mode is AlphaMode.PLACEHOLDER


def parse_color_expression(expression: str, name: str = "") -> ColorExpression:
    """
    Parse a color template.

    Parameters
    ----------
    expression : str
        Template such as ``oklch(var(--ring) / <alpha-value>)``.
    name : str
        Token name used in error messages.

    Returns
    -------
    ColorExpression
        Parsed expression. Strings without any ``var()`` reference or
        placeholder are literals (``#fff``, ``transparent``).

    Raises
    ------
    InvalidColorExpressionError
        If the template references a variable or placeholder but does not
        follow ``space(var(--name) [/ alpha])``.
    """
    match = _COLOR_EXPRESSION.match(expression)
    if match is None:
        if "var(" in expression or ALPHA_PLACEHOLDER in expression:
            raise InvalidColorExpressionError(
                name, expression, "expected 'space(var(--name) [/ alpha])'"
            )
        return ColorExpression(source=expression)

    alpha = match.group("alpha")
    if alpha is None:
        mode, fixed = AlphaMode.OPAQUE, None
    elif alpha == ALPHA_PLACEHOLDER:
        mode, fixed = AlphaMode.PLACEHOLDER, None
    else:
        mode, fixed = AlphaMode.FIXED, alpha

    return ColorExpression(
        source=expression,
        space=match.group("space").lower(),
        variable=match.group("var"),
        alpha_mode=mode,
        fixed_alpha=fixed,
    )


def parse_color_channels(
    space: str, raw: str, name: str = "", expression: str = ""
) -> tuple[str, str, str]:
    """
    Validate a base variable value as a three-channel color triple.

    Parameters
    ----------
    space : str
        The color space the triple is interpreted in.
    raw : str
        Variable value, e.g. ``"0.6 0.15 250"``.
    name, expression : str
        Context for error messages.

    Returns
    -------
    tuple[str, str, str]
        The three channels with whitespace normalised.

    Raises
    ------
    InvalidColorExpressionError
        If the value is not three valid channels, carries its own alpha,
        or is out of range for ``oklch``.
    """
    expression = expression or raw
    if "/" in raw:
        raise InvalidColorExpressionError(
            name, expression, f"base value {raw!r} must not carry an alpha component"
        )
    channels = raw.split()
    if len(channels) != 3:
        raise InvalidColorExpressionError(
            name, expression, f"base value {raw!r} must have exactly three channels"
        )
    for channel in channels:
        if not _CHANNEL.match(channel):
            raise InvalidColorExpressionError(
                name, expression, f"channel {channel!r} is not a number"
            )

    if space == "oklch":
        lightness, chroma = channels[0], channels[1]
        if lightness.lower() != "none":
            value, is_percent = _channel_value(lightness)
            upper = 100.0 if is_percent else 1.0
            if not 0.0 <= value <= upper:
                raise InvalidColorExpressionError(
                    name, expression, f"lightness {lightness!r} is out of range"
                )
        if chroma.lower() != "none" and _channel_value(chroma)[0] < 0:
            raise InvalidColorExpressionError(
                name, expression, f"chroma {chroma!r} must not be negative"
            )

    return channels[0], channels[1], channels[2]


def _channel_value(channel: str) -> tuple[float, bool]:
    match = _PERCENT.match(channel)
    if match:
        return float(match.group("value")), True
    return float(re.match(_NUMBER, channel).group(0)), False


def render_color(
    space: str, channels: tuple[str, str, str], alpha: str | None = None
) -> str:
    """Render ``space(c1 c2 c3[ / alpha])``."""
    body = " ".join(channels)
    if alpha is not None:
        body = f"{body} / {alpha}"
    return f"{space}({body})"


def referenced_variables(text: str) -> list[str]:
    """Names of every ``var(--name)`` referenced in ``text``, in order."""
    return [m.group("var") for m in _VAR_REFERENCE.finditer(text)]


def substitute_variables(text: str, variables: BaseVariables, name: str = "") -> str:
    """
    Replace ``var(--name[, fallback])`` references with snapshot values.

    Raises
    ------
    UndefinedVariableError
        If a variable is undefined and the reference has no fallback.
    """

    def _replace(match: re.Match[str]) -> str:
        var = match.group("var")
        if var in variables:
            return variables[var]
        fallback = match.group("fallback")
        if fallback is not None:
            return fallback.strip()
        raise UndefinedVariableError(name, text, var)

    return _VAR_REFERENCE.sub(_replace, text)


# =============================================================================
# Dimensions
# =============================================================================


@dataclass(frozen=True)
class Dimension:
    """A CSS length such as ``6px`` or ``0.5rem``."""

    value: float
    unit: str = "px"

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"

    def to_px(self, root_font_size_px: float = 16.0) -> Dimension:
        if self.unit in ("rem", "em"):
            return Dimension(self.value * root_font_size_px, "px")
        return self

    def offset(self, other: Dimension, root_font_size_px: float = 16.0) -> Dimension:
        """Add ``other``, converting to px when the units differ."""
        if self.unit == other.unit:
            return Dimension(self.value + other.value, self.unit)
        if self.unit == "" and self.value == 0:
            return other
        if "%" in (self.unit, other.unit):
            raise ValueError(f"Cannot combine {self} and {other}")
        left = self.to_px(root_font_size_px)
        right = other.to_px(root_font_size_px)
        return Dimension(left.value + right.value, "px")


def parse_dimension(text: str) -> Dimension | None:
    """Parse ``8px``, ``0.5rem`` or ``0``; ``None`` when not a dimension."""
    match = _DIMENSION.match(text)
    if match is None:
        return None
    unit = match.group("unit") or ""
    value = float(match.group("value"))
    if unit == "" and value != 0:
        return None
    return Dimension(value, unit)


@dataclass(frozen=True)
class DimensionExpression:
    """A scale value expressed relative to a root variable.

    Exactly one of ``root`` or ``literal`` is set. ``offset`` is only
    meaningful together with ``root``.
    """

    source: str
    root: str | None = None
    offset: Dimension | None = None
    literal: Dimension | None = None

    def evaluate(
        self,
        variables: Mapping[str, str],
        name: str = "",
        root_font_size_px: float = 16.0,
    ) -> Dimension:
        """
        Evaluate against the current root value.

        Raises
        ------
        UndefinedVariableError
            If the root variable is missing from ``variables``.
        InvalidDimensionError
            If the root value is not a dimension, or cannot be combined
            with the offset.
        """
        if self.literal is not None:
            return self.literal
        if self.root not in variables:
            raise UndefinedVariableError(name, self.source, self.root)
        raw = variables[self.root]
        base = parse_dimension(raw)
        if base is None:
            raise InvalidDimensionError(name, raw)
        if self.offset is None:
            return base
        try:
            return base.offset(self.offset, root_font_size_px)
        except ValueError as e:
            raise InvalidDimensionError(name, raw) from e


def parse_dimension_expression(expression: str) -> DimensionExpression:
    """
    Parse a radius-style scale value.

    Accepts ``var(--radius)``, ``calc(var(--radius) - 2px)``,
    ``calc(var(--radius) + 0.25rem)`` and literal dimensions.

    Raises
    ------
    ValueError
        If the expression matches none of those forms.
    """
    match = _ROOT_ONLY.match(expression)
    if match:
        return DimensionExpression(source=expression, root=match.group("var"))

    match = _DERIVED.match(expression)
    if match:
        offset = parse_dimension(match.group("offset"))
        if offset is None:
            raise ValueError(f"Invalid offset in {expression!r}")
        if match.group("op") == "-":
            offset = Dimension(-offset.value, offset.unit)
        return DimensionExpression(
            source=expression, root=match.group("var"), offset=offset
        )

    literal = parse_dimension(expression)
    if literal is not None:
        return DimensionExpression(source=expression, literal=literal)

    raise ValueError(
        f"Expected 'var(--root)', 'calc(var(--root) +/- <length>)' or a length, "
        f"got {expression!r}"
    )


# =============================================================================
# Animation shorthand and keyframe selectors
# =============================================================================


@dataclass(frozen=True)
class AnimationShorthand:
    """Components of a single CSS ``animation`` shorthand value."""

    keyframes: str
    duration: str = "0s"
    easing: str = "ease"
    delay: str = "0s"
    iteration_count: str = "1"
    direction: str = "normal"
    fill_mode: str = "none"
    play_state: str = "running"


def _split_top_level(text: str) -> list[str]:
    """Split on whitespace outside parentheses."""
    parts: list[str] = []
    depth = 0
    current = ""
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char.isspace() and depth == 0:
            if current:
                parts.append(current)
            current = ""
        else:
            current += char
    if current:
        parts.append(current)
    return parts


def parse_animation_shorthand(value: str) -> AnimationShorthand:
    """
    Parse ``accordion-down 0.2s ease-out`` style values.

    The first time value is the duration and the second the delay.
    Remaining keywords are classified by CSS keyword sets; the one token
    left over is the keyframes name.

    Raises
    ------
    ValueError
        If the value lists several animations, has no keyframes name, or
        has more than one unclassified token.
    """
    if "," in re.sub(r"\([^)]*\)", "", value):
        raise ValueError(f"Only a single animation per entry is supported: {value!r}")

    fields: dict[str, str] = {}
    times: list[str] = []
    names: list[str] = []

    for part in _split_top_level(value):
        lowered = part.lower()
        if _TIME.match(lowered):
            times.append(part)
        elif lowered in EASING_KEYWORDS or lowered.startswith(EASING_FUNCTIONS):
            fields.setdefault("easing", part)
        elif lowered == "infinite" or re.fullmatch(_NUMBER, part):
            fields.setdefault("iteration_count", part)
        elif lowered in DIRECTIONS and "direction" not in fields:
            fields["direction"] = part
        elif lowered in FILL_MODES and lowered != "none" and "fill_mode" not in fields:
            fields["fill_mode"] = part
        elif lowered in PLAY_STATES:
            fields.setdefault("play_state", part)
        else:
            names.append(part)

    if len(names) != 1:
        raise ValueError(
            f"Animation {value!r} must name exactly one keyframes rule, got {names}"
        )
    if len(times) > 2:
        raise ValueError(f"Animation {value!r} has more than two time values")
    if times:
        fields["duration"] = times[0]
    if len(times) == 2:
        fields["delay"] = times[1]

    return AnimationShorthand(keyframes=names[0], **fields)


def parse_keyframe_selector(selector: str) -> tuple[float, ...]:
    """
    Convert a keyframe step selector into percentage offsets.

    ``from`` is 0, ``to`` is 100 and comma-separated lists
    (``0%, 100%``) yield several offsets.

    Raises
    ------
    ValueError
        If a part is neither a keyword nor a percentage in [0, 100].
    """
    offsets = []
    for part in selector.split(","):
        part = part.strip().lower()
        if part == "from":
            offsets.append(0.0)
        elif part == "to":
            offsets.append(100.0)
        else:
            match = _PERCENT.match(part)
            if match is None or not 0 <= float(match.group("value")) <= 100:
                raise ValueError(f"Invalid keyframe selector {selector!r}")
            offsets.append(float(match.group("value")))
    return tuple(offsets)


__all__ = [
    "ALPHA_PLACEHOLDER",
    "AlphaMode",
    "ColorExpression",
    "parse_color_expression",
    "parse_color_channels",
    "render_color",
    "referenced_variables",
    "substitute_variables",
    "format_number",
    "format_alpha",
    "Dimension",
    "DimensionExpression",
    "parse_dimension",
    "parse_dimension_expression",
    "AnimationShorthand",
    "parse_animation_shorthand",
    "parse_keyframe_selector",
]
