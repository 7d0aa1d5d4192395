"""
Token resolution.

:class:`TokenResolver` maps semantic token names to concrete CSS values
for one immutable token table. Variable state is never ambient: every
call reads either the snapshot bound at construction or the one passed
explicitly, so light and dark builds can resolve side by side.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from loguru import logger

from .config import (
    DEFAULT_SUB_KEY,
    CompositeColorToken,
    SimpleColorToken,
    TokenConfig,
)
from .content import ContentScope
from .exceptions import (
    DanglingAnimationReferenceError,
    InvalidAlphaError,
    UndefinedVariableError,
    UnknownScaleError,
    UnknownSubKeyError,
    UnknownTokenError,
)
from .expressions import (
    AlphaMode,
    ColorExpression,
    Dimension,
    format_alpha,
    parse_animation_shorthand,
    parse_color_channels,
    parse_color_expression,
    parse_dimension_expression,
    parse_keyframe_selector,
    render_color,
    substitute_variables,
)
from .settings import Settings, get_settings
from .variables import BaseVariables

_UTILITY_ALPHA = re.compile(r"^(?P<name>.+?)/(?P<alpha>\d+(?:\.\d+)?)$")


@dataclass(frozen=True)
class KeyframeStep:
    """One style snapshot of a keyframes rule."""

    selector: str
    offsets: tuple[float, ...]
    styles: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedAnimation:
    """An animation bound to its keyframes and timing metadata."""

    name: str
    keyframes_name: str
    keyframes: tuple[KeyframeStep, ...]
    duration: str
    easing: str
    delay: str = "0s"
    iteration_count: str = "1"
    direction: str = "normal"
    fill_mode: str = "none"
    play_state: str = "running"

    @property
    def shorthand(self) -> str:
        """The ``animation`` declaration value."""
        parts = [self.keyframes_name, self.duration, self.easing]
        if self.delay != "0s":
            parts.append(self.delay)
        if self.iteration_count != "1":
            parts.append(self.iteration_count)
        if self.direction != "normal":
            parts.append(self.direction)
        if self.fill_mode != "none":
            parts.append(self.fill_mode)
        if self.play_state != "running":
            parts.append(self.play_state)
        return " ".join(parts)


class TokenResolver:
    """
    Resolve semantic tokens of a :class:`TokenConfig`.

    Parameters
    ----------
    config : TokenConfig
        The token table. Treated as immutable.
    variables : BaseVariables | None
        Snapshot used when a call does not pass ``variables=``.
    settings : Settings | None
        Overrides :func:`get_settings`.

    Examples
    --------
    >>> resolver = TokenResolver(
    ...     create_default_config(),
    ...     BaseVariables({"--primary": "0.6 0.15 250", "--radius": "8px"}),
    ... )
    >>> resolver.resolve("primary", "DEFAULT", 0.4)
    'oklch(0.6 0.15 250 / 0.4)'
    >>> str(resolver.resolve_derived("md"))
    '6px'
    """

    def __init__(
        self,
        config: TokenConfig,
        variables: BaseVariables | None = None,
        settings: Settings | None = None,
    ):
        self.config = config
        self.variables = variables if variables is not None else BaseVariables()
        self.settings = settings or get_settings()
        self.content_scope = ContentScope(config.content)

    def with_variables(self, variables: BaseVariables) -> TokenResolver:
        """Return a resolver over the same table bound to another snapshot."""
        return TokenResolver(self.config, variables, self.settings)

    def _snapshot(self, variables: BaseVariables | None) -> BaseVariables:
        return variables if variables is not None else self.variables

    # -------------------------------------------------------------------------
    # Colors
    # -------------------------------------------------------------------------

    def _expression_source(self, token_name: str, sub_key: str | None) -> str:
        token = self.config.extend.colors.get(token_name)
        if token is None:
            raise UnknownTokenError(token_name)

        if isinstance(token, CompositeColorToken):
            # A missing sub-key never falls back to DEFAULT
            if sub_key is None or sub_key not in token.entries:
                raise UnknownSubKeyError(token_name, sub_key, token.sub_keys)
            return token.entries[sub_key]

        if sub_key not in (None, DEFAULT_SUB_KEY):
            raise UnknownSubKeyError(token_name, sub_key)
        return token.expression

    def color_expression(
        self, token_name: str, sub_key: str | None = None
    ) -> ColorExpression:
        """Parsed expression for ``(token_name, sub_key)``."""
        source = self._expression_source(token_name, sub_key)
        return parse_color_expression(source, _qualified(token_name, sub_key))

    def supports_alpha(self, token_name: str, sub_key: str | None = None) -> bool:
        """Whether the token carries an alpha placeholder."""
        return self.color_expression(token_name, sub_key).has_placeholder

    def resolve(
        self,
        token_name: str,
        sub_key: str | None = None,
        alpha: float | None = None,
        *,
        variables: BaseVariables | None = None,
    ) -> str:
        """
        Resolve a color token to a concrete color string.

        Parameters
        ----------
        token_name : str
            Declared color token (``primary``, ``sidebar``).
        sub_key : str | None
            Required for composite tokens. ``DEFAULT`` is accepted for
            simple tokens.
        alpha : float | None
            Opacity in (0, 1]. Applied only when the expression carries an
            alpha placeholder, ignored otherwise.
        variables : BaseVariables | None
            Snapshot for this call; defaults to the bound one.

        Returns
        -------
        str
            E.g. ``oklch(0.6 0.15 250 / 0.4)``.

        Raises
        ------
        UnknownTokenError
            If the token is not declared.
        UnknownSubKeyError
            If the sub-key is missing for a composite token or undeclared.
        InvalidAlphaError
            If ``alpha`` is outside (0, 1].
        InvalidColorExpressionError
            If the template or the variable value is malformed, including
            ``UndefinedVariableError`` for a missing variable.
        """
        qualified = _qualified(token_name, sub_key)
        if alpha is not None and not 0 < alpha <= 1:
            raise InvalidAlphaError(qualified, alpha)

        expression = self.color_expression(token_name, sub_key)
        if expression.is_literal:
            return expression.source

        snapshot = self._snapshot(variables)
        if expression.variable not in snapshot:
            raise UndefinedVariableError(qualified, expression.source, expression.variable)

        channels = parse_color_channels(
            expression.space,
            snapshot[expression.variable],
            qualified,
            expression.source,
        )

        if expression.alpha_mode is AlphaMode.PLACEHOLDER:
            rendered_alpha = format_alpha(alpha) if alpha is not None else None
        elif expression.alpha_mode is AlphaMode.FIXED:
            rendered_alpha = expression.fixed_alpha
        else:
            rendered_alpha = None

        if alpha is not None and expression.alpha_mode is not AlphaMode.PLACEHOLDER:
            logger.debug(f"Ignoring alpha {alpha} for '{qualified}': no placeholder")

        return render_color(expression.space, channels, rendered_alpha)

    def color_names(self) -> list[str]:
        """Flattened utility names of every color entry (``primary-foreground``)."""
        names = []
        for token_name, token in self.config.extend.colors.items():
            if isinstance(token, SimpleColorToken):
                names.append(token_name)
                continue
            for sub_key in token.entries:
                names.append(_flat_name(token_name, sub_key))
        return names

    def split_color_name(self, name: str) -> tuple[str, str | None]:
        """
        Map a flattened utility name to ``(token, sub_key)``.

        The longest declared token that prefixes ``name`` wins, so
        ``sidebar-primary-foreground`` maps to ``("sidebar",
        "primary-foreground")`` and a bare composite name maps to its
        ``DEFAULT`` entry.

        Raises
        ------
        UnknownTokenError
            If no declared entry produces ``name``.
        """
        colors = self.config.extend.colors
        for token_name in sorted(colors, key=len, reverse=True):
            token = colors[token_name]
            if name == token_name:
                if isinstance(token, CompositeColorToken):
                    if token.has_default:
                        return token_name, DEFAULT_SUB_KEY
                    continue
                return token_name, None
            prefix = f"{token_name}-"
            if isinstance(token, CompositeColorToken) and name.startswith(prefix):
                sub_key = name[len(prefix) :]
                if sub_key in token.entries and sub_key != DEFAULT_SUB_KEY:
                    return token_name, sub_key
        raise UnknownTokenError(name)

    def resolve_utility_color(
        self, name: str, *, variables: BaseVariables | None = None
    ) -> str:
        """
        Resolve a color as written in a utility class.

        ``primary/50`` requests 50% opacity; ``primary/0.5`` is accepted
        too.
        """
        alpha = None
        match = _UTILITY_ALPHA.match(name)
        if match:
            name = match.group("name")
            value = float(match.group("alpha"))
            alpha = value / 100 if value > 1 or "." not in match.group("alpha") else value
        token_name, sub_key = self.split_color_name(name)
        return self.resolve(token_name, sub_key, alpha, variables=variables)

    # -------------------------------------------------------------------------
    # Scales
    # -------------------------------------------------------------------------

    def resolve_derived(
        self, scale_name: str, *, variables: BaseVariables | None = None
    ) -> Dimension:
        """
        Evaluate a border-radius scale entry against the current root.

        Recomputed on every call; changing the root variable shifts every
        derived entry by the same amount.

        Raises
        ------
        UnknownScaleError
            If ``scale_name`` is not declared.
        UndefinedVariableError
            If the root variable is missing.
        InvalidDimensionError
            If the root value is not a length.
        """
        source = self.config.extend.border_radius.get(scale_name)
        if source is None:
            raise UnknownScaleError(scale_name)
        expression = parse_dimension_expression(source)
        return expression.evaluate(
            self._snapshot(variables),
            scale_name,
            self.settings.root_font_size_px,
        )

    def resolve_shadow(
        self, name: str, *, variables: BaseVariables | None = None
    ) -> str:
        """Resolve a box-shadow entry, substituting any ``var()`` references."""
        source = self.config.extend.box_shadow.get(name)
        if source is None:
            raise UnknownScaleError(name, scale="boxShadow")
        return substitute_variables(source, self._snapshot(variables), name)

    # -------------------------------------------------------------------------
    # Fonts and animations
    # -------------------------------------------------------------------------

    def resolve_font_family(self, name: str) -> str:
        """Render a font stack, quoting family names that contain spaces."""
        families = self.config.extend.font_family.get(name)
        if families is None:
            raise UnknownTokenError(name, kind="fontFamily")
        return ", ".join(_quote_family(f) for f in families)

    def resolve_animation(self, name: str) -> ResolvedAnimation:
        """
        Bind an animation to its keyframes and timing.

        Raises
        ------
        UnknownTokenError
            If ``name`` is not in the animation table.
        DanglingAnimationReferenceError
            If the keyframes it references are not defined.
        """
        value = self.config.extend.animation.get(name)
        if value is None:
            raise UnknownTokenError(name, kind="animation")
        shorthand = parse_animation_shorthand(value)

        definition = self.config.extend.keyframes.get(shorthand.keyframes)
        if definition is None:
            raise DanglingAnimationReferenceError(name, shorthand.keyframes)

        steps = tuple(
            KeyframeStep(
                selector=selector,
                offsets=parse_keyframe_selector(selector),
                styles=dict(styles),
            )
            for selector, styles in definition.steps.items()
        )
        return ResolvedAnimation(
            name=name,
            keyframes_name=shorthand.keyframes,
            keyframes=steps,
            duration=shorthand.duration,
            easing=shorthand.easing,
            delay=shorthand.delay,
            iteration_count=shorthand.iteration_count,
            direction=shorthand.direction,
            fill_mode=shorthand.fill_mode,
            play_state=shorthand.play_state,
        )

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def match_content(self, file_path: str) -> bool:
        """Whether ``file_path`` is in the content scope."""
        return self.content_scope.matches(file_path)


def _qualified(token_name: str, sub_key: str | None) -> str:
    return token_name if sub_key is None else f"{token_name}.{sub_key}"


def _flat_name(token_name: str, sub_key: str) -> str:
    return token_name if sub_key == DEFAULT_SUB_KEY else f"{token_name}-{sub_key}"


def _quote_family(family: str) -> str:
    if any(c.isspace() for c in family) and not family.startswith(("'", '"')):
        return f'"{family}"'
    return family


__all__ = [
    "KeyframeStep",
    "ResolvedAnimation",
    "TokenResolver",
]
