"""
Exceptions raised while resolving design tokens.

All resolution errors are configuration-authoring errors: they point at
an inconsistency in the static token table or the variable snapshot, and
are scoped to the single call that triggered them.
"""

from __future__ import annotations

from typing import Iterable


class ThemeTokenError(Exception):
    """Base class for all theme token errors."""

    pass


class TokenResolutionError(ThemeTokenError):
    """Raised when a single token reference cannot be resolved.

    Attributes
    ----------
    name : str
        The token, scale, animation or variable name that failed.
    """

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or name)


class UnknownTokenError(TokenResolutionError):
    """Raised when a token name is not declared in the token table."""

    def __init__(self, name: str, kind: str = "color"):
        self.kind = kind
        super().__init__(name, f"Unknown {kind} token '{name}'")


class UnknownSubKeyError(TokenResolutionError):
    """Raised when a sub-key is missing or not declared for a token."""

    def __init__(
        self,
        name: str,
        sub_key: str | None,
        available: Iterable[str] = (),
    ):
        self.sub_key = sub_key
        self.available = list(available)
        if sub_key is None:
            message = (
                f"Token '{name}' is composite and requires a sub-key "
                f"(one of: {', '.join(self.available)})"
            )
        elif self.available:
            message = (
                f"Token '{name}' has no sub-key '{sub_key}' "
                f"(one of: {', '.join(self.available)})"
            )
        else:
            message = f"Token '{name}' is simple and takes no sub-key '{sub_key}'"
        super().__init__(name, message)


class UnknownScaleError(TokenResolutionError):
    """Raised when a scale entry (radius, shadow) is not declared."""

    def __init__(self, name: str, scale: str = "borderRadius"):
        self.scale = scale
        super().__init__(name, f"Unknown {scale} scale entry '{name}'")


class DanglingAnimationReferenceError(TokenResolutionError):
    """Raised when an animation references keyframes that do not exist."""

    def __init__(self, name: str, keyframes: str):
        self.keyframes = keyframes
        super().__init__(
            name,
            f"Animation '{name}' references undefined keyframes '{keyframes}'",
        )


class InvalidColorExpressionError(TokenResolutionError):
    """Raised when a color expression or its variable value is malformed."""

    def __init__(self, name: str, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(
            name, f"Invalid color expression for '{name}': {reason} ({expression!r})"
        )


class UndefinedVariableError(InvalidColorExpressionError):
    """Raised when a referenced base variable is absent from the snapshot."""

    def __init__(self, name: str, expression: str, variable: str):
        self.variable = variable
        super().__init__(name, expression, f"variable '--{variable}' is not defined")


class InvalidDimensionError(TokenResolutionError, ValueError):
    """Raised when a root dimension variable does not hold a dimension."""

    def __init__(self, name: str, value: str):
        self.value = value
        super().__init__(name, f"Value {value!r} for '{name}' is not a dimension")


class InvalidAlphaError(TokenResolutionError, ValueError):
    """Raised when a requested alpha is outside (0, 1]."""

    def __init__(self, name: str, alpha: float):
        self.alpha = alpha
        super().__init__(
            name, f"Requested alpha {alpha!r} for '{name}' must be in (0, 1]"
        )


class UnknownPluginError(ThemeTokenError):
    """Raised when a configured plugin is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Plugin '{name}' is not registered "
            f"(registered: {', '.join(self.available) or 'none'})"
        )


__all__ = [
    "ThemeTokenError",
    "TokenResolutionError",
    "UnknownTokenError",
    "UnknownSubKeyError",
    "UnknownScaleError",
    "DanglingAnimationReferenceError",
    "InvalidColorExpressionError",
    "UndefinedVariableError",
    "InvalidDimensionError",
    "InvalidAlphaError",
    "UnknownPluginError",
]
