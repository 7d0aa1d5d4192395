"""
Token table validation

Checks a whole configuration for internal consistency before a build.
Resolution still fails per call; this collects every problem at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from .config import CompositeColorToken, SimpleColorToken, TokenConfig
from .content import ContentScope
from .exceptions import InvalidColorExpressionError
from .expressions import (
    parse_animation_shorthand,
    parse_color_expression,
    parse_dimension_expression,
    referenced_variables,
)
from .variables import BaseVariables


@dataclass
class ValidationResult:
    """
    Result of token table validation.

    Attributes
    ----------
    valid : bool
        Whether the table passed all validation checks.
    errors : list[str]
        List of validation errors (fatal).
    warnings : list[str]
        List of validation warnings (non-fatal).
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    def raise_if_invalid(self) -> None:
        """Raise TokenConfigValidationError if not valid."""
        if not self.valid:
            raise TokenConfigValidationError(self.errors, self.warnings)


class TokenConfigValidationError(Exception):
    """Exception raised when token table validation fails."""

    def __init__(self, errors: list[str], warnings: list[str] | None = None):
        self.errors = errors
        self.warnings = warnings or []
        message = "Token table validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        if self.warnings:
            message += "\nWarnings:\n" + "\n".join(f"  - {w}" for w in self.warnings)
        super().__init__(message)


def _color_sources(config: TokenConfig) -> list[tuple[str, str]]:
    sources = []
    for name, token in config.extend.colors.items():
        if isinstance(token, SimpleColorToken):
            sources.append((name, token.expression))
        else:
            sources.extend((f"{name}.{key}", expr) for key, expr in token.entries.items())
    return sources


def validate_config(
    config: TokenConfig, variables: BaseVariables | None = None
) -> ValidationResult:
    """
    Validate a token table.

    Checks:
    - Every animation references defined keyframes
    - Color templates are well formed
    - Keyframes are used by some animation (warning)
    - Composite colors declare ``DEFAULT`` (warning; usage sites must
      name a sub-key otherwise)
    - Content patterns are not declared twice (warning)
    - When ``variables`` is given, every referenced variable is defined
      (warning, since variables may be injected later)

    Parameters
    ----------
    config : TokenConfig
        The table to validate.
    variables : BaseVariables | None
        Optional snapshot to check variable references against.

    Returns
    -------
    ValidationResult
        Validation result with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []
    extend = config.extend

    referenced_keyframes = set()
    for name, value in extend.animation.items():
        keyframes = parse_animation_shorthand(value).keyframes
        referenced_keyframes.add(keyframes)
        if keyframes not in extend.keyframes:
            errors.append(
                f"Animation '{name}' references undefined keyframes '{keyframes}'"
            )

    for name in extend.keyframes:
        if name not in referenced_keyframes:
            warnings.append(f"Keyframes '{name}' are not used by any animation")

    referenced: list[tuple[str, str]] = []
    for name, source in _color_sources(config):
        try:
            expression = parse_color_expression(source, name)
        except InvalidColorExpressionError as e:
            errors.append(str(e))
            continue
        if expression.variable is not None:
            referenced.append((name, expression.variable))

    for name, token in extend.colors.items():
        if isinstance(token, CompositeColorToken) and not token.has_default:
            warnings.append(
                f"Color '{name}' has no DEFAULT entry; usages must name a sub-key"
            )

    for name, source in extend.border_radius.items():
        root = parse_dimension_expression(source).root
        if root is not None:
            referenced.append((f"borderRadius.{name}", root))
    for name, source in extend.box_shadow.items():
        referenced.extend((f"boxShadow.{name}", var) for var in referenced_variables(source))

    for pattern in ContentScope(config.content).duplicate_patterns:
        warnings.append(f"Content pattern '{pattern}' is declared more than once")

    if variables is not None:
        for name, var in referenced:
            if var not in variables:
                warnings.append(f"'{name}' references undefined variable '--{var}'")

    for warning in warnings:
        logger.warning(warning)

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


__all__ = [
    "ValidationResult",
    "TokenConfigValidationError",
    "validate_config",
]
