"""
Theme Tokens

Build-time design-token resolution for utility-CSS themes.
Semantic color tokens indirect through CSS custom properties with an
optional alpha placeholder, radius scales derive from a root variable,
and animations bind keyframes to utility classes.
"""

from .config import (
    # Enums
    DarkModeStrategy,
    # Config classes
    DarkModeConfig,
    SimpleColorToken,
    CompositeColorToken,
    KeyframeDefinition,
    ContainerConfig,
    ThemeExtension,
    ThemeConfig,
    TokenConfig,
    # Factory functions
    create_default_config,
)

from .exceptions import (
    ThemeTokenError,
    TokenResolutionError,
    UnknownTokenError,
    UnknownSubKeyError,
    UnknownScaleError,
    DanglingAnimationReferenceError,
    InvalidColorExpressionError,
    UndefinedVariableError,
    InvalidDimensionError,
    InvalidAlphaError,
    UnknownPluginError,
)

from .expressions import (
    ALPHA_PLACEHOLDER,
    AlphaMode,
    ColorExpression,
    Dimension,
    parse_color_expression,
    parse_dimension_expression,
    parse_animation_shorthand,
)

from .variables import (
    BaseVariables,
    ColorMode,
    ThemeVariables,
    parse_css_variables,
)

from .content import ContentScope, expand_braces

from .resolver import (
    KeyframeStep,
    ResolvedAnimation,
    TokenResolver,
)

from .plugins import (
    ClassRule,
    UtilityPlugin,
    AnimateUtilitiesPlugin,
    PluginRegistry,
    default_registry,
)

from .builders import TokenConfigBuilder

from .validation import (
    ValidationResult,
    TokenConfigValidationError,
    validate_config,
)

from .serialization import TokenConfigSerializer

from .export import ResolvedTheme

from .settings import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    # Config
    "DarkModeStrategy",
    "DarkModeConfig",
    "SimpleColorToken",
    "CompositeColorToken",
    "KeyframeDefinition",
    "ContainerConfig",
    "ThemeExtension",
    "ThemeConfig",
    "TokenConfig",
    "create_default_config",
    # Exceptions
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
    # Expressions
    "ALPHA_PLACEHOLDER",
    "AlphaMode",
    "ColorExpression",
    "Dimension",
    "parse_color_expression",
    "parse_dimension_expression",
    "parse_animation_shorthand",
    # Variables
    "BaseVariables",
    "ColorMode",
    "ThemeVariables",
    "parse_css_variables",
    # Content
    "ContentScope",
    "expand_braces",
    # Resolver
    "KeyframeStep",
    "ResolvedAnimation",
    "TokenResolver",
    # Plugins
    "ClassRule",
    "UtilityPlugin",
    "AnimateUtilitiesPlugin",
    "PluginRegistry",
    "default_registry",
    # Builders
    "TokenConfigBuilder",
    # Validation
    "ValidationResult",
    "TokenConfigValidationError",
    "validate_config",
    # Serialization
    "TokenConfigSerializer",
    # Export
    "ResolvedTheme",
    # Settings
    "Settings",
    "get_settings",
]
