"""
Examples demonstrating token resolution for the reference theme.

Walks through color resolution with and without alpha, light/dark
switching, derived radii, animations and content matching.
"""

from theme_tokens import (
    # Config
    create_default_config,
    TokenConfigBuilder,
    # Variables
    BaseVariables,
    parse_css_variables,
    # Resolution
    TokenResolver,
    ResolvedTheme,
    default_registry,
    validate_config,
)

INDEX_CSS = """
:root {
  --background: 1 0 0;
  --foreground: 0.145 0 0;
  --primary: 0.6 0.15 250;
  --primary-foreground: 0.985 0 0;
  --ring: 0.708 0 0;
  --radius: 0.625rem;
}

.dark {
  --background: 0.145 0 0;
  --foreground: 0.985 0 0;
  --primary: 0.7 0.12 250;
  --primary-foreground: 0.205 0 0;
  --ring: 0.556 0 0;
}
"""


# =============================================================================
# Example 1: Colors
# =============================================================================

def example_colors():
    """Demonstrate color resolution."""

    print("=" * 60)
    print("Example 1: Colors")
    print("=" * 60)

    theme = parse_css_variables(INDEX_CSS)
    resolver = TokenResolver(create_default_config(), theme.light)

    print(f"primary:            {resolver.resolve('primary', 'DEFAULT')}")
    print(f"primary @ 0.4:      {resolver.resolve('primary', 'DEFAULT', 0.4)}")
    print(f"primary-foreground: {resolver.resolve('primary', 'foreground', 0.4)}  (alpha ignored)")
    print(f"ring/50:            {resolver.resolve_utility_color('ring/50')}")

    dark = resolver.with_variables(theme.for_mode("dark"))
    print(f"\nDark primary:       {dark.resolve('primary', 'DEFAULT')}")
    print(f"Light still:        {resolver.resolve('primary', 'DEFAULT')}")

    return resolver


# =============================================================================
# Example 2: Derived radii
# =============================================================================

def example_radii():
    """Demonstrate radius scales derived from --radius."""

    print("\n" + "=" * 60)
    print("Example 2: Derived radii")
    print("=" * 60)

    resolver = TokenResolver(create_default_config(), BaseVariables({"radius": "8px"}))
    for name in ["lg", "md", "sm"]:
        print(f"  {name}: {resolver.resolve_derived(name)}")

    resolver = resolver.with_variables(BaseVariables({"radius": "0.5rem"}))
    print("\nWith --radius: 0.5rem")
    for name in ["lg", "md", "sm"]:
        print(f"  {name}: {resolver.resolve_derived(name)}")


# =============================================================================
# Example 3: Animations and plugins
# =============================================================================

def example_animations():
    """Demonstrate animation binding and the animate plugin."""

    print("\n" + "=" * 60)
    print("Example 3: Animations")
    print("=" * 60)

    config = (TokenConfigBuilder()
        .with_keyframes("spin", {"from": {"rotate": "0deg"}, "to": {"rotate": "360deg"}})
        .with_animation("spin", "1s", "linear", extra="infinite")
        .with_plugins("animate")
        .build())

    result = validate_config(config)
    print(f"Valid: {result.valid}, warnings: {result.warnings}")

    rules = default_registry().compose(TokenResolver(config))
    for rule in rules:
        print(rule.to_css())


# =============================================================================
# Example 4: Content scope and export
# =============================================================================

def example_content_and_export(resolver: TokenResolver):
    """Demonstrate content matching and resolved theme export."""

    print("\n" + "=" * 60)
    print("Example 4: Content scope and export")
    print("=" * 60)

    for path in ["index.html", "src/components/Button.tsx", "node_modules/x/index.js"]:
        print(f"  {path}: {resolver.match_content(path)}")

    config = (TokenConfigBuilder()
        .with_oklch_color("background")
        .with_oklch_color("foreground")
        .with_composite_color("primary", {
            "DEFAULT": "oklch(var(--primary) / <alpha-value>)",
            "foreground": "oklch(var(--primary-foreground))",
        })
        .with_radius_scale("radius", {"lg": 0, "md": -2, "sm": -4})
        .build())
    theme = ResolvedTheme.from_resolver(TokenResolver(config, resolver.variables))
    print(theme.to_css_variables())


# =============================================================================
# Run all examples
# =============================================================================

if __name__ == "__main__":
    # Run all examples
    resolver = example_colors()
    example_radii()
    example_animations()
    example_content_and_export(resolver)

    print("\n" + "=" * 60)
    print("All theme examples completed successfully!")
    print("=" * 60)
