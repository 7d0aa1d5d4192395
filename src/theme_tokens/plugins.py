"""
Utility plugins.

Plugins extend the utility-class vocabulary. Each one is an explicit
capability: it receives the resolver for the active token table and
returns class rules. The configuration only names plugins; a
:class:`PluginRegistry` binds those names to implementations and runs
them in the declared order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from loguru import logger

from .exceptions import UnknownPluginError
from .expressions import format_number

if TYPE_CHECKING:
    from .resolver import TokenResolver


@dataclass(frozen=True)
class ClassRule:
    """A CSS rule contributed by a plugin.

    Attributes
    ----------
    selector : str
        Selector or at-rule prelude (``.animate-fade-in``,
        ``@keyframes fade-in``).
    declarations : dict[str, str]
        Property/value pairs. Empty for rules that only nest children.
    children : tuple[ClassRule, ...]
        Nested rules, used for ``@keyframes`` steps.
    """

    selector: str
    declarations: dict[str, str] = field(default_factory=dict)
    children: tuple[ClassRule, ...] = ()

    def to_css(self, indent: int = 0) -> str:
        pad = "  " * indent
        lines = [f"{pad}{self.selector} {{"]
        for prop, value in self.declarations.items():
            lines.append(f"{pad}  {prop}: {value};")
        for child in self.children:
            lines.append(child.to_css(indent + 1))
        lines.append(f"{pad}}}")
        return "\n".join(lines)


@runtime_checkable
class UtilityPlugin(Protocol):
    """Protocol for utility plugins.

    All plugins expose a ``name`` matching the configuration entry and a
    ``register_utilities()`` method returning their class rules.
    """

    name: str

    def register_utilities(self, resolver: TokenResolver) -> list[ClassRule]:
        """Return the rules this plugin contributes for ``resolver``."""
        ...


class AnimateUtilitiesPlugin:
    """
    Bind every animation in the table to an ``animate-<name>`` class.

    Emits one ``@keyframes`` rule per referenced keyframes definition
    followed by the utility classes. Dangling references propagate as
    :class:`~theme_tokens.exceptions.DanglingAnimationReferenceError`.
    """

    name = "animate"

    def __init__(self, class_prefix: str = "animate-"):
        self.class_prefix = class_prefix

    def register_utilities(self, resolver: TokenResolver) -> list[ClassRule]:
        keyframe_rules: dict[str, ClassRule] = {}
        class_rules = []
        for name in resolver.config.animation_names:
            animation = resolver.resolve_animation(name)
            if animation.keyframes_name not in keyframe_rules:
                keyframe_rules[animation.keyframes_name] = ClassRule(
                    selector=f"@keyframes {animation.keyframes_name}",
                    children=tuple(
                        ClassRule(
                            selector=", ".join(f"{format_number(o)}%" for o in step.offsets),
                            declarations=dict(step.styles),
                        )
                        for step in animation.keyframes
                    ),
                )
            class_rules.append(
                ClassRule(
                    selector=f".{self.class_prefix}{name}",
                    declarations={"animation": animation.shorthand},
                )
            )
        return list(keyframe_rules.values()) + class_rules


class PluginRegistry:
    """
    Name-to-implementation mapping for utility plugins.

    Examples
    --------
    >>> registry = PluginRegistry()
    >>> registry.register(AnimateUtilitiesPlugin())
    >>> rules = registry.compose(resolver)
    """

    def __init__(self, plugins: list[UtilityPlugin] | None = None):
        self._plugins: dict[str, UtilityPlugin] = {}
        for plugin in plugins or []:
            self.register(plugin)

    def register(self, plugin: UtilityPlugin) -> None:
        """Register ``plugin`` under its ``name``, replacing any previous one."""
        if not isinstance(plugin, UtilityPlugin):
            raise TypeError(f"{plugin!r} does not implement UtilityPlugin")
        self._plugins[plugin.name] = plugin

    def get(self, name: str) -> UtilityPlugin:
        try:
            return self._plugins[name]
        except KeyError:
            raise UnknownPluginError(name, self._plugins) from None

    @property
    def names(self) -> list[str]:
        return list(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def compose(
        self, resolver: TokenResolver, strict: bool | None = None
    ) -> list[ClassRule]:
        """
        Run the configured plugins in declared order.

        Parameters
        ----------
        resolver : TokenResolver
            Resolver for the token table being built.
        strict : bool | None
            Raise :class:`UnknownPluginError` for configured plugins that
            are not registered. Defaults to the ``strict_plugins`` setting;
            when false they are skipped with a warning.

        Returns
        -------
        list[ClassRule]
            Rules from all plugins, in plugin order.
        """
        if strict is None:
            strict = resolver.settings.strict_plugins

        rules: list[ClassRule] = []
        for name in resolver.config.plugins:
            if name not in self._plugins:
                if strict:
                    raise UnknownPluginError(name, self._plugins)
                logger.warning(f"Plugin '{name}' is not registered, skipping")
                continue
            contributed = self._plugins[name].register_utilities(resolver)
            logger.debug(f"Plugin '{name}' contributed {len(contributed)} rules")
            rules.extend(contributed)
        return rules


def default_registry() -> PluginRegistry:
    """Registry holding the built-in plugins."""
    return PluginRegistry([AnimateUtilitiesPlugin()])


__all__ = [
    "ClassRule",
    "UtilityPlugin",
    "AnimateUtilitiesPlugin",
    "PluginRegistry",
    "default_registry",
]
