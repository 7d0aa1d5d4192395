"""Token table serialization utilities.

Saves and loads token configurations and theme variable sets as JSON,
using the native camelCase configuration keys.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from .config import DarkModeStrategy, TokenConfig
from .variables import BaseVariables, ThemeVariables, parse_css_variables


class TokenConfigSerializer:
    """Handles save/load operations for token configurations.

    Examples
    --------
    >>> # Save a configuration
    >>> TokenConfigSerializer.save(config, "theme/tokens.json")

    >>> # Load it back
    >>> config = TokenConfigSerializer.load("theme/tokens.json")
    """

    # Version for saved file format
    _FORMAT_VERSION = "1.0"

    @classmethod
    def to_dict(cls, config: TokenConfig) -> dict[str, Any]:
        """Native configuration dict tagged with the format version."""
        return {"_format_version": cls._FORMAT_VERSION, **config.to_native()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TokenConfig:
        """
        Build a configuration from a native dict.

        Raises
        ------
        ValueError
            If the dict carries an unsupported ``_format_version``.
        pydantic.ValidationError
            If the configuration shape is invalid.
        """
        data = dict(data)
        cls._check_version(data.pop("_format_version", None))
        return TokenConfig.model_validate(data)

    @classmethod
    def save(cls, config: TokenConfig, path: str | Path) -> Path:
        """
        Save a configuration to a JSON file.

        Parameters
        ----------
        config : TokenConfig
            The configuration to save.
        path : str or Path
            Target file. Parent directories are created.

        Returns
        -------
        Path
            The written file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(cls.to_dict(config), f, indent=2)
        logger.info(f"Token configuration saved to {path}")
        return path

    @classmethod
    def load(cls, path: str | Path) -> TokenConfig:
        """Load a configuration saved with :meth:`save` or written by hand."""
        with open(Path(path)) as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def save_variables(cls, variables: ThemeVariables, path: str | Path) -> Path:
        """Save light and dark variable sets to JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "_format_version": cls._FORMAT_VERSION,
            "light": dict(variables.light),
            "dark": dict(variables.dark),
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Theme variables saved to {path}")
        return path

    @classmethod
    def load_variables(cls, path: str | Path) -> ThemeVariables:
        """Load variable sets saved with :meth:`save_variables`."""
        with open(Path(path)) as f:
            data = json.load(f)
        cls._check_version(data.get("_format_version"))
        return ThemeVariables(
            light=BaseVariables(data.get("light", {})),
            dark=BaseVariables(data.get("dark", {})),
        )

    @classmethod
    def load_css_variables(
        cls,
        path: str | Path,
        dark_selector: str | None = None,
        config: TokenConfig | None = None,
    ) -> ThemeVariables:
        """
        Read ``:root`` and dark-mode custom properties from a stylesheet.

        Parameters
        ----------
        path : str or Path
            The stylesheet.
        dark_selector : str, optional
            Selector carrying dark overrides. Taken from ``config.dark_mode``
            when omitted, then from the ``default_dark_selector`` setting.
        config : TokenConfig, optional
            Configuration whose ``darkMode`` decides where dark values live.
            With the ``media`` strategy, ``:root`` blocks inside
            ``prefers-color-scheme: dark`` media queries are read as dark.
        """
        dark_media = False
        if config is not None:
            dark_media = config.dark_mode.strategy is DarkModeStrategy.MEDIA
            dark_selector = dark_selector or config.dark_mode.dark_selector()
        return parse_css_variables(
            Path(path).read_text(encoding="utf-8"), dark_selector, dark_media=dark_media
        )

    @classmethod
    def _check_version(cls, version: str | None) -> None:
        if version is not None and version != cls._FORMAT_VERSION:
            raise ValueError(
                f"Unsupported format version {version!r} "
                f"(expected {cls._FORMAT_VERSION!r})"
            )


__all__ = ["TokenConfigSerializer"]
