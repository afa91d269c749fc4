"""Configuration for mdpage.

Two layers:

ConvertConfig
    Rendering flags for one conversion. An explicit, immutable value passed to
    the conversion entry point; there is no module-level "current" config.

AppConfig
    What the command-line tool reads from ``config.json``: where to write pages
    and which ConvertConfig to use.

Usage:
    from mdpage import Converter, ConvertConfig

    converter = Converter(ConvertConfig(recursive_quotes=True))
    html = converter("> | a | b |\\n> |---|---|\\n> | 1 | 2 |")

    # From a JSON file
    from mdpage.config import load_config

    app = load_config("config.json")
    converter = Converter(app.render)

"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mdpage.errors import ConfigError

DEFAULT_PLUGINS: tuple[str, ...] = ("strikethrough", "table", "url", "def_list")


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        plugins: mistune plugins enabled on the generic renderer
        escape: Let the generic renderer escape raw HTML. Off by default so
            code blocks spliced into quotes pass through untouched.
        hard_wrap: Render single newlines as line breaks
        recursive_quotes: Render quote interiors through the block dispatcher
            instead of handing them whole to the generic renderer
        highlight: Include highlight.js in the page shell

    """

    plugins: tuple[str, ...] = DEFAULT_PLUGINS
    escape: bool = False
    hard_wrap: bool = False
    recursive_quotes: bool = False
    highlight: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ConvertConfig":
        """Create ConvertConfig from dictionary.

        Only includes keys that are valid ConvertConfig fields; unknown keys
        are silently ignored. A ``plugins`` list is converted to a tuple.

        Example:
            >>> config = ConvertConfig.from_dict({
            ...     "recursive_quotes": True,
            ...     "plugins": ["table"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.plugins
            ('table',)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        plugins = filtered.get("plugins")
        if isinstance(plugins, str):
            filtered["plugins"] = (plugins,)
        elif plugins is not None:
            filtered["plugins"] = tuple(plugins)
        return cls(**filtered)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Command-line configuration.

    Attributes:
        output_dir: Directory HTML pages are written to
        render: Conversion flags

    """

    output_dir: str = "output"
    render: ConvertConfig = field(default_factory=ConvertConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, base_dir: Path | None = None) -> "AppConfig":
        """Build AppConfig from the JSON layout.

        Reads ``custom.outputDir`` and the ``render`` section; other sections
        are ignored. A relative output directory is resolved against
        ``base_dir`` when given.

        Example:
            >>> AppConfig.from_dict({"custom": {"outputDir": "site"}}).output_dir
            'site'

        """
        custom = data.get("custom") or {}
        render = data.get("render") or {}
        if not isinstance(custom, dict) or not isinstance(render, dict):
            raise ConfigError("'custom' and 'render' must be JSON objects")

        output_dir = custom.get("outputDir") or "output"
        if base_dir is not None and not Path(output_dir).is_absolute():
            output_dir = str(base_dir / output_dir)

        return cls(output_dir=output_dir, render=ConvertConfig.from_dict(render))


def load_config(path: str | Path) -> AppConfig:
    """Load an AppConfig from a JSON file.

    Args:
        path: Path to the JSON config file

    Returns:
        AppConfig with relative paths resolved against the file's directory

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or does
            not hold a JSON object
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file: {e.strerror or e}", path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigError("top level must be a JSON object", path)

    try:
        return AppConfig.from_dict(data, base_dir=path.resolve().parent)
    except ConfigError as e:
        raise ConfigError(e.message, path) from e


__all__ = [
    "AppConfig",
    "ConvertConfig",
    "DEFAULT_PLUGINS",
    "load_config",
]
