"""Configuration resolution for VideoResolver.

Settings live in ``$XDG_CONFIG_HOME/videoresolver/config.toml`` (default
``~/.config/videoresolver/config.toml``) and are read with tomli. Any setting
can be overridden by an environment variable or a CLI option.

Known keys:
- ``naming.parse_name`` (bool): use parsed display names.
- ``scan.recursive`` / ``scan.include_hidden`` (bool): scanner defaults.
- ``library.extra_video_extensions`` (list or comma string): extensions added
  to the built-in video extension table.
"""

import contextlib
import os
from pathlib import Path
from typing import Any, Iterable, List, Optional, TypeVar, cast

import tomli

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "videoresolver"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "VIDEORESOLVER_"

_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="naming.parse_name" will attempt
    ``data["naming"]["parse_name"]`` returning None if any level is missing.
    """

    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "naming.parse_name" -> "VIDEORESOLVER_NAMING_PARSE_NAME".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(value: Any, default: T) -> T:
    """Coerce a raw env/config *value* to the type of *default*.

    Values that cannot be converted fall back to *default*. When *default* is
    None, numeric strings become int/float and anything else is returned as-is.
    """
    if isinstance(default, bool):
        if isinstance(value, bool):
            return cast(T, value)
        if isinstance(value, str):
            return cast(T, value.strip().lower() in _TRUTHY)
        return default
    if isinstance(default, int):
        if isinstance(value, int) and not isinstance(value, bool):
            return cast(T, value)
        if isinstance(value, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(value))
        return default
    if isinstance(default, float):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cast(T, float(value))
        if isinstance(value, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(value))
        return default
    if default is None and isinstance(value, str):
        if value.isdigit():
            return cast(T, int(value))
        with contextlib.suppress(ValueError):
            return cast(T, float(value))
    return cast(T, value)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"naming.parse_name"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """

    # CLI value wins if provided (``None`` mimics an unset Typer option).
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default


def resolve_list_setting(
    key: str,
    *,
    default: Iterable[str] = (),
    cli_value: Optional[Iterable[str]] = None,
) -> List[str]:
    """Resolve a list-valued setting.

    Environment variables and string config values are split on commas; TOML
    arrays are used as-is. Blank entries are dropped.
    """
    raw: Any = resolve_setting(
        key,
        default=None,
        cli_value=list(cli_value) if cli_value is not None else None,
    )
    if raw is None:
        return list(default)
    if isinstance(raw, str):
        items = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = [str(item) for item in raw]
    else:
        items = [str(raw)]
    return [item.strip() for item in items if item.strip()]
