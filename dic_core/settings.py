"""Container settings loaded from TOML with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import tomllib
from platformdirs import user_config_dir

DEFAULT_APP_NAME = "dic"
SETTINGS_FILE_NAME = "dic.toml"
SETTINGS_TABLE = "container"

_ENV_KEY_MAP: dict[str, str] = {
    "strict_registration": "DIC_STRICT_REGISTRATION",
    "verify_capabilities": "DIC_VERIFY_CAPABILITIES",
}
_TRUTHY = {"1", "true", "yes", "on"}


def default_settings_path() -> Path:
    """Return the platform-specific default settings file."""

    base_dir = Path(user_config_dir(DEFAULT_APP_NAME, appauthor=False))
    return base_dir / SETTINGS_FILE_NAME


def _load_table_from_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    table = data.get(SETTINGS_TABLE, {})
    return table if isinstance(table, dict) else {}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


@dataclass(frozen=True)
class ContainerSettings:
    """Knobs that change how a container treats registrations and results."""

    strict_registration: bool = False
    verify_capabilities: bool = True

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "ContainerSettings":
        env = os.environ if env is None else env
        known = {item.name for item in fields(cls)}
        values = {
            key: _as_bool(value)
            for key, value in _load_table_from_file(path or default_settings_path()).items()
            if key in known
        }
        for key, env_key in _ENV_KEY_MAP.items():
            if env_key in env:
                values[key] = _as_bool(env[env_key])
        return replace(cls(), **values)
