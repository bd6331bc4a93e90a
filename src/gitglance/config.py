"""Configuration with JSON file storage and env overrides."""

import json
import os
from pathlib import Path
from typing import Any

from rich.errors import StyleSyntaxError
from rich.style import Style

from gitglance.errors import ConfigKeyError

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting GITGLANCE_CONFIG_DIR env var."""
    config_dir = os.environ.get("GITGLANCE_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "gitglance"


class ConfigMeta:
    """Schema definition - separate from runtime state."""

    TOGGLES: dict[str, str] = {
        "show_untracked": "List untracked files",
        "show_ignored": "List ignored files",
        "show_status_codes": "Show two-letter status codes next to paths",
    }

    SETTINGS: dict[str, str] = {
        "title": "Panel title ({repo} = repository name)",
        "panel_width": "Max width for the status panel (default: 100)",
        "highlight_style": "Rich style for the selected row",
    }


class Config:
    """Runtime configuration with env override support."""

    DEFAULTS: dict[str, Any] = {
        # Toggles
        "show_untracked": True,
        "show_ignored": False,
        "show_status_codes": True,
        # Settings
        "title": "gitglance",
        "panel_width": 100,
        "highlight_style": "bold reverse",
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching."""
        global _config_cache

        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    def get(self, key: str) -> Any:
        if key not in self.DEFAULTS:
            raise ConfigKeyError(key)
        return getattr(self, key)

    def set(self, key: str, value: Any) -> None:
        """Set value and persist. String values are coerced to the key's type."""
        if key not in self.DEFAULTS:
            raise ConfigKeyError(key)
        if isinstance(value, str):
            value = self._coerce(value, type(self.DEFAULTS[key]))
        if key == "highlight_style":
            try:
                Style.parse(value)
            except StyleSyntaxError as e:
                raise ValueError(f"Invalid style: {value!r}") from e
        self._data[key] = value
        self._save()

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Return (attr, description, enabled) for each toggle."""
        return [
            (name, desc, bool(getattr(self, name))) for name, desc in ConfigMeta.TOGGLES.items()
        ]

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    self._data = json.loads(content)
            except json.JSONDecodeError:
                # Corrupted config - use defaults, will be fixed on next save
                self._data = {}

    def _save(self) -> None:
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(self._data, indent=2))

    def _apply_env_overrides(self) -> None:
        """Apply GITGLANCE_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"GITGLANCE_{key.upper()}"
            if env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        return value
