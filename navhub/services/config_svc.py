# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from built-in defaults, YAML files and env vars
#  - Caches the composed config
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

ENV_PREFIX = "NAVHUB_"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Sources, later wins: defaults -> /etc/navhub/config.yaml ->
    ./config/config.yaml -> $NAVHUB_CONFIG_PATH -> overrides -> NAVHUB_* env.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        self._overrides = overrides or {}
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        return self.get_config().get(key, default)

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("[ConfigService] Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        cfg = self._default_config()

        # 1) System-wide YAML
        self._merge_known(cfg, self._load_yaml("/etc/navhub/config.yaml"))

        # 2) Repo-local config
        self._merge_known(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        # 3) Optional path via env
        env_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
        if env_path:
            self._merge_known(cfg, self._load_yaml(env_path))

        # 4) Direct overrides
        self._merge_known(cfg, self._overrides)

        # 5) Environment variables
        self._apply_env_overrides(cfg)

        self._logger.debug(f"[ConfigService] Composed config keys: {sorted(cfg)}")
        return cfg

    @staticmethod
    def _default_config() -> dict[str, Any]:
        """Base defaults for the user-configurable keys. Only these keys are ever read."""
        return {
            # Storage
            "arango_hosts": "http://localhost:8529",
            "arango_username": "navhub",
            "arango_password": "navhub",
            "arango_db": "navhub",
            # HTTP server
            "api_host": "0.0.0.0",
            "api_port": 8400,
            "log_level": "INFO",
            # Registration / reorder limits
            "max_batch_size": 100,
            "reorder_max_workers": 8,
        }

    def _merge_known(self, cfg: dict[str, Any], source: dict[str, Any]) -> None:
        for key, value in source.items():
            if key not in cfg:
                self._logger.debug(f"[ConfigService] Ignoring unknown config key: {key}")
                continue
            cfg[key] = value

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """Load a YAML mapping; returns {} if the file is missing or unusable."""
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[ConfigService] Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[ConfigService] Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Apply NAVHUB_<KEY> environment variables, typed by the default's type.

        Example:
            NAVHUB_API_PORT=9000
            NAVHUB_ARANGO_HOSTS=http://arangodb:8529
        """
        defaults = self._default_config()
        for env_key, raw in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue
            key = env_key[len(ENV_PREFIX) :].lower()
            if key not in defaults:
                continue
            try:
                cfg[key] = _coerce(raw, defaults[key])
            except ValueError:
                self._logger.warning(f"[ConfigService] Ignoring {env_key}={raw!r}: expected {type(defaults[key]).__name__}")


def _coerce(raw: str, default: Any) -> Any:
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("true", "1", "yes"):
            return True
        if lowered in ("false", "0", "no"):
            return False
        raise ValueError(raw)
    if isinstance(default, int):
        return int(raw)
    return raw
