"""
Runtime Configuration

Central configuration for the signer service: listener address, logging
and CORS policy.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


# Environment variable prefix
ENV_PREFIX = "SIGNER_"

DEFAULT_CONFIG_PATHS = (
    Path("signer.json"),
    Path(".signer.json"),
    Path.home() / ".config" / "signer" / "config.json",
)


@dataclass
class ServiceConfig:
    """
    Complete runtime configuration for the signer service.

    Can be loaded from:
    - Environment variables (and a .env file)
    - JSON file
    - Programmatic construction
    """
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    log_file: Optional[str] = None
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SIGNER_HOST: Listen address
        - SIGNER_PORT: Listen port (falls back to PORT, as set by hosting platforms)
        - SIGNER_LOG_LEVEL: Log level name
        - SIGNER_LOG_FILE: Optional log file path
        - SIGNER_CORS_ORIGINS: Comma-separated allowed origins
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HOST"):
            overrides["host"] = os.getenv(f"{ENV_PREFIX}HOST")

        port = os.getenv(f"{ENV_PREFIX}PORT") or os.getenv("PORT")
        if port:
            overrides["port"] = int(port)

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper()
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        if os.getenv(f"{ENV_PREFIX}CORS_ORIGINS"):
            origins = os.getenv(f"{ENV_PREFIX}CORS_ORIGINS", "")
            overrides["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        return overrides

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "ServiceConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServiceConfig":
        """Load configuration from a dictionary (supports partial data)."""
        defaults = cls()
        origins = data.get("cors_origins", defaults.cors_origins)
        if isinstance(origins, str):
            origins = [o.strip() for o in origins.split(",") if o.strip()]

        return cls(
            host=data.get("host", defaults.host),
            port=int(data.get("port", defaults.port)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            log_file=data.get("log_file", defaults.log_file),
            cors_origins=list(origins),
        )

    def with_env_overrides(self) -> "ServiceConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "cors_origins": list(self.cors_origins),
        }


def load_config(config_path: Path | None = None) -> ServiceConfig:
    """
    Load configuration from file and/or environment.

    Search order for the config file when no path is given:
      1. ./signer.json
      2. ./.signer.json
      3. ~/.config/signer/config.json

    Environment variables ALWAYS override file values.
    """
    if config_path is not None:
        return ServiceConfig.from_file(config_path).with_env_overrides()

    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            try:
                config = ServiceConfig.from_file(path)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to parse {path}: {e}")
                continue
            logger.info(f"Loaded config from {path}")
            return config.with_env_overrides()

    return ServiceConfig().with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(ServiceConfig().to_dict(), indent=2) + "\n"


# Global default configuration
_default_config: Optional[ServiceConfig] = None


def get_default_config() -> ServiceConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = load_config()
    return _default_config


def set_default_config(config: ServiceConfig | None) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
