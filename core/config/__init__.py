"""
Runtime Configuration Module

Provides configuration loading and management for the signer service.
"""

from .runtime import (
    ServiceConfig,
    load_config,
    get_default_config,
    set_default_config,
    get_default_config_template,
)

__all__ = [
    "ServiceConfig",
    "load_config",
    "get_default_config",
    "set_default_config",
    "get_default_config_template",
]
