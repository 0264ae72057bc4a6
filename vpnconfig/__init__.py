"""Top-level package for vpnconfig.

This package loads, validates and merges the flat `key = value` configuration
of a VPN client: gateway, credentials, routing, pppd and TLS trust options.
The main entry points are `load_config` and `merge_config`.
"""

from .config import (
    ConfigLoader,
    LoadReport,
    add_trusted_cert,
    destroy_vpn_config,
    load_config,
)
from .errors import ConfigError, ConfigErrorCode, describe_config_error
from .merge import merge_config
from .models.datatypes import CertWhitelist, TriState, VpnConfig, invalid_config
from .parsing import parse_config_boolean, strtob

__all__ = [
    "CertWhitelist",
    "ConfigError",
    "ConfigErrorCode",
    "ConfigLoader",
    "LoadReport",
    "TriState",
    "VpnConfig",
    "__version__",
    "add_trusted_cert",
    "describe_config_error",
    "destroy_vpn_config",
    "invalid_config",
    "load_config",
    "merge_config",
    "parse_config_boolean",
    "strtob",
]

__version__ = "0.1.0"
