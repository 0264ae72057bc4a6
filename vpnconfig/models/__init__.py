"""Shared typed data models for vpnconfig.

This package holds the configuration record and key vocabulary so the loader,
merge logic and CLI do not import each other.
"""

from .datatypes import (
    CONFIG_KEYS,
    CONFIG_KEYS_BY_NAME,
    FIELD_SIZE,
    MAX_PORT,
    SHA256_HEX_LENGTH,
    UINT_MAX,
    CertWhitelist,
    ConfigKey,
    TriState,
    ValueKind,
    VpnConfig,
    invalid_config,
)

__all__ = [
    "CONFIG_KEYS",
    "CONFIG_KEYS_BY_NAME",
    "FIELD_SIZE",
    "MAX_PORT",
    "SHA256_HEX_LENGTH",
    "UINT_MAX",
    "CertWhitelist",
    "ConfigKey",
    "TriState",
    "ValueKind",
    "VpnConfig",
    "invalid_config",
]
