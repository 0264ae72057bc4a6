"""Core datatypes for VPN client configuration.

Responsibilities:
- Represent one configuration source (file or overrides) as a typed record.
- Distinguish explicitly configured values from unset ones for merging.
- Hold the ordered whitelist of trusted certificate digests.

Key types:
- `TriState`: unset/false/true flag values.
- `CertWhitelist`: append-only ordered list of SHA-256 hex digests.
- `VpnConfig`: the configuration record.
- `ConfigKey`: one entry of the file key vocabulary (`CONFIG_KEYS`).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Iterator


FIELD_SIZE = 64
SHA256_HEX_LENGTH = 64
MAX_PORT = 65535
UINT_MAX = 4294967295


class TriState(Enum):
    """Boolean option that also records whether it was configured at all."""

    UNSET = -1
    FALSE = 0
    TRUE = 1

    @property
    def is_set(self) -> bool:
        """Return whether the option was explicitly configured."""

        return self is not TriState.UNSET

    def as_bool(self, default: bool = False) -> bool:
        """Collapse to a plain boolean, using `default` when unset."""

        if self is TriState.UNSET:
            return default
        return self is TriState.TRUE


class CertWhitelist:
    """Ordered SHA-256 digests of certificates trusted without CA validation.

    Entries keep insertion order and duplicates are kept as-is.
    """

    __slots__ = ("_digests",)

    def __init__(self, digests: list[str] | None = None) -> None:
        self._digests: list[str] = list(digests) if digests else []

    def append(self, digest: str) -> None:
        """Append one digest, truncated to the SHA-256 hex length."""

        self._digests.append(digest[:SHA256_HEX_LENGTH])

    def clear(self) -> None:
        """Drop every entry."""

        self._digests.clear()

    def take(self) -> list[str]:
        """Move all entries out, leaving this whitelist empty."""

        digests, self._digests = self._digests, []
        return digests

    def __len__(self) -> int:
        return len(self._digests)

    def __iter__(self) -> Iterator[str]:
        return iter(self._digests)

    def __contains__(self, digest: object) -> bool:
        return digest in self._digests

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CertWhitelist):
            return NotImplemented
        return self._digests == other._digests

    def __repr__(self) -> str:
        return f"CertWhitelist({self._digests!r})"


@dataclass(slots=True)
class VpnConfig:
    """Connection settings loaded from one configuration source.

    Unset values: `""` for bounded strings, `None` for scalars and owned
    strings, `TriState.UNSET` for flags, and an empty whitelist.

    Attributes:
        gateway_host: Gateway host name or address (at most `FIELD_SIZE` chars).
        gateway_port: Gateway TCP port.
        username: Login name.
        password: Login password.
        otp: One-time password.
        realm: Authentication realm.
        set_routes: Whether to configure routes from the gateway.
        set_dns: Whether to add the gateway's name servers.
        pppd_use_peerdns: Whether pppd should request peer DNS.
        use_syslog: Whether to log to syslog instead of stdout.
        half_internet_routes: Whether to route the internet as two /1 halves.
        persistent: Reconnection interval in seconds (0 disables).
        pppd_log: pppd debug log file.
        pppd_plugin: pppd plugin path.
        pppd_ipparam: pppd `ipparam` value passed to ip-up scripts.
        pppd_ifname: pppd interface name.
        pppd_call: pppd `call` peer name.
        ca_file: CA bundle used to verify the gateway certificate.
        user_cert: Client certificate path.
        user_key: Client private key path.
        insecure_ssl: Whether invalid TLS setups only produce warnings.
        cipher_list: OpenSSL cipher list string.
        cert_whitelist: Trusted certificate digests.
    """

    gateway_host: str = ""
    gateway_port: int | None = None
    username: str = ""
    password: str = ""
    otp: str = ""
    realm: str = ""
    set_routes: TriState = TriState.UNSET
    set_dns: TriState = TriState.UNSET
    pppd_use_peerdns: TriState = TriState.UNSET
    use_syslog: TriState = TriState.UNSET
    half_internet_routes: TriState = TriState.UNSET
    persistent: int | None = None
    pppd_log: str | None = None
    pppd_plugin: str | None = None
    pppd_ipparam: str | None = None
    pppd_ifname: str | None = None
    pppd_call: str | None = None
    ca_file: str | None = None
    user_cert: str | None = None
    user_key: str | None = None
    insecure_ssl: TriState = TriState.UNSET
    cipher_list: str | None = None
    cert_whitelist: CertWhitelist = field(default_factory=CertWhitelist)

    def add_trusted_cert(self, digest: str) -> None:
        """Append a certificate digest to the whitelist."""

        self.cert_whitelist.append(digest)

    def destroy(self) -> None:
        """Release owned strings and whitelist entries; safe to call repeatedly."""

        for name in OWNED_STRING_FIELDS:
            setattr(self, name, None)
        self.cert_whitelist.clear()

    def is_set(self, field_name: str) -> bool:
        """Return whether `field_name` differs from its unset value."""

        value = getattr(self, field_name)
        if field_name == "cert_whitelist":
            return len(value) > 0
        return value != getattr(invalid_config(), field_name)

    def explicit_items(self) -> list[tuple[str, object]]:
        """Return `(file key, value)` pairs for every set field, in key order."""

        items: list[tuple[str, object]] = []
        for config_key in CONFIG_KEYS:
            if config_key.field_name == "cert_whitelist":
                items.extend((config_key.name, digest) for digest in self.cert_whitelist)
            elif self.is_set(config_key.field_name):
                items.append((config_key.name, getattr(self, config_key.field_name)))
        return items


def invalid_config() -> VpnConfig:
    """Return a new record in the canonical unset state."""

    return VpnConfig()


class ValueKind(Enum):
    """How a configuration value is validated and stored."""

    BOUNDED_STRING = "bounded_string"
    PORT = "port"
    BOOLEAN = "boolean"
    UNSIGNED = "unsigned"
    OWNED_STRING = "owned_string"
    DIGEST = "digest"


@dataclass(frozen=True, slots=True)
class ConfigKey:
    """One recognized configuration file key.

    Attributes:
        name: Key as written in the file.
        field_name: `VpnConfig` attribute it assigns.
        kind: Validation/storage behavior.
        max_length: Truncation bound for bounded strings.
        secret: Whether the value must be masked in output.
    """

    name: str
    field_name: str
    kind: ValueKind
    max_length: int | None = None
    secret: bool = False


CONFIG_KEYS: tuple[ConfigKey, ...] = (
    ConfigKey("host", "gateway_host", ValueKind.BOUNDED_STRING, max_length=FIELD_SIZE),
    ConfigKey("port", "gateway_port", ValueKind.PORT),
    ConfigKey("username", "username", ValueKind.BOUNDED_STRING, max_length=FIELD_SIZE - 1),
    ConfigKey(
        "password", "password", ValueKind.BOUNDED_STRING, max_length=FIELD_SIZE - 1, secret=True
    ),
    ConfigKey("otp", "otp", ValueKind.BOUNDED_STRING, max_length=FIELD_SIZE - 1, secret=True),
    ConfigKey("realm", "realm", ValueKind.BOUNDED_STRING, max_length=FIELD_SIZE - 1),
    ConfigKey("set-dns", "set_dns", ValueKind.BOOLEAN),
    ConfigKey("set-routes", "set_routes", ValueKind.BOOLEAN),
    ConfigKey("half-internet-routes", "half_internet_routes", ValueKind.BOOLEAN),
    ConfigKey("persistent", "persistent", ValueKind.UNSIGNED),
    ConfigKey("pppd-use-peerdns", "pppd_use_peerdns", ValueKind.BOOLEAN),
    ConfigKey("pppd-log", "pppd_log", ValueKind.OWNED_STRING),
    ConfigKey("pppd-plugin", "pppd_plugin", ValueKind.OWNED_STRING),
    ConfigKey("pppd-ipparam", "pppd_ipparam", ValueKind.OWNED_STRING),
    ConfigKey("pppd-ifname", "pppd_ifname", ValueKind.OWNED_STRING),
    ConfigKey("pppd-call", "pppd_call", ValueKind.OWNED_STRING),
    ConfigKey("use-syslog", "use_syslog", ValueKind.BOOLEAN),
    ConfigKey("trusted-cert", "cert_whitelist", ValueKind.DIGEST),
    ConfigKey("ca-file", "ca_file", ValueKind.OWNED_STRING),
    ConfigKey("user-cert", "user_cert", ValueKind.OWNED_STRING),
    ConfigKey("user-key", "user_key", ValueKind.OWNED_STRING),
    ConfigKey("insecure-ssl", "insecure_ssl", ValueKind.BOOLEAN),
    ConfigKey("cipher-list", "cipher_list", ValueKind.OWNED_STRING),
)

CONFIG_KEYS_BY_NAME: dict[str, ConfigKey] = {key.name: key for key in CONFIG_KEYS}

OWNED_STRING_FIELDS: tuple[str, ...] = tuple(
    key.field_name for key in CONFIG_KEYS if key.kind is ValueKind.OWNED_STRING
)

BOUNDED_STRING_FIELDS: tuple[str, ...] = tuple(
    key.field_name for key in CONFIG_KEYS if key.kind is ValueKind.BOUNDED_STRING
)

SCALAR_FIELDS: tuple[str, ...] = tuple(
    item.name
    for item in fields(VpnConfig)
    if item.name not in OWNED_STRING_FIELDS
    and item.name not in BOUNDED_STRING_FIELDS
    and item.name != "cert_whitelist"
)
