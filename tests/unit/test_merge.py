"""Unit tests for layering one configuration record onto another."""

from __future__ import annotations

from vpnconfig.merge import merge_config
from vpnconfig.models.datatypes import CertWhitelist, TriState, VpnConfig, invalid_config


DIGEST_A = "a" * 64
DIGEST_B = "b" * 64
DIGEST_C = "c" * 64


def _populated_config() -> VpnConfig:
    """Build a record with every field explicitly set."""

    config = invalid_config()
    config.gateway_host = "vpn.example.com"
    config.gateway_port = 443
    config.username = "alice"
    config.password = "secret"
    config.otp = "123456"
    config.realm = "staff"
    config.set_routes = TriState.FALSE
    config.set_dns = TriState.TRUE
    config.pppd_use_peerdns = TriState.FALSE
    config.use_syslog = TriState.TRUE
    config.half_internet_routes = TriState.TRUE
    config.persistent = 0
    config.pppd_log = "/var/log/pppd.log"
    config.pppd_plugin = "/usr/lib/pppd/plugin.so"
    config.pppd_ipparam = "vpn0"
    config.pppd_ifname = "ppp0"
    config.pppd_call = "provider"
    config.ca_file = "/etc/ssl/ca.pem"
    config.user_cert = "/etc/ssl/user.pem"
    config.user_key = "/etc/ssl/user.key"
    config.insecure_ssl = TriState.FALSE
    config.cipher_list = "HIGH"
    config.add_trusted_cert(DIGEST_A)
    return config


def test_merge_into_fresh_record_reproduces_source() -> None:
    """Merging a fully set source into an unset record should copy every value."""

    expected = _populated_config()
    dst = invalid_config()

    merge_config(dst, _populated_config())

    assert dst == expected


def test_merge_unset_source_leaves_destination_untouched() -> None:
    """An unset source should never clobber destination values."""

    dst = _populated_config()

    merge_config(dst, invalid_config())

    assert dst == _populated_config()


def test_merge_port_precedence() -> None:
    """Source port wins only when it was explicitly set."""

    dst = invalid_config()
    dst.gateway_port = 10
    merge_config(dst, invalid_config())
    assert dst.gateway_port == 10

    src = invalid_config()
    src.gateway_port = 20
    merge_config(dst, src)
    assert dst.gateway_port == 20


def test_merge_copies_explicit_false_and_zero() -> None:
    """Explicit false flags and a zero persistent value should override."""

    dst = invalid_config()
    dst.set_dns = TriState.TRUE
    dst.persistent = 60
    src = invalid_config()
    src.set_dns = TriState.FALSE
    src.persistent = 0

    merge_config(dst, src)

    assert dst.set_dns is TriState.FALSE
    assert dst.persistent == 0


def test_merge_ignores_empty_bounded_strings() -> None:
    """Empty bounded strings in the source mean "not set"."""

    dst = invalid_config()
    dst.username = "alice"
    src = invalid_config()
    src.password = "hunter2"

    merge_config(dst, src)

    assert dst.username == "alice"
    assert dst.password == "hunter2"
    assert src.password == "hunter2"


def test_merge_moves_owned_strings_out_of_source() -> None:
    """Owned strings should transfer to the destination and leave the source empty."""

    dst = invalid_config()
    dst.ca_file = "/old/ca.pem"
    dst.user_key = "/keep/user.key"
    src = invalid_config()
    src.ca_file = "/new/ca.pem"

    merge_config(dst, src)

    assert dst.ca_file == "/new/ca.pem"
    assert dst.user_key == "/keep/user.key"
    assert src.ca_file is None


def test_merge_moves_empty_owned_string() -> None:
    """An owned string set to `""` is still explicitly set and should transfer."""

    dst = invalid_config()
    dst.pppd_ifname = "ppp0"
    src = invalid_config()
    src.pppd_ifname = ""

    merge_config(dst, src)

    assert dst.pppd_ifname == ""


def test_merge_replaces_whitelist_wholesale() -> None:
    """A non-empty source whitelist should replace, not extend, the destination."""

    dst = invalid_config()
    dst.add_trusted_cert(DIGEST_A)
    dst.add_trusted_cert(DIGEST_B)
    src = invalid_config()
    src.add_trusted_cert(DIGEST_C)

    merge_config(dst, src)

    assert dst.cert_whitelist == CertWhitelist([DIGEST_C])
    assert len(src.cert_whitelist) == 0


def test_merge_keeps_whitelist_when_source_empty() -> None:
    """An empty source whitelist should leave destination entries in place."""

    dst = invalid_config()
    dst.add_trusted_cert(DIGEST_A)

    merge_config(dst, invalid_config())

    assert list(dst.cert_whitelist) == [DIGEST_A]


def test_destroy_after_merge_does_not_affect_destination() -> None:
    """Destroying a consumed source should not release the destination's values."""

    dst = invalid_config()
    src = invalid_config()
    src.cipher_list = "HIGH"
    src.add_trusted_cert(DIGEST_A)

    merge_config(dst, src)
    src.destroy()

    assert dst.cipher_list == "HIGH"
    assert list(dst.cert_whitelist) == [DIGEST_A]
