"""Layering of one configuration record onto another.

`merge_config` applies a higher-priority source (typically command-line
overrides) onto a lower-priority destination (typically a loaded file).
Explicitly set source fields win; unset source fields never clobber the
destination.
"""

from __future__ import annotations

from .models.datatypes import (
    BOUNDED_STRING_FIELDS,
    OWNED_STRING_FIELDS,
    SCALAR_FIELDS,
    VpnConfig,
    invalid_config,
)


def merge_config(dst: VpnConfig, src: VpnConfig) -> None:
    """Layer `src`'s explicitly set fields onto `dst` in place.

    Bounded strings and scalars are copied. Owned strings and the certificate
    whitelist are moved: `src` gives them up, so its corresponding fields are
    `None`/empty afterwards and `src` should not be reused as an independent
    record.
    """

    unset = invalid_config()

    for name in BOUNDED_STRING_FIELDS:
        value = getattr(src, name)
        if value:
            setattr(dst, name, value)

    for name in SCALAR_FIELDS:
        value = getattr(src, name)
        if value != getattr(unset, name):
            setattr(dst, name, value)

    for name in OWNED_STRING_FIELDS:
        value = getattr(src, name)
        if value is not None:
            setattr(dst, name, value)
            setattr(src, name, None)

    if len(src.cert_whitelist) > 0:
        dst.cert_whitelist.clear()
        for digest in src.cert_whitelist.take():
            dst.cert_whitelist.append(digest)
