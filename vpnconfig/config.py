"""Configuration file loader and record lifecycle operations.

Responsibilities:
- Read one `key = value` configuration file into a `VpnConfig` record.
- Validate each recognized key, logging and skipping invalid values.
- Provide the record lifecycle entry points (`invalid_config`,
  `destroy_vpn_config`, `add_trusted_cert`).

Key types:
- `ConfigLoader`: static helpers that read, tokenize and assign lines.
- `LoadReport`: per-load summary of parsed lines and skipped-line warnings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Callable

from loguru import logger

from .errors import (
    ConfigMemoryError,
    ConfigOSError,
    ConfigReadError,
    EmptyConfigFileError,
    UnknownConfigKeyError,
)
from .models.datatypes import (
    CONFIG_KEYS_BY_NAME,
    MAX_PORT,
    SHA256_HEX_LENGTH,
    UINT_MAX,
    ConfigKey,
    ValueKind,
    VpnConfig,
    invalid_config,
)
from .parsing import parse_config_boolean, parse_prefix_integer, trim_config_token


@dataclass(frozen=True, slots=True)
class ConfigWarning:
    """One skipped line reported while loading a file.

    Attributes:
        line_number: 1-based line number in the source file.
        message: Diagnostic text, identical to the logged warning.
    """

    line_number: int
    message: str


@dataclass(slots=True)
class LoadReport:
    """Summary of one successful configuration load.

    Attributes:
        path: Source file path as given by the caller.
        assigned_keys: Keys assigned, in file order (repeats included).
        warnings: Lines skipped because they were malformed or invalid.
    """

    path: str
    assigned_keys: list[str] = field(default_factory=list)
    warnings: list[ConfigWarning] = field(default_factory=list)


class ConfigLoader:
    """Static helpers for populating `VpnConfig` records from files."""

    @staticmethod
    def from_file(path: str | os.PathLike[str]) -> VpnConfig:
        """Create a new record populated from `path`."""

        config = invalid_config()
        ConfigLoader.load_into(config, path)
        return config

    @staticmethod
    def load_into(config: VpnConfig, path: str | os.PathLike[str]) -> LoadReport:
        """Read `path` and assign every valid line to `config`.

        Raises:
            ConfigOSError: The file cannot be opened or inspected.
            EmptyConfigFileError: The file is empty.
            ConfigMemoryError: Memory for the contents or a whitelist entry
                could not be allocated.
            ConfigReadError: The file was read short or is not UTF-8.
            UnknownConfigKeyError: A line names an unsupported key. Lines
                before it stay assigned.
        """

        path_label = os.fspath(path)
        text = ConfigLoader._read_text(path_label)
        report = LoadReport(path=path_label)
        for line_number, line in enumerate(text.split("\n"), start=1):
            if not line or line.startswith("#"):
                continue
            ConfigLoader._apply_line(config, line, line_number, report)
        return report

    @staticmethod
    def _read_text(path: str) -> str:
        """Read the whole file at once and decode it."""

        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise ConfigOSError(path=path, errno=exc.errno, strerror=exc.strerror) from exc

        with handle:
            try:
                size = os.fstat(handle.fileno()).st_size
            except OSError as exc:
                raise ConfigOSError(
                    path=path, errno=exc.errno, strerror=exc.strerror
                ) from exc
            if size == 0:
                raise EmptyConfigFileError(path=path)

            try:
                payload = handle.read(size)
            except MemoryError as exc:
                raise ConfigMemoryError(path=path) from exc
            except OSError as exc:
                raise ConfigReadError(path=path, detail=f"Cannot read file: {exc}") from exc

        if len(payload) != size:
            raise ConfigReadError(
                path=path,
                detail=f"Cannot read file: expected {size} bytes, got {len(payload)}.",
            )
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigReadError(
                path=path,
                detail=f"Cannot read file: invalid UTF-8 at byte {exc.start}.",
                hint="Save the configuration file as UTF-8 text.",
            ) from exc

    @staticmethod
    def _apply_line(
        config: VpnConfig, line: str, line_number: int, report: LoadReport
    ) -> None:
        """Tokenize one non-comment line and dispatch it on its key."""

        if "=" not in line:
            ConfigLoader._warn(report, line_number, 'Bad line in config file: "{}".', line)
            return

        raw_key, raw_value = line.split("=", 1)
        key = trim_config_token(raw_key)
        value = trim_config_token(raw_value)

        config_key = CONFIG_KEYS_BY_NAME.get(key)
        if config_key is None:
            logger.bind(path=report.path, line=line_number).warning(
                'Bad key in config file: "{}".', key
            )
            raise UnknownConfigKeyError(key=key, line_number=line_number, path=report.path)

        assign = _ASSIGNERS[config_key.kind]
        if assign(config, config_key, value, line_number, report):
            report.assigned_keys.append(config_key.name)

    @staticmethod
    def _warn(report: LoadReport, line_number: int, template: str, value: str) -> None:
        """Log a skipped-line warning and record it on the report."""

        message = template.format(value)
        logger.bind(path=report.path, line=line_number).warning(template, value)
        report.warnings.append(ConfigWarning(line_number=line_number, message=message))

    @staticmethod
    def _assign_bounded_string(
        config: VpnConfig, config_key: ConfigKey, value: str, line_number: int, report: LoadReport
    ) -> bool:
        """Store a string truncated to the key's field bound."""

        setattr(config, config_key.field_name, value[: config_key.max_length])
        return True

    @staticmethod
    def _assign_owned_string(
        config: VpnConfig, config_key: ConfigKey, value: str, line_number: int, report: LoadReport
    ) -> bool:
        """Replace an unbounded string; the last occurrence in a file wins."""

        setattr(config, config_key.field_name, value)
        return True

    @staticmethod
    def _assign_port(
        config: VpnConfig, config_key: ConfigKey, value: str, line_number: int, report: LoadReport
    ) -> bool:
        """Store a gateway port in the range 1..65535."""

        port = parse_prefix_integer(value) or 0
        if port <= 0 or port > MAX_PORT:
            ConfigLoader._warn(report, line_number, 'Bad port in config file: "{}".', str(port))
            return False
        config.gateway_port = port
        return True

    @staticmethod
    def _assign_boolean(
        config: VpnConfig, config_key: ConfigKey, value: str, line_number: int, report: LoadReport
    ) -> bool:
        """Store a flag parsed with the configuration boolean rules."""

        parsed = parse_config_boolean(value)
        if parsed is None:
            ConfigLoader._warn(
                report,
                line_number,
                f'Bad {config_key.name} in config file: "{{}}".',
                value,
            )
            return False
        setattr(config, config_key.field_name, parsed)
        return True

    @staticmethod
    def _assign_unsigned(
        config: VpnConfig, config_key: ConfigKey, value: str, line_number: int, report: LoadReport
    ) -> bool:
        """Store an unsigned integer in the range 0..UINT_MAX.

        A value without leading digits reads as 0.
        """

        parsed = parse_prefix_integer(value) or 0
        if parsed < 0 or parsed > UINT_MAX:
            ConfigLoader._warn(
                report,
                line_number,
                f'Bad value for {config_key.name} in config file: "{{}}".',
                value,
            )
            return False
        setattr(config, config_key.field_name, parsed)
        return True

    @staticmethod
    def _assign_digest(
        config: VpnConfig, config_key: ConfigKey, value: str, line_number: int, report: LoadReport
    ) -> bool:
        """Append a SHA-256 hex digest to the certificate whitelist."""

        if len(value) != SHA256_HEX_LENGTH:
            ConfigLoader._warn(
                report,
                line_number,
                'Bad certificate sha256 digest in config file: "{}".',
                value,
            )
            return False
        add_trusted_cert(config, value)
        return True


_Assigner = Callable[[VpnConfig, ConfigKey, str, int, LoadReport], bool]

_ASSIGNERS: dict[ValueKind, _Assigner] = {
    ValueKind.BOUNDED_STRING: ConfigLoader._assign_bounded_string,
    ValueKind.OWNED_STRING: ConfigLoader._assign_owned_string,
    ValueKind.PORT: ConfigLoader._assign_port,
    ValueKind.BOOLEAN: ConfigLoader._assign_boolean,
    ValueKind.UNSIGNED: ConfigLoader._assign_unsigned,
    ValueKind.DIGEST: ConfigLoader._assign_digest,
}


def load_config(config: VpnConfig, path: str | os.PathLike[str]) -> LoadReport:
    """Populate `config` from the file at `path`; see `ConfigLoader.load_into`."""

    return ConfigLoader.load_into(config, path)


def add_trusted_cert(config: VpnConfig, digest: str) -> None:
    """Append a SHA-256 digest to the record's trusted certificate whitelist.

    Raises:
        ConfigMemoryError: The entry could not be allocated.
    """

    try:
        config.add_trusted_cert(digest)
    except MemoryError as exc:
        raise ConfigMemoryError(
            detail="Could not add certificate digest to whitelist."
        ) from exc


def destroy_vpn_config(config: VpnConfig) -> None:
    """Release every owned string and whitelist entry held by `config`."""

    config.destroy()


__all__ = [
    "ConfigLoader",
    "ConfigWarning",
    "LoadReport",
    "add_trusted_cert",
    "destroy_vpn_config",
    "invalid_config",
    "load_config",
]
