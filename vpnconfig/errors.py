"""Domain exceptions for configuration loading and CLI diagnostics.

Only file-level failures and unknown keys surface as exceptions. Per-line
validation problems are logged as warnings by the loader instead.
"""

from __future__ import annotations

from enum import Enum


class ConfigErrorCode(Enum):
    """Failure categories reported by a configuration load."""

    NO_MEMORY = "no_memory"
    EMPTY_FILE = "empty_file"
    CANNOT_READ = "cannot_read"
    SEE_ERRNO = "see_errno"
    UNKNOWN_KEY = "unknown_key"
    UNKNOWN = "unknown"


_ERROR_DESCRIPTIONS = {
    ConfigErrorCode.NO_MEMORY: "Not enough memory",
    ConfigErrorCode.EMPTY_FILE: "Empty file",
    ConfigErrorCode.CANNOT_READ: "Cannot read file",
    ConfigErrorCode.SEE_ERRNO: "System error",
    ConfigErrorCode.UNKNOWN_KEY: "Unknown key in file",
    ConfigErrorCode.UNKNOWN: "Unknown error",
}


def describe_config_error(code: ConfigErrorCode) -> str:
    """Return the human-readable reason for an error code."""

    return _ERROR_DESCRIPTIONS.get(code, _ERROR_DESCRIPTIONS[ConfigErrorCode.UNKNOWN])


class ConfigError(RuntimeError):
    """Raised when a configuration source cannot be loaded."""

    code = ConfigErrorCode.UNKNOWN

    def __init__(
        self,
        *,
        path: str | None = None,
        detail: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize a load error scoped to an optional file path."""

        self.path = path
        self.detail = detail or describe_config_error(self.code)
        self.hint = hint
        super().__init__(self.detail)


class ConfigMemoryError(ConfigError):
    """Raised when buffers or whitelist entries cannot be allocated."""

    code = ConfigErrorCode.NO_MEMORY


class EmptyConfigFileError(ConfigError):
    """Raised when the configuration file has zero length."""

    code = ConfigErrorCode.EMPTY_FILE


class ConfigReadError(ConfigError):
    """Raised when file contents cannot be read or decoded completely."""

    code = ConfigErrorCode.CANNOT_READ


class ConfigOSError(ConfigError):
    """Raised when opening or inspecting the file fails at the OS level."""

    code = ConfigErrorCode.SEE_ERRNO

    def __init__(
        self,
        *,
        path: str | None = None,
        errno: int | None = None,
        strerror: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize an OS-level error carrying the failing call's errno."""

        self.errno = errno
        self.strerror = strerror
        super().__init__(
            path=path,
            detail=strerror or describe_config_error(self.code),
            hint=hint,
        )


class UnknownConfigKeyError(ConfigError):
    """Raised when a line names a key outside the supported vocabulary."""

    code = ConfigErrorCode.UNKNOWN_KEY

    def __init__(
        self,
        *,
        key: str,
        line_number: int,
        path: str | None = None,
    ) -> None:
        """Initialize an unknown-key error with its location."""

        self.key = key
        self.line_number = line_number
        super().__init__(
            path=path,
            detail=f"Unknown key `{key}` on line {line_number}.",
            hint="Remove the line or fix the key name.",
        )
