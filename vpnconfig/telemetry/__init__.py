"""Logging setup for command-line use of the loader."""

from .logger import configure_logging

__all__ = ["configure_logging"]
