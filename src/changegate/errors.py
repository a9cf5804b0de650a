from __future__ import annotations

from .constants import ExitCode


class ChangeGateError(Exception):
    """Base exception for all changegate errors."""

    exit_code: ExitCode = ExitCode.ERROR


class ConfigError(ChangeGateError):
    """Configuration validation failed."""


class DiffError(ChangeGateError):
    """Changed files could not be determined."""


class PublishError(ChangeGateError):
    """Step outputs could not be written."""
