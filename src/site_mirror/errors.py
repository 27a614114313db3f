"""Typed exception hierarchy for site-mirror errors.

This module defines all custom exceptions raised while building and rendering
an exported site. All exceptions inherit from SiteMirrorError so callers can
catch everything the library raises in one place, and each carries the context
needed to report the problem.
"""

from typing import Optional


class SiteMirrorError(Exception):
    """Base exception for all site-mirror errors."""
    pass


class InvalidInputError(SiteMirrorError):
    """Raised when a required argument is missing (None)."""

    def __init__(self, argument: str):
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class InvalidEntryError(SiteMirrorError):
    """Raised when an entry record is malformed."""

    def __init__(self, entry_id: str, reason: str):
        super().__init__(f"Invalid entry {entry_id}: {reason}")
        self.entry_id = entry_id
        self.reason = reason


class ConfigError(SiteMirrorError):
    """Raised when a render configuration value is rejected.

    Attributes:
        config_field: Offending field, or None for file-level problems
        original_message: The message without the field prefix
    """

    def __init__(self, message: str, config_field: Optional[str] = None):
        location = f"field '{config_field}'" if config_field else "render config"
        super().__init__(f"Invalid {location}: {message}")
        self.config_field = config_field
        self.original_message = message


class FilesystemError(SiteMirrorError):
    """Raised when a configuration file cannot be read or written."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Cannot {operation} {file_path}{detail}")
        self.file_path = file_path
        self.operation = operation
        self.reason = reason

    @classmethod
    def from_os_error(cls, file_path: str, operation: str, error: OSError) -> 'FilesystemError':
        """Wrap an OSError, preferring its strerror over the full repr."""
        return cls(file_path, operation, error.strerror or str(error))
