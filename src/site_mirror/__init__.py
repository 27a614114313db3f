"""Static HTML rendering of hierarchical site pages."""

from .errors import (
    SiteMirrorError,
    InvalidInputError,
    InvalidEntryError,
    ConfigError,
    FilesystemError,
)

__all__ = [
    'SiteMirrorError',
    'InvalidInputError',
    'InvalidEntryError',
    'ConfigError',
    'FilesystemError',
]
