"""Entry model and entry store for site exports."""

from .models import (
    PAGE_KINDS,
    AttachmentEntry,
    CommentEntry,
    ContentEntry,
    EntryCategory,
    EntryKind,
    PageEntry,
    categorize,
    is_page,
)
from .entry_store import EntryStore, InMemoryEntryStore

__all__ = [
    'PAGE_KINDS',
    'AttachmentEntry',
    'CommentEntry',
    'ContentEntry',
    'EntryCategory',
    'EntryKind',
    'PageEntry',
    'categorize',
    'is_page',
    'EntryStore',
    'InMemoryEntryStore',
]
