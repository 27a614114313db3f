"""Classification and ordering of a page's children.

A page's direct children are split into subpages, attachments and comments.
Each collection behaves like a sorted set keyed on a single field: entries
whose keys compare equal collapse into the first one inserted. Two subpages
with the same title therefore produce a single link, and two comments posted
at the same instant produce a single comment block.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, Tuple, TypeVar

from ..entries.models import (
    AttachmentEntry,
    CommentEntry,
    ContentEntry,
    EntryCategory,
    EntryKind,
    PageEntry,
    categorize,
)
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=ContentEntry)


def by_title(entry: ContentEntry) -> str:
    """Sort key for navigational entries."""
    return entry.title


def by_updated(entry: ContentEntry) -> datetime:
    """Sort key for dated entries, oldest first.

    Naive timestamps are read as UTC so a feed mixing naive and aware values
    still compares.
    """
    if entry.updated.tzinfo is None:
        return entry.updated.replace(tzinfo=timezone.utc)
    return entry.updated


def ordered_set(entries: Iterable[E], key: Callable[[E], object]) -> Tuple[E, ...]:
    """Return entries sorted by key, keeping the first entry for each key.

    Args:
        entries: Entries in insertion order
        key: Sort key function

    Returns:
        Tuple of entries in non-decreasing key order with unique keys
    """
    kept: Dict[object, E] = {}
    for entry in entries:
        entry_key = key(entry)
        if entry_key in kept:
            logger.debug(
                f"Entry {entry.entry_id} collapses into {kept[entry_key].entry_id} "
                f"(equal sort key {entry_key!r})"
            )
            continue
        kept[entry_key] = entry
    return tuple(kept[k] for k in sorted(kept))


@dataclass(frozen=True)
class ClassifiedChildren:
    """A page's children, categorized and ordered.

    Attributes:
        subpages: Page-like children ordered by title
        attachments: Attachments ordered by updated timestamp
        comments: Comments ordered by updated timestamp
        announcements: Announcement subpages ordered by updated timestamp.
                       These also appear in subpages; this view is not
                       collapsed by title.
    """
    subpages: Tuple[PageEntry, ...] = ()
    attachments: Tuple[AttachmentEntry, ...] = ()
    comments: Tuple[CommentEntry, ...] = ()
    announcements: Tuple[PageEntry, ...] = ()


def classify_children(children: Iterable[ContentEntry]) -> ClassifiedChildren:
    """Split children into subpages, attachments and comments.

    Children of any other category are dropped.

    Args:
        children: Direct children of a page, in store order

    Returns:
        ClassifiedChildren with each collection ordered

    Raises:
        InvalidInputError: If a child is None
    """
    subpages = []
    attachments = []
    comments = []

    for child in children:
        if child is None:
            raise InvalidInputError("child")
        category = categorize(child)
        if category is EntryCategory.ATTACHMENT:
            attachments.append(child)
        elif category is EntryCategory.COMMENT:
            comments.append(child)
        elif category is EntryCategory.PAGE:
            subpages.append(child)
        else:
            logger.debug(
                f"Skipping child {child.entry_id} of kind '{child.kind.value}'"
            )

    return ClassifiedChildren(
        subpages=ordered_set(subpages, by_title),
        attachments=ordered_set(attachments, by_updated),
        comments=ordered_set(comments, by_updated),
        announcements=ordered_set(
            (page for page in subpages if page.kind is EntryKind.ANNOUNCEMENT),
            by_updated
        ),
    )
