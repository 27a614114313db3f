"""Data models for site entries.

Every record in an exported site is a ContentEntry tagged with an EntryKind.
Pages additionally carry the page name used as their URL segment. The kind
tag, not the Python class, decides how a record is categorized; see
categorize().
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from ..errors import InvalidEntryError


class EntryKind(Enum):
    """Kinds of records found in a site feed."""
    WEB_PAGE = "webpage"
    ANNOUNCEMENT = "announcement"
    ANNOUNCEMENTS_PAGE = "announcementspage"
    FILE_CABINET_PAGE = "filecabinet"
    LIST_PAGE = "listpage"
    LIST_ITEM = "listitem"
    ATTACHMENT = "attachment"
    WEB_ATTACHMENT = "webattachment"
    COMMENT = "comment"
    OTHER = "other"


PAGE_KINDS = frozenset({
    EntryKind.WEB_PAGE,
    EntryKind.ANNOUNCEMENT,
    EntryKind.ANNOUNCEMENTS_PAGE,
    EntryKind.FILE_CABINET_PAGE,
    EntryKind.LIST_PAGE,
})


class EntryCategory(Enum):
    """How a child entry is rendered on its parent page."""
    ATTACHMENT = "attachment"
    COMMENT = "comment"
    PAGE = "page"
    OTHER = "other"


@dataclass
class ContentEntry:
    """A single record of the site.

    Attributes:
        entry_id: Unique identifier of the record
        title: Plain-text title
        updated: Last-updated timestamp
        kind: Record kind tag
        author: Display name of the last author
        author_email: Email of the last author, if known
        revision: Revision number
        content: XHTML body
        parent_id: Identifier of the parent record (None at the site root)
    """
    entry_id: str
    title: str
    updated: datetime
    kind: EntryKind = EntryKind.OTHER
    author: str = ""
    author_email: Optional[str] = None
    revision: int = 1
    content: str = ""
    parent_id: Optional[str] = None


@dataclass
class PageEntry(ContentEntry):
    """A page-like record.

    Attributes:
        page_name: URL segment of the page, used as its export directory name
    """
    kind: EntryKind = EntryKind.WEB_PAGE
    page_name: str = ""

    def __post_init__(self):
        if self.kind not in PAGE_KINDS:
            raise InvalidEntryError(
                self.entry_id, f"kind '{self.kind.value}' is not a page kind"
            )
        if not self.page_name:
            raise InvalidEntryError(self.entry_id, "page_name cannot be empty")


@dataclass
class AttachmentEntry(ContentEntry):
    """A file attached to a page."""
    kind: EntryKind = field(default=EntryKind.ATTACHMENT, init=False)
    mime_type: Optional[str] = None


@dataclass
class CommentEntry(ContentEntry):
    """A comment left on a page."""
    kind: EntryKind = field(default=EntryKind.COMMENT, init=False)


def is_page(entry: ContentEntry) -> bool:
    """Return True if the entry can be rendered and linked as a page."""
    return entry.kind in PAGE_KINDS and isinstance(entry, PageEntry)


def categorize(entry: ContentEntry) -> EntryCategory:
    """Map an entry onto the closed set of render categories."""
    if entry.kind is EntryKind.ATTACHMENT:
        return EntryCategory.ATTACHMENT
    if entry.kind is EntryKind.COMMENT:
        return EntryCategory.COMMENT
    if is_page(entry):
        return EntryCategory.PAGE
    return EntryCategory.OTHER
