"""Entry store contract and its in-memory implementation.

The renderer never fetches anything itself. It reads children and parents
from an EntryStore that was populated beforehand by the export pipeline.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..errors import InvalidInputError
from .models import ContentEntry

logger = logging.getLogger(__name__)


class EntryStore(ABC):
    """Read-only lookup over all entries of one export batch."""

    @abstractmethod
    def get_children(self, entry_id: str) -> List[ContentEntry]:
        """Return the direct children of the given entry, in store order."""

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[ContentEntry]:
        """Return the entry with the given id, or None if it is not stored."""


class InMemoryEntryStore(EntryStore):
    """Dict-backed EntryStore.

    Entries are indexed by id and by parent id. Children are returned in the
    order they were added.

    Example:
        >>> store = InMemoryEntryStore()
        >>> store.add_entry(page)
        >>> store.get_children(page.entry_id)
        []
    """

    def __init__(self):
        self._entries: Dict[str, ContentEntry] = {}
        self._children: Dict[str, List[str]] = {}
        self._indexed_parent: Dict[str, Optional[str]] = {}

    def add_entry(self, entry: ContentEntry) -> None:
        """Add an entry, replacing any stored entry with the same id.

        Args:
            entry: Entry to store

        Raises:
            InvalidInputError: If entry is None
        """
        if entry is None:
            raise InvalidInputError("entry")

        if entry.entry_id in self._entries:
            logger.debug(f"Replacing stored entry {entry.entry_id}")
            # Index under the parent recorded at insertion; the entry object
            # may have been mutated since.
            indexed_parent = self._indexed_parent.pop(entry.entry_id)
            if indexed_parent is not None:
                self._children[indexed_parent].remove(entry.entry_id)

        self._entries[entry.entry_id] = entry
        self._indexed_parent[entry.entry_id] = entry.parent_id
        if entry.parent_id is not None:
            self._children.setdefault(entry.parent_id, []).append(entry.entry_id)

    def get_children(self, entry_id: str) -> List[ContentEntry]:
        return [self._entries[child_id] for child_id in self._children.get(entry_id, [])]

    def get_entry(self, entry_id: str) -> Optional[ContentEntry]:
        return self._entries.get(entry_id)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: str) -> bool:
        return entry_id in self._entries
