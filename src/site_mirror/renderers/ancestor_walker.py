"""Resolution of a page's ancestor chain for breadcrumbs."""

import logging
from typing import List

from ..entries.entry_store import EntryStore
from ..entries.models import ContentEntry

logger = logging.getLogger(__name__)


def resolve_ancestors(
    entry: ContentEntry,
    entry_store: EntryStore,
    max_depth: int = 100
) -> List[ContentEntry]:
    """Walk parent references from an entry up to the site root.

    The walk ends at the first entry without a parent id. A parent id that the
    store cannot resolve, a parent cycle, or reaching max_depth also end the
    walk; the ancestors resolved so far are kept.

    Args:
        entry: Entry whose ancestors are resolved
        entry_store: Store used to look up parents by id
        max_depth: Maximum number of ancestors to collect

    Returns:
        Ancestors ordered from the site root to the immediate parent.
        Empty if the entry has no resolvable parent.
    """
    ancestors = []
    visited = {entry.entry_id}
    current = entry

    while current.parent_id is not None:
        parent_id = current.parent_id
        if parent_id in visited:
            logger.warning(
                f"Parent cycle detected at {parent_id} while resolving ancestors "
                f"of {entry.entry_id}, truncating breadcrumb"
            )
            break
        if len(ancestors) >= max_depth:
            logger.warning(
                f"Ancestor chain of {entry.entry_id} exceeds {max_depth} levels, "
                f"truncating breadcrumb"
            )
            break

        parent = entry_store.get_entry(parent_id)
        if parent is None:
            logger.warning(
                f"Parent {parent_id} of {current.entry_id} not found, "
                f"truncating breadcrumb"
            )
            break

        ancestors.append(parent)
        visited.add(parent_id)
        current = parent

    ancestors.reverse()
    logger.debug(f"Resolved {len(ancestors)} ancestors for {entry.entry_id}")
    return ancestors


def relative_prefix(levels: int, segment: str = "../") -> str:
    """Return a relative path climbing the given number of directories."""
    return segment * levels
