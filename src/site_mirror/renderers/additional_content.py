"""Kind-specific extra content for rendered pages.

Providers are plain callables taking the PageRenderer and returning a tag or
None. They are looked up by the rendered page's kind; DEFAULT_PROVIDERS holds
the built-in table.
"""

import logging
from typing import Dict, Optional

from bs4 import Tag

from ..entries.models import EntryKind
from .page_renderer import AdditionalContentProvider, PageRenderer

logger = logging.getLogger(__name__)


def render_recent_announcements(renderer: PageRenderer) -> Optional[Tag]:
    """List the newest announcements posted under an announcements page.

    Announcements come from the page's announcement children, newest first,
    up to the configured limit. Announcements sharing a title are all listed.
    Each one shows a link to its page, a "Posted on ... by ..." line and its
    body.

    Returns:
        Announcements block, or None if the page has no announcements
    """
    announcements = list(reversed(renderer.announcements))
    if not announcements:
        return None

    limit = renderer.config.announcements_limit
    if len(announcements) > limit:
        logger.debug(
            f"Showing {limit} of {len(announcements)} announcements "
            f"on {renderer.entry.entry_id}"
        )
        announcements = announcements[:limit]

    factory = renderer.element_factory
    div = factory.new_element('div')
    for announcement in announcements:
        announcement_div = factory.get_entry_element(announcement, 'div')
        heading = factory.new_element('h4')
        href = f"{announcement.page_name}/{renderer.config.index_filename}"
        heading.append(factory.get_hyperlink(href, announcement.title))
        announcement_div.append(heading)
        announcement_div.append("Posted on ")
        announcement_div.append(factory.get_updated_element(announcement))
        announcement_div.append(" by ")
        announcement_div.append(factory.get_author_element(announcement))
        announcement_div.append(factory.get_content_element(announcement))
        div.append(announcement_div)
    return div


DEFAULT_PROVIDERS: Dict[EntryKind, AdditionalContentProvider] = {
    EntryKind.ANNOUNCEMENTS_PAGE: render_recent_announcements,
}
