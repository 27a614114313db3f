"""Rendering of a single page into element fragments.

A PageRenderer is created for one page and one entry store snapshot. The
page's children are classified and ordered once at construction; every
render_* method afterwards is a read-only projection of that state and
returns either a BeautifulSoup tag or None when there is nothing to render.
"""

import logging
from typing import Callable, Mapping, Optional, Tuple

from bs4 import Tag

from ..config.models import RenderConfig
from ..entries.entry_store import EntryStore
from ..entries.models import AttachmentEntry, CommentEntry, EntryKind, PageEntry
from ..errors import InvalidInputError
from .ancestor_walker import relative_prefix, resolve_ancestors
from .classifier import ClassifiedChildren, classify_children
from .element_factory import ElementFactory

logger = logging.getLogger(__name__)

AdditionalContentProvider = Callable[['PageRenderer'], Optional[Tag]]


class PageRenderer:
    """Renders the fragments of an exported page.

    Example:
        >>> renderer = PageRenderer(page, store)
        >>> body = [renderer.render_title(), renderer.render_content()]
        >>> links = renderer.render_subpage_links()  # None without subpages
    """

    def __init__(
        self,
        entry: PageEntry,
        entry_store: EntryStore,
        element_factory: Optional[ElementFactory] = None,
        config: Optional[RenderConfig] = None,
        additional_content: Optional[Mapping[EntryKind, AdditionalContentProvider]] = None
    ):
        """Initialize the renderer and classify the page's children.

        Args:
            entry: Page to render
            entry_store: Store holding the page, its children and its ancestors
            element_factory: Factory for atomic elements. Created from config
                             when None.
            config: Render configuration. Defaults apply when None.
            additional_content: Providers of extra content keyed by page kind.
                                No extra content is rendered when None.

        Raises:
            InvalidInputError: If entry or entry_store is None, or the store
                               yields a None child
        """
        if entry is None:
            raise InvalidInputError("entry")
        if entry_store is None:
            raise InvalidInputError("entry_store")

        self._entry = entry
        self._entry_store = entry_store
        self.config = config or RenderConfig()
        self.element_factory = element_factory or ElementFactory(self.config)
        self._providers = dict(additional_content or {})
        self._children: ClassifiedChildren = classify_children(
            entry_store.get_children(entry.entry_id)
        )

        logger.debug(
            f"Page {entry.entry_id} ('{entry.title}'): "
            f"{len(self.subpages)} subpages, {len(self.attachments)} attachments, "
            f"{len(self.comments)} comments"
        )

    @property
    def entry(self) -> PageEntry:
        return self._entry

    @property
    def entry_store(self) -> EntryStore:
        return self._entry_store

    @property
    def subpages(self) -> Tuple[PageEntry, ...]:
        return self._children.subpages

    @property
    def attachments(self) -> Tuple[AttachmentEntry, ...]:
        return self._children.attachments

    @property
    def comments(self) -> Tuple[CommentEntry, ...]:
        return self._children.comments

    @property
    def announcements(self) -> Tuple[PageEntry, ...]:
        return self._children.announcements

    def render_title(self) -> Tag:
        factory = self.element_factory
        title = factory.new_element('h3')
        title.append(factory.get_title_element(self._entry))
        return title

    def render_content(self) -> Tag:
        """Render the page body preceded by its "Updated on ... by ..." line."""
        factory = self.element_factory
        div = factory.new_element('div')
        div.append("Updated on ")
        div.append(factory.get_updated_element(self._entry))
        div.append(" by ")
        div.append(factory.get_author_element(self._entry))
        div.append(factory.get_content_element(self._entry))
        return div

    def render_attachments(self) -> Optional[Tag]:
        """Render the attachment list with download links.

        Returns:
            Attachments block, or None if the page has no attachments
        """
        if not self.attachments:
            return None

        factory = self.element_factory
        div = self._section_element(f"Attachments ({len(self.attachments)})")
        for attachment in self.attachments:
            attachment_div = factory.get_entry_element(attachment, 'div')
            link = factory.new_element('a', attrs={
                'href': f"{self._entry.page_name}/{attachment.title}"
            })
            link.append(factory.get_title_element(attachment))
            attachment_div.append(link)
            attachment_div.append(" - on ")
            attachment_div.append(factory.get_updated_element(attachment))
            attachment_div.append(" by ")
            attachment_div.append(factory.get_author_element(attachment))
            attachment_div.append(" (Version ")
            attachment_div.append(factory.get_revision_element(attachment))
            attachment_div.append(")")
            div.append(attachment_div)
        return div

    def render_comments(self) -> Optional[Tag]:
        """Render the comment list.

        Returns:
            Comments block, or None if the page has no comments
        """
        if not self.comments:
            return None

        factory = self.element_factory
        div = self._section_element(f"Comments ({len(self.comments)})")
        for comment in self.comments:
            comment_div = factory.get_entry_element(comment, 'div')
            comment_div.append(factory.get_author_element(comment))
            comment_div.append(" - ")
            comment_div.append(factory.get_updated_element(comment))
            comment_div.append(" (Version ")
            comment_div.append(factory.get_revision_element(comment))
            comment_div.append(")")
            comment_div.append(factory.get_content_element(comment))
            div.append(comment_div)
        return div

    def render_subpage_links(self) -> Optional[Tag]:
        """Render links to the page's subpages, ordered by title.

        Returns:
            Subpage links block, or None if the page has no subpages
        """
        if not self.subpages:
            return None

        factory = self.element_factory
        div = factory.new_element('div')
        div.append(factory.new_element('hr'))
        div.append(f"Subpages ({len(self.subpages)}): ")
        for index, subpage in enumerate(self.subpages):
            if index > 0:
                div.append(self.config.subpage_separator)
            href = f"{subpage.page_name}/{self.config.index_filename}"
            div.append(factory.get_hyperlink(href, subpage.title))
        return div

    def render_parent_links(self) -> Optional[Tag]:
        """Render the breadcrumb from the site root to the immediate parent.

        Each page is exported as an index file inside its own directory, so
        the ancestor n levels up is reached by climbing n directories. Every
        link is followed by the breadcrumb separator, which leads into the
        page's own title.

        Returns:
            Breadcrumb block, or None if no ancestor could be resolved
        """
        ancestors = resolve_ancestors(
            self._entry,
            self._entry_store,
            self.config.max_ancestor_depth
        )
        if not ancestors:
            return None

        factory = self.element_factory
        div = factory.new_element('div')
        depth = len(ancestors)
        for index, ancestor in enumerate(ancestors):
            levels = depth - index
            href = (
                relative_prefix(levels, self.config.parent_path_segment)
                + self.config.index_filename
            )
            div.append(factory.get_hyperlink(href, ancestor.title))
            div.append(self.config.breadcrumb_separator)
        return div

    def render_additional_content(self) -> Optional[Tag]:
        """Render extra content registered for this page's kind.

        Returns:
            Provider output, or None if no provider handles this kind
        """
        provider = self._providers.get(self._entry.kind)
        if provider is None:
            return None
        return provider(self)

    def _section_element(self, heading: str) -> Tag:
        """Create a div opening with a separator rule and an h4 heading."""
        factory = self.element_factory
        div = factory.new_element('div')
        div.append(factory.new_element('hr'))
        div.append(factory.new_element('h4', heading))
        return div
