"""Atomic element construction for rendered pages.

Elements are BeautifulSoup tags marked up with hAtom/hCard class names so an
exported page can be parsed back into entries. The factory owns the document
used to mint new tags; tags from one factory can be nested freely.
"""

import logging
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag

from ..config.models import RenderConfig
from ..entries.models import ContentEntry

logger = logging.getLogger(__name__)


class ElementFactory:
    """Builds the element fragments shared by all page renderers.

    Example:
        >>> factory = ElementFactory()
        >>> str(factory.get_hyperlink("child/index.html", "Child"))
        '<a href="child/index.html">Child</a>'
    """

    def __init__(self, config: Optional[RenderConfig] = None, parser: str = "html.parser"):
        """Initialize the factory.

        Args:
            config: Render configuration (timestamp format). Defaults apply
                    when None.
            parser: BeautifulSoup parser used for entry XHTML content
        """
        self.config = config or RenderConfig()
        self.parser = parser
        self._document = BeautifulSoup("", self.parser)

    def new_element(
        self,
        name: str,
        text: Optional[str] = None,
        attrs: Optional[Dict[str, str]] = None
    ) -> Tag:
        """Create a tag, optionally holding a text node."""
        element = self._document.new_tag(name, attrs=attrs or {})
        if text is not None:
            element.append(text)
        return element

    def get_entry_element(self, entry: ContentEntry, tag: str) -> Tag:
        """Create the hentry container for an entry."""
        return self.new_element(tag, attrs={
            'class': f"hentry {entry.kind.value}",
            'id': entry.entry_id,
        })

    def get_title_element(self, entry: ContentEntry) -> Tag:
        return self.new_element('span', entry.title, {'class': 'entry-title'})

    def get_updated_element(self, entry: ContentEntry) -> Tag:
        """Render the updated timestamp, machine-readable in the title attribute."""
        return self.new_element(
            'abbr',
            entry.updated.strftime(self.config.timestamp_format),
            {'class': 'updated', 'title': entry.updated.isoformat()}
        )

    def get_author_element(self, entry: ContentEntry) -> Tag:
        """Render the author as an hCard.

        The name links to a mailto: address when the email is known. With only
        an email, the email itself is the link text. With neither, the vcard is
        left empty.
        """
        author = self.new_element('span', attrs={'class': 'author'})
        vcard = self.new_element('span', attrs={'class': 'vcard'})
        name = entry.author
        email = entry.author_email

        if name:
            if email:
                fn = self.get_hyperlink(f"mailto:{email}", name)
            else:
                fn = self.new_element('span', name)
            fn['class'] = 'fn'
            vcard.append(fn)
        elif email:
            link = self.get_hyperlink(f"mailto:{email}", email)
            link['class'] = 'email'
            vcard.append(link)
        else:
            logger.debug(f"Entry {entry.entry_id} has no author")

        author.append(vcard)
        return author

    def get_revision_element(self, entry: ContentEntry) -> Tag:
        return self.new_element('span', str(entry.revision), {'class': 'sites:revision'})

    def get_content_element(self, entry: ContentEntry) -> Tag:
        """Render the entry body, parsing its XHTML into child nodes."""
        content = self.new_element('div', attrs={'class': 'entry-content'})
        if entry.content:
            fragment = BeautifulSoup(entry.content, self.parser)
            for node in list(fragment.contents):
                content.append(node.extract())
        return content

    def get_hyperlink(self, href: str, text: str) -> Tag:
        return self.new_element('a', text, {'href': href})
