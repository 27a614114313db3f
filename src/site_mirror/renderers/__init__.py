"""Page rendering for static site exports.

This package turns a page entry, its children and its ancestors into a tree
of BeautifulSoup elements ready to be serialized as HTML.
"""

from .classifier import ClassifiedChildren, by_title, by_updated, classify_children, ordered_set
from .ancestor_walker import relative_prefix, resolve_ancestors
from .element_factory import ElementFactory
from .page_renderer import AdditionalContentProvider, PageRenderer
from .additional_content import DEFAULT_PROVIDERS, render_recent_announcements
from .page_assembler import assemble_page

__all__ = [
    'ClassifiedChildren',
    'by_title',
    'by_updated',
    'classify_children',
    'ordered_set',
    'relative_prefix',
    'resolve_ancestors',
    'ElementFactory',
    'AdditionalContentProvider',
    'PageRenderer',
    'DEFAULT_PROVIDERS',
    'render_recent_announcements',
    'assemble_page',
]
