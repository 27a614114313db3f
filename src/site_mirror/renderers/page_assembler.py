"""Assembly of a complete page document from renderer fragments."""

import logging

from bs4 import Tag

from .page_renderer import PageRenderer

logger = logging.getLogger(__name__)


def assemble_page(renderer: PageRenderer) -> Tag:
    """Build the html element for a page.

    The body holds, in order: breadcrumb, title, content, additional content,
    subpage links, attachments and comments. Fragments with nothing to
    render are left out.

    Args:
        renderer: Renderer of the page

    Returns:
        The html element of the page
    """
    factory = renderer.element_factory
    html = factory.new_element('html')
    head = factory.new_element('head')
    head.append(factory.new_element('title', renderer.entry.title))
    html.append(head)

    body = factory.new_element('body')
    fragments = [
        renderer.render_parent_links(),
        renderer.render_title(),
        renderer.render_content(),
        renderer.render_additional_content(),
        renderer.render_subpage_links(),
        renderer.render_attachments(),
        renderer.render_comments(),
    ]
    for fragment in fragments:
        if fragment is not None:
            body.append(fragment)
    html.append(body)

    logger.debug(f"Assembled page {renderer.entry.entry_id}")
    return html
