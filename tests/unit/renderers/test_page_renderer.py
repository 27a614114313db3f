"""Unit tests for renderers.page_renderer module."""

from unittest.mock import Mock

import pytest

from site_mirror.config.models import RenderConfig
from site_mirror.entries.models import EntryKind
from site_mirror.errors import InvalidInputError
from site_mirror.renderers.element_factory import ElementFactory
from site_mirror.renderers.page_renderer import PageRenderer
from tests.fixtures.sample_entries import (
    at,
    make_attachment,
    make_comment,
    make_other,
    make_page,
)


def link_pairs(element):
    """Return (href, text) for every link directly inside element."""
    return [(a['href'], a.get_text()) for a in element.find_all('a', recursive=False)]


class TestPageRenderer:
    """Shared fixtures for PageRenderer tests."""

    @pytest.fixture
    def page(self, store):
        page = make_page("page", "My Page", page_name="my-page")
        store.add_entry(page)
        return page


class TestConstruction(TestPageRenderer):
    """Test PageRenderer construction."""

    def test_none_entry_raises(self, store):
        with pytest.raises(InvalidInputError) as exc_info:
            PageRenderer(None, store)

        assert "entry must not be None" in str(exc_info.value)

    def test_none_store_raises(self, page):
        with pytest.raises(InvalidInputError) as exc_info:
            PageRenderer(page, None)

        assert exc_info.value.argument == "entry_store"

    def test_none_child_raises(self, page):
        mock_store = Mock()
        mock_store.get_children.return_value = [None]

        with pytest.raises(InvalidInputError):
            PageRenderer(page, mock_store)

    def test_children_read_once(self, page):
        """Children are classified at construction; rendering does not reread them."""
        mock_store = Mock()
        mock_store.get_children.return_value = [make_comment("c", "page", at(1))]
        renderer = PageRenderer(page, mock_store)

        renderer.render_comments()
        renderer.render_comments()

        mock_store.get_children.assert_called_once_with("page")

    def test_classified_collections(self, store, page):
        sub = make_page("sub", "Sub", parent_id="page")
        attachment = make_attachment("a", "f.txt", "page", at(1))
        comment = make_comment("c", "page", at(2))
        for entry in (sub, attachment, comment, make_other("li", "page")):
            store.add_entry(entry)

        renderer = PageRenderer(page, store)

        assert renderer.entry is page
        assert renderer.entry_store is store
        assert renderer.subpages == (sub,)
        assert renderer.attachments == (attachment,)
        assert renderer.comments == (comment,)

    def test_uses_supplied_factory(self, store, page):
        factory = ElementFactory()
        renderer = PageRenderer(page, store, element_factory=factory)

        assert renderer.element_factory is factory


class TestEmptyPage(TestPageRenderer):
    """A page with no children and no parent."""

    def test_collection_renders_are_empty(self, store, page):
        renderer = PageRenderer(page, store)

        assert renderer.render_attachments() is None
        assert renderer.render_comments() is None
        assert renderer.render_subpage_links() is None
        assert renderer.render_parent_links() is None
        assert renderer.render_additional_content() is None

    def test_title_and_content_still_render(self, store, page):
        renderer = PageRenderer(page, store)

        assert renderer.render_title() is not None
        assert renderer.render_content() is not None


class TestRenderTitle(TestPageRenderer):

    def test_render_title(self, store, page):
        title = PageRenderer(page, store).render_title()

        assert str(title) == '<h3><span class="entry-title">My Page</span></h3>'


class TestRenderContent(TestPageRenderer):

    def test_render_content(self, store, page):
        content = PageRenderer(page, store).render_content()

        assert content.name == 'div'
        assert content.get_text().startswith("Updated on Jun 01, 2009 12:00 PM by Ada Lovelace")
        assert content.find('abbr', class_='updated') is not None
        assert content.find(class_='author') is not None
        body = content.find('div', class_='entry-content')
        assert body.find('p').get_text() == 'Body'


class TestRenderAttachments(TestPageRenderer):

    def test_attachments_in_updated_order(self, store, page):
        """Two attachments updated at T1 < T2 render in that order."""
        newer = make_attachment("a2", "newer.pdf", "page", at(20), revision=3)
        older = make_attachment("a1", "older.pdf", "page", at(10))
        store.add_entry(newer)
        store.add_entry(older)

        div = PageRenderer(page, store).render_attachments()

        children = [c for c in div.children]
        assert children[0].name == 'hr'
        assert children[1].name == 'h4'
        assert children[1].get_text() == 'Attachments (2)'
        rows = div.find_all('div', recursive=False)
        assert [row['id'] for row in rows] == ['a1', 'a2']

    def test_attachment_row(self, store, page):
        store.add_entry(make_attachment("a1", "report.pdf", "page", at(0), revision=3))

        div = PageRenderer(page, store).render_attachments()

        row = div.find('div', recursive=False)
        link = row.find('a', recursive=False)
        assert link['href'] == 'my-page/report.pdf'
        assert link.find(class_='entry-title').get_text() == 'report.pdf'
        assert row.get_text() == (
            "report.pdf - on Jun 01, 2009 12:00 PM by Ada Lovelace (Version 3)"
        )


class TestRenderComments(TestPageRenderer):

    def test_comments_in_updated_order(self, store, page):
        store.add_entry(make_comment("c2", "page", at(30), content="<p>Second</p>"))
        store.add_entry(make_comment("c1", "page", at(5), content="<p>First</p>"))

        div = PageRenderer(page, store).render_comments()

        assert div.find('h4').get_text() == 'Comments (2)'
        rows = div.find_all('div', recursive=False)
        assert [row['id'] for row in rows] == ['c1', 'c2']
        assert rows[0].find(class_='entry-content').get_text() == 'First'

    def test_comment_row(self, store, page):
        store.add_entry(make_comment("c1", "page", at(0), content="<p>Hi</p>", revision=2))

        row = PageRenderer(page, store).render_comments().find('div', recursive=False)

        assert row.get_text() == "Grace Hopper - Jun 01, 2009 12:00 PM (Version 2)Hi"
        assert 'entry-content' in row.contents[-1]['class']


class TestRenderSubpageLinks(TestPageRenderer):

    def test_subpage_links(self, store, page):
        store.add_entry(make_page("s2", "Beta", parent_id="page", page_name="beta"))
        store.add_entry(make_page("s1", "Alpha", parent_id="page", page_name="alpha"))

        div = PageRenderer(page, store).render_subpage_links()

        assert div.contents[0].name == 'hr'
        assert div.get_text() == "Subpages (2): Alpha, Beta"
        assert link_pairs(div) == [
            ("alpha/index.html", "Alpha"),
            ("beta/index.html", "Beta"),
        ]

    def test_duplicate_titles_collapse(self, store, page):
        store.add_entry(make_page("s1", "Same", parent_id="page", page_name="same"))
        store.add_entry(make_page("s2", "Same", parent_id="page", page_name="same-2"))

        div = PageRenderer(page, store).render_subpage_links()

        assert div.get_text() == "Subpages (1): Same"
        assert link_pairs(div) == [("same/index.html", "Same")]

    def test_custom_separator_and_index(self, store, page):
        store.add_entry(make_page("s1", "A", parent_id="page", page_name="a"))
        store.add_entry(make_page("s2", "B", parent_id="page", page_name="b"))
        config = RenderConfig(subpage_separator=" | ", index_filename="home.html")

        div = PageRenderer(page, store, config=config).render_subpage_links()

        assert div.get_text() == "Subpages (2): A | B"
        assert link_pairs(div)[0] == ("a/home.html", "A")


class TestRenderParentLinks(TestPageRenderer):

    @pytest.fixture
    def chain(self, store):
        root = make_page("root", "Root")
        mid = make_page("mid", "Mid", parent_id="root")
        leaf = make_page("leaf", "Leaf", parent_id="mid")
        for entry in (root, mid, leaf):
            store.add_entry(entry)
        return leaf

    def test_breadcrumb(self, store, chain):
        div = PageRenderer(chain, store).render_parent_links()

        assert link_pairs(div) == [
            ("../../index.html", "Root"),
            ("../index.html", "Mid"),
        ]
        assert div.get_text() == "Root > Mid > "

    def test_unresolved_parent_renders_nothing(self, store):
        leaf = make_page("leaf", "Leaf", parent_id="missing")
        store.add_entry(leaf)

        assert PageRenderer(leaf, store).render_parent_links() is None

    def test_prefix_length_matches_depth(self, store):
        entries = [make_page("p0", "P0")]
        for i in range(1, 5):
            entries.append(make_page(f"p{i}", f"P{i}", parent_id=f"p{i - 1}"))
        for entry in entries:
            store.add_entry(entry)

        div = PageRenderer(entries[-1], store).render_parent_links()

        hrefs = [href for href, _ in link_pairs(div)]
        assert hrefs == [
            "../../../../index.html",
            "../../../index.html",
            "../../index.html",
            "../index.html",
        ]

    def test_custom_breadcrumb_config(self, store, chain):
        config = RenderConfig(breadcrumb_separator=" / ", parent_path_segment="..\\")

        div = PageRenderer(chain, store, config=config).render_parent_links()

        assert div.get_text() == "Root / Mid / "
        assert link_pairs(div)[0][0] == "..\\..\\index.html"


class TestRenderAdditionalContent(TestPageRenderer):

    def test_provider_for_page_kind(self, store, page):
        factory = ElementFactory()
        marker = factory.new_element('div', 'extra')
        provider = Mock(return_value=marker)

        renderer = PageRenderer(
            page, store,
            element_factory=factory,
            additional_content={EntryKind.WEB_PAGE: provider}
        )

        assert renderer.render_additional_content() is marker
        provider.assert_called_once_with(renderer)

    def test_provider_for_other_kind_is_ignored(self, store, page):
        provider = Mock()

        renderer = PageRenderer(
            page, store, additional_content={EntryKind.LIST_PAGE: provider}
        )

        assert renderer.render_additional_content() is None
        provider.assert_not_called()


class TestIdempotence(TestPageRenderer):

    def test_repeated_renders_are_identical(self, store):
        store.add_entry(make_page("root", "Root"))
        page = make_page("page", "My Page", parent_id="root", page_name="my-page")
        store.add_entry(page)
        store.add_entry(make_page("s1", "Sub", parent_id="page"))
        store.add_entry(make_attachment("a1", "f.txt", "page", at(1)))
        store.add_entry(make_comment("c1", "page", at(2)))
        renderer = PageRenderer(page, store)

        for render in (
            renderer.render_title,
            renderer.render_content,
            renderer.render_attachments,
            renderer.render_comments,
            renderer.render_subpage_links,
            renderer.render_parent_links,
        ):
            assert str(render()) == str(render())
