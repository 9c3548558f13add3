"""Tests for tag-name lookup."""

from __future__ import annotations

import pytest

from fragedit.exceptions import InvalidOperationError
from fragedit.html_parser import parse
from fragedit.manipulation import remove
from fragedit.nodes import Tree
from fragedit.query import TagQuery, find_by_tag, iter_descendants
from fragedit.serializer import serialize


class TestFindByTag:
    """Tests for find_by_tag."""

    def test_returns_matches_in_document_order(self) -> None:
        """Matches come back in pre-order traversal order."""
        tree = parse("<div id=a><div id=b></div></div><p><div id=c></div></p>")

        ids = [node.attrs_source for node in find_by_tag(tree, "div")]

        assert ids == [" id=a", " id=b", " id=c"]

    def test_is_case_insensitive(self) -> None:
        """The tag comparison ignores case on both sides."""
        tree = parse("<I>a</I><i>b</i><p>c</p>")

        assert [node.tag for node in find_by_tag(tree, "i")] == ["I", "i"]
        assert len(find_by_tag(tree, "P")) == 1

    def test_text_nodes_never_match(self, demo_tree: Tree) -> None:
        """Only elements are returned."""
        nodes = list(find_by_tag(demo_tree, "h1"))

        assert len(nodes) == 1
        assert nodes[0].is_element

    def test_absent_tag_is_empty(self, demo_tree: Tree) -> None:
        """A tag that does not occur yields nothing."""
        query = find_by_tag(demo_tree, "table")

        assert list(query) == []
        assert query.first() is None
        assert not query.exists()

    def test_rejects_empty_tag(self, demo_tree: Tree) -> None:
        """An empty tag name is a usage error."""
        with pytest.raises(InvalidOperationError, match="must not be empty"):
            find_by_tag(demo_tree, "  ")

    def test_returns_tag_query(self, demo_tree: Tree) -> None:
        """find_by_tag returns a TagQuery bound to the tree."""
        query = find_by_tag(demo_tree, "i")

        assert isinstance(query, TagQuery)
        assert query.tree is demo_tree


class TestTagQuery:
    """Tests for TagQuery laziness and helpers."""

    def test_is_restartable(self, demo_tree: Tree) -> None:
        """Iterating twice walks the tree twice."""
        query = find_by_tag(demo_tree, "i")

        assert list(query) == list(query)
        assert len(list(query)) == 1

    def test_reflects_later_mutation(self, demo_tree: Tree) -> None:
        """A query created before a removal sees the tree after it."""
        query = find_by_tag(demo_tree, "i")
        remove(query.first())

        assert list(query) == []

    def test_is_lazy(self) -> None:
        """Only as much of the tree as needed is walked."""
        tree = parse("<b>1</b><b>2</b>")
        iterator = iter(find_by_tag(tree, "b"))
        first = next(iterator)
        remove(tree.top_level[1])

        assert first.children[0].text == "1"
        assert list(iterator) == []

    def test_remove_all_matches(self) -> None:
        """remove() detaches every match and reports the count."""
        tree = parse("<p><i>a</i>x<i>b<i>c</i></i></p>")
        query = find_by_tag(tree, "i")

        assert query.remove() == 2
        assert not query.exists()
        assert tree.top_level[0].children[0].text == "x"

    def test_remove_during_iteration_skips_subtree(self) -> None:
        """Removing a yielded node stops the walk from entering its subtree."""
        tree = parse("<div><span><b>inner</b></span><b>outer</b></div>")
        seen = []
        for node in iter_descendants(tree.root):
            seen.append(node.tag or node.text)
            if node.tag == "span":
                remove(node)

        assert seen == ["div", "span", "b", "outer"]


class TestTagQueryEdits:
    """Tests for the markup-editing helpers on TagQuery."""

    def test_append_html_to_every_match(self) -> None:
        """Each match gets its own copy of the new nodes."""
        tree = parse("<li>a</li><li>b</li>")

        assert find_by_tag(tree, "li").append_html("<i>!</i>") == 2
        assert serialize(tree) == "<li>a<i>!</i></li><li>b<i>!</i></li>"

        first, second = find_by_tag(tree, "i")
        assert first is not second

    def test_inserted_matches_are_not_revisited(self) -> None:
        """Markup with the queried tag does not feed back into the edit."""
        tree = parse("<b>x</b>")

        assert find_by_tag(tree, "b").append_html("<b>y</b>") == 1
        assert serialize(tree) == "<b>x<b>y</b></b>"

    def test_set_html(self) -> None:
        """set_html replaces the content of each match."""
        tree = parse("<p>one</p><div><p>two</p></div>")

        assert find_by_tag(tree, "p").set_html("<em>new</em>") == 2
        assert serialize(tree) == "<p><em>new</em></p><div><p><em>new</em></p></div>"

    def test_set_html_skips_matches_it_detached(self) -> None:
        """Nested matches cleared by an outer match are not edited."""
        tree = parse("<div>a<div>b</div></div>")

        assert find_by_tag(tree, "div").set_html("c") == 1
        assert serialize(tree) == "<div>c</div>"

    def test_replace_with_html(self, demo_tree: Tree) -> None:
        """Every match is swapped for the parsed markup."""
        query = find_by_tag(demo_tree, "i")

        assert query.replace_with_html("<em>there</em>") == 1
        assert not query.exists()
        assert serialize(demo_tree) == '<div><h1 class="foo">Hello, <em>there</em></h1></div>'

    def test_no_matches_is_noop(self, demo_tree: Tree) -> None:
        """Editing an empty query changes nothing."""
        before = serialize(demo_tree)

        assert find_by_tag(demo_tree, "table").replace_with_html("<p>x</p>") == 0
        assert serialize(demo_tree) == before
