"""Unit tests for reply tree construction."""

import sys

from feed.domain.service.comment_tree import build_comment_tree, count_nodes, walk
from tests.conftest import make_comment


def shape(forest):
    """Reduce a forest to nested (id, children) tuples for comparison."""
    return [(node.id, shape(node.children)) for node in forest]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_returns_empty_forest(self):
        """No comments should give no roots."""
        assert build_comment_tree([]) == []

    def test_single_top_level_comment(self):
        """A comment without parent is a root with no children."""
        roots = build_comment_tree([make_comment("c1")])

        assert shape(roots) == [("c1", [])]

    def test_nests_replies_under_parents(self):
        """Replies should appear under their parent in insertion order."""
        # Arrange
        comments = [
            make_comment("c1"),
            make_comment("c2", parent_id="c1"),
            make_comment("c3"),
            make_comment("c4", parent_id="c2"),
            make_comment("c5", parent_id="c1"),
        ]

        # Act
        roots = build_comment_tree(comments)

        # Assert
        assert shape(roots) == [
            ("c1", [("c2", [("c4", [])]), ("c5", [])]),
            ("c3", []),
        ]

    def test_reply_and_orphan(self):
        """A reply nests under its parent and a reply to "99" becomes a root."""
        # Arrange
        comments = [
            make_comment("1", post_id="p", text="hi"),
            make_comment("2", parent_id="1", post_id="p", text="reply"),
            make_comment("3", parent_id="99", post_id="p", text="orphan"),
        ]

        # Act
        roots = build_comment_tree(comments)

        # Assert
        assert len(roots) == 2
        assert shape(roots) == [("1", [("2", [])]), ("3", [])]
        assert roots[1].comment.text == "orphan"

    def test_reply_listed_before_parent_is_still_nested(self):
        """Linking should not depend on the parent appearing first."""
        comments = [
            make_comment("c2", parent_id="c1"),
            make_comment("c1"),
        ]

        roots = build_comment_tree(comments)

        assert shape(roots) == [("c1", [("c2", [])])]

    def test_missing_parent_makes_root(self):
        """A reply to an unknown comment is shown at top level."""
        comments = [
            make_comment("c1"),
            make_comment("c2", parent_id="ghost"),
        ]

        roots = build_comment_tree(comments)

        assert shape(roots) == [("c1", []), ("c2", [])]

    def test_self_reply_makes_root(self):
        """A comment naming itself as parent is shown at top level."""
        roots = build_comment_tree([make_comment("c1", parent_id="c1")])

        assert shape(roots) == [("c1", [])]

    def test_every_comment_placed_exactly_once(self):
        """Each distinct id should appear once in the forest."""
        # Arrange
        comments = [
            make_comment("a"),
            make_comment("b", parent_id="a"),
            make_comment("c", parent_id="missing"),
            make_comment("d", parent_id="b"),
            make_comment("e", parent_id="e"),
            make_comment("f", parent_id="g"),
            make_comment("g", parent_id="f"),
        ]

        # Act
        roots = build_comment_tree(comments)

        # Assert
        placed = [node.id for node, _ in walk(roots)]
        assert sorted(placed) == ["a", "b", "c", "d", "e", "f", "g"]
        assert count_nodes(roots) == 7

    def test_children_keep_parent_link(self):
        """Every child's parent_id should be the id of the node holding it."""
        comments = [
            make_comment("a"),
            make_comment("b", parent_id="a"),
            make_comment("c", parent_id="b"),
        ]

        roots = build_comment_tree(comments)

        for node, _ in walk(roots):
            for child in node.children:
                assert child.parent_id == node.id

    def test_does_not_modify_input(self):
        """The input list should be left untouched."""
        comments = [make_comment("a"), make_comment("b", parent_id="a")]
        snapshot = list(comments)

        build_comment_tree(comments)

        assert comments == snapshot

    def test_builds_fresh_nodes_each_call(self):
        """Two builds from the same input should not share nodes."""
        comments = [make_comment("a"), make_comment("b", parent_id="a")]

        first = build_comment_tree(comments)
        second = build_comment_tree(comments)

        assert shape(first) == shape(second)
        assert first[0] is not second[0]


class TestCycles:
    """Tests for parent cycles."""

    def test_two_comment_cycle_becomes_two_roots(self):
        """Comments replying to each other are both shown at top level."""
        comments = [
            make_comment("a", parent_id="b"),
            make_comment("b", parent_id="a"),
        ]

        roots = build_comment_tree(comments)

        assert shape(roots) == [("a", []), ("b", [])]

    def test_reply_hanging_off_cycle_keeps_parent(self):
        """A comment that merely points into a cycle stays nested."""
        comments = [
            make_comment("a", parent_id="c"),
            make_comment("b", parent_id="a"),
            make_comment("c", parent_id="b"),
            make_comment("d", parent_id="b"),
        ]

        roots = build_comment_tree(comments)

        assert shape(roots) == [("a", []), ("b", [("d", [])]), ("c", [])]

    def test_without_detection_cycle_members_are_unreachable(self):
        """Naive linking leaves cycle members out of the returned roots."""
        comments = [
            make_comment("root"),
            make_comment("a", parent_id="b"),
            make_comment("b", parent_id="a"),
        ]

        roots = build_comment_tree(comments, detect_cycles=False)

        assert shape(roots) == [("root", [])]
        assert count_nodes(roots) == 1


class TestDuplicateIds:
    """Tests for repeated comment ids in the input."""

    def test_last_record_wins_at_first_position(self):
        """The later record replaces the earlier one in its original slot."""
        # Arrange
        comments = [
            make_comment("a", text="first"),
            make_comment("b"),
            make_comment("a", text="second"),
        ]

        # Act
        roots = build_comment_tree(comments)

        # Assert
        assert [node.id for node in roots] == ["a", "b"]
        assert roots[0].comment.text == "second"


class TestWalk:
    """Tests for walk and count_nodes."""

    def test_walk_yields_depth_first_with_depths(self):
        """Nodes come out in display order with their nesting depth."""
        comments = [
            make_comment("a"),
            make_comment("b", parent_id="a"),
            make_comment("c", parent_id="b"),
            make_comment("d"),
        ]

        roots = build_comment_tree(comments)

        assert [(node.id, depth) for node, depth in walk(roots)] == [
            ("a", 0),
            ("b", 1),
            ("c", 2),
            ("d", 0),
        ]

    def test_deep_chain_beyond_recursion_limit(self):
        """A reply chain deeper than the recursion limit builds and walks."""
        # Arrange
        depth = sys.getrecursionlimit() + 100
        comments = [make_comment("n0")]
        comments += [
            make_comment(f"n{i}", parent_id=f"n{i - 1}") for i in range(1, depth)
        ]

        # Act
        roots = build_comment_tree(comments)

        # Assert
        assert len(roots) == 1
        assert count_nodes(roots) == depth
        last_node, last_depth = list(walk(roots))[-1]
        assert last_node.id == f"n{depth - 1}"
        assert last_depth == depth - 1
