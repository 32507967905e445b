"""Unit tests for comment tree updates."""

import pytest

from threadview.domain.error import EmptyReplyTextError
from threadview.domain.service.comment_tree import (
    collect_ids,
    count_nodes,
    find_node,
    insert_reply,
    iter_nodes,
    toggle_collapse,
    toggle_reply,
)
from threadview.domain.value import CommentId
from tests.conftest import SequentialIdGenerator, make_comment


def build_thread():
    """Two roots; the first has a reply with its own reply.

    1
    +- 1a
    |  +- 1a-i
    +- 1b
    2
    """
    return (
        make_comment(
            "1",
            None,
            make_comment("1a", None, make_comment("1a-i")),
            make_comment("1b"),
        ),
        make_comment("2"),
    )


def open_boxes(tree):
    return [node.id for node in iter_nodes(tree) if node.is_reply_box_open]


def collapsed(tree):
    return [node.id for node in iter_nodes(tree) if node.is_collapsed]


class TestToggleReply:
    """Tests for toggle_reply."""

    def test_opens_reply_box_on_single_comment(self):
        """Toggling a closed comment should open its reply box."""
        # Arrange
        tree = (make_comment("1", "Hello"),)

        # Act
        result = toggle_reply(tree, CommentId("1"))

        # Assert
        assert result[0].is_reply_box_open is True
        assert result[0].text == "Hello"

    def test_toggling_twice_closes_reply_box(self):
        """Second toggle on the same comment should close it again."""
        tree = build_thread()

        result = toggle_reply(toggle_reply(tree, CommentId("1a")), CommentId("1a"))

        assert open_boxes(result) == []

    def test_opening_deep_comment_closes_other_box(self):
        """Opening a reply box should close the one open elsewhere."""
        # Arrange
        tree = toggle_reply(build_thread(), CommentId("2"))
        assert open_boxes(tree) == ["2"]

        # Act
        result = toggle_reply(tree, CommentId("1a-i"))

        # Assert
        assert open_boxes(result) == ["1a-i"]

    def test_opening_ancestor_closes_descendant_box(self):
        """Opening a parent should close an open box among its replies."""
        tree = toggle_reply(build_thread(), CommentId("1a-i"))

        result = toggle_reply(tree, CommentId("1"))

        assert open_boxes(result) == ["1"]

    def test_interior_comment_box_is_reset(self):
        """A non-target comment with replies should have its box closed."""
        tree = (
            make_comment("1", None, make_comment("1a"), is_reply_box_open=True),
            make_comment("2"),
        )

        result = toggle_reply(tree, CommentId("2"))

        assert open_boxes(result) == ["2"]

    def test_does_not_touch_collapse_state(self):
        """Reply toggles should leave collapse flags alone."""
        tree = (make_comment("1", None, make_comment("1a"), is_collapsed=True),)

        result = toggle_reply(tree, CommentId("1a"))

        assert result[0].is_collapsed is True

    def test_unknown_target_only_resets(self):
        """Unknown target should close all boxes and change nothing else."""
        # Arrange
        tree = toggle_reply(build_thread(), CommentId("1b"))

        # Act
        result = toggle_reply(tree, CommentId("missing"))

        # Assert
        assert open_boxes(result) == []
        assert collect_ids(result) == collect_ids(tree)

    def test_does_not_mutate_input(self):
        """Original tree should keep its flags."""
        tree = build_thread()

        result = toggle_reply(tree, CommentId("1b"))

        assert open_boxes(tree) == []
        assert result is not tree
        assert result[0] is not tree[0]

    def test_preserves_can_reply(self):
        """can_reply should survive a rebuild."""
        tree = (make_comment("1", None, make_comment("1a", can_reply=False)),)

        result = toggle_reply(tree, CommentId("1"))

        assert result[0].children[0].can_reply is False

    def test_empty_thread(self):
        """Empty thread should stay empty."""
        assert toggle_reply((), CommentId("1")) == ()


class TestToggleCollapse:
    """Tests for toggle_collapse."""

    def test_collapses_target(self):
        """Toggling should collapse the target's replies."""
        result = toggle_collapse(build_thread(), CommentId("1"))

        assert collapsed(result) == ["1"]

    def test_double_toggle_restores_target(self):
        """Collapsing twice should expand the target again."""
        tree = build_thread()

        result = toggle_collapse(toggle_collapse(tree, CommentId("1a")), CommentId("1a"))

        assert find_node(result, CommentId("1a")).is_collapsed is False
        assert collect_ids(result) == collect_ids(tree)

    def test_collapsing_child_expands_parent(self):
        """Only the latest toggled comment should stay collapsed."""
        # Arrange
        tree = (make_comment("1", None, make_comment("2")),)

        # Act
        result = toggle_collapse(toggle_collapse(tree, CommentId("1")), CommentId("2"))

        # Assert
        assert result[0].is_collapsed is False
        assert result[0].children[0].is_collapsed is True

    def test_collapsing_parent_expands_replies(self):
        """A collapsed reply should be expanded when its parent is toggled."""
        tree = toggle_collapse(build_thread(), CommentId("1a"))

        result = toggle_collapse(tree, CommentId("1"))

        assert collapsed(result) == ["1"]

    def test_every_other_comment_is_expanded(self):
        """All non-target comments should end up expanded."""
        tree = (
            make_comment("1", None, make_comment("1a"), is_collapsed=True),
            make_comment("2", is_collapsed=True),
        )

        result = toggle_collapse(tree, CommentId("1a"))

        assert collapsed(result) == ["1a"]

    def test_keeps_structure(self):
        """Collapse should not add, drop or reorder comments."""
        tree = build_thread()

        result = toggle_collapse(tree, CommentId("1"))

        assert collect_ids(result) == collect_ids(tree)

    def test_does_not_touch_reply_boxes(self):
        """Collapse toggles should leave reply boxes alone."""
        tree = toggle_reply(build_thread(), CommentId("1a-i"))

        result = toggle_collapse(tree, CommentId("1"))

        assert open_boxes(result) == ["1a-i"]

    def test_unknown_target_expands_everything(self):
        """Unknown target should expand all comments without other changes."""
        tree = toggle_collapse(build_thread(), CommentId("1"))

        result = toggle_collapse(tree, CommentId("missing"))

        assert collapsed(result) == []
        assert count_nodes(result) == count_nodes(tree)


class TestInsertReply:
    """Tests for insert_reply."""

    def test_reply_flow_on_single_comment(self):
        """Open then submit should add one reply and close the box."""
        # Arrange
        tree = (make_comment("1", "Hello"),)
        opened = toggle_reply(tree, CommentId("1"))

        # Act
        result = insert_reply(opened, CommentId("1"), "Hi there")

        # Assert
        root = result[0]
        assert root.is_reply_box_open is False
        assert len(root.children) == 1
        reply = root.children[0]
        assert reply.text == "Hi there"
        assert reply.id != CommentId("1")
        assert reply.can_reply is True
        assert reply.is_reply_box_open is False
        assert reply.is_collapsed is False
        assert reply.children == ()

    def test_appends_after_existing_replies(self):
        """New reply should be the last child of the target."""
        ids = SequentialIdGenerator()

        result = insert_reply(build_thread(), CommentId("1"), "Third", ids.generate)

        assert [child.id for child in result[0].children] == ["1a", "1b", "reply-1"]

    def test_grows_by_exactly_one(self):
        """Thread size should grow by one."""
        tree = build_thread()

        result = insert_reply(tree, CommentId("1a-i"), "Deep reply")

        assert count_nodes(result) == count_nodes(tree) + 1
        deep = find_node(result, CommentId("1a-i"))
        assert [child.text for child in deep.children] == ["Deep reply"]

    def test_uses_generated_id(self):
        """Reply ID should come from the supplied generator."""
        ids = SequentialIdGenerator()

        result = insert_reply(build_thread(), CommentId("2"), "Hey", ids.generate)

        assert find_node(result, CommentId("reply-1")).text == "Hey"
        assert ids.count == 1

    def test_closes_all_reply_boxes(self):
        """Submitting should close any reply box in the thread."""
        tree = (
            make_comment("1", is_reply_box_open=True),
            make_comment("2", None, make_comment("2a", is_reply_box_open=True)),
        )

        result = insert_reply(tree, CommentId("2"), "Reply")

        assert open_boxes(result) == []

    def test_keeps_collapse_state(self):
        """Submitting should not expand or collapse anything."""
        tree = (make_comment("1", None, make_comment("1a"), is_collapsed=True),)

        result = insert_reply(tree, CommentId("1a"), "Reply")

        assert result[0].is_collapsed is True

    def test_unknown_target_adds_nothing(self):
        """Unknown target should keep the same comments and generate no ID."""
        # Arrange
        ids = SequentialIdGenerator()
        tree = toggle_reply(build_thread(), CommentId("1b"))

        # Act
        result = insert_reply(tree, CommentId("missing"), "Lost", ids.generate)

        # Assert
        assert collect_ids(result) == collect_ids(tree)
        assert open_boxes(result) == []
        assert ids.count == 0

    def test_empty_text_raises_error(self):
        """Empty text is a precondition violation."""
        with pytest.raises(EmptyReplyTextError, match="empty text"):
            insert_reply(build_thread(), CommentId("1"), "")

    def test_does_not_mutate_input(self):
        """Original tree should keep its replies."""
        tree = build_thread()

        insert_reply(tree, CommentId("2"), "Reply")

        assert tree[1].children == ()


class TestMutualExclusion:
    """At most one reply box is open after any sequence of actions."""

    def test_sequence_keeps_single_open_box(self):
        ids = SequentialIdGenerator()
        tree = build_thread()
        actions = [
            ("toggle", "1a-i"),
            ("toggle", "2"),
            ("insert", "1"),
            ("toggle", "reply-1"),
            ("toggle", "1"),
            ("insert", "1a"),
            ("toggle", "missing"),
            ("toggle", "1b"),
        ]

        for action, target in actions:
            if action == "toggle":
                tree = toggle_reply(tree, CommentId(target))
            else:
                tree = insert_reply(tree, CommentId(target), "Reply", ids.generate)
            assert len(open_boxes(tree)) <= 1

        assert open_boxes(tree) == ["1b"]


class TestReadHelpers:
    """Tests for tree read helpers."""

    def test_iter_nodes_is_display_order(self):
        assert collect_ids(build_thread()) == ["1", "1a", "1a-i", "1b", "2"]

    def test_count_nodes_includes_collapsed(self):
        tree = toggle_collapse(build_thread(), CommentId("1"))

        assert count_nodes(tree) == 5

    def test_find_node_returns_none_when_missing(self):
        assert find_node(build_thread(), CommentId("missing")) is None
