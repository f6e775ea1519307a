"""Unit tests for the navigation tree builder."""

import logging
import random

import pytest

from navhub.components.navigation.tree_builder_comp import build_tree
from navhub.helpers.dto.navigation_dto import NavigationEntry, NavigationTreeNode

pytestmark = pytest.mark.unit


def entry(item_id, parent_id=None, sort_order=999, title=None):
    return NavigationEntry(
        id=item_id,
        title=title or item_id,
        path=f"/admin/{item_id}",
        parent_id=parent_id,
        sort_order=sort_order,
    )


def flatten(roots: list[NavigationTreeNode]) -> list[str]:
    ids: list[str] = []
    stack = list(roots)
    while stack:
        node = stack.pop()
        ids.append(node.entry.id)
        stack.extend(node.children)
    return ids


def child_ids(node: NavigationTreeNode) -> list[str]:
    return [c.entry.id for c in node.children]


class TestBuildTree:
    def test_empty_input(self):
        assert build_tree([]) == []

    def test_parent_child_assembly(self):
        roots = build_tree(
            [
                entry("settings", sort_order=2),
                entry("users", parent_id="settings", sort_order=1),
                entry("dashboard", sort_order=1),
            ]
        )

        assert [r.entry.id for r in roots] == ["dashboard", "settings"]
        assert child_ids(roots[1]) == ["users"]

    def test_siblings_sorted_by_sort_order(self):
        roots = build_tree(
            [
                entry("root", sort_order=1),
                entry("c", parent_id="root", sort_order=30),
                entry("a", parent_id="root", sort_order=10),
                entry("b", parent_id="root", sort_order=20),
            ]
        )

        assert child_ids(roots[0]) == ["a", "b", "c"]

    def test_equal_sort_order_keeps_input_order(self):
        roots = build_tree([entry("x", sort_order=5), entry("y", sort_order=5), entry("z", sort_order=5)])

        assert [r.entry.id for r in roots] == ["x", "y", "z"]

    def test_input_order_does_not_matter_for_placement(self):
        # child listed before its parent
        roots = build_tree([entry("leaf", parent_id="mid"), entry("mid", parent_id="top"), entry("top")])

        assert [r.entry.id for r in roots] == ["top"]
        assert child_ids(roots[0]) == ["mid"]
        assert child_ids(roots[0].children[0]) == ["leaf"]

    def test_dangling_parent_placed_at_root_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            roots = build_tree([entry("orphan", parent_id="deleted-parent"), entry("home", sort_order=0)])

        assert [r.entry.id for r in roots] == ["home", "orphan"]
        assert "orphan" in caplog.text
        assert "deleted-parent" in caplog.text

    def test_self_parent_is_promoted_to_root(self):
        roots = build_tree([entry("loop", parent_id="loop")])

        assert [r.entry.id for r in roots] == ["loop"]
        assert roots[0].children == []

    def test_two_node_cycle_keeps_both(self):
        roots = build_tree([entry("a", parent_id="b"), entry("b", parent_id="a")])

        # first cycle member in input order becomes the root
        assert [r.entry.id for r in roots] == ["a"]
        assert child_ids(roots[0]) == ["b"]

    def test_cycle_with_tail(self):
        roots = build_tree(
            [
                entry("tail", parent_id="c1"),
                entry("c1", parent_id="c2"),
                entry("c2", parent_id="c1"),
                entry("plain"),
            ]
        )

        assert sorted(flatten(roots)) == ["c1", "c2", "plain", "tail"]

    def test_no_entry_lost_or_duplicated(self):
        rng = random.Random(42)
        ids = [f"n{i}" for i in range(60)]
        entries = [
            entry(i, parent_id=rng.choice(ids + [None, "missing"]), sort_order=rng.randint(0, 5)) for i in ids
        ]

        roots = build_tree(entries)

        assert sorted(flatten(roots)) == sorted(ids)

    def test_inputs_not_mutated(self):
        entries = [entry("a", parent_id="ghost"), entry("b", parent_id="a")]

        build_tree(entries)

        assert entries[0].parent_id == "ghost"
        assert entries[1].parent_id == "a"

    def test_node_to_dict_nests_children(self):
        roots = build_tree([entry("p"), entry("c", parent_id="p")])

        data = roots[0].to_dict()

        assert data["id"] == "p"
        assert data["children"][0]["id"] == "c"
        assert data["children"][0]["children"] == []
