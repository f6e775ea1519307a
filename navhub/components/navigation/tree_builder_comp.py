"""
Navigation tree builder component.

Turns a flat list of navigation entries into a rooted forest.

Placement rules:
- parent_id null/absent -> root
- parent_id not present in the input -> root (DANGLING_PARENT_POLICY), logged as a warning
- parent_id forms a cycle -> the cycle member that appears first in the
  input is placed at the root, so every member stays reachable
- otherwise -> child of its parent

Every sibling list, the root forest included, is stably sorted by
sort_order. Input entries are never mutated; nodes wrap them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from navhub.helpers.dto.navigation_dto import NavigationEntry, NavigationTreeNode

logger = logging.getLogger(__name__)

DANGLING_PARENT_POLICY = "root"


def _find_cycle_roots(parents: list[int | None]) -> set[int]:
    """Positions that must be promoted to root to break parent cycles (first-in-input member of each cycle)."""
    state = [0] * len(parents)  # 0 = unseen, 1 = on current walk, 2 = done
    cycle_roots: set[int] = set()

    for start in range(len(parents)):
        if state[start]:
            continue
        walk: list[int] = []
        node: int | None = start
        while node is not None and state[node] == 0:
            state[node] = 1
            walk.append(node)
            node = parents[node]
        if node is not None and state[node] == 1:
            cycle = walk[walk.index(node) :]
            cycle_roots.add(min(cycle))
        for visited in walk:
            state[visited] = 2

    return cycle_roots


def _sort_key(node: NavigationTreeNode) -> int:
    return node.entry.sort_order


def build_tree(entries: Sequence[NavigationEntry]) -> list[NavigationTreeNode]:
    """
    Assemble entries into a forest.

    Total over any input: no entry is dropped or duplicated, whatever
    its parent_id points at.

    Args:
        entries: Flat entries in any order

    Returns:
        Root nodes sorted by sort_order, each with sorted children
    """
    nodes = [NavigationTreeNode(entry=entry, children=[]) for entry in entries]
    position_by_id = {entry.id: pos for pos, entry in enumerate(entries)}

    parents: list[int | None] = []
    for entry in entries:
        if not entry.parent_id:
            parents.append(None)
            continue
        parent_pos = position_by_id.get(entry.parent_id)
        if parent_pos is None:
            logger.warning(
                f"Navigation entry {entry.id} references missing parent {entry.parent_id}; placing at root"
            )
        parents.append(parent_pos)

    for pos in _find_cycle_roots(parents):
        logger.warning(f"Navigation entry {entries[pos].id} is part of a parent cycle; placing at root")
        parents[pos] = None

    roots: list[NavigationTreeNode] = []
    for pos, node in enumerate(nodes):
        parent_pos = parents[pos]
        if parent_pos is None:
            roots.append(node)
        else:
            nodes[parent_pos].children.append(node)

    for node in nodes:
        node.children.sort(key=_sort_key)
    roots.sort(key=_sort_key)
    return roots
