# src/gedcom_lossless/loader/tree_builder.py

from __future__ import annotations

from typing import Iterable, List

from .node import RecordNode


def build_forest(nodes: Iterable[RecordNode]) -> List[RecordNode]:
    """
    Rebuild parent/child nesting from a flat, ordered node stream.

    Rules:
        - Each node attaches to the nearest preceding node with a strictly
          smaller level.
        - A node with no such ancestor starts a new root.
        - Level jumps larger than one are tolerated (the node simply attaches
          to the nearest shallower ancestor).

    Linear in the number of nodes; each node is pushed and popped at most once.

    Returns:
        Root nodes in their original declaration order.
    """
    roots: List[RecordNode] = []
    stack: List[RecordNode] = []

    for node in nodes:
        # Close every sibling/deeper subtree the new node does not nest under.
        while stack and stack[-1].level >= node.level:
            stack.pop()

        if stack:
            stack[-1].add_child(node)
        else:
            roots.append(node)

        stack.append(node)

    return roots
