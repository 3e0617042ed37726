"""Read-only helpers over a forest returned by :func:`build`."""

from collections.abc import Iterable, Iterator
from typing import Any

from .config import TreeConfig
from .node import TreeNode


def walk(forest: Iterable[TreeNode], depth: int = 0) -> Iterator[tuple[int, TreeNode]]:
    """Yield ``(depth, node)`` pairs in depth-first pre-order."""
    for node in forest:
        yield depth, node
        if node.children:
            yield from walk(node.children, depth + 1)


def find_node(forest: Iterable[TreeNode], node_id: Any) -> TreeNode | None:
    """Return the first node whose id equals *node_id*, or None."""
    for _, node in walk(forest):
        if node.id == node_id:
            return node
    return None


def find_path(forest: Iterable[TreeNode], node_id: Any) -> list[TreeNode]:
    """Return the nodes from a root down to *node_id*, both included.

    An empty list means the id is not in the forest.
    """
    for node in forest:
        if node.id == node_id:
            return [node]
        if node.children:
            tail = find_path(node.children, node_id)
            if tail:
                return [node, *tail]
    return []


def flatten_tree(
    forest: Iterable[TreeNode], config: TreeConfig | None = None
) -> list[dict[str, Any]]:
    """Flatten a forest back into a list of dicts, adding a ``depth`` key."""
    config = config or TreeConfig()
    result: list[dict[str, Any]] = []
    for depth, node in walk(forest):
        flat = node.model_copy(update={"children": None}).to_dict(config)
        flat["depth"] = depth
        result.append(flat)
    return result
