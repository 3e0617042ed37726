import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from .adapter import RecordAdapter, as_adapter
from .config import TreeConfig
from .errors import CyclicTreeError, InvalidRecordError
from .node import TreeNode

logger = logging.getLogger(__name__)


def weight_key(node: TreeNode) -> tuple[bool, Any]:
    """Sort key for siblings: ascending weight, ``None`` weights last."""
    return (node.weight is None, node.weight)


def build(
    records: Iterable[Any],
    root_id: Any = 0,
    config: TreeConfig | None = None,
    adapter: RecordAdapter | Any = None,
) -> list[TreeNode]:
    """Turn flat parent-referencing *records* into a sorted forest.

    Args:
        records:  Source records of any shape, in tie-break order.
        root_id:  The parent id that marks a record as a root.
        config:   Field names and depth bound. A fresh default is used if omitted.
        adapter:  A RecordAdapter, a callable returning an AdaptedRecord, or
                  None for the default structural adapter.

    Returns:
        The root nodes sorted by weight, each carrying its sorted subtree.
        Records whose parent never appears are left out.

    Raises:
        InvalidRecordError: If a record cannot be adapted. Nothing is returned.
        CyclicTreeError:    If duplicate ids would nest a node inside itself.
    """
    config = config or TreeConfig()
    adapter = as_adapter(adapter, config)

    nodes = _adapt_all(records, adapter)

    # Every level looks children up in the full sequence, never a remainder.
    by_parent: dict[Any, list[TreeNode]] = defaultdict(list)
    for node in nodes:
        by_parent[node.parent_id].append(node)

    roots = [node for node in nodes if node.parent_id == root_id]
    attached: set[int] = set()
    for root in roots:
        _attach(root, by_parent, 0, config, [root], attached)
    roots.sort(key=weight_key)

    logger.debug(
        "Built forest: %d records, %d roots, %d attached, %d left out",
        len(nodes),
        len(roots),
        len(attached),
        sum(1 for node in nodes if id(node) not in attached and node.parent_id != root_id),
    )
    return roots


def _adapt_all(records: Iterable[Any], adapter: RecordAdapter) -> list[TreeNode]:
    nodes: list[TreeNode] = []
    for index, record in enumerate(records):
        node = TreeNode()
        try:
            adapter.adapt(record, node)
        except InvalidRecordError as exc:
            if exc.index is None:
                exc.index = index
            raise
        if node.id is None:
            raise InvalidRecordError(
                f"Adapter left the id unset for record {index}", record=record, index=index
            )
        nodes.append(node)
    return nodes


def _attach(
    parent: TreeNode,
    by_parent: dict[Any, list[TreeNode]],
    depth: int,
    config: TreeConfig,
    path: list[TreeNode],
    attached: set[int],
) -> None:
    """Attach the subtree under *parent* (at *depth*), recording every node placed."""
    if not config.allows_depth(depth + 1):
        return

    # Fresh list per visit: a node shared through duplicate ids holds each child once.
    children = list(by_parent.get(parent.id, ()))
    for child in children:
        if any(child is ancestor for ancestor in path):
            raise CyclicTreeError(child.id)
        attached.add(id(child))
        path.append(child)
        _attach(child, by_parent, depth + 1, config, path, attached)
        path.pop()

    if children:
        children.sort(key=weight_key)
        parent.children = children
