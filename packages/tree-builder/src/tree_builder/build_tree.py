"""
TreeBuilder - turns flat parent-referencing records into a nested forest.

Each record becomes a node:

{
  "id": <identifier, unique within the input>,
  "parent_id": <identifier of the parent, or the root id for roots>,
  "name": <optional display name>,
  "weight": <sort key among siblings, ascending, ties keep input order>,
  "children": [<nested nodes, omitted for leaves>],
  ...: <every other field of the record, carried through unchanged>
}

Usage (CLI):
    tree-builder records.json [--root-id 0] [--max-depth N] [--output <file.json>]

Usage (library):
    from tree_builder import build_tree
    roots = build_tree(records, root_id=0)
"""

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from typing import Any

from tree_builder.components.adapter import RecordAdapter
from tree_builder.components.builder import build
from tree_builder.components.config import TreeConfig
from tree_builder.components.errors import TreeBuilderError
from tree_builder.components.node import TreeNode
from tree_builder.settings import get_settings

logger = logging.getLogger(__name__)


def build_tree(
    records: Iterable[Any],
    root_id: Any = 0,
    config: TreeConfig | None = None,
    adapter: RecordAdapter | Any = None,
) -> list[TreeNode]:
    """Build *records* into a sorted list of root nodes. See :func:`build`."""
    return build(records, root_id=root_id, config=config, adapter=adapter)


def build_single(
    records: Iterable[Any],
    root_id: Any = 0,
    config: TreeConfig | None = None,
    adapter: RecordAdapter | Any = None,
) -> TreeNode:
    """Build the forest and hang it under a synthetic node whose id is *root_id*."""
    root = TreeNode(id=root_id)
    for node in build(records, root_id=root_id, config=config, adapter=adapter):
        root.add_child(node)
    return root


def _parse_root_id(raw: str) -> Any:
    """Read ``--root-id`` as JSON so ``0``, ``"0"`` and ``null`` differ; bare words stay strings."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Build a nested tree from a JSON array of parent-referencing records."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file holding an array of records (default: stdin)",
    )
    parser.add_argument(
        "--root-id",
        default="0",
        type=_parse_root_id,
        help="Parent id that marks a root, parsed as JSON (default: 0)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=settings.max_depth,
        help="Number of levels to keep, roots included (default: unlimited)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    parser.add_argument("--indent", type=int, default=settings.indent)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.input == "-":
            records = json.load(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as f:
                records = json.load(f)
        if not isinstance(records, list):
            raise TreeBuilderError(f"Expected a JSON array of records, got {type(records).__name__}")

        config = TreeConfig(max_depth=args.max_depth)
        roots = build_tree(records, root_id=args.root_id, config=config)
    except (OSError, json.JSONDecodeError, TreeBuilderError) as exc:
        logger.error("Could not build tree from %s: %s", args.input, exc)
        parser.exit(2, f"error: {exc}\n")

    output = json.dumps([root.to_dict(config) for root in roots], indent=args.indent, default=str)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Tree written to {args.output} ({len(roots)} roots)")
    else:
        print(output)


if __name__ == "__main__":
    main()
