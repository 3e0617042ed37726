from tree_builder.build_tree import build_single, build_tree
from tree_builder.components import (
    AdaptedRecord,
    ConfigurationError,
    CyclicTreeError,
    DefaultAdapter,
    FunctionAdapter,
    InvalidRecordError,
    RecordAdapter,
    TreeBuilderError,
    TreeConfig,
    TreeNode,
    build,
    find_node,
    find_path,
    flatten_tree,
    walk,
)

__all__ = [
    "AdaptedRecord",
    "ConfigurationError",
    "CyclicTreeError",
    "DefaultAdapter",
    "FunctionAdapter",
    "InvalidRecordError",
    "RecordAdapter",
    "TreeBuilderError",
    "TreeConfig",
    "TreeNode",
    "build",
    "build_single",
    "build_tree",
    "find_node",
    "find_path",
    "flatten_tree",
    "walk",
]
