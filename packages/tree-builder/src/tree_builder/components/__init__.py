from .adapter import AdaptedRecord, DefaultAdapter, FunctionAdapter, RecordAdapter, as_adapter
from .builder import build, weight_key
from .config import TreeConfig
from .errors import ConfigurationError, CyclicTreeError, InvalidRecordError, TreeBuilderError
from .node import TreeNode
from .traversal import find_node, find_path, flatten_tree, walk

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
    "as_adapter",
    "build",
    "find_node",
    "find_path",
    "flatten_tree",
    "walk",
    "weight_key",
]
