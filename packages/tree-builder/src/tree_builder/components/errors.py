from typing import Any


class TreeBuilderError(Exception):
    """Base class for every error raised by tree_builder."""


class InvalidRecordError(TreeBuilderError):
    """An adapter could not determine a usable identifier for a record."""

    def __init__(self, message: str, record: Any = None, index: int | None = None) -> None:
        super().__init__(message)
        self.record = record
        self.index = index


class ConfigurationError(TreeBuilderError):
    """A TreeConfig was constructed with an invalid value."""


class CyclicTreeError(TreeBuilderError):
    """A node would be attached beneath itself."""

    def __init__(self, node_id: Any) -> None:
        super().__init__(f"Node {node_id!r} would be attached beneath itself")
        self.node_id = node_id
