import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, NamedTuple

from pydantic import BaseModel

from .config import TreeConfig
from .errors import InvalidRecordError
from .node import TreeNode


class AdaptedRecord(NamedTuple):
    """What a :class:`FunctionAdapter` callable returns for one record."""

    id: Any
    parent_id: Any = None
    weight: Any = 0
    attributes: Mapping[str, Any] = MappingProxyType({})
    name: Any = None


class RecordAdapter(ABC):
    """Converts one source record into a :class:`TreeNode`.

    Implementations fill ``id``, ``parent_id``, ``weight`` and ``name`` on the
    target node and merge any extra fields into ``node.attributes``. The
    source record must be left untouched.
    """

    @abstractmethod
    def adapt(self, record: Any, node: TreeNode) -> None:
        """Populate *node* from *record*.

        Raises:
            InvalidRecordError: If no identifier can be determined.
        """
        ...

    def __call__(self, record: Any) -> TreeNode:
        node = TreeNode()
        self.adapt(record, node)
        return node


class DefaultAdapter(RecordAdapter):
    """Reads records that expose id / parent id / weight fields by convention.

    Field names come from the :class:`TreeConfig`. Mappings are read by key;
    pydantic models, dataclasses and other objects through their attributes.
    Values are taken as-is, nested models included. Everything that is not a
    structural field ends up in ``attributes``.
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        self._config = config or TreeConfig()

    @property
    def config(self) -> TreeConfig:
        return self._config

    def adapt(self, record: Any, node: TreeNode) -> None:
        fields = self._fields_of(record)
        cfg = self._config

        node_id = fields.get(cfg.id_field)
        if node_id is None:
            raise InvalidRecordError(
                f"Record has no {cfg.id_field!r} value: {record!r}", record=record
            )

        node.id = node_id
        node.parent_id = fields.get(cfg.parent_id_field)
        node.name = fields.get(cfg.name_field)
        node.weight = fields.get(cfg.weight_field, 0)

        structural = {
            cfg.id_field,
            cfg.parent_id_field,
            cfg.name_field,
            cfg.weight_field,
            cfg.children_field,
        }
        node.attributes.update(
            (key, value) for key, value in fields.items() if key not in structural
        )

    @staticmethod
    def _fields_of(record: Any) -> dict[str, Any]:
        """Return a shallow copy of the record's fields as a dict."""
        if isinstance(record, Mapping):
            return dict(record)
        if isinstance(record, BaseModel):
            return {name: getattr(record, name) for name in type(record).model_fields}
        if dataclasses.is_dataclass(record) and not isinstance(record, type):
            return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
        try:
            return dict(vars(record))
        except TypeError as exc:
            raise InvalidRecordError(
                f"Cannot read fields from {type(record).__name__} record", record=record
            ) from exc


class FunctionAdapter(RecordAdapter):
    """Wraps a typed callable ``record -> AdaptedRecord``.

    Example::

        adapter = FunctionAdapter(
            lambda dept: AdaptedRecord(dept.code, dept.parent_code, dept.rank)
        )
    """

    def __init__(self, func: Callable[[Any], AdaptedRecord | tuple]) -> None:
        self._func = func

    def adapt(self, record: Any, node: TreeNode) -> None:
        result = self._func(record)
        if isinstance(result, (str, bytes)):
            raise InvalidRecordError(
                f"Adapter returned {result!r}, expected (id, parent_id, weight, attributes, name)",
                record=record,
            )
        if not isinstance(result, AdaptedRecord):
            try:
                result = AdaptedRecord(*result)
            except TypeError as exc:
                raise InvalidRecordError(
                    f"Adapter returned {result!r}, expected (id, parent_id, weight, attributes, name)",
                    record=record,
                ) from exc

        if result.id is None:
            raise InvalidRecordError(f"Adapter returned no id for {record!r}", record=record)

        node.id = result.id
        node.parent_id = result.parent_id
        node.weight = result.weight
        node.name = result.name
        node.attributes.update(result.attributes or {})


def as_adapter(adapter: Any = None, config: TreeConfig | None = None) -> RecordAdapter:
    """Coerce *adapter* into a :class:`RecordAdapter`.

    ``None`` gives a :class:`DefaultAdapter` bound to *config*, a plain
    callable is wrapped in a :class:`FunctionAdapter`.
    """
    if adapter is None:
        return DefaultAdapter(config)
    if isinstance(adapter, RecordAdapter):
        return adapter
    if callable(adapter):
        return FunctionAdapter(adapter)
    raise TypeError(f"Expected a RecordAdapter or callable, got {type(adapter).__name__}")
