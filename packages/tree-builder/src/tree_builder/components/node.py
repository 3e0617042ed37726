from typing import Any

from pydantic import BaseModel, Field

from .config import TreeConfig


class TreeNode(BaseModel):
    """One node of a built forest.

    ``children`` stays ``None`` until the first child is attached. A node
    knows its parent only through ``parent_id``.
    """

    id: Any = None
    parent_id: Any = None
    name: Any = None
    weight: Any = 0
    children: list["TreeNode"] | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    def add_child(self, node: "TreeNode") -> None:
        if self.children is None:
            self.children = []
        self.children.append(node)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def is_root(self, root_id: Any = 0) -> bool:
        return self.parent_id == root_id

    def to_dict(self, config: TreeConfig | None = None) -> dict[str, Any]:
        """Export the subtree as plain nested dicts.

        Keys follow the field names of *config*; ``attributes`` are merged
        into the same mapping and never override the structural keys. The
        children key is left out for leaves.
        """
        config = config or TreeConfig()
        data: dict[str, Any] = dict(self.attributes)
        data[config.id_field] = self.id
        data[config.parent_id_field] = self.parent_id
        if self.name is not None:
            data[config.name_field] = self.name
        data[config.weight_field] = self.weight
        if self.children:
            data[config.children_field] = [child.to_dict(config) for child in self.children]
        return data


TreeNode.model_rebuild()
