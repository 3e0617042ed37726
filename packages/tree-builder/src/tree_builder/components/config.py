from pydantic import BaseModel, ConfigDict, field_validator

from .errors import ConfigurationError


class TreeConfig(BaseModel):
    """Immutable options for a single build.

    The ``*_field`` names are only read by :class:`DefaultAdapter` and by
    :meth:`TreeNode.to_dict`; typed adapters ignore them.
    """

    model_config = ConfigDict(frozen=True)

    id_field: str = "id"
    parent_id_field: str = "parent_id"
    name_field: str = "name"
    weight_field: str = "weight"
    children_field: str = "children"

    # None means unlimited; 0 and 1 both keep roots only.
    max_depth: int | None = None

    @field_validator("max_depth")
    @classmethod
    def max_depth_not_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ConfigurationError(f"max_depth must be >= 0, got {v}")
        return v

    def allows_depth(self, depth: int) -> bool:
        """Return True if nodes at *depth* (roots are 0) may be attached."""
        return self.max_depth is None or depth < self.max_depth
