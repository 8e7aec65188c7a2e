"""Options of a graph generation request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationOptions(BaseModel):
    """Caller-controlled switches of IsaGraphGenerator.generate.

    Attributes:
        depth: Descent depth from the root; negative values are clamped to 0
        deep: Ignore depth and descend to the leaves
        include_parents: Add the root's ancestors and the full subtrees of
            its direct parents (siblings and their descendants)
        include_self: Keep the node of the root object in the result
        auth: Evaluate the visibility predicate for every node
    """

    model_config = ConfigDict(frozen=True)

    depth: int = Field(default=1, description="Descent depth from the root")
    deep: bool = False
    include_parents: bool = False
    include_self: bool = True
    auth: bool = True

    @field_validator("depth")
    @classmethod
    def clamp_negative_depth(cls, value: int) -> int:
        return max(value, 0)

    @property
    def max_depth(self) -> int | None:
        """Effective depth limit; None means unbounded."""
        return None if self.deep else self.depth
