"""Step and path models produced by the tokenizer."""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


class _StepNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Key(_StepNode):
    kind: Literal["key"] = "key"
    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return self.name


class Index(_StepNode):
    kind: Literal["index"] = "index"
    position: int = Field(ge=0)

    def __str__(self) -> str:
        return f"[{self.position}]"


Step: TypeAlias = Annotated[Key | Index, Field(discriminator="kind")]


class QueryPath(BaseModel):
    """An immutable, ordered sequence of steps.

    ``separator`` only affects how the path is rendered back to text.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    steps: tuple[Step, ...] = ()
    separator: str = "."

    def __str__(self) -> str:
        return self.separator.join(str(step) for step in self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def last(self) -> Step:
        if not self.steps:
            raise ValueError("empty path has no last step")
        return self.steps[-1]

    @property
    def parent(self) -> QueryPath:
        if not self.steps:
            raise ValueError("empty path has no parent")
        return self.prefix(len(self.steps) - 1)

    def prefix(self, length: int) -> QueryPath:
        """Return the path made of the first ``length`` steps."""

        return QueryPath(steps=self.steps[:length], separator=self.separator)


__all__ = ["Index", "Key", "QueryPath", "Step"]
