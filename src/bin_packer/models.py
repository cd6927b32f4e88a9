from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProblemInstance(BaseModel):
    """One-dimensional bin packing instance (item sizes and bin capacity)."""

    model_config = ConfigDict(frozen=True)

    items: list[int] = Field(default_factory=list, description="Item sizes, in packing order")
    capacity: int = Field(gt=0, description="Capacity K of every bin")
    min_item_size: Optional[int] = Field(
        default=None,
        gt=0,
        description="Smallest admissible item size; defaults to the smallest item",
    )
    name: Optional[str] = Field(default=None, description="Optional instance label")

    @model_validator(mode="after")
    def _check_sizes(self) -> "ProblemInstance":
        for index, size in enumerate(self.items):
            if size <= 0:
                raise ValueError(f"item {index} has non-positive size {size}")
            if size > self.capacity:
                raise ValueError(
                    f"item {index} has size {size} which exceeds capacity {self.capacity}"
                )

        if self.min_item_size is None:
            # frozen model: bypass __setattr__ for the derived default
            object.__setattr__(self, "min_item_size", min(self.items) if self.items else 1)
        elif self.min_item_size > self.capacity:
            raise ValueError(
                f"min_item_size {self.min_item_size} exceeds capacity {self.capacity}"
            )
        elif self.items and self.min_item_size > min(self.items):
            raise ValueError(
                f"min_item_size {self.min_item_size} exceeds smallest item {min(self.items)}"
            )
        return self

    @property
    def n(self) -> int:
        return len(self.items)

    @property
    def total_size(self) -> int:
        return sum(self.items)

    @property
    def limit_capacity(self) -> int:
        """Loads above this value cannot take another item."""
        return self.capacity - self.min_item_size


class PackingResult(BaseModel):
    """Standard result returned by every heuristic."""

    heuristic: str = Field(description="Registered name of the heuristic")
    bins_used: int = Field(ge=0, description="Number of bins used")
    elapsed_seconds: float = Field(ge=0, description="Duration of the packing loop")
    assignment: Optional[list[int]] = Field(
        default=None,
        description="Bin identifier per item, when the heuristic records one",
    )
