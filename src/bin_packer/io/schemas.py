"""Data schemas for the HTTP API."""

from typing import List, Optional
from pydantic import BaseModel, Field

class PackRequestSchema(BaseModel):
    """Schema for a packing request."""
    items: List[int] = Field(description="Item sizes in packing order")
    capacity: int = Field(gt=0, description="Bin capacity")
    min_item_size: Optional[int] = Field(None, gt=0, description="Smallest admissible item size")
    heuristics: Optional[List[str]] = Field(None, description="Heuristics to run (default: all)")
    include_assignment: bool = Field(False, description="Return per-item bin identifiers when available")

class HeuristicResultSchema(BaseModel):
    """Schema for one heuristic's outcome."""
    heuristic: str
    bins_used: int = Field(ge=0, description="Number of bins used")
    elapsed_seconds: float = Field(ge=0, description="Duration of the packing loop")
    gap: int = Field(description="Bins above the trivial lower bound")
    fill_rate: float = Field(ge=0, le=1, description="Total size over used capacity")
    assignment: Optional[List[int]] = None

class PackResponseSchema(BaseModel):
    """Schema for a packing response."""
    n: int = Field(ge=0, description="Number of items")
    capacity: int
    total_size: int = Field(ge=0)
    lower_bound: int = Field(ge=0, description="ceil(total_size / capacity)")
    results: List[HeuristicResultSchema]
