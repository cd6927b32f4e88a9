"""Read problem instances from JSON files and OR-Library (Beasley) files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field

from bin_packer.models import ProblemInstance

PathLike = Union[str, Path]


class BeasleyInstance(BaseModel):
    """Instance from an OR-Library file together with its known optimum."""

    instance: ProblemInstance
    optimal: Optional[int] = Field(default=None, description="Best known bin count")


def load_instance_json(path: PathLike) -> ProblemInstance:
    """
    Load one instance from JSON:
    {"name": ..., "capacity": K, "items": [...], "min_item_size": ...}
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    for key in ("capacity", "items"):
        if key not in data:
            raise ValueError(f"{path}: missing '{key}'")
    return ProblemInstance(**data)


def _int_field(token: str, path: PathLike, line_no: int) -> int:
    try:
        value = float(token)  # Handle both int and float formats
    except ValueError:
        raise ValueError(f"{path}:{line_no}: expected a number, got '{token}'") from None
    if not value.is_integer():
        raise ValueError(f"{path}:{line_no}: expected an integer size, got '{token}'")
    return int(value)


def load_beasley_format(path: PathLike) -> list[BeasleyInstance]:
    """
    Load bin packing instances from OR-Library Beasley format.

    Format:
    - Line 1: number of instances in file
    - For each instance:
      - Line: instance name
      - Line: capacity n_items optimal_bins
      - Next n_items lines: item sizes
    """
    # keep (line number, text) for error messages, skip blank lines
    lines = [
        (no, line.strip())
        for no, line in enumerate(Path(path).read_text(encoding="utf-8").splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        raise ValueError(f"{path}: empty file")

    position = 0

    def next_line() -> tuple[int, str]:
        nonlocal position
        if position >= len(lines):
            raise ValueError(f"{path}: unexpected end of file")
        entry = lines[position]
        position += 1
        return entry

    no, text = next_line()
    n_instances = _int_field(text, path, no)

    instances: list[BeasleyInstance] = []
    for _ in range(n_instances):
        _, name = next_line()

        no, header = next_line()
        parts = header.split()
        if len(parts) < 2:
            raise ValueError(f"{path}:{no}: expected 'capacity n_items [optimal]'")
        capacity = _int_field(parts[0], path, no)
        n_items = _int_field(parts[1], path, no)
        optimal = _int_field(parts[2], path, no) if len(parts) > 2 else None

        items = []
        for _ in range(n_items):
            no, text = next_line()
            items.append(_int_field(text, path, no))

        instances.append(
            BeasleyInstance(
                instance=ProblemInstance(items=items, capacity=capacity, name=name),
                optimal=optimal,
            )
        )

    return instances


def find_instance(instances: list[BeasleyInstance], name: str) -> BeasleyInstance:
    for entry in instances:
        if entry.instance.name == name:
            return entry
    raise ValueError(f"Instance {name} not found. Valid: {[e.instance.name for e in instances]}")
