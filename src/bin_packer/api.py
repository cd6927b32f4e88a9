"""FastAPI endpoint for bin packing heuristics."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from bin_packer.config import get_settings
from bin_packer.io.schemas import HeuristicResultSchema, PackRequestSchema, PackResponseSchema
from bin_packer.metrics import fill_rate, lower_bound
from bin_packer.models import ProblemInstance
from bin_packer.packing.heuristics import HEURISTICS, get_heuristic

logger = logging.getLogger(__name__)

# FastAPI app instance (exactly one)
app = FastAPI(
    title="Bin Packer API",
    description="One-dimensional bin packing heuristics",
)


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.get("/heuristics")
async def heuristics() -> dict[str, Any]:
    return {"heuristics": sorted(HEURISTICS)}


@app.post("/pack", response_model=PackResponseSchema)
def pack(request: PackRequestSchema) -> PackResponseSchema:
    """
    Run the requested heuristics on one instance.

    422: invalid instance (e.g. an item larger than the capacity)
    400: unknown heuristic name
    413: instance above the configured limits
    """
    settings = get_settings()
    try:
        if len(request.items) > settings.max_items or request.capacity > settings.max_capacity:
            raise HTTPException(
                status_code=413,
                detail=f"instance exceeds limits (max_items={settings.max_items}, max_capacity={settings.max_capacity})",
            )

        try:
            instance = ProblemInstance(
                items=request.items,
                capacity=request.capacity,
                min_item_size=request.min_item_size,
            )
        except ValidationError as e:
            raise HTTPException(
                status_code=422,
                detail=[{"loc": err["loc"], "msg": err["msg"]} for err in e.errors()],
            ) from None

        names = request.heuristics or settings.default_heuristics or sorted(HEURISTICS)
        try:
            selected = [get_heuristic(name) for name in names]
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from None

        bound = lower_bound(instance)
        results = []
        for heuristic in selected:
            result = heuristic(instance)
            results.append(
                HeuristicResultSchema(
                    heuristic=result.heuristic,
                    bins_used=result.bins_used,
                    elapsed_seconds=result.elapsed_seconds,
                    gap=result.bins_used - bound,
                    fill_rate=fill_rate(instance, result.bins_used),
                    assignment=result.assignment if request.include_assignment else None,
                )
            )

        logger.info(
            "pack: n=%d K=%d heuristics=%s bins=%s",
            instance.n,
            instance.capacity,
            [r.heuristic for r in results],
            [r.bins_used for r in results],
        )
        return PackResponseSchema(
            n=instance.n,
            capacity=instance.capacity,
            total_size=instance.total_size,
            lower_bound=bound,
            results=results,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
