"""Runtime settings read from the environment; loads .env locally via python-dotenv."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load .env only when present (e.g. local dev); does not override existing env
load_dotenv()


class Settings(BaseModel):
    log_level: str = Field(default="INFO", description="Root logging level")
    default_heuristics: list[str] = Field(
        default_factory=list,
        description="Heuristics run when none are requested; empty means all",
    )
    max_items: int = Field(default=100_000, gt=0, description="API limit on items per instance")
    max_capacity: int = Field(default=1_000_000, gt=0, description="API limit on bin capacity")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


def _split_names(raw: Optional[str]) -> list[str]:
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def get_settings() -> Settings:
    kwargs: dict[str, object] = {
        "default_heuristics": _split_names(os.getenv("BIN_PACKER_DEFAULT_HEURISTICS")),
    }
    if os.getenv("BIN_PACKER_LOG_LEVEL"):
        kwargs["log_level"] = os.environ["BIN_PACKER_LOG_LEVEL"]
    if os.getenv("BIN_PACKER_MAX_ITEMS"):
        kwargs["max_items"] = os.environ["BIN_PACKER_MAX_ITEMS"]
    if os.getenv("BIN_PACKER_MAX_CAPACITY"):
        kwargs["max_capacity"] = os.environ["BIN_PACKER_MAX_CAPACITY"]
    return Settings(**kwargs)
