"""Configuration for a NetworkFlattener instance."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FlattenConfig(BaseModel):
    """Validated configuration for a NetworkFlattener. Passed via DI at construction."""

    max_workers: int = Field(default=1, ge=1)
