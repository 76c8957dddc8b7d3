"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    rules: dict[str, Any] | None = Field(
        default=None,
        description="Generation rules (camelCase keys, strategy parameters inline)",
    )


class BatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rules_list: list[dict[str, Any]] | None = Field(
        default=None, alias="rulesList", description="Base rule sets, used round-robin",
    )
    count: int = Field(default=0, ge=0, description="Number of documents to generate")
    variations: dict[str, Any] | None = Field(
        default=None,
        description='Per-field perturbations, e.g. {"rows": {"type": "range", "value": 0.2}}',
    )
