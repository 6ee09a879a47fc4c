from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from dhc_abox.models import Violation


class HealthResponse(BaseModel):
    status: str = "ok"


class CompileResponse(BaseModel):
    design_id: str
    ttl: str
    graph: dict[str, list[dict[str, Any]]]


class ValidateResponse(BaseModel):
    violations: list[Violation]
