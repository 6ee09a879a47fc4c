from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from dhc_abox.api.dependencies import get_config
from dhc_abox.api.schemas import CompileResponse, ValidateResponse
from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.design import run_compile, run_validate
from dhc_abox.core.design_id import validate_design_id
from dhc_abox.core.errors import DesignError

router = APIRouter(prefix="/designs", tags=["designs"])


@router.post("/validate", response_model=ValidateResponse)
def validate(
    document: Any = Body(..., description="Saved editor workspace."),
    placement: bool = False,
    config: OntologyConfig = Depends(get_config),
) -> ValidateResponse:
    try:
        violations = run_validate(document, config, placement=placement)
    except DesignError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ValidateResponse(violations=violations)


@router.post("/{design_id}/compile", response_model=CompileResponse)
def compile_design(
    design_id: str,
    document: Any = Body(..., description="Saved editor workspace."),
    config: OntologyConfig = Depends(get_config),
) -> CompileResponse:
    try:
        root_id = validate_design_id(design_id)
        compiled = run_compile(document, root_id, config)
    except DesignError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return CompileResponse(design_id=root_id, ttl=compiled.ttl, graph=compiled.graph)
