"""Calculator API — FastAPI router around the settlement engine.

All routes require a platform API key via verify_caller. Validation failures
come back as 400 with the engine's Portuguese user message; decimals are
serialized as two-place strings, so the unrounded derived state stays internal.
"""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from rescisao.api.auth import verify_caller
from rescisao.settlement.engine import build_scenario, compute
from rescisao.settlement.statement import render_statement
from rescisao.settlement.validation import SettlementInputError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/calculator", tags=["calculator"])


def _error_response(exc: SettlementInputError) -> JSONResponse:
    """400 body mirroring the success envelope."""
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": exc.user_message, "code": exc.code},
    )


@router.post("/calculate")
async def calculate(
    payload: dict[str, Any] = Body(...),
    platform: str = Depends(verify_caller),
) -> JSONResponse:
    """Compute a settlement and return it as JSON."""
    try:
        result = compute(build_scenario(payload))
    except SettlementInputError as exc:
        logger.warning("Calculation rejected for %s: %s", platform, exc.message)
        return _error_response(exc)

    logger.info(
        "Settlement computed for %s: %d items, net %s",
        platform, len(result.items), result.net_total,
    )
    data = result.model_dump(mode="json", exclude={"derived"})
    return JSONResponse(content={"success": True, "data": data})


@router.post("/statement", response_model=None)
async def statement(
    payload: dict[str, Any] = Body(...),
    platform: str = Depends(verify_caller),
) -> Response:
    """Compute a settlement and return the plain-text Termo de Rescisão."""
    try:
        scenario = build_scenario(payload)
        result = compute(scenario)
    except SettlementInputError as exc:
        logger.warning("Statement rejected for %s: %s", platform, exc.message)
        return _error_response(exc)

    return PlainTextResponse(render_statement(scenario, result))
