"""HTTP API exposing the time expression codec."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from .checks import is_compound_time_expression, is_time_expression
from .errors import ContractError
from .formatting import format
from .parsers import parse
from .units import ordered_units

logger = logging.getLogger(__name__)


def _unit_table() -> List[Dict[str, Any]]:
    return [
        {
            "short": unit.short,
            "long": unit.long,
            "long_plural": unit.long_plural,
            "aliases": list(unit.aliases),
            "ms": unit.ms,
        }
        for unit in ordered_units()
    ]


def _parse_payload(expr: str) -> Dict[str, Any]:
    try:
        value = parse(expr)
    except ContractError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    valid = not math.isnan(value)
    if not valid:
        logger.info("unparseable expression %r", expr)
    return {
        "expression": expr,
        "milliseconds": value if valid else None,
        "valid": valid,
    }


def _format_payload(ms: float, long: bool, precision: float) -> Dict[str, Any]:
    try:
        expression = format(ms, long=long, precision=precision)
    except ContractError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"milliseconds": ms, "expression": expression}


def create_app() -> FastAPI:
    app = FastAPI(title="timeexpr API")

    @app.get("/api/parse")
    async def api_parse(expr: str) -> JSONResponse:
        return JSONResponse(_parse_payload(expr))

    @app.get("/api/format")
    async def api_format(
        ms: float, long: bool = False, precision: float = 1
    ) -> JSONResponse:
        return JSONResponse(_format_payload(ms, long, precision))

    @app.get("/api/check")
    async def api_check(expr: str) -> JSONResponse:
        return JSONResponse(
            {
                "expression": expr,
                "single": is_time_expression(expr),
                "compound": is_compound_time_expression(expr),
            }
        )

    @app.get("/api/units")
    async def api_units() -> JSONResponse:
        return JSONResponse(_unit_table())

    return app
