"""FastAPI boundary around the risk engine."""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from phish_risk_engine.config.settings import AppConfig, load_config
from phish_risk_engine.core.errors import InputValidationError
from phish_risk_engine.core.logging import configure_logging
from phish_risk_engine.core.requests import require_field, validate_request
from phish_risk_engine.domain.models import AnalysisInput, InputKind
from phish_risk_engine.engine import analyze_input

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _read_payload(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise InputValidationError("Request body must be a JSON object") from exc


async def _handle(
    request: Request,
    select: Callable[[Any], AnalysisInput],
) -> JSONResponse:
    try:
        item = select(await _read_payload(request))
    except InputValidationError as exc:
        logger.info("rejected request path=%s reason=%s", request.url.path, exc.message)
        return error_response(exc.message, 400)
    try:
        result = analyze_input(item)
        response = JSONResponse(status_code=200, content=result.to_payload())
    except Exception:
        logger.exception("analysis failed kind=%s", item.kind.value)
        return error_response("Internal server error", 500)
    logger.info(
        "analyzed kind=%s score=%d level=%s indicators=%d",
        result.type,
        result.risk_score,
        result.risk_level,
        len(result.indicators),
    )
    return response


def create_app(config: AppConfig | None = None) -> FastAPI:
    cfg = config or load_config()[0]
    configure_logging(cfg.log_level, cfg.log_format)

    api = FastAPI(title="phish-risk-engine")
    api.state.config = cfg
    api.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    def _payload_guard(kind: InputKind | None) -> Callable[[Any], AnalysisInput]:
        def _select(payload: Any) -> AnalysisInput:
            if kind is None:
                return validate_request(payload, max_chars=cfg.max_input_chars)
            if not isinstance(payload, dict):
                raise InputValidationError("Request body must be a JSON object")
            return require_field(payload, kind, max_chars=cfg.max_input_chars)

        return _select

    @api.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 405:
            return error_response("Method not allowed", 405)
        return error_response(str(exc.detail), exc.status_code)

    @api.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @api.post("/analyze-url")
    async def analyze_url_endpoint(request: Request) -> JSONResponse:
        return await _handle(request, _payload_guard(InputKind.URL))

    @api.post("/analyze-email")
    async def analyze_email_endpoint(request: Request) -> JSONResponse:
        return await _handle(request, _payload_guard(InputKind.EMAIL))

    @api.post("/analyze")
    async def analyze_endpoint(request: Request) -> JSONResponse:
        return await _handle(request, _payload_guard(None))

    return api

