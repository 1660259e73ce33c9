import json
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, UploadFile, File, HTTPException
from pydantic import ValidationError

from .book import (
    DuplicateConfigError,
    collect_configs,
    malformed_configs,
    render_config_list,
    render_configuration_book,
    render_link_references,
)
from .models import ConfigDeclaration, HealthResponse, RenderRequest, RenderResponse
from .normalize import decode_declarations, sha256_hex
from .settings import get_settings

settings = get_settings()
logging.getLogger("confdoc").setLevel(settings.log_level.upper())

app = FastAPI(
    title="confdoc",
    description="Deterministic lint configuration docs from config doc comments",
    version="0.1.0",
)


def _render(declarations: List[ConfigDeclaration], decoding: Dict[str, Any]) -> RenderResponse:
    try:
        configs = collect_configs(declarations)
    except DuplicateConfigError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    markdown = render_configuration_book(configs)
    return RenderResponse(
        book={
            "sha256": sha256_hex(markdown.encode("utf-8")),
            "markdown": markdown,
            "link_references": render_link_references(configs),
            "config_list": render_config_list(configs),
        },
        summary={
            "configs": len(configs),
            "deprecated": sum(1 for c in configs if c.deprecation_reason is not None),
            "malformed": [c.name for c in malformed_configs(configs)],
        },
        configs=configs,
        decoding=decoding,
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/render", response_model=RenderResponse)
def render(request: RenderRequest):
    return _render(request.configs, {})


@app.post("/render/upload", response_model=RenderResponse)
async def render_upload(file: UploadFile = File(...)):
    if not file.filename or not file.filename.lower().endswith(".json"):
        raise HTTPException(status_code=422, detail="Only JSON files are supported")

    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Declarations file too large")

    text, decoding = decode_declarations(raw)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid JSON: {exc.msg}") from exc

    # a bare list of declarations is accepted as well as {"configs": [...]}
    if isinstance(payload, list):
        payload = {"configs": payload}
    try:
        request = RenderRequest.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False)) from exc

    return _render(request.configs, decoding)
