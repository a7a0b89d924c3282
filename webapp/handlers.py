from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from jinja2 import TemplateError

from .config import Config
from .pages import render_index
from .schemas import Health, Hello

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

router = APIRouter()


def get_config(request: Request) -> Config:
    return request.app.state.config


# === API ===


@router.get("/api/hello", response_model=Hello)
def hello() -> Hello:
    return Hello(message="Hello, World!", status="success")


@router.get("/health", response_model=Health)
def health() -> Health:
    return Health(status="ok", version=VERSION)


# === Pages ===


# Registered last: the catch-all serves the index for any unmatched path.
@router.get("/", response_class=HTMLResponse)
@router.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
def index(config: Config = Depends(get_config)):
    try:
        body = render_index(config)
    except (TemplateError, UnicodeError, OSError) as exc:
        logger.exception("failed to render index page")
        return PlainTextResponse(str(exc), status_code=500)
    return HTMLResponse(body)
