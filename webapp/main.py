from __future__ import annotations

import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from . import config as app_config
from .config import Config
from .handlers import VERSION, router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StaticDirectory(StaticFiles):
    """Static files served from a directory that may not exist.

    A missing directory answers every request with 404 instead of failing.
    """

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()


def create_app(config: Optional[Config] = None) -> FastAPI:
    if config is None:
        config = app_config.load()
    # No docs routes: every unmatched GET path belongs to the index page.
    app = FastAPI(
        title="webapp",
        version=VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    if not os.path.isdir(config.static_dir):
        logger.warning(
            "static directory %s not found; /static/ will return 404",
            config.static_dir,
        )
    # Mounted before the router so /static/* never reaches the catch-all index.
    app.mount(
        "/static",
        StaticDirectory(directory=config.static_dir, check_dir=False),
        name="static",
    )
    app.include_router(router)
    return app


def configure_logging(level_name: str) -> int:
    """Configure root logging and return the numeric level in effect.

    Unknown level names fall back to INFO.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level


def run() -> None:
    config = app_config.load()
    level = configure_logging(config.log_level)
    logger.info("Server started at %s", config.address)
    # uvicorn logs bind failures itself and exits with a non-zero status.
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=level,
    )


if __name__ == "__main__":
    run()
