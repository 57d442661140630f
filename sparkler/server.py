"""HTTP service returning sparkling GIFs for the ``q`` query parameter."""
from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from .cache import Cache
from .config import Settings, load_settings
from .encode import encode_gif
from .errors import SparklerError
from .pipeline import render
from .resources import sparkles_gif_bytes

GIF_MEDIA_TYPE = "image/gif"

logger = logging.getLogger(__name__)


def normalize_text(text: Optional[str], default: str) -> str:
    """Trim ``text``, falling back to ``default`` when it is missing or empty."""

    if not text:
        text = default
    return text.strip()


def render_gif(text: str) -> bytes:
    return encode_gif(render(text))


def create_app(settings: Optional[Settings] = None, *, mount_studio: bool = True) -> FastAPI:
    settings = settings or load_settings()
    cache = Cache(settings.cache_dir, max_bytes=settings.cache_max_bytes)

    app = FastAPI(title="Sparkler")
    app.state.settings = settings
    app.state.cache = cache

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.exception_handler(SparklerError)
    async def sparkler_error(request: Request, exc: SparklerError):
        logger.error("Render failed for %s: %s", request.url, exc)
        return PlainTextResponse(f"Something went wrong: {exc}", status_code=500)

    @app.get("/")
    def index(q: Optional[str] = None) -> Response:
        text = normalize_text(q, settings.default_text)
        data = cache.get_text(text)
        if data is not None:
            logger.debug("cache hit")
        else:
            logger.debug("cache miss, rendering")
            data = render_gif(text)
            cache.put_text(text, data)
        return Response(content=data, media_type=GIF_MEDIA_TYPE)

    @app.get("/favicon.ico")
    def favicon() -> Response:
        return Response(content=sparkles_gif_bytes(settings.sparkles_path), media_type=GIF_MEDIA_TYPE)

    if mount_studio:
        import gradio as gr

        from .studio import build_demo

        app = gr.mount_gradio_app(app, build_demo(), path="/studio")

    return app


def main() -> None:  # pragma: no cover - server entry point
    import uvicorn

    from .logging_config import configure_logging

    configure_logging()
    settings = load_settings()
    logger.info("listening on %s:%d", settings.server_name, settings.port)
    uvicorn.run(create_app(settings), host=settings.server_name, port=settings.port)


__all__ = ["GIF_MEDIA_TYPE", "create_app", "main", "normalize_text", "render_gif"]


if __name__ == "__main__":  # pragma: no cover - server entry point
    main()
