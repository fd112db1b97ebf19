"""FastAPI application serving the enriched news payload."""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from .pipeline import NewsPipeline, build_pipeline

LOGGER = logging.getLogger(__name__)

# Global pipeline instance (lazy loaded)
_pipeline: Optional[NewsPipeline] = None


def get_pipeline() -> NewsPipeline:
    """Get the process-wide pipeline, building it on first use."""
    global _pipeline
    if _pipeline is None:
        _pipeline = build_pipeline()
    return _pipeline


def set_pipeline(pipeline: Optional[NewsPipeline]) -> None:
    """Replace the process-wide pipeline (for testing)."""
    global _pipeline
    _pipeline = pipeline


app = FastAPI(
    title="Good News Map API",
    description="Recent good-news headlines with best-effort map coordinates",
    version="1.0.0",
)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/news")
def get_news(pipeline: Annotated[NewsPipeline, Depends(get_pipeline)]):
    """Return the current enriched news payload.

    Served from the in-process cache while it is fresh; a feed failure is
    reported as a 500 with an ``error`` message.
    """
    try:
        payload = pipeline.handle()
    except Exception as exc:
        LOGGER.exception("Failed to build news payload: %s", exc)
        return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})

    return JSONResponse(
        content=payload.to_dict(),
        headers={"Cache-Control": pipeline.config.cache_control},
    )


__all__ = ["app", "get_pipeline", "set_pipeline"]
