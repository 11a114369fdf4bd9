"""Style Studio - FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST routes over a
single process-wide :class:`~stylestudio.core.session.StudioSession`, and the
``main()`` CLI function that launches the uvicorn server.

Architecture
------------
- **Configuration** comes from :data:`stylestudio.core.config.config`.
- **Prompt data** (themes, concepts, labels) is served from the in-process
  prompt library via ``GET /api/config``.
- **Generation** goes through the session, which validates preconditions,
  holds the busy flag and records history.
- **History** is in memory only and disappears with the process.

Endpoints
---------
========  ==============================  ==================================
Method    Path                            Purpose
========  ==============================  ==================================
GET       ``/api/config``                 Themes, concepts, ratios, qualities
GET       ``/api/session``                Current session summary
PUT       ``/api/session/options``        Update generation options
POST      ``/api/session/images/{slot}``  Upload source image 1 or 2
POST      ``/api/prompt/compile``         Preview the composed prompt
POST      ``/api/generate``               Generate one image
GET       ``/api/history``                Paginated history listing
GET       ``/api/history/{id}/image``     Raw bytes of one history image
DELETE    ``/api/history``                Clear the history
========  ==============================  ==================================

Usage
-----
CLI (installed entry point)::

    stylestudio

Direct invocation::

    python -m stylestudio.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from stylestudio import __version__
from stylestudio.api.models import CompileRequest, OptionsUpdate
from stylestudio.core.config import config
from stylestudio.core.gemini_client import (
    EmptyResponseError,
    GenerationClient,
    ModelRefusalError,
)
from stylestudio.core.history import paginate_entries
from stylestudio.core.models import AspectRatio, Quality, Theme
from stylestudio.core.prompt_composer import compose
from stylestudio.core.prompt_library import QUALITY_LABELS, THEME_CONCEPTS, THEME_LABELS
from stylestudio.core.session import SessionBusyError, StudioSession, default_options
from stylestudio.core.validation import (
    ImageTooLargeError,
    UnsupportedImageError,
    ValidationError,
    load_source_image,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application lifecycle.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the studio session on startup.

    A session already placed on ``app.state`` (e.g. by an embedding
    application) is kept as-is.

    Raises:
        RuntimeError: If no Gemini API key is configured.
    """
    if getattr(app.state, "session", None) is None:
        client = GenerationClient.from_config(config)
        app.state.session = StudioSession(client, history_capacity=config.history_capacity)
        logger.info(f"StudioSession initialised (history capacity {config.history_capacity}).")

    yield


app = FastAPI(
    title="Style Studio",
    description="Photorealistic portrait restyling powered by Gemini image generation.",
    version=__version__,
    lifespan=lifespan,
)

# Allow cross-origin requests so a separately served frontend can call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _session() -> StudioSession:
    return app.state.session


def _apply_option_changes(session: StudioSession, req: OptionsUpdate) -> None:
    changes = req.changes()
    if not changes:
        return
    try:
        session.update_options(**changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config() -> dict:
    """Return the static studio configuration for the frontend.

    Returns:
        Dictionary with ``version``, ``themes`` (id, label, concepts, couple
        flag) in display order, ``aspect_ratios``, ``qualities`` (id, label),
        ``default_options`` and ``history_capacity``.
    """
    defaults = default_options()
    return {
        "version": __version__,
        "themes": [
            {
                "id": theme.value,
                "label": THEME_LABELS[theme],
                "concepts": list(THEME_CONCEPTS[theme]),
                "is_couple": theme.is_couple,
            }
            for theme in Theme
        ],
        "aspect_ratios": [ratio.value for ratio in AspectRatio],
        "qualities": [{"id": q.value, "label": QUALITY_LABELS[q]} for q in Quality],
        "default_options": {
            "theme": defaults.theme.value,
            "concept": defaults.concept,
            "aspect_ratio": defaults.aspect_ratio.value,
            "quality": defaults.quality.value,
            "face_consistency": defaults.face_consistency,
            "custom_prompt": defaults.custom_prompt,
        },
        "history_capacity": config.history_capacity,
    }


@app.get("/api/session")
async def get_session() -> dict:
    """Return the current session summary."""
    return _session().snapshot()


@app.put("/api/session/options")
async def update_session_options(req: OptionsUpdate) -> dict:
    """Update the session options.

    Changing the theme without naming a concept selects the first concept of
    the new theme.

    Returns:
        The updated session summary.
    """
    session = _session()
    _apply_option_changes(session, req)
    return session.snapshot()


@app.post("/api/session/images/{slot}")
async def upload_image(slot: int, file: UploadFile = File(...)) -> dict:
    """Upload the first (``slot=1``) or second (``slot=2``) source image.

    Raises:
        HTTPException: 404 for an unknown slot, 413 for an oversize file,
            415 for anything other than PNG or JPEG.
    """
    if slot not in (1, 2):
        raise HTTPException(status_code=404, detail=f"Unknown image slot: {slot}")

    data = await file.read()
    try:
        image = load_source_image(data, max_bytes=config.max_upload_bytes)
    except ImageTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e)) from e
    except UnsupportedImageError as e:
        raise HTTPException(status_code=415, detail=str(e)) from e

    session = _session()
    session.set_image(image, second=slot == 2)
    logger.info(f"Stored source image {slot} ({image.mime_type}, {image.size} bytes).")
    return {"success": True, "slot": slot, "mime_type": image.mime_type, "size": image.size}


@app.post("/api/prompt/compile")
async def compile_prompt(req: CompileRequest) -> dict:
    """Preview the composed prompt without calling the model.

    Returns:
        Dictionary with a single ``compiled_prompt`` key.
    """
    return {"compiled_prompt": compose(req.to_options(), req.is_couple)}


@app.post("/api/generate")
async def generate_image(req: OptionsUpdate | None = None) -> dict:
    """Generate one image from the session's images and options.

    An optional body applies option changes first, like
    ``PUT /api/session/options``.

    Returns:
        Dictionary with ``success``, ``id``, ``image`` (base64), ``mime_type``
        and ``prompt`` (the exact text sent to the model).

    Raises:
        HTTPException: 400 for unmet preconditions, 409 while another
            generation runs, 422 when the model refuses (detail is the
            model's text), 502 for empty responses or upstream failures.
    """
    session = _session()
    if req is not None:
        _apply_option_changes(session, req)

    try:
        entry = await session.generate_async()
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except SessionBusyError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except ModelRefusalError as e:
        raise HTTPException(status_code=422, detail=e.text) from e
    except EmptyResponseError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(status_code=502, detail=f"Gemini API error: {e}") from e

    result = entry.result
    return {
        "success": True,
        "id": entry.id,
        "image": result.image_base64,
        "mime_type": result.mime_type,
        "prompt": result.prompt,
    }


@app.get("/api/history")
async def get_history(page: int = 1, per_page: int = 12) -> dict:
    """Return a paginated listing of generated images, newest first.

    Returns:
        Dictionary with keys ``total``, ``page``, ``per_page``, ``pages``,
        and ``images``.
    """
    return paginate_entries(_session().history.entries(), page, per_page)


@app.get("/api/history/{entry_id}/image")
async def get_history_image(entry_id: str) -> Response:
    """Return the raw image bytes of one history entry.

    Raises:
        HTTPException: 404 if the entry is not (or no longer) in history.
    """
    entry = _session().history.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return Response(content=entry.result.image, media_type=entry.result.mime_type)


@app.delete("/api/history")
async def clear_history() -> dict:
    """Remove every entry from the history."""
    history = _session().history
    removed = len(history)
    history.clear()
    return {"success": True, "removed": removed}


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~stylestudio.core.config.config`
    (``STYLESTUDIO_SERVER_HOST``, ``STYLESTUDIO_SERVER_PORT``,
    ``STYLESTUDIO_LOG_LEVEL``).  Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``stylestudio`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "stylestudio.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
