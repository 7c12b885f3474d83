"""Zodiac Prompt Generator — FastAPI Application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, the REST routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The application is stateless:

- **Fragment tables and templates** are immutable constants loaded at
  import time and validated again in the lifespan startup hook.
- **Selections** arrive with every request; nothing is stored server-side.
- **Clipboard handling** happens in the browser (``static/js/app.js``),
  which only asks the server for prompt text.

Endpoints
---------
========  ==========================  =====================================
Method    Path                        Purpose
========  ==========================  =====================================
GET       ``/``                       Serve the selection form
GET       ``/api/config``             Options, defaults, fallbacks, timings
POST      ``/api/prompt/compile``     One prompt, or a batch for ``all``
POST      ``/api/prompt/batch``       One prompt per sign
POST      ``/api/prompt/copy-all``    Batch joined into one text block
========  ==========================  =====================================

Usage
-----
CLI (installed entry point)::

    zodiacprompt

Direct invocation::

    python -m zodiacprompt.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from zodiacprompt import __version__
from zodiacprompt.api.models import (
    BatchResponse,
    CopyAllResponse,
    PromptRequest,
    PromptResponse,
    SignPrompt,
)
from zodiacprompt.core.config import config
from zodiacprompt.core.fragments import ALL_TABLES, SIGNS, validate_tables
from zodiacprompt.core.prompt_builder import default_builder, format_copy_all
from zodiacprompt.core.template import TEMPLATES, PromptTemplate, UnknownTemplateError, get_template

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application lifecycle.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate the fragment tables before serving any request.

    A table missing its fallback key is a packaging bug; failing here stops
    the server from starting instead of failing per request.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    validate_tables(ALL_TABLES)
    counts = ", ".join(f"{t.name}={len(t)}" for t in ALL_TABLES)
    logger.info(f"Fragment tables validated ({counts}); default template {config.default_template!r}")

    yield


app = FastAPI(
    title="Zodiac Prompt Generator",
    description="Descriptive image prompts for each zodiac sign.",
    version=__version__,
    lifespan=lifespan,
)

if config.static_dir.is_dir():
    app.mount("/static", StaticFiles(directory=str(config.static_dir)), name="static")
else:
    logger.warning(f"Static directory not found, /static not mounted: {config.static_dir}")


# ---------------------------------------------------------------------------
# Helpers.
# ---------------------------------------------------------------------------


def _template_for(req: PromptRequest) -> PromptTemplate:
    """Resolve the request's template name.

    Raises:
        HTTPException: 400 for an unknown template name.
    """
    name = req.template or config.default_template
    try:
        return get_template(name)
    except UnknownTemplateError as e:
        raise HTTPException(status_code=400, detail=e.args[0]) from e


def _batch(req: PromptRequest, template: PromptTemplate) -> list[SignPrompt]:
    pairs = default_builder.build_prompts_for_all_signs(req.to_selection(), template)
    return [SignPrompt(sign=sign, prompt=prompt) for sign, prompt in pairs]


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the selection form.

    Raises:
        HTTPException: 404 if ``index.html`` is not found.
    """
    index_path = config.templates_dir / "index.html"
    if index_path.exists():
        return HTMLResponse(content=index_path.read_text(encoding="utf-8"))
    raise HTTPException(status_code=404, detail="index.html not found")


@app.get("/api/config")
async def get_config() -> dict:
    """Return everything the form needs to render itself.

    Returns:
        Dictionary with ``version``, ``options`` (keys per table, in
        authoring order), ``signs`` (canonical order), ``defaults``,
        ``fallbacks``, ``templates`` and ``timings``.
    """
    return {
        "version": __version__,
        "options": {table.name: table.keys() for table in ALL_TABLES},
        "signs": list(SIGNS),
        "defaults": {
            "gender": config.default_gender,
            "tone": config.default_tone,
            "theme": config.default_theme,
            "template": config.default_template,
        },
        "fallbacks": {table.name: table.fallback_key for table in ALL_TABLES},
        "templates": list(TEMPLATES),
        "timings": {
            "status_clear_ms": config.status_clear_ms,
            "row_status_clear_ms": config.row_status_clear_ms,
        },
    }


@app.post("/api/prompt/compile", response_model=PromptResponse)
async def compile_prompt(req: PromptRequest) -> PromptResponse:
    """Compile a single prompt, or the whole batch when ``sign`` is ``all``."""
    template = _template_for(req)
    selection = req.to_selection()
    if selection.is_batch:
        return PromptResponse(template=template.name, prompts=_batch(req, template))
    return PromptResponse(
        template=template.name,
        prompt=default_builder.build_prompt(selection, template),
    )


@app.post("/api/prompt/batch", response_model=BatchResponse)
async def batch_prompts(req: PromptRequest) -> BatchResponse:
    """Compile one prompt per sign in canonical order.  ``sign`` is ignored."""
    template = _template_for(req)
    return BatchResponse(template=template.name, prompts=_batch(req, template))


@app.post("/api/prompt/copy-all", response_model=CopyAllResponse)
async def copy_all(req: PromptRequest) -> CopyAllResponse:
    """Return the batch as a single ``Sign:\\nprompt`` block for the clipboard."""
    template = _template_for(req)
    pairs = default_builder.build_prompts_for_all_signs(req.to_selection(), template)
    return CopyAllResponse(template=template.name, text=format_copy_all(pairs))


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~zodiacprompt.core.config.config`
    (``ZODIACPROMPT_SERVER_HOST``, ``ZODIACPROMPT_SERVER_PORT``,
    ``ZODIACPROMPT_LOG_LEVEL``).

    This function is registered as the ``zodiacprompt`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "zodiacprompt.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
