"""Poster API router and page routes."""
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from poster_designer.core.config import get_settings
from poster_designer.models.api import PosterRequest, PosterResponse, SaveResponse
from poster_designer.services.orchestrator import GENERIC_ERROR_MESSAGE
from poster_designer.services.session import PosterSession

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(prefix="/api/poster", tags=["poster"])
page_router = APIRouter(tags=["page"])


def get_poster_session(request: Request) -> PosterSession:
    """FastAPI dependency: retrieve PosterSession from app.state.

    Returns HTTP 503 if the Gemini client could not be created at startup
    (usually a missing API key).
    """
    session: PosterSession | None = getattr(request.app.state, "poster_session", None)
    if session is None:
        raise HTTPException(status_code=503, detail=GENERIC_ERROR_MESSAGE)
    return session


@router.post("/generate", response_model=PosterResponse)
async def generate_poster(
    body: PosterRequest,
    session: PosterSession = Depends(get_poster_session),
) -> PosterResponse:
    """Run one generation cycle for the submitted text.

    Blank text, or a request arriving while a cycle is in flight, leaves the
    state unchanged. Failures are reported in ``state.error``, not as HTTP
    errors.

    Raises:
        HTTPException 422: Text longer than the configured maximum.
    """
    if len(body.text) > session.max_text_length:
        raise HTTPException(
            status_code=422,
            detail=f"Text must be at most {session.max_text_length} characters.",
        )
    logger.info("generate requested: %d chars", len(body.text))
    await session.generate(body.text)
    return session.snapshot()


@router.get("/state", response_model=PosterResponse)
async def get_state(session: PosterSession = Depends(get_poster_session)) -> PosterResponse:
    return session.snapshot()


@router.get("/preview", response_class=HTMLResponse)
async def get_preview(
    request: Request,
    session: PosterSession = Depends(get_poster_session),
) -> HTMLResponse:
    """Render the current preview as an HTML fragment."""
    return templates.TemplateResponse(
        request=request,
        name="_preview.html",
        context={"view": session.snapshot()},
    )


@router.post("/save", response_model=SaveResponse)
async def save_poster(session: PosterSession = Depends(get_poster_session)) -> SaveResponse:
    """Tell the user how to keep the poster. Nothing is written anywhere."""
    return SaveResponse(message=session.save_message())


@page_router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    session: PosterSession | None = getattr(request.app.state, "poster_session", None)
    if session is not None:
        max_length = session.max_text_length
    else:
        max_length = get_settings().max_text_length
    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context={
            "view": session.snapshot() if session is not None else None,
            "max_length": max_length,
            "available": session is not None,
        },
    )
