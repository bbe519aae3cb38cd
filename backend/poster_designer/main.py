"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from poster_designer.core.config import Settings, get_settings
from poster_designer.core.logging import setup_logging
from poster_designer.services.session import PosterSession

# Setup logging
logger = setup_logging("main")


def build_poster_session(settings: Settings) -> PosterSession:
    """Create the Gemini client and wire services, orchestrator and session."""
    from google import genai  # type: ignore[import-untyped]

    from poster_designer.services.analysis import AnalysisService
    from poster_designer.services.image import ImageGenerationService
    from poster_designer.services.orchestrator import PosterOrchestrator

    client = genai.Client(api_key=settings.gemini_api_key)
    orchestrator = PosterOrchestrator(
        analysis_service=AnalysisService(client, model=settings.analysis_model),
        image_service=ImageGenerationService(client, model=settings.image_model),
    )
    return PosterSession(orchestrator, max_text_length=settings.max_text_length)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize services at startup, clean up at shutdown."""
    settings = get_settings()
    # A session injected beforehand (tests, embedding) is kept as is.
    if getattr(app.state, "poster_session", None) is None:
        try:
            app.state.poster_session = build_poster_session(settings)
            logger.info("Services initialized successfully")
        except Exception as exc:
            logger.error(
                "Service initialization failed, running in degraded mode",
                exc_info=True,
                extra={"service": "main", "error_type": type(exc).__name__},
            )
            # Continue without services; endpoints return 503 until fixed

    yield

    session = getattr(app.state, "poster_session", None)
    if session is not None:
        session.close()


# Create FastAPI app
app = FastAPI(
    title="Gemini Poster Designer",
    description="Turns short text into an AI-designed poster preview",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{settings.frontend_port}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
from poster_designer.api.poster import page_router, router as poster_router  # noqa: E402

app.include_router(poster_router)
app.include_router(page_router)


@app.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Always returns HTTP 200; check `services.gemini` for actual status.
    """
    session = getattr(request.app.state, "poster_session", None)

    logger.info("Health check requested")
    return {
        "status": "ok",
        "version": app.version,
        "services": {
            "gemini": "ok" if session is not None else "unavailable",
        },
    }
