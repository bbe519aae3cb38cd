"""Request/response models for the poster HTTP API."""
from typing import Optional

from pydantic import BaseModel, Field

from poster_designer.models.poster import GeneratedPosterState
from poster_designer.models.preview import AnalysisPanel, PosterPreview, ProgressView


class PosterRequest(BaseModel):
    """Request model for starting a generation cycle."""

    # Length is checked by the route against the configured max_text_length.
    text: str


class PosterResponse(BaseModel):
    """Current state plus everything the page needs to draw it."""

    text: str
    state: GeneratedPosterState
    preview: PosterPreview = Field(..., discriminator="kind")
    analysis: Optional[AnalysisPanel] = None
    progress: ProgressView


class SaveResponse(BaseModel):
    message: str
