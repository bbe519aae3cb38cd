"""PosterSession: the page controller tying input text, orchestrator and renderer together."""
from typing import TYPE_CHECKING, Optional

from poster_designer.core.config import DEFAULT_MAX_TEXT_LENGTH
from poster_designer.core.logging import setup_logging
from poster_designer.models.api import PosterResponse
from poster_designer.models.poster import GeneratedPosterState, GenerationStep
from poster_designer.models.preview import AnalysisPanel, PosterPreview, ProgressView
from poster_designer.services.renderer import (
    render_analysis_panel,
    render_preview,
    render_progress,
)

if TYPE_CHECKING:
    from poster_designer.services.orchestrator import PosterOrchestrator

logger = setup_logging("session")

SAVE_MESSAGE = (
    "To save your poster, please right-click the image area or use your device's "
    "screenshot tool for the highest quality."
)


class PosterSession:
    """Holds the input text and redraws the preview on every state snapshot.

    The session subscribes to the orchestrator on construction; ``close()``
    drops the subscription.
    """

    def __init__(
        self,
        orchestrator: "PosterOrchestrator",
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        self.orchestrator = orchestrator
        self.max_text_length = max_text_length
        self._input_text = ""
        self.redraw_count = 0
        self.preview: PosterPreview
        self.analysis: Optional[AnalysisPanel]
        self.progress: ProgressView
        self._redraw(orchestrator.state)
        self._unsubscribe = orchestrator.subscribe(self._redraw)

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def state(self) -> GeneratedPosterState:
        return self.orchestrator.state

    @property
    def can_save(self) -> bool:
        return self.state.step == GenerationStep.complete

    def set_input_text(self, text: str) -> None:
        """Update the input, keeping at most ``max_text_length`` characters."""
        self._input_text = text[: self.max_text_length]
        self._redraw(self.state)

    async def generate(self, text: Optional[str] = None) -> GeneratedPosterState:
        """Start a generation cycle for the current (or given) input text.

        A trigger the orchestrator would ignore (blank text, or a cycle
        already in flight) leaves the input text untouched.
        """
        candidate = self._input_text if text is None else text[: self.max_text_length]
        if candidate.strip() and not self.orchestrator.is_busy:
            self.set_input_text(candidate)
        return await self.orchestrator.generate(candidate)

    def save_message(self) -> str:
        return SAVE_MESSAGE

    def snapshot(self) -> PosterResponse:
        return PosterResponse(
            text=self._input_text,
            state=self.state,
            preview=self.preview,
            analysis=self.analysis,
            progress=self.progress,
        )

    def close(self) -> None:
        self._unsubscribe()

    def _redraw(self, state: GeneratedPosterState) -> None:
        self.preview = render_preview(
            self._input_text,
            state.config,
            state.background_image_url,
            state.is_loading,
        )
        self.analysis = render_analysis_panel(state.config)
        self.progress = render_progress(state.step)
        self.redraw_count += 1
        logger.debug("redraw: step=%s preview=%s", state.step.value, self.preview.kind)
