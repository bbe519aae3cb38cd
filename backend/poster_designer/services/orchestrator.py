"""PosterOrchestrator: drives one generation cycle and owns its state."""
from typing import TYPE_CHECKING, Any, Callable

from poster_designer.core.logging import setup_logging
from poster_designer.models.poster import GeneratedPosterState, GenerationStep

if TYPE_CHECKING:
    from poster_designer.services.analysis import AnalysisService
    from poster_designer.services.image import ImageGenerationService

logger = setup_logging("orchestrator")

GENERIC_ERROR_MESSAGE = "Failed to generate poster. Please check your API key and try again."

StateListener = Callable[[GeneratedPosterState], None]


class PosterOrchestrator:
    """Runs analysis then image generation and publishes every state change.

    State machine::

        idle -> analyzing -> generating_image -> complete
          ^________|_______________|   (any failure)

    Policies:
    - Blank text is a no-op.
    - A trigger while a cycle is in flight is ignored.
    - An image-stage failure keeps the config fetched by the analysis stage;
      an analysis-stage failure leaves ``config`` as None.
    """

    def __init__(
        self,
        analysis_service: "AnalysisService",
        image_service: "ImageGenerationService",
    ) -> None:
        self.analysis_service = analysis_service
        self.image_service = image_service
        self._state = GeneratedPosterState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> GeneratedPosterState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state.is_loading

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for state snapshots.

        Listeners are called synchronously, in commit order.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def generate(self, text: str) -> GeneratedPosterState:
        """Run one generation cycle for ``text``.

        Args:
            text: Poster text as typed by the user.

        Returns:
            The state after the cycle (unchanged if the trigger was ignored).
        """
        if not text.strip():
            return self._state
        if self.is_busy:
            logger.info("Generation already in flight; trigger ignored")
            return self._state

        try:
            # Committed before the first await, so a second trigger on the same
            # event loop always sees is_loading=True.
            self._commit(
                config=None,
                background_image_url=None,
                is_loading=True,
                error=None,
                step=GenerationStep.analyzing,
            )

            config = await self.analysis_service.analyze_text(text)
            self._commit(config=config, step=GenerationStep.generating_image)

            image_url = await self.image_service.generate_background(config.image_prompt)
            self._commit(
                background_image_url=image_url,
                is_loading=False,
                step=GenerationStep.complete,
            )
        except Exception as exc:
            self._fail(exc)
        except BaseException as exc:
            # Cancelled mid-cycle: release the in-flight guard, then propagate.
            self._fail(exc)
            raise

        return self._state

    def _fail(self, exc: BaseException) -> None:
        """Log the failure and return to idle with a user-facing message."""
        failed_step = self._state.step.value
        logger.error(
            "Generation failed at %s",
            failed_step,
            exc_info=True,
            extra={
                "service": "PosterOrchestrator",
                "error_type": type(exc).__name__,
                "step": failed_step,
            },
        )
        self._commit(
            is_loading=False,
            error=str(exc) or GENERIC_ERROR_MESSAGE,
            step=GenerationStep.idle,
        )

    def _commit(self, **changes: Any) -> None:
        """Replace the state with a validated copy and notify listeners."""
        self._state = GeneratedPosterState.model_validate({**dict(self._state), **changes})
        for listener in list(self._listeners):
            listener(self._state)
