"""Errors raised by the poster generation services."""


class PosterGenerationError(RuntimeError):
    """Base class for failures that end a generation cycle."""


class AnalysisError(PosterGenerationError):
    """The analysis model returned no usable design brief."""

    def __init__(self, message: str = "Failed to analyze text.") -> None:
        super().__init__(message)


class ImageGenerationError(PosterGenerationError):
    """The image model returned no inline image."""

    def __init__(self, message: str = "No image generated.") -> None:
        super().__init__(message)
