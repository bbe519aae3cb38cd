"""Background image generation service."""
import base64
import logging
from typing import TYPE_CHECKING, Any, Optional

from google.genai import types  # type: ignore[import-untyped]

from poster_designer.services.errors import ImageGenerationError

if TYPE_CHECKING:
    from google import genai  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
QUALITY_SUFFIX = ", high quality, 4k, digital art, wallpaper style, no text, masterpiece"


def to_data_uri(data: bytes | str, mime_type: Optional[str]) -> str:
    """Encode inline image data as a ``data:`` URI.

    The SDK hands back raw bytes; a str payload is assumed to be base64 already.
    """
    payload = data if isinstance(data, str) else base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or 'image/png'};base64,{payload}"


class ImageGenerationService:
    """Generates poster backgrounds via the Gemini Image API."""

    def __init__(self, client: "genai.Client", model: str = DEFAULT_IMAGE_MODEL) -> None:
        self.client = client
        self.model = model

    def build_prompt(self, prompt: str) -> str:
        """Append the fixed quality modifiers to a background description."""
        return prompt + QUALITY_SUFFIX

    async def generate_background(self, prompt: str) -> str:
        """Generate one background image and return it as a data URI.

        Single attempt, no streaming.

        Args:
            prompt: Background description from the design brief.

        Returns:
            ``data:<mime>;base64,<payload>`` string.

        Raises:
            ImageGenerationError: When the response carries no inline image.
        """
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=self.build_prompt(prompt),
            config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
        )

        part = _first_inline_image(response)
        if part is None:
            logger.error("No image data returned by Gemini Image API")
            raise ImageGenerationError()

        inline = part.inline_data
        logger.info("image: mime=%s model=%s", inline.mime_type, self.model)
        return to_data_uri(inline.data, inline.mime_type)


def _first_inline_image(response: Any) -> Optional[Any]:
    candidates = response.candidates
    if not candidates or candidates[0].content is None:
        return None
    for part in candidates[0].content.parts or []:
        if getattr(part, "inline_data", None) is not None and part.inline_data.data:
            return part
    return None
