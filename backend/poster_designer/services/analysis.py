"""Text analysis service: turns poster text into a design brief."""
import logging
from typing import TYPE_CHECKING

from google.genai import types  # type: ignore[import-untyped]
from pydantic import ValidationError

from poster_designer.models.poster import PosterConfig, PosterFont, PosterLayout
from poster_designer.services.errors import AnalysisError

if TYPE_CHECKING:
    from google import genai  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS_MODEL = "gemini-2.5-flash"


def _hex_field(description: str) -> types.Schema:
    return types.Schema(type=types.Type.STRING, description=description)


POSTER_CONFIG_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "imagePrompt": types.Schema(
            type=types.Type.STRING,
            description=(
                "A detailed prompt for an image generation model to create a background. "
                "Specify style (e.g., minimalist, grunge, oil painting, neon 3D). "
                "Explicitly state 'no text' in the prompt."
            ),
        ),
        "moodDescription": types.Schema(
            type=types.Type.STRING,
            description=(
                "A short description of the mood "
                "(e.g., 'Energetic and bold' or 'Calm and serene')."
            ),
        ),
        "colorPalette": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "primary": _hex_field("Hex code for dominant color"),
                "secondary": _hex_field("Hex code for secondary color"),
                "accent": _hex_field("Hex code for accent color"),
                "text": _hex_field(
                    "Hex code for text color, ensuring high contrast with primary/secondary"
                ),
            },
            required=["primary", "secondary", "accent", "text"],
        ),
        "fontStyle": types.Schema(
            type=types.Type.STRING,
            enum=[font.value for font in PosterFont],
            description="The most appropriate typography style.",
        ),
        "layout": types.Schema(
            type=types.Type.STRING,
            enum=[layout.value for layout in PosterLayout],
            description="The best text layout composition.",
        ),
    },
    required=["imagePrompt", "colorPalette", "fontStyle", "layout", "moodDescription"],
)


class AnalysisService:
    """Asks the Gemini text model for a structured poster design brief."""

    def __init__(self, client: "genai.Client", model: str = DEFAULT_ANALYSIS_MODEL) -> None:
        self.client = client
        self.model = model

    def build_prompt(self, text: str) -> str:
        """Build the analysis instruction embedding the user's text.

        Args:
            text: Raw poster text typed by the user.

        Returns:
            Instruction string for the analysis model.
        """
        return (
            f'Analyze the following text to design a visual poster: "{text}".\n'
            "Determine the mood, a highly descriptive prompt for a background image "
            "(abstract, textural, or scenic, but NO TEXT in the image), a color palette, "
            "a font style, and a layout composition."
        )

    async def analyze_text(self, text: str) -> PosterConfig:
        """Analyze poster text and return its design brief.

        Single attempt; the caller decides whether to retry.

        Args:
            text: Non-empty poster text.

        Returns:
            Validated PosterConfig.

        Raises:
            AnalysisError: When the model returns no text, malformed JSON, or
                values outside the schema.
        """
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=self.build_prompt(text),
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=POSTER_CONFIG_SCHEMA,
            ),
        )

        payload = response.text
        if not payload:
            logger.error("Analysis model returned no text")
            raise AnalysisError()

        try:
            config = PosterConfig.model_validate_json(payload)
        except ValidationError as exc:
            logger.error("Invalid design brief: %.200s", payload)
            raise AnalysisError() from exc

        logger.info(
            "analysis: layout=%s font=%s mood=%s",
            config.layout.value,
            config.font_style.value,
            config.mood_description,
        )
        return config
