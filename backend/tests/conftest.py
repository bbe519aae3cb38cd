"""Shared test fixtures and configuration."""
from types import SimpleNamespace
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from poster_designer.models.poster import PosterConfig

JAZZ_NIGHT_CONFIG: dict[str, Any] = {
    "imagePrompt": "smoky blue stage lights, no text",
    "moodDescription": "Cool and intimate",
    "colorPalette": {
        "primary": "#1a1a2e",
        "secondary": "#16213e",
        "accent": "#e94560",
        "text": "#f5f5f5",
    },
    "fontStyle": "font-display",
    "layout": "centered",
}

JAZZ_NIGHT_IMAGE = "data:image/png;base64,AAAA"


@pytest.fixture(autouse=True)
def clear_api_key_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real Gemini credentials out of every test."""
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY"):
        monkeypatch.delenv(name, raising=False)


def make_config(**overrides: Any) -> PosterConfig:
    data = {**JAZZ_NIGHT_CONFIG, **overrides}
    return PosterConfig.model_validate(data)


def make_text_response(text: Optional[str]) -> SimpleNamespace:
    """Stand-in for a GenerateContentResponse carrying only text."""
    return SimpleNamespace(text=text, candidates=[])


def make_image_response(
    data: Optional[bytes] = b"\x00\x00\x00", mime_type: str = "image/png"
) -> SimpleNamespace:
    """Stand-in for a GenerateContentResponse from the image model."""
    parts = [SimpleNamespace(text="Here is your background.", inline_data=None)]
    if data is not None:
        parts.append(
            SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))
        )
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


def make_genai_client(*responses: Any) -> MagicMock:
    """Mock genai.Client whose aio.models.generate_content returns ``responses`` in order."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(side_effect=list(responses))
    return client


@pytest.fixture
def jazz_config() -> PosterConfig:
    return make_config()
