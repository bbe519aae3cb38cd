"""Poster design data models."""
import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class PosterFont(str, Enum):
    """Typography styles the poster can be rendered with."""

    modern = "font-modern"
    display = "font-display"
    serif = "font-serif"
    handwritten = "font-handwritten"
    classic = "font-classic"

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``"Display"``."""
        return self.value.removeprefix("font-").capitalize()


class PosterLayout(str, Enum):
    """Text placement templates for the poster canvas."""

    centered = "centered"
    bottom_heavy = "bottom-heavy"
    top_heavy = "top-heavy"
    split = "split"


class GenerationStep(str, Enum):
    """Steps of one generation cycle."""

    idle = "idle"
    analyzing = "analyzing"
    generating_image = "generating_image"
    complete = "complete"


class _CamelModel(BaseModel):
    """Immutable model serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ColorPalette(_CamelModel):
    """Four hex colours derived from the text's mood."""

    primary: str
    secondary: str
    accent: str
    text: str

    @field_validator("primary", "secondary", "accent", "text")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        if not HEX_COLOR_PATTERN.match(value):
            raise ValueError(f"not a hex colour: {value!r}")
        return value


class PosterConfig(_CamelModel):
    """Design brief returned by the analysis model.

    Unknown font or layout values are rejected rather than rendered with a
    fallback.
    """

    image_prompt: str = Field(..., min_length=1)
    color_palette: ColorPalette
    font_style: PosterFont
    layout: PosterLayout
    mood_description: str

    @field_validator("font_style", mode="before")
    @classmethod
    def _prefix_font(cls, value: Any) -> Any:
        # Accept the bare style name ("display") as well as "font-display".
        if isinstance(value, str) and not value.startswith("font-"):
            return f"font-{value}"
        return value


class GeneratedPosterState(_CamelModel):
    """Snapshot of the orchestrator state. Replaced, never mutated."""

    config: Optional[PosterConfig] = None
    background_image_url: Optional[str] = None
    is_loading: bool = False
    error: Optional[str] = None
    step: GenerationStep = GenerationStep.idle

    @model_validator(mode="after")
    def _check_invariants(self) -> "GeneratedPosterState":
        if self.step == GenerationStep.complete and self.config is None:
            raise ValueError("complete state requires a config")
        if self.step == GenerationStep.idle and self.error is not None and self.is_loading:
            raise ValueError("idle error state cannot be loading")
        return self
