"""View models produced by the preview renderer."""
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from poster_designer.models.poster import PosterFont, PosterLayout


class _View(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EmptyPreview(_View):
    """Placeholder shown before anything has been generated."""

    kind: Literal["empty"] = "empty"
    message: str = "Enter text to generate your poster"


class SkeletonPreview(_View):
    """Pulsing placeholder shown while the design brief is being analysed."""

    kind: Literal["skeleton"] = "skeleton"
    message: str = "Generating Art..."


class Headline(_View):
    """One animated headline block."""

    text: str
    display_text: str
    align: Literal["left", "center", "right"]
    size_classes: str
    animation_delay: str


class AccentBar(_View):
    color: str
    align: Literal["left", "center"]
    animation_delay: str = "0.8s"


class PosterView(_View):
    """Fully styled poster, ready to be drawn."""

    kind: Literal["poster"] = "poster"
    layout: PosterLayout
    font_style: PosterFont
    layout_classes: str
    background_image: str
    container_style: dict[str, str]
    overlay_gradient: str
    text_style: dict[str, str]
    headlines: list[Headline]
    accent_bar: AccentBar


PosterPreview = Union[EmptyPreview, SkeletonPreview, PosterView]


class PaletteSwatch(_View):
    role: str
    color: str


class AnalysisPanel(_View):
    """Summary of the design brief shown beside the poster."""

    mood: str
    font_label: str
    swatches: list[PaletteSwatch]


class ProgressIndicator(_View):
    label: str
    status: Literal["active", "done", "pending"]


class ProgressView(_View):
    """Step indicators; empty while idle."""

    indicators: list[ProgressIndicator] = Field(default_factory=list)

    @property
    def visible(self) -> bool:
        return bool(self.indicators)

