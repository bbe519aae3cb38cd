"""Preview renderer: pure functions from poster inputs to view models."""
import math
from typing import Optional

from poster_designer.models.poster import GenerationStep, PosterConfig, PosterLayout
from poster_designer.models.preview import (
    AccentBar,
    AnalysisPanel,
    EmptyPreview,
    Headline,
    PaletteSwatch,
    PosterPreview,
    PosterView,
    ProgressIndicator,
    ProgressView,
    SkeletonPreview,
)

PLACEHOLDER_BACKGROUND_URL = "https://picsum.photos/800/1200?grayscale&blur=2"

LAYOUT_CLASSES: dict[PosterLayout, str] = {
    PosterLayout.centered: "justify-center items-center text-center p-12",
    PosterLayout.bottom_heavy: "justify-end items-start text-left p-12 pb-24",
    PosterLayout.top_heavy: "justify-start items-center text-center p-12 pt-24",
    PosterLayout.split: "justify-between items-start p-12",
}

_HEADLINE_ALIGN = {
    PosterLayout.centered: "center",
    PosterLayout.bottom_heavy: "left",
    PosterLayout.top_heavy: "center",
}

SPLIT_HEADLINE_SIZE = "text-6xl md:text-7xl"
SINGLE_HEADLINE_SIZE = "text-5xl md:text-7xl lg:text-8xl"


def split_headline(text: str) -> tuple[str, str]:
    """Split text at the midpoint word boundary.

    The first part holds ``ceil(n/2)`` of the ``n`` space-separated words, so
    ``" ".join(split_headline(t))`` gives back ``t`` whenever ``n >= 2``.
    """
    words = text.split(" ")
    middle = math.ceil(len(words) / 2)
    return " ".join(words[:middle]), " ".join(words[middle:])


def _headline(text: str, align: str, size_classes: str, delay: str) -> Headline:
    return Headline(
        text=text,
        display_text=text.upper(),
        align=align,
        size_classes=size_classes,
        animation_delay=delay,
    )


def _headlines(text: str, layout: PosterLayout) -> list[Headline]:
    if layout == PosterLayout.split:
        first, second = split_headline(text)
        return [
            _headline(first, "left", SPLIT_HEADLINE_SIZE, "0.2s"),
            _headline(second, "right", SPLIT_HEADLINE_SIZE, "0.5s"),
        ]
    return [_headline(text, _HEADLINE_ALIGN[layout], SINGLE_HEADLINE_SIZE, "0.3s")]


def render_preview(
    text: str,
    config: Optional[PosterConfig],
    background_image_url: Optional[str],
    is_loading: bool,
) -> PosterPreview:
    """Build the preview for the given inputs.

    Deterministic and side-effect free.

    Args:
        text: Poster text.
        config: Design brief, or None if none has been received.
        background_image_url: Generated image as a data URI, or None.
        is_loading: Whether a generation cycle is in flight.

    Returns:
        EmptyPreview, SkeletonPreview or PosterView.
    """
    if config is None and not is_loading:
        return EmptyPreview()
    if config is None:
        return SkeletonPreview()

    palette = config.color_palette
    background = background_image_url or PLACEHOLDER_BACKGROUND_URL

    return PosterView(
        layout=config.layout,
        font_style=config.font_style,
        layout_classes=LAYOUT_CLASSES[config.layout],
        background_image=background,
        container_style={
            "background-image": f"url({background})",
            "background-size": "cover",
            "background-position": "center",
            "box-shadow": f"0 20px 50px -12px {palette.primary}66",
        },
        overlay_gradient=f"linear-gradient(to bottom, {palette.primary}, {palette.secondary})",
        text_style={
            "color": palette.text,
            "text-shadow": f"0 2px 10px {palette.secondary}80",
        },
        headlines=_headlines(text, config.layout),
        accent_bar=AccentBar(
            color=palette.accent,
            align="left" if config.layout == PosterLayout.bottom_heavy else "center",
        ),
    )


def render_analysis_panel(config: Optional[PosterConfig]) -> Optional[AnalysisPanel]:
    """Summarise the design brief (mood, typography, palette)."""
    if config is None:
        return None
    palette = config.color_palette
    return AnalysisPanel(
        mood=config.mood_description,
        font_label=f"{config.font_style.label} Typography",
        swatches=[
            PaletteSwatch(role="primary", color=palette.primary),
            PaletteSwatch(role="secondary", color=palette.secondary),
            PaletteSwatch(role="accent", color=palette.accent),
            PaletteSwatch(role="text", color=palette.text),
        ],
    )


def render_progress(step: GenerationStep) -> ProgressView:
    """Status indicators for the two remote calls; hidden while idle."""
    if step == GenerationStep.idle:
        return ProgressView()
    analyzing = "active" if step == GenerationStep.analyzing else "done"
    if step == GenerationStep.generating_image:
        creating = "active"
    elif step == GenerationStep.complete:
        creating = "done"
    else:
        creating = "pending"
    return ProgressView(
        indicators=[
            ProgressIndicator(label="Analyzing Text", status=analyzing),
            ProgressIndicator(label="Creating Art", status=creating),
        ]
    )
