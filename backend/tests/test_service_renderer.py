"""Tests for the preview renderer."""
import math

import pytest

from conftest import JAZZ_NIGHT_IMAGE, make_config
from poster_designer.models.poster import GenerationStep, PosterConfig, PosterLayout
from poster_designer.models.preview import EmptyPreview, PosterView, SkeletonPreview
from poster_designer.services.renderer import (
    LAYOUT_CLASSES,
    PLACEHOLDER_BACKGROUND_URL,
    render_analysis_panel,
    render_preview,
    render_progress,
    split_headline,
)


class TestBranches:
    def test_empty_without_config(self) -> None:
        preview = render_preview("Jazz Night", None, None, False)
        assert isinstance(preview, EmptyPreview)
        assert preview.message == "Enter text to generate your poster"

    def test_skeleton_while_loading_without_config(self) -> None:
        preview = render_preview("Jazz Night", None, None, True)
        assert isinstance(preview, SkeletonPreview)

    def test_poster_while_image_is_loading(self, jazz_config: PosterConfig) -> None:
        preview = render_preview("Jazz Night", jazz_config, None, True)
        assert isinstance(preview, PosterView)


class TestPosterView:
    def test_jazz_night_scenario(self, jazz_config: PosterConfig) -> None:
        preview = render_preview("Jazz Night", jazz_config, JAZZ_NIGHT_IMAGE, False)
        assert isinstance(preview, PosterView)
        assert preview.layout == PosterLayout.centered
        assert [h.display_text for h in preview.headlines] == ["JAZZ NIGHT"]
        assert preview.headlines[0].align == "center"
        assert preview.text_style["color"] == "#f5f5f5"
        assert preview.overlay_gradient == "linear-gradient(to bottom, #1a1a2e, #16213e)"
        assert preview.background_image == JAZZ_NIGHT_IMAGE
        assert preview.container_style["background-image"] == f"url({JAZZ_NIGHT_IMAGE})"

    def test_palette_derived_styles(self, jazz_config: PosterConfig) -> None:
        preview = render_preview("Jazz Night", jazz_config, None, False)
        assert isinstance(preview, PosterView)
        assert preview.text_style["text-shadow"] == "0 2px 10px #16213e80"
        assert preview.container_style["box-shadow"] == "0 20px 50px -12px #1a1a2e66"
        assert preview.accent_bar.color == "#e94560"

    def test_placeholder_background(self, jazz_config: PosterConfig) -> None:
        preview = render_preview("Jazz Night", jazz_config, None, False)
        assert isinstance(preview, PosterView)
        assert preview.background_image == PLACEHOLDER_BACKGROUND_URL

    @pytest.mark.parametrize("layout", list(PosterLayout))
    def test_layout_classes(self, layout: PosterLayout) -> None:
        preview = render_preview("Jazz Night", make_config(layout=layout.value), None, False)
        assert isinstance(preview, PosterView)
        assert preview.layout_classes == LAYOUT_CLASSES[layout]

    def test_split_layout_has_two_headlines(self) -> None:
        config = make_config(layout="split")
        preview = render_preview("Save The Planet Now", config, None, False)
        assert isinstance(preview, PosterView)
        assert [h.text for h in preview.headlines] == ["Save The", "Planet Now"]
        assert [h.align for h in preview.headlines] == ["left", "right"]
        assert [h.animation_delay for h in preview.headlines] == ["0.2s", "0.5s"]

    def test_bottom_heavy_left_aligned(self) -> None:
        preview = render_preview("Summer Sale", make_config(layout="bottom-heavy"), None, False)
        assert isinstance(preview, PosterView)
        assert preview.headlines[0].align == "left"
        assert preview.accent_bar.align == "left"

    def test_top_heavy_accent_centered(self) -> None:
        preview = render_preview("Summer Sale", make_config(layout="top-heavy"), None, False)
        assert isinstance(preview, PosterView)
        assert preview.accent_bar.align == "center"

    def test_font_style_passed_through(self) -> None:
        preview = render_preview("x", make_config(fontStyle="font-serif"), None, False)
        assert isinstance(preview, PosterView)
        assert preview.font_style.value == "font-serif"


class TestPurity:
    def test_idempotent(self, jazz_config: PosterConfig) -> None:
        first = render_preview("Jazz Night", jazz_config, JAZZ_NIGHT_IMAGE, False)
        second = render_preview("Jazz Night", jazz_config, JAZZ_NIGHT_IMAGE, False)
        assert first == second

    def test_does_not_mutate_config(self, jazz_config: PosterConfig) -> None:
        before = jazz_config.model_dump()
        render_preview("Jazz Night", jazz_config, None, False)
        assert jazz_config.model_dump() == before


class TestSplitHeadline:
    @pytest.mark.parametrize(
        "text",
        ["Jazz", "Jazz Night", "Save The Planet", "one two three four five six seven"],
    )
    def test_partition(self, text: str) -> None:
        first, second = split_headline(text)
        n = len(text.split(" "))
        assert len(first.split(" ")) == math.ceil(n / 2)
        second_words = second.split(" ") if second else []
        assert len(second_words) == n - math.ceil(n / 2)
        if second:
            assert f"{first} {second}" == text
        else:
            assert first == text

    def test_odd_word_count_puts_extra_word_first(self) -> None:
        assert split_headline("a b c") == ("a b", "c")


class TestAnalysisPanel:
    def test_none_without_config(self) -> None:
        assert render_analysis_panel(None) is None

    def test_summary(self, jazz_config: PosterConfig) -> None:
        panel = render_analysis_panel(jazz_config)
        assert panel is not None
        assert panel.mood == "Cool and intimate"
        assert panel.font_label == "Display Typography"
        assert [s.color for s in panel.swatches] == ["#1a1a2e", "#16213e", "#e94560", "#f5f5f5"]


class TestProgress:
    def test_hidden_when_idle(self) -> None:
        assert not render_progress(GenerationStep.idle).visible

    @pytest.mark.parametrize(
        ("step", "expected"),
        [
            (GenerationStep.analyzing, ["active", "pending"]),
            (GenerationStep.generating_image, ["done", "active"]),
            (GenerationStep.complete, ["done", "done"]),
        ],
    )
    def test_indicator_status(self, step: GenerationStep, expected: list[str]) -> None:
        progress = render_progress(step)
        assert [i.label for i in progress.indicators] == ["Analyzing Text", "Creating Art"]
        assert [i.status for i in progress.indicators] == expected
