"""ScoreRenderer: public entry point that turns score data into drawn columns."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from shakustave.annotations import AnnotationKind
from shakustave.configurator import configure_annotations
from shakustave.container import ScoreContainer
from shakustave.layout import ColumnLayout, calculate_layout
from shakustave.notes import ShakuNote
from shakustave.render_options import DEFAULT_VIEWPORT, RenderOptions, merge_options
from shakustave.score_models import ScoreData
from shakustave.score_parser import (
    UnsupportedFormatError,
    load_score_data,
    parse_score,
    score_data_from_text,
)
from shakustave.svg_context import SVGContext

logger = logging.getLogger(__name__)

ScoreLoader = Callable[[str], ScoreData]


class ScoreRenderer:
    """
    Render shakuhachi scores into a :class:`ScoreContainer`.

    Every render call clears the container, builds a fresh
    :class:`SVGContext`, configures annotations, computes the column layout
    and draws each note, all synchronously. The last notes (and score data,
    when the notes came from it) are held so the score can be redrawn after
    option changes or container resizes.

    Usage::

        container = ScoreContainer(600, 480)
        renderer = ScoreRenderer(container, notes_per_column=8)
        renderer.render_from_score_data(score_data)
        svg_markup = container.to_markup()
    """

    def __init__(
        self,
        container: ScoreContainer,
        options: RenderOptions | None = None,
        *,
        score_loader: ScoreLoader = load_score_data,
        fallback_size: tuple[float, float] = DEFAULT_VIEWPORT,
        **overrides: Any,
    ) -> None:
        self.container = container
        self._options = merge_options(options, **overrides)
        self._score_loader = score_loader
        self._fallback_size = fallback_size
        self._context: SVGContext | None = None
        self._layout: ColumnLayout | None = None
        self._notes: list[ShakuNote] = []
        self._score_data: ScoreData | None = None
        self._unsubscribe_resize: Callable[[], None] | None = None

        self._sync_resize_subscription()

    # ------------------------------------------------------------------
    # Rendering entry points
    # ------------------------------------------------------------------

    def render_from_url(self, url: str) -> None:
        """
        Load score data through the score loader, then render it.

        Raises:
            OSError: If the source cannot be read.
            ValueError: If the loaded document is malformed or unsupported.
        """
        score_data = self._score_loader(url)
        self.render_from_score_data(score_data)

    def render_from_score_data(self, score_data: ScoreData) -> None:
        self._score_data = score_data
        self._render(parse_score(score_data))

    def render_source(self, text: str, data_format: str, title: str | None = None) -> bool:
        """
        Render a raw document in ``data_format`` ("json", "musicxml" or "abc").

        An unsupported format is shown as an error message inside the
        container instead of raising, so the host stays usable.

        Returns:
            True when the score was rendered, False when an error was shown.
        """
        try:
            score_data = score_data_from_text(text, data_format, title=title)
        except UnsupportedFormatError as exc:
            logger.warning("%s", exc)
            self.clear()
            self.container.show_error(str(exc))
            return False
        self.render_from_score_data(score_data)
        return True

    def render_notes(self, notes: Sequence[ShakuNote]) -> None:
        """Render notes supplied directly; any held score data is dropped."""
        self._score_data = None
        self._render(notes)

    def _render(self, notes: Sequence[ShakuNote]) -> None:
        options = self._options
        self._notes = list(notes)

        self.container.clear()
        width, height = self.viewport_size()
        ctx = SVGContext(width, height)
        self._context = ctx
        self.container.append(ctx)

        configure_annotations(self._notes, options)
        layout = calculate_layout(self._notes, width, height, options)
        self._layout = layout

        for column in layout.columns:
            ctx.open_group("column", f"column-{column.column_index}")
            for position in column.note_positions:
                note = self._notes[position.note_index]
                note.set_typography(
                    font_size=options.note_font_size,
                    font_weight=options.note_font_weight,
                    font_family=options.note_font_family,
                    color=options.note_color,
                )
                note.set_position(column.x_position, position.y)
                note.render(ctx)

                if options.show_debug_labels:
                    self._render_debug_label(ctx, note, position.note_index)
            ctx.close_group()

        logger.debug(
            "Rendered %d notes in %d columns at %sx%s",
            len(self._notes),
            layout.total_columns,
            width,
            height,
        )

    def _render_debug_label(self, ctx: SVGContext, note: ShakuNote, index: int) -> None:
        """Index, romaji, register and bend kind, left-aligned beside the note."""
        parts = [str(index + 1), note.romaji]

        octave_mark = note.find_annotation(AnnotationKind.OCTAVE_REGISTER)
        if octave_mark is not None:
            parts.append(f"({octave_mark.register.value})")
        bend_mark = note.find_annotation(AnnotationKind.PITCH_BEND)
        if bend_mark is not None:
            parts.append(bend_mark.bend)

        options = self._options
        ctx.draw_text(
            " ".join(parts),
            note.x + options.debug_label_offset_x,
            note.y + options.debug_label_offset_y,
            options.debug_label_font_size,
            options.debug_label_font_family,
            options.debug_label_color,
            "start",
        )

    # ------------------------------------------------------------------
    # Options and lifecycle
    # ------------------------------------------------------------------

    def viewport_size(self) -> tuple[float, float]:
        """Explicit option size, else the container's measurement, else the fallback."""
        explicit = self._options.explicit_size
        if explicit is not None:
            return explicit
        measured_width, measured_height = self.container.measure()
        fallback_width, fallback_height = self._fallback_size
        return measured_width or fallback_width, measured_height or fallback_height

    def set_options(self, auto_refresh: bool = True, **overrides: Any) -> None:
        """Merge ``overrides`` into the current options, then re-render if asked."""
        self._options = merge_options(self._options, **overrides)
        self._sync_resize_subscription()
        if auto_refresh:
            self.refresh()

    def resize(self, width: float, height: float) -> None:
        self.set_options(width=width, height=height)

    def refresh(self) -> None:
        """
        Redraw the held score with the current options; no-op when nothing is held.

        Notes that came from score data are rebuilt from it first, so marks
        stripped by an earlier configuration (``show_octave_marks=False``)
        return when the option is switched back on.
        """
        if self._score_data is not None:
            self._render(parse_score(self._score_data))
        elif self._notes:
            self._render(self._notes)

    def _handle_resize(self, width: float, height: float) -> None:
        self.refresh()

    def _sync_resize_subscription(self) -> None:
        """Listen for container resizes exactly while ``auto_resize`` is on."""
        if self._options.auto_resize and self._unsubscribe_resize is None:
            self._unsubscribe_resize = self.container.subscribe_resize(self._handle_resize)
        elif not self._options.auto_resize and self._unsubscribe_resize is not None:
            self._unsubscribe_resize()
            self._unsubscribe_resize = None

    @property
    def options(self) -> RenderOptions:
        return self._options

    @property
    def notes(self) -> list[ShakuNote]:
        return list(self._notes)

    @property
    def score_data(self) -> ScoreData | None:
        return self._score_data

    @property
    def layout(self) -> ColumnLayout | None:
        """Layout of the most recent render."""
        return self._layout

    @property
    def context(self) -> SVGContext | None:
        return self._context

    def clear(self) -> None:
        """Drop drawn content, held notes and held score data."""
        self.container.clear()
        self._context = None
        self._layout = None
        self._notes = []
        self._score_data = None

    def destroy(self) -> None:
        """Clear, and stop listening for container resizes."""
        self.clear()
        if self._unsubscribe_resize is not None:
            self._unsubscribe_resize()
            self._unsubscribe_resize = None


def render_score(
    container: ScoreContainer,
    score_data: ScoreData,
    options: RenderOptions | None = None,
    **overrides: Any,
) -> ScoreRenderer:
    """Create a renderer for ``container`` and render ``score_data`` with it."""
    renderer = ScoreRenderer(container, options, **overrides)
    renderer.render_from_score_data(score_data)
    return renderer


def render_score_from_url(
    container: ScoreContainer,
    url: str,
    options: RenderOptions | None = None,
    **overrides: Any,
) -> ScoreRenderer:
    renderer = ScoreRenderer(container, options, **overrides)
    renderer.render_from_url(url)
    return renderer
