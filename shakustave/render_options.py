"""RenderOptions: the immutable configuration passed through the render pipeline."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Final

from shakustave.svg_context import DEFAULT_FONT_FAMILY

# ── Layout constants ─────────────────────────────────────────────────────────
OCTAVE_MARK_FONT_SIZE = 12
OCTAVE_MARK_OFFSET_Y = -22
#: Room above the first note so octave marks are not clipped.
MIN_TOP_MARGIN = abs(OCTAVE_MARK_OFFSET_Y) + OCTAVE_MARK_FONT_SIZE

#: Viewport used when neither options nor the container give a size.
DEFAULT_VIEWPORT: Final[tuple[float, float]] = (800, 600)


@dataclass(frozen=True)
class RenderOptions:
    """
    Every knob of the renderer in one place.

    Instances are immutable; use :func:`merge_options` (or
    ``dataclasses.replace``) to derive a changed copy. ``width`` and
    ``height`` override the container's measured size only when both are set.
    ``notes_per_column=None`` breaks columns by available height instead of
    a fixed count.
    """

    # display
    show_octave_marks: bool = True
    show_debug_labels: bool = False

    # layout
    notes_per_column: int | None = 10
    column_spacing: float = 35
    column_width: float = 100
    top_margin: float = MIN_TOP_MARGIN

    # note typography
    note_font_size: float = 28
    note_font_weight: int = 400
    note_vertical_spacing: float = 44
    note_font_family: str = DEFAULT_FONT_FAMILY
    note_color: str = "#000"

    # octave marks
    octave_mark_font_size: float = OCTAVE_MARK_FONT_SIZE
    octave_mark_font_weight: int = 500
    octave_mark_offset_x: float = 18
    octave_mark_offset_y: float = OCTAVE_MARK_OFFSET_Y

    # meri / kari marks
    meri_kari_font_size: float = 14
    meri_kari_font_weight: int = 500

    # duration dots
    duration_dot_extra_spacing: float = 12

    # debug labels
    debug_label_font_size: float = 7
    debug_label_offset_x: float = 25
    debug_label_offset_y: float = -6
    debug_label_font_family: str = "monospace"
    debug_label_color: str = "#999"

    # viewport
    width: float | None = None
    height: float | None = None
    auto_resize: bool = True

    def __post_init__(self) -> None:
        if self.notes_per_column is not None and self.notes_per_column <= 0:
            raise ValueError(f"notes_per_column must be positive, got {self.notes_per_column}.")

    @property
    def explicit_size(self) -> tuple[float, float] | None:
        if self.width is None or self.height is None:
            return None
        return self.width, self.height


DEFAULT_RENDER_OPTIONS: Final[RenderOptions] = RenderOptions()

OPTION_NAMES: Final[frozenset[str]] = frozenset(f.name for f in fields(RenderOptions))


def merge_options(base: RenderOptions | None = None, **overrides: Any) -> RenderOptions:
    """
    Return ``base`` (defaults when omitted) with ``overrides`` applied.

    Raises:
        ValueError: If an override names an unknown option or fails validation.
    """
    unknown = sorted(set(overrides) - OPTION_NAMES)
    if unknown:
        raise ValueError(f"Unknown render option(s): {', '.join(unknown)}.")
    return replace(base or DEFAULT_RENDER_OPTIONS, **overrides)
