"""Column layout: map a flat note sequence to right-to-left vertical columns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from shakustave.annotations import AnnotationKind
from shakustave.notes import ShakuNote
from shakustave.render_options import RenderOptions


@dataclass(frozen=True)
class NotePosition:
    """Vertical position of one note; ``note_index`` indexes the full note list."""

    note_index: int
    y: float


@dataclass(frozen=True)
class ColumnInfo:
    """
    One column of notes.

    Attributes:
        column_index:     0 is the first column in reading order (rightmost).
        x_position:       Horizontal centre of the column.
        note_start_index: First note in the column (inclusive).
        note_end_index:   One past the last note (exclusive).
        note_positions:   One entry per note, top to bottom.
    """

    column_index: int
    x_position: float
    note_start_index: int
    note_end_index: int
    note_positions: tuple[NotePosition, ...]

    @property
    def note_count(self) -> int:
        return self.note_end_index - self.note_start_index


@dataclass(frozen=True)
class ColumnLayout:
    total_columns: int
    start_x: float
    start_y: float
    column_width: float
    column_spacing: float
    columns: tuple[ColumnInfo, ...]


def _advance(note: ShakuNote, options: RenderOptions) -> float:
    """Distance from ``note`` to the next note in the same column."""
    extra = options.duration_dot_extra_spacing if note.has_annotation(AnnotationKind.DURATION_DOT) else 0
    return options.note_vertical_spacing + extra


def _fixed_breaks(note_count: int, per_column: int) -> list[tuple[int, int]]:
    total_columns = math.ceil(note_count / per_column)
    return [
        (col * per_column, min(col * per_column + per_column, note_count))
        for col in range(total_columns)
    ]


def _height_breaks(
    notes: Sequence[ShakuNote],
    viewport_height: float,
    options: RenderOptions,
) -> list[tuple[int, int]]:
    """Fill each column until the next note would pass the bottom edge."""
    if not notes:
        return []

    breaks: list[tuple[int, int]] = []
    column_start = 0
    y = options.top_margin
    for index, note in enumerate(notes):
        step = _advance(note, options)
        if index > column_start and y + step > viewport_height:
            breaks.append((column_start, index))
            column_start = index
            y = options.top_margin
        y += step
    breaks.append((column_start, len(notes)))
    return breaks


def _note_positions(
    notes: Sequence[ShakuNote],
    start: int,
    end: int,
    options: RenderOptions,
) -> tuple[NotePosition, ...]:
    positions: list[NotePosition] = []
    y = options.top_margin
    for index in range(start, end):
        positions.append(NotePosition(note_index=index, y=y))
        # extra space belongs to the note carrying the dot, i.e. the gap after it
        y += _advance(notes[index], options)
    return tuple(positions)


def calculate_layout(
    notes: Sequence[ShakuNote],
    viewport_width: float,
    viewport_height: float,
    options: RenderOptions,
) -> ColumnLayout:
    """
    Compute the column and row of every note.

    Algorithm overview
    ------------------
    1. **Breaking** – ``ceil(n / notes_per_column)`` columns, each range
       clamped to the note count. With ``notes_per_column=None`` a column
       ends when the next note would cross ``viewport_height``.

    2. **Centering** – the block of columns is centred horizontally:
       ``start_x = (viewport_width - total_width) / 2 + column_width / 2``.

    3. **Right-to-left** – column ``i`` sits at
       ``start_x + (total_columns - 1 - i) * (column_width + column_spacing)``
       so the first column is the rightmost one.

    4. **Rows** – the first note of each column is at ``top_margin``; each
       following note is ``note_vertical_spacing`` lower, plus
       ``duration_dot_extra_spacing`` when the *preceding* note has a dot.

    The function is pure: notes are only read.
    """
    if options.notes_per_column is None:
        breaks = _height_breaks(notes, viewport_height, options)
    else:
        breaks = _fixed_breaks(len(notes), options.notes_per_column)

    total_columns = len(breaks)
    column_width = options.column_width
    column_spacing = options.column_spacing

    total_width = total_columns * column_width + max(total_columns - 1, 0) * column_spacing
    start_x = (viewport_width - total_width) / 2 + column_width / 2

    columns = tuple(
        ColumnInfo(
            column_index=col,
            x_position=start_x + (total_columns - 1 - col) * (column_width + column_spacing),
            note_start_index=start,
            note_end_index=end,
            note_positions=_note_positions(notes, start, end, options),
        )
        for col, (start, end) in enumerate(breaks)
    )

    return ColumnLayout(
        total_columns=total_columns,
        start_x=start_x,
        start_y=options.top_margin,
        column_width=column_width,
        column_spacing=column_spacing,
        columns=columns,
    )
