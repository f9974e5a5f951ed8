"""Unit tests for the column layout calculator."""

import math

import pytest

from shakustave.annotations import DurationDot, OctaveMark
from shakustave.layout import calculate_layout
from shakustave.notes import ShakuNote
from shakustave.render_options import merge_options


def _notes(count: int) -> list[ShakuNote]:
    return [ShakuNote("ro") for _ in range(count)]


def test_23_notes_make_three_columns_of_10_10_3() -> None:
    layout = calculate_layout(_notes(23), 800, 600, merge_options(notes_per_column=10))
    assert layout.total_columns == 3
    assert [c.note_count for c in layout.columns] == [10, 10, 3]
    assert [(c.note_start_index, c.note_end_index) for c in layout.columns] == [(0, 10), (10, 20), (20, 23)]


@pytest.mark.parametrize(("count", "per_column"), [(1, 1), (9, 10), (10, 10), (11, 10), (47, 6), (100, 7)])
def test_column_count_and_last_column_size(count: int, per_column: int) -> None:
    layout = calculate_layout(_notes(count), 800, 600, merge_options(notes_per_column=per_column))
    total = math.ceil(count / per_column)
    assert layout.total_columns == total
    assert layout.columns[-1].note_count == count - (total - 1) * per_column


def test_first_column_is_rightmost_and_x_decreases() -> None:
    options = merge_options(notes_per_column=4, column_width=100, column_spacing=35)
    layout = calculate_layout(_notes(15), 800, 600, options)
    xs = [c.x_position for c in layout.columns]
    assert xs[0] == max(xs)
    assert all(a - b == 135 for a, b in zip(xs, xs[1:]))


def test_single_column_is_centred() -> None:
    layout = calculate_layout(_notes(5), 800, 600, merge_options(column_width=100, column_spacing=35))
    assert layout.start_x == 400
    assert layout.columns[0].x_position == 400


def test_three_columns_are_centred() -> None:
    options = merge_options(notes_per_column=10, column_width=100, column_spacing=35)
    layout = calculate_layout(_notes(23), 800, 600, options)
    assert layout.start_x == 265
    assert [c.x_position for c in layout.columns] == [535, 400, 265]


def test_note_y_positions_use_vertical_spacing() -> None:
    options = merge_options(top_margin=50, note_vertical_spacing=44)
    layout = calculate_layout(_notes(3), 800, 600, options)
    assert [p.y for p in layout.columns[0].note_positions] == [50, 94, 138]
    assert layout.start_y == 50


def test_dot_adds_spacing_after_its_own_note() -> None:
    notes = _notes(3)
    notes[1].add_annotation(DurationDot())
    options = merge_options(top_margin=50, note_vertical_spacing=44, duration_dot_extra_spacing=12)
    layout = calculate_layout(notes, 800, 600, options)
    assert [p.y for p in layout.columns[0].note_positions] == [50, 94, 150]


def test_dot_on_first_note_moves_second_note() -> None:
    notes = _notes(2)
    notes[0].add_annotation(DurationDot())
    options = merge_options(top_margin=34, note_vertical_spacing=44, duration_dot_extra_spacing=12)
    positions = calculate_layout(notes, 800, 600, options).columns[0].note_positions
    assert positions[1].y == 34 + 44 + 12


def test_other_annotations_do_not_change_spacing() -> None:
    notes = _notes(2)
    notes[0].add_annotation(OctaveMark("kan"))
    options = merge_options(top_margin=34, note_vertical_spacing=44)
    positions = calculate_layout(notes, 800, 600, options).columns[0].note_positions
    assert positions[1].y == 78


def test_every_column_restarts_at_top_margin() -> None:
    options = merge_options(notes_per_column=2, top_margin=40)
    layout = calculate_layout(_notes(5), 800, 600, options)
    assert [c.note_positions[0].y for c in layout.columns] == [40, 40, 40]


def test_note_indexes_are_global() -> None:
    layout = calculate_layout(_notes(7), 800, 600, merge_options(notes_per_column=3))
    indexes = [p.note_index for c in layout.columns for p in c.note_positions]
    assert indexes == list(range(7))


def test_empty_notes_give_no_columns() -> None:
    layout = calculate_layout([], 800, 600, merge_options())
    assert layout.total_columns == 0
    assert layout.columns == ()


def test_layout_is_deterministic_and_does_not_touch_notes() -> None:
    notes = _notes(12)
    options = merge_options(notes_per_column=5)
    first = calculate_layout(notes, 800, 600, options)
    second = calculate_layout(notes, 800, 600, options)
    assert first == second
    assert all(n.position == (0, 0) for n in notes)


def test_height_based_breaking_when_capacity_unset() -> None:
    # top 34, spacing 44, height 600: twelve notes fit in a column
    options = merge_options(notes_per_column=None, top_margin=34, note_vertical_spacing=44)
    layout = calculate_layout(_notes(25), 800, 600, options)
    assert [(c.note_start_index, c.note_end_index) for c in layout.columns] == [(0, 12), (12, 24), (24, 25)]


def test_height_based_breaking_keeps_one_note_per_column() -> None:
    options = merge_options(notes_per_column=None, top_margin=34, note_vertical_spacing=44)
    layout = calculate_layout(_notes(3), 800, 10, options)
    assert [c.note_count for c in layout.columns] == [1, 1, 1]


def test_non_positive_capacity_rejected() -> None:
    with pytest.raises(ValueError, match="notes_per_column"):
        merge_options(notes_per_column=0)
