"""Unit tests for configure_annotations."""

from shakustave.annotations import AnnotationKind, AtariMark, DurationDot, OctaveMark, PitchBendMark
from shakustave.configurator import configure_annotations
from shakustave.notes import ShakuNote
from shakustave.render_options import merge_options


def _marked_note() -> ShakuNote:
    return ShakuNote(
        "ro",
        annotations=[PitchBendMark("meri"), OctaveMark("kan"), DurationDot(), AtariMark()],
    )


def test_hidden_octave_marks_are_removed_and_order_kept() -> None:
    note = _marked_note()
    configure_annotations([note], merge_options(show_octave_marks=False))
    kinds = [a.kind for a in note.annotations]
    assert kinds == [AnnotationKind.PITCH_BEND, AnnotationKind.DURATION_DOT, AnnotationKind.ATARI]


def test_octave_marks_take_octave_options() -> None:
    note = _marked_note()
    options = merge_options(
        octave_mark_font_size=20,
        octave_mark_font_weight=700,
        octave_mark_offset_x=5,
        octave_mark_offset_y=-30,
        note_color="#333",
    )
    configure_annotations([note], options)
    mark = note.find_annotation(AnnotationKind.OCTAVE_REGISTER)
    assert mark is not None
    assert (mark.font_size, mark.font_weight, mark.color) == (20, 700, "#333")
    assert mark.offset == (5, -30)


def test_pitch_bend_marks_take_meri_kari_options() -> None:
    note = _marked_note()
    configure_annotations([note], merge_options(meri_kari_font_size=9, meri_kari_font_weight=300, note_color="#444"))
    bend = note.find_annotation(AnnotationKind.PITCH_BEND)
    assert bend is not None
    assert (bend.font_size, bend.font_weight, bend.color) == (9, 300, "#444")


def test_hidden_octave_marks_leave_pitch_bend_styling_alone() -> None:
    bend = PitchBendMark("meri", font_size=30, font_weight=900, color="#f00")
    note = ShakuNote("ro", annotations=[OctaveMark("kan"), bend])
    configure_annotations([note], merge_options(show_octave_marks=False, meri_kari_font_size=11))
    assert note.annotations == [bend]
    assert (bend.font_size, bend.font_weight, bend.color) == (30, 900, "#f00")


def test_other_annotations_untouched() -> None:
    note = _marked_note()
    atari = note.find_annotation(AnnotationKind.ATARI)
    assert atari is not None
    before = (atari.font_size, atari.color, atari.offset)
    configure_annotations([note], merge_options(note_color="#abc"))
    assert (atari.font_size, atari.color, atari.offset) == before


def test_configuration_is_idempotent() -> None:
    options = merge_options(show_octave_marks=False, meri_kari_font_size=16)
    note = _marked_note()
    configure_annotations([note], options)
    first = [(a.kind, a.font_size, a.font_weight, a.color, a.offset) for a in note.annotations]
    configure_annotations([note], options)
    second = [(a.kind, a.font_size, a.font_weight, a.color, a.offset) for a in note.annotations]
    assert first == second


def test_notes_without_annotations_are_a_no_op() -> None:
    note = ShakuNote("tsu")
    configure_annotations([note], merge_options())
    assert note.annotations == []
