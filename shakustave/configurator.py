"""Apply render options to the annotations already attached to a batch of notes."""

from __future__ import annotations

from collections.abc import Iterable

from shakustave.annotations import Annotation, AnnotationKind
from shakustave.notes import ShakuNote
from shakustave.render_options import RenderOptions


def _configure_octave_mark(annotation: Annotation, options: RenderOptions) -> None:
    annotation.set_style(
        font_size=options.octave_mark_font_size,
        font_weight=options.octave_mark_font_weight,
        color=options.note_color,
    )
    annotation.set_offset(options.octave_mark_offset_x, options.octave_mark_offset_y)


def _configure_pitch_bend(annotation: Annotation, options: RenderOptions) -> None:
    annotation.set_style(
        font_size=options.meri_kari_font_size,
        font_weight=options.meri_kari_font_weight,
        color=options.note_color,
    )


def configure_annotations(notes: Iterable[ShakuNote], options: RenderOptions) -> None:
    """
    Apply one uniform presentation policy to every note's annotations.

    - ``show_octave_marks`` off: octave-register marks are detached and
      nothing else is touched; the remaining annotations keep their order
      and their own styling.
    - ``show_octave_marks`` on: octave marks take the octave font metrics,
      offsets and ``note_color``, and pitch-bend marks take the meri/kari
      font metrics and ``note_color``.

    Running it twice with the same options changes nothing the second time.
    """
    for note in notes:
        if not options.show_octave_marks:
            note.set_annotations(
                a for a in note.annotations if a.kind is not AnnotationKind.OCTAVE_REGISTER
            )
            continue

        for annotation in note.annotations:
            if annotation.kind is AnnotationKind.OCTAVE_REGISTER:
                _configure_octave_mark(annotation, options)
            elif annotation.kind is AnnotationKind.PITCH_BEND:
                _configure_pitch_bend(annotation, options)
