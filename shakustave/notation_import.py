"""Import MusicXML and ABC documents as score data via music21."""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Any

from shakustave.score_models import Pitch, ScoreData, ScoreDataError, ScoreNote
from shakustave.symbols import KINKO_PITCH_MAP, NotationStyle

logger = logging.getLogger(__name__)


def _parse_notation(text: str, data_format: str) -> Any:
    from music21 import converter

    try:
        return converter.parse(text, format=data_format)
    except Exception as exc:  # music21 raises a zoo of converter/parser errors
        raise ScoreDataError(f"Could not parse {data_format} document: {exc}") from exc


def _melody_stream(score: Any) -> Any:
    """The first part carrying notes; shakuhachi scores are monophonic."""
    for part in getattr(score, "parts", []):
        if part.flatten().notes:
            return part.flatten()
    return score.flatten()


def _pitch_key(pitch: Any) -> str:
    """music21 spells flats with ``-`` (``E-4``); the pitch map uses ``b``."""
    return str(pitch.nameWithOctave).replace("-", "b")


def _base_beats(duration: Any) -> float:
    """Quarter length with augmentation dots removed."""
    quarter_length = float(Fraction(duration.quarterLength))
    dots = int(getattr(duration, "dots", 0) or 0)
    return quarter_length / (2 - 0.5**dots)


def _element_to_note(element: Any) -> ScoreNote | None:
    beats = _base_beats(element.duration)
    if beats <= 0:
        # grace notes have no length of their own
        return None
    dotted = int(getattr(element.duration, "dots", 0) or 0) > 0

    if element.isRest:
        return ScoreNote(pitch=None, duration=beats, dotted=dotted, rest=True)

    pitch = element.pitches[0] if element.isChord else element.pitch
    key = _pitch_key(pitch)
    mapping = KINKO_PITCH_MAP.get(key)
    if mapping is None:
        logger.warning("Pitch %s is outside the shakuhachi range; skipping", key)
        return None

    return ScoreNote(
        pitch=Pitch(step=mapping.step, octave=mapping.octave),
        duration=beats,
        meri=mapping.bend == "meri",
        chu_meri=mapping.bend == "chu-meri",
        dai_meri=mapping.bend == "dai-meri",
        dotted=dotted,
    )


def score_data_from_notation(text: str, data_format: str, title: str | None = None) -> ScoreData:
    """
    Convert a MusicXML or ABC document to kinko score data.

    Western pitches are mapped through :data:`KINKO_PITCH_MAP`; pitches the
    instrument cannot play are skipped with a warning. The document's own
    title wins over ``title``, which wins over ``"Untitled"``.

    Raises:
        ScoreDataError: If music21 cannot parse the document.
    """
    score = _parse_notation(text, data_format)

    notes: list[ScoreNote] = []
    for element in _melody_stream(score).notesAndRests:
        note = _element_to_note(element)
        if note is not None:
            notes.append(note)

    metadata = getattr(score, "metadata", None)
    doc_title = getattr(metadata, "title", None) if metadata is not None else None
    composer = getattr(metadata, "composer", None) if metadata is not None else None

    return ScoreData(
        title=doc_title or title or "Untitled",
        style=NotationStyle.KINKO,
        notes=notes,
        composer=composer or None,
    )
