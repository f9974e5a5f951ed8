"""Convert score data into renderable notes, and load score data from files or URLs."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final
from urllib.parse import urlparse
from urllib.request import urlopen

from shakustave.annotations import AtariMark, DurationDot, OctaveMark, PitchBendMark
from shakustave.notes import REST_SYMBOL, DurationClass, ShakuNote
from shakustave.score_models import ScoreData, ScoreDataError, ScoreNote, score_data_from_dict
from shakustave.symbols import Register

logger = logging.getLogger(__name__)

SUPPORTED_DATA_FORMATS: Final[tuple[str, ...]] = ("json", "musicxml", "abc")

_EXTENSION_FORMATS: Final[dict[str, str]] = {
    ".json": "json",
    ".musicxml": "musicxml",
    ".xml": "musicxml",
    ".abc": "abc",
}


class UnsupportedFormatError(ValueError):
    """The requested score data format has no importer."""


# ------------------------------------------------------------------
# Score data → notes
# ------------------------------------------------------------------


def _bend_of(note: ScoreNote) -> str | None:
    if note.dai_meri:
        return "dai-meri"
    if note.chu_meri:
        return "chu-meri"
    if note.meri:
        return "meri"
    if note.kari:
        return "kari"
    return None


def parse_note(note: ScoreNote, style: str = "kinko") -> ShakuNote:
    """
    Build one :class:`ShakuNote` with its annotations, in this order:
    octave mark (kan/daikan only), pitch bend, duration dot, atari.
    """
    duration = DurationClass.from_beats(note.duration)
    if note.rest or note.pitch is None:
        shaku = ShakuNote(REST_SYMBOL, style=style, duration=duration, is_rest=True)
    else:
        shaku = ShakuNote(note.pitch.step, style=style, duration=duration)
        # otsu is the unmarked register
        if note.pitch.octave > 0:
            shaku.add_annotation(OctaveMark(Register.from_octave(note.pitch.octave)))

    bend = _bend_of(note)
    if bend is not None and not shaku.is_rest:
        shaku.add_annotation(PitchBendMark(bend))
    if note.dotted:
        shaku.add_annotation(DurationDot())
    if note.atari and not shaku.is_rest:
        shaku.add_annotation(AtariMark())
    return shaku


def parse_score(score_data: ScoreData) -> list[ShakuNote]:
    """Convert every interchange note to a renderable note, one to one."""
    return [parse_note(note, score_data.style) for note in score_data.notes]


def parse_json(text: str) -> ScoreData:
    """
    Decode and validate a JSON score document.

    Raises:
        ScoreDataError: If the JSON is invalid or the data malformed.
    """
    try:
        raw: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScoreDataError(f"Invalid JSON: {exc}") from exc
    return score_data_from_dict(raw)


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------


def detect_format(source: str) -> str:
    """Guess the data format from a path or URL extension, defaulting to JSON."""
    suffix = Path(urlparse(source).path).suffix.lower()
    return _EXTENSION_FORMATS.get(suffix, "json")


def score_data_from_text(text: str, data_format: str, title: str | None = None) -> ScoreData:
    """
    Build score data from the text of a document in ``data_format``.

    Raises:
        UnsupportedFormatError: If ``data_format`` is not one of
            :data:`SUPPORTED_DATA_FORMATS`.
        ScoreDataError: If the document cannot be converted.
    """
    normalized = data_format.strip().lower()
    if normalized == "json":
        return parse_json(text)
    if normalized in ("musicxml", "abc"):
        from shakustave.notation_import import score_data_from_notation

        return score_data_from_notation(text, normalized, title=title)
    supported = ", ".join(SUPPORTED_DATA_FORMATS)
    raise UnsupportedFormatError(f"Unsupported format '{data_format}'. Use one of: {supported}.")


def read_source(source: str) -> str:
    """
    Read a local path or an ``http(s)``/``file`` URL as UTF-8 text.

    Raises:
        OSError: If the resource cannot be read.
    """
    scheme = urlparse(source).scheme
    if scheme in ("http", "https", "file"):
        logger.info("Fetching score from %s", source)
        with urlopen(source) as response:  # nosec - caller-provided score URL
            return response.read().decode("utf-8")
    return Path(source).read_text(encoding="utf-8")


def load_score_data(source: str, data_format: str | None = None) -> ScoreData:
    """Read ``source`` and convert it; the format is taken from the extension when omitted."""
    resolved_format = data_format or detect_format(source)
    title = Path(urlparse(source).path).stem.replace("_", " ") or None
    return score_data_from_text(read_source(source), resolved_format, title=title)
