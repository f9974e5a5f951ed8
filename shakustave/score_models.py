"""Data models for the score-data interchange format."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from shakustave.symbols import NotationStyle


class ScoreDataError(ValueError):
    """Score data is malformed or violates the interchange format."""


@dataclass(frozen=True)
class Pitch:
    """Fingering (``step``) and register (``octave``: 0 otsu, 1 kan, 2 daikan)."""

    step: str
    octave: int = 0


@dataclass(frozen=True)
class ScoreNote:
    """A single performance-ordered note. Rests carry no pitch."""

    pitch: Pitch | None
    duration: float = 1
    meri: bool = False
    chu_meri: bool = False
    dai_meri: bool = False
    kari: bool = False
    dotted: bool = False
    atari: bool = False
    rest: bool = False


@dataclass(frozen=True)
class ScoreData:
    """Neutral score representation produced by the notation importers."""

    title: str
    style: NotationStyle
    notes: list[ScoreNote] = field(default_factory=list)
    composer: str | None = None
    tempo: str | None = None
    key: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict with unset optional fields dropped."""
        payload = asdict(self)
        payload["style"] = self.style.value
        payload["notes"] = [_note_to_dict(note) for note in self.notes]
        return {k: v for k, v in payload.items() if v is not None}


def _note_to_dict(note: ScoreNote) -> dict[str, Any]:
    payload: dict[str, Any] = {"duration": note.duration}
    if note.pitch is not None:
        payload["pitch"] = {"step": note.pitch.step, "octave": note.pitch.octave}
    for flag in ("meri", "chu_meri", "dai_meri", "kari", "dotted", "atari", "rest"):
        if getattr(note, flag):
            payload[flag] = True
    return payload


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------


def _note_from_dict(raw: Any, index: int) -> ScoreNote:
    if not isinstance(raw, dict):
        raise ScoreDataError(f"Note at index {index} must be an object.")

    duration = raw.get("duration")
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise ScoreDataError(f"Note at index {index} is missing duration.")
    if duration <= 0:
        raise ScoreDataError(f"Note at index {index} has invalid duration: {duration}. Must be > 0.")

    flags = {
        name: bool(raw.get(name, False))
        for name in ("meri", "chu_meri", "dai_meri", "kari", "dotted", "atari", "rest")
    }
    if flags["rest"]:
        return ScoreNote(pitch=None, duration=duration, **flags)

    pitch = raw.get("pitch")
    if not isinstance(pitch, dict):
        raise ScoreDataError(f"Note at index {index} is missing pitch.")
    step = pitch.get("step")
    if not isinstance(step, str) or not step:
        raise ScoreDataError(f"Note at index {index} is missing pitch.step.")
    octave = pitch.get("octave")
    if isinstance(octave, bool) or not isinstance(octave, int):
        raise ScoreDataError(f"Note at index {index} is missing pitch.octave.")
    if not 0 <= octave <= 2:
        raise ScoreDataError(f"Note at index {index} has invalid octave: {octave}. Must be 0-2.")

    return ScoreNote(pitch=Pitch(step=step, octave=octave), duration=duration, **flags)


def _optional_text(raw: dict[str, Any], name: str) -> str | None:
    value = raw.get(name)
    if value is not None and not isinstance(value, str):
        raise ScoreDataError(f"Score {name} must be a string.")
    return value


def score_data_from_dict(raw: Any) -> ScoreData:
    """
    Validate a decoded JSON object and build :class:`ScoreData`.

    Raises:
        ScoreDataError: On a missing title/style, an unknown style, a
            non-list ``notes``, a non-string composer/tempo/key or any
            invalid note.
    """
    if not isinstance(raw, dict):
        raise ScoreDataError("Score data must be an object.")

    title = raw.get("title")
    if not isinstance(title, str) or not title:
        raise ScoreDataError("Score title is required.")

    style = raw.get("style")
    if not style:
        raise ScoreDataError("Score style is required.")
    try:
        notation_style = NotationStyle(style)
    except ValueError:
        raise ScoreDataError(f"Unsupported score style '{style}'. Use 'kinko' or 'tozan'.") from None

    notes = raw.get("notes")
    if not isinstance(notes, list):
        raise ScoreDataError("Score notes must be an array.")

    return ScoreData(
        title=title,
        style=notation_style,
        notes=[_note_from_dict(note, index) for index, note in enumerate(notes)],
        composer=_optional_text(raw, "composer"),
        tempo=_optional_text(raw, "tempo"),
        key=_optional_text(raw, "key"),
    )
