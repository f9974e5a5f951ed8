"""Fingering tables: romaji identifiers, display glyphs per style, and pitch mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class NotationStyle(str, Enum):
    """Notation tradition that decides which glyph set is drawn."""

    KINKO = "kinko"
    TOZAN = "tozan"


class Register(str, Enum):
    """Pitch register of a note; ``octave`` in the interchange format."""

    OTSU = "otsu"
    KAN = "kan"
    DAIKAN = "daikan"

    @classmethod
    def from_octave(cls, octave: int) -> Register:
        return _REGISTERS_BY_OCTAVE[octave]

    @property
    def octave(self) -> int:
        return _REGISTERS_BY_OCTAVE.index(self)


_REGISTERS_BY_OCTAVE: Final[list[Register]] = [Register.OTSU, Register.KAN, Register.DAIKAN]


@dataclass(frozen=True)
class FingeringSymbol:
    """
    One fingering of the five-hole shakuhachi.

    Attributes:
        romaji:    Identifier used in score data, e.g. ``"tsu"``.
        kana:      Kinko-ryu katakana glyph.
        numeral:   Tozan-ryu numeral glyph.
        pitch:     Western pitch of the otsu fingering on a 1.8 shakuhachi.
        fingering: Closed (True) / open (False) holes, top to bottom, thumb last.
        can_alter: Whether meri/kari is idiomatic on this fingering.
    """

    romaji: str
    kana: str
    numeral: str
    pitch: str
    fingering: tuple[bool, bool, bool, bool, bool]
    can_alter: bool = True

    def glyph(self, style: NotationStyle | str) -> str:
        if NotationStyle(style) is NotationStyle.TOZAN:
            return self.numeral
        return self.kana


SYMBOLS: Final[dict[str, FingeringSymbol]] = {
    "ro": FingeringSymbol("ro", "ロ", "〇", "D4", (True, True, True, True, True)),
    "tsu": FingeringSymbol("tsu", "ツ", "一", "F4", (True, True, True, True, False)),
    "re": FingeringSymbol("re", "レ", "二", "G4", (True, True, True, False, False)),
    "chi": FingeringSymbol("chi", "チ", "三", "A4", (True, True, False, False, False)),
    "ri": FingeringSymbol("ri", "リ", "四", "C5", (True, False, False, False, False)),
    "u": FingeringSymbol("u", "ウ", "三", "C4", (True, True, True, True, True), can_alter=False),
    "hi": FingeringSymbol("hi", "ヒ", "五", "E4", (True, True, True, False, True)),
}


def get_symbol(romaji: str) -> FingeringSymbol | None:
    """Look up a fingering by romaji, case-insensitively. ``None`` if unknown."""
    return SYMBOLS.get(romaji.strip().lower())


def get_symbol_by_glyph(glyph: str) -> FingeringSymbol | None:
    for symbol in SYMBOLS.values():
        if glyph in (symbol.kana, symbol.numeral):
            return symbol
    return None


# ── Register and pitch-bend glyphs ───────────────────────────────────────────

REGISTER_GLYPHS: Final[dict[Register, str]] = {
    Register.OTSU: "",
    Register.KAN: "甲",
    Register.DAIKAN: "大甲",
}

PITCH_BEND_GLYPHS: Final[dict[str, str]] = {
    "meri": "メ",
    "chu-meri": "中メ",
    "dai-meri": "大メ",
    "kari": "カ",
}


# ── Western pitch → kinko fingering ──────────────────────────────────────────


@dataclass(frozen=True)
class PitchMapping:
    """Fingering, register and bend that produce a western pitch."""

    step: str
    octave: int
    bend: str | None = None


def _m(step: str, octave: int, bend: str | None = None) -> PitchMapping:
    return PitchMapping(step, octave, bend)


#: Kinko fingerings for the playable range of a 1.8 shakuhachi, C4 to B6.
KINKO_PITCH_MAP: Final[dict[str, PitchMapping]] = {
    # otsu
    "C4": _m("ro", 0, "dai-meri"),
    "C#4": _m("ro", 0, "meri"),
    "Db4": _m("ro", 0, "meri"),
    "D4": _m("ro", 0),
    "D#4": _m("tsu", 0, "meri"),
    "Eb4": _m("tsu", 0, "meri"),
    "E4": _m("tsu", 0, "chu-meri"),
    "F4": _m("tsu", 0),
    "F#4": _m("re", 0, "meri"),
    "Gb4": _m("re", 0, "meri"),
    "G4": _m("re", 0),
    "G#4": _m("u", 0),
    "Ab4": _m("u", 0),
    "A4": _m("chi", 0),
    "A#4": _m("chi", 0, "meri"),
    "Bb4": _m("chi", 0, "meri"),
    "B4": _m("ri", 0, "chu-meri"),
    "C5": _m("ri", 0),
    # kan
    "C#5": _m("ro", 1, "meri"),
    "Db5": _m("ro", 1, "meri"),
    "D5": _m("ro", 1),
    "D#5": _m("tsu", 1, "meri"),
    "Eb5": _m("tsu", 1, "meri"),
    "E5": _m("tsu", 1, "chu-meri"),
    "F5": _m("tsu", 1),
    "F#5": _m("re", 1, "meri"),
    "Gb5": _m("re", 1, "meri"),
    "G5": _m("re", 1),
    "G#5": _m("chi", 1, "meri"),
    "Ab5": _m("chi", 1, "meri"),
    "A5": _m("chi", 1),
    "A#5": _m("chi", 1, "chu-meri"),
    "Bb5": _m("chi", 1, "chu-meri"),
    "B5": _m("ri", 1),
    "C6": _m("hi", 1),
    # daikan
    "C#6": _m("ro", 2, "meri"),
    "Db6": _m("ro", 2, "meri"),
    "D6": _m("ro", 2),
    "D#6": _m("tsu", 2, "meri"),
    "Eb6": _m("tsu", 2, "meri"),
    "E6": _m("tsu", 2, "chu-meri"),
    "F6": _m("tsu", 2),
    "F#6": _m("re", 2, "meri"),
    "Gb6": _m("re", 2, "meri"),
    "G6": _m("re", 2),
    "G#6": _m("chi", 2, "meri"),
    "Ab6": _m("chi", 2, "meri"),
    "A6": _m("chi", 2),
    "A#6": _m("hi", 2, "meri"),
    "Bb6": _m("hi", 2, "meri"),
    "B6": _m("hi", 2),
}
