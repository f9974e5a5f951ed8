"""Integration tests for MusicXML/ABC import through music21."""

import pytest

from shakustave.score_parser import score_data_from_text
from shakustave.symbols import NotationStyle

pytest.importorskip("music21")

pytestmark = pytest.mark.integration

ABC_TUNE = """X:1
T:Kyorei
M:4/4
L:1/4
K:C
D F G A | ^F _B D3/2 z/2 | C,4 |]
"""

MUSICXML_TUNE = """<?xml version="1.0" encoding="UTF-8"?>
<score-partwise version="3.1">
  <work><work-title>Choshi</work-title></work>
  <part-list>
    <score-part id="P1"><part-name>Shakuhachi</part-name></score-part>
  </part-list>
  <part id="P1">
    <measure number="1">
      <attributes>
        <divisions>1</divisions>
        <time><beats>4</beats><beat-type>4</beat-type></time>
      </attributes>
      <note><pitch><step>D</step><octave>5</octave></pitch><duration>2</duration><type>half</type></note>
      <note><rest/><duration>1</duration><type>quarter</type></note>
      <note><pitch><step>A</step><octave>4</octave></pitch><duration>1</duration><type>quarter</type></note>
    </measure>
  </part>
</score-partwise>
"""


def test_abc_pitches_map_to_kinko_steps() -> None:
    data = score_data_from_text(ABC_TUNE, "abc")
    steps = [n.pitch.step if n.pitch else "rest" for n in data.notes]
    assert steps == ["ro", "tsu", "re", "chi", "re", "chi", "ro", "rest"]
    assert data.style is NotationStyle.KINKO
    assert data.title == "Kyorei"


def test_abc_accidentals_become_meri() -> None:
    data = score_data_from_text(ABC_TUNE, "abc")
    assert data.notes[4].meri
    assert data.notes[5].meri


def test_abc_dotted_note_keeps_base_duration() -> None:
    data = score_data_from_text(ABC_TUNE, "abc")
    dotted = data.notes[6]
    assert dotted.dotted
    assert dotted.duration == pytest.approx(1.0)


def test_out_of_range_pitch_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    data = score_data_from_text(ABC_TUNE, "abc")
    assert len(data.notes) == 8
    assert "outside the shakuhachi range" in caplog.text


def test_musicxml_kan_note_and_rest() -> None:
    data = score_data_from_text(MUSICXML_TUNE, "musicxml", title="Fallback")
    assert data.title == "Choshi"
    first, rest, last = data.notes
    assert first.pitch is not None
    assert (first.pitch.step, first.pitch.octave, first.duration) == ("ro", 1, 2)
    assert rest.rest
    assert last.pitch is not None
    assert last.pitch.step == "chi"
