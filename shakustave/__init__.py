"""shakustave: vertical, right-to-left shakuhachi notation rendered to SVG."""

__version__ = "0.3.0"

from shakustave.annotations import (  # noqa: E402
    Annotation,
    AnnotationKind,
    AtariMark,
    DurationDot,
    OctaveMark,
    PitchBendMark,
)
from shakustave.configurator import configure_annotations  # noqa: E402
from shakustave.container import ScoreContainer  # noqa: E402
from shakustave.layout import ColumnInfo, ColumnLayout, NotePosition, calculate_layout  # noqa: E402
from shakustave.notes import DurationClass, ShakuNote  # noqa: E402
from shakustave.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions, merge_options  # noqa: E402
from shakustave.renderer import ScoreRenderer, render_score, render_score_from_url  # noqa: E402
from shakustave.score_models import Pitch, ScoreData, ScoreDataError, ScoreNote  # noqa: E402
from shakustave.score_parser import UnsupportedFormatError, load_score_data, parse_json, parse_score  # noqa: E402
from shakustave.svg_context import SVGContext  # noqa: E402
from shakustave.symbols import NotationStyle, Register  # noqa: E402

__all__ = [
    "Annotation",
    "AnnotationKind",
    "AtariMark",
    "ColumnInfo",
    "ColumnLayout",
    "DEFAULT_RENDER_OPTIONS",
    "DurationClass",
    "DurationDot",
    "NotationStyle",
    "NotePosition",
    "OctaveMark",
    "Pitch",
    "PitchBendMark",
    "Register",
    "RenderOptions",
    "SVGContext",
    "ScoreContainer",
    "ScoreData",
    "ScoreDataError",
    "ScoreNote",
    "ScoreRenderer",
    "ShakuNote",
    "UnsupportedFormatError",
    "calculate_layout",
    "configure_annotations",
    "load_score_data",
    "merge_options",
    "parse_json",
    "parse_score",
    "render_score",
    "render_score_from_url",
]
