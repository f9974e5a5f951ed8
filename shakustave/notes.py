"""ShakuNote: one renderable notation glyph and the annotations it owns."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from shakustave.annotations import Annotation, AnnotationKind
from shakustave.svg_context import DEFAULT_FONT_FAMILY, SVGContext
from shakustave.symbols import FingeringSymbol, NotationStyle, get_symbol

logger = logging.getLogger(__name__)

REST_SYMBOL = "rest"


class DurationClass(str, Enum):
    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "sixteenth"

    @classmethod
    def from_beats(cls, beats: float) -> DurationClass:
        """
        Map an interchange duration (in quarter-note beats) to a class.

        4 → whole, 2 → half, 1 → quarter, 0.5 → eighth, 0.25 → sixteenth;
        other values snap to the nearest class (the shorter one on a tie, so a
        dotted half of 3 beats is a half), non-positive values to quarter.
        """
        if beats <= 0:
            return cls.QUARTER
        _, duration = min(_BEATS, key=lambda pair: abs(pair[0] - beats))
        return duration


# shortest first: min() keeps the first of equally near classes
_BEATS: list[tuple[float, DurationClass]] = [
    (0.25, DurationClass.SIXTEENTH),
    (0.5, DurationClass.EIGHTH),
    (1.0, DurationClass.QUARTER),
    (2.0, DurationClass.HALF),
    (4.0, DurationClass.WHOLE),
]


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float


class ShakuNote:
    """
    A single shakuhachi note positioned on the page.

    The fingering identifier (``symbol``) is resolved through the fixed
    symbol table to a kana (kinko) or numeral (tozan) glyph. A symbol that
    cannot be resolved is drawn as a rest so one bad note never aborts a
    whole score.

    Annotations are owned exclusively by the note and are drawn after the
    glyph in attachment order.
    """

    def __init__(
        self,
        symbol: str,
        style: NotationStyle | str = NotationStyle.KINKO,
        duration: DurationClass = DurationClass.QUARTER,
        x: float = 0,
        y: float = 0,
        font_size: float = 32,
        font_weight: int = 400,
        font_family: str = DEFAULT_FONT_FAMILY,
        color: str = "#000",
        annotations: Iterable[Annotation] = (),
        is_rest: bool = False,
    ) -> None:
        self.style = NotationStyle(style)
        self.duration = duration
        self.x = x
        self.y = y
        self.font_size = font_size
        self.font_weight = font_weight
        self.font_family = font_family
        self.color = color
        self._annotations: list[Annotation] = list(annotations)
        self._explicit_rest = is_rest
        self.set_symbol(symbol)

    def __repr__(self) -> str:
        return f"ShakuNote({self.symbol!r}, x={self.x}, y={self.y}, annotations={self._annotations!r})"

    # ------------------------------------------------------------------
    # Symbol
    # ------------------------------------------------------------------

    def set_symbol(self, symbol: str) -> ShakuNote:
        self.symbol = symbol
        self.symbol_info: FingeringSymbol | None = None
        if not self._explicit_rest and symbol != REST_SYMBOL:
            self.symbol_info = get_symbol(symbol)
            if self.symbol_info is None:
                logger.warning("Unknown fingering %r; drawing a rest instead", symbol)
        return self

    @property
    def is_rest(self) -> bool:
        return self.symbol_info is None

    @property
    def glyph(self) -> str:
        """Display glyph for the note's style; empty for a rest."""
        if self.symbol_info is None:
            return ""
        return self.symbol_info.glyph(self.style)

    @property
    def romaji(self) -> str:
        return self.symbol_info.romaji if self.symbol_info else REST_SYMBOL

    # ------------------------------------------------------------------
    # Position and typography
    # ------------------------------------------------------------------

    def set_position(self, x: float, y: float) -> ShakuNote:
        self.x = x
        self.y = y
        return self

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def set_typography(
        self,
        font_size: float | None = None,
        font_weight: int | None = None,
        font_family: str | None = None,
        color: str | None = None,
    ) -> ShakuNote:
        if font_size is not None:
            self.font_size = font_size
        if font_weight is not None:
            self.font_weight = font_weight
        if font_family is not None:
            self.font_family = font_family
        if color is not None:
            self.color = color
        return self

    # ------------------------------------------------------------------
    # Annotations
    # ------------------------------------------------------------------

    @property
    def annotations(self) -> list[Annotation]:
        """A copy of the attached annotations, in attachment order."""
        return list(self._annotations)

    def add_annotation(self, annotation: Annotation) -> ShakuNote:
        self._annotations.append(annotation)
        return self

    def add_annotations(self, annotations: Iterable[Annotation]) -> ShakuNote:
        self._annotations.extend(annotations)
        return self

    def remove_annotation(self, annotation: Annotation) -> bool:
        """Detach ``annotation``; returns False when it was not attached."""
        for index, attached in enumerate(self._annotations):
            if attached is annotation:
                del self._annotations[index]
                return True
        return False

    def set_annotations(self, annotations: Iterable[Annotation]) -> ShakuNote:
        self._annotations = list(annotations)
        return self

    def find_annotation(self, kind: AnnotationKind) -> Annotation | None:
        return next((a for a in self._annotations if a.kind is kind), None)

    def has_annotation(self, kind: AnnotationKind) -> bool:
        return self.find_annotation(kind) is not None

    # ------------------------------------------------------------------
    # Geometry and drawing
    # ------------------------------------------------------------------

    def bounding_box(self) -> BoundingBox:
        """Approximate box around the glyph (baseline at ``y``) and its annotations."""
        char_width = self.font_size * 0.8
        min_x = self.x - char_width / 2
        max_x = self.x + char_width / 2
        min_y = self.y - self.font_size
        max_y = self.y

        for annotation in self._annotations:
            ax = self.x + annotation.offset_x
            ay = self.y + annotation.offset_y
            min_x = min(min_x, ax - annotation.width / 2)
            max_x = max(max_x, ax + annotation.width / 2)
            min_y = min(min_y, ay - annotation.height / 2)
            max_y = max(max_y, ay + annotation.height / 2)

        return BoundingBox(min_x, min_y, max_x - min_x, max_y - min_y)

    def render(self, ctx: SVGContext) -> None:
        if self.is_rest:
            # ma: small hollow circle centred on the kana body
            radius = self.font_size / 8
            ctx.draw_circle(
                self.x,
                self.y - self.font_size * 0.4,
                radius,
                None,
                self.color,
                max(1.5, radius / 1.9),
            )
        else:
            ctx.draw_text(
                self.glyph,
                self.x,
                self.y,
                self.font_size,
                self.font_family,
                self.color,
                "middle",
                self.font_weight,
            )

        for annotation in self._annotations:
            annotation.render(ctx, self.x, self.y)
