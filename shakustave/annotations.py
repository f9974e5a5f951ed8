"""Annotations: the closed set of decorations a note can carry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from shakustave.svg_context import DEFAULT_FONT_FAMILY, SVGContext
from shakustave.symbols import PITCH_BEND_GLYPHS, REGISTER_GLYPHS, Register


class AnnotationKind(str, Enum):
    """Variant tag used for dispatch instead of ``isinstance`` checks."""

    OCTAVE_REGISTER = "octave-register"
    PITCH_BEND = "pitch-bend"
    DURATION_DOT = "duration-dot"
    ATARI = "atari"


# ── Abstract base ────────────────────────────────────────────────────────────


class Annotation(ABC):
    """
    A decoration drawn relative to its host note.

    An annotation knows only its offset from the host position; it holds no
    reference back to the note. ``render`` receives the host coordinates and
    draws at ``(host_x + offset_x, host_y + offset_y)``.
    """

    kind: ClassVar[AnnotationKind]
    default_offset: ClassVar[tuple[float, float]] = (0.0, 0.0)

    def __init__(
        self,
        offset_x: float | None = None,
        offset_y: float | None = None,
        *,
        font_size: float = 14,
        font_weight: int = 400,
        color: str = "#000",
    ) -> None:
        default_x, default_y = self.default_offset
        self.offset_x = default_x if offset_x is None else offset_x
        self.offset_y = default_y if offset_y is None else offset_y
        self.font_size = font_size
        self.font_weight = font_weight
        self.color = color

    def set_offset(self, x: float, y: float) -> Annotation:
        self.offset_x = x
        self.offset_y = y
        return self

    def set_style(
        self,
        font_size: float | None = None,
        font_weight: int | None = None,
        color: str | None = None,
    ) -> Annotation:
        """Update any of the presentation fields; ``None`` leaves a field as is."""
        if font_size is not None:
            self.font_size = font_size
        if font_weight is not None:
            self.font_weight = font_weight
        if color is not None:
            self.color = color
        return self

    @property
    def offset(self) -> tuple[float, float]:
        return self.offset_x, self.offset_y

    @property
    def width(self) -> float:
        return 0.0

    @property
    def height(self) -> float:
        return 0.0

    @abstractmethod
    def render(self, ctx: SVGContext, host_x: float, host_y: float) -> None:
        """Draw this annotation for a host note at ``(host_x, host_y)``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(offset=({self.offset_x}, {self.offset_y}))"


# ── Text marks ───────────────────────────────────────────────────────────────


class _TextMark(Annotation):
    font_family: str = DEFAULT_FONT_FAMILY

    @property
    @abstractmethod
    def glyph(self) -> str:
        """Text drawn for this mark; empty means nothing is drawn."""

    @property
    def width(self) -> float:
        return self.font_size * 0.8 * len(self.glyph)

    @property
    def height(self) -> float:
        return self.font_size if self.glyph else 0.0

    def render(self, ctx: SVGContext, host_x: float, host_y: float) -> None:
        if not self.glyph:
            return
        ctx.draw_text(
            self.glyph,
            host_x + self.offset_x,
            host_y + self.offset_y,
            self.font_size,
            self.font_family,
            self.color,
            "middle",
            self.font_weight,
        )


class OctaveMark(_TextMark):
    """Register mark (甲 / 大甲) drawn above-right of the glyph. Otsu draws nothing."""

    kind = AnnotationKind.OCTAVE_REGISTER
    default_offset = (18.0, -22.0)

    def __init__(self, register: Register | str = Register.KAN, **kwargs) -> None:
        kwargs.setdefault("font_size", 12)
        kwargs.setdefault("font_weight", 500)
        super().__init__(**kwargs)
        self.register = Register(register)

    @property
    def glyph(self) -> str:
        return REGISTER_GLYPHS[self.register]

    def __repr__(self) -> str:
        return f"OctaveMark({self.register.value!r})"


class PitchBendMark(_TextMark):
    """Meri / chu-meri / dai-meri / kari mark drawn to the left of the glyph."""

    kind = AnnotationKind.PITCH_BEND
    default_offset = (-22.0, 0.0)

    def __init__(self, bend: str = "meri", **kwargs) -> None:
        if bend not in PITCH_BEND_GLYPHS:
            supported = ", ".join(PITCH_BEND_GLYPHS)
            raise ValueError(f"Unknown pitch bend '{bend}'. Use one of: {supported}.")
        kwargs.setdefault("font_size", 14)
        kwargs.setdefault("font_weight", 500)
        super().__init__(**kwargs)
        self.bend = bend

    @property
    def glyph(self) -> str:
        return PITCH_BEND_GLYPHS[self.bend]

    def __repr__(self) -> str:
        return f"PitchBendMark({self.bend!r})"


# ── Graphic marks ────────────────────────────────────────────────────────────


class DurationDot(Annotation):
    """Filled dot below the glyph lengthening the note by half."""

    kind = AnnotationKind.DURATION_DOT
    default_offset = (0.0, 10.0)

    def __init__(self, radius: float = 2.5, **kwargs) -> None:
        super().__init__(**kwargs)
        self.radius = radius

    @property
    def width(self) -> float:
        return self.radius * 2

    @property
    def height(self) -> float:
        return self.radius * 2

    def render(self, ctx: SVGContext, host_x: float, host_y: float) -> None:
        ctx.draw_circle(host_x + self.offset_x, host_y + self.offset_y, self.radius, self.color)


class AtariMark(Annotation):
    """
    Finger-pop articulation drawn beside the glyph.

    Styles:
    - ``chevron``: two strokes forming ``>``.
    - ``arrow``: a short shaft with a ``>`` head pointing at the note.
    - ``dot``: a filled circle.
    """

    kind = AnnotationKind.ATARI
    default_offset = (-15.0, -5.0)
    STYLES: ClassVar[tuple[str, ...]] = ("chevron", "arrow", "dot")

    def __init__(
        self,
        style: str = "chevron",
        size: float = 10,
        stroke_width: float = 2,
        **kwargs,
    ) -> None:
        if style not in self.STYLES:
            raise ValueError(f"Unknown atari style '{style}'. Use one of: {', '.join(self.STYLES)}.")
        kwargs.setdefault("color", "#FF5722")
        super().__init__(**kwargs)
        self.style = style
        self.size = size
        self.stroke_width = stroke_width

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size

    def render(self, ctx: SVGContext, host_x: float, host_y: float) -> None:
        x = host_x + self.offset_x
        y = host_y + self.offset_y
        half = self.size / 2

        if self.style == "dot":
            ctx.draw_circle(x, y, half, self.color)
            return

        if self.style == "arrow":
            ctx.draw_line(x - self.size, y, x, y, self.color, self.stroke_width)
            ctx.draw_line(x, y, x - half, y - half, self.color, self.stroke_width)
            ctx.draw_line(x, y, x - half, y + half, self.color, self.stroke_width)
            return

        ctx.draw_line(x - half, y - half, x, y, self.color, self.stroke_width)
        ctx.draw_line(x, y, x - half, y + half, self.color, self.stroke_width)
