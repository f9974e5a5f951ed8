"""SVGContext: coordinate-precise 2D drawing primitives on an svgwrite drawing."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Final, Literal

import svgwrite
from svgwrite.base import BaseElement

logger = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY: Final[str] = "Noto Sans JP, sans-serif"

TextAnchor = Literal["start", "middle", "end"]


def _fmt(value: float) -> str:
    """Round to 3 decimal places and drop a trailing ``.0``."""
    rounded = round(float(value), 3)
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(rounded)


def iter_elements(element: BaseElement, tag: str | None = None) -> Iterator[BaseElement]:
    """Depth-first walk over the descendants of ``element``, optionally filtered by tag."""
    for child in element.elements:
        if tag is None or child.elementname == tag:
            yield child
        yield from iter_elements(child, tag)


class SVGContext:
    """
    Imperative drawing surface backed by a single :class:`svgwrite.Drawing`.

    Every primitive adds an element to the current parent immediately:
    the innermost open group, or the drawing itself when no group is open.
    All coordinates are rounded to three decimal places before they reach
    svgwrite, so the serialized output is free of floating point noise.
    """

    def __init__(self, width: float = 800, height: float = 600) -> None:
        self.drawing = svgwrite.Drawing(debug=False)
        self._groups: list[BaseElement] = []
        self.width = width
        self.height = height
        self._apply_size()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _apply_size(self) -> None:
        self.drawing["width"] = _fmt(self.width)
        self.drawing["height"] = _fmt(self.height)
        self.drawing["viewBox"] = f"0 0 {_fmt(self.width)} {_fmt(self.height)}"

    @property
    def _parent(self) -> BaseElement:
        return self._groups[-1] if self._groups else self.drawing

    @staticmethod
    def _paint(attrs: dict[str, Any], fill: str | None, stroke: str | None, stroke_width: float) -> None:
        attrs["fill"] = fill if fill else "none"
        if stroke:
            attrs["stroke"] = stroke
            attrs["stroke_width"] = _fmt(stroke_width)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float = 24,
        font_family: str = DEFAULT_FONT_FAMILY,
        color: str = "#000",
        anchor: TextAnchor = "middle",
        font_weight: int | str = 400,
    ) -> BaseElement:
        """Place ``text`` anchored at ``(x, y)``."""
        element = self.drawing.text(
            text,
            insert=(_fmt(x), _fmt(y)),
            font_size=_fmt(font_size),
            font_family=font_family,
            font_weight=str(font_weight),
            fill=color,
            text_anchor=anchor,
        )
        return self._parent.add(element)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        stroke: str = "#000",
        stroke_width: float = 1,
    ) -> BaseElement:
        element = self.drawing.line(
            start=(_fmt(x1), _fmt(y1)),
            end=(_fmt(x2), _fmt(y2)),
            stroke=stroke,
            stroke_width=_fmt(stroke_width),
        )
        return self._parent.add(element)

    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        fill: str | None = None,
        stroke: str | None = None,
        stroke_width: float = 1,
    ) -> BaseElement:
        attrs: dict[str, Any] = {}
        self._paint(attrs, fill, stroke, stroke_width)
        element = self.drawing.circle(center=(_fmt(x), _fmt(y)), r=_fmt(radius), **attrs)
        return self._parent.add(element)

    def draw_path(
        self,
        path_data: str,
        fill: str | None = None,
        stroke: str | None = None,
        stroke_width: float = 1,
    ) -> BaseElement:
        attrs: dict[str, Any] = {}
        self._paint(attrs, fill, stroke, stroke_width)
        element = self.drawing.path(d=path_data, **attrs)
        return self._parent.add(element)

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: str | None = None,
        stroke: str | None = None,
        stroke_width: float = 1,
    ) -> BaseElement:
        attrs: dict[str, Any] = {}
        self._paint(attrs, fill, stroke, stroke_width)
        element = self.drawing.rect(
            insert=(_fmt(x), _fmt(y)),
            size=(_fmt(width), _fmt(height)),
            **attrs,
        )
        return self._parent.add(element)

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def open_group(
        self,
        class_name: str | None = None,
        element_id: str | None = None,
        transform: str | None = None,
    ) -> BaseElement:
        """Push a ``<g>`` element; subsequent draws land inside it."""
        attrs: dict[str, str] = {}
        if class_name:
            attrs["class_"] = class_name
        if element_id:
            attrs["id"] = element_id
        if transform:
            attrs["transform"] = transform
        group = self._parent.add(self.drawing.g(**attrs))
        self._groups.append(group)
        return group

    def close_group(self) -> None:
        """Pop one group level. Unbalanced calls only log a warning."""
        if not self._groups:
            logger.warning("close_group() called but no groups are open")
            return
        self._groups.pop()

    @property
    def group_depth(self) -> int:
        return len(self._groups)

    # ------------------------------------------------------------------
    # Surface management
    # ------------------------------------------------------------------

    @property
    def elements(self) -> list[BaseElement]:
        """Top-level drawn elements; the drawing's own ``<defs>`` is not content."""
        return [child for child in self.drawing.elements if child is not self.drawing.defs]

    def iter(self, tag: str | None = None) -> Iterator[BaseElement]:
        """Every drawn element at any depth, in document order."""
        for element in self.elements:
            if tag is None or element.elementname == tag:
                yield element
            yield from iter_elements(element, tag)

    def resize(self, width: float, height: float) -> None:
        """Update the viewport without discarding drawn content."""
        self.width = width
        self.height = height
        self._apply_size()

    def clear(self) -> None:
        """Remove all drawn content and reset the group stack."""
        self.drawing.elements = [self.drawing.defs]
        self._groups = []

    @property
    def size(self) -> tuple[float, float]:
        return self.width, self.height

    def to_string(self) -> str:
        """Serialize the surface to an SVG fragment (no XML declaration)."""
        return self.drawing.tostring()
