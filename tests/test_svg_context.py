"""Unit tests for the SVG drawing context."""

import logging

import pytest

from shakustave.svg_context import SVGContext


def test_drawing_carries_size_and_viewbox() -> None:
    ctx = SVGContext(640, 480)
    assert ctx.drawing["width"] == "640"
    assert ctx.drawing["height"] == "480"
    assert ctx.drawing["viewBox"] == "0 0 640 480"


def test_draw_text_rounds_coordinates_to_three_decimals() -> None:
    ctx = SVGContext()
    element = ctx.draw_text("ロ", 10.12345, 20.9999)
    assert element["x"] == "10.123"
    assert element["y"] == "21"
    assert element.text == "ロ"


def test_draw_text_defaults() -> None:
    ctx = SVGContext()
    element = ctx.draw_text("ツ", 0, 0)
    assert element["text-anchor"] == "middle"
    assert element["font-weight"] == "400"
    assert element["fill"] == "#000"
    assert element["font-size"] == "24"


def test_draw_text_custom_anchor_and_weight() -> None:
    ctx = SVGContext()
    element = ctx.draw_text("label", 1, 2, 7, "monospace", "#999", "start", 700)
    assert element["text-anchor"] == "start"
    assert element["font-family"] == "monospace"
    assert element["font-weight"] == "700"


def test_circle_without_fill_is_hollow() -> None:
    ctx = SVGContext()
    element = ctx.draw_circle(5, 5, 3)
    assert element["fill"] == "none"
    assert "stroke" not in element.attribs


def test_circle_with_stroke_sets_stroke_width() -> None:
    ctx = SVGContext()
    element = ctx.draw_circle(5, 5, 3, None, "#123", 1.5)
    assert element["stroke"] == "#123"
    assert element["stroke-width"] == "1.5"


def test_rect_and_path_fill_is_optional() -> None:
    ctx = SVGContext()
    rect = ctx.draw_rect(0, 0, 10, 20, fill="#fff")
    path = ctx.draw_path("M 0 0 L 10 10", stroke="#000")
    assert rect["fill"] == "#fff"
    assert "stroke" not in rect.attribs
    assert path["fill"] == "none"
    assert path["stroke"] == "#000"
    assert 'd="M 0 0 L 10 10"' in ctx.to_string()


def test_draw_line_attributes() -> None:
    ctx = SVGContext()
    line = ctx.draw_line(0, 0.00049, 10, 10, "#f00", 2)
    assert line["y1"] == "0"
    assert line["stroke"] == "#f00"
    assert line["stroke-width"] == "2"


def test_groups_nest_and_receive_draws() -> None:
    ctx = SVGContext()
    outer = ctx.open_group("column", "column-0")
    inner = ctx.open_group(transform="translate(1,2)")
    ctx.draw_circle(0, 0, 1)
    ctx.close_group()
    ctx.draw_text("x", 0, 0)
    ctx.close_group()
    ctx.draw_line(0, 0, 1, 1)

    assert outer["class"] == "column"
    assert outer["id"] == "column-0"
    assert inner["transform"] == "translate(1,2)"
    assert [child.elementname for child in inner.elements] == ["circle"]
    assert [child.elementname for child in outer.elements] == ["g", "text"]
    assert [child.elementname for child in ctx.elements] == ["g", "line"]
    assert [e.elementname for e in ctx.iter()] == ["g", "g", "circle", "text", "line"]


def test_close_group_without_open_group_warns(caplog: pytest.LogCaptureFixture) -> None:
    ctx = SVGContext()
    with caplog.at_level(logging.WARNING, logger="shakustave.svg_context"):
        ctx.close_group()
    assert "no groups are open" in caplog.text
    assert ctx.group_depth == 0
    ctx.draw_circle(1, 1, 1)
    assert len(ctx.elements) == 1


def test_resize_keeps_content() -> None:
    ctx = SVGContext(100, 100)
    ctx.draw_circle(1, 1, 1)
    ctx.resize(300, 200)
    assert ctx.size == (300, 200)
    assert ctx.drawing["viewBox"] == "0 0 300 200"
    assert len(ctx.elements) == 1


def test_clear_removes_content_and_groups() -> None:
    ctx = SVGContext()
    ctx.open_group("a")
    ctx.draw_circle(1, 1, 1)
    ctx.clear()
    assert ctx.elements == []
    assert ctx.group_depth == 0
    ctx.draw_circle(2, 2, 2)
    assert [child.elementname for child in ctx.elements] == ["circle"]


def test_to_string_is_svg_markup() -> None:
    ctx = SVGContext(10, 10)
    ctx.draw_text("チ", 5.5, 5)
    markup = ctx.to_string()
    assert markup.startswith("<svg")
    assert 'xmlns="http://www.w3.org/2000/svg"' in markup
    assert 'viewBox="0 0 10 10"' in markup
    assert 'x="5.5"' in markup
    assert "チ" in markup
