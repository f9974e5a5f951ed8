"""Unit tests for the SVG and HTML document renderers."""

import pytest

from shakustave.sheet_renderers import HtmlSheetRenderer, SvgSheetRenderer, build_renderer


def test_build_html_title_in_title_tag() -> None:
    html = HtmlSheetRenderer().build_html("Shika no Tone", ["<svg></svg>"])
    assert "<title>Shika no Tone</title>" in html


def test_build_html_title_in_h1() -> None:
    html = HtmlSheetRenderer().build_html("Shika no Tone", ["<svg></svg>"])
    assert "<h1>Shika no Tone</h1>" in html


def test_build_html_empty_title_no_h1() -> None:
    html = HtmlSheetRenderer().build_html("", ["<svg></svg>"])
    assert "<h1>" not in html


def test_build_html_escapes_ampersand() -> None:
    html = HtmlSheetRenderer().build_html("Tsuru & Kame", ["<svg></svg>"])
    assert "Tsuru &amp; Kame" in html
    assert "Tsuru & Kame" not in html.replace("&amp;", "ESCAPED")


def test_build_html_escapes_angle_brackets() -> None:
    html = HtmlSheetRenderer().build_html("<Cool> Song", ["<svg></svg>"])
    assert "&lt;Cool&gt; Song" in html


def test_build_html_composer_byline() -> None:
    html = HtmlSheetRenderer().build_html("Tamuke", ["<svg></svg>"], composer="Yokoyama & co")
    assert '<p class="composer">Yokoyama &amp; co</p>' in html


def test_build_html_one_div_per_svg() -> None:
    html = HtmlSheetRenderer().build_html("Test", ["<svg>p1</svg>", "<svg>p2</svg>"])
    assert html.count('<div class="score">') == 2


def test_build_html_is_valid_html_skeleton() -> None:
    html = HtmlSheetRenderer().render(title="Skeleton", svg_markup="<svg>UNIQUE_MARKER</svg>")
    assert html.startswith("<!DOCTYPE html>")
    assert "UNIQUE_MARKER" in html
    assert "</html>" in html
    assert "@media print" in html


def test_svg_renderer_adds_xml_declaration_and_title_comment() -> None:
    content = SvgSheetRenderer().render(title="Daha", svg_markup="<svg />")
    assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<!-- Daha -->" in content
    assert content.rstrip().endswith("<svg />")


def test_svg_renderer_requires_markup() -> None:
    with pytest.raises(ValueError, match="svg_markup"):
        SvgSheetRenderer().render(title="x", svg_markup="  ")


@pytest.mark.parametrize(("name", "extension"), [("svg", ".svg"), ("HTML", ".html")])
def test_build_renderer(name: str, extension: str) -> None:
    assert build_renderer(name).default_extension == extension


def test_build_renderer_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unsupported output format 'pdf'"):
        build_renderer("pdf")
