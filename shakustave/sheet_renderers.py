"""Renderer implementations for score document output formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final

SUPPORTED_OUTPUT_FORMATS: Final[tuple[str, ...]] = ("svg", "html")


def escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class SheetRenderer(ABC):
    """Abstract document renderer wrapping rendered SVG markup."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, *, title: str, svg_markup: str) -> str:
        """Render output into a file content string."""


class SvgSheetRenderer(SheetRenderer):
    """Standalone SVG file: XML declaration, a title comment, then the drawing."""

    @property
    def default_extension(self) -> str:
        return ".svg"

    def render(self, *, title: str, svg_markup: str) -> str:
        if not svg_markup.strip():
            raise ValueError("svg_markup is required for SVG output.")
        comment = f"<!-- {title.replace('--', '- -')} -->\n" if title else ""
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{comment}{svg_markup}\n'


class HtmlSheetRenderer(SheetRenderer):
    """Self-contained HTML page with the score inlined as SVG."""

    @property
    def default_extension(self) -> str:
        return ".html"

    def render(self, *, title: str, svg_markup: str) -> str:
        if not svg_markup.strip():
            raise ValueError("svg_markup is required for HTML output.")
        return self.build_html(title, [svg_markup])

    def build_html(self, title: str, svgs: list[str], composer: str | None = None) -> str:
        """
        Wrap a list of SVG strings in a self-contained HTML document.

        Each SVG is placed in its own ``.score`` div. The stylesheet centres
        the columns on screen and drops the card styling when printed, with
        one score per printed page.
        """
        title_safe = escape_html(title)
        heading = f"  <h1>{title_safe}</h1>\n" if title else ""
        byline = f'  <p class="composer">{escape_html(composer)}</p>\n' if composer else ""
        scores = "\n".join(f'  <div class="score">{svg}</div>' for svg in svgs)

        return f"""<!DOCTYPE html>
<html lang="ja">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title_safe}</title>
  <style>
    *, *::before, *::after {{ box-sizing: border-box; }}
    body {{
      font-family: "Noto Sans JP", sans-serif;
      background: #f4f1ea;
      margin: 0;
      padding: 2rem;
    }}
    h1 {{
      text-align: center;
      font-size: 1.6rem;
      margin-bottom: 0.5rem;
      color: #222;
    }}
    .composer {{
      text-align: center;
      color: #555;
      margin-bottom: 2rem;
    }}
    .score {{
      background: #fff;
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.15);
      margin: 0 auto 3rem;
      width: fit-content;
      padding: 1rem;
    }}
    .score svg {{
      display: block;
    }}
    .shakustave-error {{
      color: #b00020;
      text-align: center;
    }}
    @media print {{
      body {{
        background: #fff;
        padding: 0;
      }}
      .score {{
        box-shadow: none;
        page-break-after: always;
        padding: 0;
        margin: 0 auto;
      }}
      .score:last-child {{
        page-break-after: avoid;
      }}
    }}
  </style>
</head>
<body>
{heading}{byline}{scores}
</body>
</html>"""


def build_renderer(output_format: str) -> SheetRenderer:
    """
    Return the renderer for ``output_format`` ("svg" or "html").

    Raises:
        ValueError: If the format is not supported.
    """
    normalized = output_format.strip().lower()
    if normalized == "svg":
        return SvgSheetRenderer()
    if normalized == "html":
        return HtmlSheetRenderer()
    supported = ", ".join(SUPPORTED_OUTPUT_FORMATS)
    raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
