"""ScoreExporter: renders a score file to an SVG or HTML document on disk."""

from __future__ import annotations

from shakustave.container import ScoreContainer
from shakustave.render_options import RenderOptions
from shakustave.renderer import ScoreRenderer
from shakustave.score_models import ScoreData
from shakustave.score_parser import load_score_data
from shakustave.sheet_renderers import HtmlSheetRenderer, SheetRenderer, build_renderer


class ScoreExporter:
    """
    Convert a score source into a document via a pluggable sheet renderer.

    Supported formats:
    - ``svg``: the bare drawing with an XML declaration.
    - ``html``: a self-contained page with the drawing inlined.
    """

    def __init__(
        self,
        output_format: str = "svg",
        options: RenderOptions | None = None,
        title: str | None = None,
    ) -> None:
        self.renderer: SheetRenderer = build_renderer(output_format)
        self.output_format = output_format.strip().lower()
        self.options = options
        self.title = title

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _draw(self, score_data: ScoreData) -> str:
        # auto-resize is meaningless for a one-shot export
        container = ScoreContainer()
        score_renderer = ScoreRenderer(container, self.options, auto_resize=False)
        score_renderer.render_from_score_data(score_data)
        markup = container.to_markup()
        score_renderer.destroy()
        return markup

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_document(self, score_data: ScoreData) -> str:
        """Render ``score_data`` into the selected document format."""
        title = self.title if self.title is not None else score_data.title
        svg_markup = self._draw(score_data)
        if isinstance(self.renderer, HtmlSheetRenderer):
            return self.renderer.build_html(title, [svg_markup], composer=score_data.composer)
        return self.renderer.render(title=title, svg_markup=svg_markup)

    def export(self, source: str, output_path: str, data_format: str | None = None) -> ScoreData:
        """
        Load ``source``, render it and write the document to ``output_path``.

        Returns:
            The score data that was rendered.

        Raises:
            ValueError: If the source is malformed or its format unsupported.
            OSError: If the source cannot be read or the output written.
        """
        score_data = load_score_data(source, data_format)
        content = self.render_document(score_data)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
        return score_data
