"""ScoreContainer: the hosting surface a renderer draws into."""

from __future__ import annotations

import logging
from collections.abc import Callable

from shakustave.sheet_renderers import escape_html
from shakustave.svg_context import SVGContext

logger = logging.getLogger(__name__)

ResizeCallback = Callable[[float, float], None]


class ScoreContainer:
    """
    A measurable host for rendered output, with push-based resize notification.

    The container plays the part a page element plays for an embedded score:
    it holds whatever was last rendered (drawing surfaces or an error
    message), reports its size, and calls subscribers when the host resizes
    it through :meth:`notify_resize`. A size of ``0`` means "not measured".
    """

    def __init__(self, width: float = 0, height: float = 0) -> None:
        self.width = width
        self.height = height
        self._children: list[SVGContext] = []
        self._error: str | None = None
        self._subscribers: list[ResizeCallback] = []

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    @property
    def children(self) -> list[SVGContext]:
        return list(self._children)

    def append(self, surface: SVGContext) -> None:
        self._children.append(surface)

    def clear(self) -> None:
        self._children = []
        self._error = None

    def show_error(self, message: str) -> None:
        """Replace the content with a visible error message."""
        self.clear()
        self._error = message

    @property
    def error_message(self) -> str | None:
        return self._error

    @property
    def svg(self) -> SVGContext | None:
        return self._children[0] if self._children else None

    def to_markup(self) -> str:
        markup = "".join(surface.to_string() for surface in self._children)
        if self._error is not None:
            markup += f'<div class="shakustave-error"><p>{escape_html(self._error)}</p></div>'
        return markup

    # ------------------------------------------------------------------
    # Measurement and resize notification
    # ------------------------------------------------------------------

    def measure(self) -> tuple[float, float]:
        return self.width, self.height

    def subscribe_resize(self, callback: ResizeCallback) -> Callable[[], None]:
        """Register ``callback``; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify_resize(self, width: float, height: float) -> None:
        """Record a new size and tell every subscriber, in subscription order."""
        self.width = width
        self.height = height
        logger.debug("Container resized to %sx%s", width, height)
        for callback in list(self._subscribers):
            callback(width, height)
