"""Render sink interface (adapter pattern)."""

from typing import Iterable, NamedTuple, Protocol, Union


class Rect(NamedTuple):
    """Filled square in output pixel space."""
    x: int
    y: int
    w: int
    h: int


class IRenderSink(Protocol):
    """Interface for materializing draw commands."""

    def set_canvas(self, width: int, height: int) -> None:
        """Start a canvas of the given size."""
        ...

    def add_placeholder(self, width: int, height: int) -> None:
        """Describe the requested bounding box, drawn transparent."""
        ...

    def fill_rects(self, rects: Iterable[Rect]) -> None:
        """Draw filled rectangles in the order given."""
        ...

    def output(self) -> Union[str, bytes]:
        """Return the rendered artifact."""
        ...
