"""Terminal text render sink."""

from typing import Iterable, Optional

from ..errors import InvalidStateError
from ..interfaces import Rect


class TerminalAdapter:
    """Adapter for rendering draw commands as block characters.

    Each output pixel becomes one two-character cell, so small canvases
    (requested size 0) are the useful case here.
    """

    def __init__(self, on: str = "██", off: str = "  "):
        self.on = on
        self.off = off
        self.grid: Optional[list[list[bool]]] = None

    def _require_grid(self) -> list[list[bool]]:
        if self.grid is None:
            raise InvalidStateError("set_canvas() must be called first")
        return self.grid

    def set_canvas(self, width: int, height: int) -> None:
        """Allocate an empty grid."""
        self.grid = [[False] * width for _ in range(height)]

    def add_placeholder(self, width: int, height: int) -> None:
        """Placeholder is blank, nothing to mark."""
        self._require_grid()

    def fill_rects(self, rects: Iterable[Rect]) -> None:
        """Mark every pixel covered by a rect."""
        grid = self._require_grid()
        for rect in rects:
            for y in range(rect.y, rect.y + rect.h):
                row = grid[y]
                for x in range(rect.x, rect.x + rect.w):
                    row[x] = True

    def output(self) -> str:
        """Return the grid as newline-separated rows."""
        return "\n".join(
            "".join(self.on if cell else self.off for cell in row)
            for row in self._require_grid()
        )
