"""SVG markup render sink."""

from typing import Iterable, Optional

import svgwrite

from .. import config
from ..errors import InvalidStateError
from ..interfaces import Rect


class SvgAdapter:
    """Adapter for rendering draw commands as SVG markup."""

    def __init__(
        self,
        fill_color: str = config.FILL_COLOR,
        profile: str = config.SVG_PROFILE
    ):
        self.fill_color = fill_color
        self.profile = profile
        self.drawing: Optional[svgwrite.Drawing] = None

    def _require_drawing(self) -> svgwrite.Drawing:
        if self.drawing is None:
            raise InvalidStateError("set_canvas() must be called first")
        return self.drawing

    def set_canvas(self, width: int, height: int) -> None:
        """Create the root svg element."""
        self.drawing = svgwrite.Drawing(
            size=(width, height), profile=self.profile
        )

    def add_placeholder(self, width: int, height: int) -> None:
        """Add an unfilled path spanning the requested box."""
        drawing = self._require_drawing()
        drawing.add(drawing.path(d=f"M0 0h{width}v{height}H0z", fill="none"))

    def fill_rects(self, rects: Iterable[Rect]) -> None:
        """Append one rect element per module."""
        drawing = self._require_drawing()
        for rect in rects:
            drawing.add(drawing.rect(
                insert=(rect.x, rect.y),
                size=(rect.w, rect.h),
                fill=self.fill_color
            ))

    def output(self) -> str:
        """Return the SVG document as a string."""
        return self._require_drawing().tostring()
