"""PNG raster render sink."""

import io
from typing import Iterable, Optional

from PIL import Image, ImageDraw

from .. import config
from ..errors import InvalidStateError
from ..interfaces import Rect


class RasterAdapter:
    """Adapter for rendering draw commands to a PNG image."""

    def __init__(
        self,
        fill_color: str = config.FILL_COLOR,
        back_color: str = config.BACK_COLOR
    ):
        self.fill_color = fill_color
        self.back_color = back_color
        self.image: Optional[Image.Image] = None

    def _require_image(self) -> Image.Image:
        if self.image is None:
            raise InvalidStateError("set_canvas() must be called first")
        return self.image

    def set_canvas(self, width: int, height: int) -> None:
        """Create a blank image filled with the background colour."""
        self.image = Image.new("RGB", (width, height), self.back_color)

    def add_placeholder(self, width: int, height: int) -> None:
        """Placeholder is transparent, nothing to paint."""
        self._require_image()

    def fill_rects(self, rects: Iterable[Rect]) -> None:
        """Paint each module square."""
        draw = ImageDraw.Draw(self._require_image())
        for rect in rects:
            # PIL rectangles include both corner pixels
            draw.rectangle(
                (rect.x, rect.y, rect.x + rect.w - 1, rect.y + rect.h - 1),
                fill=self.fill_color
            )

    def output(self) -> bytes:
        """Return the image encoded as PNG."""
        buf = io.BytesIO()
        self._require_image().save(buf, format='PNG')
        return buf.getvalue()
