"""Code writer: encodes contents and drives a render sink."""

from typing import Callable, Optional, Union

from . import config
from .errors import InvalidArgumentError, InvalidStateError
from .interfaces import (
    EncodeHintType,
    Hints,
    IEncoder,
    ILogSink,
    IRenderSink
)
from .layout import LayoutRequest, layout


class CodeWriter:
    """Writes contents as a QR code through a pluggable render sink."""

    def __init__(
        self,
        encoder: IEncoder,
        sink_factory: Callable[[], IRenderSink],
        logger: ILogSink,
        quiet_zone: Union[int, str] = config.QUIET_ZONE_SIZE,
        error_correction: str = config.ERROR_CORRECTION
    ):
        self.encoder = encoder
        self.sink_factory = sink_factory
        self.logger = logger
        self.quiet_zone = quiet_zone
        self.error_correction = error_correction

    def _quiet_zone(self, hints: Optional[Hints]) -> int:
        """Quiet zone from the MARGIN hint, else the configured default."""
        raw = self.quiet_zone
        if hints and hints.get(EncodeHintType.MARGIN) is not None:
            raw = hints[EncodeHintType.MARGIN]

        try:
            quiet_zone = int(str(raw), 10)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid margin: {raw!r}") from e

        if quiet_zone < 0:
            raise InvalidArgumentError(
                f"Margin must not be negative: {quiet_zone}"
            )
        return quiet_zone

    def _error_correction(self, hints: Optional[Hints]) -> str:
        if hints and hints.get(EncodeHintType.ERROR_CORRECTION) is not None:
            return str(hints[EncodeHintType.ERROR_CORRECTION])
        return self.error_correction

    def write(
        self,
        contents: str,
        width: int,
        height: int,
        hints: Optional[Hints] = None
    ) -> Union[str, bytes]:
        """Encode contents and render it onto a width x height canvas."""
        # Early validation
        if not contents:
            raise InvalidArgumentError("Found empty contents")

        if width < 0 or height < 0:
            raise InvalidArgumentError(
                f"Requested dimensions are too small: {width}x{height}"
            )

        quiet_zone = self._quiet_zone(hints)
        error_correction = self._error_correction(hints)

        code = self.encoder.encode(contents, error_correction, hints)
        if code.matrix is None:
            raise InvalidStateError("Encoder produced no module matrix")

        result = layout(LayoutRequest(
            matrix=code.matrix,
            requested_width=width,
            requested_height=height,
            quiet_zone=quiet_zone
        ))

        sink = self.sink_factory()
        sink.set_canvas(result.canvas_width, result.canvas_height)
        sink.add_placeholder(width, height)
        sink.fill_rects(result.rects)
        artifact = sink.output()

        self.logger.log(
            "info",
            f"Rendered {code.matrix.width}x{code.matrix.height} code "
            f"(version {code.version}, level {code.error_correction}) "
            f"on {result.canvas_width}x{result.canvas_height} canvas, "
            f"{result.multiple}px per module"
        )
        return artifact
