"""
Layout engine: fits a module matrix onto a pixel canvas.

Every module is scaled by the same integer multiple in both axes, and the
scaled code is centered on a canvas that is never smaller than the code
plus its quiet zone. Only set modules produce rectangles.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .errors import InvalidArgumentError
from .interfaces import IBitMatrix, Rect


@dataclass(frozen=True)
class LayoutRequest:
    """Inputs for a single layout call."""
    matrix: Optional[IBitMatrix]
    requested_width: int
    requested_height: int
    quiet_zone: int


@dataclass(frozen=True)
class LayoutResult:
    """Canvas size plus the rectangles to fill, in row-major order."""
    canvas_width: int
    canvas_height: int
    multiple: int
    left_padding: int
    top_padding: int
    rects: Iterator[Rect] = field(compare=False, repr=False)


def _validate(request: LayoutRequest) -> None:
    """Reject requests that cannot be laid out (early return pattern)."""
    if request.matrix is None:
        raise InvalidArgumentError("No module matrix to lay out")

    if request.requested_width < 0 or request.requested_height < 0:
        raise InvalidArgumentError(
            "Requested dimensions are too small: "
            f"{request.requested_width}x{request.requested_height}"
        )

    if request.quiet_zone < 0:
        raise InvalidArgumentError(
            f"Quiet zone must not be negative: {request.quiet_zone}"
        )


def _scan(
    matrix: IBitMatrix, multiple: int, left_padding: int, top_padding: int
) -> Iterator[Rect]:
    """Yield one square per set module, top-to-bottom, left-to-right."""
    output_y = top_padding
    for input_y in range(matrix.height):
        output_x = left_padding
        for input_x in range(matrix.width):
            if matrix.get(input_x, input_y):
                yield Rect(output_x, output_y, multiple, multiple)
            output_x += multiple
        output_y += multiple


def layout(request: LayoutRequest) -> LayoutResult:
    """Compute scale, padding and filled rectangles for a matrix."""
    _validate(request)

    matrix = request.matrix
    input_width = matrix.width
    input_height = matrix.height
    qr_width = input_width + (request.quiet_zone * 2)
    qr_height = input_height + (request.quiet_zone * 2)

    if qr_width == 0 or qr_height == 0:
        raise InvalidArgumentError(
            f"Cannot lay out an empty {input_width}x{input_height} matrix "
            "without a quiet zone"
        )

    output_width = max(request.requested_width, qr_width)
    output_height = max(request.requested_height, qr_height)

    multiple = min(output_width // qr_width, output_height // qr_height)

    # Padding covers the quiet zone and whatever the requested size adds
    # beyond it. A 25x25 input is 33x33 with the quiet zone; asked for
    # 200x160 the multiple is 4, so the 100x100 code sits in 200x160.
    left_padding = (output_width - (input_width * multiple)) // 2
    top_padding = (output_height - (input_height * multiple)) // 2

    return LayoutResult(
        canvas_width=output_width,
        canvas_height=output_height,
        multiple=multiple,
        left_padding=left_padding,
        top_padding=top_padding,
        rects=_scan(matrix, multiple, left_padding, top_padding),
    )
