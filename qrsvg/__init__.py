"""Render QR codes as integer-scaled vector, raster or text images."""

from .errors import CodeWriterError, InvalidArgumentError, InvalidStateError
from .interfaces import BitMatrix, EncodeHintType, Rect
from .layout import LayoutRequest, LayoutResult, layout
from .writer import CodeWriter

__all__ = [
    'BitMatrix',
    'CodeWriter',
    'CodeWriterError',
    'EncodeHintType',
    'InvalidArgumentError',
    'InvalidStateError',
    'LayoutRequest',
    'LayoutResult',
    'Rect',
    'layout',
]
