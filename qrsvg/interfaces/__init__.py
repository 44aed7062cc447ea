"""Interface definitions for code writer adapters."""

from .i_bit_matrix import IBitMatrix, BitMatrix
from .i_encoder import IEncoder, EncodedCode, EncodeHintType, Hints
from .i_render_sink import IRenderSink, Rect
from .i_log_sink import ILogSink, LOG_LEVELS

__all__ = [
    'IBitMatrix',
    'BitMatrix',
    'IEncoder',
    'EncodedCode',
    'EncodeHintType',
    'Hints',
    'IRenderSink',
    'Rect',
    'ILogSink',
    'LOG_LEVELS',
]
