"""Adapter implementations for the code writer."""

from .qr_code_adapter import QRCodeAdapter
from .svg_adapter import SvgAdapter
from .raster_adapter import RasterAdapter
from .terminal_adapter import TerminalAdapter
from .stream_log_adapter import StreamLogAdapter

# Table-driven dispatch (suckless pattern)
RENDER_SINKS = {
    'svg': SvgAdapter,
    'png': RasterAdapter,
    'text': TerminalAdapter,
}

__all__ = [
    'RENDER_SINKS',
    'QRCodeAdapter',
    'SvgAdapter',
    'RasterAdapter',
    'TerminalAdapter',
    'StreamLogAdapter',
]
