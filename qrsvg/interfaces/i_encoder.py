"""QR encoder interface (adapter pattern)."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from .i_bit_matrix import BitMatrix


class EncodeHintType(str, Enum):
    """Keys accepted in a hints mapping."""
    ERROR_CORRECTION = "ERROR_CORRECTION"
    MARGIN = "MARGIN"
    QR_VERSION = "QR_VERSION"
    QR_MASK_PATTERN = "QR_MASK_PATTERN"


Hints = dict[EncodeHintType, Any]


@dataclass
class EncodedCode:
    """Result of encoding contents into a QR symbol."""
    contents: str
    error_correction: str
    version: Optional[int]
    matrix: Optional[BitMatrix]


class IEncoder(Protocol):
    """Interface for text-to-matrix encoding."""

    def encode(
        self,
        contents: str,
        error_correction: str = "L",
        hints: Optional[Hints] = None
    ) -> EncodedCode:
        """Encode contents into a module matrix."""
        ...
