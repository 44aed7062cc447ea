"""Module matrix interface (adapter pattern)."""

from dataclasses import dataclass
from typing import Iterable, Protocol

from ..errors import InvalidArgumentError


class IBitMatrix(Protocol):
    """Interface for a read-only grid of QR modules."""

    width: int
    height: int

    def get(self, x: int, y: int) -> bool:
        """Return True when the module at (x, y) is set."""
        ...


@dataclass(frozen=True)
class BitMatrix:
    """Immutable module grid, stored row-major."""
    width: int
    height: int
    bits: tuple[tuple[bool, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable]) -> "BitMatrix":
        """Build a matrix from row data, truthy cells are set."""
        bits = tuple(tuple(bool(cell) for cell in row) for row in rows)
        width = len(bits[0]) if bits else 0

        for y, row in enumerate(bits):
            if len(row) != width:
                raise InvalidArgumentError(
                    f"Row {y} has {len(row)} modules, expected {width}"
                )

        return cls(width=width, height=len(bits), bits=bits)

    def get(self, x: int, y: int) -> bool:
        """Return True when the module at (x, y) is set."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Module ({x}, {y}) outside {self.width}x{self.height} matrix"
            )
        return self.bits[y][x]
