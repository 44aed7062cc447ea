"""QR code encoder adapter."""

from typing import Optional

import qrcode
from qrcode.exceptions import DataOverflowError

from .. import config
from ..errors import InvalidArgumentError
from ..interfaces import BitMatrix, EncodedCode, EncodeHintType, Hints

ERROR_CORRECTION_LEVELS = {
    'L': qrcode.constants.ERROR_CORRECT_L,
    'M': qrcode.constants.ERROR_CORRECT_M,
    'Q': qrcode.constants.ERROR_CORRECT_Q,
    'H': qrcode.constants.ERROR_CORRECT_H,
}


class QRCodeAdapter:
    """Adapter for QR code encoding via the qrcode library."""

    def _level(self, error_correction: str) -> int:
        """Map a correction token such as 'M' to a qrcode constant."""
        level = ERROR_CORRECTION_LEVELS.get(str(error_correction).upper())
        if level is None:
            raise InvalidArgumentError(
                f"Unknown error correction level: {error_correction!r}"
            )
        return level

    def _int_hint(
        self,
        hints: Optional[Hints],
        key: EncodeHintType,
        low: int,
        high: int,
        label: str
    ) -> Optional[int]:
        """Read a bounded integer hint, None when absent."""
        if not hints or hints.get(key) is None:
            return None

        raw = hints[key]
        try:
            value = int(str(raw), 10)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid {label}: {raw!r}") from e

        if not low <= value <= high:
            raise InvalidArgumentError(
                f"{label} must be {low} to {high}, got {value}"
            )
        return value

    def encode(
        self,
        contents: str,
        error_correction: str = config.ERROR_CORRECTION,
        hints: Optional[Hints] = None
    ) -> EncodedCode:
        """Encode contents into a borderless module matrix."""
        level = self._level(error_correction)
        version = self._int_hint(
            hints, EncodeHintType.QR_VERSION, 1, 40, "QR version"
        )
        mask_pattern = self._int_hint(
            hints, EncodeHintType.QR_MASK_PATTERN, 0, 7, "QR mask pattern"
        )

        # Quiet zone belongs to the layout engine
        qr = qrcode.QRCode(
            version=version,
            error_correction=level,
            border=0,
            mask_pattern=mask_pattern
        )
        qr.add_data(contents)

        try:
            qr.make(fit=version is None)
        except DataOverflowError as e:
            raise InvalidArgumentError(
                f"Contents too long for QR version {version or 40}"
            ) from e

        return EncodedCode(
            contents=contents,
            error_correction=str(error_correction).upper(),
            version=qr.version,
            matrix=BitMatrix.from_rows(qr.get_matrix()),
        )
