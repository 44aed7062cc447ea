"""QR code writer - command line entry point."""

import argparse
import os
import sys
from typing import Optional, Sequence

from . import config
from .adapters import QRCodeAdapter, RENDER_SINKS, StreamLogAdapter
from .errors import CodeWriterError
from .interfaces import EncodeHintType
from .writer import CodeWriter


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(
        prog="qrsvg",
        description="Render text as a QR code scaled to a canvas."
    )
    parser.add_argument("contents", help="text to encode")
    parser.add_argument(
        "-W", "--width", type=int, default=0,
        help="requested canvas width in pixels (0 = smallest fit)"
    )
    parser.add_argument(
        "-H", "--height", type=int, default=0,
        help="requested canvas height in pixels (0 = smallest fit)"
    )
    parser.add_argument(
        "-m", "--margin", type=int, default=None,
        help=f"quiet zone in modules (default {config.QUIET_ZONE_SIZE})"
    )
    parser.add_argument(
        "-e", "--error-correction", default=None, type=str.upper,
        choices=["L", "M", "Q", "H"],
        help=f"error correction level (default {config.ERROR_CORRECTION})"
    )
    parser.add_argument(
        "--qr-version", type=int, default=None,
        help="pin the QR symbol version (1-40)"
    )
    parser.add_argument(
        "--mask-pattern", type=int, default=None,
        help="pin the QR mask pattern (0-7)"
    )
    parser.add_argument(
        "-f", "--format", default="svg", choices=sorted(RENDER_SINKS),
        help="output format"
    )
    parser.add_argument(
        "-o", "--output", default="-",
        help="output file, '-' for stdout"
    )
    return parser


def _hints(args: argparse.Namespace) -> dict:
    """Translate options into encode hints, skipping unset ones."""
    hints = {
        EncodeHintType.MARGIN: args.margin,
        EncodeHintType.ERROR_CORRECTION: args.error_correction,
        EncodeHintType.QR_VERSION: args.qr_version,
        EncodeHintType.QR_MASK_PATTERN: args.mask_pattern,
    }
    return {key: value for key, value in hints.items() if value is not None}


def _write_output(path: str, artifact) -> None:
    """Write the artifact to a file, or stdout for '-'."""
    if path == "-":
        if isinstance(artifact, bytes):
            sys.stdout.buffer.write(artifact)
            sys.stdout.buffer.flush()
        else:
            sys.stdout.flush()
            sys.stdout.buffer.write((artifact + "\n").encode("utf-8"))
            sys.stdout.buffer.flush()
        return

    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        raise FileNotFoundError(
            f"Could not find a container directory for '{path}'."
        )

    if isinstance(artifact, bytes):
        with open(path, "wb") as f:
            f.write(artifact)
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(artifact)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render a QR code and return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        # Logs go to stderr when stdout carries the image
        logger = StreamLogAdapter(
            stream=sys.stderr if args.output == "-" else None,
            min_level=config.LOG_LEVEL
        )
        writer = CodeWriter(
            encoder=QRCodeAdapter(),
            sink_factory=RENDER_SINKS[args.format],
            logger=logger,
            quiet_zone=config.QUIET_ZONE_SIZE,
            error_correction=config.ERROR_CORRECTION
        )
        artifact = writer.write(
            args.contents, args.width, args.height, _hints(args)
        )
        _write_output(args.output, artifact)
    except (CodeWriterError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.output != "-":
        logger.log("info", f"Wrote {args.format} to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
