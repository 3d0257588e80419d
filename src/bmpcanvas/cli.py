"""Command-line entry point for inspecting, creating and converting bitmaps.

Usage:
    bmpcanvas info image.bmp
    bmpcanvas new 64 32 out.bmp --color 1 0.5 0
    bmpcanvas convert image.bmp image.png --gamma

Exit codes:
    0 -- success
    1 -- unsupported or oversized file, or an OS error
    2 -- bad command-line usage
"""

from __future__ import annotations

import argparse
import json
import sys

import structlog

from bmpcanvas.errors import CanvasError
from bmpcanvas.log_config import configure_logging
from bmpcanvas.models.canvas import Canvas
from bmpcanvas.services import codec, file_io, pil_bridge

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_info(args: argparse.Namespace) -> int:
    data = file_io.read_bytes(args.file)
    canvas = codec.decode(data)
    print(
        json.dumps(
            {
                "file": args.file,
                "width": canvas.width,
                "height": canvas.height,
                "file_size": len(data),
                "row_padding": codec.row_padding(canvas.width),
                "pixel_data_size": codec.pixel_data_size(canvas.width, canvas.height),
            }
        )
    )
    return 0


def cmd_new(args: argparse.Namespace) -> int:
    r, g, b = args.color
    canvas = Canvas.new(args.width, args.height, r, g, b, gamma=args.gamma)
    codec.save(canvas, args.out)
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    canvas = codec.load(args.src, gamma=args.gamma)
    # --gamma expands the stored values and writes them out as linear light.
    file_io.write_bytes(args.dst, pil_bridge.to_png_bytes(canvas, gamma=False))
    log.info("canvas_converted", src=args.src, dst=args.dst, gamma=args.gamma)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bmpcanvas", description="Inspect, create and convert 24-bit bitmaps."
    )
    sub = ap.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="print header details as JSON")
    info.add_argument("file", help="bitmap to inspect")
    info.set_defaults(func=cmd_info)

    new = sub.add_parser("new", help="write a solid-colour bitmap")
    new.add_argument("width", type=int)
    new.add_argument("height", type=int)
    new.add_argument("out", help="output .bmp path")
    new.add_argument(
        "--color",
        nargs=3,
        type=float,
        default=(0.0, 0.0, 0.0),
        metavar=("R", "G", "B"),
        help="normalised colour components (default: black)",
    )
    new.add_argument("--gamma", action="store_true", help="gamma-correct on save")
    new.set_defaults(func=cmd_new)

    convert = sub.add_parser("convert", help="convert a bitmap to PNG")
    convert.add_argument("src", help="input .bmp path")
    convert.add_argument("dst", help="output .png path")
    convert.add_argument(
        "--gamma",
        action="store_true",
        help="gamma-expand on decode and write linear values",
    )
    convert.set_defaults(func=cmd_convert)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        return args.func(args)
    except (CanvasError, OSError) as e:
        log.error("command_failed", command=args.command, error=str(e))
        print(f"bmpcanvas: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
