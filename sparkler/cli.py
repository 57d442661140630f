"""Command-line entry point: render text into a sparkling GIF file."""

from __future__ import annotations

import argparse
import sys

from .encode import save_gif
from .errors import SparklerError
from .logging_config import configure_logging
from .pipeline import render


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("sparkler", description="Render text as a sparkling animated GIF.")
    parser.add_argument("text", help="Text to render")
    parser.add_argument("-o", "--output", default="output.gif", help="Output GIF path (default: output.gif)")
    parser.add_argument("--log-level", help="Override SPARKLER_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_cli().parse_args(argv)
    configure_logging(args.log_level)

    try:
        print("generating animation...")
        frames = render(args.text)
        print("rendering gif...")
        save_gif(frames, args.output)
    except (SparklerError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("done!")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
