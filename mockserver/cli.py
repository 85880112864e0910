"""Command line interface for json-mock-server."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__, create_app
from .config import Config, DevConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-mock-server",
        description="Serve the collections of a JSON file as a REST API.",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=Config.PORT,
        help=f"The listening port (default: {Config.PORT})",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=Config.DATA_FILE,
        help=f"The JSON file to load (default: {Config.DATA_FILE})",
    )
    parser.add_argument("--host", default=Config.HOST, help="Interface to bind to")
    parser.add_argument("--debug", action="store_true", help="Run Flask in debug mode")
    parser.add_argument("-v", "--version", action="store_true", help="Display the current version")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if not args.file.is_file():
        print("No data file found. Exiting.", file=sys.stderr)
        return 1

    base = DevConfig if args.debug else Config
    config_class = type("CliConfig", (base,), {"DATA_FILE": args.file, "HOST": args.host, "PORT": args.port})
    app = create_app(config_class)
    app.logger.info("Serving %s on %s:%d", args.file, args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
