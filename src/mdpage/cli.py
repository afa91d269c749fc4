"""Command-line interface: convert Markdown files to HTML pages.

Usage:
    mdpage notes.md
    mdpage --input notes.md --output site/
    mdpage a.md b.md c.md --jobs 4 --config config.json

The output directory is ``--output``, else ``custom.outputDir`` from the
config file, else ``output``. Without ``--config``, ``./config.json`` is read
when it exists.
"""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mdpage import Converter, __version__
from mdpage.config import AppConfig, load_config
from mdpage.errors import MdpageError
from mdpage.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG = "config.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdpage",
        description="Convert Markdown files to standalone HTML pages",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Markdown files to convert")
    parser.add_argument("-i", "--input", action="append", default=[], help="Markdown file to convert")
    parser.add_argument("-o", "--output", help="Output directory")
    parser.add_argument("-c", "--config", help=f"JSON config file (default: ./{DEFAULT_CONFIG})")
    parser.add_argument("-j", "--jobs", type=int, default=1, help="Files converted in parallel")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(config_path: str | None) -> AppConfig:
    """Load the config named on the command line, or ./config.json if present."""
    if config_path is not None:
        return load_config(config_path)

    default = Path(DEFAULT_CONFIG)
    if default.is_file():
        return load_config(default)

    logger.debug("No %s found, using defaults", DEFAULT_CONFIG)
    return AppConfig()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    inputs = [*args.input, *args.files]
    if not inputs:
        parser.error("no input files")
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    try:
        app_config = resolve_config(args.config)
    except MdpageError as e:
        logger.error("%s", e)
        return 1

    output_dir = Path(args.output or app_config.output_dir)
    converter = Converter(app_config.render)

    def convert_one(path: str) -> Path | None:
        try:
            return converter.convert_file(path, output_dir)
        except MdpageError as e:
            logger.error("%s", e)
            return None

    with ThreadPoolExecutor(max_workers=args.jobs) as executor:
        results = list(executor.map(convert_one, inputs))

    for source, written in zip(inputs, results):
        if written is not None:
            logger.info("Converted %s", source)
            print(written)

    failures = sum(1 for written in results if written is None)
    if failures:
        logger.error("%d of %d file(s) failed", failures, len(inputs))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
