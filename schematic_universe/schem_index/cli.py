"""
Command line front-end: analyze one schematic file.

Usage:
    schematic-analyze PATH [--tokenizer regex|scan] [--gear-marker C]
                      [--filler C] [--mask] [--json]
                      [--log-level LEVEL] [--log-file FILE]

PATH may be '-' to read stdin. Any ParseError is reported verbatim on
stderr with exit status 1.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from schem_core.config import SchematicConfig
from schem_core.errors import ParseError
from schem_core.tokenizer import TOKENIZERS, get_tokenizer

from .render import part_mask, render_mask
from .schematic import build

LOGGER_NAMES = ("schem_core", "schem_index")


def build_handlers(level=logging.INFO, log_file: Optional[Path] = None) -> list[logging.Handler]:
    """
    Console handler on stderr plus, optionally, one file handler.

    The same handler objects are meant to be shared by every configured
    logger, so a log file is opened exactly once.
    """
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    return handlers


def setup_logger(name: str, level=logging.INFO, log_file: Optional[Path] = None,
                 handlers: Optional[list[logging.Handler]] = None) -> logging.Logger:
    """
    Setup logger writing to stderr and, optionally, a log file.

    Args:
        name: Logger name
        level: Logging level
        log_file: Optional path to log file (ignored when handlers are given)
        handlers: Pre-built handlers to attach, shared between loggers

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Close and clear any existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    if handlers is None:
        handlers = build_handlers(level, log_file)
    for handler in handlers:
        logger.addHandler(handler)

    return logger


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schematic-analyze",
        description="Sum part numbers and gear powers of an engineering schematic",
    )
    parser.add_argument("path", help="Schematic text file, or '-' for stdin")
    parser.add_argument(
        "--tokenizer",
        default="regex",
        choices=sorted(TOKENIZERS),
        help="Tokenizer strategy (default: regex)",
    )
    parser.add_argument("--gear-marker", default="*", help="Gear symbol character (default: *)")
    parser.add_argument("--filler", default=".", help="Filler character (default: .)")
    parser.add_argument("--mask", action="store_true", help="Print the part-number cell mask")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = getattr(logging, args.log_level)
    handlers = build_handlers(level, args.log_file)
    for name in LOGGER_NAMES:
        setup_logger(name, level, handlers=handlers)
    logger = logging.getLogger(__name__)

    try:
        config = SchematicConfig(gear_marker=args.gear_marker, filler=args.filler)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        text = _read_input(args.path)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        schematic = build(text, get_tokenizer(args.tokenizer, config), config)
    except ParseError as e:
        logger.info("build failed for %s", args.path)
        print(f"error: {e}", file=sys.stderr)
        return 1

    part_sum = schematic.part_number_sum()
    gears = schematic.gear_powers()
    gear_sum = sum(power for _, power in gears)
    logger.info("%s: %d numbers, %d symbols, %d gears",
                args.path, len(schematic.numbers), len(schematic.symbols), len(gears))

    if args.json:
        print(json.dumps({
            "part_number_sum": part_sum,
            "gear_power_sum": gear_sum,
            "gear_count": len(gears),
            "number_count": len(schematic.numbers),
            "symbol_count": len(schematic.symbols),
        }, indent=2))
    else:
        print(f"Part number sum: {part_sum}")
        print(f"Gear power sum: {gear_sum}")

    if args.mask:
        print(render_mask(part_mask(schematic)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
