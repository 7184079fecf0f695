"""
CLI entry point for hfwidth.
"""

import argparse
import json
import sys
from typing import Callable, Dict, List, Optional

from .config import WidthSettings, load_settings
from .exceptions import WidthError
from .schema import CharConversion
from .text import analyze_char_widths, convert_to_fullwidth, convert_to_halfwidth, convert_to_standard_width
from .utils.logging import log_command_event, setup_logger

CONVERTERS: Dict[str, Callable[[str], str]] = {
    "half": convert_to_halfwidth,
    "full": convert_to_fullwidth,
    "standard": convert_to_standard_width,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hfwidth", description="Convert characters to and from the Unicode Halfwidth and Fullwidth Forms"
    )

    parser.add_argument(
        "command",
        choices=["inspect", "analyze", *CONVERTERS],
        help="inspect: every width form of each character; analyze: width summary; "
        "half/full/standard: convert the text",
    )

    parser.add_argument("text", help="Text to process")

    parser.add_argument(
        "--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level"
    )

    parser.add_argument("--json-logs", action="store_true", default=None, help="Output logs in JSON format")

    return parser


def run_command(command: str, text: str, settings: WidthSettings) -> None:
    """Run one command and print its result to stdout."""
    if command in CONVERTERS:
        print(CONVERTERS[command](text))
    elif command == "inspect":
        for char in text:
            conversion = CharConversion.from_char(char)
            print(json.dumps(conversion.model_dump(), ensure_ascii=settings.ensure_ascii))
    elif command == "analyze":
        analysis = analyze_char_widths(text)
        print(json.dumps(analysis.model_dump(), ensure_ascii=settings.ensure_ascii))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(log_level=args.log_level, json_logs=args.json_logs)
    except WidthError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    logger = setup_logger("hfwidth.cli", settings.log_level, settings.json_logs)
    log_command_event(logger, "command_started", args.command, length=len(args.text))

    try:
        run_command(args.command, args.text, settings)
    except WidthError as e:
        log_command_event(logger, "command_failed", args.command, error_type=type(e).__name__, error_message=str(e))
        return 1

    log_command_event(logger, "command_completed", args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
