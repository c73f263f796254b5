"""Command-line interface for the Pico y Placa predictor.

Usage:
  picoyplaca                       # interactive mode
  picoyplaca ABC-1234 15/03/2024 08:30
  picoyplaca PBX-5678 20-03-2024 17:00 --json

Optional environment variables:
  PICOYPLACA_LOG_LEVEL
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import traceback
from collections.abc import Sequence

from .exceptions import PicoYPlacaError
from .models import PredictionResult
from .predictor import Predictor
from .util import mask_license_plate

_LOGGER = logging.getLogger(__name__)
_RULE_WIDTH = 60
_EXIT_WORDS = frozenset({"exit", "quit"})
_YES_WORDS = frozenset({"y", "yes"})
_ANSI_STYLES = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "cyan": "\x1b[36m",
}
_COLOR_ENABLED = False


def _style(text: str, color: str | None = None, *, bold: bool = False) -> str:
    if not _COLOR_ENABLED or not color:
        return text
    color_code = _ANSI_STYLES.get(color)
    if not color_code:
        return text
    prefix = _ANSI_STYLES["bold"] if bold else ""
    return f"{prefix}{color_code}{text}{_ANSI_STYLES['reset']}"


def _field(label: str, value: object) -> str:
    return f"{label + ':':<16}{value}"


def format_result(result: PredictionResult, *, sanitize: bool = False) -> str:
    plate = mask_license_plate(result.plate_number) if sanitize else result.plate_number
    if result.can_drive:
        status = _style("CAN DRIVE", "green", bold=True)
        detail = "The vehicle is allowed on the road."
    else:
        status = _style("CANNOT DRIVE", "red", bold=True)
        detail = "The vehicle is RESTRICTED by Pico y Placa."
    lines = [
        "=" * _RULE_WIDTH,
        _style("PREDICTION RESULT".center(_RULE_WIDTH), "cyan", bold=True),
        "=" * _RULE_WIDTH,
        _field("License Plate", plate),
        _field("Last Digit", result.last_digit),
        _field("Date", result.date),
        _field("Day", result.day_of_week),
        _field("Time", result.time),
        "-" * _RULE_WIDTH,
        _field("Status", status),
        f"  {detail}",
        "-" * _RULE_WIDTH,
        _field("Reason", result.reason),
        "=" * _RULE_WIDTH,
    ]
    return "\n".join(lines)


def format_error(exc: Exception) -> str:
    lines = [
        "=" * _RULE_WIDTH,
        _style("ERROR".center(_RULE_WIDTH), "red", bold=True),
        "=" * _RULE_WIDTH,
        f"x {exc}",
        "=" * _RULE_WIDTH,
    ]
    return "\n".join(lines)


def _emit_result(result: PredictionResult, args: argparse.Namespace) -> None:
    if args.json:
        data = result.to_dict()
        if args.sanitize_output:
            data["plateNumber"] = mask_license_plate(result.plate_number)
        print(json.dumps(data, indent=2))
        return
    print(format_result(result, sanitize=args.sanitize_output))


def _print_exception(exc: Exception, *, trace: bool) -> None:
    print(format_error(exc), file=sys.stderr)
    if trace:
        traceback.print_exc()


def run_once(predictor: Predictor, args: argparse.Namespace) -> int:
    try:
        result = predictor.predict(args.plate, args.date, args.time)
    except PicoYPlacaError as exc:
        _print_exception(exc, trace=args.traceback)
        return 1
    _emit_result(result, args)
    return 0


def run_interactive(predictor: Predictor, args: argparse.Namespace) -> int:
    print(_style("Pico y Placa Predictor - Interactive Mode", "cyan", bold=True))
    print("Type 'exit' or 'quit' at the plate prompt to leave.\n")
    try:
        while True:
            plate = input("Enter license plate (e.g., ABC-1234): ")
            if plate.strip().lower() in _EXIT_WORDS:
                break
            date_string = input("Enter date (DD/MM/YYYY or DD-MM-YYYY): ")
            time_string = input("Enter time (HH:MM in 24-hour format): ")
            print()
            try:
                result = predictor.predict(plate, date_string, time_string)
            except PicoYPlacaError as exc:
                _print_exception(exc, trace=args.traceback)
            else:
                _emit_result(result, args)
            print()
            answer = input("Check another vehicle? (yes/no): ")
            if answer.strip().lower() not in _YES_WORDS:
                break
            print()
    except EOFError:
        _LOGGER.debug("Interactive input closed")
    print("\nGoodbye!")
    return 0


def _build_parser(predictor: Predictor) -> argparse.ArgumentParser:
    restrictions = "\n".join(f"  {line}" for line in predictor.rule.describe())
    parser = argparse.ArgumentParser(
        prog="picoyplaca",
        description="Predict whether a vehicle may circulate under Quito's Pico y Placa.",
        epilog=(
            "examples:\n"
            "  picoyplaca ABC-1234 15/03/2024 08:30\n"
            "  picoyplaca PBX-5678 20-03-2024 17:00\n\n"
            f"restrictions:\n{restrictions}\n\n"
            "Run without arguments for interactive mode."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("plate", nargs="?", help="License plate (e.g. ABC-1234).")
    parser.add_argument("date", nargs="?", help="Date in DD/MM/YYYY or DD-MM-YYYY format.")
    parser.add_argument("time", nargs="?", help="Time in HH:MM 24-hour format.")
    parser.add_argument(
        "--json",
        dest="json",
        action="store_true",
        help="Print the prediction result as JSON.",
    )
    parser.add_argument(
        "--color",
        dest="color",
        choices=("auto", "always", "never"),
        default="auto",
        help="Colorize output (default: auto).",
    )
    parser.add_argument(
        "--sanitize-output",
        dest="sanitize_output",
        action="store_true",
        help="Mask license plates in printed output.",
    )
    parser.add_argument(
        "--traceback",
        dest="traceback",
        action="store_true",
        help="Print full tracebacks on errors.",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=os.getenv("PICOYPLACA_LOG_LEVEL", "WARNING"),
        help="Python log level (default: WARNING or PICOYPLACA_LOG_LEVEL).",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, predictor: Predictor | None = None) -> int:
    predictor = predictor or Predictor()
    parser = _build_parser(predictor)
    args = parser.parse_args(argv)

    log_level = args.log_level.upper()
    if args.debug:
        log_level = "DEBUG"
    logging.basicConfig(level=log_level)

    global _COLOR_ENABLED
    if args.color == "always":
        _COLOR_ENABLED = True
    elif args.color == "never":
        _COLOR_ENABLED = False
    else:
        _COLOR_ENABLED = sys.stdout.isatty() and not args.json

    positionals = [args.plate, args.date, args.time]
    if all(value is None for value in positionals):
        return run_interactive(predictor, args)
    if any(value is None for value in positionals):
        parser.error("plate, date and time must be given together.")
    return run_once(predictor, args)


def run() -> None:
    raise SystemExit(main())
