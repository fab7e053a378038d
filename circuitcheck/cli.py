"""Command-line checker for schematic JSON files."""

from __future__ import annotations

import argparse
import logging

from circuitcheck.config import get_settings
from circuitcheck.errors import InvalidSchematic, SearchBudgetExceeded
from circuitcheck.services.loader import load_schematic
from circuitcheck.topology.engine import analyze_circuit

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID_CIRCUIT = 1
EXIT_ERROR = 2


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circuitcheck",
        description="Check that a grid schematic forms a closed, non-shorted circuit.",
    )
    parser.add_argument("schematic", help="Path to a {elements, wires} JSON file.")
    parser.add_argument(
        "--lang",
        default=None,
        help="Language of the feedback text (fr, en, ar). Defaults to settings.",
    )
    parser.add_argument(
        "--max-steps",
        type=_positive_int,
        default=None,
        help="Loop search budget. Defaults to settings.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full analysis result as JSON.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        schematic = load_schematic(args.schematic)
        result = analyze_circuit(
            schematic, language=args.lang, max_search_steps=args.max_steps
        )
    except OSError as e:
        logger.error("Cannot read %s: %s", args.schematic, e)
        return EXIT_ERROR
    except (InvalidSchematic, SearchBudgetExceeded) as e:
        logger.error("%s", e)
        return EXIT_ERROR

    if args.json:
        print(result.model_dump_json(indent=2))
    elif result.valid:
        print("OK")
    else:
        print(f"FAIL: {result.reason}")

    return EXIT_VALID if result.valid else EXIT_INVALID_CIRCUIT


if __name__ == "__main__":
    raise SystemExit(main())
