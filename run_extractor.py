#!/usr/bin/env python3
# run_extractor.py
# This file is part of PCEx - Presence Condition Extraction
#
# Command-line interface for converting and grouping presence conditions

import sys
import argparse
from pathlib import Path
from typing import Optional

from convert import Grouping
from core import DEFAULT_GROUPING, PCExtractor
from model import CNF, Expressions
from utils.dimacs_reader import DimacsFormatError, read_dimacs
from utils.logger import configure_logging, get_logger


def load_feature_model(filepath: Optional[Path]) -> Optional[CNF]:
    """Load the feature model if one was given.

    Args:
        filepath: Path to a DIMACS file, or None

    Returns:
        Feature model formula, or None to number the discovered names

    Raises:
        DimacsFormatError: If the file is missing or malformed
    """
    if filepath is None:
        return None
    return read_dimacs(filepath)


def print_summary(expressions: Expressions) -> None:
    """Print a short overview of the grouped expressions.

    Args:
        expressions: Result of the grouping stage
    """
    logger = get_logger()

    sizes = [len(group) for group in expressions.groups]
    logger.info(f"📊 Variables: {len(expressions.formula.variables)}")
    logger.info(f"📋 Groups: {len(sizes)}, expressions: {sum(sizes)}")
    if sizes:
        logger.info(f"   Largest group: {max(sizes)} expressions")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="PCEx presence condition converter and grouper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_extractor.py -e out/extract/busybox -o out
  python run_extractor.py -e out/extract/busybox -o out -m busybox.dimacs -g file
  python run_extractor.py -e out/extract/busybox -o out --no-save --debug

.pc file format:
  line 1:   path of the source file relative to the system
  line 2..: presence condition of each source line (empty = unconditional)
        """,
    )

    parser.add_argument(
        "-e",
        "--extract-dir",
        required=True,
        type=Path,
        help="Directory holding the .pc files of one system",
    )

    parser.add_argument(
        "-o", "--output", required=True, type=Path, help="Output directory for artifacts"
    )

    parser.add_argument(
        "-n", "--name", help="System name (default: name of the extract directory)"
    )

    parser.add_argument(
        "-m", "--model", type=Path, help="Feature model in DIMACS format"
    )

    parser.add_argument(
        "-g",
        "--grouping",
        choices=[grouping.value for grouping in Grouping],
        default=DEFAULT_GROUPING.value,
        help="Grouping strategy (default: %(default)s)",
    )

    parser.add_argument(
        "--no-save", action="store_true", help="Do not write any artifacts"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the extraction tool.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        fm_formula = load_feature_model(args.model)
        if fm_formula is not None:
            logger.info(f"📋 Feature model loaded: {fm_formula}")

        extractor = PCExtractor(
            args.output,
            grouping=Grouping(args.grouping),
            save_results=not args.no_save,
        )
        system_name = args.name or args.extract_dir.resolve().name

        expressions = extractor.run(fm_formula, system_name, args.extract_dir)
        if expressions is None:
            logger.warning("⚠️  Nothing to do")
            return 1

        print_summary(expressions)
        return 0

    except DimacsFormatError as e:
        logger.error(f"Feature model error: {e}")
        return 2

    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Extraction interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
