"""
Command-line interface for matdot
"""

import argparse
import logging
import sys
from typing import List, Optional

from matdot.csvio import read_matrix, write_matrix
from matdot.errors import DimensionMismatch, InvalidMatrix, ParseError, ShapeError
from matdot.matrix import product
from matdot.models import Matrix
from matdot.render import render_matrix

logger = logging.getLogger(__name__)

USAGE_HINT = """\
I need you to specify -a and -b in order to do anything useful.
Each of these should point to a file that is a csv representation of a Matrix
where one line of the csv is one row of the Matrix.
I will then compute c = a*b and give you c."""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="matdot",
        description="Computes and returns the dot product of two matrices",
    )

    parser.add_argument("-a", help="csv file containing Matrix a", default=None)

    parser.add_argument("-b", help="csv file containing Matrix b", default=None)

    parser.add_argument("--output", "-o", help="output file (Optional)", default=None)

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )

    return parser.parse_args(argv)


def load(path: str) -> Optional[Matrix]:
    """Read one operand. Failures are logged and give None."""
    try:
        return read_matrix(path)
    except FileNotFoundError:
        logger.error("%s does not seem to exist.", path)
    except ParseError as e:
        logger.error("%s: %s", path, e)
        logger.error("Check the format of your Matrix")
    except (ShapeError, InvalidMatrix) as e:
        logger.error("Matrix %s doesn't appear to be valid", path)
        logger.error("%s", e)
    except OSError as e:
        logger.error("Error while processing %s: %s", path, e)
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(getattr(logging, args.log_level))

    if not args.a or not args.b:
        print(USAGE_HINT)
        return 1

    a = load(args.a)
    if a is None:
        return 1
    b = load(args.b)
    if b is None:
        return 1

    try:
        result = product(a, b)
    except DimensionMismatch as e:
        logger.error("The dot product of these matrices is not defined,")
        logger.error("see https://en.wikipedia.org/wiki/Dot_product.")
        logger.debug("%s", e)
        return 1

    if args.output is None:
        print("Matrix a looks like:")
        print(render_matrix(a), end="")
        print("Matrix b looks like:")
        print(render_matrix(b), end="")
        print("Result looks like:")
        print(render_matrix(result), end="")
        return 0

    try:
        write_matrix(result, args.output)
    except OSError as e:
        logger.error("%s", e)
        logger.error("I couldn't write the file because of the above error.")
        print("The result Matrix looks like:")
        print(render_matrix(result), end="")
        return 1

    logger.info("wrote %dx%d result to %s", result.rows, result.cols, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
