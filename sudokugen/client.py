"""
Command line client: create full grids and riddles, or solve a grid.

Grid input for solving is one row of nine characters per line, where
'0', '_', '?' or '.' mark an unset cell, e.g.::

    53__7____
    6__195___
    _98____6_
    8___6___3
    4__8_3__1
    7___2___6
    _6____28_
    ___419__5
    ____8__79
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from cardinal_pythonlib.argparse_func import (
    RawDescriptionArgumentDefaultsHelpFormatter,
    positive_int,
)
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from sudokugen.creator import Creator
from sudokugen.exceptions import SudokuError
from sudokugen.game_matrix import GameMatrix, parse_text
from sudokugen.output import FORMATTERS, GameMatrixFormatter
from sudokugen.solver import Solver

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

OP_FULL = "full"
OP_RIDDLE = "riddle"
OP_BOTH = "both"
OP_SOLVE = "solve"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokugen",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=__doc__,
    )
    parser.add_argument(
        "-e", "--exec", dest="op", default=OP_FULL,
        choices=[OP_FULL, OP_RIDDLE, OP_BOTH, OP_SOLVE],
        help="The operation to perform")
    parser.add_argument(
        "-n", "--count", type=positive_int, default=1,
        help="The number of grids to create")
    parser.add_argument(
        "-f", "--format", default="plain", choices=sorted(FORMATTERS),
        help="The output format to use")
    parser.add_argument(
        "-i", "--input", type=str, default=None,
        help="Grid file to solve ('-' for stdin)")
    parser.add_argument(
        "-m", "--max-solutions", type=positive_int, default=2,
        help="The maximum number of solutions to print when solving")
    parser.add_argument(
        "-s", "--seed", type=int, default=None,
        help="Random seed for reproducible grids")
    parser.add_argument(
        "-t", "--time", action="store_true",
        help="Show timing information")
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="No grid output")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Be verbose")
    return parser


def read_input(filename: str) -> GameMatrix:
    if filename == "-":
        log.info("Reading grid from stdin")
        return parse_text(sys.stdin.read())
    log.info(f"Reading {filename}")
    with open(filename, "rt") as f:
        return parse_text(f.read())


def solve(args: argparse.Namespace) -> List[GameMatrix]:
    matrix = read_input(args.input)
    solutions = Solver(max_solutions=args.max_solutions).solve(matrix)
    log.info(f"Found {len(solutions)} solution(s)")
    return solutions


def create(args: argparse.Namespace, creator: Creator) -> List[GameMatrix]:
    """Returns the grids to print for one iteration of a create op."""
    full = creator.create_full()
    if args.op == OP_FULL:
        return [full]
    riddle = creator.create_riddle(full)
    if args.op == OP_RIDDLE:
        return [riddle]
    return [riddle, full]


def run(args: argparse.Namespace) -> int:
    formatter: GameMatrixFormatter = FORMATTERS[args.format]()
    start = time.perf_counter()

    if args.op == OP_SOLVE:
        iterations = 1
        grids = solve(args)
        if not grids:
            log.error("Unable to solve!")
            return EXIT_FAILURE
    else:
        iterations = args.count
        creator = Creator(seed=args.seed)
        log.debug(f"Using seed {creator.seed}")
        grids = []
        for _ in range(iterations):
            grids.extend(create(args, creator))

    end = time.perf_counter()
    if not args.quiet:
        sys.stdout.write(formatter.format_all(grids))

    if args.time:
        elapsed_ms = (end - start) * 1000
        print(f"Took total of {elapsed_ms:.0f}ms", file=sys.stderr)
        print(f"Each iteration took {elapsed_ms / iterations:.0f}ms",
              file=sys.stderr)
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if args.op == OP_SOLVE and args.input is None:
        parser.error("Expecting --input for solve")

    try:
        return run(args)
    except (SudokuError, OSError) as e:
        log.error(str(e))
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
