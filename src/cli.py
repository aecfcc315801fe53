"""Command-line runner: total minimum presses over a file of machines.

    python -m src.cli input.txt
    python -m src.cli machines.json --format json --regime counting

Exit codes: 0 success, 1 unsolvable machine or exhausted search budget,
2 unreadable input.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import jsonschema

from src.core.domain.machine import Machine, Regime
from src.core.math.exceptions import NoSolutionError, SearchBudgetExceeded
from src.parsing.json_loader import read_machines_json
from src.parsing.notation import MachineParseError, parse_machines
from src.solver.aggregator import FailurePolicy, solve_batch
from src.solver.config import FREE_VARIABLE_SEARCH_CAP, SolverConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minimum button presses for indicator lights and joltage counters."
    )
    parser.add_argument("input", type=Path, help="Machine descriptions")
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument(
        "--regime", choices=("binary", "counting", "both"), default="both"
    )
    parser.add_argument(
        "--skip-failures",
        action="store_true",
        help="Record unsolvable machines and keep going instead of halting",
    )
    parser.add_argument("--max-search-leaves", type=int, default=None)
    parser.add_argument(
        "--free-variable-cap", type=int, default=FREE_VARIABLE_SEARCH_CAP
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser


def _load(path: Path, fmt: str) -> list[Machine]:
    if fmt == "json":
        return read_machines_json(path)
    return parse_machines(path.read_text(encoding="utf-8"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        machines = _load(args.input, args.format)
    except (OSError, MachineParseError, jsonschema.ValidationError, TypeError, ValueError) as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    try:
        config = SolverConfig(
            free_variable_search_cap=args.free_variable_cap,
            max_search_leaves=args.max_search_leaves,
        )
    except ValueError as e:
        parser.error(str(e))
    policy = FailurePolicy.SKIP if args.skip_failures else FailurePolicy.HALT
    regimes = [Regime.BINARY, Regime.COUNTING] if args.regime == "both" else [Regime(args.regime)]

    for regime in regimes:
        if regime == Regime.COUNTING and not any(m.has_joltage for m in machines):
            logger.info("no joltage requirements in input, counting regime skipped")
            continue
        try:
            report = solve_batch(machines, regime, config, policy)
        except (NoSolutionError, SearchBudgetExceeded) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(f"{regime.value}: {report.total}")
        for position, message in report.failures:
            print(f"  machine {position + 1} skipped: {message}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
