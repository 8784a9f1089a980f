#!/usr/bin/env python3
"""Lowest location reachable from an almanac's seeds.

Usage:
    python3 scripts/lowest_location.py input.txt
    python3 scripts/lowest_location.py input.txt --mode values
    python3 scripts/lowest_location.py input.txt --stop-label humidity --json
    python3 scripts/lowest_location.py input.txt --config solver.json --report-out out/report.json

Structured JSON output goes to stdout with --json; human messages go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rangechain.almanac import load_almanac
from rangechain.config import SOLVE_MODES, SolverConfig, load_config
from rangechain.errors import RangeChainError
from rangechain.io_utils import dump_json, save_json
from rangechain.solve import solve_almanac

log = logging.getLogger("lowest_location")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lowest location for almanac seeds")
    parser.add_argument("path", type=Path, help="Almanac text file")
    parser.add_argument(
        "--mode", choices=sorted(SOLVE_MODES), default=None,
        help="Treat seeds as (start, length) ranges or individual values (default: ranges)",
    )
    parser.add_argument(
        "--stop-label", default=None,
        help="Stage label to stop at (default: last stage)",
    )
    parser.add_argument(
        "--passthrough", action="store_true", default=None,
        help="Map values covered by no rule onto themselves",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON solver config")
    parser.add_argument("--report-out", type=Path, default=None)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config) if args.config else SolverConfig()
        config = config.merged(
            mode=args.mode,
            stop_label=args.stop_label,
            passthrough=args.passthrough,
        )
        almanac = load_almanac(args.path)
        log.info(
            "Loaded %d seed value(s) and %d stage(s) from %s",
            len(almanac.seeds), len(almanac.chain.stages), args.path,
        )
        report = solve_almanac(almanac, config)
    except OSError as exc:
        log.error("Could not open file: %s", exc)
        return 1
    except RangeChainError as exc:
        log.error("%s", exc)
        return 1

    if args.report_out:
        save_json(report.to_dict(), args.report_out)
        log.info("Wrote report to %s", args.report_out)
    if args.json:
        dump_json(report.to_dict())
    else:
        print(f"Minimum {report.stop_label} for seeds: {report.minimum}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
