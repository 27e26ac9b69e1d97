"""hll-lite CLI entry point.

Usage: uv run hll-lite [command]
"""
from __future__ import annotations

import argparse
import logging
import sys

from hll_lite.estimator.bits import MAX_PRECISION, MIN_PRECISION

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _add_common_args(p: argparse.ArgumentParser, default_precision: int) -> None:
    p.add_argument(
        "--precision", type=int, default=default_precision,
        help=f"Register index bits, {MIN_PRECISION}-{MAX_PRECISION} "
        f"(default: {default_precision})",
    )
    p.add_argument(
        "--log-level", choices=_LOG_LEVELS, default="WARNING",
        help="Logging level (default: WARNING)",
    )


def _add_run_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "run",
        help="Read string lengths from stdin and feed random strings to the estimator.",
    )
    _add_common_args(p, default_precision=10)
    p.add_argument(
        "--batch-size", type=int, default=100_000,
        help="Random strings generated per input line (default: 100000)",
    )
    p.add_argument(
        "--report-every", type=int, default=100,
        help="Print real,estimate every N insertions (default: 100)",
    )
    p.add_argument(
        "--seed", type=int, default=None,
        help="RNG seed for reproducible runs (default: random)",
    )
    p.add_argument(
        "--once", action="store_true",
        help="Stop after the first valid input line.",
    )
    p.add_argument(
        "--no-dump", action="store_true",
        help="Do not dump the registers after each batch.",
    )


def _add_count_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "count",
        help="Estimate the number of distinct lines in files (or stdin).",
    )
    _add_common_args(p, default_precision=14)
    p.add_argument(
        "files", nargs="*",
        help="Input files (default: stdin)",
    )
    p.add_argument(
        "--exact", action="store_true",
        help="Also track and print the exact distinct count.",
    )


def _run_session(args: argparse.Namespace) -> None:
    from hll_lite.driver.report import format_summary
    from hll_lite.driver.session import SessionConfig, StreamSession

    config = SessionConfig(
        precision=args.precision,
        batch_size=args.batch_size,
        report_every=args.report_every,
        seed=args.seed,
        once=args.once,
        dump_registers=not args.no_dump,
    )
    session = StreamSession(config)
    print("HLL by python")
    print("set the number of letter to generate")
    result = session.run(sys.stdin)
    print(format_summary(
        result.batches,
        result.elements_added,
        result.exact_count,
        result.final_estimate,
    ))


def _run_count(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    from hll_lite.estimator.hyperloglog import HyperLogLog

    hll = HyperLogLog(args.precision, track_exact=args.exact)
    if args.files:
        for path in args.files:
            try:
                f = open(path, encoding="utf-8", errors="surrogateescape")
            except OSError as exc:
                parser.error(f"cannot read {path}: {exc.strerror or exc}")
            with f:
                for line in f:
                    hll.add(line.rstrip("\r\n"))
    else:
        stdin = sys.stdin
        # undecodable bytes map to lone surrogates instead of failing the count
        if hasattr(stdin, "reconfigure"):
            stdin.reconfigure(errors="surrogateescape")
        for line in stdin:
            hll.add(line.rstrip("\r\n"))

    print(f"estimate: {hll.count()}")
    if args.exact:
        print(f"exact:    {hll.exact_count}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="hll-lite",
        description="HyperLogLog distinct counting -- pure Python, bounded memory.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_run_parser(subparsers)
    _add_count_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if not MIN_PRECISION <= args.precision <= MAX_PRECISION:
        parser.error(
            f"--precision must be {MIN_PRECISION}..{MAX_PRECISION}, got {args.precision}"
        )
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        if args.report_every <= 0:
            parser.error("--report-every must be > 0")
        if args.batch_size <= 0:
            parser.error("--batch-size must be > 0")
        _run_session(args)
    elif args.command == "count":
        _run_count(args, parser)
