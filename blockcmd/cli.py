"""
Command line interface.

Reads command lines from stdin (or a single -c argument), parses them and
dispatches successful commands to a PlayerState. Syntax errors are printed
to stderr and reading continues.
"""

import argparse
import logging
import os
import sys
from typing import TextIO

from blockcmd.executors import CommandExecutor, PlayerState
from blockcmd.parser.command_parser import CommandSyntaxError
from blockcmd.report import parse_report, summarize

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "BLOCKCMD_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockcmd",
        description="Parse and dispatch fly/placing commands.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-c", "--command", help="parse and dispatch a single command")
    mode.add_argument("--report", metavar="FILE", help="print a parse report for a script file")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        choices=LOG_LEVELS,
        type=str.upper,
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def run_command(line: str, state: PlayerState, out: TextIO, err: TextIO) -> bool:
    """Execute one line against state. Returns False on a syntax error."""
    try:
        command = CommandExecutor(line).execute(state)
    except CommandSyntaxError as e:
        print(e.render(line), file=err)
        return False
    print(repr(command), file=out)
    return True


def run_repl(stream: TextIO, state: PlayerState, out: TextIO, err: TextIO) -> int:
    """
    Read commands from stream until EOF.

    Returns:
        The number of lines that failed to parse
    """
    failures = 0
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if not run_command(line, state, out, err):
            failures += 1
    logger.info("Input closed, %d syntax error(s)", failures)
    return failures


def run_report(path: str, out: TextIO) -> int:
    with open(path, encoding="utf-8") as f:
        report = parse_report(f)

    # blank lines keep their numbering but are not commands
    report = report[report["source"].str.strip() != ""]
    print(report.to_string(index=False), file=out)

    counts = summarize(report)
    print(f"{counts['ok']}/{counts['total']} lines parsed", file=out)
    return 0 if counts["failed"] == 0 else 1


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    # argparse does not check choices against a default taken from the environment
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid {LOG_LEVEL_ENV} {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})"
        )
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.report:
        return run_report(args.report, sys.stdout)

    state = PlayerState()
    if args.command is not None:
        return 0 if run_command(args.command, state, sys.stdout, sys.stderr) else 1

    run_repl(sys.stdin, state, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
