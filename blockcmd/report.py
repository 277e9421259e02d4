"""
Batch parse report over a script of command lines.

Each input line becomes one row of a DataFrame describing whether it
parsed, what it parsed to, and where and why it failed otherwise.
"""

from typing import Iterable

import pandas as pd

from blockcmd.parser.command_parser import CommandParser, CommandSyntaxError

REPORT_COLUMNS = ["line", "source", "ok", "command", "position", "expected", "found"]


def parse_report(lines: Iterable[str]) -> pd.DataFrame:
    """
    Parse every line and collect the outcome.

    Args:
        lines: Command lines; trailing newlines are stripped

    Returns:
        DataFrame with one row per line and REPORT_COLUMNS as columns
    """
    rows: list[dict] = []

    for number, raw in enumerate(lines, start=1):
        source = raw.rstrip("\r\n")
        row = {
            "line": number,
            "source": source,
            "ok": True,
            "command": None,
            "position": None,
            "expected": None,
            "found": None,
        }
        try:
            row["command"] = repr(CommandParser(source).parse())
        except CommandSyntaxError as e:
            row.update(
                ok=False,
                position=e.position,
                expected=", ".join(sorted(e.expected)) or None,
                found=e.found,
            )
        rows.append(row)

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df["position"] = df["position"].astype("Int64")
    return df


def summarize(report: pd.DataFrame) -> dict[str, int]:
    """Count total, successful and failed lines of a report."""
    ok = int(report["ok"].sum())
    return {"total": len(report), "ok": ok, "failed": len(report) - ok}
