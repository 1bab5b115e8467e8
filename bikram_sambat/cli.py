"""Command line front end: conversions, today and `cal` style BS months."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import converter, epoch_table, formatter, grid


def _language(args: argparse.Namespace) -> formatter.LabelLanguage:
    return "nepali" if args.nepali else "english"


def _bs_label(value: converter.BSDate, language: formatter.LabelLanguage) -> str:
    weekday = grid.weekday_of(value.year, value.month, value.day)
    return formatter.format_bs_date(value.year, value.month, value.day, weekday, language)


def cmd_today(args: argparse.Namespace) -> int:
    current = converter.today()
    print(f"{current.isoformat()}  {_bs_label(current, _language(args))}")
    return 0


def cmd_to_bs(args: argparse.Namespace) -> int:
    converted = converter.gregorian_to_bs(args.date)
    print(f"{converted.isoformat()}  {_bs_label(converted, _language(args))}")
    return 0


def cmd_to_ad(args: argparse.Namespace) -> int:
    gregorian = converter.bs_to_gregorian(args.date)
    print(f"{gregorian.isoformat()}  {formatter.gregorian_date_label(gregorian)}")
    return 0


def format_month(year: int, month: int, language: formatter.LabelLanguage = "english") -> List[str]:
    """Lines of a ``cal`` style month; Saturdays are marked with ``*``."""

    month_grid = grid.month_grid(year, month)
    title = f"{formatter.format_month_name(month, language)} {formatter.format_number(year, language)}"
    if month_grid.approximate:
        title += " (approx.)"
    lines = [title.center(27).rstrip()]
    lines.append(" ".join(f"{header:>3}" for header in formatter.weekday_headers()))
    for week in month_grid.weeks():
        cells = []
        for cell in week:
            if cell is None:
                cells.append("   ")
                continue
            text = formatter.format_number(cell.day, language)
            cells.append(f"{text:>2}*" if cell.is_holiday else f"{text:>3}")
        lines.append(" ".join(cells).rstrip())
    return lines


def cmd_month(args: argparse.Namespace) -> int:
    print("\n".join(format_month(args.year, args.month - 1, _language(args))))
    return 0


def cmd_range(args: argparse.Namespace) -> int:
    first, last = converter.gregorian_range()
    min_year, max_year = epoch_table.supported_range()
    print(f"BS {min_year}-{max_year}  ({first.isoformat()} to {last.isoformat()})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bikram-sambat", description="Bikram Sambat calendar tools.")
    p.add_argument("--nepali", action="store_true", help="Devanagari numerals and names")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_today = sub.add_parser("today", help="Today's BS date")
    p_today.set_defaults(func=cmd_today)

    p_to_bs = sub.add_parser("to-bs", help="Gregorian -> BS")
    p_to_bs.add_argument("date", help="YYYY-MM-DD")
    p_to_bs.set_defaults(func=cmd_to_bs)

    p_to_ad = sub.add_parser("to-ad", help="BS -> Gregorian")
    p_to_ad.add_argument("date", help="YYYY-MM-DD, month 1-12")
    p_to_ad.set_defaults(func=cmd_to_ad)

    p_month = sub.add_parser("month", help="Print a BS month")
    p_month.add_argument("year", type=int)
    p_month.add_argument("month", type=int, choices=range(1, 13), metavar="month", help="1-12")
    p_month.set_defaults(func=cmd_month)

    p_range = sub.add_parser("range", help="Years covered by the month length table")
    p_range.set_defaults(func=cmd_range)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return args.func(args)
    except ValueError as exc:
        print(f"bikram-sambat: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
