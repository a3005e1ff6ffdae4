"""Command-line interface for finsheet lookups."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from finsheet.config import Settings
from finsheet.data.params import VALID_INTERVALS, VALID_RANGES
from finsheet.data.yahoo_chart import YahooChartClient
from finsheet.domain.result import Failure, Result
from finsheet.errors import ConfigError
from finsheet.logging import setup_logger
from finsheet.report import rows_to_frame, write_history_report
from finsheet.sheets.market_sheet import MarketSheet


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="Yahoo Finance quotes and bars as table rows")
    parser.add_argument("--base-url", type=str, help="Chart API base URL")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    price = commands.add_parser("price", help="Current market price")
    price.add_argument("ticker")

    quote = commands.add_parser("quote", help="One-row quote summary")
    quote.add_argument("ticker")
    quote.add_argument("--headers", action="store_true", help="Include a header row")

    latest = commands.add_parser("latest", help="Most recent 1-minute bar")
    latest.add_argument("ticker")
    latest.add_argument("--headers", action="store_true", help="Include a header row")

    history = commands.add_parser("history", help="Bars, most recent first")
    history.add_argument("ticker")
    history.add_argument("--headers", action="store_true", help="Include a header row")
    history.add_argument("--limit", type=int, help="Maximum number of bars")
    history.add_argument("--range", dest="range_", help=f"One of {', '.join(sorted(VALID_RANGES))}")
    history.add_argument("--interval", help=f"One of {', '.join(sorted(VALID_INTERVALS))}")
    history.add_argument("--chart", type=str, help="Also write an HTML chart to this path")

    meta = commands.add_parser("meta", help="Single metadata field")
    meta.add_argument("ticker")
    meta.add_argument("field")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    return settings.with_overrides(
        base_url=args.base_url,
        timeout_seconds=args.timeout,
        log_level=args.log_level,
    )


def run_command(sheet: MarketSheet, args: argparse.Namespace) -> Result[Any]:
    if args.command == "price":
        return sheet.price(args.ticker)
    if args.command == "quote":
        return sheet.quote(args.ticker, args.headers)
    if args.command == "latest":
        return sheet.latest_bar(args.ticker, args.headers)
    if args.command == "history":
        return sheet.history(args.ticker, args.headers, args.limit, args.range_, args.interval)
    return sheet.meta_field(args.ticker, args.field)


def render(value: Any, has_header: bool) -> str:
    if isinstance(value, list):
        frame = rows_to_frame(value, has_header=has_header)
        return frame.to_string(index=False, header=has_header)
    return str(value)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    setup_logger(settings.log_level, settings.log_file)

    with YahooChartClient(settings) as client:
        result = run_command(MarketSheet(client), args)

    if isinstance(result, Failure):
        print(result.message, file=sys.stderr)
        return 1

    has_header = bool(getattr(args, "headers", False))
    print(render(result.value, has_header))
    if args.command == "history" and args.chart:
        write_history_report(result.value, args.chart, args.ticker, has_header=has_header)
    return 0


if __name__ == "__main__":
    sys.exit(main())
