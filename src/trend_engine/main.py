"""
Main entry point for the trend engine profit tests.

Runs every enabled synthetic feed through a fresh decision engine, prints a
summary and per-tick table for each, and exits 0 only if every test passes.

Usage:
    trend-engine                     # Run with config/config.yaml
    trend-engine --ticks 400         # Longer feeds
    trend-engine --no-rows           # Summaries only
    trend-engine --log-level DEBUG   # Per-tick engine logs on stderr
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .backtest.runner import run_default_suite
from .config.loader import ConfigLoader
from .config.settings import AppConfig, FeedConfig, SystemConfig
from .utils.formatters import format_summary, format_trade_table
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TEST_FAILED = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='trend-engine',
        description='Run the EMA/imbalance decision engine over synthetic order book feeds',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment overrides:
  LOG_LEVEL, JSON_LOGS, LOG_FILE
  TREND_ALPHA_FAST, TREND_ALPHA_SLOW, TREND_IMBALANCE_THRESHOLD,
  TREND_STARTING_CAPITAL, TREND_TICKS, TREND_CONFIG_DIR
        """
    )

    parser.add_argument(
        '--config-dir',
        type=Path,
        help='Directory holding config.yaml (default: <repo>/config)'
    )

    parser.add_argument(
        '--ticks', '-n',
        type=int,
        help='Snapshots per feed (overrides config)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        help='Logging level (overrides config)'
    )

    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit logs as JSON'
    )

    parser.add_argument(
        '--no-rows',
        action='store_true',
        help='Print summaries only, without per-tick tables'
    )

    return parser


def _apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a re-validated config with command-line overrides applied."""
    system = config.system
    feeds = config.feeds

    if args.log_level or args.json_logs:
        system = SystemConfig(
            log_level=args.log_level or system.log_level,
            json_logs=args.json_logs or system.json_logs,
            log_file=system.log_file,
        )
    if args.ticks is not None:
        feeds = FeedConfig(ticks=args.ticks, enabled_feeds=feeds.enabled_feeds)

    return AppConfig(system=system, engine=config.engine, feeds=feeds)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader(args.config_dir).load_app_config()
        config = _apply_cli_overrides(config, args)
    except (ValidationError, ValueError) as e:
        setup_logging("ERROR")
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    setup_logging(
        log_level=config.system.log_level,
        log_file=config.system.log_file,
        json_format=config.system.json_logs,
    )

    results = run_default_suite(config)

    for result in results:
        print(format_summary(result))
        print()
        if not args.no_rows:
            print(format_trade_table(result.rows))
            print("\n")

    all_pass = all(result.passed for result in results)
    return EXIT_OK if all_pass else EXIT_TEST_FAILED


if __name__ == '__main__':
    sys.exit(main())
