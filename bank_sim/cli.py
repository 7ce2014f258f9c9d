"""Command-line entry point for bank-sim."""

from __future__ import annotations

import argparse

from bank_sim import __version__
from bank_sim.config import LOG_FORMATS, LOG_LEVELS, BankConfig
from bank_sim.console import BankConsole
from bank_sim.exceptions import ConfigurationError, DuplicateAccountError
from bank_sim.generators import DemoAccountGenerator
from bank_sim.logging import get_logger, setup_logging
from bank_sim.sinks import ConsoleSink
from bank_sim.store import AccountRegistry

logger = get_logger(__name__)


def build_parser(config: BankConfig) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from ``config``."""
    parser = argparse.ArgumentParser(
        prog="bank-sim",
        description="Interactive bank account simulation",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=config.log_format,
        help=f"Log format (default: {config.log_format})",
    )
    parser.add_argument(
        "--no-demo",
        action="store_true",
        default=not config.seed_demo_accounts,
        help="Start without the SA1001/CA2001 demo accounts",
    )
    parser.add_argument(
        "--demo-accounts",
        type=int,
        default=config.generated_accounts,
        help="Number of extra synthetic accounts to generate "
        f"(default: {config.generated_accounts})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for generated accounts",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default=config.locale,
        help=f"Faker locale for generated holder names (default: {config.locale})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=config.output_format == "json",
        help="Render statements and listings as JSON",
    )
    return parser


def build_registry(args: argparse.Namespace) -> AccountRegistry:
    """Create the session registry described by the parsed arguments."""
    registry = AccountRegistry() if args.no_demo else AccountRegistry.with_demo_accounts()
    if args.demo_accounts > 0:
        generator = DemoAccountGenerator(seed=args.seed, locale=args.locale)
        generator.populate(registry, args.demo_accounts)
    return registry


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        config = BankConfig.from_env()
    except ConfigurationError as err:
        argparse.ArgumentParser(prog="bank-sim").error(str(err))
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if args.demo_accounts < 0:
        parser.error("--demo-accounts cannot be negative")

    setup_logging(level=args.log_level, format_type=args.log_format)

    try:
        registry = build_registry(args)
    except DuplicateAccountError as err:
        parser.error(str(err))
    logger.info("Starting session with %d account(s)", len(registry))

    sink = ConsoleSink(output_format="json" if args.json else "table")
    BankConsole(registry, sink).run()
    return 0
