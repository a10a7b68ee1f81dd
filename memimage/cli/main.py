"""
memimage CLI — try the bank model from a shell.

Commands:
    memimage check <name>             — Show the normalized name or the rule it breaks
    memimage rename <name> <new_name> — Create a bank, rename it, show old and new
    memimage rules                    — List the bank name rules

Nothing is persisted; every invocation starts from an empty model.
Validation failures are reported as `[code] message` with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..bank import NAME_RULES, Bank
from ..errors import DomainError, domain_catch

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_error(error: DomainError) -> str:
    """Format a domain error as `[code] message`."""
    return f"[{error.code:05d}] {error.message}"


def format_bank(bank: Bank) -> str:
    return f"Bank #{bank.id}: {bank.name}"


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_check(args: argparse.Namespace) -> int:
    """Validate a bank name."""
    outcome = domain_catch(Bank, args.name)

    if not outcome.ok:
        print(f"REJECTED {format_error(outcome.error)}")
        return 1

    print(f"OK: {outcome.value.name!r}")
    return 0


def cmd_rename(args: argparse.Namespace) -> int:
    """Create a bank and rename it."""
    created = domain_catch(Bank, args.name)
    if not created.ok:
        print("Could not create bank")
        print(f"Reason: {format_error(created.error)}")
        return 1

    bank = created.value
    renamed = domain_catch(bank.rename_to, args.new_name)
    if not renamed.ok:
        print("Could not rename bank")
        print(f"Reason: {format_error(renamed.error)}")
        print(f"Name unchanged: {format_bank(bank)}")
        return 1

    print(f"Renamed {renamed.value!r} -> {bank.name!r}")
    print(format_bank(bank))
    return 0


def cmd_rules(args: argparse.Namespace) -> int:
    """List the bank name rules, in evaluation order."""
    print("Bank name rules (applied after whitespace normalization):")
    for code, description in NAME_RULES.items():
        print(f"  {code:05d}  {description}")
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="memimage",
        description="memimage — validated fields for in-memory entities",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Normalize and validate a bank name",
    )
    check_parser.add_argument(
        "name",
        help="Bank name to check",
    )
    check_parser.set_defaults(func=cmd_check)

    # Rename command
    rename_parser = subparsers.add_parser(
        "rename",
        help="Create a bank and rename it",
    )
    rename_parser.add_argument(
        "name",
        help="Initial bank name",
    )
    rename_parser.add_argument(
        "new_name",
        help="New bank name",
    )
    rename_parser.set_defaults(func=cmd_rename)

    # Rules command
    rules_parser = subparsers.add_parser(
        "rules",
        help="List the bank name rules",
    )
    rules_parser.set_defaults(func=cmd_rules)

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
