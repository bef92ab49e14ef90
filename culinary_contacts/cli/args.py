"""
Argument parsing utilities for culinary_contacts CLI.
"""

import argparse


def add_execute_argument(parser: argparse.ArgumentParser) -> None:
    """Add the standard --execute flag (scripts default to a dry run)."""
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Call the enrichment APIs and write output (default is dry-run)",
    )


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return number
