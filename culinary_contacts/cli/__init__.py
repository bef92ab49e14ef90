"""
CLI utilities for culinary_contacts.

This package provides shared functionality for scripts:
- Logging setup
- Argument parsing
- Command entry points
"""

from culinary_contacts.cli.args import add_execute_argument, positive_float, positive_int
from culinary_contacts.cli.commands import run_cache, run_resolve_contacts
from culinary_contacts.cli.logging import (
    print_dry_run_header,
    print_execute_header,
    setup_logging,
)

__all__ = [
    # Logging
    "setup_logging",
    "print_dry_run_header",
    "print_execute_header",
    # Arguments
    "add_execute_argument",
    "positive_int",
    "positive_float",
    # Commands
    "run_resolve_contacts",
    "run_cache",
]
