"""
Logging utilities for culinary_contacts CLI.

Provides logging setup and header printing functions with tqdm compatibility.
"""

import logging
import sys
import time
from pathlib import Path

from culinary_contacts.utils.tqdm_logging import TqdmLoggingHandler

NOISY_LOGGERS = ("urllib3", "requests", "filelock", "tldextract")


class FlushingFileHandler(logging.FileHandler):
    """File handler that flushes after every record, so a killed run keeps its log."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(
    script_name: str,
    execute: bool = False,
    log_dir: Path = Path("logs"),
    tqdm_compatible: bool = True,
) -> logging.Logger:
    """
    Set up logging for a script.

    Args:
        script_name: Name of the script (for log file naming)
        execute: If True, log to file + console. If False, only console.
        log_dir: Directory for log files
        tqdm_compatible: If True, use TqdmLoggingHandler for clean progress bar output

    Returns:
        Configured logger instance
    """
    if not execute:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            stream=sys.stdout,
        )
        return logging.getLogger(script_name)

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"{script_name}_{timestamp}.log"

    file_handler = FlushingFileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    console_formatter = logging.Formatter("%(message)s")

    def console_handler(level: int) -> logging.Handler:
        if tqdm_compatible:
            handler = TqdmLoggingHandler(level=level)
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(level)
        handler.setFormatter(console_formatter)
        return handler

    # Script logger: everything to file, INFO+ to console
    logger = logging.getLogger(script_name)
    logger.setLevel(logging.DEBUG)
    logger.handlers = [file_handler, console_handler(logging.INFO)]
    logger.propagate = False

    # Package logger: everything to file; console shows WARNING+ so the
    # progress bar stays readable
    pkg_logger = logging.getLogger("culinary_contacts")
    pkg_logger.setLevel(logging.DEBUG)
    pkg_logger.handlers = [file_handler, console_handler(logging.WARNING)]
    pkg_logger.propagate = False

    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.ERROR)

    logger.info(f"Log file: {log_file}")
    return logger


def print_dry_run_header(title: str, logger: logging.Logger | None = None):
    """
    Print a standard dry-run header.

    Args:
        title: Title for the dry-run section
        logger: Optional logger instance (if None, uses module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 70)
    logger.info(f"{title} (Dry Run)")
    logger.info("=" * 70)


def print_execute_header(title: str, logger: logging.Logger | None = None):
    """Print a standard execute mode header."""
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 70)
    logger.info(title)
    logger.info("=" * 70)
