"""
Pacing for external API calls.

The enrichment and search providers are called strictly one after another.
Every call is preceded by a fixed pause, whatever happened to the previous
call; an HTTP 429 adds a longer cool-down on top.

Usage:
    from culinary_contacts.utils.rate_limiting import RateLimiter

    limiter = RateLimiter(delay_seconds=1.0, source_name="hunter")

    # Use as a callable
    limiter()
    make_api_call()

    # Or use as a context manager
    with limiter:
        make_api_call()
"""

import logging
import time

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Inserts a delay before each external call.

    Args:
        delay_seconds: Pause before each call (must be >= 0)
        source_name: Name of the source (for logging/debugging)
        fixed_delay: If True, always sleep the full delay. If False, only
            sleep whatever is left of the delay since the previous call.

    Example:
        >>> limiter = RateLimiter(delay_seconds=1.0, source_name="hunter")
        >>> limiter()  # Sleeps 1s
        >>> limiter()  # Sleeps 1s again
    """

    def __init__(
        self, delay_seconds: float, source_name: str = "default", fixed_delay: bool = True
    ):
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")

        self.delay_seconds = delay_seconds
        self.source_name = source_name
        self.fixed_delay = fixed_delay
        self._last_call = 0.0
        self.calls = 0

    def __call__(self) -> None:
        if self.fixed_delay:
            wait = self.delay_seconds
        else:
            wait = self.delay_seconds - (time.monotonic() - self._last_call)

        if wait > 0:
            time.sleep(wait)

        self._last_call = time.monotonic()
        self.calls += 1

    def __enter__(self):
        """Context manager entry - enforces the delay."""
        self()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def cool_down(self, seconds: float) -> None:
        """Back off after the provider signalled a rate limit."""
        logger.warning(f"{self.source_name}: rate limited, cooling down for {seconds:.0f}s")
        if seconds > 0:
            time.sleep(seconds)
        self._last_call = time.monotonic()

    def reset(self) -> None:
        """Forget the last call time (interval mode allows an immediate call)."""
        self._last_call = 0.0
        self.calls = 0
