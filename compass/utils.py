"""Utility functions for the Compass client."""

import logging
import time
from typing import Any, Callable, Optional, Tuple, Type


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr for a CLI run.

    Only warnings are shown unless ``verbose`` is set, so stdout stays
    clean JSON. Request URLs and login results are logged at debug/info.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # httpx logs every request at INFO, including the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.setLevel(level)


logger = logging.getLogger("compass")


def retry(
    func: Callable[[], Any],
    max_attempts: int = 1,
    delay: float = 1.0,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    on_retry: Optional[Callable[[int, BaseException], None]] = None,
) -> Any:
    """Call a function until it succeeds or attempts run out.

    Args:
        func: Zero-argument callable to invoke
        max_attempts: Total number of attempts, including the first
        delay: Seconds to wait between attempts
        retry_on: Exception types that trigger another attempt
        on_retry: Optional callback called before each retry

    Returns:
        Result of the function call

    Raises:
        Last exception if all attempts fail
    """
    attempts = max(1, max_attempts)

    for attempt in range(1, attempts + 1):
        try:
            return func()
        except retry_on as e:
            if attempt == attempts:
                raise
            logger.warning(f"Attempt {attempt} failed: {e}. Retrying in {delay}s...")
            if on_retry:
                on_retry(attempt, e)
            time.sleep(delay)


def redact(secret: str, keep: int = 4) -> str:
    """Mask a secret for logging, keeping only its first few characters."""
    if not secret:
        return ""
    if len(secret) <= keep:
        return "****"
    return f"{secret[:keep]}****"
