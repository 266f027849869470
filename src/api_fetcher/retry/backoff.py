"""
Backoff calculation.
"""

import random

from .config import RetryConfig

JITTER_FACTOR = 0.5


def calculate_backoff(
    attempt: int,
    config: RetryConfig,
    rng: random.Random | None = None,
) -> float:
    """
    Calculate backoff delay before the next attempt.

    Args:
        attempt: One-based count of completed attempts (1 is the delay
            before the second try)
        config: Retry configuration
        rng: Random source used for jitter (default: module-level random)

    Returns:
        Delay in milliseconds, never negative
    """
    if attempt < 1:
        raise ValueError("attempt must be >= 1")

    delay = min(config.base_backoff_ms * (2 ** (attempt - 1)), config.max_backoff_ms)

    # Apply jitter (±50%)
    if config.jitter:
        draw = (rng or random).uniform(-JITTER_FACTOR, JITTER_FACTOR)
        delay = delay + draw * delay

    return max(0, delay)
