"""
Retry configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_retries: Retries after the first attempt (default: 2, so 3 attempts)
        base_backoff_ms: Delay before the second attempt in milliseconds (default: 100)
        max_backoff_ms: Maximum delay cap in milliseconds (default: 2000)
        jitter: Apply ±50% random jitter to each delay (default: True)
    """

    max_retries: int = 2
    base_backoff_ms: float = 100
    max_backoff_ms: float = 2_000
    jitter: bool = True

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.base_backoff_ms < 0 or self.max_backoff_ms < 0:
            raise ValueError("backoff values must be >= 0")

    @property
    def max_attempts(self) -> int:
        """Total number of transport calls a fetch may make."""
        return self.max_retries + 1

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (more attempts, longer delays)."""
        return cls(
            max_retries=5,
            base_backoff_ms=250,
            max_backoff_ms=10_000,
        )

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (one retry, short delays)."""
        return cls(
            max_retries=1,
            base_backoff_ms=50,
            max_backoff_ms=500,
        )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_retries=0)
