"""
Retry policy definition.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry policy for a resource loader. Fixed for the loader's lifetime.

    Attributes:
        max_attempts: Total number of fetch attempts per load (default: 3)
        attempt_timeout: Timeout for a single attempt in seconds (default: 5.0)
        base_delay: Backoff time unit in seconds (default: 1.0)
        max_delay: Optional cap on a single backoff delay (default: no cap)
    """

    max_attempts: int = 3
    attempt_timeout: float = 5.0
    base_delay: float = 1.0
    max_delay: float | None = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.attempt_timeout <= 0:
            raise ValueError("attempt_timeout must be > 0")
        if self.base_delay < 0:
            raise ValueError("base_delay must be >= 0")
        if self.max_delay is not None and self.max_delay < 0:
            raise ValueError("max_delay must be >= 0")

    @classmethod
    def default(cls) -> "RetryPolicy":
        """Preset matching the viewer's stock behaviour."""
        return cls()

    @classmethod
    def patient(cls) -> "RetryPolicy":
        """Preset for slow backends (more attempts, longer timeout)."""
        return cls(
            max_attempts=5,
            attempt_timeout=15.0,
            max_delay=30.0,
        )

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        """Preset for a single attempt only."""
        return cls(max_attempts=1)
