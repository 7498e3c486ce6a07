"""
Backoff calculation.
"""

from .config import RetryPolicy


def calculate_backoff(completed_attempts: int, policy: RetryPolicy) -> float:
    """
    Calculate the delay to wait before the next attempt.

    The exponent is the number of attempts already made, so the first
    retry waits two time units, the second four, and so on.

    Args:
        completed_attempts: Number of attempts made so far (>= 1)
        policy: Retry policy providing the time unit and optional cap

    Returns:
        Delay in seconds
    """
    if completed_attempts < 1:
        raise ValueError("completed_attempts must be >= 1")

    delay = policy.base_delay * (2**completed_attempts)

    if policy.max_delay is not None:
        delay = min(delay, policy.max_delay)

    return delay


def backoff_schedule(policy: RetryPolicy) -> list[float]:
    """Return every delay a fully failing load would wait, in order."""
    return [calculate_backoff(n, policy) for n in range(1, policy.max_attempts)]
