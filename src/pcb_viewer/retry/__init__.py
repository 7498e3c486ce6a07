"""
PCB Viewer - Retry Policy.

Bounded attempts with exponential backoff between them.
"""

from .config import RetryPolicy
from .backoff import calculate_backoff, backoff_schedule

__all__ = [
    "RetryPolicy",
    "calculate_backoff",
    "backoff_schedule",
]
