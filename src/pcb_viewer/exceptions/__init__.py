"""
PCB Viewer - Exception Hierarchy.

Attempt-level fetch errors and the consolidated exhaustion error.
"""

from .base import (
    ModuleLoaderError,
    FetchError,
    ConnectionError,
    TimeoutError,
    ServerError,
    NotFoundError,
    InvalidResponseError,
    ExhaustionError,
)

__all__ = [
    "ModuleLoaderError",
    "FetchError",
    "ConnectionError",
    "TimeoutError",
    "ServerError",
    "NotFoundError",
    "InvalidResponseError",
    "ExhaustionError",
]
