"""
PCB Viewer - Component viewer with resilient module loading.

Rotate a board component and load modules from a backend with bounded
retry, per-attempt timeouts and attempt telemetry.
"""

from .exceptions import (
    ModuleLoaderError,
    FetchError,
    ConnectionError,
    TimeoutError,
    ServerError,
    NotFoundError,
    InvalidResponseError,
    ExhaustionError,
)
from .retry import RetryPolicy, calculate_backoff
from .loader import (
    AttemptOutcome,
    AttemptRecord,
    LoadedResource,
    BaseFetcher,
    HttpFetcher,
    SimulatedFetcher,
    LoggingSink,
    MemorySink,
    ResourceLoader,
)
from .viewer import Orientation, PCBComponent, ViewerShell

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ModuleLoaderError",
    "FetchError",
    "ConnectionError",
    "TimeoutError",
    "ServerError",
    "NotFoundError",
    "InvalidResponseError",
    "ExhaustionError",
    # Retry
    "RetryPolicy",
    "calculate_backoff",
    # Loader
    "AttemptOutcome",
    "AttemptRecord",
    "LoadedResource",
    "BaseFetcher",
    "HttpFetcher",
    "SimulatedFetcher",
    "LoggingSink",
    "MemorySink",
    "ResourceLoader",
    # Viewer
    "Orientation",
    "PCBComponent",
    "ViewerShell",
]
