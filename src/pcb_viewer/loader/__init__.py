"""
PCB Viewer - Module Loader.

Resilient asynchronous loading of named modules.
"""

from .models import AttemptOutcome, AttemptRecord, LoadedResource
from .credentials import CredentialLookup, EnvCredentialLookup, StaticCredentialLookup
from .telemetry import LoggingSink, MemorySink, TelemetrySink
from .fetchers import BaseFetcher, HttpFetcher, SimulatedFetcher
from .loader import ResourceLoader

__all__ = [
    "AttemptOutcome",
    "AttemptRecord",
    "LoadedResource",
    "CredentialLookup",
    "EnvCredentialLookup",
    "StaticCredentialLookup",
    "LoggingSink",
    "MemorySink",
    "TelemetrySink",
    "BaseFetcher",
    "HttpFetcher",
    "SimulatedFetcher",
    "ResourceLoader",
]
