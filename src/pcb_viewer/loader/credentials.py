"""
Credential lookups.

A lookup is any zero-argument callable returning the current auth token or
None. The loader only reports whether a token is present; it never sends it.
"""

import os
from typing import Callable

CredentialLookup = Callable[[], str | None]

DEFAULT_TOKEN_VARIABLE = "PCB_VIEWER_AUTH_TOKEN"


class EnvCredentialLookup:
    """Read the auth token from an environment variable."""

    def __init__(self, variable: str = DEFAULT_TOKEN_VARIABLE):
        self.variable = variable

    def __call__(self) -> str | None:
        return os.environ.get(self.variable) or None


class StaticCredentialLookup:
    """Return a fixed token. Handy for tests and embedded use."""

    def __init__(self, token: str | None = None):
        self.token = token

    def __call__(self) -> str | None:
        return self.token or None
