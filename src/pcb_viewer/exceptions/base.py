"""
Exception classes for module loading.

Fetch errors describe a single failed attempt and are contained by the
loader's retry loop. Only `ExhaustionError` reaches the loader's caller.
"""


class ModuleLoaderError(Exception):
    """Base exception for all module loading errors."""

    def __init__(
        self,
        message: str,
        *,
        resource_id: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.resource_id = resource_id
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [self.message]
        if self.resource_id:
            parts.insert(0, f"[{self.resource_id}]")
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        return " ".join(parts)


class FetchError(ModuleLoaderError):
    """Raised by a fetcher when a single attempt fails."""


class ConnectionError(FetchError):
    """Raised when the module backend cannot be reached."""

    def __init__(self, message: str = "Connection failed", **kwargs):
        super().__init__(message, **kwargs)


class TimeoutError(FetchError):
    """Raised when an attempt does not complete within its timeout."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        timeout: float | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.timeout = timeout


class ServerError(FetchError):
    """Raised when the backend returns a 5xx response."""

    def __init__(self, message: str = "Server error", **kwargs):
        super().__init__(message, **kwargs)


class NotFoundError(FetchError):
    """Raised when the backend does not know the requested module."""

    def __init__(self, message: str = "Module not found", **kwargs):
        super().__init__(message, **kwargs)


class InvalidResponseError(FetchError):
    """Raised when the backend rejects the request or answers with garbage."""

    def __init__(self, message: str = "Invalid response", **kwargs):
        super().__init__(message, **kwargs)


class ExhaustionError(ModuleLoaderError):
    """
    Raised when every allowed attempt has failed.

    The message carries the attempt count and the last underlying error's
    message. Earlier attempt errors are only available through telemetry.
    """

    def __init__(
        self,
        attempts: int,
        last_error: BaseException,
        *,
        resource_id: str | None = None,
    ):
        reason = getattr(last_error, "message", None) or str(last_error)
        super().__init__(
            f"Module load failed after {attempts} attempts: {reason}",
            resource_id=resource_id,
        )
        self.attempts = attempts
        self.last_error = last_error

    def __str__(self) -> str:
        # Shown verbatim to end users by the viewer shell
        return self.message
