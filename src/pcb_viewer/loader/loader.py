"""
Resilient module loader.

Wraps a fetcher with a per-attempt timeout, bounded retry with exponential
backoff and per-attempt telemetry.
"""

import asyncio
import logging
import time
import uuid
from typing import Awaitable, Callable

from .credentials import CredentialLookup, EnvCredentialLookup
from .fetchers import BaseFetcher
from .models import AttemptOutcome, AttemptRecord, LoadedResource
from .telemetry import LoggingSink, TelemetrySink
from ..exceptions import ExhaustionError, TimeoutError
from ..retry import RetryPolicy, calculate_backoff

logger = logging.getLogger(__name__)


class _FetcherRaised(Exception):
    """Carries an error raised by the fetcher past the attempt timer."""

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error


class ResourceLoader:
    """
    Load modules through a fetcher, masking transient failures.

    Every call to `load` is independent: there is no state shared between
    calls apart from the injected collaborators, which are only read from.

    Example:
        loader = ResourceLoader(HttpFetcher("http://backend"))
        module = await loader.load("module-001")
    """

    def __init__(
        self,
        fetcher: BaseFetcher,
        policy: RetryPolicy | None = None,
        sink: TelemetrySink | None = None,
        credentials: CredentialLookup | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the loader.

        Args:
            fetcher: Collaborator performing a single fetch attempt
            policy: Retry policy (default: RetryPolicy.default())
            sink: Telemetry sink for attempt records (default: LoggingSink)
            credentials: Lookup used to report credential presence
            sleep: Coroutine used for backoff delays
            clock: Monotonic clock used for elapsed times
        """
        self.fetcher = fetcher
        self.policy = policy or RetryPolicy.default()
        self.sink = sink or LoggingSink()
        self.credentials = credentials or EnvCredentialLookup()
        self._sleep = sleep
        self._clock = clock

    async def load(self, resource_id: str) -> LoadedResource:
        """
        Load a module, retrying failed attempts.

        Args:
            resource_id: Identifier of the module

        Returns:
            The loaded module

        Raises:
            ValueError: If `resource_id` is empty
            ExhaustionError: If every allowed attempt failed
        """
        if not resource_id:
            raise ValueError("resource_id must be a non-empty string")

        max_attempts = self.policy.max_attempts
        load_id = uuid.uuid4().hex
        start = self._clock()
        last_error: Exception | None = None

        for attempt in range(1, max_attempts + 1):
            try:
                resource = await self._attempt(resource_id)
            except asyncio.CancelledError:
                self._emit(
                    AttemptRecord(
                        resource_id=resource_id,
                        attempt=attempt,
                        duration=self._clock() - start,
                        outcome=AttemptOutcome.CANCELLED,
                        endpoint=self.fetcher.endpoint_for(resource_id),
                        load_id=load_id,
                    )
                )
                raise
            except Exception as e:
                last_error = e
                self._emit(self._failure_record(resource_id, attempt, e, start, load_id))
            else:
                self._emit(
                    AttemptRecord(
                        resource_id=resource_id,
                        attempt=attempt,
                        duration=self._clock() - start,
                        outcome=AttemptOutcome.SUCCESS,
                        load_id=load_id,
                    )
                )
                return resource

            if attempt < max_attempts:
                delay = calculate_backoff(attempt, self.policy)
                logger.warning(
                    f"[ModuleLoader] Attempt {attempt}/{max_attempts} for {resource_id} "
                    f"failed, retrying in {delay:.1f}s"
                )
                await self._sleep(delay)

        logger.error(
            f"[ModuleLoader] All {max_attempts} attempts for {resource_id} exhausted"
        )
        raise ExhaustionError(
            max_attempts, last_error, resource_id=resource_id
        ) from last_error

    async def _attempt(self, resource_id: str) -> LoadedResource:
        """Run one fetch, racing it against the attempt timeout."""
        timeout = self.policy.attempt_timeout
        try:
            return await asyncio.wait_for(self._fetch(resource_id), timeout)
        except _FetcherRaised as e:
            raise e.error
        except asyncio.TimeoutError as e:
            raise TimeoutError(
                f"Attempt timed out after {timeout}s",
                resource_id=resource_id,
                timeout=timeout,
            ) from e

    async def _fetch(self, resource_id: str) -> LoadedResource:
        # Fetcher errors are wrapped so a builtin TimeoutError raised by the
        # fetcher is not mistaken for expiry of the attempt timer
        try:
            return await self.fetcher.fetch(resource_id)
        except Exception as e:
            raise _FetcherRaised(e) from e

    def _failure_record(
        self,
        resource_id: str,
        attempt: int,
        error: Exception,
        start: float,
        load_id: str,
    ) -> AttemptRecord:
        return AttemptRecord(
            resource_id=resource_id,
            attempt=attempt,
            duration=self._clock() - start,
            outcome=AttemptOutcome.FAILURE,
            error=getattr(error, "message", None) or str(error),
            error_type=type(error).__name__,
            auth_token="present" if self._has_credential() else "missing",
            endpoint=self.fetcher.endpoint_for(resource_id),
            load_id=load_id,
        )

    def _has_credential(self) -> bool:
        try:
            return bool(self.credentials())
        except Exception as e:
            logger.debug(f"[ModuleLoader] Credential lookup failed: {e}")
            return False

    def _emit(self, event: AttemptRecord) -> None:
        try:
            self.sink.record(event)
        except Exception as e:
            logger.debug(f"[ModuleLoader] Telemetry sink failed: {e}")
