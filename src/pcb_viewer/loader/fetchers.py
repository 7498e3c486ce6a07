"""
Fetch collaborators.

A fetcher performs exactly one attempt to obtain a module. It does not retry
and does not enforce the attempt timeout; both belong to the loader.
"""

import asyncio
import logging
from abc import ABC, abstractmethod

import httpx

from .models import LoadedResource, utcnow
from ..exceptions import (
    ConnectionError,
    InvalidResponseError,
    NotFoundError,
    ServerError,
    TimeoutError,
)

logger = logging.getLogger(__name__)


class BaseFetcher(ABC):
    """
    Abstract base class for module fetchers.

    All module backends must implement this interface.
    """

    def __init__(self, api_endpoint: str = "/api/modules"):
        """
        Initialize the fetcher.

        Args:
            api_endpoint: Path under which modules are addressed
        """
        self.api_endpoint = api_endpoint.rstrip("/")

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the fetcher name for logging."""
        ...

    def endpoint_for(self, resource_id: str) -> str:
        """Return the endpoint a fetch of `resource_id` targets."""
        return f"{self.api_endpoint}/{resource_id}"

    @abstractmethod
    async def fetch(self, resource_id: str) -> LoadedResource:
        """
        Fetch a module once.

        Args:
            resource_id: Identifier of the module

        Returns:
            The loaded module record

        Raises:
            FetchError: Or any other exception, when the attempt fails
        """
        ...


class HttpFetcher(BaseFetcher):
    """
    Fetch modules from an HTTP backend.

    Transport and status failures are converted to the package's fetch
    errors so telemetry reports a meaningful error kind.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        api_endpoint: str = "/api/modules",
        timeout: float = 30.0,
    ):
        """
        Initialize the HTTP fetcher.

        Args:
            base_url: Backend base URL
            api_endpoint: Path under which modules are addressed
            timeout: Transport-level timeout in seconds. The loader's
                attempt timeout normally fires first.
        """
        super().__init__(api_endpoint)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "HTTP"

    def url_for(self, resource_id: str) -> str:
        return f"{self.base_url}{self.endpoint_for(resource_id)}"

    def _handle_error(self, resource_id: str, response: httpx.Response) -> None:
        """Convert HTTP status codes to fetch errors."""
        status_code = response.status_code
        if status_code == 404:
            raise NotFoundError(
                "Module not found",
                resource_id=resource_id,
                status_code=status_code,
            )
        elif status_code >= 500:
            raise ServerError(
                f"Server error: {response.text}",
                resource_id=resource_id,
                status_code=status_code,
            )
        elif status_code != 200:
            raise InvalidResponseError(
                f"Request rejected: {response.text}",
                resource_id=resource_id,
                status_code=status_code,
            )

    async def fetch(self, resource_id: str) -> LoadedResource:
        """Fetch a module with a single GET request."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url_for(resource_id))
        except httpx.ConnectError as e:
            raise ConnectionError(
                f"Failed to connect to {self.base_url}",
                resource_id=resource_id,
            ) from e
        except httpx.TimeoutException as e:
            raise TimeoutError(
                f"Request timed out after {self.timeout}s",
                resource_id=resource_id,
                timeout=self.timeout,
            ) from e

        self._handle_error(resource_id, response)

        try:
            return LoadedResource.from_dict(response.json())
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidResponseError(
                f"Malformed module payload: {e}",
                resource_id=resource_id,
                status_code=response.status_code,
            ) from e

    async def health_check(self) -> bool:
        """Check if the module backend is reachable."""
        try:
            async with httpx.AsyncClient(timeout=5.0) as client:
                response = await client.get(f"{self.base_url}{self.api_endpoint}")
                return response.status_code < 500
        except Exception as e:
            logger.debug(f"[{self.name}] Health check failed: {e}")
            return False


class SimulatedFetcher(BaseFetcher):
    """Stand-in backend that answers every request after a fixed latency."""

    def __init__(
        self,
        latency: float = 1.0,
        module_name: str = "Agile Module",
        api_endpoint: str = "/api/modules",
    ):
        super().__init__(api_endpoint)
        self.latency = latency
        self.module_name = module_name

    @property
    def name(self) -> str:
        return "Simulated"

    async def fetch(self, resource_id: str) -> LoadedResource:
        await asyncio.sleep(self.latency)
        logger.info(f"[{self.name}] Simulated load for {resource_id}")
        return LoadedResource(
            id=resource_id,
            name=self.module_name,
            status="loaded",
            timestamp=utcnow(),
        )
