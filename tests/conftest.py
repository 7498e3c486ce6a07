"""Shared fakes for loader tests."""

import pytest

from pcb_viewer.loader import BaseFetcher, LoadedResource, MemorySink
from pcb_viewer.loader.models import utcnow


def make_resource(resource_id: str = "module-001") -> LoadedResource:
    return LoadedResource(
        id=resource_id, name="Agile Module", status="loaded", timestamp=utcnow()
    )


class ScriptedFetcher(BaseFetcher):
    """Fetcher that fails or succeeds according to a script.

    Each script entry is an exception to raise, or None for success. Once the
    script runs out the last entry repeats.
    """

    def __init__(self, script: list[Exception | None]):
        super().__init__()
        self.script = list(script)
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "Scripted"

    async def fetch(self, resource_id: str) -> LoadedResource:
        index = min(len(self.calls), len(self.script) - 1)
        self.calls.append(resource_id)
        outcome = self.script[index]
        if outcome is not None:
            raise outcome
        return make_resource(resource_id)


class RecordingSleep:
    """Async sleep replacement that records delays and returns at once."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def sleep():
    return RecordingSleep()
