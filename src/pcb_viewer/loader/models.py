"""
Data types shared by the loader, its collaborators and its telemetry.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LoadedResource:
    """A module record returned by the backend."""

    id: str
    name: str
    status: str
    timestamp: datetime

    def to_dict(self) -> dict:
        """Convert to the backend's wire format."""
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LoadedResource":
        """
        Build a resource from the backend's wire format.

        Raises:
            KeyError: If a required field is missing
            ValueError: If the timestamp is not ISO-8601
        """
        timestamp = data["timestamp"]
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            status=str(data["status"]),
            timestamp=timestamp,
        )


class AttemptOutcome(str, Enum):
    """How a single attempt ended."""

    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class AttemptRecord:
    """
    Telemetry for one attempt of one load call.

    Success records carry the total elapsed time and the attempt index at
    which the resource arrived. Failure records add the error, whether an
    auth credential was available and the endpoint that was targeted.
    All records of one load call share a `load_id`.
    """

    resource_id: str
    attempt: int
    duration: float
    outcome: AttemptOutcome
    error: str | None = None
    error_type: str | None = None
    auth_token: str | None = None
    endpoint: str | None = None
    load_id: str | None = None
    timestamp: datetime = field(default_factory=utcnow)

    @property
    def succeeded(self) -> bool:
        return self.outcome == AttemptOutcome.SUCCESS

    def to_dict(self) -> dict:
        """Flatten into a log-friendly dictionary, dropping empty fields."""
        data = asdict(self)
        data["outcome"] = self.outcome.value
        data["timestamp"] = self.timestamp.isoformat()
        return {key: value for key, value in data.items() if value is not None}
