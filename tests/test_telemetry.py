"""Tests for telemetry sinks, credential lookups and record types."""

import logging

import pytest

from pcb_viewer.loader import (
    AttemptOutcome,
    AttemptRecord,
    EnvCredentialLookup,
    LoadedResource,
    LoggingSink,
    MemorySink,
    StaticCredentialLookup,
    TelemetrySink,
)


def record(attempt: int, outcome: AttemptOutcome, resource_id: str = "m") -> AttemptRecord:
    return AttemptRecord(resource_id=resource_id, attempt=attempt, duration=0.1, outcome=outcome)


class TestLoggingSink:
    """LoggingSink writes one log line per record."""

    def test_success_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO):
            LoggingSink().record(record(1, AttemptOutcome.SUCCESS))

        assert caplog.records[0].levelno == logging.INFO
        assert "[ModuleLoader] Success" in caplog.records[0].getMessage()

    def test_failure_logged_at_error_with_payload(self, caplog):
        event = AttemptRecord(
            resource_id="m",
            attempt=2,
            duration=1.0,
            outcome=AttemptOutcome.FAILURE,
            error="refused",
            error_type="ConnectionError",
            auth_token="missing",
            endpoint="/api/modules/m",
        )

        with caplog.at_level(logging.INFO):
            LoggingSink().record(event)

        log = caplog.records[0]
        assert log.levelno == logging.ERROR
        assert log.attempt_record["endpoint"] == "/api/modules/m"
        assert log.attempt_record["outcome"] == "failure"

    def test_cancel_logged_at_warning(self, caplog):
        with caplog.at_level(logging.INFO):
            LoggingSink().record(record(1, AttemptOutcome.CANCELLED))

        assert caplog.records[0].levelno == logging.WARNING

    def test_sinks_satisfy_protocol(self):
        assert isinstance(LoggingSink(), TelemetrySink)
        assert isinstance(MemorySink(), TelemetrySink)


class TestMemorySinkSummary:
    """Summaries derived from record sequences."""

    def test_empty_summary(self):
        assert MemorySink().summary() == {"attempts": 0, "outcome": None}

    def test_summary_of_latest_load_only(self):
        sink = MemorySink()
        for event in [
            record(1, AttemptOutcome.FAILURE),
            record(2, AttemptOutcome.SUCCESS),
            record(1, AttemptOutcome.FAILURE),
            record(2, AttemptOutcome.FAILURE),
            record(3, AttemptOutcome.FAILURE),
        ]:
            sink.record(event)

        assert sink.summary() == {"attempts": 3, "outcome": "failure"}

    def test_summary_filters_by_resource(self):
        sink = MemorySink()
        sink.record(record(1, AttemptOutcome.SUCCESS, resource_id="a"))
        sink.record(record(1, AttemptOutcome.FAILURE, resource_id="b"))

        assert sink.summary("a") == {"attempts": 1, "outcome": "success"}

    def test_clear(self):
        sink = MemorySink()
        sink.record(record(1, AttemptOutcome.SUCCESS))
        sink.clear()

        assert sink.records == []


class TestAttemptRecord:
    def test_to_dict_drops_empty_fields(self):
        data = record(1, AttemptOutcome.SUCCESS).to_dict()

        assert "error" not in data
        assert data["outcome"] == "success"
        assert isinstance(data["timestamp"], str)


class TestLoadedResource:
    def test_wire_format_round_trip(self):
        data = {
            "id": "module-001",
            "name": "Agile Module",
            "status": "loaded",
            "timestamp": "2024-05-01T12:00:00+00:00",
        }

        assert LoadedResource.from_dict(data).to_dict() == data

    def test_missing_field_raises_key_error(self):
        with pytest.raises(KeyError):
            LoadedResource.from_dict({"id": "m", "name": "n", "status": "s"})


class TestCredentialLookups:
    def test_env_lookup_reads_variable(self, monkeypatch):
        monkeypatch.setenv("TEST_TOKEN", "abc")
        assert EnvCredentialLookup("TEST_TOKEN")() == "abc"

    def test_env_lookup_missing_variable(self, monkeypatch):
        monkeypatch.delenv("TEST_TOKEN", raising=False)
        assert EnvCredentialLookup("TEST_TOKEN")() is None

    def test_empty_token_counts_as_missing(self):
        assert StaticCredentialLookup("")() is None


class TestMemorySinkLoadIds:
    """Summaries group records by load id when they carry one."""

    def test_interleaved_loads_grouped_by_load_id(self):
        sink = MemorySink()
        for attempt, outcome, load_id in [
            (1, AttemptOutcome.FAILURE, "a"),
            (1, AttemptOutcome.FAILURE, "b"),
            (2, AttemptOutcome.FAILURE, "a"),
            (2, AttemptOutcome.SUCCESS, "b"),
        ]:
            sink.record(
                AttemptRecord(
                    resource_id="m",
                    attempt=attempt,
                    duration=0.1,
                    outcome=outcome,
                    load_id=load_id,
                )
            )

        assert sink.summary("m") == {"attempts": 2, "outcome": "success"}
