"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from band.domain import ContactSubmission, EventType, MusicStyle
from band.domain.errors import SubmissionDeliveryError
from band.services import Clock
from band.stores import SubmissionSink

T0 = datetime(2026, 10, 17, 20, 0, tzinfo=timezone.utc)


class FrozenClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = T0) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class RecordingSink(SubmissionSink):
    def __init__(self) -> None:
        self.delivered: list[ContactSubmission] = []

    def deliver(self, submission: ContactSubmission) -> None:
        self.delivered.append(submission)


class FailingSink(SubmissionSink):
    def __init__(self) -> None:
        self.attempts = 0

    def deliver(self, submission: ContactSubmission) -> None:
        self.attempts += 1
        raise SubmissionDeliveryError()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture
def submission() -> ContactSubmission:
    return ContactSubmission(
        name="Ana Rojas",
        email="ana@example.com",
        phone="+591 70000000",
        event_type=EventType.WEDDING,
        event_date=date(2026, 12, 12),
        event_location="La Paz, Salón Illimani",
        music_styles=frozenset({MusicStyle.ROCK, MusicStyle.JAZZ}),
        message="Ceremonia y fiesta.",
    )


@pytest.fixture
def form_data() -> dict:
    """Valid POST data for the contact form and the contact API."""
    return {
        "name": "Ana Rojas",
        "email": "ana@example.com",
        "phone": "",
        "event_type": "boda",
        "event_date": "2026-12-12",
        "event_location": "La Paz",
        "music_styles": ["jazz", "rock"],
        "message": "",
    }


@pytest.fixture
def wired(monkeypatch, clock, sink):
    """Make request handlers use the frozen clock and the recording sink."""
    monkeypatch.setattr("band.handlers.dependencies.get_clock", lambda: clock)
    monkeypatch.setattr("band.handlers.dependencies.get_sink", lambda: sink)
    return clock, sink
