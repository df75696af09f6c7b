"""Hand-written test doubles shared across test modules."""

from datetime import datetime, timedelta, timezone


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class RecordingTransport:
    """Transport double that keeps every (message, destination) pair."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send(self, message: str, destination: str) -> None:
        self.sent.append((message, destination))

    def last_code(self) -> int:
        message = self.sent[-1][0]
        return int(message.rsplit(" ", 1)[-1])
