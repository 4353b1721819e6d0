import pytest


class RecordingLogger:
    """Collects (level, template, args, exc_info) tuples instead of emitting them."""

    def __init__(self):
        self.events = []

    def _record(self, level, msg, *args, **kwargs):
        self.events.append((level, msg, args, kwargs.get("exc_info")))

    def info(self, msg, *args, **kwargs):
        self._record("info", msg, *args, **kwargs)

    def debug(self, msg, *args, **kwargs):
        self._record("debug", msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        self._record("error", msg, *args, **kwargs)

    def levels(self):
        return [event[0] for event in self.events]


@pytest.fixture
def recording_logger():
    return RecordingLogger()
