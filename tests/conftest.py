"""Shared test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    monkeypatch.delenv("SSH_WRAP_COMMAND", raising=False)
    monkeypatch.delenv("SSH_WRAP_DEBUG", raising=False)


@pytest.fixture
def sh():
    """Build a command that runs a shell script: sh(script) -> argv."""

    def build(script):
        return ["sh", "-c", script, "sh"]

    return build


class RecordingSink:
    """Stand-in for the child's stdin."""

    def __init__(self, fail_with=None):
        self.writes = []
        self.closed = False
        self.fail_with = fail_with

    def write(self, data):
        if self.fail_with is not None:
            raise self.fail_with
        self.writes.append(data)
        return len(data)

    def flush(self):
        pass

    def close(self):
        self.closed = True


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def broken_sink():
    return RecordingSink(fail_with=BrokenPipeError(32, "Broken pipe"))
