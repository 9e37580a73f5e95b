"""
Pytest fixtures for Sentinel tests.
"""

import os
import json
import random
import shutil
import tempfile

import pytest

# storage.py resolves DATA_ROOT at import time
_DATA_ROOT = tempfile.mkdtemp(prefix="sentinel_test_")
os.environ["SENTINEL_DATA_ROOT"] = _DATA_ROOT


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_DATA_ROOT, ignore_errors=True)


class FakeSleep:
    """Records requested delays instead of waiting."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


class BrokenStore:
    """Store whose reads and/or writes fail like an unavailable backend."""

    def __init__(self, fail_get=True, fail_set=True):
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.data = {}

    def get(self, key, default=None):
        if self.fail_get:
            raise OSError("storage unavailable")
        return self.data.get(key, default)

    def __setitem__(self, key, value):
        if self.fail_set:
            raise OSError("quota exceeded")
        self.data[key] = value


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def data_root():
    import storage

    return storage.DATA_ROOT


@pytest.fixture
def addon_options(data_root):
    """Write options.json and remove it afterwards."""
    path = data_root / "options.json"

    def _write(options):
        path.write_text(json.dumps(options))
        return options

    yield _write
    path.unlink(missing_ok=True)
