import os
import shutil
import tempfile

import pytest

from mediasuite.reporting import MemoryReporter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def reporter() -> MemoryReporter:
    return MemoryReporter()


@pytest.fixture
def make_file(temp_dir):
    """Write bytes to a file inside temp_dir and return its path"""
    def _make(name: str, content: bytes) -> str:
        path = os.path.join(temp_dir, name)
        with open(path, "wb") as f:
            f.write(content)
        return path
    return _make


class RecordingRender:
    """Base render capability that records every call"""

    def __init__(self, log=None):
        self.calls = []
        self.log = log

    def render(self, payload, metadata):
        self.calls.append((payload, dict(metadata)))
        if self.log is not None:
            self.log.append("base")


@pytest.fixture
def recording_render():
    return RecordingRender()


@pytest.fixture
def make_render():
    return RecordingRender
