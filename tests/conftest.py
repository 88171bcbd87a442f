import os

# Qt must not try to reach a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def fake_clock():
    """Monotonic clock the test moves by hand (seconds)"""

    class FakeClock:
        def __init__(self):
            self.now = 100.0

        def __call__(self):
            return self.now

        def advance_ms(self, ms):
            self.now += ms / 1000.0

    return FakeClock()


@pytest.fixture
def write_cache(tmp_path):
    path = tmp_path / "latest.json"

    def write(payload):
        path.write_text(payload, encoding="utf-8")
        return str(path)

    write.path = str(path)
    return write
