"""Root conftest — shared test configuration."""

import os
import tempfile
from pathlib import Path

# Headless Qt and a throwaway log directory, before any searchpro import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("SEARCHPRO_LOG_DIR", str(Path(tempfile.gettempdir()) / "searchpro-test-logs"))

import pytest
from PySide6 import QtCore, QtWidgets

from searchpro.dataset import Record


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def spin(qapp):
    """Run the Qt event loop for ``ms`` milliseconds."""

    def _spin(ms: int) -> None:
        loop = QtCore.QEventLoop()
        QtCore.QTimer.singleShot(ms, loop.quit)
        loop.exec()

    return _spin


@pytest.fixture
def fruits():
    return (
        Record(1, "Apple"),
        Record(2, "Banana"),
        Record(3, "Pineapple"),
    )


@pytest.fixture
def restore_logging():
    """Put the default logging setup back after a test reconfigures it."""
    from searchpro.config import CONFIG
    from searchpro.logging_setup import configure_logging

    yield
    configure_logging(CONFIG, force=True)
