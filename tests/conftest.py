"""
Shared fixtures for Dilation Sandbox tests.

Provides fresh sessions, sample point sets and a headless main window.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# ── Sample shapes ────────────────────────────────────────────────────────

TRIANGLE = [(0, 0), (4, 0), (4, 3)]


@pytest.fixture
def triangle_points():
    """Open right triangle (0,0), (4,0), (4,3)"""
    from models.point import Point
    return [Point(x, y) for x, y in TRIANGLE]


@pytest.fixture
def session():
    """Fresh empty Session"""
    from models.session import Session
    return Session()


@pytest.fixture
def triangle_session(session, triangle_points):
    """Session with the triangle placed by clicking (not closed)"""
    from services.shape_operations import click_point
    for point in triangle_points:
        click_point(session, point)
    return session


@pytest.fixture
def store(tmp_path):
    """Key-value store in a temporary directory"""
    from services.shape_storage import KeyValueStore
    return KeyValueStore(str(tmp_path / "storage.json"))


@pytest.fixture
def alerts(monkeypatch):
    """Capture blocking alerts and error popups instead of showing message boxes"""
    from PyQt5.QtWidgets import QMessageBox
    shown = []
    monkeypatch.setattr(
        QMessageBox, "information",
        lambda parent, title, message, *args, **kwargs: shown.append(message),
    )
    monkeypatch.setattr(
        QMessageBox, "critical",
        lambda parent, title, message, *args, **kwargs: shown.append(message),
    )
    return shown


@pytest.fixture
def window(qtbot, tmp_path, alerts):
    """Main window with config and storage in a temporary directory"""
    from main import DilationSandbox
    from utils.logger import set_main_window

    win = DilationSandbox(config_dir=str(tmp_path / "config"))
    qtbot.addWidget(win)
    yield win
    set_main_window(None)
