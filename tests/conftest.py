"""Pytest configuration and fixtures."""

import os
import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Widgets and painters need a platform plugin even without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication for tests that need it."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    yield app


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def engine():
    """Provide a drawing engine with an empty canvas."""
    from sketchboard.core.interaction import CanvasEngine

    return CanvasEngine()


@pytest.fixture
def sample_config_yaml(tmp_path):
    """Create a sample config.yaml file."""
    yaml_path = tmp_path / "config.yaml"
    yaml_path.write_text(
        "strokeColor: '#0000ff'\n"
        "defaultTool: rectangle\n"
        "handleSize: 8\n"
        "maxHistoryEntries: 50\n"
    )
    return yaml_path
