# -*- coding: utf-8 -*-
"""
Shared pytest fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Must be set before app.config / Qt are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOG_TO_FILE", "false")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
