from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make src/ importable when the package is not installed.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from mixpanel_bridge.dispatch import RecordingMethodChannel  # noqa: E402


@pytest.fixture
def channel() -> RecordingMethodChannel:
    return RecordingMethodChannel()
