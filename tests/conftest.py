"""Ensure the pcg_stream package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

REFERENCE_STATE = 0x853C49E6748FEA9B
REFERENCE_INCREMENT = 0xDA3E39CB94B95BB5


@pytest.fixture
def reference_seeds():
    """Seed source replaying the reference (state, increment) pair."""
    return iter([REFERENCE_STATE, REFERENCE_INCREMENT]).__next__
