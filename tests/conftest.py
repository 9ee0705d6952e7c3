"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src and tests to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from fixtures.generate_events import generate_event_map  # noqa: E402


@pytest.fixture
def sample_events():
    """Hand-written events mixing single payloads and lists."""
    return {
        1: "New month kickoff",
        14: ["Valentine's lunch", "Team review"],
        29: {"title": "Leap day party"},
        31: "Never shown in February",
    }


@pytest.fixture
def random_events():
    """Faker-generated events for February 2024."""
    return generate_event_map(2024, 2, busy_days=12, seed=2024)


@pytest.fixture
def fixed_today():
    """A reference 'today' inside February 2024."""
    return date(2024, 2, 14)
