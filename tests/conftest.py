import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.models import Activity, DogContext


@pytest.fixture
def rex() -> DogContext:
    return DogContext(
        name="Rex",
        breed="Labrador",
        program_name="Board & Train",
        program_day=3,
        total_program_days=14,
    )


@pytest.fixture
def make_activity():
    counter = {"n": 0}

    def _make(activity_type: str, duration: int = 0, notes=None, skills_worked=None) -> Activity:
        counter["n"] += 1
        return Activity(
            id=f"act_{counter['n']}",
            type=activity_type,
            start_time="2026-03-02T09:00:00",
            duration=duration,
            notes=notes,
            skills_worked=skills_worked or [],
        )

    return _make

