import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from animations.clock_animation import AnimationClock
from lifecycle.task_registry import TaskRegistry
from models.state import ClockTimings
from models.style import ClockConfiguration
from services.time_source import FixedWallClock
from surfaces.recording_surface import RecordingSurface


@pytest.fixture(autouse=True)
def fresh_task_registry():
    """Each test starts with an empty registry singleton."""
    TaskRegistry._instance = None
    yield
    TaskRegistry._instance = None


@pytest.fixture
def surface():
    return RecordingSurface(400, 400)


@pytest.fixture
def clock_config():
    return ClockConfiguration()


@pytest.fixture
def wall_clock():
    return FixedWallClock(hour=10, minute=15, second=30)


@pytest.fixture
def clock(wall_clock):
    return AnimationClock(wall_clock)


@pytest.fixture
def fast_timings():
    """Millisecond periods so async tests see many ticks quickly."""
    return ClockTimings(fine_sweep_ms=1.0, second_ms=2.0, hour_ms=5.0)
