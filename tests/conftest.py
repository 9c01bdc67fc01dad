from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from argument_miner.analysis.text_analyzer import TextAnalyzer
from argument_miner.api.dependencies import get_analysis_service
from argument_miner.main import app
from argument_miner.services.analysis_service import AnalysisService
from argument_miner.utils.metrics import MetricsTracker


class FixedRandom:
    """Stand-in random source whose `random()` always returns `value`."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def make_clock(start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)) -> Callable[[], datetime]:
    """Returns a clock that advances one second per call, giving distinct result ids."""
    state = {"now": start - timedelta(seconds=1)}

    def clock() -> datetime:
        state["now"] += timedelta(seconds=1)
        return state["now"]

    return clock


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def stepping_clock():
    return make_clock()


@pytest.fixture
def analysis_service() -> AnalysisService:
    """A fresh service with zero jitter and a stepping clock."""
    return AnalysisService(
        config={"history": {"max_entries": 5}},
        analyzer=TextAnalyzer(rng=FixedRandom(0.0), simulated_delay=0, clock=make_clock()),
        metrics_tracker=MetricsTracker(),
    )


@pytest.fixture(scope="function")
def client(analysis_service: AnalysisService):
    """
    TestClient for the FastAPI app with the analysis service replaced by the
    per-test `analysis_service` fixture.
    """
    app.dependency_overrides[get_analysis_service] = lambda: analysis_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
