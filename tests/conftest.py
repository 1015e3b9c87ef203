from collections.abc import Generator

import pytest

import jsonmend.core.services.metrics_service as metrics
from jsonmend.core.config.app_config import RepairConfig
from jsonmend.core.services.repair_engine import RepairEngine


@pytest.fixture(autouse=True)
def _reset_metrics() -> Generator[None, None, None]:
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def repair_engine() -> RepairEngine:
    return RepairEngine()


@pytest.fixture
def make_engine():
    """Build an engine with selected ``RepairConfig`` overrides."""

    def _make(**overrides: bool) -> RepairEngine:
        return RepairEngine(RepairConfig(**overrides))

    return _make
