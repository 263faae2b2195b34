"""Shared pytest fixtures for golfstats tests."""

from __future__ import annotations

import pytest

from golfstats.config import reset_settings_cache
from golfstats.rounds.loader import load_lines
from golfstats.rounds.models import GolfIndex
from golfstats.rounds.service import GolfQueryService

SAMPLE_LINES = [
    "Tampere;Pirkkala;Alice;3",
    "Tampere;Pirkkala;Bob;-1",
    "Tampere;Kalevankangas;Alice;5",
    "Helsinki;Talma;Alice;2",
    "Helsinki;Talma;Carol;0",
    "Helsinki;Pirkkala;Dave;7",
    "Tampere;Pirkkala;Alice;4",
]


@pytest.fixture
def sample_index() -> GolfIndex:
    return load_lines(SAMPLE_LINES)


@pytest.fixture
def service(sample_index: GolfIndex) -> GolfQueryService:
    return GolfQueryService(sample_index)


@pytest.fixture
def make_service():
    def _make(lines: list[str]) -> GolfQueryService:
        return GolfQueryService(load_lines(lines))

    return _make


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for name in ("GOLFSTATS_DATA_FILE", "GOLFSTATS_LOG_LEVEL", "GOLFSTATS_PROMPT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()
