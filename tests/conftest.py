"""
Pytest configuration and shared fixtures.

Every test runs against its own configuration directory so nothing touches
the real user configuration.
"""

from pathlib import Path
from typing import Callable

import pendulum
import pytest

from planning import configuration
from planning.model.task import RawRecord
from planning.repository.configuration import CONFIGURATION_REPO
from planning.view import state as view_state


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    yield config_path
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)


@pytest.fixture
def today() -> pendulum.Date:
    """Fixed reference day for fallback spans."""
    return pendulum.date(2025, 4, 10)


@pytest.fixture
def kickoff_records() -> list[RawRecord]:
    return [
        RawRecord("PHASE 1:", "", "1 avril 2025"),
        RawRecord("Réunion de lancement", "Fait", "1 avril 2025 → 3 avril 2025"),
    ]


@pytest.fixture
def write_planning(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory fixture writing a planning CSV file.

    Usage:
        def test_example(write_planning):
            path = write_planning("projet", "Nom,Dates\\nTask,1 avril 2025\\n")
    """
    plannings_path = tmp_path / "plannings"

    def _write(name: str, content: str, subdirectory: str = "") -> Path:
        directory = plannings_path / subdirectory if subdirectory else plannings_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name}.csv"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def kickoff_csv() -> str:
    return (
        "Nom,Statut ,Dates\n"
        "PHASE 1:,,1 avril 2025\n"
        "Réunion de lancement,Fait,1 avril 2025 → 3 avril 2025\n"
        "Rédaction du cahier des charges,En cours,4 avril 2025 → 2 mai 2025\n"
    )
