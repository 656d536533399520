"""Pytest configuration and shared fixtures for kitchen planner tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from kitchen_planner.domain import (
    CabinetPreset,
    CabinetUnit,
    Obstacle,
    ObstacleType,
    Project,
    ProjectSettings,
    Zone,
    ZoneId,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "projects"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def settings() -> ProjectSettings:
    """Default global cabinet dimensions."""
    return ProjectSettings()


@pytest.fixture
def door_zone() -> Zone:
    """A 3000mm wall with a 900mm door starting at 1000mm and no cabinets."""
    return Zone(
        id=ZoneId.WALL_A,
        total_length=3000,
        active=True,
        obstacles=[Obstacle(ObstacleType.DOOR, from_left=1000, width=900)],
    )


@pytest.fixture
def project() -> Project:
    """A new project with a few manual cabinets on WALL_A."""
    project = Project.new("Test Kitchen")
    wall_a = project.zone(ZoneId.WALL_A)
    wall_a.add_cabinet(CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600))
    wall_a.add_cabinet(CabinetUnit.for_preset(CabinetPreset.BASE_DRAWER_3, 450))
    wall_a.add_cabinet(CabinetUnit.for_preset(CabinetPreset.WALL_STD, 600))
    return project


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    """Copy of the sample project file in a temporary directory."""
    path = tmp_path / "kitchen.json"
    path.write_text((FIXTURES_PATH / "sample_kitchen.json").read_text())
    return path
