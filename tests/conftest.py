"""Pytest configuration and shared fixtures for carcass tests."""

from __future__ import annotations

import pytest

from carcass.application import DesignCommands, DesignState
from carcass.domain import Part, PartType, TemplateConfig, generate_cabinet


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_cabinet() -> list[Part]:
    """600x720x560 single compartment with one shelf and shared walls."""
    return generate_cabinet(600, 720, 560, compartments=1, shelves_per_compartment=1)


@pytest.fixture
def two_compartment_cabinet() -> list[Part]:
    """800x720x560 with two compartments and two shelves each."""
    return generate_cabinet(800, 720, 560, compartments=2, shelves_per_compartment=2)


@pytest.fixture
def commands() -> DesignCommands:
    return DesignCommands()


@pytest.fixture
def template_state(commands: DesignCommands) -> DesignState:
    """Design state holding the generated default cabinet."""
    return commands.apply_template(DesignState.initial(), TemplateConfig()).state


def _make_part(
    part_id: str,
    part_type: PartType = PartType.SHELF,
    x: float = 0,
    y: float = 0,
    z: float = 0,
    w: float = 100,
    h: float = 100,
    d: float = 100,
    **kwargs,
) -> Part:
    """Build a part with compact defaults for geometry tests."""
    return Part(part_id, part_type, x, y, z, w, h, d, **kwargs)


@pytest.fixture
def make_part():
    """Factory fixture building parts with compact defaults."""
    return _make_part
