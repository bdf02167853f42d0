"""Pytest configuration and shared fixtures for kitchen cabinet tests."""

from __future__ import annotations

import pytest

from kitchen_cabinets.application import CabinetRequest, GenerateCabinetCommand
from kitchen_cabinets.domain import (
    Cabinet,
    CabinetGenerator,
    CabinetType,
    CutListBuilder,
    Dimensions,
    DrillPatternLibrary,
    LengthUnit,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def generator() -> CabinetGenerator:
    return CabinetGenerator()


@pytest.fixture
def builder() -> CutListBuilder:
    return CutListBuilder()


@pytest.fixture
def library() -> DrillPatternLibrary:
    return DrillPatternLibrary()


@pytest.fixture
def base_cabinet(generator: CabinetGenerator) -> Cabinet:
    """A 24" base cabinet: two doors, one shelf, with back."""
    return generator.generate(CabinetType.BASE, 24)


@pytest.fixture
def mm_cabinet() -> Cabinet:
    """A 600mm wide, 720mm tall, 600mm deep base box in 18mm board."""
    return Cabinet(
        id="mm-base",
        cabinet_type=CabinetType.BASE,
        dimensions=Dimensions(600, 720, 600, 18, unit=LengthUnit.MILLIMETER),
        door_count=2,
        shelf_count=1,
    )


# =============================================================================
# Application fixtures
# =============================================================================


@pytest.fixture
def generate_command() -> GenerateCabinetCommand:
    return GenerateCabinetCommand()


@pytest.fixture
def base_request() -> CabinetRequest:
    return CabinetRequest(cabinet_type="base", width=24)
