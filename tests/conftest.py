"""Pytest configuration and shared fixtures for tote rack tests."""

from __future__ import annotations

import pytest

from toterack.application import GenerateQuoteCommand, QuoteInput
from toterack.domain import ContainerDims, Layout


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def tote_27gal() -> ContainerDims:
    """Outside dimensions of a common 27 gallon tote."""
    return ContainerDims(length=30.25, width=20.25, height=14.125)


@pytest.fixture
def layout_3x3() -> Layout:
    """Three bays across, three stacked."""
    return Layout(columns=3, rows=3)


@pytest.fixture
def quote_command() -> GenerateQuoteCommand:
    """Create a GenerateQuoteCommand instance."""
    return GenerateQuoteCommand()


@pytest.fixture
def quote_input_3x3(tote_27gal: ContainerDims, layout_3x3: Layout) -> QuoteInput:
    """Default quote input for a 3x3 rack of 27 gallon totes."""
    return QuoteInput(container=tote_27gal, layout=layout_3x3)
