"""Pytest configuration: fast-by-default TDD setup.

Slow tests (large randomized comparisons against the scalar reference) are
skipped unless --slow is passed.
Run the full suite:   pytest --slow
Run fast tests only:  pytest          (default)
"""
import numpy as np
import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="Run slow tests that stretch large random images",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--slow"):
        return  # run everything
    skip_slow = pytest.mark.skip(reason="slow test skipped, pass --slow to include")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def checker():
    """2x2 grayscale pixels with distinct values in every corner."""
    return np.array([[0, 100], [200, 50]], dtype=np.uint8)
