"""Pytest configuration for primitives2d tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    reset every field allocated by earlier tests.
    """
    from primitives2d.config import init_taichi

    init_taichi("cpu", random_seed=42)
    yield


@pytest.fixture
def unit_vectors():
    """Unit vectors covering the axes, diagonals and an irrational angle."""
    s = 2.0**-0.5
    return [
        (1.0, 0.0),
        (0.0, 1.0),
        (-1.0, 0.0),
        (0.0, -1.0),
        (0.6, 0.8),
        (-0.8, 0.6),
        (s, s),
        (-s, s),
    ]
