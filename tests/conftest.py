"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import math

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would reset
    the runtime between tests.
    """
    from whitted.core.runtime import init_runtime

    init_runtime("cpu")
    yield


@pytest.fixture
def default_world():
    """The two-sphere world with a light at (-10, 10, -10)."""
    from whitted.scene.world import World

    return World.default()


@pytest.fixture
def sqrt2_over_2():
    return math.sqrt(2.0) / 2.0
