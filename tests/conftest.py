"""Pytest configuration for ray tracer tests.

Shared fixtures for the test modules. The core tracer is plain Python, so
Taichi is only initialized for the preview tests that ask for it.
"""

import numpy as np
import pytest
import taichi as ti


@pytest.fixture(scope="session")
def taichi_cpu():
    """Initialize Taichi once for the session, on demand.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture(scope="session")
def cornell_scene():
    """The default Cornell box scene (immutable, shared by all tests)."""
    from cornell_rt.scene import create_cornell_box_scene

    return create_cornell_box_scene()


@pytest.fixture
def rng():
    """A freshly seeded random generator for each test."""
    return np.random.default_rng(1234)


@pytest.fixture
def white_material():
    """Plain diffuse white material."""
    from cornell_rt.core.ray import Vector3
    from cornell_rt.materials import Material

    return Material(color=Vector3(1.0, 1.0, 1.0))
