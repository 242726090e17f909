"""Pytest configuration and shared fixtures for labsched tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph construction
- A fixture parametrized over every graph representation
"""

import os
from typing import Callable

import numpy as np
import pytest

from labsched.graphs import REPRESENTATIONS, LabelGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(params=sorted(REPRESENTATIONS))
def representation(request) -> str:
    """Name of each graph representation in turn."""
    return request.param


@pytest.fixture
def make_graph(representation: str) -> Callable[..., LabelGraph]:
    """Factory for empty graphs of the current representation."""

    def _make(name: str = "") -> LabelGraph:
        return REPRESENTATIONS[representation](name=name)

    return _make
