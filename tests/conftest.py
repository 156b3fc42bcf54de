"""Pytest configuration and fixtures."""
import numpy as np
import pytest

from shapesimplify.generator import StaticShapeGenerator


@pytest.fixture
def zigzag():
    """Open polyline with small wiggles around y=0 and one sharp peak."""
    return [(0, 0), (1, 0.1), (2, -0.1), (3, 0.05), (4, 3), (5, 0), (6, 0.1), (7, 0)]


@pytest.fixture
def dense_square():
    """Closed square with many points per side, shape (N, 2)."""
    top = [[i, 0] for i in range(10)]
    right = [[10, i] for i in range(10)]
    bottom = [[i, 10] for i in range(10, 0, -1)]
    left = [[0, i] for i in range(10, 0, -1)]
    return np.array(top + right + bottom + left, dtype=float)


@pytest.fixture
def static_generator(dense_square):
    """Generator serving a closed square and an open line."""
    generator = StaticShapeGenerator(radius=2.5)
    generator.add_shape("square", dense_square, closed=True)
    generator.add_shape("line", [(0, 0), (1, 0), (2, 0), (3, 0)], closed=False)
    return generator
