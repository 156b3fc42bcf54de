"""Core types and exceptions for shape simplification."""
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Iterator

import numpy as np


@dataclass(frozen=True)
class Point:
    """2D point with float coordinates."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class Shape:
    """Ordered point sequence, optionally closed back onto its first point."""
    points: Sequence
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.closed == other.closed and np.array_equal(self.as_array(), other.as_array())

    __hash__ = None

    def as_array(self) -> np.ndarray:
        """Return the points as an (N, 2) float array."""
        from shapesimplify.geometry import as_point_array
        return as_point_array(self.points)


@dataclass
class SimplifyConfig:
    """Configuration for a simplifying shape pipeline."""
    # Chord distance below which interior points are dropped, < 0 disables
    tolerance: float = 0.0

    # Passed through to the upstream generator when set
    radius: Optional[float] = None

    def __post_init__(self):
        if math.isnan(self.tolerance):
            import warnings

            warnings.warn(
                "SimplifyConfig tolerance is NaN, no point will pass the chord test."
            )


class ShapeError(Exception):
    """Base exception for shape generation and simplification errors."""
    pass


class GeneratorNotReadyError(ShapeError):
    """Raised when a decorator is used before its parent generator is assigned."""
    pass


class ShapeNotFoundError(ShapeError, KeyError):
    """Raised when a generator has no shape for the requested identifier."""
    pass


class ContourError(ShapeError):
    """Exception raised during contour extraction."""
    pass
