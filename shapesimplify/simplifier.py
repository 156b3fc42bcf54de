"""Greedy chord simplification of point sequences.

Interior points are dropped when they lie within the tolerance radius of the
chord between two retained points. Runs are grown left to right and committed
immediately; a run is never shrunk or revisited once the next one starts.
"""
import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from shapesimplify.geometry import as_point_array, dist_points_segment_sqr
from shapesimplify.tolerance import ToleranceController
from shapesimplify.types import Shape

logger = logging.getLogger(__name__)


class Run:
    """
    A chord between two points of the original sequence.

    Starts as the minimal run of two directly following points
    (end = start + 1) and is grown as long as every point strictly
    between start and end stays within tolerance of the chord.
    """

    def __init__(
        self,
        points: np.ndarray,
        closed: bool,
        start: int,
        squared_tolerance: float
    ):
        self.points = points
        self.closed = closed
        self.start = start
        self.end = start + 1
        self.squared_tolerance = squared_tolerance

    def advance_end(self) -> None:
        self.end += 1

    def decrease_end(self) -> None:
        self.end -= 1

    def valid_end(self) -> bool:
        """Whether the end point could still be moved past."""
        n = len(self.points)
        # The last point of an open shape must start a run of its own
        return self.end < n if self.closed else self.end < n - 1

    def get_start(self) -> np.ndarray:
        return self.points[self.start]

    def get_end(self) -> np.ndarray:
        # Closed shapes wrap around to the first point
        return self.points[self.end % len(self.points)]

    def interior_dist_sqr(self) -> np.ndarray:
        """Squared distances of the points strictly inside the run to its chord."""
        return dist_points_segment_sqr(
            self.get_start(),
            self.get_end(),
            self.points[self.start + 1:self.end]
        )

    def can_take_next(self) -> bool:
        """Whether the end point can be advanced by one."""
        if not self.valid_end():
            return False

        self.advance_end()
        try:
            # All interior points are rechecked, the chord moved with the end
            ok = bool(np.all(self.interior_dist_sqr() <= self.squared_tolerance))
        finally:
            self.decrease_end()
        return ok

    def grow(self) -> "Run":
        while self.can_take_next():
            self.advance_end()
        return self

    def __repr__(self) -> str:
        return f"Run(start={self.start}, end={self.end}, closed={self.closed})"


class Simplifier:
    """Removes points lying within a tolerance of the chord of retained points."""

    def __init__(self, tolerance: Union[float, ToleranceController] = 0.0):
        if isinstance(tolerance, ToleranceController):
            self.controller = tolerance
        else:
            self.controller = ToleranceController(tolerance)

    def build_runs(
        self,
        points: Sequence,
        closed: bool,
        squared_tolerance: Optional[float] = None
    ) -> List[Run]:
        """
        Grow maximal runs over the whole sequence.

        Args:
            points: Point sequence, left untouched
            closed: Whether the last point connects back to the first
            squared_tolerance: Override of the controller's squared tolerance

        Returns:
            Finalized runs in creation order
        """
        arr = as_point_array(points)
        arr.setflags(write=False)

        if squared_tolerance is None:
            squared_tolerance = self.controller.get_squared_tolerance()

        runs = []
        start = 0
        while start < len(arr):
            run = Run(arr, closed, start, squared_tolerance).grow()
            runs.append(run)
            start = run.end

        return runs

    def convert(self, points: Sequence, closed: bool):
        """
        Simplify a point sequence.

        Disabled tolerances and sequences of fewer than 3 points are
        returned unchanged (the same object).

        Args:
            points: (N, 2) array or sequence of points
            closed: Whether the shape is drawn closed

        Returns:
            The start point of every run; an array for array input,
            otherwise a list of the original elements
        """
        snapshot = self.controller.snapshot()
        if snapshot.disabled or len(points) < 3:
            return points

        runs = self.build_runs(points, closed, squared_tolerance=snapshot.squared)
        indices = [run.start for run in runs]

        logger.debug(
            f"Simplified {len(points)} points to {len(indices)} "
            f"(tolerance={snapshot.tolerance}, closed={closed})"
        )

        if isinstance(points, np.ndarray):
            return points[indices]
        return [points[i] for i in indices]

    def convert_shape(self, shape: Shape) -> Shape:
        """Simplify a shape, keeping its closed flag."""
        points = self.convert(shape.points, shape.closed)
        if points is shape.points:
            return shape
        return Shape(points, shape.closed)


def simplify_points(points: Sequence, tolerance: float = 0.0, closed: bool = False):
    """
    Simplify a point sequence with a one-off tolerance.

    Args:
        points: Array of (x, y) points
        tolerance: Chord distance radius, negative disables simplification
        closed: Whether the last point connects back to the first

    Returns:
        Simplified points
    """
    return Simplifier(tolerance).convert(points, closed)


def simplify_shapes(shapes: List[Shape], tolerance: float = 0.0) -> List[Shape]:
    """Simplify multiple shapes with one tolerance."""
    simplifier = Simplifier(tolerance)
    return [simplifier.convert_shape(s) for s in shapes]
