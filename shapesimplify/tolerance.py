"""Tolerance radius handling for the chord simplifier."""
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToleranceSnapshot:
    """Tolerance values read together at the start of one simplification."""
    tolerance: float
    squared: float

    @property
    def disabled(self) -> bool:
        return self.tolerance < 0.0


class ToleranceController:
    """
    Owns the tolerance radius and its cached square.

    A negative tolerance disables simplification. A tolerance of 0 only
    removes points lying exactly on a chord.

    Not thread-safe: callers sharing one controller between threads must
    synchronize set_tolerance against running conversions themselves.
    """

    def __init__(self, tolerance: float = 0.0):
        self._tolerance = 0.0
        self._squared = 0.0
        self.set_tolerance(tolerance)

    def set_tolerance(self, tolerance: float) -> None:
        """Set the radius where points are regarded as near."""
        tolerance = float(tolerance)
        self._tolerance = tolerance
        self._squared = tolerance * tolerance
        logger.debug(f"Tolerance set to {tolerance} (squared {self._squared})")

    def get_tolerance(self) -> float:
        return self._tolerance

    def get_squared_tolerance(self) -> float:
        return self._squared

    def is_disabled(self) -> bool:
        return self._tolerance < 0.0

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self.set_tolerance(value)

    @property
    def squared_tolerance(self) -> float:
        return self._squared

    def snapshot(self) -> ToleranceSnapshot:
        return ToleranceSnapshot(self._tolerance, self._squared)

    def __repr__(self) -> str:
        return f"ToleranceController(tolerance={self._tolerance})"
