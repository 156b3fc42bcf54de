"""Generator decorator that simplifies every shape its parent produces."""
import logging
from typing import Optional, Sequence

from shapesimplify.generator import AbstractShapeGenerator, ShapeGeneratorDecorator
from shapesimplify.simplifier import Simplifier
from shapesimplify.tolerance import ToleranceController
from shapesimplify.types import SimplifyConfig

logger = logging.getLogger(__name__)


class ShapeSimplifier(ShapeGeneratorDecorator):
    """
    Simplifies shapes by removing points that lie on a line.

    Given the chord between two points of a shape, all points in between
    can be removed if they lie within the tolerance radius of that chord.
    The default tolerance of 0 only removes points lying exactly on a chord;
    a negative tolerance disables the simplification.
    """

    def __init__(self, parent: AbstractShapeGenerator, tolerance: float = 0.0):
        super().__init__(parent)
        self.controller = ToleranceController(tolerance)
        self.simplifier = Simplifier(self.controller)

    @classmethod
    def from_config(
        cls,
        parent: AbstractShapeGenerator,
        config: Optional[SimplifyConfig] = None
    ) -> "ShapeSimplifier":
        config = config or SimplifyConfig()
        decorator = cls(parent, config.tolerance)
        logger.debug(f"Built {decorator!r} from {config}")
        if config.radius is not None:
            decorator.set_radius(config.radius)
        return decorator

    def set_tolerance(self, tolerance: float) -> None:
        self.controller.set_tolerance(tolerance)

    def get_tolerance(self) -> float:
        return self.controller.get_tolerance()

    def get_squared_tolerance(self) -> float:
        return self.controller.get_squared_tolerance()

    def is_disabled(self) -> bool:
        return self.controller.is_disabled()

    @property
    def tolerance(self) -> float:
        return self.controller.tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self.controller.set_tolerance(value)

    def convert(self, points: Sequence, closed: bool) -> Sequence:
        return self.simplifier.convert(points, closed)

    def __repr__(self) -> str:
        return f"ShapeSimplifier(parent={self.parent!r}, tolerance={self.get_tolerance()})"
