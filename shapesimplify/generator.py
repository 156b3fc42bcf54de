"""Shape generators and the decorator base for post-processing them."""
from abc import ABC, abstractmethod
from typing import Dict, Hashable, List, Optional, Sequence

from shapesimplify.types import Shape, ShapeNotFoundError, GeneratorNotReadyError


class AbstractShapeGenerator(ABC):
    """
    Produces shapes for identifiers.

    The radius is whatever parameter the generator uses to control the
    size or spacing of its points. Subclasses implement generate();
    create_shape() runs the result through convert().
    """

    def __init__(self, radius: float = 0.0):
        self.set_radius(radius)

    def set_radius(self, radius: float) -> None:
        self._radius = radius

    def get_radius(self) -> float:
        return self._radius

    @property
    def radius(self) -> float:
        return self.get_radius()

    @radius.setter
    def radius(self, value: float) -> None:
        self.set_radius(value)

    @abstractmethod
    def generate(self, identifier: Hashable) -> Shape:
        """Produce the raw shape for an identifier."""

    def convert(self, points: Sequence, closed: bool) -> Sequence:
        """Post-process the generated points. Identity by default."""
        return points

    def create_shape(self, identifier: Hashable) -> Shape:
        raw = self.generate(identifier)
        points = self.convert(raw.points, raw.closed)
        if points is raw.points:
            return raw
        return Shape(points, raw.closed)


class ShapeGeneratorDecorator(AbstractShapeGenerator):
    """
    Wraps another generator and post-processes its shapes.

    The radius belongs to the parent: reads and writes are forwarded.
    """

    _parent: Optional[AbstractShapeGenerator] = None

    def __init__(self, parent: AbstractShapeGenerator):
        if parent is None:
            raise GeneratorNotReadyError("A shape generator decorator needs a parent generator")
        # Radius writes are no-ops until the parent is assigned
        super().__init__()
        self._parent = parent

    @property
    def parent(self) -> AbstractShapeGenerator:
        return self._parent

    def set_radius(self, radius: float) -> None:
        # No parent yet while the decorator is being set up
        if self._parent is not None:
            self._parent.set_radius(radius)

    def get_radius(self) -> float:
        if self._parent is None:
            raise GeneratorNotReadyError("Radius requested before the parent generator was assigned")
        return self._parent.get_radius()

    def generate(self, identifier: Hashable) -> Shape:
        return self._parent.create_shape(identifier)


class StaticShapeGenerator(AbstractShapeGenerator):
    """Serves shapes registered up front. The radius is stored but not used."""

    def __init__(self, shapes: Optional[Dict[Hashable, Shape]] = None, radius: float = 0.0):
        super().__init__(radius)
        self._shapes: Dict[Hashable, Shape] = dict(shapes or {})

    def add_shape(self, identifier: Hashable, points: Sequence, closed: bool = False) -> Shape:
        shape = Shape(points, closed)
        self._shapes[identifier] = shape
        return shape

    def identifiers(self) -> List[Hashable]:
        return list(self._shapes)

    def generate(self, identifier: Hashable) -> Shape:
        try:
            return self._shapes[identifier]
        except KeyError:
            raise ShapeNotFoundError(f"No shape registered for {identifier!r}") from None
