"""Chord tolerance simplification for 2D shapes."""
from shapesimplify.types import (
    Point,
    Shape,
    SimplifyConfig,
    ShapeError,
    GeneratorNotReadyError,
    ShapeNotFoundError,
    ContourError,
)
from shapesimplify.tolerance import ToleranceController, ToleranceSnapshot
from shapesimplify.simplifier import Run, Simplifier, simplify_points, simplify_shapes
from shapesimplify.generator import (
    AbstractShapeGenerator,
    ShapeGeneratorDecorator,
    StaticShapeGenerator,
)
from shapesimplify.shape_simplifier import ShapeSimplifier
from shapesimplify.contour_generator import MaskContourGenerator

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Shape",
    "SimplifyConfig",
    "ShapeError",
    "GeneratorNotReadyError",
    "ShapeNotFoundError",
    "ContourError",
    "ToleranceController",
    "ToleranceSnapshot",
    "Run",
    "Simplifier",
    "simplify_points",
    "simplify_shapes",
    "AbstractShapeGenerator",
    "ShapeGeneratorDecorator",
    "StaticShapeGenerator",
    "ShapeSimplifier",
    "MaskContourGenerator",
]
