"""Tests for shape generators and the simplifying decorator."""
import numpy as np
import pytest

from shapesimplify.generator import ShapeGeneratorDecorator, StaticShapeGenerator
from shapesimplify.shape_simplifier import ShapeSimplifier
from shapesimplify.types import (
    GeneratorNotReadyError,
    Shape,
    ShapeNotFoundError,
    SimplifyConfig,
)


class TestStaticShapeGenerator:
    """Test the registry-backed generator."""

    def test_create_shape_is_identity(self, static_generator):
        """Test that a plain generator returns its shape unchanged."""
        shape = static_generator.create_shape("line")
        assert shape.points == [(0, 0), (1, 0), (2, 0), (3, 0)]
        assert not shape.closed

    def test_unknown_identifier(self, static_generator):
        """Test requesting an identifier that was never registered."""
        with pytest.raises(ShapeNotFoundError):
            static_generator.create_shape("missing")

    def test_not_found_is_key_error(self, static_generator):
        """Test that missing shapes can be caught as KeyError."""
        with pytest.raises(KeyError):
            static_generator.generate("missing")

    def test_identifiers(self, static_generator):
        """Test listing registered identifiers in insertion order."""
        assert static_generator.identifiers() == ["square", "line"]

    def test_radius(self, static_generator):
        """Test radius getter, setter and property."""
        assert static_generator.get_radius() == 2.5
        static_generator.radius = 4.0
        assert static_generator.get_radius() == 4.0


class TestShapeSimplifier:
    """Test the decorator shell."""

    def test_simplifies_parent_shapes(self, static_generator):
        """Test that open and closed parent shapes are simplified."""
        simplifier = ShapeSimplifier(static_generator)

        line = simplifier.create_shape("line")
        assert line.points == [(0, 0), (3, 0)]
        assert not line.closed

        square = simplifier.create_shape("square")
        assert square.closed
        np.testing.assert_array_equal(square.points, [[0, 0], [10, 0], [10, 10], [0, 10]])

    def test_parent_output_untouched(self, static_generator):
        """Test that the parent's stored shape is not modified."""
        ShapeSimplifier(static_generator).create_shape("line")
        assert len(static_generator.create_shape("line")) == 4

    def test_disabled_passes_shape_through(self, static_generator):
        """Test that a disabled simplifier returns the parent's shape object."""
        simplifier = ShapeSimplifier(static_generator, tolerance=-1.0)
        assert simplifier.is_disabled()
        assert simplifier.create_shape("line") is static_generator.create_shape("line")

    def test_tolerance_accessors(self, static_generator):
        """Test tolerance accessors on the decorator."""
        simplifier = ShapeSimplifier(static_generator, tolerance=3.0)
        assert simplifier.get_tolerance() == 3.0
        assert simplifier.get_squared_tolerance() == 9.0

        simplifier.tolerance = -2.0
        assert simplifier.is_disabled()
        assert simplifier.tolerance == -2.0

    def test_radius_is_forwarded(self, static_generator):
        """Test that radius reads and writes reach the parent."""
        simplifier = ShapeSimplifier(static_generator)
        # Construction keeps the parent's radius
        assert simplifier.get_radius() == 2.5

        simplifier.set_radius(7.0)
        assert static_generator.get_radius() == 7.0

        static_generator.set_radius(1.0)
        assert simplifier.radius == 1.0

    def test_from_config(self, static_generator):
        """Test building a decorator from a config with a radius."""
        config = SimplifyConfig(tolerance=0.5, radius=3.0)
        simplifier = ShapeSimplifier.from_config(static_generator, config)

        assert simplifier.get_tolerance() == 0.5
        assert static_generator.get_radius() == 3.0

    def test_from_default_config_keeps_radius(self, static_generator):
        """Test that the default config leaves the parent's radius alone."""
        simplifier = ShapeSimplifier.from_config(static_generator)
        assert simplifier.get_tolerance() == 0.0
        assert simplifier.get_radius() == 2.5

    def test_decorators_chain(self, static_generator):
        """Test stacking two simplifiers with different tolerances."""
        generator = StaticShapeGenerator()
        generator.add_shape("bump", [(0, 0), (1, 0), (2, 0.5), (3, 0), (4, 0)])

        exact = ShapeSimplifier(generator, tolerance=0.0)
        loose = ShapeSimplifier(exact, tolerance=1.0)

        assert exact.create_shape("bump").points == [(0, 0), (1, 0), (2, 0.5), (3, 0), (4, 0)]
        assert loose.create_shape("bump").points == [(0, 0), (4, 0)]

        loose.set_radius(9.0)
        assert generator.get_radius() == 9.0


class TestDecoratorParent:
    """Test the parent requirements of the decorator."""

    def test_parent_required(self):
        """Test that a missing parent is rejected at construction."""
        with pytest.raises(GeneratorNotReadyError):
            ShapeSimplifier(None)

    def test_unassigned_parent(self):
        """Test radius access before the parent is assigned."""
        # Bypass __init__ to reach the window before the parent is assigned
        decorator = ShapeGeneratorDecorator.__new__(ShapeGeneratorDecorator)

        decorator.set_radius(5.0)
        with pytest.raises(GeneratorNotReadyError):
            decorator.get_radius()

    def test_construction_does_not_write_parent_radius(self):
        """Test that wrapping a generator leaves its radius untouched."""
        calls = []

        class RecordingGenerator(StaticShapeGenerator):
            def set_radius(self, radius):
                calls.append(radius)
                super().set_radius(radius)

        parent = RecordingGenerator(radius=1.0)
        calls.clear()

        simplifier = ShapeSimplifier(parent)

        assert calls == []
        assert simplifier.get_radius() == 1.0

    def test_plain_decorator_is_identity(self, static_generator):
        """Test that the base decorator passes shapes through."""
        decorator = ShapeGeneratorDecorator(static_generator)
        shape = decorator.create_shape("line")
        assert shape == Shape([(0, 0), (1, 0), (2, 0), (3, 0)], closed=False)
