"""
Tests for converter composition.
"""

import pytest

from unacy.core.graph import UnitGraph, compose_converters
from unacy.models import ConversionPath
from unacy.utils.exceptions import MissingEdgeError, ValidationError


@pytest.mark.unit
class TestComposeConverters:
    """Tests for chaining converters along a path."""

    def test_applies_left_to_right(self):
        """Test composition order: g(f(x)), not f(g(x))."""
        graph = UnitGraph().add_edge("A", "B", lambda x: x + 1).add_edge("B", "C", lambda x: x * 10)

        composed = compose_converters(["A", "B", "C"], graph)

        assert composed(2) == 30

    def test_accepts_conversion_path(self):
        """Test a ConversionPath model is accepted as-is."""
        graph = UnitGraph().add_edge("A", "B", lambda x: x * 2).add_edge("B", "C", lambda x: x * 3)

        composed = compose_converters(ConversionPath(units=("A", "B", "C")), graph)

        assert composed(1) == 6

    def test_single_edge_path(self):
        """Test a 2-unit path behaves like the edge converter."""
        graph = UnitGraph().add_edge("A", "B", lambda x: -x)

        assert compose_converters(["A", "B"], graph)(4) == -4

    def test_no_rounding(self):
        """Test float results pass through untouched."""
        graph = UnitGraph().add_edge("A", "B", lambda x: x / 3).add_edge("B", "C", lambda x: x * 3)

        assert compose_converters(["A", "B", "C"], graph)(1.0) == (1.0 / 3) * 3

    def test_missing_edge_raises(self):
        """Test a stale path referencing a missing edge fails."""
        graph = UnitGraph().add_edge("A", "B", lambda x: x)

        with pytest.raises(MissingEdgeError) as exc_info:
            compose_converters(["A", "B", "C"], graph)

        assert exc_info.value.source == "B"
        assert exc_info.value.target == "C"

    def test_path_too_short(self):
        """Test a 1-unit path is rejected."""
        with pytest.raises(ValidationError):
            compose_converters(["A"], UnitGraph())

    def test_path_with_repeated_unit(self):
        """Test a path revisiting a unit is rejected."""
        graph = UnitGraph().add_edge("A", "B", lambda x: x).add_edge("B", "A", lambda x: x)

        with pytest.raises(ValidationError):
            compose_converters(["A", "B", "A"], graph)

    def test_converter_errors_propagate(self):
        """Test exceptions from user converters are not wrapped."""

        def boom(x):
            raise ZeroDivisionError("bad input")

        graph = UnitGraph().add_edge("A", "B", lambda x: x).add_edge("B", "C", boom)

        with pytest.raises(ZeroDivisionError):
            compose_converters(["A", "B", "C"], graph)(1)
