"""
Tests for Unacy model classes.

Test Organization:
1. BidirectionalConverter
2. ConversionEdge
3. ConversionPath
4. UnitDefinition
"""

import pytest
from pydantic import ValidationError

from unacy.models import BidirectionalConverter, ConversionEdge, ConversionPath, UnitDefinition


def inc(x):
    return x + 1


def dec(x):
    return x - 1


class TestBidirectionalConverter:
    """Tests for BidirectionalConverter."""

    def test_from_field_name(self):
        """Test creation with the from_ field name."""
        pair = BidirectionalConverter(to=inc, from_=dec)

        assert pair.to is inc
        assert pair.from_ is dec

    def test_from_alias(self):
        """Test validation from a mapping using the 'from' key."""
        pair = BidirectionalConverter.model_validate({"to": inc, "from": dec})

        assert pair.from_(5) == 4

    def test_requires_callables(self):
        """Test non-callables are rejected."""
        with pytest.raises(ValidationError):
            BidirectionalConverter.model_validate({"to": 1, "from": dec})


class TestConversionEdge:
    """Tests for ConversionEdge."""

    def test_creation(self):
        """Test edge stores its fields."""
        edge = ConversionEdge(source="m", target="km", converter=inc)

        assert (edge.source, edge.target, edge.converter) == ("m", "km", inc)

    def test_frozen(self):
        """Test edges cannot be modified."""
        edge = ConversionEdge(source="m", target="km", converter=inc)

        with pytest.raises(ValidationError):
            edge.target = "mi"


class TestConversionPath:
    """Tests for ConversionPath."""

    def test_properties(self):
        """Test source, target, hops and pairs."""
        path = ConversionPath(units=("A", "B", "C"))

        assert path.source == "A"
        assert path.target == "C"
        assert path.hops == 2
        assert list(path.pairs()) == [("A", "B"), ("B", "C")]
        assert str(path) == "A → B → C"

    def test_too_short(self):
        """Test a path needs at least one edge."""
        with pytest.raises(ValidationError):
            ConversionPath(units=("A",))

    def test_repeated_unit(self):
        """Test a path cannot revisit a unit."""
        with pytest.raises(ValidationError):
            ConversionPath(units=("A", "B", "A"))


class TestUnitDefinition:
    """Tests for UnitDefinition."""

    def test_to_metadata_omits_unset(self):
        """Test unset optional fields are not stored."""
        definition = UnitDefinition(name="Celsius", symbol="°C")

        assert definition.to_metadata() == {"name": "Celsius", "symbol": "°C"}

    def test_extra_fields_kept(self):
        """Test arbitrary extra keys become metadata."""
        definition = UnitDefinition(name="Kelvin", base_unit=True, offset=273.15)

        assert definition.to_metadata() == {"name": "Kelvin", "base_unit": True, "offset": 273.15}

    def test_name_required(self):
        """Test name is mandatory and non-empty."""
        with pytest.raises(ValidationError):
            UnitDefinition(symbol="X")
        with pytest.raises(ValidationError):
            UnitDefinition(name="")
