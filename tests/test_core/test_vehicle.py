import dataclasses

import pytest

from parkinglot.core.exceptions import InvalidVehicleError
from parkinglot.core.types import SlotSize, Vehicle


class TestVehicle:
    """Tests for the Vehicle value object."""

    def test_init(self):
        vehicle = Vehicle("CG25NG2506", SlotSize.SMALL)

        assert vehicle.vehicle_number == "CG25NG2506"
        assert vehicle.size is SlotSize.SMALL

    def test_vehicle_is_immutable(self):
        """Test that a vehicle cannot be changed after creation."""
        vehicle = Vehicle("CG25NG2506", SlotSize.SMALL)

        with pytest.raises(dataclasses.FrozenInstanceError):
            vehicle.size = SlotSize.LARGE

    def test_equality_and_hash(self):
        """Test that vehicles with the same number and size are equal."""
        a = Vehicle("AB12", SlotSize.LARGE)
        b = Vehicle("AB12", SlotSize.LARGE)

        assert a == b
        assert hash(a) == hash(b)
        assert a != Vehicle("AB12", SlotSize.OVERSIZE)

    @pytest.mark.parametrize("number", ["", "   ", "\t\n", None])
    def test_blank_number_raises_error(self, number):
        with pytest.raises(InvalidVehicleError, match="cannot be null or empty"):
            Vehicle(number, SlotSize.SMALL)

    def test_unknown_size_raises_error(self):
        with pytest.raises(InvalidVehicleError, match="must be a SlotSize"):
            Vehicle("AB12", "SMALL")

    def test_invalid_vehicle_is_value_error(self):
        with pytest.raises(ValueError):
            Vehicle("", SlotSize.SMALL)

    def test_str(self):
        assert str(Vehicle("AB12", SlotSize.OVERSIZE)) == "Vehicle(AB12, OVERSIZE)"
