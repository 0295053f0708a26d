"""Tests for domain/model/measurement.py."""

import pytest

from calltree.domain.exceptions import DimensionMismatchError
from calltree.domain.model.measurement import Measurement, MeasurementVector


class TestMeasurement:
    """Tests for Measurement value object."""

    def test_defaults_are_zero(self) -> None:
        m = Measurement()
        assert (m.total_time, m.self_time, m.wait_time) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("field", ["total_time", "self_time", "wait_time"])
    def test_negative_raises(self, field: str) -> None:
        with pytest.raises(ValueError, match=f"{field} must be >= 0"):
            Measurement(**{field: -1.0})

    def test_from_engine_clamps_rounding_residue(self) -> None:
        total = 0.1 + 0.2
        m = Measurement.from_engine(total, 0.3 - total, 0.0)
        assert m.total_time == total
        assert m.self_time == 0.0

    def test_from_engine_keeps_real_negatives_invalid(self) -> None:
        with pytest.raises(ValueError, match="self_time must be >= 0"):
            Measurement.from_engine(1.0, -0.5, 0.0)

    def test_from_engine_custom_tolerance(self) -> None:
        assert Measurement.from_engine(wait_time=-0.001, tolerance=0.01).wait_time == 0.0


class TestMeasurementVectorCreation:
    """Tests for MeasurementVector construction."""

    def test_of_one_dimension(self) -> None:
        vector = MeasurementVector.of((10.0, 4.0, 1.0))
        assert vector.dimensions == 1
        assert vector.total() == 10.0
        assert vector.self_time() == 4.0
        assert vector.wait() == 1.0

    def test_of_several_dimensions(self) -> None:
        vector = MeasurementVector.of((10.0, 4.0, 1.0), (200.0, 50.0, 0.0))
        assert len(vector) == 2
        assert vector.total(1) == 200.0
        assert vector.self_time(1) == 50.0

    def test_zeros(self) -> None:
        vector = MeasurementVector.zeros(3)
        assert vector.dimensions == 3
        assert all(m == Measurement() for m in vector)

    def test_zeros_invalid_raises(self) -> None:
        with pytest.raises(ValueError, match="dimensions must be >= 1"):
            MeasurementVector.zeros(0)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one dimension"):
            MeasurementVector([])

    def test_non_measurement_raises(self) -> None:
        with pytest.raises(TypeError, match="expected Measurement"):
            MeasurementVector([(1.0, 1.0, 1.0)])  # type: ignore[list-item]

    def test_from_measurements(self) -> None:
        vector = MeasurementVector.from_measurements(iter([Measurement(1.0, 1.0, 0.0)]))
        assert vector[0] == Measurement(1.0, 1.0, 0.0)


class TestMeasurementVectorAccumulation:
    """Tests for pairwise accumulation."""

    def test_add_total_only(self) -> None:
        vector = MeasurementVector.of((10.0, 4.0, 1.0))
        vector.add_total(MeasurementVector.of((4.0, 2.0, 2.0)))
        assert vector[0] == Measurement(14.0, 4.0, 1.0)

    def test_add_self_only(self) -> None:
        vector = MeasurementVector.of((10.0, 4.0, 1.0))
        vector.add_self(MeasurementVector.of((4.0, 2.0, 2.0)))
        assert vector[0] == Measurement(10.0, 6.0, 1.0)

    def test_add_wait_only(self) -> None:
        vector = MeasurementVector.of((10.0, 4.0, 1.0))
        vector.add_wait(MeasurementVector.of((4.0, 2.0, 2.0)))
        assert vector[0] == Measurement(10.0, 4.0, 3.0)

    def test_add_all_dimensions(self) -> None:
        vector = MeasurementVector.of((1.0, 1.0, 0.0), (10.0, 5.0, 0.0))
        vector.add(MeasurementVector.of((2.0, 1.0, 1.0), (20.0, 5.0, 3.0)))
        assert vector == MeasurementVector.of((3.0, 2.0, 1.0), (30.0, 10.0, 3.0))

    def test_other_unchanged(self) -> None:
        vector = MeasurementVector.of((1.0, 1.0, 0.0))
        other = MeasurementVector.of((2.0, 1.0, 1.0))
        vector.add(other)
        assert other == MeasurementVector.of((2.0, 1.0, 1.0))

    @pytest.mark.parametrize("method", ["add", "add_total", "add_self", "add_wait"])
    def test_mismatch_raises(self, method: str) -> None:
        vector = MeasurementVector.of((1.0, 1.0, 0.0))
        other = MeasurementVector.of((1.0, 1.0, 0.0), (1.0, 1.0, 0.0))
        with pytest.raises(DimensionMismatchError):
            getattr(vector, method)(other)

    def test_mismatch_leaves_vector_unchanged(self) -> None:
        vector = MeasurementVector.of((1.0, 1.0, 0.0))
        with pytest.raises(DimensionMismatchError):
            vector.add(MeasurementVector.zeros(2))
        assert vector == MeasurementVector.of((1.0, 1.0, 0.0))
