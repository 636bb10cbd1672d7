"""
Tests for raw-to-physical calibration
"""
import pytest

from cluster_dash.config.settings import ClusterSettings, ConfigurationError
from cluster_dash.models.readings import PhysicalReading, SensorSample
from cluster_dash.utils.calibration import (
    adc_to_coolant_c,
    adc_to_fuel_liters,
    calibrate,
    clamp,
    map_linear,
)


class TestMapLinear:
    """Test the clamped integer interpolation"""

    def test_interpolates_inside_range(self) -> None:
        """Test a value inside the input range"""
        assert map_linear(500, 100, 900, 0, 120) == 60
        assert map_linear(100, 100, 900, 0, 120) == 0
        assert map_linear(900, 100, 900, 0, 120) == 120

    def test_truncates_toward_zero(self) -> None:
        """Test that fractional results are truncated, not floored"""
        assert map_linear(20, 0, 70, 8, 3) == 7
        assert map_linear(35, 0, 70, 8, 3) == 6

    def test_output_always_clamped(self) -> None:
        """Test that every raw input maps inside [out_min, out_max]"""
        for raw in range(-500, 5000, 13):
            out = map_linear(raw, 100, 900, 0, 120)
            assert 0 <= out <= 120

    def test_reversed_output_clamped(self) -> None:
        """Test clamping when the output range is given high-to-low"""
        for value in range(-50, 150, 3):
            out = map_linear(value, 0, 70, 8, 3)
            assert 3 <= out <= 8

    def test_monotonic_for_increasing_input_range(self) -> None:
        """Test that output never decreases as the raw value increases"""
        previous = None
        for raw in range(0, 4096, 7):
            out = map_linear(raw, 80, 900, 0, 50)
            if previous is not None:
                assert out >= previous
            previous = out

    def test_reversed_input_range(self) -> None:
        """Test a sender whose count falls as the quantity rises"""
        assert map_linear(900, 900, 100, 0, 120) == 0
        assert map_linear(100, 900, 100, 0, 120) == 120
        assert map_linear(500, 900, 100, 0, 120) == 60

    def test_equal_input_bounds_is_configuration_error(self) -> None:
        """Test that a zero-width input range is rejected"""
        with pytest.raises(ConfigurationError):
            map_linear(10, 100, 100, 0, 120)

    def test_exact_for_large_integers(self) -> None:
        """Test that wide ranges map without float rounding"""
        big = 10**18
        assert map_linear(big - 1, 0, big, 0, big) == big - 1
        assert map_linear(big - 1, 0, big, big, 0) == 1
        assert map_linear(3 * big + 1, 0, 4 * big, 0, 4 * big) == 3 * big + 1

    def test_negative_quotient_truncates_toward_zero(self) -> None:
        """Test -10/3 -> -3, where floor division would give -4"""
        assert map_linear(1, 0, 3, 10, 0) == 7
        assert map_linear(2, 3, 0, 0, 10) == 3


class TestClamp:
    """Test clamp helper"""

    def test_clamp(self) -> None:
        """Test clamping in both bound orders"""
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10
        assert clamp(11, 10, 0) == 10


class TestSensorConversion:
    """Test the coolant and fuel instantiations"""

    def test_coolant_conversion(self) -> None:
        """Test ADC counts to Celsius with default calibration"""
        s = ClusterSettings()
        assert adc_to_coolant_c(500, s) == 60
        assert adc_to_coolant_c(234, s) == 20
        assert adc_to_coolant_c(4095, s) == 120
        assert adc_to_coolant_c(0, s) == 0

    def test_fuel_conversion(self) -> None:
        """Test ADC counts to liters with default calibration"""
        s = ClusterSettings()
        assert adc_to_fuel_liters(80, s) == 0
        assert adc_to_fuel_liters(900, s) == 50
        assert adc_to_fuel_liters(0, s) == 0
        assert adc_to_fuel_liters(4095, s) == 50

    def test_calibrate_sample(self) -> None:
        """Test building a PhysicalReading from a SensorSample"""
        sample = SensorSample(oil_switch=False, coolant_raw=500, fuel_raw=80)
        assert calibrate(sample, ClusterSettings()) == PhysicalReading(coolant_c=60, fuel_liters=0)
