"""
Pytest unit tests for the derived fan speed.

Run with: pytest tests/test_fan_speed.py -v
"""
import pytest

from tests.conftest import FakeCapabilityStore
from tuya_fancoil import DataPointMapManager, DataPointTranslator, compute_fan_speed


# =============================================================================
# compute_fan_speed Tests
# =============================================================================

class TestComputeFanSpeed:
    """Tests for the fan speed policy."""

    @pytest.mark.parametrize("fan_mode", ["low", "medium", "high"])
    def test_fixed_fan_mode_passes_through(self, fan_mode):
        """Test that a non-auto fan mode is returned regardless of other inputs."""
        assert compute_fan_speed(fan_mode, "off", "closed", None, None) == fan_mode
        assert compute_fan_speed(fan_mode, "heat", "open", 21.0, 15.0) == fan_mode

    def test_auto_thermostat_off(self):
        """Test that an inactive thermostat means no airflow."""
        assert compute_fan_speed("auto", "off", "open", 21.0, 18.0) == "off"

    def test_auto_fan_only_mode(self):
        """Test that fan only mode is not treated as heating or cooling."""
        assert compute_fan_speed("auto", "fan_only", "open", 21.0, 18.0) == "off"

    def test_auto_valve_closed(self):
        """Test that a closed valve means no airflow."""
        assert compute_fan_speed("auto", "heat", "closed", 21.0, 18.0) == "off"

    def test_auto_small_difference(self):
        """Test that a difference below 0.5 keeps the fan off."""
        assert compute_fan_speed("auto", "heat", "open", 21.0, 21.3) == "off"

    def test_auto_large_difference(self):
        """Test that a difference of 2.5 or more runs the fan on high."""
        assert compute_fan_speed("auto", "heat", "open", 21.0, 18.0) == "high"

    @pytest.mark.parametrize(
        "measured,expected",
        [
            (24.0, "off"),
            (24.5, "low"),
            (25.4, "low"),
            (25.5, "medium"),
            (26.4, "medium"),
            (26.5, "high"),
        ],
    )
    def test_auto_cooling_buckets(self, measured, expected):
        """Test the bucket boundaries while cooling."""
        assert compute_fan_speed("auto", "cool", "open", 24.0, measured) == expected

    @pytest.mark.parametrize(
        "target,measured,expected",
        [
            (16.4, 15.9, "low"),
            (15.4, 16.9, "medium"),
            (15.4, 17.9, "high"),
            (20.3, 20.7, "off"),
        ],
    )
    def test_auto_bucket_edges_not_subject_to_float_error(self, target, measured, expected):
        """Test that differences which are inexact in floating point still hit the edge."""
        assert compute_fan_speed("auto", "heat", "open", target, measured) == expected

    @pytest.mark.parametrize("measured", [float("nan"), float("inf")])
    def test_non_finite_temperature_is_off(self, measured):
        """Test that a non-finite temperature never selects a speed."""
        assert compute_fan_speed("auto", "heat", "open", 21.0, measured) == "off"

    def test_unknown_valve_state_counts_as_open(self):
        """Test that only an explicit closed valve stops the fan."""
        assert compute_fan_speed("auto", "heat", None, 21.0, 19.0) == "medium"

    @pytest.mark.parametrize(
        "target,measured", [(None, 20.0), (21.0, None), ("warm", 20.0)]
    )
    def test_missing_temperature_is_off(self, target, measured):
        """Test that missing temperatures are treated as inactive."""
        assert compute_fan_speed("auto", "heat", "open", target, measured) == "off"

    @pytest.mark.parametrize("fan_mode", [None, "turbo", 3])
    def test_unknown_fan_mode_is_off(self, fan_mode):
        """Test that an unknown fan mode never raises."""
        assert compute_fan_speed(fan_mode, "heat", "open", 21.0, 18.0) == "off"


# =============================================================================
# DataPointTranslator.get_fan_speed Tests
# =============================================================================

class TestGetFanSpeed:
    """Tests for reading fan speed inputs from the store."""

    def test_reads_current_store_values(self):
        """Test that the translator re-reads the store on every call."""
        store = FakeCapabilityStore(
            {
                "fan_mode": "auto",
                "thermostat_mode": "cool",
                "valve_status": "open",
                "target_temperature": 22.0,
                "measure_temperature": 23.6,
            }
        )
        translator = DataPointTranslator(DataPointMapManager("fancoil"), store)
        assert translator.get_fan_speed() == "medium"

        store.values["measure_temperature"] = 22.2
        assert translator.get_fan_speed() == "off"

    def test_empty_store(self):
        """Test that an empty store yields off."""
        translator = DataPointTranslator(
            DataPointMapManager("fancoil"), FakeCapabilityStore()
        )
        assert translator.get_fan_speed() == "off"
