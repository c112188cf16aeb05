import pytest

from tuya_fancoil.converters import (
    CONVERTERS,
    decode_value,
    encode_value,
)
from tuya_fancoil.exceptions import DataPointDecodeError, DataPointEncodeError

LOOKUP = {
    "dp": 36,
    "convert": "lookup",
    "values": {0: "open", 1: "closed"},
}
LOOKUP_WITH_FALLBACK = {
    "dp": 2,
    "convert": "lookup",
    "values": {0: "cool", 1: "heat"},
    "fallback": "off",
    "encode_fallback": 2,
}


def test_all_converters_registered():
    assert set(CONVERTERS) == {"raw", "bool", "decidegree", "lookup"}


def test_decidegree():
    entry = {"dp": 24, "convert": "decidegree"}
    assert decode_value(235, entry) == 23.5
    assert encode_value(23.5, entry) == 235
    assert encode_value("21.5", entry) == 215


def test_decidegree_rejects_bool():
    with pytest.raises(DataPointDecodeError):
        decode_value(True, {"dp": 24, "convert": "decidegree"})


@pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf")])
def test_decidegree_rejects_non_finite(raw):
    with pytest.raises(DataPointDecodeError):
        decode_value(raw, {"dp": 24, "convert": "decidegree"})


def test_raw():
    entry = {"dp": 27, "convert": "raw"}
    assert decode_value(-3, entry) == -3
    assert encode_value(2.6, entry) == 3
    with pytest.raises(DataPointDecodeError):
        decode_value(None, entry)
    with pytest.raises(DataPointEncodeError):
        encode_value(None, entry)


def test_bool():
    entry = {"dp": 1, "convert": "bool"}
    assert decode_value(1, entry) is True
    assert decode_value(0, entry) is False
    assert encode_value(0, entry) is False


def test_lookup_without_fallback():
    assert decode_value(1, LOOKUP) == "closed"
    assert encode_value("open", LOOKUP) == 0
    with pytest.raises(DataPointDecodeError):
        decode_value(2, LOOKUP)
    with pytest.raises(DataPointEncodeError):
        encode_value("ajar", LOOKUP)


def test_lookup_with_fallback():
    assert decode_value(5, LOOKUP_WITH_FALLBACK) == "off"
    assert decode_value([1], LOOKUP_WITH_FALLBACK) == "off"
    assert encode_value("dry", LOOKUP_WITH_FALLBACK) == 2
