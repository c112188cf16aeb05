"""
Value converters for Tuya data points.

Each data point descriptor names a converter ("convert" key). A converter is a
pair of functions: ``decode(raw, entry)`` turns the transport-decoded raw value
into a capability value, ``encode(value, entry)`` turns a capability value back
into the raw value written to the device.

- raw:        identity, integer on the way out
- bool:       truthiness in both directions
- decidegree: raw / 10 inbound, round(value * 10) outbound
- lookup:     ordinal <-> string via the descriptor's "values" table,
              "fallback" / "encode_fallback" for anything outside it
"""
from __future__ import annotations

import math
from typing import Any, Callable

from .const import DECIDEGREE_FACTOR
from .exceptions import DataPointDecodeError, DataPointEncodeError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def decode_raw(raw: Any, entry: dict[str, Any]) -> Any:
    """Pass the raw value through unchanged."""
    if raw is None:
        raise DataPointDecodeError(f"Missing value for data point {entry['dp']}")
    return raw


def encode_raw(value: Any, entry: dict[str, Any]) -> int:
    """Encode a plain integer value."""
    try:
        return int(round(float(value)))
    except (TypeError, ValueError) as err:
        raise DataPointEncodeError(
            f"Cannot encode {value!r} for data point {entry['dp']}"
        ) from err


def decode_bool(raw: Any, entry: dict[str, Any]) -> bool:
    """Decode a boolean data point."""
    if raw is None:
        raise DataPointDecodeError(f"Missing value for data point {entry['dp']}")
    return bool(raw)


def encode_bool(value: Any, entry: dict[str, Any]) -> bool:
    """Encode a boolean data point."""
    return bool(value)


def decode_decidegree(raw: Any, entry: dict[str, Any]) -> float:
    """Convert decidegrees to degrees."""
    if not _is_number(raw) or not math.isfinite(raw):
        raise DataPointDecodeError(
            f"Expected a number for data point {entry['dp']}, got {raw!r}"
        )
    return raw / DECIDEGREE_FACTOR


def encode_decidegree(value: Any, entry: dict[str, Any]) -> int:
    """Convert degrees to decidegrees."""
    try:
        return int(round(float(value) * DECIDEGREE_FACTOR))
    except (TypeError, ValueError) as err:
        raise DataPointEncodeError(
            f"Cannot encode temperature {value!r} for data point {entry['dp']}"
        ) from err


def decode_lookup(raw: Any, entry: dict[str, Any]) -> str:
    """Map an enum ordinal to its string value."""
    values: dict[int, str] = entry["values"]
    if isinstance(raw, int) and not isinstance(raw, bool) and raw in values:
        return values[raw]
    if "fallback" in entry:
        return entry["fallback"]
    raise DataPointDecodeError(
        f"Unexpected value {raw!r} for data point {entry['dp']}"
    )


def encode_lookup(value: Any, entry: dict[str, Any]) -> int:
    """Map a string value to its enum ordinal."""
    for ordinal, name in entry["values"].items():
        if name == value:
            return ordinal
    if "encode_fallback" in entry:
        return entry["encode_fallback"]
    raise DataPointEncodeError(
        f"Unexpected value {value!r} for data point {entry['dp']}"
    )


CONVERTERS: dict[str, tuple[Callable[[Any, dict], Any], Callable[[Any, dict], Any]]] = {
    "raw": (decode_raw, encode_raw),
    "bool": (decode_bool, encode_bool),
    "decidegree": (decode_decidegree, encode_decidegree),
    "lookup": (decode_lookup, encode_lookup),
}


def decode_value(raw: Any, entry: dict[str, Any]) -> Any:
    """Decode a raw value using the converter named in the descriptor."""
    decode, _ = CONVERTERS[entry["convert"]]
    return decode(raw, entry)


def encode_value(value: Any, entry: dict[str, Any]) -> Any:
    """Encode a capability value using the converter named in the descriptor."""
    _, encode = CONVERTERS[entry["convert"]]
    return encode(value, entry)
