'''Tuya Data Point Map Manager'''
import importlib
import logging
from copy import deepcopy
from typing import Any, Dict, List, Optional

from ..const import MODEL_DEFAULT, MODEL_FANCOIL, MODEL_TYBAC_006

_LOGGER = logging.getLogger(__name__)

# Data-driven model -> maps configuration, merged in order
MODEL_MAPS = {
    MODEL_TYBAC_006: [
        "datapoint_map_all",
        "datapoint_map_fancoil",
        "datapoint_map_fancoil_extended",
    ],
    MODEL_FANCOIL: ["datapoint_map_all", "datapoint_map_fancoil"],
    # default fallback is treated as the basic fan-coil firmware
    MODEL_DEFAULT: ["datapoint_map_all", "datapoint_map_fancoil"],
}


def supported_models() -> list[str]:
    """Return the model ids that have a dedicated data point table."""
    return [model for model in MODEL_MAPS if model != MODEL_DEFAULT]


class DataPointMapManager:
    """Manages data point maps for different device models."""

    def __init__(self, model_id: str, map_attr: str = "DATAPOINT_MAP"):
        self.model_id = model_id
        self._package = __package__
        self._map_attr = map_attr
        self._map_names = self._select_maps_for_model(model_id)

        merged: Dict[str, Dict[str, Any]] = {}
        for name in self._map_names:
            _LOGGER.debug("Merging data point map: %s", name)
            merged = self._merge_maps(merged, self._load_map(name))
        self._merged_map = merged

        self._by_dp = {int(entry["dp"]): entry for entry in merged.values()}
        self._by_capability = {entry["capability"]: entry for entry in merged.values()}

    def _select_maps_for_model(self, model_id: str) -> List[str]:
        """Return the list of map modules for a model id."""
        if model_id not in MODEL_MAPS:
            _LOGGER.warning(
                "No data point map for model %s, using %s", model_id, MODEL_DEFAULT
            )
        # return a copy to avoid accidental external mutation
        return list(MODEL_MAPS.get(model_id, MODEL_MAPS[MODEL_DEFAULT]))

    def _load_map(self, module_name: str) -> Dict[str, Dict[str, Any]]:
        """Load a data point map from a module by name (module must be in package)."""
        full_module_name = f"{self._package}.{module_name}"
        try:
            mod = importlib.import_module(full_module_name)
        except ImportError as exc:
            _LOGGER.debug("Module %s not found: %s", full_module_name, exc)
            return {}

        try:
            full_map = deepcopy(getattr(mod, self._map_attr))
        except AttributeError as exc:
            _LOGGER.debug(
                "Attribute %s missing in %s: %s", self._map_attr, full_module_name, exc
            )
            return {}

        # Skip the "model" marker and anything else that is not a descriptor
        return {k: v for k, v in full_map.items() if isinstance(v, dict)}

    def _merge_maps(self, base: Dict, override: Dict) -> Dict:
        """Entries in override replace entries of the same name in base."""
        merged = deepcopy(base) if base else {}
        merged.update(deepcopy(override) or {})
        return merged

    def get_all_datapoints(self) -> Dict[str, Dict[str, Any]]:
        """Get the merged data point map."""
        return self._merged_map

    def get_by_dp(self, dp: int) -> Optional[Dict[str, Any]]:
        """Get the descriptor for a data point id."""
        return self._by_dp.get(dp)

    def get_by_capability(self, capability: str) -> Optional[Dict[str, Any]]:
        """Get the descriptor for a capability or setting name."""
        return self._by_capability.get(capability)

    def get_fan_speed_inputs(self) -> List[str]:
        """Get the capabilities that feed the derived fan speed."""
        return [
            entry["capability"]
            for entry in self._merged_map.values()
            if entry.get("fan_speed_input")
        ]

    def get_capability_values(self, capability: str) -> List[str]:
        """Get the enumerated values of a lookup capability."""
        entry = self.get_by_capability(capability)
        if not entry or entry["convert"] != "lookup":
            return []
        return list(entry["values"].values())

    def get_settable_values(self, capability: str) -> List[str]:
        """Get the values of a lookup capability that can be written as is.

        The decode fallback is included only when its encode ordinal is not
        already taken by another value; otherwise writing it would select
        that other value on the device.
        """
        values = self.get_capability_values(capability)
        if not values:
            return []
        entry = self.get_by_capability(capability)
        fallback = entry.get("fallback")
        if (
            fallback is not None
            and fallback not in values
            and "encode_fallback" in entry
            and entry["encode_fallback"] not in entry["values"]
        ):
            values.append(fallback)
        return values

    @property
    def map_names(self) -> list[str]:
        """Get the merged map names."""
        return self._map_names
