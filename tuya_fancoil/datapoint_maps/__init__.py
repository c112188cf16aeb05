"""Per-model Tuya data point tables."""
