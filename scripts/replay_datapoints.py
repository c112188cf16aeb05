#!/usr/bin/env python3
"""
Replay captured Tuya data point messages through the translator.

Each line of the input file is one bridge message as published on
``<base>/datapoint``, e.g. ``{"dp": 24, "value": 235}``. The script feeds them
through the DataPointTranslator of the given model and prints the resulting
capability values, including the derived fan speed.

Usage:
    python scripts/replay_datapoints.py capture.jsonl [--model TYBAC-006] [--output state.json]

The output file can be used in unit tests to check translations against real
device captures.
"""
import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tuya_fancoil import (
    DataPointDecodeError,
    DataPointMapManager,
    DataPointTranslator,
    supported_models,
)


class MemoryStore:
    """Capability store keeping values in a dict."""

    def __init__(self) -> None:
        self.values: dict[str, Any] = {}

    def get_capability_value(self, name: str) -> Any:
        return self.values.get(name)

    async def async_set_capability_value(self, name: str, value: Any) -> None:
        self.values[name] = value


async def replay(path: Path, model: str) -> dict:
    """
    Replay all messages of a capture file.

    Returns a dict with:
    - metadata: timestamp, model, message counts
    - capabilities: final capability values
    """
    store = MemoryStore()
    translator = DataPointTranslator(DataPointMapManager(model), store)
    processed = 0
    skipped = 0

    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                message = json.loads(line)
                dp = int(message["dp"])
                value = message["value"]
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                print(f"  line {line_no}: skipped ({e})")
                skipped += 1
                continue

            try:
                update = translator.translate_incoming(dp, value)
            except DataPointDecodeError as e:
                label = f"decode error ({e})"
            else:
                label = f"{update.capability}={update.value}" if update else "not mapped"
            await translator.async_handle_device_message(dp, value)
            print(f"  dp {dp:>3} = {value!r:<8} -> {label}")
            processed += 1

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "model": model,
            "processed": processed,
            "skipped": skipped,
        },
        "capabilities": store.values,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Replay Tuya data point captures through the translator"
    )
    parser.add_argument("capture", help="JSON lines file with bridge messages")
    parser.add_argument(
        "--model", "-m",
        default="TYBAC-006",
        help=f"Device model (known: {', '.join(supported_models())})"
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the final capability values to this JSON file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show translator debug logging"
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        data = asyncio.run(replay(Path(args.capture), args.model))
    except OSError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    print("\nCapabilities:")
    for name, value in sorted(data["capabilities"].items()):
        print(f"  {name}: {value}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        print(f"\nSaved to: {output_path}")


if __name__ == "__main__":
    main()
