"""
paramstore Quickstart Example

This example walks through the basic lifecycle of a parameter file:

1. Open an existing JSON document
2. Read string values by dotted key
3. Write a value and see it persisted atomically
4. The typed errors for missing files, bad JSON and unknown keys
"""

import json
import logging
import tempfile
from pathlib import Path

from paramstore import (
    KeyNotFoundError,
    ParameterStore,
    ParseError,
    StoreNotFoundError,
    StoreSettings,
    configure_logging,
)

SAMPLE = {
    "system": {
        "audio": {"volume": "50", "mute": "false"},
        "display": {"brightness": "75"},
    }
}


def main():
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    settings = StoreSettings.from_env()
    configure_logging(settings)

    workdir = Path(tempfile.mkdtemp(prefix="paramstore-"))
    params_path = workdir / "params.json"
    params_path.write_text(json.dumps(SAMPLE, indent=4), encoding="utf-8")

    # ==========================================================================
    # Open, Get, Set
    # ==========================================================================
    print("=" * 60)
    print("paramstore Quickstart")
    print("=" * 60)

    with ParameterStore.open(params_path, settings) as store:
        print(f"\nOpened {store.path}")
        print(f"system.audio.volume = {store.get('system.audio.volume')}")

        store.set("system.audio.volume", "75")
        print(f"After set: system.audio.volume = {store.get('system.audio.volume')}")

    print("\nFile on disk:")
    print(params_path.read_text(encoding="utf-8"))

    # ==========================================================================
    # Error Cases
    # ==========================================================================
    print("\n" + "-" * 40)
    print("Error cases")
    print("-" * 40)

    try:
        ParameterStore.open(workdir / "nonexistent.json", settings)
    except StoreNotFoundError as e:
        print(f"Missing file:  {e}")

    invalid_path = workdir / "invalid.json"
    invalid_path.write_text("invalid json content", encoding="utf-8")
    try:
        ParameterStore.open(invalid_path, settings)
    except ParseError as e:
        print(f"Invalid JSON:  {e}")

    with ParameterStore.open(params_path, settings) as store:
        before = params_path.read_bytes()
        try:
            store.get("system.invalid.key")
        except KeyNotFoundError as e:
            print(f"Unknown key:   {e}")
        try:
            store.set("system.invalid.key", "100")
        except KeyNotFoundError as e:
            print(f"Set unknown:   {e}")
        print(f"File unchanged: {params_path.read_bytes() == before}")


if __name__ == "__main__":
    main()
