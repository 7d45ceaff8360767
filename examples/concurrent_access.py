"""
paramstore Concurrent Access Example

Two reader threads and two writer threads share one store. Every read
sees a whole value, and every write is persisted before the next
operation on the store begins.
"""

import json
import tempfile
import threading
import time
from pathlib import Path

from paramstore import ParameterStore

KEY = "system.audio.volume"


def reader(store: ParameterStore, rounds: int = 10) -> None:
    name = threading.current_thread().name
    for _ in range(rounds):
        print(f"{name} read {KEY}: {store.get(KEY)}")
        time.sleep(0.1)


def writer(store: ParameterStore, rounds: int = 10) -> None:
    name = threading.current_thread().name
    for i in range(rounds):
        value = str(50 + i)
        store.set(KEY, value)
        print(f"{name} set {KEY} to {value}")
        time.sleep(0.1)


def main():
    params_path = Path(tempfile.mkdtemp(prefix="paramstore-")) / "params.json"
    params_path.write_text(json.dumps({
        "system": {
            "audio": {"volume": "50", "mute": "false"},
            "display": {"brightness": "75"},
        }
    }, indent=4), encoding="utf-8")

    with ParameterStore.open(params_path) as store:
        threads = [
            threading.Thread(target=reader, args=(store,), name="reader-1"),
            threading.Thread(target=reader, args=(store,), name="reader-2"),
            threading.Thread(target=writer, args=(store,), name="writer-1"),
            threading.Thread(target=writer, args=(store,), name="writer-2"),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        print(f"\nFinal {KEY}: {store.get(KEY)}")


if __name__ == "__main__":
    main()
