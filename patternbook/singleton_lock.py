"""Singleton guarded by a lock with a double check."""

from __future__ import annotations

import sys
import threading


class Single:
    """The one shared instance."""


_lock = threading.Lock()
_instance: Single | None = None


def get_instance() -> Single:
    """Return the shared instance, creating it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                print("Creating single instance now.")
                _instance = Single()
            else:
                print("Single instance already created.")
    else:
        print("Single instance already created.")
    return _instance


def main(argv: list[str] | None = None) -> None:
    threads = [threading.Thread(target=get_instance) for _ in range(30)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    sys.stdin.readline()


if __name__ == "__main__":
    main()