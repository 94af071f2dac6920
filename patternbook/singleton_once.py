"""Singleton created through a run-once guard."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable


class _Once:
    """Runs a function at most once, even across threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    def do(self, func: Callable[[], None]) -> None:
        if self._done:
            return
        with self._lock:
            if not self._done:
                try:
                    func()
                finally:
                    self._done = True


class Single:
    """The one shared instance."""


_once = _Once()
_instance: Single | None = None


def _create() -> None:
    global _instance
    print("Creating single instance now.")
    _instance = Single()


def get_instance() -> Single | None:
    """Return the shared instance, creating it on first use."""
    if _instance is None:
        _once.do(_create)
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