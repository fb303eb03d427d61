"""
One-shot background load of the word list.

The front-end starts the load, keeps its own start-up going, and blocks in
`wait()` right before the first game. The list is published once and never
touched again, so no locking is needed beyond the thread join. A failure is
logged and re-raised from `wait()`; there is no retry.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from .io import WordList, load_word_list

logger = logging.getLogger(__name__)


class BackgroundLoad:
    def __init__(self, path: Path | str, loader: Callable[[Path | str], WordList] = load_word_list):
        self.path = path
        self._loader = loader
        self._result: Optional[WordList] = None
        self._error: Optional[BaseException] = None
        self._thread = threading.Thread(target=self._run, name="word-list-load", daemon=True)

    def start(self) -> "BackgroundLoad":
        self._thread.start()
        return self

    def _run(self) -> None:
        try:
            self._result = self._loader(self.path)
        except Exception as exc:
            logger.exception("Failed loading word list from %s", self.path)
            self._error = exc

    @property
    def done(self) -> bool:
        return self._result is not None or self._error is not None

    def wait(self, timeout: float | None = None) -> WordList:
        """Block until the load finishes; return the list or raise its error."""
        self._thread.join(timeout)
        if self._thread.is_alive():
            raise TimeoutError(f"word list load from {self.path} still running after {timeout}s")
        if self._error is not None:
            raise self._error
        assert self._result is not None
        return self._result
