"""Module: saved_state.py.

Author: Michael Economou
Date: 2026-10-18

SavedStateStore - keyed scalar state that survives process restarts.

Values are plain JSON scalars. get_state() hands out an observable StateValue
per key; every change of that cell is written through to the JSON file.
Writes go to a temporary file first and replace the target atomically; the
previous file is kept as <name>.bak and used when the main file is corrupt.
Without a path the store keeps values in memory only.
"""

from __future__ import annotations

import json
import os
import shutil
import threading
from functools import partial
from pathlib import Path
from typing import Any

from colorpick.utils.events import StateValue
from colorpick.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class SavedStateStore:
    """Key-value store of persisted screen state."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._lock = threading.RLock()
        self._states: dict[str, StateValue[Any]] = {}
        self._values: dict[str, Any] = self._load()

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def backup_path(self) -> Path | None:
        if self._path is None:
            return None
        return self._path.with_name(self._path.name + ".bak")

    def get_state(self, key: str, default: Any) -> StateValue[Any]:
        """Return the observable cell for `key`.

        A previously persisted value wins over `default`. Repeated calls with
        the same key return the same cell.
        """
        with self._lock:
            state = self._states.get(key)
            if state is None:
                state = StateValue(self._values.get(key, default))
                self._values[key] = state.value
                state.value_changed.connect(partial(self._on_state_changed, key))
                self._states[key] = state
            return state

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a value, through its cell when one was handed out."""
        with self._lock:
            state = self._states.get(key)
        if state is not None:
            state.value = value
        else:
            self._on_state_changed(key, value)

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._values

    def _on_state_changed(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value
            logger.debug("[SavedStateStore] %s = %r", key, value, extra={"dev_only": True})
            self.save()

    # =====================================
    # Persistence
    # =====================================

    def save(self) -> bool:
        """Write all values to disk. Returns False when nothing could be written."""
        if self._path is None:
            return True

        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                if self._path.exists():
                    shutil.copy2(self._path, self.backup_path)

                tmp_path = self._path.with_name(self._path.name + ".tmp")
                with tmp_path.open("w", encoding="utf-8") as f:
                    json.dump(self._values, f, indent=2, sort_keys=True)
                os.replace(tmp_path, self._path)
                return True
            except (OSError, TypeError, ValueError):
                logger.exception("[SavedStateStore] Failed to save state to %s", self._path)
                return False

    def _load(self) -> dict[str, Any]:
        if self._path is None:
            return {}

        for candidate in (self._path, self.backup_path):
            if candidate is None or not candidate.exists():
                continue
            try:
                with candidate.open(encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("[SavedStateStore] Cannot read %s: %s", candidate, e)
                continue
            if not isinstance(data, dict):
                logger.warning("[SavedStateStore] Ignoring non-object state in %s", candidate)
                continue
            logger.info("[SavedStateStore] Loaded %d value(s) from %s", len(data), candidate)
            return data

        return {}
