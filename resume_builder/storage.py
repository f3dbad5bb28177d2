"""Form-state persistence - Save/load resume fields as a key-value store.

The builder keeps each form field under its logical key (``personalInfo``,
``summary``, ...) as a JSON-encoded string, the way browser local storage
does. This module reads and writes that layout from a single JSON file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .domain.models import ResumeSnapshot

logger = logging.getLogger(__name__)

RESUME_KEYS = (
    "personalInfo",
    "summary",
    "education",
    "experience",
    "projects",
    "skills",
    "leadership",
)


class StoreError(ValueError):
    """Raised when stored form state cannot be read or decoded."""


def is_store_payload(data: Any) -> bool:
    """True when *data* looks like a key-value store dump rather than a snapshot.

    Store values are JSON-encoded strings, so every known key must hold a
    string that decodes, and a stored summary decodes to a string again. A
    plain snapshot holds objects and lists under the same keys, and its
    summary is raw text.
    """
    if not isinstance(data, dict) or not data:
        return False
    known = [key for key in data if key in RESUME_KEYS]
    if not known:
        return False
    for key in known:
        value = data[key]
        if not isinstance(value, str):
            return False
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            return False
        if key == "summary" and not isinstance(decoded, str):
            return False
    return True


def snapshot_from_store_payload(data: Dict[str, str]) -> ResumeSnapshot:
    """Decode every known key of a store dump and build a snapshot."""
    decoded: Dict[str, Any] = {}
    for key in RESUME_KEYS:
        if key not in data:
            continue
        try:
            decoded[key] = json.loads(data[key])
        except (TypeError, json.JSONDecodeError) as e:
            raise StoreError(f"Stored value for '{key}' is not valid JSON: {e}") from e

    try:
        return ResumeSnapshot.from_dict(decoded)
    except ValidationError as e:
        raise StoreError(f"Stored form state does not match the resume shape: {e}") from e


class ResumeStore:
    """JSON-file backed key-value store for resume form state."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._items: Optional[Dict[str, str]] = None

    # --- key-value API ---

    def get_item(self, key: str) -> Optional[Any]:
        """Return the decoded value under *key*, or None when absent."""
        raw = self._load().get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreError(f"Stored value for '{key}' is not valid JSON: {e}") from e

    def set_item(self, key: str, value: Any) -> None:
        items = self._load()
        items[key] = json.dumps(value)
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._write(items)

    def clear(self) -> None:
        self._write({})

    def keys(self) -> List[str]:
        return list(self._load())

    # --- snapshot API ---

    def load_snapshot(self) -> ResumeSnapshot:
        """Rebuild a snapshot from whatever keys are stored."""
        return snapshot_from_store_payload(self._load())

    def save_snapshot(self, snapshot: ResumeSnapshot) -> None:
        data = snapshot.to_dict()
        items = self._load()
        for key in RESUME_KEYS:
            items[key] = json.dumps(data[key])
        self._write(items)

    # --- file handling ---

    def _load(self) -> Dict[str, str]:
        if self._items is not None:
            return self._items
        if not self.path.exists():
            self._items = {}
            return self._items

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as e:
            raise StoreError(f"Store file is corrupt: {self.path}: {e}") from e
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise StoreError(f"Store file must map keys to JSON strings: {self.path}")

        self._items = data
        return self._items

    def _write(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        self._items = dict(items)
        logger.debug("Wrote %d resume keys to %s", len(items), self.path)
