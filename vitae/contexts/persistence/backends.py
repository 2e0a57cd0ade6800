"""
Storage backends for record collections.

A backend stores named collections of plain dict rows and knows nothing about
record types. Stores (stores.py) sit on top and handle ids, timestamps and
ordering.

JsonFileBackend writes one file per collection:

    {"schemaVersion": 1, "data": [ {...}, {...} ]}

Reading is forgiving: a missing file is an empty collection, a bare JSON array
(legacy shape) is accepted, and an unreadable file or unknown envelope reads as
empty with a warning. Writing goes through a temp file and a move so a failed
write never leaves a half-written collection behind.
"""

import json
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from vitae.contexts.persistence.logger import log_unreadable_collection

SCHEMA_VERSION = 1


def wrap_envelope(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA_VERSION, "data": rows}


def unwrap_envelope(payload: Any, location: str) -> List[Dict[str, Any]]:
    """
    Extract rows from a decoded collection payload.

    Returns an empty list (and logs) for anything that is neither a bare array
    nor a schemaVersion 1 envelope holding an array.
    """
    if isinstance(payload, list):
        return payload
    if (
        isinstance(payload, dict)
        and payload.get("schemaVersion") == SCHEMA_VERSION
        and isinstance(payload.get("data"), list)
    ):
        return payload["data"]
    log_unreadable_collection(location, "unrecognized envelope")
    return []


class StorageBackend(ABC):
    """Reads and writes whole collections of dict rows."""

    @abstractmethod
    def read_rows(self, collection: str) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def write_rows(self, collection: str, rows: List[Dict[str, Any]]) -> None:
        pass


class MemoryBackend(StorageBackend):
    """
    In-process backend for tests.

    Rows are stored as encoded JSON text so callers never share mutable
    structure with the stored collection, matching file-backed behaviour.
    """

    def __init__(self):
        self._collections: Dict[str, str] = {}

    def read_rows(self, collection: str) -> List[Dict[str, Any]]:
        raw = self._collections.get(collection)
        if raw is None:
            return []
        return unwrap_envelope(json.loads(raw), f"memory:{collection}")

    def write_rows(self, collection: str, rows: List[Dict[str, Any]]) -> None:
        self._collections[collection] = json.dumps(wrap_envelope(rows))


class JsonFileBackend(StorageBackend):
    """
    One JSON file per collection under a data directory.

    Args:
        directory: Data directory (created on first write)
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def collection_path(self, collection: str) -> Path:
        return self.directory / f"{collection}.json"

    def read_rows(self, collection: str) -> List[Dict[str, Any]]:
        path = self.collection_path(collection)
        if not path.exists():
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log_unreadable_collection(str(path), f"invalid JSON: {e}")
            return []

        return unwrap_envelope(payload, str(path))

    def write_rows(self, collection: str, rows: List[Dict[str, Any]]) -> None:
        path = self.collection_path(collection)
        self.directory.mkdir(parents=True, exist_ok=True)
        write_json_atomic(path, wrap_envelope(rows))


def write_json_atomic(path: Path, payload: Any) -> None:
    """Write payload as JSON to path via a temp file in the same directory."""
    temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=path.parent, text=True)
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.write("\n")

        # Only overwrite original if write succeeded
        shutil.move(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
