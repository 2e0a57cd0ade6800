"""
Master resume persistence.

The master resume is a single document stored in an envelope:

    {"schemaVersion": 1, "data": {...resume document...}}

load() distinguishes "nothing stored" from "stored but unreadable" so callers
can warn the user before the sample resume replaces a damaged file.
"""

import json
import os
from pathlib import Path
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from vitae.contexts.persistence.backends import SCHEMA_VERSION, write_json_atomic
from vitae.contexts.persistence.logger import _log_debug, _log_warning
from vitae.contexts.templating.defaults import create_sample_resume
from vitae.contexts.templating.normalizer import normalize_resume_document_shape
from vitae.contexts.templating.resume_data_structure import ResumeDocument

load_dotenv()
VITAE_DATA_PATH = Path(os.getenv("VITAE_DATA_PATH", "outs/data"))
MASTER_RESUME_FILE = "master_resume.json"


class LoadResult(NamedTuple):
    resume: Optional[ResumeDocument]
    corrupted: bool


class MasterResumeStore:
    """
    Reads and writes the master resume file.

    Args:
        path: Path to the master resume JSON file
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> LoadResult:
        """
        Load the stored master resume.

        Returns:
            LoadResult(None, False) when nothing is stored,
            LoadResult(None, True) when the file is unreadable or not a
            schemaVersion 1 envelope, otherwise the shape-repaired document
        """
        if not self.path.exists():
            return LoadResult(resume=None, corrupted=False)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            _log_warning(f"Master resume at {self.path} is not valid JSON: {e}")
            return LoadResult(resume=None, corrupted=True)

        if not (isinstance(payload, dict) and payload.get("schemaVersion") == SCHEMA_VERSION and "data" in payload):
            _log_warning(f"Master resume at {self.path} has no schemaVersion {SCHEMA_VERSION} envelope")
            return LoadResult(resume=None, corrupted=True)

        return LoadResult(resume=normalize_resume_document_shape(payload["data"]), corrupted=False)

    def save(self, resume: ResumeDocument) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        write_json_atomic(self.path, {"schemaVersion": SCHEMA_VERSION, "data": resume.to_dict()})
        _log_debug(f"Saved master resume '{resume.version_name}' to {self.path}")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            _log_debug(f"Cleared master resume at {self.path}")

    def load_or_sample(self) -> ResumeDocument:
        """Stored master resume, or the sample resume when none is usable."""
        result = self.load()
        if result.resume is not None:
            return result.resume
        if result.corrupted:
            _log_warning("Stored master resume is unreadable; using sample resume")
        return create_sample_resume()


def load_master_resume_or_sample(path: Path = None) -> ResumeDocument:
    """
    Load the master resume from path (default: VITAE_DATA_PATH/master_resume.json).

    Falls back to the sample resume when the file is missing or unreadable.
    """
    if path is None:
        path = VITAE_DATA_PATH / MASTER_RESUME_FILE
    return MasterResumeStore(path).load_or_sample()
