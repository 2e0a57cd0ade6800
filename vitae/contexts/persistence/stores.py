"""
Record stores for resume versions, applications and comments.

All three share one save rule: the saved record goes first and any stored row
with the same id is dropped (last write wins). Listing order differs:
- resume versions: newest timestamp first
- applications: stored order (most recently saved first)
- comments: newest createdAt first

Examples:
    >>> repositories = create_json_repositories(Path("outs/data"))
    >>> saved = repositories.applications.save(ApplicationRecord(company="Helio", role="Analyst"))
    >>> saved.id
    'application-3f9c2a1b'
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List

from vitae.contexts.persistence.backends import JsonFileBackend, MemoryBackend, StorageBackend
from vitae.contexts.persistence.contracts import DataRepositories, RecordStore
from vitae.contexts.persistence.logger import _log_warning, log_record_removed, log_record_saved
from vitae.contexts.persistence.records import ApplicationRecord, CommentRecord, ResumeVersionRecord
from vitae.contexts.templating.defaults import generate_id
from vitae.contexts.templating.normalizer import normalize_resume_document_shape
from vitae.utils.timestamp import now_exact

RESUME_VERSIONS_COLLECTION = "resume_versions"
APPLICATIONS_COLLECTION = "applications"
COMMENTS_COLLECTION = "comments"


class BackendRecordStore(RecordStore):
    """
    RecordStore over a StorageBackend collection.

    Subclasses set the record class, collection name and id prefix, and may
    override prepare() (fill fields on save) and order() (listing order).
    """

    record_class = None
    collection = ""
    id_prefix = ""

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    def _rows(self) -> List[Dict[str, Any]]:
        rows = []
        for index, row in enumerate(self.backend.read_rows(self.collection)):
            if not isinstance(row, dict):
                _log_warning(f"Skipping non-object row {index} in '{self.collection}'")
                continue
            rows.append(row)
        return rows

    def _records(self) -> list:
        records = []
        for row in self._rows():
            try:
                records.append(self.record_class.from_dict(row))
            except (ValueError, KeyError, TypeError) as e:
                _log_warning(f"Skipping invalid row '{row.get('id', '?')}' in '{self.collection}': {e}")
        return records

    def prepare(self, record):
        """Fill generated fields on a record about to be saved."""
        return replace(record, id=record.id or generate_id(self.id_prefix))

    def order(self, records: list) -> list:
        return records

    def list(self) -> list:
        return self.order(self._records())

    def get_by_id(self, record_id: str):
        for record in self._records():
            if record.id == record_id:
                return record
        return None

    def save(self, record):
        prepared = self.prepare(record)
        rows = self._rows()
        remaining = [row for row in rows if row.get("id") != prepared.id]
        self.backend.write_rows(self.collection, [prepared.to_dict(), *remaining])
        log_record_saved(self.collection, prepared.id, replaced=len(remaining) < len(rows))
        return prepared

    def remove(self, record_id: str) -> None:
        rows = self._rows()
        remaining = [row for row in rows if row.get("id") != record_id]
        self.backend.write_rows(self.collection, remaining)
        log_record_removed(self.collection, record_id, found=len(remaining) < len(rows))

    def clear(self) -> None:
        self.backend.write_rows(self.collection, [])


class ResumeVersionStore(BackendRecordStore):
    record_class = ResumeVersionRecord
    collection = RESUME_VERSIONS_COLLECTION
    id_prefix = "resume-version"

    def prepare(self, record: ResumeVersionRecord) -> ResumeVersionRecord:
        return replace(
            record,
            id=record.id or generate_id(self.id_prefix),
            timestamp=record.timestamp or now_exact(),
            final_resume_content=normalize_resume_document_shape(record.final_resume_content.to_dict()),
        )

    def order(self, records: List[ResumeVersionRecord]) -> List[ResumeVersionRecord]:
        return sorted(records, key=lambda record: record.timestamp, reverse=True)


class ApplicationStore(BackendRecordStore):
    record_class = ApplicationRecord
    collection = APPLICATIONS_COLLECTION
    id_prefix = "application"

    def list_by_version(self, resume_version_id: str) -> List[ApplicationRecord]:
        """Applications linked to one saved resume version."""
        return [record for record in self.list() if record.resume_version_id == resume_version_id]


class CommentStore(BackendRecordStore):
    record_class = CommentRecord
    collection = COMMENTS_COLLECTION
    id_prefix = "comment"

    def prepare(self, record: CommentRecord) -> CommentRecord:
        return replace(
            record,
            id=record.id or generate_id(self.id_prefix),
            created_at=record.created_at or now_exact(),
        )

    def order(self, records: List[CommentRecord]) -> List[CommentRecord]:
        return sorted(records, key=lambda record: record.created_at, reverse=True)

    def list_by_student(self, target_student_id: str) -> List[CommentRecord]:
        return [record for record in self.list() if record.target_student_id == target_student_id]


def _repositories_over(backend: StorageBackend) -> DataRepositories:
    return DataRepositories(
        resume_versions=ResumeVersionStore(backend),
        applications=ApplicationStore(backend),
        comments=CommentStore(backend),
    )


def create_memory_repositories() -> DataRepositories:
    """Fresh in-memory repositories (nothing shared between calls)."""
    return _repositories_over(MemoryBackend())


def create_json_repositories(directory: Path) -> DataRepositories:
    """
    File-backed repositories under a data directory.

    Args:
        directory: Directory holding resume_versions.json, applications.json
            and comments.json (created on first save)
    """
    return _repositories_over(JsonFileBackend(directory))
