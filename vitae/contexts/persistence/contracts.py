"""
Store contracts.

Every record collection exposes the same five operations. Callers receive a
DataRepositories bundle explicitly (from create_memory_repositories() in tests
or create_json_repositories() in scripts); there is no process-wide store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")


class RecordStore(ABC, Generic[RecordT]):
    """Abstract store for one record collection."""

    @abstractmethod
    def list(self) -> List[RecordT]:
        """All records, in the collection's listing order."""

    @abstractmethod
    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        """Record with this id, or None."""

    @abstractmethod
    def save(self, record: RecordT) -> RecordT:
        """Insert or replace a record; returns the stored form (id and timestamps filled)."""

    @abstractmethod
    def remove(self, record_id: str) -> None:
        """Delete the record with this id (no-op when absent)."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every record in the collection."""


@dataclass
class DataRepositories:
    """Bundle of the three record stores handed to callers."""

    resume_versions: RecordStore
    applications: RecordStore
    comments: RecordStore
