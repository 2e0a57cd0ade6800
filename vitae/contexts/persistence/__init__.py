"""
Persistence Context

Responsibilities:
- Stores the master resume and the saved-version, application and comment collections
- Wraps stored collections in a versioned envelope and reads legacy bare arrays
- Assigns ids and timestamps on first save
- Repairs stored resume documents into complete documents on read

Owns: Record types, store contracts, storage backends
Never: Scores bullets or decides selection
"""

from vitae.contexts.persistence.backends import JsonFileBackend, MemoryBackend, StorageBackend
from vitae.contexts.persistence.contracts import DataRepositories, RecordStore
from vitae.contexts.persistence.master_resume import (
    LoadResult,
    MasterResumeStore,
    load_master_resume_or_sample,
)
from vitae.contexts.persistence.records import (
    APPLICATION_STATUSES,
    ApplicationRecord,
    CommentAnchor,
    CommentRecord,
    ResumeVersionRecord,
)
from vitae.contexts.persistence.stores import (
    ApplicationStore,
    CommentStore,
    ResumeVersionStore,
    create_json_repositories,
    create_memory_repositories,
)

__all__ = [
    # Records
    "APPLICATION_STATUSES",
    "ApplicationRecord",
    "CommentAnchor",
    "CommentRecord",
    "ResumeVersionRecord",
    # Contracts and stores
    "DataRepositories",
    "RecordStore",
    "ApplicationStore",
    "CommentStore",
    "ResumeVersionStore",
    "create_json_repositories",
    "create_memory_repositories",
    # Backends
    "JsonFileBackend",
    "MemoryBackend",
    "StorageBackend",
    # Master resume
    "LoadResult",
    "MasterResumeStore",
    "load_master_resume_or_sample",
]
