"""
Integration tests for record stores over memory and JSON file backends.

Tests cover:
- Id and timestamp assignment on first save
- Save-first ordering and last-write-wins replacement
- Listing order per collection
- Envelope format on disk, legacy bare arrays, unreadable files
- Remove and clear
"""

import json

import pytest

from vitae.contexts.persistence import (
    ApplicationRecord,
    CommentAnchor,
    CommentRecord,
    ResumeVersionRecord,
    create_json_repositories,
    create_memory_repositories,
)
from vitae.contexts.templating import create_sample_resume


@pytest.fixture(params=["memory", "json"])
def repositories(request, tmp_path):
    if request.param == "memory":
        return create_memory_repositories()
    return create_json_repositories(tmp_path / "data")


def _version(name: str, timestamp: str = "", record_id: str = "") -> ResumeVersionRecord:
    return ResumeVersionRecord(
        id=record_id,
        version_name=name,
        job_description_snapshot=f"Job for {name}",
        selected_bullet_ids=["exp-1-b1"],
        final_resume_content=create_sample_resume(updated_at="2025-01-01T00:00:00.000Z"),
        timestamp=timestamp,
    )


@pytest.mark.integration
def test_version_save_assigns_id_and_timestamp(repositories):
    """Test generated fields on first save."""
    saved = repositories.resume_versions.save(_version("Ops"))

    assert saved.id.startswith("resume-version-")
    assert saved.timestamp.endswith("Z")
    assert repositories.resume_versions.get_by_id(saved.id) == saved


@pytest.mark.integration
def test_versions_list_newest_first(repositories):
    """Test timestamp-descending order regardless of save order."""
    store = repositories.resume_versions
    store.save(_version("middle", "2025-02-01T00:00:00.000Z"))
    store.save(_version("oldest", "2025-01-01T00:00:00.000Z"))
    store.save(_version("newest", "2025-03-01T00:00:00.000Z"))

    assert [version.version_name for version in store.list()] == ["newest", "middle", "oldest"]


@pytest.mark.integration
def test_save_with_existing_id_replaces(repositories):
    """Test last write wins."""
    store = repositories.resume_versions
    first = store.save(_version("Draft", "2025-01-01T00:00:00.000Z"))
    store.save(_version("Renamed", "2025-01-05T00:00:00.000Z", record_id=first.id))

    versions = store.list()
    assert len(versions) == 1
    assert versions[0].version_name == "Renamed"


@pytest.mark.integration
def test_applications_list_most_recently_saved_first(repositories):
    """Test stored order for applications."""
    store = repositories.applications
    helio = store.save(ApplicationRecord(company="Helio Advisory", role="Analyst"))
    store.save(ApplicationRecord(company="Pulse Labs", role="Product Data Analyst Intern", status="Applied"))
    store.save(ApplicationRecord(company="Helio Advisory", role="Analyst", status="Interview", id=helio.id))

    listed = store.list()
    assert [record.company for record in listed] == ["Helio Advisory", "Pulse Labs"]
    assert listed[0].status == "Interview"
    assert helio.id.startswith("application-")


@pytest.mark.integration
def test_applications_by_version(repositories):
    """Test filtering applications linked to a saved version."""
    version = repositories.resume_versions.save(_version("Ops"))
    store = repositories.applications
    store.save(ApplicationRecord(company="Helio Advisory", role="Analyst", resume_version_id=version.id))
    store.save(ApplicationRecord(company="Pulse Labs", role="Intern"))

    assert [record.company for record in store.list_by_version(version.id)] == ["Helio Advisory"]


@pytest.mark.integration
def test_comments_sorted_and_filtered_by_student(repositories):
    """Test comment ordering and student filter."""
    store = repositories.comments
    store.save(CommentRecord("student-1", "Advisor", "Older", created_at="2025-01-01T00:00:00.000Z"))
    store.save(
        CommentRecord(
            "student-2",
            "Advisor",
            "Other student",
            anchor=CommentAnchor("bullet", "exp-1-b1"),
            created_at="2025-06-01T00:00:00.000Z",
        )
    )
    store.save(CommentRecord("student-1", "Advisor", "Newer", created_at="2025-03-01T00:00:00.000Z"))

    assert [comment.body for comment in store.list()] == ["Other student", "Newer", "Older"]
    assert [comment.body for comment in store.list_by_student("student-1")] == ["Newer", "Older"]
    assert store.list()[0].anchor.bullet_id == "exp-1-b1"


@pytest.mark.integration
def test_comment_save_assigns_created_at(repositories):
    """Test generated comment fields."""
    saved = repositories.comments.save(CommentRecord("student-1", "Advisor", "Hi"))

    assert saved.id.startswith("comment-")
    assert saved.created_at.endswith("Z")


@pytest.mark.integration
def test_remove_and_clear(repositories):
    """Test deletion."""
    store = repositories.applications
    first = store.save(ApplicationRecord(company="A", role="R"))
    store.save(ApplicationRecord(company="B", role="R"))

    store.remove(first.id)
    store.remove("application-missing")
    assert [record.company for record in store.list()] == ["B"]
    assert store.get_by_id(first.id) is None

    store.clear()
    assert store.list() == []


@pytest.mark.integration
def test_collections_are_independent(repositories):
    """Test that clearing one collection leaves the others."""
    repositories.resume_versions.save(_version("Ops"))
    repositories.applications.save(ApplicationRecord(company="A", role="R"))

    repositories.resume_versions.clear()

    assert repositories.resume_versions.list() == []
    assert len(repositories.applications.list()) == 1


@pytest.mark.integration
def test_json_files_use_versioned_envelope(tmp_path):
    """Test on-disk shape."""
    repositories = create_json_repositories(tmp_path)
    saved = repositories.applications.save(ApplicationRecord(company="Helio Advisory", role="Analyst"))

    payload = json.loads((tmp_path / "applications.json").read_text(encoding="utf-8"))

    assert payload["schemaVersion"] == 1
    assert payload["data"][0]["id"] == saved.id
    assert payload["data"][0]["jobLink"] == ""


@pytest.mark.integration
def test_json_reads_legacy_bare_array(tmp_path):
    """Test that a bare array file is accepted."""
    (tmp_path / "comments.json").write_text(
        json.dumps(
            [
                {
                    "id": "comment-1",
                    "targetStudentId": "student-1",
                    "resumeVersionId": None,
                    "anchor": {"scope": "resume"},
                    "authorName": "Advisor",
                    "body": "Legacy",
                    "createdAt": "2024-01-01T00:00:00.000Z",
                    "reviewed": True,
                }
            ]
        ),
        encoding="utf-8",
    )

    comments = create_json_repositories(tmp_path).comments.list()

    assert [comment.body for comment in comments] == ["Legacy"]
    assert comments[0].reviewed is True


@pytest.mark.integration
@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"schemaVersion": 2, "data": []}), json.dumps({"rows": []}), json.dumps("text")],
)
def test_json_unreadable_collection_reads_empty(tmp_path, content):
    """Test that corrupt or unknown envelopes read as empty."""
    (tmp_path / "resume_versions.json").write_text(content, encoding="utf-8")

    store = create_json_repositories(tmp_path).resume_versions

    assert store.list() == []
    saved = store.save(_version("Fresh"))
    assert [version.id for version in store.list()] == [saved.id]


@pytest.mark.integration
def test_version_content_is_repaired_on_save(tmp_path):
    """Test that saved resume content is stored fully shaped."""
    store = create_json_repositories(tmp_path).resume_versions
    record = _version("Ops")
    record.final_resume_content.experience[0].section_key = "projects"

    saved = store.save(record)

    assert saved.final_resume_content.experience[0].section_key == "experience"
    assert store.get_by_id(saved.id).final_resume_content.experience[0].section_key == "experience"


@pytest.mark.integration
def test_invalid_rows_are_skipped(tmp_path):
    """Test that one row failing validation leaves the rest of the collection readable."""
    (tmp_path / "applications.json").write_text(
        json.dumps(
            {
                "schemaVersion": 1,
                "data": [
                    {"id": "application-good", "company": "Pulse Labs", "role": "Intern", "status": "Applied"},
                    {"id": "application-bad", "company": "Helio Advisory", "role": "Analyst", "status": "Ghosted"},
                ],
            }
        ),
        encoding="utf-8",
    )
    (tmp_path / "comments.json").write_text(
        json.dumps(
            [
                {"id": "comment-bad", "targetStudentId": "student-1", "anchor": {"scope": "page"}, "body": "?"},
                {"id": "comment-good", "targetStudentId": "student-1", "body": "Fine"},
            ]
        ),
        encoding="utf-8",
    )
    repositories = create_json_repositories(tmp_path)

    assert [record.id for record in repositories.applications.list()] == ["application-good"]
    assert repositories.applications.get_by_id("application-bad") is None
    assert repositories.applications.get_by_id("application-good").status == "Applied"
    assert [comment.id for comment in repositories.comments.list()] == ["comment-good"]


@pytest.mark.integration
def test_invalid_version_content_is_skipped(tmp_path):
    """Test that a stored version with unrepairable resume content is skipped."""
    good = create_json_repositories(tmp_path).resume_versions.save(_version("Ops"))
    payload = json.loads((tmp_path / "resume_versions.json").read_text(encoding="utf-8"))
    broken = dict(payload["data"][0], id="resume-version-broken")
    broken["finalResumeContent"] = dict(broken["finalResumeContent"], experience=["not an entry"])
    payload["data"].append(broken)
    (tmp_path / "resume_versions.json").write_text(json.dumps(payload), encoding="utf-8")

    versions = create_json_repositories(tmp_path).resume_versions.list()

    assert [version.id for version in versions] == [good.id]


@pytest.mark.integration
def test_json_undecodable_bytes_read_empty(tmp_path):
    """Test that a file that is not UTF-8 reads as empty."""
    (tmp_path / "comments.json").write_bytes(b"\xff\xfe\x00garbage")

    store = create_json_repositories(tmp_path).comments

    assert store.list() == []
    saved = store.save(CommentRecord("student-1", "Advisor", "Fresh"))
    assert [comment.id for comment in store.list()] == [saved.id]
