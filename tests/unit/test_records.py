"""Unit tests for persisted record types."""

import pytest

from vitae.contexts.persistence.records import (
    APPLICATION_STATUSES,
    ApplicationRecord,
    CommentAnchor,
    CommentRecord,
    ResumeVersionRecord,
)
from vitae.contexts.templating import create_sample_resume


@pytest.mark.unit
def test_resume_version_record_dict_shape():
    """Test camelCase keys of a version record."""
    record = ResumeVersionRecord(
        id="resume-version-1",
        version_name="Ops",
        job_description_snapshot="Operations analyst",
        selected_bullet_ids=["exp-1-b2"],
        final_resume_content=create_sample_resume(updated_at="2025-01-01T00:00:00.000Z"),
        timestamp="2025-01-02T00:00:00.000Z",
    )

    data = record.to_dict()

    assert set(data) == {
        "id",
        "versionName",
        "jobDescriptionSnapshot",
        "selectedBulletIds",
        "finalResumeContent",
        "timestamp",
    }
    assert data["finalResumeContent"]["versionName"] == "Master Resume"
    assert ResumeVersionRecord.from_dict(data) == record


@pytest.mark.unit
def test_resume_version_from_dict_repairs_legacy_content():
    """Test that a partial stored document is repaired on read."""
    record = ResumeVersionRecord.from_dict(
        {"id": "v1", "versionName": "Old", "finalResumeContent": {"versionName": "Old"}}
    )

    assert record.selected_bullet_ids == []
    assert record.final_resume_content.version_name == "Old"
    assert len(record.final_resume_content.experience) == 2


@pytest.mark.unit
def test_application_record_defaults_and_shape():
    """Test application defaults and optional snapshot key."""
    record = ApplicationRecord(company="Helio Advisory", role="Analyst")

    data = record.to_dict()

    assert record.status == "Wishlist"
    assert data["resumeVersionId"] is None
    assert "jobDescriptionSnapshot" not in data
    assert ApplicationRecord.from_dict(data) == record


@pytest.mark.unit
def test_application_status_is_validated():
    """Test closed status vocabulary."""
    assert APPLICATION_STATUSES == ("Wishlist", "Applied", "Interview", "Offer", "Rejected")
    with pytest.raises(ValueError, match="Invalid application status"):
        ApplicationRecord(company="Pulse Labs", role="Intern", status="Ghosted")


@pytest.mark.unit
def test_comment_anchor_shapes():
    """Test resume- and bullet-scoped anchors."""
    assert CommentAnchor().to_dict() == {"scope": "resume"}
    assert CommentAnchor("bullet", "exp-1-b1").to_dict() == {"scope": "bullet", "bulletId": "exp-1-b1"}

    with pytest.raises(ValueError, match="require a bullet_id"):
        CommentAnchor("bullet")
    with pytest.raises(ValueError, match="Invalid comment scope"):
        CommentAnchor("page")


@pytest.mark.unit
def test_comment_record_round_trip():
    """Test comment dict conversion."""
    record = CommentRecord(
        target_student_id="student-7",
        author_name="Advisor",
        body="Quantify this.",
        anchor=CommentAnchor("bullet", "exp-1-b1"),
        created_at="2025-03-01T10:00:00.000Z",
    )

    data = record.to_dict()

    assert data["targetStudentId"] == "student-7"
    assert data["anchor"] == {"scope": "bullet", "bulletId": "exp-1-b1"}
    assert data["reviewed"] is False
    assert CommentRecord.from_dict(data) == record
