"""Integration tests for master resume persistence."""

import json

import pytest

from vitae.contexts.persistence import MasterResumeStore, load_master_resume_or_sample
from vitae.contexts.templating import create_sample_resume


@pytest.mark.integration
def test_missing_file_is_not_corrupted(tmp_path):
    """Test empty storage."""
    result = MasterResumeStore(tmp_path / "master_resume.json").load()

    assert result.resume is None
    assert result.corrupted is False


@pytest.mark.integration
def test_save_then_load(tmp_path):
    """Test persisting the master resume in an envelope."""
    path = tmp_path / "nested" / "master_resume.json"
    store = MasterResumeStore(path)
    resume = create_sample_resume(updated_at="2025-01-01T00:00:00.000Z")
    resume.experience[0].bullets[0].text = "Edited bullet"

    store.save(resume)
    payload = json.loads(path.read_text(encoding="utf-8"))
    result = store.load()

    assert payload["schemaVersion"] == 1
    assert payload["data"]["versionName"] == "Master Resume"
    assert result.corrupted is False
    assert result.resume == resume


@pytest.mark.integration
@pytest.mark.parametrize(
    "content",
    ["{broken", json.dumps({"data": {}}), json.dumps({"schemaVersion": 2, "data": {}}), json.dumps([1, 2])],
)
def test_unreadable_file_is_corrupted(tmp_path, content):
    """Test corrupt and wrong-envelope files."""
    path = tmp_path / "master_resume.json"
    path.write_text(content, encoding="utf-8")

    result = MasterResumeStore(path).load()

    assert result.resume is None
    assert result.corrupted is True


@pytest.mark.integration
def test_partial_document_is_repaired(tmp_path):
    """Test that a legacy stored document is shape-repaired on load."""
    path = tmp_path / "master_resume.json"
    path.write_text(
        json.dumps({"schemaVersion": 1, "data": {"versionName": "Legacy", "projects": []}}), encoding="utf-8"
    )

    resume = MasterResumeStore(path).load().resume

    assert resume.version_name == "Legacy"
    assert resume.projects == []
    assert len(resume.experience) == 2


@pytest.mark.integration
def test_clear_and_sample_fallback(tmp_path):
    """Test clearing and falling back to the sample resume."""
    path = tmp_path / "master_resume.json"
    store = MasterResumeStore(path)
    edited = create_sample_resume()
    edited.version_name = "Edited"
    store.save(edited)

    assert load_master_resume_or_sample(path).version_name == "Edited"

    store.clear()
    store.clear()

    assert not path.exists()
    assert load_master_resume_or_sample(path).version_name == "Master Resume"

    path.write_text("{broken", encoding="utf-8")
    assert store.load_or_sample().id == "resume-master-001"


@pytest.mark.integration
def test_undecodable_bytes_are_corrupted(tmp_path):
    """Test that a master resume file that is not UTF-8 falls back to the sample."""
    path = tmp_path / "master_resume.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    store = MasterResumeStore(path)

    result = store.load()

    assert result.resume is None
    assert result.corrupted is True
    assert store.load_or_sample().id == "resume-master-001"
