"""Unit tests for stored-document shape repair."""

import pytest
from loguru import logger

from vitae.contexts.rendering import derive_preview_resume
from vitae.contexts.templating import (
    InvalidResumeStructureError,
    create_sample_resume,
    normalize_resume_document_shape,
)


@pytest.mark.unit
@pytest.mark.parametrize("payload", [None, "resume", 42, ["not", "a", "document"]])
def test_non_mapping_payload_becomes_sample(payload):
    """Test that unusable payloads fall back to the sample resume."""
    document = normalize_resume_document_shape(payload)
    sample = create_sample_resume()

    assert document.id == sample.id
    assert [entry.id for entry in document.experience] == [entry.id for entry in sample.experience]


@pytest.mark.unit
def test_missing_sections_are_filled_from_sample():
    """Test top-level defaults."""
    document = normalize_resume_document_shape({"id": "resume-legacy", "versionName": "Legacy"})

    assert document.id == "resume-legacy"
    assert document.version_name == "Legacy"
    assert [group.id for group in document.skills] == ["skills-1", "skills-2", "skills-3"]
    assert document.personal.full_name == "Tobe Chanow"


@pytest.mark.unit
def test_non_list_sections_are_replaced():
    """Test that a section stored as the wrong type is replaced by the sample's."""
    document = normalize_resume_document_shape({"experience": "oops", "projects": [], "skills": {"a": 1}})

    assert [entry.id for entry in document.experience] == ["exp-1", "exp-2"]
    assert document.projects == []
    assert len(document.skills) == 3


@pytest.mark.unit
def test_personal_block_is_merged_over_sample():
    """Test partial personal/summary blocks."""
    document = normalize_resume_document_shape(
        {"personal": {"fullName": "Ada Park"}, "summary": {"selected": True}}
    )

    assert document.personal.full_name == "Ada Park"
    assert document.personal.email == "tchanow@gatech.edu"
    assert document.summary.selected is True
    assert document.summary.text.startswith("Georgia Tech business student")


@pytest.mark.unit
def test_nested_fields_get_defaults():
    """Test repair of sparse entries, bullets and skill groups."""
    document = normalize_resume_document_shape(
        {
            "experience": [{"id": "exp-x", "title": "Analyst", "bullets": [{"text": "Did things"}]}],
            "leadership": [{"title": "Captain", "bullets": "none"}],
            "skills": [{"groupName": "Tools", "items": [{"label": "SQL"}]}],
        }
    )

    entry = document.experience[0]
    assert entry.section_key == "experience"
    assert entry.organization == ""
    assert entry.selected is True
    bullet = entry.bullets[0]
    assert bullet.text == "Did things"
    assert bullet.selected is True
    assert bullet.role_type == "Other"
    assert bullet.skill_tags == []
    assert bullet.id.startswith("bullet-")

    assert document.leadership[0].id.startswith("leadership-")
    assert document.leadership[0].bullets == []

    item = document.skills[0].items[0]
    assert item.label == "SQL"
    assert item.selected is True


@pytest.mark.unit
def test_section_key_follows_owning_section():
    """Test that a mislabeled entry is owned by the section it is stored under."""
    document = normalize_resume_document_shape({"projects": [{"id": "p", "sectionKey": "experience"}]})

    assert document.projects[0].section_key == "projects"


@pytest.mark.unit
def test_non_string_updated_at_is_replaced():
    """Test updatedAt repair."""
    kept = normalize_resume_document_shape({"updatedAt": "2024-02-02T00:00:00.000Z"})
    replaced = normalize_resume_document_shape({"updatedAt": 1700000000})

    assert kept.updated_at == "2024-02-02T00:00:00.000Z"
    assert isinstance(replaced.updated_at, str)
    assert replaced.updated_at != ""


@pytest.mark.unit
def test_unrepairable_nested_value_raises():
    """Test that a bullet stored as a scalar is rejected."""
    with pytest.raises(InvalidResumeStructureError, match="experience\\[0\\].bullets\\[1\\]"):
        normalize_resume_document_shape(
            {"experience": [{"id": "e", "bullets": [{"text": "ok"}, 7]}]}
        )


@pytest.mark.unit
def test_null_fields_get_defaults():
    """Test that stored nulls are repaired like missing keys."""
    doc = normalize_resume_document_shape(
        {
            "versionName": None,
            "personal": {"fullName": None},
            "experience": [
                {
                    "id": "e",
                    "title": None,
                    "selected": None,
                    "bullets": [{"id": None, "text": None, "roleType": None, "skillTags": None}],
                }
            ],
            "skills": [{"id": "g", "groupName": None, "items": [{"id": "i", "label": None}]}],
        }
    )

    bullet = doc.experience[0].bullets[0]
    assert doc.version_name == "Master Resume"
    assert doc.personal.full_name == create_sample_resume().personal.full_name
    assert doc.experience[0].title == ""
    assert doc.experience[0].selected is True
    assert bullet.text == ""
    assert bullet.role_type == "Other"
    assert bullet.skill_tags == []
    assert bullet.id
    assert doc.skills[0].group_name == ""
    assert doc.skills[0].items[0].label == ""


@pytest.mark.unit
def test_null_bullet_text_previews_without_error():
    """Test that a document with null bullet text can be previewed."""
    doc = normalize_resume_document_shape(
        {"experience": [{"id": "e", "bullets": [{"id": "b", "text": None}, {"id": "c", "text": "Kept"}]}]}
    )

    preview = derive_preview_resume(doc)

    assert [bullet.id for bullet in preview.experience[0].bullets] == ["c"]


@pytest.mark.unit
def test_unlisted_vocabulary_is_kept_and_logged():
    """Test that unknown role types and skill tags survive repair with a debug note."""
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        doc = normalize_resume_document_shape(
            {
                "experience": [
                    {
                        "id": "e",
                        "bullets": [{"id": "b", "text": "x", "roleType": "Finance", "skillTags": ["SQL", "Tableau"]}],
                    }
                ]
            }
        )
    finally:
        logger.remove(sink_id)

    bullet = doc.experience[0].bullets[0]
    assert bullet.role_type == "Finance"
    assert bullet.skill_tags == ["SQL", "Tableau"]
    assert any("unlisted role type 'Finance'" in message for message in messages)
    assert any("unlisted skill tags: Tableau" in message for message in messages)
