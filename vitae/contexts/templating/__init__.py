"""
Templating Context

Responsibilities:
- Manages resume structure representation (structured data model for resume documents)
- Provides defaults: sample master resume, placeholder entries, id minting
- Repairs partial or legacy stored documents into complete documents
- Formats documents as markdown for terminal display

Owns: Resume structure representation, document defaults, shape repair
Never: Makes content prioritization decisions
"""

from vitae.contexts.templating.defaults import (
    create_empty_bullet,
    create_empty_entry,
    create_sample_resume,
    create_skill_group,
    create_skill_item,
    generate_id,
)
from vitae.contexts.templating.exceptions import InvalidResumeStructureError, UnknownSectionError
from vitae.contexts.templating.markdown_formatter import format_resume_markdown
from vitae.contexts.templating.normalizer import normalize_resume_document_shape
from vitae.contexts.templating.resume_data_structure import (
    ACHIEVEMENT_SECTION_KEYS,
    DEFAULT_VERSION_NAME,
    ENTRY_SECTION_KEYS,
    ROLE_TYPE_TAGS,
    SECTION_KEYS,
    SECTION_LABELS,
    SKILL_TAGS,
    Bullet,
    Entry,
    PersonalInfo,
    ResumeDocument,
    SkillGroup,
    SkillItem,
    SummarySection,
)

__all__ = [
    # Data structure classes
    "Bullet",
    "Entry",
    "PersonalInfo",
    "ResumeDocument",
    "SkillGroup",
    "SkillItem",
    "SummarySection",
    # Schema vocabulary
    "ACHIEVEMENT_SECTION_KEYS",
    "DEFAULT_VERSION_NAME",
    "ENTRY_SECTION_KEYS",
    "ROLE_TYPE_TAGS",
    "SECTION_KEYS",
    "SECTION_LABELS",
    "SKILL_TAGS",
    # Defaults and factories
    "create_empty_bullet",
    "create_empty_entry",
    "create_sample_resume",
    "create_skill_group",
    "create_skill_item",
    "generate_id",
    # Shape repair and formatting
    "normalize_resume_document_shape",
    "format_resume_markdown",
    # Exceptions
    "InvalidResumeStructureError",
    "UnknownSectionError",
]
