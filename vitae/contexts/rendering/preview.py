"""
Preview Derivation

Derives the print-ready view of a document: only what would appear on the page.

Filtering rules:
- entries are kept only when selected
- bullets are kept only when selected and non-blank
- skill items are kept only when selected and non-blank; groups with a blank
  name or no remaining items are dropped
- personal fields and summary text are trimmed (both blocks are always kept;
  their selected flags are left for the renderer to honour)

The input document is never modified.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from vitae.contexts.rendering.logger import log_preview_summary
from vitae.contexts.templating.exceptions import UnknownSectionError
from vitae.contexts.templating.resume_data_structure import (
    ENTRY_SECTION_KEYS,
    SECTION_KEYS,
    Entry,
    PersonalInfo,
    ResumeDocument,
    SkillGroup,
    SummarySection,
)
from vitae.utils.text_processing import sanitize_file_name

ALLOWED_ZOOM_PERCENTS = (75, 90, 100, 110, 125)
DEFAULT_ZOOM_PERCENT = 100
EXPORT_FILE_EXTENSION = ".pdf"


def _visible_entries(entries: List[Entry]) -> List[Entry]:
    visible = []
    for entry in entries:
        if not entry.selected:
            continue
        copy = entry.clone()
        copy.bullets = [bullet for bullet in copy.bullets if bullet.selected and bullet.text.strip()]
        visible.append(copy)
    return visible


def _visible_skill_groups(groups: List[SkillGroup]) -> List[SkillGroup]:
    visible = []
    for group in groups:
        copy = group.clone()
        copy.items = [item for item in copy.items if item.selected and item.label.strip()]
        if copy.group_name.strip() and copy.items:
            visible.append(copy)
    return visible


def derive_preview_resume(resume: ResumeDocument) -> ResumeDocument:
    """
    Build the preview view of a document.

    Args:
        resume: Master or tailored document

    Returns:
        New ResumeDocument with hidden and blank content removed

    Example:
        >>> preview = derive_preview_resume(draft)
        >>> all(entry.selected for entry in preview.experience)
        True
    """
    personal = resume.personal
    return ResumeDocument(
        id=resume.id,
        version_name=resume.version_name,
        personal=PersonalInfo(
            full_name=personal.full_name.strip(),
            email=personal.email.strip(),
            phone=personal.phone.strip(),
            location=personal.location.strip(),
            website=personal.website.strip(),
            linkedin=personal.linkedin.strip(),
            selected=personal.selected,
        ),
        summary=SummarySection(text=resume.summary.text.strip(), selected=resume.summary.selected),
        education=_visible_entries(resume.education),
        experience=_visible_entries(resume.experience),
        projects=_visible_entries(resume.projects),
        leadership=_visible_entries(resume.leadership),
        skills=_visible_skill_groups(resume.skills),
        updated_at=resume.updated_at,
    )


def count_selected_for_section(resume: ResumeDocument, section_key: str) -> int:
    """
    Count the selected units of one section, as shown on section badges.

    - personal: 1 when the block is selected
    - summary: 1 when selected and non-blank
    - skills: selected items across all groups
    - entry sections: selected entries

    Raises:
        UnknownSectionError: If section_key is not one of SECTION_KEYS
    """
    if section_key == "personal":
        return 1 if resume.personal.selected else 0
    if section_key == "summary":
        return 1 if resume.summary.selected and resume.summary.text.strip() else 0
    if section_key == "skills":
        return sum(1 for group in resume.skills for item in group.items if item.selected)
    if section_key in ENTRY_SECTION_KEYS:
        return sum(1 for entry in resume.entries_for(section_key) if entry.selected)
    raise UnknownSectionError(section_key, SECTION_KEYS)


@dataclass
class PreviewStatistics:
    """
    Content counts for a derived preview.

    Attributes:
        entries_by_section: Visible entries per entry section
        bullet_count: Visible bullets across all entry sections
        skill_count: Visible skill items across all groups
    """

    entries_by_section: Dict[str, int] = field(default_factory=dict)
    bullet_count: int = 0
    skill_count: int = 0

    @property
    def entry_count(self) -> int:
        return sum(self.entries_by_section.values())


def preview_statistics(resume: ResumeDocument) -> PreviewStatistics:
    """Count what the preview of a document would show."""
    preview = derive_preview_resume(resume)
    stats = PreviewStatistics(
        entries_by_section={key: len(preview.entries_for(key)) for key in ENTRY_SECTION_KEYS},
        bullet_count=sum(len(entry.bullets) for _, entry in preview.iter_entries()),
        skill_count=sum(len(group.items) for group in preview.skills),
    )
    log_preview_summary(resume.version_name, stats.entry_count, stats.bullet_count, stats.skill_count)
    return stats


def ensure_valid_zoom(zoom_percent: int) -> int:
    """Return zoom_percent if it is an allowed preview zoom, else the default (100)."""
    if zoom_percent in ALLOWED_ZOOM_PERCENTS:
        return zoom_percent
    return DEFAULT_ZOOM_PERCENT


def build_export_file_name(name: str = None) -> str:
    """
    File name for an exported resume.

    Example:
        >>> build_export_file_name("Ops Analyst - Peachtree")
        'ops-analyst-peachtree.pdf'
    """
    base = sanitize_file_name(name if name is not None else "resume")
    if base.endswith(EXPORT_FILE_EXTENSION):
        return base
    return f"{base}{EXPORT_FILE_EXTENSION}"
