"""
Tailored Resume Builder

Turns a master document plus a set of chosen bullet ids into a tailored draft.

Only the achievement sections (experience, projects, leadership) change:
- a bullet is selected exactly when its id is in the chosen set
- an entry is selected exactly when at least one of its bullets is

Education, skills, personal info and summary are carried over unchanged.
The master document is never mutated, and no ids are minted.
"""

from typing import Iterable, Optional

from vitae.contexts.persistence.records import ResumeVersionRecord
from vitae.contexts.targeting.logger import log_tailored_build
from vitae.contexts.templating.resume_data_structure import (
    ACHIEVEMENT_SECTION_KEYS,
    DEFAULT_VERSION_NAME,
    ResumeDocument,
)
from vitae.utils.timestamp import now_exact


def resolve_version_name(version_name: Optional[str]) -> str:
    """Trimmed version name, or DEFAULT_VERSION_NAME when blank."""
    return (version_name or "").strip() or DEFAULT_VERSION_NAME


def build_tailored_resume(
    master: ResumeDocument,
    selected_bullet_ids: Iterable[str],
    version_name: Optional[str],
    updated_at: Optional[str] = None,
) -> ResumeDocument:
    """
    Build a tailored draft from the master document.

    Args:
        master: Source document (left untouched)
        selected_bullet_ids: Bullet ids to select; unknown ids are ignored
        version_name: Name for the draft; blank falls back to DEFAULT_VERSION_NAME
        updated_at: Timestamp for the draft (defaults to now)

    Returns:
        New ResumeDocument sharing no mutable structure with master

    Example:
        >>> draft = build_tailored_resume(master, {"exp-1-b1"}, "  Ops Analyst  ")
        >>> draft.version_name
        'Ops Analyst'
    """
    chosen = set(selected_bullet_ids)
    draft = master.clone()

    selected_count = 0
    entry_count = 0
    for section_key in ACHIEVEMENT_SECTION_KEYS:
        for entry in draft.entries_for(section_key):
            for bullet in entry.bullets:
                bullet.selected = bullet.id in chosen
            entry.selected = any(bullet.selected for bullet in entry.bullets)
            selected_count += sum(1 for bullet in entry.bullets if bullet.selected)
            entry_count += int(entry.selected)

    draft.version_name = resolve_version_name(version_name)
    draft.updated_at = updated_at or now_exact()

    log_tailored_build(draft.version_name, selected_count, entry_count)
    return draft


def create_resume_version_record(
    draft: ResumeDocument,
    job_description: str,
    selected_bullet_ids: Iterable[str],
    record_id: str = "",
    timestamp: Optional[str] = None,
) -> ResumeVersionRecord:
    """
    Package a tailored draft for saving as a resume version.

    The record takes its name from the draft. An empty record_id saves as a
    new version; passing an existing id overwrites that version.

    Args:
        draft: Tailored document (typically from build_tailored_resume)
        job_description: Job description text to snapshot
        selected_bullet_ids: Chosen bullet ids, best first
        record_id: Existing version id to overwrite, or "" for a new version
        timestamp: Save time (defaults to now)

    Returns:
        Unsaved ResumeVersionRecord
    """
    return ResumeVersionRecord(
        id=record_id,
        version_name=resolve_version_name(draft.version_name),
        job_description_snapshot=job_description,
        selected_bullet_ids=list(selected_bullet_ids),
        final_resume_content=draft.clone(),
        timestamp=timestamp or now_exact(),
    )
