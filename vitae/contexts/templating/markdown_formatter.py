"""
Markdown Utilities

Helper functions for formatting structured resume data as markdown.

These render whatever document they are given; pass a derived preview
(vitae.contexts.rendering.preview.derive_preview_resume) to get only the
content that should print.
"""

from typing import List

from vitae.contexts.templating.resume_data_structure import (
    ENTRY_SECTION_KEYS,
    SECTION_LABELS,
    Entry,
    PersonalInfo,
    ResumeDocument,
    SkillGroup,
)
from vitae.utils.text_processing import format_date_range, normalize_url


def format_personal_markdown(personal: PersonalInfo) -> str:
    """
    Format the contact header as markdown.

    Name becomes a # header; contact fields are joined on one line with
    website/linkedin turned into links.
    """
    parts = []
    if personal.full_name:
        parts.append(f"# {personal.full_name}\n")

    contact = [value for value in (personal.email, personal.phone, personal.location) if value]
    for link in (personal.website, personal.linkedin):
        if link:
            contact.append(f"[{link}]({normalize_url(link)})")
    if contact:
        parts.append(" | ".join(contact))

    return "\n".join(parts)


def format_entry_markdown(entry: Entry) -> str:
    """
    Format single entry as markdown.

    Title is formatted as ### (section header added separately by caller),
    followed by organization, location and dates, then bullets.

    Args:
        entry: Entry to format

    Returns:
        Markdown-formatted entry (without section header)
    """
    parts = [f"### {entry.title}\n"]

    if entry.organization:
        parts.append(f"**{entry.organization}**")
    if entry.location:
        parts.append(entry.location)
    dates = format_date_range(entry.start_date, entry.end_date)
    if dates:
        parts.append(f"*{dates}*")

    if entry.bullets:
        parts.append("")  # Blank line before bullets
        for bullet in entry.bullets:
            parts.append(f"- {bullet.text}")

    return "\n".join(parts)


def format_skills_markdown(groups: List[SkillGroup], section_name: str = "Skills") -> str:
    """Format skill groups as '**Group:** a, b, c' lines under one header."""
    parts = [f"## {section_name}\n"]
    for group in groups:
        labels = ", ".join(item.label for item in group.items)
        parts.append(f"**{group.group_name}:** {labels}")
    return "\n".join(parts)


def format_resume_markdown(document: ResumeDocument) -> str:
    """
    Format a whole document as markdown.

    The personal block and summary are shown only when their selected flags
    are set; entry sections and skills are shown when non-empty.

    Args:
        document: Document to render (usually a derived preview)

    Returns:
        Markdown text
    """
    parts = []

    if document.personal.selected:
        header = format_personal_markdown(document.personal)
        if header:
            parts.append(header)

    if document.summary.selected and document.summary.text:
        parts.append(f"## {SECTION_LABELS['summary']}\n\n{document.summary.text}")

    for section_key in ENTRY_SECTION_KEYS:
        entries = document.entries_for(section_key)
        if not entries:
            continue
        section_parts = [f"## {SECTION_LABELS[section_key]}"]
        section_parts.extend(format_entry_markdown(entry) for entry in entries)
        parts.append("\n\n".join(section_parts))

    if document.skills:
        parts.append(format_skills_markdown(document.skills, SECTION_LABELS["skills"]))

    return "\n\n".join(parts) + "\n"
