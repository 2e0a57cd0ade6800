"""
Resume Document Shape Repair

Turns whatever was read back from storage into a fully-shaped ResumeDocument.
The core (targeting, rendering) assumes complete documents and never calls
this module; the persistence stores run every stored document through it.

Repair rules:
1. A payload that is not a mapping is replaced by the sample resume
2. Missing or null top-level fields come from the sample resume
3. Section fields that are not lists are replaced by the sample's sections
4. personal/summary blocks are merged over the sample's blocks
5. Missing or null nested fields (entries, bullets, skill groups, items) get defaults
6. updatedAt is kept only when it is a string
7. Role types and skill tags outside ROLE_TYPE_TAGS / SKILL_TAGS are kept and logged

Nested values that are not mappings cannot be repaired and raise
InvalidResumeStructureError.
"""

from typing import Any, Dict

from vitae.contexts.templating.defaults import create_sample_resume, generate_id
from vitae.contexts.templating.exceptions import InvalidResumeStructureError
from vitae.contexts.templating.logger import _log_debug, _log_warning
from vitae.contexts.templating.resume_data_structure import (
    ENTRY_SECTION_KEYS,
    ROLE_TYPE_TAGS,
    SKILL_TAGS,
    ResumeDocument,
)

BULLET_DEFAULTS = {"text": "", "selected": True, "roleType": "Other"}
ENTRY_DEFAULTS = {
    "title": "",
    "organization": "",
    "location": "",
    "startDate": "",
    "endDate": "",
    "selected": True,
}
SKILL_ITEM_DEFAULTS = {"label": "", "selected": True}


def _require_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidResumeStructureError(
            f"Expected an object for {where}, got {type(value).__name__}"
        )
    return value


def _with_defaults(data: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of data with missing or null keys filled from defaults."""
    return {**defaults, **{key: value for key, value in data.items() if value is not None}}


def _normalize_bullet(raw: Any, where: str) -> Dict[str, Any]:
    bullet = _with_defaults(_require_mapping(raw, where), BULLET_DEFAULTS)
    bullet.setdefault("id", generate_id("bullet"))
    if not isinstance(bullet.get("skillTags"), list):
        bullet["skillTags"] = []
    if bullet["roleType"] not in ROLE_TYPE_TAGS:
        _log_debug(f"{where} has unlisted role type '{bullet['roleType']}'")
    unlisted_tags = [tag for tag in bullet["skillTags"] if tag not in SKILL_TAGS]
    if unlisted_tags:
        _log_debug(f"{where} has unlisted skill tags: {', '.join(map(str, unlisted_tags))}")
    return bullet


def _normalize_entry(raw: Any, section_key: str, where: str) -> Dict[str, Any]:
    entry = _with_defaults(_require_mapping(raw, where), ENTRY_DEFAULTS)
    entry.setdefault("id", generate_id(section_key))
    # Ownership follows the section the entry is stored under
    entry["sectionKey"] = section_key
    bullets = entry.get("bullets")
    if not isinstance(bullets, list):
        bullets = []
    entry["bullets"] = [
        _normalize_bullet(bullet, f"{where}.bullets[{index}]") for index, bullet in enumerate(bullets)
    ]
    return entry


def _normalize_skill_group(raw: Any, where: str) -> Dict[str, Any]:
    group = _with_defaults(_require_mapping(raw, where), {"groupName": ""})
    group.setdefault("id", generate_id("skill-group"))
    items = group.get("items")
    if not isinstance(items, list):
        items = []
    normalized_items = []
    for index, item in enumerate(items):
        item = _with_defaults(_require_mapping(item, f"{where}.items[{index}]"), SKILL_ITEM_DEFAULTS)
        item.setdefault("id", generate_id("skill-item"))
        normalized_items.append(item)
    group["items"] = normalized_items
    return group


def normalize_resume_document_shape(raw: Any) -> ResumeDocument:
    """
    Repair a stored (possibly partial or legacy) document into a ResumeDocument.

    Args:
        raw: Value decoded from storage (normally a dict in persisted camelCase shape)

    Returns:
        Fully-shaped ResumeDocument

    Raises:
        InvalidResumeStructureError: If a nested entry, bullet, group or item is not an object

    Example:
        >>> doc = normalize_resume_document_shape({"versionName": "Legacy", "skills": "SQL"})
        >>> doc.version_name
        'Legacy'
        >>> [group.id for group in doc.skills]  # non-list replaced by sample skills
        ['skills-1', 'skills-2', 'skills-3']
    """
    sample = create_sample_resume().to_dict()

    if not isinstance(raw, dict):
        _log_warning(f"Stored resume is {type(raw).__name__}, not an object; using sample resume")
        candidate: Dict[str, Any] = {}
    else:
        candidate = raw

    data = _with_defaults(candidate, sample)

    for block in ("personal", "summary"):
        stored = candidate.get(block)
        data[block] = _with_defaults(stored if isinstance(stored, dict) else {}, sample[block])

    for section_key in (*ENTRY_SECTION_KEYS, "skills"):
        if not isinstance(candidate.get(section_key), list):
            if section_key in candidate:
                _log_warning(f"Section '{section_key}' is not a list; using sample section")
            data[section_key] = sample[section_key]

    if not isinstance(candidate.get("updatedAt"), str):
        data["updatedAt"] = sample["updatedAt"]

    for section_key in ENTRY_SECTION_KEYS:
        data[section_key] = [
            _normalize_entry(entry, section_key, f"{section_key}[{index}]")
            for index, entry in enumerate(data[section_key])
        ]
    data["skills"] = [
        _normalize_skill_group(group, f"skills[{index}]") for index, group in enumerate(data["skills"])
    ]

    _log_debug(f"Normalized resume '{data['id']}' ({data['versionName']})")
    return ResumeDocument.from_dict(data)
