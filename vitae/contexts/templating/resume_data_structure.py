"""
Resume Document Structure

Defines the structured representation of a resume for VITAE.
This structure serves as the interface between the Templating, Targeting,
Rendering and Persistence contexts.

Templating owns:
- The document schema and its closed vocabularies (role types, skill tags)
- Conversion between ResumeDocument instances and persisted dicts
- Explicit deep copies over the schema (clone())

Targeting and Rendering operate on ResumeDocument instances and always
return new documents rather than mutating their input.

Persisted dicts use camelCase keys (versionName, roleType, skillTags, ...)
so stored records keep one shape regardless of which tool wrote them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from vitae.contexts.templating.exceptions import UnknownSectionError

SECTION_KEYS = (
    "personal",
    "summary",
    "education",
    "experience",
    "projects",
    "leadership",
    "skills",
)

ENTRY_SECTION_KEYS = ("education", "experience", "projects", "leadership")

# Sections whose bullets are scored against job descriptions (fixed order)
ACHIEVEMENT_SECTION_KEYS = ("experience", "projects", "leadership")

SECTION_LABELS = {
    "personal": "Personal Info",
    "summary": "Summary",
    "education": "Education",
    "experience": "Experience",
    "projects": "Projects",
    "leadership": "Leadership",
    "skills": "Skills",
}

ROLE_TYPE_TAGS = (
    "Consulting",
    "Product",
    "Engineering",
    "Leadership",
    "Research",
    "Operations",
    "Other",
)

SKILL_TAGS = (
    "Strategy",
    "SQL",
    "Leadership",
    "Data Analysis",
    "Communication",
    "Project Management",
    "Python",
    "Excel",
    "Presentation",
)

DEFAULT_VERSION_NAME = "Tailored Resume Draft"


def is_entry_section_key(section_key: str) -> bool:
    """Check whether a section key names one of the four entry-bearing sections."""
    return section_key in ENTRY_SECTION_KEYS


@dataclass
class Bullet:
    """
    Atomic unit of scoring and selection.

    Attributes:
        id: Stable opaque identifier
        text: Achievement statement
        selected: Whether the bullet is included when its entry is shown
        role_type: Exactly one value from ROLE_TYPE_TAGS
        skill_tags: Zero or more values from SKILL_TAGS
        comment_count: Optional reviewer comment count (display only)
    """

    id: str
    text: str
    selected: bool = True
    role_type: str = "Other"
    skill_tags: List[str] = field(default_factory=list)
    comment_count: Optional[int] = None

    def clone(self) -> "Bullet":
        return Bullet(
            id=self.id,
            text=self.text,
            selected=self.selected,
            role_type=self.role_type,
            skill_tags=list(self.skill_tags),
            comment_count=self.comment_count,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "text": self.text,
            "selected": self.selected,
            "roleType": self.role_type,
            "skillTags": list(self.skill_tags),
        }
        if self.comment_count is not None:
            data["commentCount"] = self.comment_count
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bullet":
        return cls(
            id=data["id"],
            text=data["text"],
            selected=bool(data["selected"]),
            role_type=data["roleType"],
            skill_tags=list(data["skillTags"]),
            comment_count=data.get("commentCount"),
        )


@dataclass
class Entry:
    """
    A grouped block (job, project, leadership role, education item) holding bullets.

    The owning section is fixed at creation and never reassigned. Entry-level
    and bullet-level selection are independent: a selected entry with no
    selected bullets renders header-only, and a selected bullet under a
    deselected entry never renders.

    Attributes:
        id: Stable opaque identifier
        section_key: One of ENTRY_SECTION_KEYS
        title: Role, degree or project title
        organization: Employer, school or sponsor
        location: Free-form location
        start_date: Free-form date (typically YYYY-MM)
        end_date: Free-form date (typically YYYY-MM or "Present")
        selected: Entry-level inclusion flag
        bullets: Ordered bullets owned by this entry
    """

    id: str
    section_key: str
    title: str = ""
    organization: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    selected: bool = True
    bullets: List[Bullet] = field(default_factory=list)

    def clone(self) -> "Entry":
        return Entry(
            id=self.id,
            section_key=self.section_key,
            title=self.title,
            organization=self.organization,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            selected=self.selected,
            bullets=[bullet.clone() for bullet in self.bullets],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "sectionKey": self.section_key,
            "title": self.title,
            "organization": self.organization,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "selected": self.selected,
            "bullets": [bullet.to_dict() for bullet in self.bullets],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        return cls(
            id=data["id"],
            section_key=data["sectionKey"],
            title=data["title"],
            organization=data["organization"],
            location=data["location"],
            start_date=data["startDate"],
            end_date=data["endDate"],
            selected=bool(data["selected"]),
            bullets=[Bullet.from_dict(bullet) for bullet in data["bullets"]],
        )


@dataclass
class SkillItem:
    """Single skill label with its inclusion flag."""

    id: str
    label: str
    selected: bool = True

    def clone(self) -> "SkillItem":
        return SkillItem(id=self.id, label=self.label, selected=self.selected)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "label": self.label, "selected": self.selected}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkillItem":
        return cls(id=data["id"], label=data["label"], selected=bool(data["selected"]))


@dataclass
class SkillGroup:
    """Named group owning an ordered list of skill items."""

    id: str
    group_name: str
    items: List[SkillItem] = field(default_factory=list)

    def clone(self) -> "SkillGroup":
        return SkillGroup(
            id=self.id,
            group_name=self.group_name,
            items=[item.clone() for item in self.items],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "groupName": self.group_name,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkillGroup":
        return cls(
            id=data["id"],
            group_name=data["groupName"],
            items=[SkillItem.from_dict(item) for item in data["items"]],
        )


@dataclass
class PersonalInfo:
    """
    Contact header block.

    The selected flag controls whether the rendering layer shows the block;
    preview derivation never strips it.
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    selected: bool = True

    def clone(self) -> "PersonalInfo":
        return PersonalInfo(
            full_name=self.full_name,
            email=self.email,
            phone=self.phone,
            location=self.location,
            website=self.website,
            linkedin=self.linkedin,
            selected=self.selected,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "website": self.website,
            "linkedin": self.linkedin,
            "selected": self.selected,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonalInfo":
        return cls(
            full_name=data["fullName"],
            email=data["email"],
            phone=data["phone"],
            location=data["location"],
            website=data["website"],
            linkedin=data["linkedin"],
            selected=bool(data["selected"]),
        )


@dataclass
class SummarySection:
    """Free-text summary; visibility is decided by consumers from `selected`."""

    text: str = ""
    selected: bool = False

    def clone(self) -> "SummarySection":
        return SummarySection(text=self.text, selected=self.selected)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "selected": self.selected}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SummarySection":
        return cls(text=data["text"], selected=bool(data["selected"]))


@dataclass
class ResumeDocument:
    """
    Structured representation of a complete resume document.

    This is the primary data model shared between contexts. The same class
    represents the master resume, a tailored draft and a derived preview.

    Entry lists preserve their stored order, which is the display/print
    order; no operation in VITAE reorders them.

    Attributes:
        id: Stable opaque identifier
        version_name: Free-text version label
        personal: Contact header block
        summary: Summary block
        education, experience, projects, leadership: Ordered entry lists
        skills: Ordered skill groups
        updated_at: ISO 8601 last-modified timestamp
    """

    id: str
    version_name: str
    personal: PersonalInfo = field(default_factory=PersonalInfo)
    summary: SummarySection = field(default_factory=SummarySection)
    education: List[Entry] = field(default_factory=list)
    experience: List[Entry] = field(default_factory=list)
    projects: List[Entry] = field(default_factory=list)
    leadership: List[Entry] = field(default_factory=list)
    skills: List[SkillGroup] = field(default_factory=list)
    updated_at: str = ""

    def entries_for(self, section_key: str) -> List[Entry]:
        """
        Get the entry list for an entry-bearing section.

        Raises:
            UnknownSectionError: If section_key is not one of ENTRY_SECTION_KEYS
        """
        if not is_entry_section_key(section_key):
            raise UnknownSectionError(section_key, ENTRY_SECTION_KEYS)
        return getattr(self, section_key)

    def iter_entries(self):
        """Yield (section_key, entry) pairs across all entry sections in display order."""
        for section_key in ENTRY_SECTION_KEYS:
            for entry in getattr(self, section_key):
                yield section_key, entry

    def clone(self) -> "ResumeDocument":
        """Deep copy over the closed schema; shares no mutable structure with self."""
        return ResumeDocument(
            id=self.id,
            version_name=self.version_name,
            personal=self.personal.clone(),
            summary=self.summary.clone(),
            education=[entry.clone() for entry in self.education],
            experience=[entry.clone() for entry in self.experience],
            projects=[entry.clone() for entry in self.projects],
            leadership=[entry.clone() for entry in self.leadership],
            skills=[group.clone() for group in self.skills],
            updated_at=self.updated_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "versionName": self.version_name,
            "personal": self.personal.to_dict(),
            "summary": self.summary.to_dict(),
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [entry.to_dict() for entry in self.projects],
            "leadership": [entry.to_dict() for entry in self.leadership],
            "skills": [group.to_dict() for group in self.skills],
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeDocument":
        """
        Build a document from a fully-shaped persisted dict.

        Partial or legacy dicts must go through
        vitae.contexts.templating.normalizer.normalize_resume_document_shape first.

        Raises:
            KeyError: If a required field is missing
        """
        return cls(
            id=data["id"],
            version_name=data["versionName"],
            personal=PersonalInfo.from_dict(data["personal"]),
            summary=SummarySection.from_dict(data["summary"]),
            education=[Entry.from_dict(entry) for entry in data["education"]],
            experience=[Entry.from_dict(entry) for entry in data["experience"]],
            projects=[Entry.from_dict(entry) for entry in data["projects"]],
            leadership=[Entry.from_dict(entry) for entry in data["leadership"]],
            skills=[SkillGroup.from_dict(group) for group in data["skills"]],
            updated_at=data["updatedAt"],
        )
