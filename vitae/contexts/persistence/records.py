"""
Persisted record types.

Three small collections live alongside the master resume:
- ResumeVersionRecord: a saved tailored draft with the job description it was built for
- ApplicationRecord: a tracked job application, optionally linked to a saved version
- CommentRecord: a reviewer comment on a resume or on one bullet

Records convert to and from camelCase dicts (the stored shape). An empty id
means "not yet saved"; the stores mint ids on first save.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from vitae.contexts.templating.normalizer import normalize_resume_document_shape
from vitae.contexts.templating.resume_data_structure import ResumeDocument

APPLICATION_STATUSES = ("Wishlist", "Applied", "Interview", "Offer", "Rejected")

COMMENT_SCOPES = ("resume", "bullet")


@dataclass
class ResumeVersionRecord:
    """
    Saved tailored resume.

    Attributes:
        version_name: Display name of the version
        job_description_snapshot: Job description text the draft was built for
        selected_bullet_ids: Bullet ids selected at save time, best match first
        final_resume_content: Complete tailored document
        id: Record id ("" until saved)
        timestamp: ISO 8601 save time ("" until saved)
    """

    version_name: str
    job_description_snapshot: str
    selected_bullet_ids: List[str]
    final_resume_content: ResumeDocument
    id: str = ""
    timestamp: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "versionName": self.version_name,
            "jobDescriptionSnapshot": self.job_description_snapshot,
            "selectedBulletIds": list(self.selected_bullet_ids),
            "finalResumeContent": self.final_resume_content.to_dict(),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeVersionRecord":
        """Build from a stored dict, repairing the embedded document's shape."""
        return cls(
            id=data.get("id") or "",
            version_name=data.get("versionName", ""),
            job_description_snapshot=data.get("jobDescriptionSnapshot", ""),
            selected_bullet_ids=list(data.get("selectedBulletIds") or []),
            final_resume_content=normalize_resume_document_shape(data.get("finalResumeContent")),
            timestamp=data.get("timestamp") or "",
        )


@dataclass
class ApplicationRecord:
    """
    Tracked job application.

    Attributes:
        company: Company name
        role: Role title
        job_link: Posting URL
        date_applied: YYYY-MM-DD
        status: One of APPLICATION_STATUSES
        resume_version_id: Linked ResumeVersionRecord id, if any
        notes: Free-form notes
        job_description_snapshot: Optional copy of the posting text
        id: Record id ("" until saved)
    """

    company: str
    role: str
    job_link: str = ""
    date_applied: str = ""
    status: str = "Wishlist"
    resume_version_id: Optional[str] = None
    notes: str = ""
    job_description_snapshot: Optional[str] = None
    id: str = ""

    def __post_init__(self):
        if self.status not in APPLICATION_STATUSES:
            raise ValueError(
                f"Invalid application status '{self.status}'. Expected one of {APPLICATION_STATUSES}"
            )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "company": self.company,
            "role": self.role,
            "jobLink": self.job_link,
            "dateApplied": self.date_applied,
            "status": self.status,
            "resumeVersionId": self.resume_version_id,
            "notes": self.notes,
        }
        if self.job_description_snapshot is not None:
            data["jobDescriptionSnapshot"] = self.job_description_snapshot
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApplicationRecord":
        return cls(
            id=data.get("id") or "",
            company=data.get("company", ""),
            role=data.get("role", ""),
            job_link=data.get("jobLink", ""),
            date_applied=data.get("dateApplied", ""),
            status=data.get("status", "Wishlist"),
            resume_version_id=data.get("resumeVersionId"),
            notes=data.get("notes", ""),
            job_description_snapshot=data.get("jobDescriptionSnapshot"),
        )


@dataclass
class CommentAnchor:
    """Where a comment points: the whole resume, or a single bullet."""

    scope: str = "resume"
    bullet_id: Optional[str] = None

    def __post_init__(self):
        if self.scope not in COMMENT_SCOPES:
            raise ValueError(f"Invalid comment scope '{self.scope}'. Expected one of {COMMENT_SCOPES}")
        if self.scope == "bullet" and not self.bullet_id:
            raise ValueError("Bullet-scoped comment anchors require a bullet_id")

    def to_dict(self) -> Dict[str, Any]:
        if self.scope == "bullet":
            return {"scope": "bullet", "bulletId": self.bullet_id}
        return {"scope": "resume"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommentAnchor":
        return cls(scope=data.get("scope", "resume"), bullet_id=data.get("bulletId"))


@dataclass
class CommentRecord:
    """
    Reviewer comment.

    Attributes:
        target_student_id: Student whose resume is being reviewed
        author_name: Reviewer display name
        body: Comment text
        anchor: Resume-level or bullet-level anchor
        resume_version_id: Saved version the comment refers to, if any
        reviewed: Whether the student marked the comment as handled
        id: Record id ("" until saved)
        created_at: ISO 8601 creation time ("" until saved)
    """

    target_student_id: str
    author_name: str
    body: str
    anchor: CommentAnchor = field(default_factory=CommentAnchor)
    resume_version_id: Optional[str] = None
    reviewed: bool = False
    id: str = ""
    created_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "targetStudentId": self.target_student_id,
            "resumeVersionId": self.resume_version_id,
            "anchor": self.anchor.to_dict(),
            "authorName": self.author_name,
            "body": self.body,
            "createdAt": self.created_at,
            "reviewed": self.reviewed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommentRecord":
        return cls(
            id=data.get("id") or "",
            target_student_id=data.get("targetStudentId", ""),
            resume_version_id=data.get("resumeVersionId"),
            anchor=CommentAnchor.from_dict(data.get("anchor") or {}),
            author_name=data.get("authorName", ""),
            body=data.get("body", ""),
            created_at=data.get("createdAt") or "",
            reviewed=bool(data.get("reviewed", False)),
        )
