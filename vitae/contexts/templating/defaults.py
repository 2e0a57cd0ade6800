"""
Default values for VITAE resume documents.

Provides shared defaults used by:
- normalizer.py (fill missing sections and fields of stored documents)
- persistence stores (seed the master resume when nothing is stored)
- editing callers creating fresh entries, bullets and skill groups

The sample resume doubles as the fixture most tests and the CLI demo run against.
"""

import uuid
from typing import List, Optional

from vitae.contexts.templating.resume_data_structure import (
    Bullet,
    Entry,
    PersonalInfo,
    ResumeDocument,
    SkillGroup,
    SkillItem,
    SummarySection,
)
from vitae.utils.timestamp import now_exact

PLACEHOLDER_BULLET_TEXT = "Describe impact using action + scope + measurable result."

# Placeholder fields for new entries, by section
ENTRY_PLACEHOLDERS = {
    "education": {
        "title": "B.S. in Business Administration",
        "organization": "Georgia Institute of Technology",
        "location": "Atlanta, GA",
        "start_date": "2023-08",
        "end_date": "2027-05",
    },
    "experience": {
        "title": "Role Title",
        "organization": "Organization Name",
        "location": "City, ST",
        "start_date": "2025-01",
        "end_date": "Present",
    },
    "projects": {
        "title": "Project Title",
        "organization": "Organization / Class / Personal",
        "location": "City, ST",
        "start_date": "2025-01",
        "end_date": "Present",
    },
    "leadership": {
        "title": "Leadership Role",
        "organization": "Organization Name",
        "location": "City, ST",
        "start_date": "2025-01",
        "end_date": "Present",
    },
}


def generate_id(prefix: str) -> str:
    """Mint a fresh opaque id such as 'bullet-1f3a9c2e'."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


def create_empty_bullet(**overrides) -> Bullet:
    """Create a selected placeholder bullet; keyword overrides replace any field."""
    fields = {
        "id": generate_id("bullet"),
        "text": PLACEHOLDER_BULLET_TEXT,
        "selected": True,
        "role_type": "Other",
        "skill_tags": [],
    }
    fields.update(overrides)
    return Bullet(**fields)


def create_empty_entry(section_key: str) -> Entry:
    """
    Create a placeholder entry for an entry-bearing section.

    Education entries start without bullets; other sections start with one
    placeholder bullet.

    Raises:
        KeyError: If section_key is not an entry-bearing section
    """
    placeholders = ENTRY_PLACEHOLDERS[section_key]
    return Entry(
        id=generate_id(section_key),
        section_key=section_key,
        selected=True,
        bullets=[] if section_key == "education" else [create_empty_bullet()],
        **placeholders,
    )


def create_skill_item(label: str = "New Skill") -> SkillItem:
    return SkillItem(id=generate_id("skill-item"), label=label, selected=True)


def create_skill_group(name: str = "New Group") -> SkillGroup:
    return SkillGroup(id=generate_id("skill-group"), group_name=name, items=[create_skill_item()])


def _bullet(
    id: str, text: str, role_type: str, skill_tags: List[str], selected: bool = True
) -> Bullet:
    return Bullet(id=id, text=text, selected=selected, role_type=role_type, skill_tags=skill_tags)


def _entry(
    id: str,
    section_key: str,
    title: str,
    organization: str,
    location: str,
    start_date: str,
    end_date: str,
    bullets: List[Bullet],
    selected: bool = True,
) -> Entry:
    return Entry(
        id=id,
        section_key=section_key,
        title=title,
        organization=organization,
        location=location,
        start_date=start_date,
        end_date=end_date,
        selected=selected,
        bullets=bullets,
    )


def _skill_group(id: str, group_name: str, labels: List[str]) -> SkillGroup:
    items = [
        SkillItem(id=f"{id}-i{index}", label=label, selected=True)
        for index, label in enumerate(labels, start=1)
    ]
    return SkillGroup(id=id, group_name=group_name, items=items)


def create_sample_resume(updated_at: Optional[str] = None) -> ResumeDocument:
    """
    Build the seeded master resume.

    Ids are fixed so repeated calls produce documents that differ only in
    updated_at (and not even that when updated_at is given).

    Args:
        updated_at: Timestamp to stamp on the document (defaults to now)

    Returns:
        Fully-shaped ResumeDocument
    """
    return ResumeDocument(
        id="resume-master-001",
        version_name="Master Resume",
        personal=PersonalInfo(
            full_name="Tobe Chanow",
            email="tchanow@gatech.edu",
            phone="(404) 555-0184",
            location="Atlanta, GA",
            website="tobechanow.com",
            linkedin="linkedin.com/in/tobechanow",
            selected=True,
        ),
        summary=SummarySection(
            selected=False,
            text=(
                "Georgia Tech business student with experience in product strategy, operations, "
                "and student consulting. Strong in structured problem solving, stakeholder "
                "communication, and data-backed recommendations using SQL and Excel."
            ),
        ),
        education=[
            _entry(
                "edu-1",
                "education",
                "B.S. in Business Administration (Strategy & Innovation / Finance)",
                "Georgia Institute of Technology, Scheller College of Business",
                "Atlanta, GA",
                "2023-08",
                "2027-05",
                [
                    _bullet(
                        "edu-1-b1",
                        "GPA: 3.8/4.0. Dean's List (3 semesters). Relevant coursework: Corporate "
                        "Finance, Marketing Research, Operations, Data & Visual Analytics, Business Law.",
                        "Research",
                        ["Data Analysis", "Excel", "Communication"],
                    ),
                    _bullet(
                        "edu-1-b2",
                        "Selected for CREATE-X startup practicum cohort to develop and pitch a "
                        "student productivity concept with cross-functional teammates.",
                        "Leadership",
                        ["Presentation", "Leadership", "Project Management"],
                    ),
                ],
            ),
        ],
        experience=[
            _entry(
                "exp-1",
                "experience",
                "Business Operations Intern",
                "Peachtree Mobility",
                "Atlanta, GA",
                "2025-06",
                "2025-08",
                [
                    _bullet(
                        "exp-1-b1",
                        "Built weekly KPI tracker for sales, fulfillment, and support teams and used "
                        "trend analysis to highlight bottlenecks, helping managers cut order-to-ship "
                        "time by 14%.",
                        "Operations",
                        ["Strategy", "Excel", "Presentation", "Data Analysis"],
                    ),
                    _bullet(
                        "exp-1-b2",
                        "Queried CRM and support data in SQL to identify high-volume issue "
                        "categories, informing process changes that reduced repeat tickets during "
                        "peak weeks.",
                        "Operations",
                        ["SQL", "Data Analysis", "Communication"],
                    ),
                    _bullet(
                        "exp-1-b3",
                        "Partnered with product and operations leads to document requirements for a "
                        "route scheduling automation pilot and coordinate rollout updates across teams.",
                        "Product",
                        ["Leadership", "Project Management", "Communication"],
                    ),
                ],
            ),
            _entry(
                "exp-2",
                "experience",
                "Analyst, Student Consulting Practicum",
                "Georgia Tech Student Consulting",
                "Atlanta, GA",
                "2024-09",
                "2025-05",
                [
                    _bullet(
                        "exp-2-b1",
                        "Led a 5-student team delivering go-to-market recommendations for an Atlanta "
                        "startup through customer interviews, competitor benchmarking, and pricing "
                        "analysis.",
                        "Consulting",
                        ["Strategy", "Leadership", "Communication"],
                    ),
                    _bullet(
                        "exp-2-b2",
                        "Built Excel scenario models and presented trade-offs to the client "
                        "leadership team, influencing phased market launch decisions.",
                        "Consulting",
                        ["Excel", "Presentation", "Data Analysis"],
                    ),
                ],
            ),
        ],
        projects=[
            _entry(
                "proj-1",
                "projects",
                "Campus Event Demand Forecasting Model",
                "Georgia Tech Coursework / Personal Extension",
                "Remote",
                "2025-10",
                "Present",
                [
                    _bullet(
                        "proj-1-b1",
                        "Built a forecasting model for student event attendance using historical "
                        "sign-up and turnout data to improve staffing and supply planning for club "
                        "events.",
                        "Research",
                        ["Excel", "Data Analysis", "Presentation"],
                    ),
                    _bullet(
                        "proj-1-b2",
                        "Presented demand planning recommendations to student organization officers "
                        "and created a reusable planning template for semester programming.",
                        "Leadership",
                        ["Project Management", "Communication", "Presentation"],
                    ),
                ],
            ),
            _entry(
                "proj-2",
                "projects",
                "Internship Application Tracker + Resume Tailoring Tool",
                "Personal Project",
                "Atlanta, GA",
                "2025-11",
                "Present",
                [
                    _bullet(
                        "proj-2-b1",
                        "Designed a structured resume database with taggable bullets to support "
                        "tailored resume generation and application tracking workflows.",
                        "Product",
                        ["Project Management", "Strategy", "Communication"],
                    ),
                    _bullet(
                        "proj-2-b2",
                        "Prototyped local-first workflow for generating and saving resume versions "
                        "linked to job descriptions and application status tracking.",
                        "Product",
                        ["Data Analysis", "Excel", "Leadership"],
                    ),
                ],
            ),
        ],
        leadership=[
            _entry(
                "lead-1",
                "leadership",
                "Vice President, Professional Development",
                "Georgia Tech Undergraduate Consulting Club",
                "Atlanta, GA",
                "2024-05",
                "Present",
                [
                    _bullet(
                        "lead-1-b1",
                        "Expanded active membership from 55 to 130 students by launching case prep "
                        "workshops, alumni panels, and first-year onboarding sessions.",
                        "Leadership",
                        ["Leadership", "Communication", "Presentation"],
                    ),
                    _bullet(
                        "lead-1-b2",
                        "Managed a 10-person executive board and coordinated semester programming "
                        "with campus partners, alumni mentors, and recruiting organizations.",
                        "Leadership",
                        ["Leadership", "Project Management"],
                    ),
                ],
            ),
        ],
        skills=[
            _skill_group(
                "skills-1",
                "Analytics & Tools",
                ["SQL", "Python (basic)", "Excel / Sheets", "Tableau"],
            ),
            _skill_group(
                "skills-2",
                "Business & Strategy",
                [
                    "Market Sizing",
                    "Go-to-Market Strategy",
                    "Operations Analysis",
                    "Scenario Modeling",
                ],
            ),
            _skill_group(
                "skills-3",
                "Communication",
                ["Executive Presentations", "Stakeholder Alignment", "Client Interviews"],
            ),
        ],
        updated_at=updated_at or now_exact(),
    )
