"""
Bullet Matching

Scores resume bullets against a job description and ranks them.

Pipeline:
1. Flatten the achievement sections (experience, projects, leadership) into
   FlattenedBullet rows, carrying each bullet's parent entry identity
2. Prepare the job description once (lower-cased text + token set)
3. Score each row:
   - keyword overlap between bullet text/title/organization and the description
   - skill tags found in the description (by token or by full phrase)
   - role type found in the description (literal substring)
   - a small nudge for bullets already selected in the document
4. Rank by score, then already-selected first, then bullet text

Education bullets are never scored. Everything here is pure: the same
document and description always produce the same ranked list.

Known weakness: the role-type check is a plain substring test, so a role type
whose name is a common word (e.g., "Other") matches descriptions that merely
contain that word ("other duties", "mother"). This is intentional literal
behaviour; callers should not read more intent into it.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union

from vitae.contexts.intake.job_data_structure import JobDescription
from vitae.contexts.targeting.logger import log_match_summary
from vitae.contexts.targeting.scoring_config import DEFAULT_SCORING_WEIGHTS, ScoringWeights
from vitae.contexts.templating.resume_data_structure import (
    ACHIEVEMENT_SECTION_KEYS,
    ResumeDocument,
)
from vitae.utils.token_processing import tokenize, unique


@dataclass(frozen=True)
class FlattenedBullet:
    """
    Read-only projection of one bullet joined to its parent entry.

    Exists only while scoring; never persisted.

    Attributes:
        section_key: Achievement section the entry belongs to
        entry_id: Parent entry id
        entry_title: Parent entry title
        organization: Parent entry organization
        bullet_id: Bullet id
        bullet_text: Bullet text
        role_type: Bullet role type tag
        skill_tags: Bullet skill tags, in stored order
        originally_selected: bullet.selected and entry.selected at flatten time
    """

    section_key: str
    entry_id: str
    entry_title: str
    organization: str
    bullet_id: str
    bullet_text: str
    role_type: str
    skill_tags: Tuple[str, ...]
    originally_selected: bool


@dataclass(frozen=True)
class BulletMatch(FlattenedBullet):
    """
    FlattenedBullet plus its relevance score and the reasons behind it.

    Recomputed on every match request; only the resulting selection set and
    generated documents are persisted.
    """

    score: int = 0
    reasons: Tuple[str, ...] = ()


def flatten_resume_bullets(resume: ResumeDocument) -> List[FlattenedBullet]:
    """
    Project the achievement sections of a document into scorable rows.

    Walks experience, projects and leadership in that order; entries and
    bullets in stored order. Education is excluded.

    Args:
        resume: Document to flatten

    Returns:
        One FlattenedBullet per bullet (empty for a document with no bullets)
    """
    rows = []
    for section_key in ACHIEVEMENT_SECTION_KEYS:
        for entry in resume.entries_for(section_key):
            for bullet in entry.bullets:
                rows.append(
                    FlattenedBullet(
                        section_key=section_key,
                        entry_id=entry.id,
                        entry_title=entry.title,
                        organization=entry.organization,
                        bullet_id=bullet.id,
                        bullet_text=bullet.text,
                        role_type=bullet.role_type,
                        skill_tags=tuple(bullet.skill_tags),
                        originally_selected=bullet.selected and entry.selected,
                    )
                )
    return rows


def score_bullet(
    row: FlattenedBullet,
    job: JobDescription,
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
) -> BulletMatch:
    """
    Score a single flattened bullet against a prepared job description.

    Reasons are recorded in the order keyword overlap, tag match, role type.
    The overlap reason reports the full overlap count even when the points
    are capped.

    Args:
        row: Flattened bullet
        job: Prepared job description
        weights: Point values

    Returns:
        BulletMatch with integer score and reasons
    """
    bullet_tokens = unique(tokenize(f"{row.bullet_text} {row.entry_title} {row.organization}"))
    overlap = [token for token in bullet_tokens if token in job.token_set]

    matching_tags = [
        tag for tag in row.skill_tags if job.shares_token_with(tag) or job.contains_phrase(tag)
    ]

    role_type_matched = job.contains_phrase(row.role_type)

    score = 0
    reasons = []

    if overlap:
        score += min(weights.keyword_overlap_cap, len(overlap)) * weights.keyword_points
        reasons.append(f"{len(overlap)} keyword overlap")

    if matching_tags:
        score += len(matching_tags) * weights.skill_tag_points
        reasons.append(f"tag match: {', '.join(matching_tags)}")

    if role_type_matched:
        score += weights.role_type_points
        reasons.append(f"role type: {row.role_type}")

    if row.originally_selected:
        score += weights.selected_bonus

    return BulletMatch(
        section_key=row.section_key,
        entry_id=row.entry_id,
        entry_title=row.entry_title,
        organization=row.organization,
        bullet_id=row.bullet_id,
        bullet_text=row.bullet_text,
        role_type=row.role_type,
        skill_tags=row.skill_tags,
        originally_selected=row.originally_selected,
        score=score,
        reasons=tuple(reasons),
    )


def match_sort_key(match: BulletMatch) -> tuple:
    """
    Ranking key: score descending, already-selected first, then bullet text ascending.

    Text compares case-insensitively first, so "apple" sorts before "Zeta"
    (not plain code-point order). Texts equal ignoring case fall back to raw
    code-point order, which puts "Apple" before "apple".
    """
    return (-match.score, not match.originally_selected, match.bullet_text.casefold(), match.bullet_text)


def rank_matches(matches: List[BulletMatch]) -> List[BulletMatch]:
    """Return matches in ranked order (stable, deterministic)."""
    return sorted(matches, key=match_sort_key)


def score_bullets_against_job_description(
    resume: ResumeDocument,
    job_description: Union[str, JobDescription],
    weights: ScoringWeights = None,
) -> List[BulletMatch]:
    """
    Score every achievement bullet of a document against a job description.

    Args:
        resume: Master (or any) document
        job_description: Pasted text, or an already prepared JobDescription
        weights: Point values (defaults to DEFAULT_SCORING_WEIGHTS)

    Returns:
        BulletMatch list in ranked order; empty when the document has no
        achievement bullets. An empty description yields zero-overlap scores,
        not an error.

    Example:
        >>> matches = score_bullets_against_job_description(resume, "SQL analyst, Operations")
        >>> matches[0].reasons
        ('1 keyword overlap', 'tag match: SQL', 'role type: Operations')
    """
    if weights is None:
        weights = DEFAULT_SCORING_WEIGHTS
    if not isinstance(job_description, JobDescription):
        job_description = JobDescription.from_text(job_description)

    matches = [
        score_bullet(row, job_description, weights) for row in flatten_resume_bullets(resume)
    ]
    ranked = rank_matches(matches)

    log_match_summary(
        bullet_count=len(ranked),
        positive_count=sum(1 for match in ranked if match.score > 0),
        token_count=len(job_description.tokens),
    )
    return ranked
