"""
Initial bullet selection from ranked matches.

Positive-score matches are preferred. When nothing scores above zero the
selection falls back to the top of the full ranked list, so a user always
starts from a non-empty draft when the document has any bullets.
"""

from typing import List, Set

from vitae.contexts.targeting.bullet_matching import BulletMatch
from vitae.contexts.targeting.logger import log_selection
from vitae.contexts.targeting.scoring_config import DEFAULT_SELECTION_LIMIT


def ranked_selection_ids(matches: List[BulletMatch], limit: int = DEFAULT_SELECTION_LIMIT) -> List[str]:
    """
    Ordered bullet ids for the initial selection.

    Args:
        matches: Matches in ranked order (as returned by the scorer)
        limit: Maximum number of ids

    Returns:
        Up to `limit` bullet ids, best first

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"Selection limit must be non-negative, got {limit}")

    positive = [match for match in matches if match.score > 0]
    used_fallback = not positive
    pool = matches if used_fallback else positive
    selected = [match.bullet_id for match in pool[:limit]]

    if matches:
        log_selection(len(selected), used_fallback)
    return selected


def pick_initial_selections(matches: List[BulletMatch], limit: int = DEFAULT_SELECTION_LIMIT) -> Set[str]:
    """
    Pick the bullet ids that start out selected in a tailored draft.

    Example:
        >>> ids = pick_initial_selections(score_bullets_against_job_description(resume, jd))
        >>> len(ids) <= 10
        True
    """
    return set(ranked_selection_ids(matches, limit))
