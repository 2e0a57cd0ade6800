"""
Targeting Context

Responsibilities:
- Flattens achievement bullets for scoring
- Scores bullets against a prepared job description and ranks them
- Picks the initial bullet selection
- Builds tailored drafts from the master resume

Owns: Relevance scoring, ranking, selection, tailored-draft construction
Never: Reads or writes storage, or edits master resume content
"""

from vitae.contexts.targeting.bullet_matching import (
    BulletMatch,
    FlattenedBullet,
    flatten_resume_bullets,
    rank_matches,
    score_bullet,
    score_bullets_against_job_description,
)
from vitae.contexts.targeting.scoring_config import (
    DEFAULT_SCORING_WEIGHTS,
    DEFAULT_SELECTION_LIMIT,
    ScoringWeights,
    TargetingConfig,
    load_scoring_weights,
    load_targeting_config,
)
from vitae.contexts.targeting.selection import pick_initial_selections, ranked_selection_ids
from vitae.contexts.targeting.tailoring import build_tailored_resume, create_resume_version_record

__all__ = [
    # Matching
    "BulletMatch",
    "FlattenedBullet",
    "flatten_resume_bullets",
    "rank_matches",
    "score_bullet",
    "score_bullets_against_job_description",
    # Selection and tailoring
    "pick_initial_selections",
    "ranked_selection_ids",
    "build_tailored_resume",
    "create_resume_version_record",
    # Configuration
    "DEFAULT_SCORING_WEIGHTS",
    "DEFAULT_SELECTION_LIMIT",
    "ScoringWeights",
    "TargetingConfig",
    "load_scoring_weights",
    "load_targeting_config",
]
