"""
Targeting Configuration

Scoring weights and selection policy for bullet matching. The defaults are
the production weights; a YAML file can override any subset of them.

Config file layout (vitae/configs/targeting.yaml):
    scoring:
      keyword_points: 4
      keyword_overlap_cap: 8
      role_type_points: 6
      skill_tag_points: 5
      selected_bonus: 1
    selection:
      limit: 10

Examples:
    >>> config = load_targeting_config()
    >>> config.scoring.keyword_points
    4

    >>> # Override from another file
    >>> config = load_targeting_config(Path("configs/aggressive.yaml"))
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "targeting.yaml"
TARGETING_CONFIG_PATH = Path(os.getenv("TARGETING_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)))


@dataclass
class ScoringWeights:
    """
    Point values used when scoring a bullet against a job description.

    Attributes:
        keyword_points: Points per overlapping keyword token
        keyword_overlap_cap: Maximum number of overlapping keywords that score
        role_type_points: Points when the bullet's role type appears in the description
        skill_tag_points: Points per matching skill tag
        selected_bonus: Tie-break nudge for bullets already selected in the document
    """

    keyword_points: int = 4
    keyword_overlap_cap: int = 8
    role_type_points: int = 6
    skill_tag_points: int = 5
    selected_bonus: int = 1


@dataclass
class SelectionPolicy:
    """
    Attributes:
        limit: Number of ranked bullets picked for the initial selection
    """

    limit: int = 10


@dataclass
class TargetingConfig:
    scoring: ScoringWeights = field(default_factory=ScoringWeights)
    selection: SelectionPolicy = field(default_factory=SelectionPolicy)


DEFAULT_SCORING_WEIGHTS = ScoringWeights()
DEFAULT_SELECTION_LIMIT = SelectionPolicy().limit


def load_targeting_config(config_path: Path = None) -> TargetingConfig:
    """
    Load targeting config from YAML, merged over the defaults.

    Keys missing from the file keep their default values. Unknown keys and
    values of the wrong type are rejected by OmegaConf's structured schema.

    Args:
        config_path: Optional path to config file (defaults to TARGETING_CONFIG_PATH)

    Returns:
        TargetingConfig instance

    Raises:
        FileNotFoundError: If config_path does not exist
        omegaconf.errors.ValidationError: If a value has the wrong type
        omegaconf.errors.ConfigKeyError: If the file contains unknown keys
    """
    if config_path is None:
        config_path = TARGETING_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Targeting config not found: {config_path}")

    schema = OmegaConf.structured(TargetingConfig)
    merged = OmegaConf.merge(schema, OmegaConf.load(config_path))
    return OmegaConf.to_object(merged)


def load_scoring_weights(config_path: Path = None) -> ScoringWeights:
    """Load only the scoring weights section of the targeting config."""
    return load_targeting_config(config_path).scoring
