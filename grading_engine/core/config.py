"""Configuration models and YAML loader for the grading engine."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

_WEIGHT_TOLERANCE = 1e-9


class ProjectWeights(BaseModel):
    """Relative weight of each project rating in the project total."""

    sql_analytics: float = Field(default=0.30, ge=0.0, le=1.0)
    python_data_cleaning: float = Field(default=0.30, ge=0.0, le=1.0)
    data_pipeline: float = Field(default=0.40, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> "ProjectWeights":
        total = self.sql_analytics + self.python_data_cleaning + self.data_pipeline
        if abs(total - 1.0) > _WEIGHT_TOLERANCE:
            msg = f"project weights must sum to 1.0, got {total}"
            raise ValueError(msg)
        return self


class GradingConfig(BaseModel):
    """Maximum points each component contributes to the 100-point total."""

    academic_max: float = Field(default=25.0, ge=0.0)
    projects_max: float = Field(default=50.0, ge=0.0)
    cover_letter_max: float = Field(default=25.0, ge=0.0)
    project_weights: ProjectWeights = Field(default_factory=ProjectWeights)

    @model_validator(mode="after")
    def maxima_sum_to_hundred(self) -> "GradingConfig":
        total = self.academic_max + self.projects_max + self.cover_letter_max
        if abs(total - 100.0) > _WEIGHT_TOLERANCE:
            msg = f"academic_max + projects_max + cover_letter_max must equal 100, got {total}"
            raise ValueError(msg)
        return self


class WordCountTier(BaseModel):
    """A written cover letter with at least min_words words earns score."""

    min_words: int = Field(ge=1)
    score: float = Field(ge=0.0, le=25.0)


def _default_tiers() -> list[WordCountTier]:
    return [
        WordCountTier(min_words=500, score=25),
        WordCountTier(min_words=300, score=20),
        WordCountTier(min_words=200, score=15),
        WordCountTier(min_words=100, score=10),
        WordCountTier(min_words=1, score=5),
    ]


class CoverLetterConfig(BaseModel):
    """Heuristics for scoring and judging cover letters."""

    uploaded_score: float = Field(default=22.0, ge=0.0, le=25.0)
    word_tiers: list[WordCountTier] = Field(default_factory=_default_tiers)
    strength_min_words: int = Field(default=300, ge=0)
    brief_below_words: int = Field(default=200, ge=0)

    @field_validator("word_tiers")
    @classmethod
    def tiers_sorted_descending(cls, v: list[WordCountTier]) -> list[WordCountTier]:
        if not v:
            msg = "at least one word-count tier must be configured"
            raise ValueError(msg)
        return sorted(v, key=lambda t: t.min_words, reverse=True)


class EligibilityConfig(BaseModel):
    """Cut-off for listing an ineligible role as a potential role."""

    potential_min_match: int = Field(default=50, ge=0, le=100)


class Settings(BaseModel):
    """Top-level settings loaded from YAML. Every section has defaults."""

    grading: GradingConfig = Field(default_factory=GradingConfig)
    cover_letter: CoverLetterConfig = Field(default_factory=CoverLetterConfig)
    eligibility: EligibilityConfig = Field(default_factory=EligibilityConfig)
    roles_path: str | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        settings = cls.model_validate(raw)
        # Relative catalog paths resolve against the config file's directory.
        if settings.roles_path and not Path(settings.roles_path).is_absolute():
            settings.roles_path = str(path.parent / settings.roles_path)
        logger.info("Loaded settings from %s", path)
        return settings
