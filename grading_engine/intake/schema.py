"""AssessmentInput model: one student's raw inputs, loaded from YAML.

This is the caller side of the engine contract: marks and ratings are
clamped to 0-100 and backlogs to >= 0 here, before any scoring runs.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from grading_engine.catalog.questionnaire import CAREER_QUESTIONNAIRE, QUESTIONS_BY_ID
from grading_engine.core.config import CoverLetterConfig
from grading_engine.core.schemas import CoverLetter
from grading_engine.scoring.normalizers import (
    no_cover_letter,
    uploaded_cover_letter,
    written_cover_letter,
)

MAX_SEMESTERS = 8


def _clamp_percentage(value: float) -> float:
    return min(100.0, max(0.0, value))


class ProjectRatings(BaseModel):
    """Raw 0-100 ratings for the three evaluated projects."""

    sql_analytics: float = 0.0
    python_data_cleaning: float = 0.0
    data_pipeline: float = 0.0

    @field_validator("sql_analytics", "python_data_cleaning", "data_pipeline")
    @classmethod
    def clamp_rating(cls, v: float) -> float:
        return _clamp_percentage(v)


class CoverLetterInput(BaseModel):
    """Raw cover letter: nothing, an uploaded file name, or written text.

    Fields that do not belong to the chosen type are rejected rather than
    carried along.
    """

    type: Literal["none", "uploaded", "written"] = "none"
    file_name: str | None = None
    content: str | None = None

    @model_validator(mode="after")
    def fields_match_type(self) -> "CoverLetterInput":
        if self.type == "uploaded":
            if not (self.file_name or "").strip():
                msg = "uploaded cover letter requires a file_name"
                raise ValueError(msg)
            if self.content is not None:
                msg = "uploaded cover letter must not carry written content"
                raise ValueError(msg)
        elif self.type == "written":
            if self.file_name is not None:
                msg = "written cover letter must not carry a file_name"
                raise ValueError(msg)
        elif self.file_name is not None or self.content is not None:
            msg = "cover letter of type 'none' must not carry a file_name or content"
            raise ValueError(msg)
        return self

    def to_cover_letter(self, config: CoverLetterConfig | None = None) -> CoverLetter:
        """Build the scored cover-letter variant."""
        if self.type == "uploaded":
            return uploaded_cover_letter((self.file_name or "").strip(), config)
        if self.type == "written":
            return written_cover_letter(self.content or "", config)
        return no_cover_letter()


class QuestionnaireInput(BaseModel):
    """Selected option index per question ID. All questions must be answered."""

    answers: dict[int, int] = Field(default_factory=dict)
    completed_at: datetime | None = None

    @field_validator("answers")
    @classmethod
    def answers_valid_and_complete(cls, v: dict[int, int]) -> dict[int, int]:
        for question_id, option_index in v.items():
            question = QUESTIONS_BY_ID.get(question_id)
            if question is None:
                msg = f"unknown question id {question_id}"
                raise ValueError(msg)
            if not 0 <= option_index < len(question.options):
                msg = (
                    f"question {question_id} has {len(question.options)} options, "
                    f"got option index {option_index}"
                )
                raise ValueError(msg)
        unanswered = [q.id for q in CAREER_QUESTIONNAIRE if q.id not in v]
        if unanswered:
            msg = f"questionnaire incomplete, unanswered questions: {unanswered}"
            raise ValueError(msg)
        return v


class AssessmentInput(BaseModel):
    """Complete input snapshot for one final assessment."""

    student_name: str = ""
    semesters: list[float] = Field(default_factory=lambda: [0.0] * MAX_SEMESTERS)
    backlogs: int = 0
    projects: ProjectRatings = Field(default_factory=ProjectRatings)
    cover_letter: CoverLetterInput = Field(default_factory=CoverLetterInput)
    questionnaire: QuestionnaireInput

    @field_validator("semesters")
    @classmethod
    def clamp_semesters(cls, v: list[float]) -> list[float]:
        if len(v) > MAX_SEMESTERS:
            msg = f"at most {MAX_SEMESTERS} semesters allowed, got {len(v)}"
            raise ValueError(msg)
        return [_clamp_percentage(s) for s in v]

    @field_validator("backlogs")
    @classmethod
    def clamp_backlogs(cls, v: int) -> int:
        return max(0, v)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AssessmentInput":
        """Load an assessment from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Assessment file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    def to_yaml(self, path: str | Path) -> None:
        """Write the assessment to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(exclude_none=True)
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))
