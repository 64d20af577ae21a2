"""Core data models for the grading and eligibility engine.

Computed records are frozen: normalizers build them once from raw inputs and
nothing downstream mutates them.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Stream(str, Enum):
    """Career-affinity stream used for questionnaire results and roles."""

    DATA_ENGINEERING = "data-engineering"
    AI_ML = "ai-ml"
    BI_REPORTING = "bi-reporting"
    ENTRY_LEVEL = "entry-level"


# Canonical order; ties in top-stream selection resolve to the earliest entry.
STREAM_ORDER: tuple[Stream, ...] = (
    Stream.DATA_ENGINEERING,
    Stream.AI_ML,
    Stream.BI_REPORTING,
    Stream.ENTRY_LEVEL,
)


class GradeLetter(str, Enum):
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    D = "D"


Priority = Literal["critical", "high", "medium"]


# ---------------------------------------------------------------------------
# Normalized component scores
# ---------------------------------------------------------------------------


class AcademicRecord(BaseModel):
    """Semester marks and backlogs with the derived average and score."""

    model_config = ConfigDict(frozen=True)

    semesters: tuple[float, ...]
    backlogs: int
    average_percentage: float
    academic_score: float


class ProjectScores(BaseModel):
    """The three project ratings and their weighted total."""

    model_config = ConfigDict(frozen=True)

    sql_analytics: float
    python_data_cleaning: float
    data_pipeline: float
    total_score: float


class NoCoverLetter(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["none"] = "none"
    score: float = 0


class UploadedCoverLetter(BaseModel):
    """An uploaded file. Its content is never inspected."""

    model_config = ConfigDict(frozen=True)

    type: Literal["uploaded"] = "uploaded"
    file_name: str
    score: float


class WrittenCoverLetter(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["written"] = "written"
    content: str
    word_count: int = Field(ge=0)
    score: float


CoverLetter = Annotated[
    NoCoverLetter | UploadedCoverLetter | WrittenCoverLetter,
    Field(discriminator="type"),
]


class StreamScores(BaseModel):
    """Per-stream affinity accumulators from the questionnaire."""

    model_config = ConfigDict(frozen=True)

    data_engineering: int = Field(default=0, ge=0)
    ai_ml: int = Field(default=0, ge=0)
    bi_reporting: int = Field(default=0, ge=0)
    entry_level: int = Field(default=0, ge=0)

    def for_stream(self, stream: Stream) -> int:
        return getattr(self, _STREAM_FIELDS[stream])


_STREAM_FIELDS: dict[Stream, str] = {
    Stream.DATA_ENGINEERING: "data_engineering",
    Stream.AI_ML: "ai_ml",
    Stream.BI_REPORTING: "bi_reporting",
    Stream.ENTRY_LEVEL: "entry_level",
}


class QuestionnaireResponse(BaseModel):
    """Selected option per question, with the stream totals they produce."""

    model_config = ConfigDict(frozen=True)

    answers: dict[int, int] = Field(default_factory=dict)
    stream_scores: StreamScores = Field(default_factory=StreamScores)
    completed_at: datetime | None = None


# ---------------------------------------------------------------------------
# Grade output
# ---------------------------------------------------------------------------


class GradeBreakdown(BaseModel):
    """Sub-scores on fixed maxima: academic/25, projects/50, cover letter/25."""

    model_config = ConfigDict(frozen=True)

    academic: float
    projects: float
    cover_letter: float


class ImprovementArea(BaseModel):
    model_config = ConfigDict(frozen=True)

    area: str
    priority: Priority
    recommendation: str
    unlocked_roles: list[str] = Field(default_factory=list)


class StudentGrade(BaseModel):
    model_config = ConfigDict(frozen=True)

    grade: GradeLetter
    total_score: float
    breakdown: GradeBreakdown
    strengths: list[str] = Field(default_factory=list)
    improvement_areas: list[ImprovementArea] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------


class RoleThresholds(BaseModel):
    """Sparse minimum scores. Unset axes are not requirements."""

    model_config = ConfigDict(frozen=True)

    sql: float | None = None
    python: float | None = None
    de: float | None = None
    academic: float | None = None

    def declared(self) -> dict[str, float]:
        """Return the set thresholds in evaluation order (sql, python, de, academic)."""
        return {
            axis: value
            for axis, value in (
                ("sql", self.sql),
                ("python", self.python),
                ("de", self.de),
                ("academic", self.academic),
            )
            if value is not None
        }


class SalaryRange(BaseModel):
    """Annual salary band in lakhs INR."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(ge=0)
    max: float = Field(ge=0)


class RoleDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    stream: Stream
    description: str = ""
    salary_range: SalaryRange
    thresholds: RoleThresholds = Field(default_factory=RoleThresholds)
    skills: list[str] = Field(default_factory=list)


class RoleEligibility(BaseModel):
    """Outcome of checking one role against a candidate's skill scores."""

    model_config = ConfigDict(frozen=True)

    role: RoleDefinition
    is_eligible: bool
    match_score: int = Field(ge=0, le=100)
    missing_requirements: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Full evaluation
# ---------------------------------------------------------------------------


class AssessmentReport(BaseModel):
    """Everything produced for one student from one input snapshot."""

    model_config = ConfigDict(frozen=True)

    academic: AcademicRecord
    projects: ProjectScores
    cover_letter: CoverLetter
    questionnaire: QuestionnaireResponse
    top_stream: Stream
    grade: StudentGrade
    eligible_roles: list[RoleEligibility] = Field(default_factory=list)
    potential_roles: list[RoleEligibility] = Field(default_factory=list)
    catalog_version: str = ""
