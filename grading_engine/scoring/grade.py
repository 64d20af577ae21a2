"""Grade aggregator: weighted 100-point total and letter grade.

Total = academic/10 * 25 + projects/100 * 50 + cover letter (already 0-25).
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from grading_engine.catalog.roles import APPROVED_ROLES
from grading_engine.core.config import Settings
from grading_engine.core.schemas import (
    AcademicRecord,
    CoverLetter,
    GradeBreakdown,
    GradeLetter,
    ProjectScores,
    RoleDefinition,
    StudentGrade,
)
from grading_engine.scoring.insights import identify_improvement_areas, identify_strengths
from grading_engine.scoring.normalizers import (
    calculate_cover_letter_score,
    round_half_up,
    to_decimal,
)

logger = logging.getLogger(__name__)

_COVER_LETTER_SCALE = Decimal(25)


class GradeBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    letter: GradeLetter
    min: float
    max: float
    label: str


# Descending; the first band whose minimum the score reaches wins.
GRADE_BANDS: tuple[GradeBand, ...] = (
    GradeBand(letter=GradeLetter.A_PLUS, min=90, max=100, label="Outstanding performance"),
    GradeBand(letter=GradeLetter.A, min=85, max=89, label="Excellent performance"),
    GradeBand(letter=GradeLetter.A_MINUS, min=80, max=84, label="Very good performance"),
    GradeBand(letter=GradeLetter.B_PLUS, min=75, max=79, label="Good performance"),
    GradeBand(letter=GradeLetter.B, min=70, max=74, label="Fair performance"),
    GradeBand(letter=GradeLetter.B_MINUS, min=65, max=69, label="Average performance"),
    GradeBand(letter=GradeLetter.C_PLUS, min=60, max=64, label="Below average"),
    GradeBand(letter=GradeLetter.C, min=50, max=59, label="Needs improvement"),
    GradeBand(letter=GradeLetter.D, min=0, max=49, label="Requires significant work"),
)

_BANDS_BY_LETTER: dict[GradeLetter, GradeBand] = {b.letter: b for b in GRADE_BANDS}


def get_grade_letter(total_score: float) -> GradeLetter:
    for band in GRADE_BANDS:
        if total_score >= band.min:
            return band.letter
    return GradeLetter.D


def grade_label(letter: GradeLetter) -> str:
    return _BANDS_BY_LETTER[letter].label


def grade_rank(letter: GradeLetter) -> int:
    """0 for D up to 8 for A+."""
    return len(GRADE_BANDS) - 1 - GRADE_BANDS.index(_BANDS_BY_LETTER[letter])


def calculate_student_grade(
    academic: AcademicRecord,
    projects: ProjectScores,
    cover_letter: CoverLetter,
    settings: Settings | None = None,
    roles: Sequence[RoleDefinition] = APPROVED_ROLES,
) -> StudentGrade:
    """Combine the normalized component scores into the final grade.

    Args:
        academic: Output of ``calculate_academic_score`` (score on a 0-10 scale).
        projects: Output of ``calculate_project_score`` (total on a 0-100 scale).
        cover_letter: Any cover-letter variant.
        settings: Component maxima and heuristics. Defaults reproduce 25/50/25.
        roles: Catalog used for the role-unlock hints in improvement areas.

    Returns:
        StudentGrade with breakdown, strengths and improvement areas.
    """
    settings = settings or Settings()
    grading = settings.grading

    academic_contribution = (
        to_decimal(academic.academic_score) / 10 * to_decimal(grading.academic_max)
    )
    project_contribution = (
        to_decimal(projects.total_score) / 100 * to_decimal(grading.projects_max)
    )
    cover_letter_score = calculate_cover_letter_score(cover_letter, settings.cover_letter)
    cover_letter_contribution = (
        to_decimal(cover_letter_score) / _COVER_LETTER_SCALE * to_decimal(grading.cover_letter_max)
    )

    total_score = round_half_up(
        academic_contribution + project_contribution + cover_letter_contribution
    )
    grade = get_grade_letter(total_score)

    breakdown = GradeBreakdown(
        academic=round_half_up(academic_contribution),
        projects=round_half_up(project_contribution),
        cover_letter=round_half_up(cover_letter_contribution),
    )
    logger.debug(
        "Grade: academic=%.1f projects=%.1f cover_letter=%.1f total=%.1f (%s)",
        breakdown.academic, breakdown.projects, breakdown.cover_letter,
        total_score, grade.value,
    )

    return StudentGrade(
        grade=grade,
        total_score=total_score,
        breakdown=breakdown,
        strengths=identify_strengths(academic, projects, cover_letter, settings.cover_letter),
        improvement_areas=identify_improvement_areas(
            academic, projects, cover_letter, settings.cover_letter, roles,
        ),
    )
