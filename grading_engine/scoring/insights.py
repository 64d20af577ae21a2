"""Strengths and prioritized improvement areas derived from normalized scores.

Improvement areas are emitted in a fixed order (academic average, backlogs,
SQL, Python, data engineering, cover letter); the improvement plan is
displayed in that order.
"""

from collections.abc import Sequence

from grading_engine.catalog.roles import APPROVED_ROLES
from grading_engine.core.config import CoverLetterConfig
from grading_engine.core.schemas import (
    AcademicRecord,
    CoverLetter,
    ImprovementArea,
    NoCoverLetter,
    ProjectScores,
    RoleDefinition,
    UploadedCoverLetter,
    WrittenCoverLetter,
)

STRONG_ACADEMIC_AVERAGE = 75
LOW_ACADEMIC_AVERAGE = 65
MAX_TOLERATED_BACKLOGS = 3
STRONG_PROJECT_SCORE = 80
WEAK_SKILL_SCORE = 70
CRITICAL_SKILL_SCORE = 50

# Minimum role threshold on an axis for that role to count as unlocked.
_UNLOCK_THRESHOLDS: dict[str, float] = {"sql": 70, "python": 70, "de": 65}


def identify_strengths(
    academic: AcademicRecord,
    projects: ProjectScores,
    cover_letter: CoverLetter,
    config: CoverLetterConfig | None = None,
) -> list[str]:
    """Each rule fires independently; the list keeps rule order."""
    config = config or CoverLetterConfig()
    strengths: list[str] = []

    if academic.average_percentage >= STRONG_ACADEMIC_AVERAGE:
        strengths.append("Strong academic foundation")
    if academic.backlogs == 0:
        strengths.append("Clean academic record (no backlogs)")

    if projects.total_score >= STRONG_PROJECT_SCORE:
        strengths.append("Excellent project execution")
    if projects.sql_analytics >= STRONG_PROJECT_SCORE:
        strengths.append("Strong SQL skills")
    if projects.python_data_cleaning >= STRONG_PROJECT_SCORE:
        strengths.append("Proficient in Python")
    if projects.data_pipeline >= STRONG_PROJECT_SCORE:
        strengths.append("Good data engineering fundamentals")

    if _written_words(cover_letter) >= config.strength_min_words:
        strengths.append("Professional communication skills")

    return strengths


def identify_improvement_areas(
    academic: AcademicRecord,
    projects: ProjectScores,
    cover_letter: CoverLetter,
    config: CoverLetterConfig | None = None,
    roles: Sequence[RoleDefinition] = APPROVED_ROLES,
) -> list[ImprovementArea]:
    config = config or CoverLetterConfig()
    areas: list[ImprovementArea] = []

    if academic.average_percentage < LOW_ACADEMIC_AVERAGE:
        areas.append(ImprovementArea(
            area="Low Academic Average",
            priority="high",
            recommendation=(
                "Focus on strengthening core subjects, consider tutoring or study groups"
            ),
            unlocked_roles=["Graduate Programs", "Top-tier Company Roles"],
        ))

    if academic.backlogs > MAX_TOLERATED_BACKLOGS:
        areas.append(ImprovementArea(
            area="Multiple Backlogs",
            priority="critical",
            recommendation="Clear backlogs immediately, seek faculty help and extra coaching",
            unlocked_roles=["Most corporate roles require clear academic record"],
        ))
    elif academic.backlogs > 0:
        areas.append(ImprovementArea(
            area="Pending Backlogs",
            priority="high",
            recommendation="Clear remaining backlogs to improve eligibility",
            unlocked_roles=["Premium roles at top companies"],
        ))

    if projects.sql_analytics < WEAK_SKILL_SCORE:
        areas.append(ImprovementArea(
            area="SQL Skills Need Improvement",
            priority="critical" if projects.sql_analytics < CRITICAL_SKILL_SCORE else "high",
            recommendation=(
                "Practice on LeetCode, HackerRank, SQLZoo. "
                "Focus on JOINs, window functions, and optimization"
            ),
            unlocked_roles=roles_unlocked_by("sql", roles),
        ))

    if projects.python_data_cleaning < WEAK_SKILL_SCORE:
        areas.append(ImprovementArea(
            area="Python Skills Need Improvement",
            priority=(
                "critical" if projects.python_data_cleaning < CRITICAL_SKILL_SCORE else "high"
            ),
            recommendation=(
                "Work through Pandas, NumPy tutorials. Build personal data analysis projects"
            ),
            unlocked_roles=roles_unlocked_by("python", roles),
        ))

    # Data engineering drops to "medium" rather than "high" above the critical band.
    if projects.data_pipeline < WEAK_SKILL_SCORE:
        areas.append(ImprovementArea(
            area="Data Engineering Fundamentals",
            priority="critical" if projects.data_pipeline < CRITICAL_SKILL_SCORE else "medium",
            recommendation=(
                "Study ETL/ELT concepts, build data pipelines with Apache Airflow "
                "or similar tools"
            ),
            unlocked_roles=roles_unlocked_by("de", roles),
        ))

    # Uploaded files carry no word count, so they count as brief.
    match cover_letter:
        case NoCoverLetter():
            areas.append(ImprovementArea(
                area="Missing Cover Letter",
                priority="medium",
                recommendation=(
                    "Write a compelling 300-500 word cover letter highlighting "
                    "your goals and motivation"
                ),
            ))
        case WrittenCoverLetter() | UploadedCoverLetter():
            if _written_words(cover_letter) < config.brief_below_words:
                areas.append(ImprovementArea(
                    area="Brief Cover Letter",
                    priority="medium",
                    recommendation=(
                        "Expand your cover letter to 300-500 words with specific examples "
                        "and goals"
                    ),
                ))
        case _:
            msg = f"Unsupported cover letter type: {type(cover_letter).__name__}"
            raise TypeError(msg)

    return areas


def roles_unlocked_by(axis: str, roles: Sequence[RoleDefinition] = APPROVED_ROLES) -> list[str]:
    """Titles of roles whose threshold on ``axis`` is at or above the unlock bar."""
    bar = _UNLOCK_THRESHOLDS[axis]
    titles: list[str] = []
    for role in roles:
        threshold = role.thresholds.declared().get(axis)
        if threshold is not None and threshold >= bar:
            titles.append(role.title)
    return titles


def _written_words(cover_letter: CoverLetter) -> int:
    """Word count of a written letter; uploaded files are never word-counted."""
    match cover_letter:
        case WrittenCoverLetter(word_count=word_count):
            return word_count
        case NoCoverLetter() | UploadedCoverLetter():
            return 0
        case _:
            msg = f"Unsupported cover letter type: {type(cover_letter).__name__}"
            raise TypeError(msg)
