"""Score normalizers: raw academic, project and cover-letter inputs to component scores.

Callers clamp raw values before calling (percentages to 0-100, backlogs >= 0).
Nothing here re-validates numbers; out-of-range input yields out-of-range
output.

Arithmetic runs on Decimal built from each value's shortest string form, so that
values such as 6.75 round half away from zero instead of drifting to 6.7.
"""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

from grading_engine.core.config import CoverLetterConfig, ProjectWeights
from grading_engine.core.schemas import (
    AcademicRecord,
    CoverLetter,
    NoCoverLetter,
    ProjectScores,
    UploadedCoverLetter,
    WrittenCoverLetter,
)

logger = logging.getLogger(__name__)


def to_decimal(value: float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: float | Decimal, digits: int = 1) -> float:
    """Round half away from zero at the given number of decimals.

    Infinities and NaN pass through unchanged. Precision grows with the
    magnitude of the value, so large numbers round instead of raising.
    """
    number = to_decimal(value)
    if not number.is_finite():
        return float(number)
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + digits + 2)
        return float(number.quantize(quantum, rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Academic
# ---------------------------------------------------------------------------


def calculate_academic_score(semesters: Sequence[float], backlogs: int) -> AcademicRecord:
    """Average the entered semesters and subtract one point per backlog.

    Zero marks count as "not entered" and are left out of the average, so a
    genuine 0% is indistinguishable from an empty semester.
    """
    entered = [to_decimal(s) for s in semesters if s > 0]
    average = sum(entered, Decimal(0)) / len(entered) if entered else Decimal(0)
    average_percentage = round_half_up(average)

    score = max(Decimal(0), to_decimal(average_percentage) / 10 - backlogs)
    record = AcademicRecord(
        semesters=tuple(semesters),
        backlogs=backlogs,
        average_percentage=average_percentage,
        academic_score=round_half_up(score),
    )
    logger.debug(
        "Academic: %d/%d semesters entered, avg=%.1f, backlogs=%d, score=%.1f",
        len(entered), len(semesters), record.average_percentage, backlogs,
        record.academic_score,
    )
    return record


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


def calculate_project_score(
    sql_score: float,
    python_score: float,
    de_score: float,
    weights: ProjectWeights | None = None,
) -> ProjectScores:
    """Weighted sum of the three project ratings (SQL 30%, Python 30%, DE 40%).

    The total is not clamped.
    """
    weights = weights or ProjectWeights()
    total = (
        to_decimal(sql_score) * to_decimal(weights.sql_analytics)
        + to_decimal(python_score) * to_decimal(weights.python_data_cleaning)
        + to_decimal(de_score) * to_decimal(weights.data_pipeline)
    )
    return ProjectScores(
        sql_analytics=sql_score,
        python_data_cleaning=python_score,
        data_pipeline=de_score,
        total_score=round_half_up(total),
    )


# ---------------------------------------------------------------------------
# Cover letter
# ---------------------------------------------------------------------------


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens. Blank text has zero words."""
    return len(text.split())


def written_score(word_count: int, config: CoverLetterConfig | None = None) -> float:
    """Score a written letter on the word-count ladder (first tier reached wins)."""
    config = config or CoverLetterConfig()
    for tier in config.word_tiers:
        if word_count >= tier.min_words:
            return tier.score
    return 0.0


def calculate_cover_letter_score(
    cover_letter: CoverLetter,
    config: CoverLetterConfig | None = None,
) -> float:
    """Derive the 0-25 score from the letter's variant and its own fields."""
    config = config or CoverLetterConfig()
    match cover_letter:
        case NoCoverLetter():
            return 0.0
        case UploadedCoverLetter():
            return config.uploaded_score
        case WrittenCoverLetter(word_count=word_count):
            return written_score(word_count, config)
        case _:
            msg = f"Unsupported cover letter type: {type(cover_letter).__name__}"
            raise TypeError(msg)


def no_cover_letter() -> NoCoverLetter:
    return NoCoverLetter()


def uploaded_cover_letter(
    file_name: str,
    config: CoverLetterConfig | None = None,
) -> UploadedCoverLetter:
    """An uploaded file always earns the flat uploaded score."""
    config = config or CoverLetterConfig()
    return UploadedCoverLetter(file_name=file_name, score=config.uploaded_score)


def written_cover_letter(
    content: str,
    config: CoverLetterConfig | None = None,
) -> WrittenCoverLetter:
    word_count = count_words(content)
    return WrittenCoverLetter(
        content=content,
        word_count=word_count,
        score=written_score(word_count, config),
    )
