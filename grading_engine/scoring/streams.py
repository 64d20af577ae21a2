"""Stream scorer: folds questionnaire answers into four stream accumulators."""

import logging
from collections.abc import Mapping
from datetime import datetime

from grading_engine.catalog.questionnaire import CAREER_QUESTIONNAIRE, QUESTIONS_BY_ID
from grading_engine.core.schemas import (
    STREAM_ORDER,
    QuestionnaireResponse,
    Stream,
    StreamScores,
)

logger = logging.getLogger(__name__)


def calculate_stream_scores(answers: Mapping[int, int]) -> StreamScores:
    """Sum the stream weights of each selected option.

    Unknown question IDs and out-of-range option indices contribute nothing.
    """
    totals = {"data_engineering": 0, "ai_ml": 0, "bi_reporting": 0, "entry_level": 0}
    for question_id, option_index in answers.items():
        question = QUESTIONS_BY_ID.get(question_id)
        if question is None or not 0 <= option_index < len(question.options):
            logger.debug("Ignoring answer %s -> %s", question_id, option_index)
            continue
        weights = question.options[option_index].stream_weights
        for field in totals:
            totals[field] += getattr(weights, field)
    return StreamScores(**totals)


def get_top_stream(stream_scores: StreamScores) -> Stream:
    """Return the highest-scoring stream; ties go to the earliest in STREAM_ORDER."""
    best = STREAM_ORDER[0]
    for stream in STREAM_ORDER[1:]:
        if stream_scores.for_stream(stream) > stream_scores.for_stream(best):
            best = stream
    return best


def is_questionnaire_complete(answers: Mapping[int, int]) -> bool:
    return all(q.id in answers for q in CAREER_QUESTIONNAIRE)


def questionnaire_progress(answers: Mapping[int, int]) -> float:
    """Percentage of the question bank answered."""
    answered = sum(1 for q in CAREER_QUESTIONNAIRE if q.id in answers)
    return answered / len(CAREER_QUESTIONNAIRE) * 100


def build_questionnaire_response(
    answers: Mapping[int, int],
    completed_at: datetime | None = None,
) -> QuestionnaireResponse:
    """Build a response whose stream scores are derived from the answers.

    The completion time is recorded as given; the engine never reads the clock.
    """
    stream_scores = calculate_stream_scores(answers)
    logger.debug("Stream scores: %s", stream_scores.model_dump())
    return QuestionnaireResponse(
        answers=dict(answers),
        stream_scores=stream_scores,
        completed_at=completed_at,
    )
