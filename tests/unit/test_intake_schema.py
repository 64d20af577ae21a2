"""Tests for AssessmentInput: clamping, cover-letter variants, questionnaire validation, YAML."""

from datetime import datetime
from pathlib import Path
from textwrap import dedent
from typing import Any

import pytest
from pydantic import ValidationError

from grading_engine.core.config import CoverLetterConfig
from grading_engine.core.schemas import NoCoverLetter, UploadedCoverLetter, WrittenCoverLetter
from grading_engine.intake.schema import (
    AssessmentInput,
    CoverLetterInput,
    ProjectRatings,
    QuestionnaireInput,
)


def _answers(option_index: int = 0) -> dict[int, int]:
    return {qid: option_index for qid in range(1, 9)}


def _assessment(**overrides: Any) -> AssessmentInput:
    data: dict[str, Any] = {"questionnaire": {"answers": _answers()}}
    data.update(overrides)
    return AssessmentInput.model_validate(data)


# ---------------------------------------------------------------------------
# Clamping
# ---------------------------------------------------------------------------


class TestProjectRatings:
    def test_defaults_zero(self) -> None:
        r = ProjectRatings()
        assert (r.sql_analytics, r.python_data_cleaning, r.data_pipeline) == (0, 0, 0)

    def test_clamped_to_percentage_range(self) -> None:
        r = ProjectRatings(sql_analytics=130, python_data_cleaning=-5, data_pipeline=64.5)
        assert r.sql_analytics == 100
        assert r.python_data_cleaning == 0
        assert r.data_pipeline == 64.5


class TestAssessmentInputClamping:
    def test_default_semesters_unfilled(self) -> None:
        assert _assessment().semesters == [0.0] * 8

    def test_semesters_clamped(self) -> None:
        a = _assessment(semesters=[105, -3, 72.5])
        assert a.semesters == [100, 0, 72.5]

    def test_too_many_semesters(self) -> None:
        with pytest.raises(ValidationError, match="at most 8 semesters"):
            _assessment(semesters=[70] * 9)

    def test_negative_backlogs_clamped(self) -> None:
        assert _assessment(backlogs=-2).backlogs == 0

    def test_questionnaire_required(self) -> None:
        with pytest.raises(ValidationError):
            AssessmentInput.model_validate({})


# ---------------------------------------------------------------------------
# Cover letter
# ---------------------------------------------------------------------------


class TestCoverLetterInput:
    def test_default_none(self) -> None:
        letter = CoverLetterInput().to_cover_letter()
        assert isinstance(letter, NoCoverLetter)

    def test_uploaded(self) -> None:
        letter = CoverLetterInput(type="uploaded", file_name=" letter.pdf ").to_cover_letter()
        assert isinstance(letter, UploadedCoverLetter)
        assert letter.file_name == "letter.pdf"
        assert letter.score == 22

    def test_uploaded_uses_config(self) -> None:
        letter = CoverLetterInput(type="uploaded", file_name="a.pdf").to_cover_letter(
            CoverLetterConfig(uploaded_score=15),
        )
        assert letter.score == 15

    def test_written(self) -> None:
        letter = CoverLetterInput(type="written", content="one two three").to_cover_letter()
        assert isinstance(letter, WrittenCoverLetter)
        assert letter.word_count == 3
        assert letter.score == 5

    def test_written_without_content_scores_zero(self) -> None:
        letter = CoverLetterInput(type="written").to_cover_letter()
        assert isinstance(letter, WrittenCoverLetter)
        assert letter.word_count == 0
        assert letter.score == 0

    def test_uploaded_requires_file_name(self) -> None:
        with pytest.raises(ValidationError, match="requires a file_name"):
            CoverLetterInput(type="uploaded", file_name="  ")

    def test_uploaded_rejects_content(self) -> None:
        with pytest.raises(ValidationError, match="must not carry written content"):
            CoverLetterInput(type="uploaded", file_name="a.pdf", content="text")

    def test_written_rejects_file_name(self) -> None:
        with pytest.raises(ValidationError, match="must not carry a file_name"):
            CoverLetterInput(type="written", content="text", file_name="a.pdf")

    def test_none_rejects_payload(self) -> None:
        with pytest.raises(ValidationError, match="type 'none'"):
            CoverLetterInput(type="none", content="text")

    def test_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            CoverLetterInput(type="video")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Questionnaire
# ---------------------------------------------------------------------------


class TestQuestionnaireInput:
    def test_complete(self) -> None:
        q = QuestionnaireInput(answers=_answers(3))
        assert q.answers[8] == 3
        assert q.completed_at is None

    def test_string_keys_coerced(self) -> None:
        q = QuestionnaireInput.model_validate({"answers": {str(k): 1 for k in range(1, 9)}})
        assert q.answers == _answers(1)

    def test_incomplete(self) -> None:
        answers = _answers()
        del answers[4]
        del answers[7]
        with pytest.raises(ValidationError, match=r"unanswered questions: \[4, 7\]"):
            QuestionnaireInput(answers=answers)

    def test_unknown_question(self) -> None:
        with pytest.raises(ValidationError, match="unknown question id 9"):
            QuestionnaireInput(answers={**_answers(), 9: 0})

    def test_option_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="got option index 4"):
            QuestionnaireInput(answers={**_answers(), 2: 4})

    def test_completed_at_parsed(self) -> None:
        q = QuestionnaireInput(answers=_answers(), completed_at="2025-03-14T10:30:00")
        assert q.completed_at == datetime(2025, 3, 14, 10, 30)


# ---------------------------------------------------------------------------
# YAML
# ---------------------------------------------------------------------------


class TestAssessmentYaml:
    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "assessment.yaml"
        path.write_text(dedent("""\
            student_name: Priya
            semesters: [78, 72, 75, 80, 76, 82, 79, 77]
            backlogs: 1
            projects:
              sql_analytics: 75
              python_data_cleaning: 80
              data_pipeline: 70
            cover_letter:
              type: uploaded
              file_name: priya.pdf
            questionnaire:
              answers: {1: 0, 2: 1, 3: 2, 4: 3, 5: 0, 6: 1, 7: 2, 8: 3}
        """))
        a = AssessmentInput.from_yaml(path)
        assert a.student_name == "Priya"
        assert a.backlogs == 1
        assert a.projects.python_data_cleaning == 80
        assert a.cover_letter.type == "uploaded"
        assert a.questionnaire.answers[3] == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Assessment file not found"):
            AssessmentInput.from_yaml(tmp_path / "nope.yaml")

    def test_empty_file_fails_validation(self, tmp_path: Path) -> None:
        path = tmp_path / "assessment.yaml"
        path.write_text("")
        with pytest.raises(ValidationError):
            AssessmentInput.from_yaml(path)

    def test_round_trip(self, tmp_path: Path) -> None:
        assessment = _assessment(
            student_name="Arjun",
            semesters=[70, 71],
            cover_letter={"type": "written", "content": "Dear team"},
        )
        path = tmp_path / "out" / "assessment.yaml"
        assessment.to_yaml(path)
        assert AssessmentInput.from_yaml(path) == assessment
