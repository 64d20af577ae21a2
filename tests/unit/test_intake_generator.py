"""Tests for the assessment template generator."""

from pathlib import Path

import yaml

from grading_engine.catalog.questionnaire import CAREER_QUESTIONNAIRE
from grading_engine.intake.generator import (
    generate_template_dict,
    questionnaire_header,
    write_assessment_yaml,
)
from grading_engine.intake.schema import AssessmentInput


class TestGenerateTemplateDict:
    def test_validates_as_is(self) -> None:
        a = AssessmentInput.model_validate(generate_template_dict())
        assert a.semesters == [0.0] * 8
        assert a.cover_letter.type == "none"
        assert a.questionnaire.answers == {q.id: 0 for q in CAREER_QUESTIONNAIRE}

    def test_overrides(self) -> None:
        data = generate_template_dict(student_name="Meera", backlogs=2)
        assert data["student_name"] == "Meera"
        assert data["backlogs"] == 2
        assert data["projects"]["data_pipeline"] == 0


class TestQuestionnaireHeader:
    def test_all_lines_are_comments(self) -> None:
        header = questionnaire_header()
        assert all(line.startswith("#") for line in header.splitlines())

    def test_lists_every_question_and_option(self) -> None:
        header = questionnaire_header()
        for q in CAREER_QUESTIONNAIRE:
            assert f"{q.id}. {q.question}" in header
            for option in q.options:
                assert option.text in header


class TestWriteAssessmentYaml:
    def test_written_file_loads(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "assessment.yaml"
        write_assessment_yaml(generate_template_dict(student_name="Meera"), path)

        text = path.read_text()
        assert text.startswith("# Semester marks")
        assert yaml.safe_load(text)["student_name"] == "Meera"
        assert AssessmentInput.from_yaml(path).student_name == "Meera"
