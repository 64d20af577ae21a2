"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest

from grading_engine.intake.generator import generate_template_dict, write_assessment_yaml
from main import main, parse_args


def _write_assessment(tmp_path: Path, **overrides: object) -> Path:
    data = generate_template_dict(
        student_name="Priya",
        semesters=[78, 72, 75, 80, 76, 82, 79, 77],
        backlogs=1,
        projects={"sql_analytics": 75, "python_data_cleaning": 80, "data_pipeline": 70},
        cover_letter={"type": "written", "content": " ".join(["word"] * 300)},
    )
    data.update(overrides)
    path = tmp_path / "assessment.yaml"
    write_assessment_yaml(data, path)
    return path


class TestParseArgs:
    def test_no_command_exits_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            parse_args([])
        assert exc.value.code == 2
        assert "usage" in capsys.readouterr().err

    def test_grade_requires_input(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["grade"])

    def test_grade_args(self) -> None:
        args = parse_args(["grade", "--input", "a.yaml", "--export", "json", "-v"])
        assert args.command == "grade"
        assert args.input == "a.yaml"
        assert args.export == "json"
        assert args.verbose

    def test_init_default_output(self) -> None:
        assert parse_args(["init-assessment"]).output == "assessment.yaml"

    def test_roles_rejects_unknown_stream(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["roles", "--stream", "marketing"])


class TestGradeCommand:
    def test_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["grade", "--input", str(_write_assessment(tmp_path))])
        out = capsys.readouterr().out
        assert "Grade: B (74.0/100) - Fair performance" in out
        assert "Top stream: Data Engineering" in out
        assert "Eligible roles" in out

    def test_json_export(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["grade", "--input", str(_write_assessment(tmp_path)), "--export", "json"])
        report = json.loads(capsys.readouterr().out)
        assert report["grade"]["grade"] == "B"
        assert report["grade"]["total_score"] == 74.0
        assert report["cover_letter"]["type"] == "written"
        assert report["catalog_version"] == "1.0"

    def test_missing_input_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["grade", "--input", str(tmp_path / "absent.yaml")])
        assert exc.value.code == 1
        assert "Error: Assessment file not found" in capsys.readouterr().err

    def test_invalid_input_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write_assessment(tmp_path, questionnaire={"answers": {1: 0}})
        with pytest.raises(SystemExit) as exc:
            main(["grade", "--input", str(path)])
        assert exc.value.code == 1
        assert "questionnaire incomplete" in capsys.readouterr().err

    def test_config_applied(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("eligibility:\n  potential_min_match: 100\n")
        main([
            "grade", "--input", str(_write_assessment(tmp_path)),
            "--config", str(config), "--export", "json",
        ])
        report = json.loads(capsys.readouterr().out)
        assert report["potential_roles"] == []


class TestInitAssessmentCommand:
    def test_writes_template(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        output = tmp_path / "new.yaml"
        main(["init-assessment", "--output", str(output)])
        assert output.exists()
        assert f"Assessment template written to {output}" in capsys.readouterr().out


class TestRolesCommand:
    def test_full_catalog(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["roles"])
        out = capsys.readouterr().out
        assert "Role catalog 1.0: 15 roles" in out
        assert "SQL Developer [BI & Reporting] ₹5L - ₹8L (sql>=75)" in out

    def test_stream_filter(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["roles", "--stream", "entry-level"])
        assert "Role catalog 1.0: 0 roles" in capsys.readouterr().out

    def test_custom_catalog(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "roles.yaml").write_text(
            "- id: dba\n"
            "  title: Database Administrator\n"
            "  stream: data-engineering\n"
            "  salary_range: {min: 6, max: 9}\n"
            "  thresholds: {sql: 80}\n"
        )
        config = tmp_path / "settings.yaml"
        config.write_text("roles_path: roles.yaml\n")
        main(["roles", "--config", str(config)])
        out = capsys.readouterr().out
        assert "Role catalog roles: 1 roles" in out
        assert "Database Administrator" in out


class TestQuestionsCommand:
    def test_prints_bank(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["questions"])
        out = capsys.readouterr().out
        assert "1. What type of data work excites you the most?" in out
        assert "   3: Collaboratively - discuss with team members" in out
