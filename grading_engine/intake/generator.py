"""Generate a fill-in assessment YAML with the question bank as a header."""

from pathlib import Path
from typing import Any

import yaml

from grading_engine.catalog.questionnaire import CAREER_QUESTIONNAIRE
from grading_engine.intake.schema import MAX_SEMESTERS


def generate_template_dict(**overrides: Any) -> dict[str, Any]:
    """Build an AssessmentInput-compatible dict with neutral placeholder values.

    Every question is pre-answered with option 0 so the template validates
    as-is; edit the answers before grading.

    Args:
        **overrides: Override any top-level key in the output dict.

    Returns:
        Dict that can be passed to AssessmentInput.model_validate().
    """
    template: dict[str, Any] = {
        "student_name": "",
        "semesters": [0] * MAX_SEMESTERS,
        "backlogs": 0,
        "projects": {
            "sql_analytics": 0,
            "python_data_cleaning": 0,
            "data_pipeline": 0,
        },
        "cover_letter": {"type": "none"},
        "questionnaire": {
            "answers": {q.id: 0 for q in CAREER_QUESTIONNAIRE},
        },
    }
    template.update(overrides)
    return template


def questionnaire_header() -> str:
    """YAML comment block listing every question and its option indices."""
    lines = [
        "# Semester marks: percentages, 0 = not entered yet.",
        "# Cover letter type: none | uploaded (file_name) | written (content).",
        "# Questionnaire answers map question id -> option index:",
    ]
    for q in CAREER_QUESTIONNAIRE:
        lines.append(f"#   {q.id}. {q.question}")
        for index, option in enumerate(q.options):
            lines.append(f"#        {index}: {option.text}")
    return "\n".join(lines) + "\n"


def write_assessment_yaml(data: dict[str, Any], path: str | Path) -> None:
    """Write an assessment dict to YAML, preceded by the questionnaire header."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    body = yaml.dump(data, default_flow_style=False, sort_keys=False)
    path.write_text(questionnaire_header() + body)
