"""Orchestrator: wires normalizers, stream scorer, grade aggregator and matcher.

Data flow:
  1. Normalize academic, project and cover-letter inputs
  2. Score questionnaire streams (independent of 1)
  3. Aggregate grade, strengths and improvement areas
  4. Match roles on project ratings and academic average
"""

import json
import logging

from grading_engine.catalog.roles import DEFAULT_CATALOG, RoleCatalog, load_role_catalog
from grading_engine.core.config import Settings
from grading_engine.core.schemas import AssessmentReport
from grading_engine.intake.schema import AssessmentInput
from grading_engine.pipeline.matcher import candidate_skill_scores, partition_roles
from grading_engine.scoring.grade import calculate_student_grade
from grading_engine.scoring.normalizers import calculate_academic_score, calculate_project_score
from grading_engine.scoring.streams import build_questionnaire_response, get_top_stream

logger = logging.getLogger(__name__)


def load_catalog(settings: Settings) -> RoleCatalog:
    """Return the catalog named by settings.roles_path, or the built-in one."""
    if settings.roles_path:
        return load_role_catalog(settings.roles_path)
    return DEFAULT_CATALOG


def evaluate_assessment(
    assessment: AssessmentInput,
    settings: Settings | None = None,
    catalog: RoleCatalog | None = None,
) -> AssessmentReport:
    """Run one input snapshot through the full engine.

    Args:
        assessment: Validated raw inputs.
        settings: Engine settings; defaults when None.
        catalog: Role catalog; loaded from settings (or built-in) when None.

    Returns:
        AssessmentReport with every intermediate score and the role partition.
    """
    settings = settings or Settings()
    catalog = catalog or load_catalog(settings)

    # Step 1: Normalize
    academic = calculate_academic_score(assessment.semesters, assessment.backlogs)
    ratings = assessment.projects
    projects = calculate_project_score(
        ratings.sql_analytics,
        ratings.python_data_cleaning,
        ratings.data_pipeline,
        settings.grading.project_weights,
    )
    cover_letter = assessment.cover_letter.to_cover_letter(settings.cover_letter)

    # Step 2: Streams
    questionnaire = build_questionnaire_response(
        assessment.questionnaire.answers,
        assessment.questionnaire.completed_at,
    )
    top_stream = get_top_stream(questionnaire.stream_scores)

    # Step 3: Grade
    grade = calculate_student_grade(
        academic, projects, cover_letter, settings, catalog.roles,
    )

    # Step 4: Roles
    eligible, potential = partition_roles(
        candidate_skill_scores(academic, projects),
        catalog.roles,
        settings.eligibility.potential_min_match,
    )

    logger.info(
        "Assessment%s: grade %s (%.1f), top stream %s, %d eligible, %d potential roles",
        f" for '{assessment.student_name}'" if assessment.student_name else "",
        grade.grade.value, grade.total_score, top_stream.value,
        len(eligible), len(potential),
    )

    return AssessmentReport(
        academic=academic,
        projects=projects,
        cover_letter=cover_letter,
        questionnaire=questionnaire,
        top_stream=top_stream,
        grade=grade,
        eligible_roles=eligible,
        potential_roles=potential,
        catalog_version=catalog.version,
    )


def export_report_json(report: AssessmentReport) -> str:
    """Export a report as an indented JSON string."""
    return json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False)
