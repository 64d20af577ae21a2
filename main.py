"""CLI entry point for the career grading engine."""

import argparse
import logging
import sys

from grading_engine.catalog.questionnaire import CAREER_QUESTIONNAIRE
from grading_engine.catalog.roles import (
    format_salary_range,
    get_roles_by_stream,
    stream_display_name,
)
from grading_engine.core.config import Settings
from grading_engine.core.schemas import AssessmentReport, RoleEligibility, Stream
from grading_engine.intake.schema import AssessmentInput
from grading_engine.pipeline.orchestrator import (
    evaluate_assessment,
    export_report_json,
    load_catalog,
)
from grading_engine.scoring.grade import grade_label


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Career grading engine - grade a student assessment and match eligible roles",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- grade subcommand ---
    grade_parser = subparsers.add_parser("grade", help="Grade an assessment YAML file")
    grade_parser.add_argument(
        "--input",
        required=True,
        help="Path to assessment YAML file",
    )
    grade_parser.add_argument(
        "--config",
        help="Path to settings YAML file (default: built-in settings)",
    )
    grade_parser.add_argument(
        "--export",
        choices=["json"],
        help="Print the full report in this format instead of the summary",
    )

    # --- init-assessment subcommand ---
    init_parser = subparsers.add_parser(
        "init-assessment",
        help="Write a fill-in assessment YAML template",
    )
    init_parser.add_argument(
        "--output",
        default="assessment.yaml",
        help="Output path for the template (default: assessment.yaml)",
    )

    # --- roles subcommand ---
    roles_parser = subparsers.add_parser("roles", help="List the role catalog")
    roles_parser.add_argument(
        "--stream",
        choices=[s.value for s in Stream],
        help="Only list roles in this stream",
    )
    roles_parser.add_argument(
        "--config",
        help="Path to settings YAML file (default: built-in settings)",
    )

    # --- questions subcommand ---
    subparsers.add_parser("questions", help="Print the career questionnaire")

    for sub in (grade_parser, init_parser, roles_parser, subparsers.choices["questions"]):
        sub.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose (DEBUG) logging",
        )

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(2)
    return args


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_settings(path: str | None) -> Settings:
    return Settings.from_yaml(path) if path else Settings()


def _print_roles(heading: str, results: list[RoleEligibility]) -> None:
    print(f"\n{heading} ({len(results)}):")
    for r in results:
        role = r.role
        salary = format_salary_range(role.salary_range.min, role.salary_range.max)
        print(f"  [{r.match_score:3d}%] {role.title} - {stream_display_name(role.stream)}, "
              f"{salary}")
        for requirement in r.missing_requirements:
            print(f"         missing: {requirement}")


def print_summary(report: AssessmentReport) -> None:
    grade = report.grade
    b = grade.breakdown
    print(f"Grade: {grade.grade.value} ({grade.total_score:.1f}/100) - "
          f"{grade_label(grade.grade)}")
    print(f"  Academic:     {b.academic:.1f}/25 "
          f"(avg {report.academic.average_percentage:.1f}%, "
          f"{report.academic.backlogs} backlogs)")
    print(f"  Projects:     {b.projects:.1f}/50 (total {report.projects.total_score:.1f})")
    print(f"  Cover letter: {b.cover_letter:.1f}/25 ({report.cover_letter.type})")

    if grade.strengths:
        print("\nStrengths:")
        for s in grade.strengths:
            print(f"  + {s}")

    if grade.improvement_areas:
        print("\nImprovement plan:")
        for area in grade.improvement_areas:
            print(f"  [{area.priority.upper()}] {area.area}: {area.recommendation}")
            if area.unlocked_roles:
                print(f"      unlocks: {', '.join(area.unlocked_roles)}")

    print(f"\nTop stream: {stream_display_name(report.top_stream)}")
    _print_roles("Eligible roles", report.eligible_roles)
    _print_roles("Potential roles", report.potential_roles)


def cmd_grade(args: argparse.Namespace) -> None:
    """Handle grade subcommand."""
    settings = _load_settings(args.config)
    assessment = AssessmentInput.from_yaml(args.input)
    report = evaluate_assessment(assessment, settings)

    if args.export == "json":
        print(export_report_json(report))
    else:
        print_summary(report)


def cmd_init_assessment(args: argparse.Namespace) -> None:
    """Handle init-assessment subcommand."""
    from grading_engine.intake.generator import generate_template_dict, write_assessment_yaml

    write_assessment_yaml(generate_template_dict(), args.output)
    print(f"Assessment template written to {args.output}")
    print("Fill in marks, ratings and answers, then run: python main.py grade --input "
          f"{args.output}")


def cmd_roles(args: argparse.Namespace) -> None:
    """Handle roles subcommand."""
    catalog = load_catalog(_load_settings(args.config))
    roles = (
        get_roles_by_stream(Stream(args.stream), catalog.roles)
        if args.stream else list(catalog.roles)
    )
    print(f"Role catalog {catalog.version}: {len(roles)} roles")
    for role in roles:
        thresholds = ", ".join(
            f"{axis}>={value:g}" for axis, value in role.thresholds.declared().items()
        )
        salary = format_salary_range(role.salary_range.min, role.salary_range.max)
        print(f"  {role.title} [{stream_display_name(role.stream)}] {salary} ({thresholds})")


def cmd_questions(args: argparse.Namespace) -> None:
    """Handle questions subcommand."""
    for q in CAREER_QUESTIONNAIRE:
        print(f"{q.id}. {q.question}")
        for index, option in enumerate(q.options):
            print(f"   {index}: {option.text}")


_COMMANDS = {
    "grade": cmd_grade,
    "init-assessment": cmd_init_assessment,
    "roles": cmd_roles,
    "questions": cmd_questions,
}


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        _COMMANDS[args.command](args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
