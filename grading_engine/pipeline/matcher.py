"""Role eligibility matching and the filter chain that partitions results.

Every catalog role is checked against the candidate's skill scores, then:
  eligible roles  = EligibleFilter
  potential roles = IneligibleFilter -> MinimumMatchFilter (>= 50% by default)
Both lists are ranked by match score, descending, keeping catalog order on ties.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal

from grading_engine.catalog.roles import APPROVED_ROLES
from grading_engine.core.schemas import (
    AcademicRecord,
    ProjectScores,
    RoleDefinition,
    RoleEligibility,
)
from grading_engine.scoring.normalizers import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_POTENTIAL_MIN_MATCH = 50

_AXIS_LABELS: dict[str, str] = {
    "sql": "SQL",
    "python": "Python",
    "de": "Data Engineering",
    "academic": "Academic",
}

# A filter takes evaluated roles and returns a subset.
Filter = Callable[[list[RoleEligibility]], list[RoleEligibility]]


def candidate_skill_scores(
    academic: AcademicRecord,
    projects: ProjectScores,
) -> dict[str, float]:
    """Skill axes used for matching: the three project ratings and the academic average."""
    return {
        "sql": projects.sql_analytics,
        "python": projects.python_data_cleaning,
        "de": projects.data_pipeline,
        "academic": academic.average_percentage,
    }


def check_role_eligibility(
    role: RoleDefinition,
    scores: Mapping[str, float],
) -> RoleEligibility:
    """Check every declared threshold of a role; an absent score counts as 0.

    A role with no declared thresholds is eligible with a 100% match.
    """
    declared = role.thresholds.declared()
    missing: list[str] = []
    for axis, required in declared.items():
        actual = scores.get(axis, 0)
        if actual < required:
            missing.append(
                f"{_AXIS_LABELS[axis]} score needs {_fmt(required)}% "
                f"(current: {_fmt(actual)}%)"
            )

    is_eligible = not missing
    match_score = 100
    if not is_eligible:
        met = len(declared) - len(missing)
        match_score = int(round_half_up(Decimal(met) / Decimal(len(declared)) * 100, 0))

    return RoleEligibility(
        role=role,
        is_eligible=is_eligible,
        match_score=match_score,
        missing_requirements=missing,
    )


def evaluate_roles(
    scores: Mapping[str, float],
    roles: Sequence[RoleDefinition] = APPROVED_ROLES,
) -> list[RoleEligibility]:
    """Evaluate every role, in catalog order."""
    return [check_role_eligibility(role, scores) for role in roles]


class EligibleFilter:
    """Keep roles whose every declared threshold is met."""

    def __call__(self, results: list[RoleEligibility]) -> list[RoleEligibility]:
        return [r for r in results if r.is_eligible]


class IneligibleFilter:
    """Keep roles with at least one unmet threshold."""

    def __call__(self, results: list[RoleEligibility]) -> list[RoleEligibility]:
        return [r for r in results if not r.is_eligible]


class MinimumMatchFilter:
    """Drop roles whose match score is below min_match."""

    def __init__(self, min_match: int = DEFAULT_POTENTIAL_MIN_MATCH) -> None:
        self._min_match = min_match

    def __call__(self, results: list[RoleEligibility]) -> list[RoleEligibility]:
        kept = [r for r in results if r.match_score >= self._min_match]
        dropped = len(results) - len(kept)
        if dropped:
            logger.debug("MinimumMatchFilter: dropped %d roles below %d%%",
                         dropped, self._min_match)
        return kept


def run_filter_chain(
    results: list[RoleEligibility],
    filters: list[Filter],
) -> list[RoleEligibility]:
    """Apply filters in order, returning the surviving results."""
    for f in filters:
        results = f(results)
    return results


def rank_by_match(results: list[RoleEligibility]) -> list[RoleEligibility]:
    """Sort by match score descending; sorted() is stable so catalog order breaks ties."""
    return sorted(results, key=lambda r: r.match_score, reverse=True)


def get_eligible_roles(
    scores: Mapping[str, float],
    roles: Sequence[RoleDefinition] = APPROVED_ROLES,
) -> list[RoleEligibility]:
    return rank_by_match(run_filter_chain(evaluate_roles(scores, roles), [EligibleFilter()]))


def get_potential_roles(
    scores: Mapping[str, float],
    roles: Sequence[RoleDefinition] = APPROVED_ROLES,
    min_match: int = DEFAULT_POTENTIAL_MIN_MATCH,
) -> list[RoleEligibility]:
    """Ineligible roles that already meet at least min_match percent of their thresholds."""
    filters: list[Filter] = [IneligibleFilter(), MinimumMatchFilter(min_match)]
    return rank_by_match(run_filter_chain(evaluate_roles(scores, roles), filters))


def partition_roles(
    scores: Mapping[str, float],
    roles: Sequence[RoleDefinition] = APPROVED_ROLES,
    min_match: int = DEFAULT_POTENTIAL_MIN_MATCH,
) -> tuple[list[RoleEligibility], list[RoleEligibility]]:
    """Return (eligible, potential) from a single evaluation pass."""
    evaluated = evaluate_roles(scores, roles)
    eligible = rank_by_match(run_filter_chain(evaluated, [EligibleFilter()]))
    potential = rank_by_match(
        run_filter_chain(evaluated, [IneligibleFilter(), MinimumMatchFilter(min_match)])
    )
    logger.debug("Roles: %d evaluated, %d eligible, %d potential",
                 len(evaluated), len(eligible), len(potential))
    return eligible, potential


def _fmt(value: float) -> str:
    """Render 80.0 as '80' and 77.4 as '77.4'."""
    return f"{value:g}"
