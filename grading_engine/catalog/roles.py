"""Approved role catalog: 15 roles across four streams with eligibility thresholds.

The built-in catalog can be replaced by a YAML file (see ``load_role_catalog``);
the matcher only ever reads it.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from grading_engine.core.schemas import RoleDefinition, RoleThresholds, SalaryRange, Stream

logger = logging.getLogger(__name__)

CATALOG_VERSION = "1.0"

STREAM_NAMES: dict[Stream, str] = {
    Stream.DATA_ENGINEERING: "Data Engineering",
    Stream.AI_ML: "AI / Machine Learning",
    Stream.BI_REPORTING: "BI & Reporting",
    Stream.ENTRY_LEVEL: "Entry-Level Data Roles",
}


class RoleCatalog(BaseModel):
    """A versioned, immutable set of role definitions."""

    model_config = ConfigDict(frozen=True)

    version: str = CATALOG_VERSION
    roles: tuple[RoleDefinition, ...]

    @field_validator("roles")
    @classmethod
    def unique_ids(cls, v: tuple[RoleDefinition, ...]) -> tuple[RoleDefinition, ...]:
        seen: set[str] = set()
        for role in v:
            if role.id in seen:
                msg = f"duplicate role id '{role.id}' in catalog"
                raise ValueError(msg)
            seen.add(role.id)
        return v


def _role(
    role_id: str,
    title: str,
    stream: Stream,
    description: str,
    salary: tuple[float, float],
    thresholds: dict[str, float],
    skills: list[str],
) -> RoleDefinition:
    return RoleDefinition(
        id=role_id,
        title=title,
        stream=stream,
        description=description,
        salary_range=SalaryRange(min=salary[0], max=salary[1]),
        thresholds=RoleThresholds(**thresholds),
        skills=skills,
    )


APPROVED_ROLES: tuple[RoleDefinition, ...] = (
    # Data engineering
    _role(
        "junior-data-engineer", "Junior Data Engineer", Stream.DATA_ENGINEERING,
        "Build and maintain data pipelines, work with ETL processes",
        (5, 8), {"de": 70, "sql": 65, "python": 65},
        ["SQL", "Python", "ETL", "Data Pipelines"],
    ),
    _role(
        "analytics-engineer", "Analytics Engineer", Stream.DATA_ENGINEERING,
        "Bridge between data engineering and analytics teams",
        (6, 10), {"de": 70, "sql": 70, "python": 60},
        ["dbt", "SQL", "Data Modeling", "Analytics"],
    ),
    _role(
        "data-platform-engineer", "Data Platform Engineer", Stream.DATA_ENGINEERING,
        "Design and maintain data infrastructure and platforms",
        (7, 10), {"de": 75, "sql": 65, "python": 70},
        ["Cloud Platforms", "Infrastructure", "Python", "SQL"],
    ),
    _role(
        "data-systems-analyst", "Data Systems Analyst", Stream.DATA_ENGINEERING,
        "Analyze data systems requirements and design solutions",
        (5, 8), {"de": 65, "sql": 70, "python": 55},
        ["Systems Analysis", "SQL", "Documentation", "Requirements"],
    ),
    # AI / machine learning
    _role(
        "ml-engineer-junior", "Machine Learning Engineer (Junior)", Stream.AI_ML,
        "Develop and deploy machine learning models",
        (6, 10), {"python": 75, "de": 65, "sql": 60},
        ["Python", "ML Frameworks", "Statistics", "Model Deployment"],
    ),
    _role(
        "ai-engineer", "AI Engineer", Stream.AI_ML,
        "Build AI-powered applications and solutions",
        (7, 10), {"python": 80, "de": 65, "sql": 55},
        ["Python", "Deep Learning", "AI Frameworks", "APIs"],
    ),
    _role(
        "data-scientist-junior", "Data Scientist (Junior)", Stream.AI_ML,
        "Extract insights from data using statistical methods",
        (6, 9), {"python": 75, "sql": 70, "de": 55},
        ["Python", "Statistics", "ML", "Data Visualization"],
    ),
    _role(
        "nlp-engineer-junior", "NLP Engineer (Junior)", Stream.AI_ML,
        "Work on natural language processing applications",
        (6, 10), {"python": 80, "de": 60, "sql": 55},
        ["Python", "NLP Libraries", "Text Processing", "ML"],
    ),
    _role(
        "cv-engineer-junior", "Computer Vision Engineer (Junior)", Stream.AI_ML,
        "Develop computer vision and image processing solutions",
        (6, 10), {"python": 80, "de": 55, "sql": 50},
        ["Python", "OpenCV", "Deep Learning", "Image Processing"],
    ),
    _role(
        "applied-ai-analyst", "Applied AI Analyst", Stream.AI_ML,
        "Apply AI solutions to business problems",
        (5, 8), {"python": 70, "sql": 65, "de": 55},
        ["Python", "AI Tools", "Business Analysis", "Reporting"],
    ),
    # BI & reporting
    _role(
        "bi-analyst", "Business Intelligence Analyst", Stream.BI_REPORTING,
        "Create dashboards and business reports",
        (5, 8), {"sql": 70},
        ["SQL", "Power BI", "Tableau", "Excel"],
    ),
    _role(
        "mis-reporting-analyst", "MIS / Reporting Analyst", Stream.BI_REPORTING,
        "Generate management information system reports",
        (5, 7), {"sql": 65},
        ["SQL", "Excel", "Reporting Tools", "Data Analysis"],
    ),
    _role(
        "sql-developer", "SQL Developer", Stream.BI_REPORTING,
        "Write and optimize SQL queries for data retrieval",
        (5, 8), {"sql": 75},
        ["SQL", "Database Design", "Query Optimization", "Stored Procedures"],
    ),
    _role(
        "data-quality-analyst", "Data Quality Analyst", Stream.BI_REPORTING,
        "Ensure data accuracy and consistency",
        (5, 7), {"sql": 70},
        ["SQL", "Data Validation", "Quality Frameworks", "Documentation"],
    ),
    _role(
        "analytics-engineer-junior", "Analytics Engineer (Junior)", Stream.BI_REPORTING,
        "Support analytics infrastructure and data models",
        (5, 8), {"sql": 70, "python": 55},
        ["SQL", "dbt", "Data Modeling", "Python Basics"],
    ),
)

DEFAULT_CATALOG = RoleCatalog(version=CATALOG_VERSION, roles=APPROVED_ROLES)


def stream_display_name(stream: Stream) -> str:
    return STREAM_NAMES[stream]


def get_roles_by_stream(
    stream: Stream,
    roles: tuple[RoleDefinition, ...] = APPROVED_ROLES,
) -> list[RoleDefinition]:
    """Return catalog roles belonging to a stream, in catalog order."""
    return [r for r in roles if r.stream == stream]


def format_salary_range(min_lakhs: float, max_lakhs: float) -> str:
    """Format a lakh range as ``₹5L - ₹8L``."""
    return f"₹{min_lakhs:g}L - ₹{max_lakhs:g}L"


def load_role_catalog(path: str | Path) -> RoleCatalog:
    """Load a role catalog from YAML.

    Accepts either a bare list of role mappings or a mapping with
    ``version`` and ``roles`` keys.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content is not a valid catalog.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Role catalog not found: {path}"
        raise FileNotFoundError(msg)

    raw: Any = yaml.safe_load(path.read_text())
    if isinstance(raw, list):
        raw = {"roles": raw}
    if not isinstance(raw, dict) or not raw.get("roles"):
        msg = f"Role catalog {path} must define a non-empty 'roles' list"
        raise ValueError(msg)
    raw["version"] = str(raw.get("version") or path.stem)

    catalog = RoleCatalog.model_validate(raw)
    logger.info("Loaded role catalog %s (%d roles) from %s",
                catalog.version, len(catalog.roles), path)
    return catalog
