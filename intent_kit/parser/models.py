"""Pydantic v2 models for intent-kit.

Defines the data model hierarchy shared by the decision engine: the declared
project intent and its constraints, validation results, and the technology
stack (architecture, technologies, infrastructure, project structure) that
is derived from an intent.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ScaleLevel(str, Enum):
    """Coarse project-size tier. Controls the architecture defaults."""
    SOLO = "solo"
    STARTUP = "startup"
    TEAM = "team"
    ENTERPRISE = "enterprise"


VALID_SCALE_LEVELS: tuple[str, ...] = tuple(level.value for level in ScaleLevel)

DEFAULT_REQUIREMENT = "Build a functional application"


class BudgetLevel(str, Enum):
    """Budget tier. Affects infrastructure choices."""
    MINIMAL = "minimal"
    MODERATE = "moderate"
    FLEXIBLE = "flexible"


class ArchitectureType(str, Enum):
    """Structural pattern recommended for a project."""
    MONOLITH = "monolith"
    MODULAR_MONOLITH = "modular-monolith"
    MICROSERVICES = "microservices"
    SERVERLESS = "serverless"
    JAMSTACK = "jamstack"


class ClassifierStrategy(str, Enum):
    """How the architecture classifier reads an intent.

    ``SCALE_ONLY`` maps the scale straight to an architecture.
    ``KEYWORD_AWARE`` lets serverless/static-site requirements override the
    scale default.
    """
    SCALE_ONLY = "scale-only"
    KEYWORD_AWARE = "keyword-aware"


# ---------------------------------------------------------------------------
# Intent Models
# ---------------------------------------------------------------------------

class Constraints(BaseModel):
    """Preferences or limitations declared alongside an intent."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    languages: list[str] = Field(
        default_factory=list, description="Preferred programming languages"
    )
    platforms: list[str] = Field(
        default_factory=list, description="Preferred cloud providers or deployment targets"
    )
    avoid: list[str] = Field(
        default_factory=list, description="Technologies the user would rather not use"
    )
    budget_level: Optional[BudgetLevel] = Field(
        default=None,
        alias="budgetLevel",
        validation_alias=AliasChoices("budgetLevel", "budget_level"),
        description="Budget tier",
    )


class Intent(BaseModel):
    """What the user wants to build, without any technical decisions."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Project name")
    scale: ScaleLevel = Field(
        ...,
        validation_alias=AliasChoices("scale", "scaleLevel"),
        description="Scale level of the project",
    )
    requirements: list[str] = Field(
        ..., description="High-level requirements describing what the system should do"
    )
    features: list[str] = Field(
        default_factory=list, description="Optional feature tags"
    )
    description: Optional[str] = Field(default=None, description="Free-text description")
    constraints: Optional[Constraints] = Field(
        default=None, description="Optional preferences or limitations"
    )


class ValidationResult(BaseModel):
    """Outcome of validating an intent record."""
    valid: bool = Field(..., description="True when no errors were found")
    errors: list[str] = Field(
        default_factory=list, description="Human-readable error messages, in check order"
    )


# ---------------------------------------------------------------------------
# Technology Models
# ---------------------------------------------------------------------------

class BackendTech(BaseModel):
    """Server-side language and framework."""
    model_config = ConfigDict(frozen=True)

    language: str
    framework: str
    runtime: Optional[str] = None


class FrontendTech(BaseModel):
    """Client-side framework."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    framework: str
    language: str
    build_tool: Optional[str] = Field(default=None, alias="buildTool")


class DatabaseTech(BaseModel):
    """Persistence engine."""
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., pattern=r"^(sql|nosql|hybrid)$")
    engine: str


class MessagingTech(BaseModel):
    """Messaging transport."""
    model_config = ConfigDict(frozen=True)

    type: str
    provider: Optional[str] = None


class Technologies(BaseModel):
    """Technology choices. Each category is present only when the intent needs it."""
    model_config = ConfigDict(frozen=True)

    backend: Optional[BackendTech] = None
    frontend: Optional[FrontendTech] = None
    database: Optional[DatabaseTech] = None
    messaging: Optional[MessagingTech] = None


class Infrastructure(BaseModel):
    """Containerization, orchestration, and CI choices."""
    model_config = ConfigDict(frozen=True)

    containerization: str = Field(default="docker", pattern=r"^(docker|none)$")
    orchestration: Optional[str] = Field(
        default=None, pattern=r"^(kubernetes|docker-compose|none)$"
    )
    cicd: Optional[str] = Field(
        default=None, pattern=r"^(github-actions|gitlab-ci|none)$"
    )


# ---------------------------------------------------------------------------
# Stack Models
# ---------------------------------------------------------------------------

class FileTemplate(BaseModel):
    """A file to generate: output path, template name, per-file context overrides."""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path relative to the project root")
    template: str = Field(..., description="Name of a registered template")
    context: dict[str, Any] = Field(
        default_factory=dict, description="Extra values merged into the render context"
    )


class ProjectStructure(BaseModel):
    """Directories and files of the scaffolded project."""
    model_config = ConfigDict(frozen=True)

    directories: list[str] = Field(default_factory=list)
    files: list[FileTemplate] = Field(default_factory=list)


class Stack(BaseModel):
    """Full bundle of decisions derived from one intent."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Identifier, e.g. 'startup-monolith'")
    description: str = Field(default="", description="One-line summary")
    architecture: ArchitectureType
    technologies: Technologies = Field(default_factory=Technologies)
    infrastructure: Infrastructure = Field(default_factory=Infrastructure)
    structure: ProjectStructure = Field(default_factory=ProjectStructure)


class StackRecommendation(BaseModel):
    """Architecture recommendation with its rationale."""
    architecture: ArchitectureType
    rationale: str = ""
    considerations: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def create_intent(
    name: str,
    scale: ScaleLevel | str,
    requirements: list[str],
    *,
    features: list[str] | None = None,
    constraints: Constraints | dict[str, Any] | None = None,
    description: str | None = None,
) -> Intent:
    """Build an :class:`Intent` from plain values.

    No structural checks are made here; run
    :func:`intent_kit.parser.validator.validate_intent` before handing the
    result to the decision engine.
    """
    return Intent(
        name=name,
        scale=scale,
        requirements=list(requirements),
        features=list(features or []),
        constraints=constraints,
        description=description,
    )


def create_default_intent(name: str, scale: ScaleLevel | str = ScaleLevel.SOLO) -> Intent:
    """Return an intent with one generic requirement, solo scale unless given."""
    return create_intent(name, scale, [DEFAULT_REQUIREMENT])
