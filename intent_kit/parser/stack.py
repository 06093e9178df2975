"""Technology, infrastructure, and stack selection.

Turns an intent (plus its classified architecture) into a complete
:class:`~intent_kit.parser.models.Stack`: technology choices, infrastructure,
and the directory/file layout of the project to scaffold.  Everything here
is a pure function of its inputs.
"""

from __future__ import annotations

import re

from intent_kit.logging import get_logger
from intent_kit.utils import any_match

from .architect import DEFAULT_STRATEGY, classify_architecture
from .models import (
    ArchitectureType,
    BackendTech,
    ClassifierStrategy,
    DatabaseTech,
    FileTemplate,
    FrontendTech,
    Infrastructure,
    Intent,
    MessagingTech,
    ProjectStructure,
    ScaleLevel,
    Stack,
    Technologies,
)

logger = get_logger("stack")


# ---------------------------------------------------------------------------
# Requirement patterns
# ---------------------------------------------------------------------------

_REALTIME_PATTERN = re.compile(r"real-?time|websocket|chat", re.IGNORECASE)
_MOBILE_PATTERN = re.compile(r"mobile|ios|android|react native", re.IGNORECASE)
_FRONTEND_PATTERN = re.compile(r"frontend|web|ui|interface", re.IGNORECASE)
_DATABASE_PATTERN = re.compile(r"database|storage|persist", re.IGNORECASE)
_NOSQL_PATTERN = re.compile(r"flexible schema|unstructured|document", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Technology tables
# ---------------------------------------------------------------------------

_BACKENDS: dict[str, BackendTech] = {
    "python": BackendTech(language="Python", framework="FastAPI", runtime="Python 3.11"),
    "go": BackendTech(language="Go", framework="Gin", runtime="Go 1.21"),
}
_DEFAULT_BACKEND = BackendTech(
    language="TypeScript", framework="Express", runtime="Node.js 20"
)

_SQL_DATABASE = DatabaseTech(type="sql", engine="PostgreSQL")
_NOSQL_DATABASE = DatabaseTech(type="nosql", engine="MongoDB")

_WEBSOCKET_MESSAGING = MessagingTech(type="WebSocket", provider="Socket.io")
_QUEUE_MESSAGING = MessagingTech(type="Message Queue", provider="RabbitMQ")


# ---------------------------------------------------------------------------
# Structure tables
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = ("src", "tests", "docs")

_ARCHITECTURE_DIRECTORIES: dict[ArchitectureType, tuple[str, ...]] = {
    ArchitectureType.MICROSERVICES: ("services", "shared", "infrastructure"),
    ArchitectureType.MONOLITH: ("src/api", "src/models", "src/services", "src/utils"),
}

BASE_FILES: tuple[tuple[str, str], ...] = (
    ("README.md", "readme"),
    (".gitignore", "gitignore"),
    ("docker-compose.yml", "docker-compose"),
)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------

def _select_backend(intent: Intent) -> BackendTech:
    languages = intent.constraints.languages if intent.constraints else []
    preferred = languages[0].strip().lower() if languages else ""
    return _BACKENDS.get(preferred, _DEFAULT_BACKEND)


def select_technologies(intent: Intent, architecture: ArchitectureType) -> Technologies:
    """Pick backend, frontend, database, and messaging for *intent*.

    Each category is decided independently from the requirement text; a
    category is left out when nothing in the requirements calls for it.
    ``constraints.avoid`` is not consulted.
    """
    requirements = intent.requirements
    has_realtime = any_match(_REALTIME_PATTERN, requirements)

    backend = None
    if architecture is not ArchitectureType.JAMSTACK:
        backend = _select_backend(intent)

    frontend = None
    if any_match(_FRONTEND_PATTERN, requirements):
        is_mobile = any_match(_MOBILE_PATTERN, requirements)
        frontend = FrontendTech(
            framework="React Native" if is_mobile else "React",
            language="TypeScript",
            build_tool="Vite",
        )

    database = None
    if any_match(_DATABASE_PATTERN, requirements):
        needs_nosql = any_match(_NOSQL_PATTERN, requirements)
        database = _NOSQL_DATABASE if needs_nosql else _SQL_DATABASE

    messaging = None
    if has_realtime or architecture is ArchitectureType.MICROSERVICES:
        messaging = _WEBSOCKET_MESSAGING if has_realtime else _QUEUE_MESSAGING

    technologies = Technologies(
        backend=backend, frontend=frontend, database=database, messaging=messaging
    )
    logger.debug("Selected technologies for %s: %s", intent.name, technologies)
    return technologies


def select_infrastructure(intent: Intent) -> Infrastructure:
    """Pick containerization, orchestration, and CI for the intent's scale."""
    if intent.scale is ScaleLevel.ENTERPRISE:
        orchestration = "kubernetes"
    else:
        orchestration = "docker-compose"
    return Infrastructure(
        containerization="docker",
        orchestration=orchestration,
        cicd="github-actions",
    )


def generate_structure(architecture: ArchitectureType) -> ProjectStructure:
    """Build the directory list and file templates for *architecture*."""
    directories = list(BASE_DIRECTORIES)
    for directory in _ARCHITECTURE_DIRECTORIES.get(architecture, ()):
        if directory not in directories:
            directories.append(directory)

    files = [FileTemplate(path=path, template=name) for path, name in BASE_FILES]
    return ProjectStructure(directories=directories, files=files)


def select_stack(
    intent: Intent,
    strategy: ClassifierStrategy | str = DEFAULT_STRATEGY,
) -> Stack:
    """Derive the complete stack for *intent*.

    Runs the classifier, then the technology and infrastructure selectors,
    and attaches the project structure.

    Args:
        intent: A validated intent.
        strategy: Architecture classification strategy.

    Returns:
        A fully populated ``Stack``.
    """
    architecture = classify_architecture(intent, strategy)
    scale = intent.scale.value

    stack = Stack(
        name=f"{scale}-{architecture.value}",
        description=f"{architecture.value} architecture for {scale} scale",
        architecture=architecture,
        technologies=select_technologies(intent, architecture),
        infrastructure=select_infrastructure(intent),
        structure=generate_structure(architecture),
    )
    logger.debug("Assembled stack %s for intent %s", stack.name, intent.name)
    return stack
