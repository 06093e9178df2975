"""Architecture classifier for intent-kit.

Maps an intent to one of the supported architecture patterns, and produces
the human-facing recommendation (rationale and considerations) for that
pattern.  Two classification strategies are available; see
:class:`~intent_kit.parser.models.ClassifierStrategy`.
"""

from __future__ import annotations

import re

from intent_kit.logging import get_logger
from intent_kit.utils import any_match

from .models import (
    ArchitectureType,
    ClassifierStrategy,
    Intent,
    ScaleLevel,
    StackRecommendation,
)

logger = get_logger("architect")


DEFAULT_STRATEGY = ClassifierStrategy.KEYWORD_AWARE


# ---------------------------------------------------------------------------
# Scale tables
# ---------------------------------------------------------------------------

_SCALE_ONLY_MAP: dict[ScaleLevel, ArchitectureType] = {
    ScaleLevel.SOLO: ArchitectureType.MONOLITH,
    ScaleLevel.STARTUP: ArchitectureType.MONOLITH,
    ScaleLevel.TEAM: ArchitectureType.MODULAR_MONOLITH,
    ScaleLevel.ENTERPRISE: ArchitectureType.MICROSERVICES,
}

_KEYWORD_FALLBACK_MAP: dict[ScaleLevel, ArchitectureType] = {
    ScaleLevel.SOLO: ArchitectureType.MONOLITH,
    ScaleLevel.STARTUP: ArchitectureType.MONOLITH,
    ScaleLevel.TEAM: ArchitectureType.MICROSERVICES,
    ScaleLevel.ENTERPRISE: ArchitectureType.MICROSERVICES,
}


# ---------------------------------------------------------------------------
# Keyword rules (checked in order, first match wins)
# ---------------------------------------------------------------------------

ARCHITECTURE_RULES: tuple[tuple[re.Pattern[str], ArchitectureType], ...] = (
    (re.compile(r"serverless|lambda|function", re.IGNORECASE), ArchitectureType.SERVERLESS),
    (re.compile(r"static|jamstack|blog|documentation", re.IGNORECASE), ArchitectureType.JAMSTACK),
)


# ---------------------------------------------------------------------------
# Recommendation text
# ---------------------------------------------------------------------------

_RATIONALE: dict[ArchitectureType, str] = {
    ArchitectureType.MONOLITH: (
        "A monolithic architecture is simpler to develop, deploy, and maintain "
        "for smaller teams."
    ),
    ArchitectureType.MODULAR_MONOLITH: (
        "A modular monolith provides clear boundaries while maintaining "
        "deployment simplicity for growing teams."
    ),
    ArchitectureType.MICROSERVICES: (
        "Microservices enable independent scaling and deployment, suitable for "
        "large teams and complex domains."
    ),
    ArchitectureType.SERVERLESS: (
        "A serverless architecture removes server management and scales each "
        "function on demand."
    ),
    ArchitectureType.JAMSTACK: (
        "A JAMstack site is pre-rendered and served from a CDN, which keeps "
        "static content fast and cheap to host."
    ),
}

_CONSIDERATIONS: dict[ArchitectureType, list[str]] = {
    ArchitectureType.MONOLITH: [
        "Keep code modular for future migration",
        "Use dependency injection for testability",
        "Consider database per module patterns",
    ],
    ArchitectureType.MODULAR_MONOLITH: [
        "Define clear module boundaries",
        "Use internal APIs between modules",
        "Plan for potential service extraction",
    ],
    ArchitectureType.MICROSERVICES: [
        "Invest in infrastructure automation",
        "Implement service discovery and load balancing",
        "Consider distributed tracing and observability",
    ],
    ArchitectureType.SERVERLESS: [
        "Watch cold-start latency on user-facing paths",
        "Keep functions small and stateless",
        "Budget for per-invocation pricing at high volume",
    ],
    ArchitectureType.JAMSTACK: [
        "Choose a static site generator that fits the content workflow",
        "Move dynamic behaviour into third-party APIs or edge functions",
        "Automate rebuilds when content changes",
    ],
}

# Scales each architecture is considered appropriate for.
_SUITABLE_SCALES: dict[ArchitectureType, frozenset[ScaleLevel]] = {
    ArchitectureType.MONOLITH: frozenset(ScaleLevel),
    ArchitectureType.MODULAR_MONOLITH: frozenset(
        {ScaleLevel.STARTUP, ScaleLevel.TEAM, ScaleLevel.ENTERPRISE}
    ),
    ArchitectureType.MICROSERVICES: frozenset({ScaleLevel.TEAM, ScaleLevel.ENTERPRISE}),
    ArchitectureType.SERVERLESS: frozenset(ScaleLevel),
    ArchitectureType.JAMSTACK: frozenset(ScaleLevel),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify_architecture(
    intent: Intent,
    strategy: ClassifierStrategy | str = DEFAULT_STRATEGY,
) -> ArchitectureType:
    """Choose an architecture for *intent*.

    With ``scale-only`` the scale alone decides (team maps to a modular
    monolith).  With ``keyword-aware`` the requirements are scanned for
    serverless and then static-site indicators before falling back to the
    scale, where team and enterprise both map to microservices.

    Args:
        intent: A validated intent.
        strategy: Classification strategy.

    Returns:
        The selected ``ArchitectureType``.
    """
    strategy = ClassifierStrategy(strategy)

    if strategy is ClassifierStrategy.SCALE_ONLY:
        return _SCALE_ONLY_MAP[intent.scale]

    for pattern, architecture in ARCHITECTURE_RULES:
        if any_match(pattern, intent.requirements):
            logger.debug(
                "Requirement matched /%s/ -> %s", pattern.pattern, architecture.value
            )
            return architecture

    return _KEYWORD_FALLBACK_MAP[intent.scale]


def generate_stack_recommendation(
    intent: Intent,
    strategy: ClassifierStrategy | str = DEFAULT_STRATEGY,
) -> StackRecommendation:
    """Classify *intent* and attach the rationale and considerations."""
    architecture = classify_architecture(intent, strategy)
    return StackRecommendation(
        architecture=architecture,
        rationale=_RATIONALE[architecture],
        considerations=list(_CONSIDERATIONS[architecture]),
    )


def is_architecture_suitable(
    scale: ScaleLevel | str, architecture: ArchitectureType | str
) -> bool:
    """Return ``True`` if *architecture* is appropriate for a project of *scale*.

    A monolith is always considered suitable.  Microservices need at least a
    team-sized project.
    """
    return ScaleLevel(scale) in _SUITABLE_SCALES[ArchitectureType(architecture)]
