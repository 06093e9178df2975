"""Keyword-driven natural-language intake.

Turns a free-text project description into an :class:`Intent` using an
ordered table of :class:`KeywordRule` entries -- pure regex, no AI calls.
Callers can pass their own rule table to extend or replace the defaults.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from intent_kit.logging import get_logger

from .models import Constraints, Intent, ScaleLevel

logger = get_logger("natural_language")


DEFAULT_PROJECT_NAME = "my-project"

_NAME_PATTERN = re.compile(r"(?:called|named|for)\s+[\"']?([a-z0-9-]+)[\"']?", re.IGNORECASE)


@dataclass(frozen=True)
class KeywordRule:
    """One intake rule: when *pattern* matches, set *value* on *field*.

    ``field`` is one of ``scale``, ``requirement``, ``feature``, ``language``,
    ``platform`` or ``budget``.  For ``scale`` and ``budget`` the first
    matching rule wins; the other fields collect every match, in table order.
    """

    pattern: re.Pattern[str]
    field: str
    value: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(pattern: str, field: str, value: str) -> KeywordRule:
    return KeywordRule(re.compile(pattern, re.IGNORECASE), field, value)


def _keyword_rules(field: str, *keywords: str) -> tuple[KeywordRule, ...]:
    return tuple(_rule(re.escape(kw), field, kw) for kw in keywords)


DEFAULT_RULES: tuple[KeywordRule, ...] = (
    # Scale, most specific first
    _rule(r"enterprise|large scale", "scale", ScaleLevel.ENTERPRISE.value),
    _rule(r"team|multiple developers", "scale", ScaleLevel.TEAM.value),
    _rule(r"startup|small team", "scale", ScaleLevel.STARTUP.value),
    # Requirements
    *_keyword_rules(
        "requirement",
        "real-time",
        "authentication",
        "database",
        "api",
        "mobile",
        "web interface",
        "messaging",
        "chat",
        "notifications",
        "file upload",
        "payment",
        "analytics",
    ),
    # Features
    _rule(r"user management", "feature", "user-management"),
    _rule(r"admin panel", "feature", "admin-panel"),
    _rule(r"dashboard", "feature", "dashboard"),
    _rule(r"reporting", "feature", "reporting"),
    _rule(r"search", "feature", "search-functionality"),
    # Languages
    _rule(r"python", "language", "python"),
    _rule(r"typescript|javascript", "language", "typescript"),
    _rule(r"\bgo\b|\bgolang\b", "language", "go"),
    _rule(r"\bjava\b", "language", "java"),
    # Platforms
    _rule(r"aws", "platform", "aws"),
    _rule(r"azure", "platform", "azure"),
    _rule(r"gcp|google cloud", "platform", "gcp"),
    _rule(r"docker", "platform", "docker"),
    _rule(r"kubernetes", "platform", "kubernetes"),
    # Budget
    _rule(r"minimal cost|low budget", "budget", "minimal"),
    _rule(r"flexible budget", "budget", "flexible"),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _extract_name(text: str) -> str:
    match = _NAME_PATTERN.search(text)
    return match.group(1) if match else DEFAULT_PROJECT_NAME


def _apply_rules(
    text: str, rules: tuple[KeywordRule, ...] | list[KeywordRule]
) -> dict[str, list[str]]:
    """Collect rule values per field, in table order, without duplicates."""
    collected: dict[str, list[str]] = {}
    for rule in rules:
        if not rule.matches(text):
            continue
        values = collected.setdefault(rule.field, [])
        if rule.value not in values:
            values.append(rule.value)
    return collected


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_natural_language(
    description: str,
    rules: tuple[KeywordRule, ...] | list[KeywordRule] = DEFAULT_RULES,
) -> Intent:
    """Build an :class:`Intent` from a free-text *description*.

    Args:
        description: What the user wants to build, in plain English.
        rules: Ordered intake rules. Defaults to :data:`DEFAULT_RULES`.

    Returns:
        An ``Intent``. When no requirement keyword matches, the whole
        description becomes the single requirement.
    """
    collected = _apply_rules(description, rules)

    scales = collected.get("scale", [])
    scale = scales[0] if scales else ScaleLevel.SOLO.value

    requirements = collected.get("requirement", [])
    if not requirements:
        requirements = [description.strip()]

    constraint_kwargs: dict[str, Any] = {}
    if collected.get("language"):
        constraint_kwargs["languages"] = collected["language"]
    if collected.get("platform"):
        constraint_kwargs["platforms"] = collected["platform"]
    if collected.get("budget"):
        constraint_kwargs["budget_level"] = collected["budget"][0]

    intent = Intent(
        name=_extract_name(description),
        scale=scale,
        requirements=requirements,
        features=collected.get("feature", []),
        constraints=Constraints(**constraint_kwargs) if constraint_kwargs else None,
    )
    logger.debug(
        "Interpreted description as %s (%s): %s",
        intent.name,
        intent.scale.value,
        ", ".join(intent.requirements),
    )
    return intent
