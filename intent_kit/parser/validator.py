"""Structural validation for intent records.

Checks are run against either an :class:`~intent_kit.parser.models.Intent`
or the raw mapping decoded from a YAML/JSON document.  Every check runs and
contributes its own message, so callers see all problems at once.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import VALID_SCALE_LEVELS, Intent, ValidationResult


ERR_NOT_AN_OBJECT = "Intent must be an object"
ERR_EMPTY_NAME = "Intent must have a non-empty name"
ERR_BAD_SCALE = f"Scale level must be one of: {', '.join(VALID_SCALE_LEVELS)}"
ERR_EMPTY_REQUIREMENTS = "Intent must have a non-empty requirements array"
ERR_BLANK_REQUIREMENT = "All requirements must be non-empty strings"


def _as_fields(intent: Intent | Mapping[str, Any]) -> dict[str, Any]:
    """Pull the checked fields out of a model or a raw mapping."""
    if isinstance(intent, Intent):
        return {
            "name": intent.name,
            "scale": intent.scale.value,
            "requirements": intent.requirements,
        }
    scale = intent.get("scale", intent.get("scaleLevel"))
    return {
        "name": intent.get("name"),
        "scale": scale.value if hasattr(scale, "value") else scale,
        "requirements": intent.get("requirements"),
    }


def validate_intent(intent: Intent | Mapping[str, Any] | Any) -> ValidationResult:
    """Validate an intent's structural invariants.

    Args:
        intent: An ``Intent`` model or a decoded mapping.

    Returns:
        A fresh ``ValidationResult``; ``valid`` is ``True`` iff no errors
        were collected.
    """
    if not isinstance(intent, (Intent, Mapping)):
        return ValidationResult(valid=False, errors=[ERR_NOT_AN_OBJECT])

    fields = _as_fields(intent)
    errors: list[str] = []

    name = fields["name"]
    if not isinstance(name, str) or not name.strip():
        errors.append(ERR_EMPTY_NAME)

    if fields["scale"] not in VALID_SCALE_LEVELS:
        errors.append(ERR_BAD_SCALE)

    requirements = fields["requirements"]
    if not isinstance(requirements, (list, tuple)) or not requirements:
        errors.append(ERR_EMPTY_REQUIREMENTS)
    elif any(not isinstance(req, str) or not req.strip() for req in requirements):
        errors.append(ERR_BLANK_REQUIREMENT)

    return ValidationResult(valid=not errors, errors=errors)
