"""YAML/JSON intent files.

Decodes intent documents into validated :class:`Intent` models and
serialises intents back to text.  Extra keys in a document are ignored;
missing or malformed required fields raise :class:`IntentParseError`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from intent_kit.logging import get_logger

from .models import Intent
from .validator import validate_intent

logger = get_logger("dsl")

YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})
JSON_SUFFIXES: frozenset[str] = frozenset({".json"})


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class IntentKitError(Exception):
    """Base class for errors raised by intent-kit."""


class IntentParseError(IntentKitError):
    """Raised when an intent document cannot be decoded or fails validation."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = list(errors or [])
        super().__init__(message)


class UnsupportedFormatError(IntentKitError):
    """Raised when an intent file has an extension other than yaml/yml/json."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Unsupported file format '{self.path.suffix or self.path.name}'. "
            "Use .yaml, .yml, or .json"
        )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def build_intent(data: Any) -> Intent:
    """Validate a decoded document and convert it to an :class:`Intent`.

    Raises:
        IntentParseError: If the structural checks fail or a field has the
            wrong type.
    """
    result = validate_intent(data)
    if not result.valid:
        raise IntentParseError(
            "Invalid intent format: " + "; ".join(result.errors), result.errors
        )
    try:
        return Intent.model_validate(data)
    except ValidationError as exc:
        messages = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        raise IntentParseError(
            "Invalid intent format: " + "; ".join(messages), messages
        ) from exc


def parse_yaml(content: str) -> Intent:
    """Parse an intent from YAML text."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise IntentParseError(f"Failed to parse YAML: {exc}") from exc
    return build_intent(data)


def parse_json(content: str) -> Intent:
    """Parse an intent from JSON text."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise IntentParseError(f"Failed to parse JSON: {exc}") from exc
    return build_intent(data)


def detect_format(path: str | Path) -> str:
    """Return ``"yaml"`` or ``"json"`` based on the file extension.

    Raises:
        UnsupportedFormatError: For any other extension.
    """
    suffix = Path(path).suffix.lower()
    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise UnsupportedFormatError(path)


def load_intent_data(path: str | Path) -> Any:
    """Read and decode an intent file without validating it.

    Used by callers that want to report every validation error themselves.
    """
    file_path = Path(path)
    fmt = detect_format(file_path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise IntentParseError(f"Failed to read {file_path}: {exc}") from exc
    try:
        if fmt == "yaml":
            return yaml.safe_load(raw)
        return json.loads(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise IntentParseError(f"Failed to parse {fmt.upper()}: {exc}") from exc


def load_intent_file(path: str | Path) -> Intent:
    """Read, decode, and validate an intent file.

    Args:
        path: A ``.yaml``, ``.yml`` or ``.json`` file.

    Raises:
        UnsupportedFormatError: If the extension is not recognised.
        IntentParseError: If the content is malformed or invalid.
        OSError: If the file cannot be read.
    """
    logger.debug("Loading intent file %s", path)
    return build_intent(load_intent_data(path))


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _export_dict(intent: Intent) -> dict[str, Any]:
    data = intent.model_dump(mode="json", by_alias=True, exclude_none=True)
    # Empty optional lists add noise to hand-edited files.
    if not data.get("features"):
        data.pop("features", None)
    return data


def to_yaml(intent: Intent) -> str:
    """Serialise *intent* to block-style YAML."""
    return yaml.safe_dump(
        _export_dict(intent),
        indent=2,
        width=80,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def to_json(intent: Intent) -> str:
    """Serialise *intent* to pretty-printed JSON."""
    return json.dumps(_export_dict(intent), indent=2, ensure_ascii=False)
