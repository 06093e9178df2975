"""Shared pytest fixtures for the intent-kit test suite.

Provides reusable fixtures for:
- Temporary output directories
- Sample intents at each scale level
- Sample YAML and JSON intent documents
- A template registry isolated from the built-ins
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from intent_kit.config import IntentKitConfig
from intent_kit.parser.models import Constraints, Intent, ScaleLevel, create_intent
from intent_kit.parser.stack import select_stack
from intent_kit.scaffolder.templates import TemplateRegistry


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Directory a project is generated into. Not created up front."""
    return tmp_path / "generated-project"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep INTENT_KIT_* variables from the developer's shell out of tests."""
    for var in (
        "INTENT_KIT_STRATEGY",
        "INTENT_KIT_DEFAULT_SCALE",
        "INTENT_KIT_INTENT_FILE",
        "INTENT_KIT_OUTPUT_DIR",
        "INTENT_KIT_TEMPLATE_DIR",
        "INTENT_KIT_VERBOSE",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Intents
# ---------------------------------------------------------------------------

@pytest.fixture
def solo_intent() -> Intent:
    """A solo project with a single plain requirement."""
    return create_intent("todo-app", ScaleLevel.SOLO, ["Users can create tasks"])


@pytest.fixture
def chat_intent() -> Intent:
    """A startup chat application with realtime, web and storage needs."""
    return create_intent(
        "chat-app",
        ScaleLevel.STARTUP,
        [
            "Users can send real-time messages",
            "Web interface for browsing rooms",
            "Persist message history in a database",
        ],
        features=["user-management"],
        constraints=Constraints(languages=["python"], budget_level="minimal"),
        description="A chat app for small communities",
    )


@pytest.fixture
def enterprise_intent() -> Intent:
    """An enterprise project with no keyword triggers."""
    return create_intent(
        "billing-platform",
        ScaleLevel.ENTERPRISE,
        ["Generate monthly invoices", "Integrate with payment providers"],
    )


@pytest.fixture
def config() -> IntentKitConfig:
    return IntentKitConfig()


@pytest.fixture
def chat_stack(chat_intent: Intent):
    return select_stack(chat_intent)


# ---------------------------------------------------------------------------
# Intent documents
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_intent_data() -> dict[str, Any]:
    """A decoded intent document using the camelCase keys editors emit."""
    return {
        "name": "chat-app",
        "scaleLevel": "startup",
        "requirements": [
            "Users can send real-time messages",
            "Web interface for browsing rooms",
        ],
        "features": ["user-management"],
        "constraints": {"languages": ["go"], "budgetLevel": "moderate"},
    }


@pytest.fixture
def sample_intent_yaml() -> str:
    return textwrap.dedent("""\
        name: chat-app
        scale: startup
        description: A chat app for small communities
        requirements:
          - Users can send real-time messages
          - Web interface for browsing rooms
          - Persist message history in a database
        constraints:
          languages:
            - python
          budgetLevel: minimal
    """)


@pytest.fixture
def sample_intent_json(sample_intent_data: dict[str, Any]) -> str:
    return json.dumps(sample_intent_data, indent=2)


@pytest.fixture
def intent_yaml_file(tmp_path: Path, sample_intent_yaml: str) -> Path:
    path = tmp_path / "intent.yaml"
    path.write_text(sample_intent_yaml, encoding="utf-8")
    return path


@pytest.fixture
def invalid_intent_file(tmp_path: Path) -> Path:
    """A YAML intent with a blank name, a bad scale, and no requirements."""
    path = tmp_path / "broken.yaml"
    path.write_text("name: ''\nscale: huge\nrequirements: []\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

@pytest.fixture
def empty_registry() -> TemplateRegistry:
    return TemplateRegistry()
