"""Integration tests for the intent-to-project pipeline.

These tests run intake, stack selection, and generation end-to-end and
verify that the generated project directory contains well-formed files.

No external services are required.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from intent_kit.config import IntentKitConfig
from intent_kit.parser.models import ArchitectureType
from intent_kit.pipeline import IntentKit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _describe_and_generate(description: str, output_dir: Path, **config) -> IntentKit:
    kit = IntentKit(IntentKitConfig(**config))
    intent = kit.parse_natural_language(description)
    result = await kit.generate_from_intent(intent, output_dir)
    assert result.success, result.errors
    return kit


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestGenerateEndToEnd:
    async def test_yaml_intent_to_project(self, intent_yaml_file, tmp_output_dir):
        kit = IntentKit()
        intent = kit.load_intent_file(intent_yaml_file)
        stack = kit.select_stack(intent)

        result = await kit.generate(intent, stack, tmp_output_dir)

        assert result.success is True
        assert stack.architecture is ArchitectureType.MONOLITH
        assert stack.technologies.backend.framework == "FastAPI"
        assert stack.technologies.messaging.type == "WebSocket"

        compose = yaml.safe_load((tmp_output_dir / "docker-compose.yml").read_text(encoding="utf-8"))
        assert set(compose["services"]) == {"app", "db"}
        assert "POSTGRES_DB=chat-app" in compose["services"]["db"]["environment"]

        gitignore = (tmp_output_dir / ".gitignore").read_text(encoding="utf-8")
        assert "__pycache__/" in gitignore

    async def test_every_generated_file_is_rendered(self, intent_yaml_file, tmp_output_dir):
        kit = IntentKit()
        intent = kit.load_intent_file(intent_yaml_file)
        result = await kit.generate_from_intent(intent, tmp_output_dir)

        for created in result.files_created:
            assert "{{" not in Path(created).read_text(encoding="utf-8")

    async def test_description_to_microservices(self, tmp_output_dir):
        await _describe_and_generate(
            "An enterprise analytics platform with a web interface and database, called insight",
            tmp_output_dir,
        )
        for directory in ("services", "shared", "infrastructure", "docs"):
            assert (tmp_output_dir / directory).is_dir()
        readme = (tmp_output_dir / "README.md").read_text(encoding="utf-8")
        assert "- **Pattern**: microservices" in readme
        assert "- **Scale**: enterprise" in readme

    async def test_custom_template_dir(self, tmp_path: Path, tmp_output_dir):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "readme.tmpl").write_text(
            "# {{intent.name}}\n{{#if intent.features}}hidden{{/if}}\n{{stack.name}}\n",
            encoding="utf-8",
        )

        await _describe_and_generate(
            "A static documentation site called handbook",
            tmp_output_dir,
            template_dir=templates,
        )

        readme = (tmp_output_dir / "README.md").read_text(encoding="utf-8")
        assert readme == "# handbook\n\nsolo-jamstack\n"

    async def test_regenerate_into_same_directory(self, intent_yaml_file, tmp_output_dir):
        kit = IntentKit()
        intent = kit.load_intent_file(intent_yaml_file)
        first = await kit.generate_from_intent(intent, tmp_output_dir)
        second = await kit.generate_from_intent(intent, tmp_output_dir)

        assert first.directories_created
        assert second.directories_created == []
        assert sorted(first.files_created) == sorted(second.files_created)
