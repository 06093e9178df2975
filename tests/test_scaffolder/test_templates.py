"""Tests for the template registry and placeholder renderer.

Covers:
- Placeholder substitution and unresolved-token passthrough
- Conditional block removal
- Registry registration, overrides, isolation, and directory loading
- Missing-template placeholder output
"""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from intent_kit.parser.models import FileTemplate
from intent_kit.scaffolder.templates import (
    BUILTIN_TEMPLATES,
    TemplateRegistry,
    TemplateRenderer,
    build_context,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# render_string
# ---------------------------------------------------------------------------


class TestRenderString:
    @pytest.fixture
    def renderer(self, empty_registry) -> TemplateRenderer:
        return TemplateRenderer(empty_registry)

    def test_substitutes_dotted_path(self, renderer):
        out = renderer.render_string("Hello {{intent.name}}!", {"intent": {"name": "demo"}})
        assert out == "Hello demo!"

    def test_unresolved_placeholder_kept(self, renderer):
        template = "{{intent.missing}} / {{nothing}} / {{intent.name}}"
        out = renderer.render_string(template, {"intent": {"name": "demo"}})
        assert out == "{{intent.missing}} / {{nothing}} / demo"

    def test_path_through_scalar_is_unresolved(self, renderer):
        out = renderer.render_string("{{intent.name.upper}}", {"intent": {"name": "demo"}})
        assert out == "{{intent.name.upper}}"

    def test_list_index(self, renderer):
        context = {"intent": {"requirements": ["Send messages", "Upload files"]}}
        out = renderer.render_string(
            "{{intent.requirements.0}} / {{intent.requirements.1}} / {{intent.requirements.2}}",
            context,
        )
        assert out == "Send messages / Upload files / {{intent.requirements.2}}"

    def test_non_numeric_list_segment_unresolved(self, renderer):
        out = renderer.render_string("{{items.first}}", {"items": ["a"]})
        assert out == "{{items.first}}"

    def test_list_values_joined(self, renderer):
        out = renderer.render_string("{{items}}", {"items": ["a", "b", "c"]})
        assert out == "a, b, c"

    def test_attribute_lookup(self, renderer):
        out = renderer.render_string("{{obj.port}}", {"obj": SimpleNamespace(port=8080)})
        assert out == "8080"

    def test_conditional_block_always_removed(self, renderer):
        template = "start\n{{#if intent.features}}\nFEATURES {{intent.name}}\n{{/if}}\nend"
        out = renderer.render_string(template, {"intent": {"features": ["x"], "name": "demo"}})
        assert out == "start\n\nend"
        assert "FEATURES" not in out

    def test_multiple_conditional_blocks_removed_separately(self, renderer):
        template = "{{#if a}}one{{/if}} keep {{#if b}}two{{/if}}"
        assert renderer.render_string(template, {}) == " keep "

    def test_placeholder_syntax_with_spaces_not_recognised(self, renderer):
        out = renderer.render_string("{{ intent.name }}", {"intent": {"name": "demo"}})
        assert out == "{{ intent.name }}"


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRender:
    def test_readme(self, chat_intent, chat_stack):
        renderer = TemplateRenderer()
        out = renderer.render(FileTemplate(path="README.md", template="readme"), chat_intent, chat_stack)
        assert out.startswith("# chat-app\n")
        assert "- **Pattern**: monolith" in out
        assert "- **Scale**: startup" in out
        assert "monolith architecture for startup scale" in out
        assert "Users can send real-time messages, Web interface for browsing rooms" in out
        assert "{{" not in out

    def test_missing_template(self, chat_intent, chat_stack):
        renderer = TemplateRenderer(TemplateRegistry())
        out = renderer.render(FileTemplate(path="x.txt", template="nope"), chat_intent, chat_stack)
        assert out == "# Template 'nope' not found\n"

    def test_file_context_overrides(self, empty_registry, chat_intent, chat_stack):
        empty_registry.register("env", "PORT={{port}}\nNAME={{intent.name}}\n")
        renderer = TemplateRenderer(empty_registry)
        file_template = FileTemplate(path=".env", template="env", context={"port": 8080})
        assert renderer.render(file_template, chat_intent, chat_stack) == "PORT=8080\nNAME=chat-app\n"

    def test_absent_optional_field_left_verbatim(self, solo_intent, chat_stack, empty_registry):
        empty_registry.register("about", "{{intent.description}}")
        renderer = TemplateRenderer(empty_registry)
        out = renderer.render(FileTemplate(path="ABOUT", template="about"), solo_intent, chat_stack)
        assert out == "{{intent.description}}"

    def test_build_context(self, chat_intent, chat_stack):
        context = build_context(chat_intent, chat_stack, {"extra": 1})
        assert context["intent"]["scale"] == "startup"
        assert context["stack"]["architecture"] == "monolith"
        assert context["extra"] == 1


# ---------------------------------------------------------------------------
# TemplateRegistry
# ---------------------------------------------------------------------------


class TestTemplateRegistry:
    def test_builtins(self):
        registry = TemplateRegistry.with_builtins()
        assert registry.names() == ["docker-compose", "dockerfile", "gitignore", "readme"]
        assert len(registry) == len(BUILTIN_TEMPLATES)
        assert "readme" in registry

    def test_register_replaces(self):
        registry = TemplateRegistry.with_builtins()
        registry.register("readme", "# {{intent.name}}")
        assert registry.get("readme") == "# {{intent.name}}"

    def test_get_missing(self, empty_registry):
        assert empty_registry.get("readme") is None

    def test_registries_are_isolated(self):
        first = TemplateRegistry.with_builtins()
        second = TemplateRegistry.with_builtins()
        first.register("custom", "x")
        assert "custom" not in second
        assert BUILTIN_TEMPLATES.get("custom") is None

    def test_copy_is_independent(self, empty_registry):
        empty_registry.register("a", "1")
        clone = empty_registry.copy()
        clone.register("b", "2")
        assert list(empty_registry) == ["a"]
        assert list(clone) == ["a", "b"]

    def test_load_directory(self, tmp_path: Path, empty_registry):
        (tmp_path / "readme.tmpl").write_text("# custom", encoding="utf-8")
        nested = tmp_path / "ci"
        nested.mkdir()
        (nested / "workflow.tmpl").write_text("on: push", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

        loaded = empty_registry.load_directory(tmp_path)

        assert loaded == ["readme", "workflow"]
        assert empty_registry.get("readme") == "# custom"
        assert "notes" not in empty_registry

    def test_load_directory_custom_suffix(self, tmp_path: Path, empty_registry):
        (tmp_path / "readme.md.j2").write_text("x", encoding="utf-8")
        assert empty_registry.load_directory(tmp_path, suffix=".j2") == ["readme.md"]

    def test_load_missing_directory(self, tmp_path: Path, empty_registry):
        assert empty_registry.load_directory(tmp_path / "absent") == []
        assert len(empty_registry) == 0
