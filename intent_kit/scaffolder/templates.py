"""Placeholder template rendering for project scaffolding.

Provides the :class:`TemplateRegistry` (named raw template text, pre-seeded
with the built-in project files) and the :class:`TemplateRenderer` that
substitutes ``{{dotted.path}}`` placeholders against an intent/stack
context.

Placeholder syntax:

* ``{{intent.name}}`` -- replaced with the resolved value.  Paths that do
  not resolve are left in the output verbatim.
* ``{{intent.requirements.0}}`` -- numeric segments index into lists.
* ``{{#if anything}} ... {{/if}}`` -- the whole block is removed.  The
  condition is not evaluated.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from intent_kit.logging import get_logger
from intent_kit.parser.models import FileTemplate, Intent, Stack

logger = get_logger("templates")


_CONDITIONAL_BLOCK = re.compile(r"\{\{#if [^}]+\}\}[\s\S]*?\{\{/if\}\}")
_PLACEHOLDER = re.compile(r"\{\{(\w+(?:\.\w+)*)\}\}")

_MISSING = object()
_SCALARS = (str, bytes, int, float, bool)


# ---------------------------------------------------------------------------
# Built-in templates
# ---------------------------------------------------------------------------

README_TEMPLATE = """\
# {{intent.name}}

## Overview
{{stack.description}}

## Architecture
- **Pattern**: {{stack.architecture}}
- **Scale**: {{intent.scale}}

## Technologies
Backend, frontend, database, and infrastructure technologies are selected
automatically from your requirements and scale.

## Getting Started

### Prerequisites
- Docker and Docker Compose

### Installation

```bash
git clone <repository-url>
cd {{intent.name}}
docker compose up -d
```

## Requirements
This project addresses the following requirements:
{{intent.requirements}}

## Project Structure
The layout is tailored to the {{intent.scale}} scale and the
{{stack.architecture}} architecture.

## License
MIT
"""

GITIGNORE_TEMPLATE = """\
# Dependencies
node_modules/
__pycache__/
venv/
.venv/
.env

# Build outputs
dist/
build/
*.pyc

# IDE
.vscode/
.idea/
*.swp

# OS
.DS_Store
Thumbs.db

# Logs
logs/
*.log

# Testing
coverage/
.nyc_output/
.pytest_cache/
"""

DOCKER_COMPOSE_TEMPLATE = """\
services:
  app:
    build: .
    ports:
      - "3000:3000"
    environment:
      - NODE_ENV=development
    volumes:
      - .:/app
      - /app/node_modules
    depends_on:
      - db

  db:
    image: postgres:15
    environment:
      - POSTGRES_DB={{intent.name}}
      - POSTGRES_USER=user
      - POSTGRES_PASSWORD=password
    volumes:
      - db_data:/var/lib/postgresql/data
    ports:
      - "5432:5432"

volumes:
  db_data:
"""

DOCKERFILE_TEMPLATE = """\
FROM node:20-alpine

WORKDIR /app

COPY package*.json ./

RUN npm install

COPY . .

RUN npm run build

EXPOSE 3000

CMD ["npm", "start"]
"""

BUILTIN_TEMPLATES: dict[str, str] = {
    "readme": README_TEMPLATE,
    "gitignore": GITIGNORE_TEMPLATE,
    "docker-compose": DOCKER_COMPOSE_TEMPLATE,
    "dockerfile": DOCKERFILE_TEMPLATE,
}


# ---------------------------------------------------------------------------
# TemplateRegistry
# ---------------------------------------------------------------------------


class TemplateRegistry:
    """Mapping of template name to raw template text.

    Registries are plain values: each renderer gets the registry it should
    use, and two registries never share state.
    """

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates: dict[str, str] = dict(templates or {})

    @classmethod
    def with_builtins(cls) -> "TemplateRegistry":
        """Return a registry seeded with readme, gitignore, docker-compose and dockerfile."""
        return cls(BUILTIN_TEMPLATES)

    def register(self, name: str, template: str) -> None:
        """Add *template* under *name*, replacing any existing entry."""
        self._templates[name] = template

    def get(self, name: str) -> str | None:
        return self._templates.get(name)

    def names(self) -> list[str]:
        """Return a sorted list of registered template names."""
        return sorted(self._templates)

    def load_directory(self, template_dir: str | Path, suffix: str = ".tmpl") -> list[str]:
        """Register every ``*<suffix>`` file under *template_dir* by its stem.

        ``templates/readme.tmpl`` is registered as ``readme`` and overrides
        the built-in of the same name.

        Returns:
            The names that were registered, sorted.
        """
        directory = Path(template_dir)
        if not directory.is_dir():
            return []

        loaded: list[str] = []
        for template_file in sorted(directory.rglob(f"*{suffix}")):
            name = template_file.name[: -len(suffix)]
            self.register(name, template_file.read_text(encoding="utf-8"))
            loaded.append(name)
        logger.debug("Loaded %d template(s) from %s", len(loaded), directory)
        return sorted(loaded)

    def copy(self) -> "TemplateRegistry":
        return TemplateRegistry(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._templates)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders registered templates against an intent and a stack."""

    def __init__(self, registry: TemplateRegistry | None = None) -> None:
        self.registry = registry if registry is not None else TemplateRegistry.with_builtins()

    def render(self, file_template: FileTemplate, intent: Intent, stack: Stack) -> str:
        """Render the template named by *file_template*.

        The context holds ``intent`` and ``stack`` plus the file template's
        own ``context`` overrides.  An unregistered template name yields a
        visible placeholder comment instead of an error.
        """
        template = self.registry.get(file_template.template)
        if template is None:
            logger.warning(
                "Template '%s' not found for %s", file_template.template, file_template.path
            )
            return f"# Template '{file_template.template}' not found\n"

        context = build_context(intent, stack, file_template.context)
        return self.render_string(template, context)

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render raw *template* text with *context*.

        Conditional blocks are removed first, then placeholders are
        substituted.  Unresolved placeholders are kept as-is.
        """
        result = _CONDITIONAL_BLOCK.sub("", template)

        def _substitute(match: re.Match[str]) -> str:
            value = _resolve_path(context, match.group(1))
            if value is _MISSING:
                return match.group(0)
            return _stringify(value)

        return _PLACEHOLDER.sub(_substitute, result)


# ---------------------------------------------------------------------------
# Context helpers
# ---------------------------------------------------------------------------


def build_context(
    intent: Intent, stack: Stack, overrides: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Build the render context for one file."""
    return {
        "intent": intent.model_dump(mode="json", exclude_none=True),
        "stack": stack.model_dump(mode="json", exclude_none=True),
        **(overrides or {}),
    }


def _resolve_path(context: Mapping[str, Any], path: str) -> Any:
    """Walk *path* (``a.b.0``) through mappings, sequence indexes and attributes."""
    current: Any = context
    for key in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(key, _MISSING)
        elif isinstance(current, (list, tuple)):
            if not key.isdigit() or int(key) >= len(current):
                return _MISSING
            current = current[int(key)]
        elif current is None or isinstance(current, _SCALARS):
            return _MISSING
        else:
            current = getattr(current, key, _MISSING)
        if current is _MISSING:
            return _MISSING
    return current


def _stringify(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(_stringify(item) for item in value)
    return str(value)
