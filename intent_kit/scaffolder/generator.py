"""Project scaffolding orchestrator.

Takes an :class:`Intent` and the :class:`Stack` selected for it and writes
the project skeleton to disk: the stack's directories, then one rendered
file per :class:`FileTemplate`.

Writes happen one file at a time.  A failure while rendering or writing a
file is recorded and the next file is attempted; nothing already written is
rolled back.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field

from intent_kit.logging import get_logger
from intent_kit.parser.models import FileTemplate, Intent, Stack

from .templates import TemplateRenderer

logger = get_logger("generator")


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerateResult(BaseModel):
    """Outcome of one generation run."""

    success: bool = Field(default=False, description="True iff no errors were recorded")
    files_created: list[str] = Field(default_factory=list)
    directories_created: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes a stack's project structure to disk."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(
        self, intent: Intent, stack: Stack, output_dir: str | Path
    ) -> GenerateResult:
        """Generate the project for *stack* under *output_dir*.

        Args:
            intent: The intent the stack was derived from (used as render
                context).
            stack: The selected stack.
            output_dir: Project root. Created if it does not exist.

        Returns:
            A ``GenerateResult``. Per-file failures are listed in ``errors``;
            a failure while creating directories stops the run.
        """
        result = GenerateResult()
        root = Path(output_dir)

        try:
            # 1. Create the project root and skeleton directories
            await self._create_directory_structure(root, stack, result)

            # 2. Render and write every file template, one at a time
            for file_template in stack.structure.files:
                await self._generate_file(root, file_template, intent, stack, result)
        except OSError as exc:
            logger.error("Generation failed in %s: %s", root, exc)
            result.errors.append(f"Generation failed: {exc}")

        result.success = not result.errors
        return result

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(
        self, root: Path, stack: Stack, result: GenerateResult
    ) -> None:
        """Create *root* and each stack directory, recording the new ones."""
        for directory in (root, *(root / d for d in stack.structure.directories)):
            if await asyncio.to_thread(directory.exists):
                continue
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
            result.directories_created.append(str(directory))
            logger.debug("Created directory %s", directory)

    # -- File rendering ----------------------------------------------------

    async def _generate_file(
        self,
        root: Path,
        file_template: FileTemplate,
        intent: Intent,
        stack: Stack,
        result: GenerateResult,
    ) -> None:
        """Render one template and write it, recording success or failure."""
        out = root / file_template.path
        try:
            content = self.renderer.render(file_template, intent, stack)
            await asyncio.to_thread(_write_file, out, content)
        except Exception as exc:
            logger.error("Failed to generate %s: %s", file_template.path, exc)
            result.errors.append(f"Failed to generate {file_template.path}: {exc}")
            return

        result.files_created.append(str(out))
        logger.info("Created %s", out)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
