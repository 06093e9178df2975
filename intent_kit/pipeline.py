"""intent-kit pipeline facade.

Wires the pieces together in the order they run:

1. INTAKE    -- build, parse (YAML/JSON), or describe (natural language) an intent.
2. VALIDATE  -- check the intent's structural invariants.
3. SELECT    -- classify the architecture and pick technologies and infrastructure.
4. GENERATE  -- render the stack's file templates and write the project.

Usage::

    kit = IntentKit()
    intent = kit.parse_yaml(Path("intent.yaml").read_text())
    result = asyncio.run(kit.generate_from_intent(intent, "./my-project"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from intent_kit.config import IntentKitConfig
from intent_kit.logging import get_logger
from intent_kit.parser import dsl
from intent_kit.parser.architect import generate_stack_recommendation
from intent_kit.parser.models import (
    ClassifierStrategy,
    Constraints,
    Intent,
    ScaleLevel,
    Stack,
    StackRecommendation,
    ValidationResult,
    create_intent,
)
from intent_kit.parser.natural_language import parse_natural_language
from intent_kit.parser.stack import select_stack
from intent_kit.parser.validator import validate_intent
from intent_kit.scaffolder.generator import GenerateResult, ProjectGenerator
from intent_kit.scaffolder.templates import TemplateRegistry, TemplateRenderer

logger = get_logger("pipeline")


class IntentKit:
    """Entry point tying intake, selection, and generation together.

    Attributes:
        config: Settings (classifier strategy, template directory, ...).
        registry: Templates available to this instance only (a copy of any
            registry passed in).
        generator: Writes projects using a renderer bound to ``registry``.
    """

    def __init__(
        self,
        config: IntentKitConfig | None = None,
        registry: TemplateRegistry | None = None,
    ) -> None:
        self.config = config or IntentKitConfig()
        if registry is None:
            self.registry = TemplateRegistry.with_builtins()
        else:
            self.registry = registry.copy()
        if self.config.template_dir is not None:
            self.registry.load_directory(self.config.template_dir)
        self.generator = ProjectGenerator(TemplateRenderer(self.registry))

    # ------------------------------------------------------------------
    # Intake
    # ------------------------------------------------------------------

    def create_intent(
        self,
        name: str,
        scale: ScaleLevel | str,
        requirements: list[str],
        *,
        features: list[str] | None = None,
        constraints: Constraints | dict[str, Any] | None = None,
        description: str | None = None,
    ) -> Intent:
        return create_intent(
            name,
            scale,
            requirements,
            features=features,
            constraints=constraints,
            description=description,
        )

    def parse_yaml(self, content: str) -> Intent:
        return dsl.parse_yaml(content)

    def parse_json(self, content: str) -> Intent:
        return dsl.parse_json(content)

    def parse_natural_language(self, description: str) -> Intent:
        return parse_natural_language(description)

    def load_intent_file(self, path: str | Path) -> Intent:
        return dsl.load_intent_file(path)

    def export_yaml(self, intent: Intent) -> str:
        return dsl.to_yaml(intent)

    def export_json(self, intent: Intent) -> str:
        return dsl.to_json(intent)

    # ------------------------------------------------------------------
    # Validation and selection
    # ------------------------------------------------------------------

    def validate_intent(self, intent: Intent | dict[str, Any]) -> ValidationResult:
        return validate_intent(intent)

    def select_stack(
        self, intent: Intent, strategy: ClassifierStrategy | str | None = None
    ) -> Stack:
        """Select a stack using *strategy*, or the configured one."""
        return select_stack(intent, strategy or self.config.classifier_strategy)

    def generate_stack_recommendation(
        self, intent: Intent, strategy: ClassifierStrategy | str | None = None
    ) -> StackRecommendation:
        return generate_stack_recommendation(
            intent, strategy or self.config.classifier_strategy
        )

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def register_template(self, name: str, template: str) -> None:
        """Register or replace a template on this instance's registry."""
        self.registry.register(name, template)

    async def generate(
        self, intent: Intent, stack: Stack, output_dir: str | Path
    ) -> GenerateResult:
        return await self.generator.generate(intent, stack, output_dir)

    async def generate_from_intent(
        self,
        intent: Intent,
        output_dir: str | Path,
        strategy: ClassifierStrategy | str | None = None,
    ) -> GenerateResult:
        """Select a stack for *intent* and generate the project.

        Raises:
            IntentParseError: If *intent* fails validation.
        """
        validation = validate_intent(intent)
        if not validation.valid:
            raise dsl.IntentParseError(
                "Invalid intent: " + "; ".join(validation.errors), validation.errors
            )
        stack = self.select_stack(intent, strategy)
        logger.info("Generating %s (%s) into %s", intent.name, stack.name, output_dir)
        return await self.generate(intent, stack, output_dir)
