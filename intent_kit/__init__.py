"""intent-kit -- describe what you want to build, get a project scaffold.

Usage::

    from intent_kit import IntentKit

    kit = IntentKit()
    intent = kit.parse_natural_language("A real-time chat app called chatter")
    result = asyncio.run(kit.generate_from_intent(intent, "./chatter"))
"""

from intent_kit.config import IntentKitConfig
from intent_kit.parser import (
    ArchitectureType,
    ClassifierStrategy,
    Constraints,
    Intent,
    IntentKitError,
    IntentParseError,
    ScaleLevel,
    Stack,
    StackRecommendation,
    UnsupportedFormatError,
    ValidationResult,
    classify_architecture,
    create_default_intent,
    create_intent,
    generate_stack_recommendation,
    is_architecture_suitable,
    load_intent_file,
    parse_json,
    parse_natural_language,
    parse_yaml,
    select_stack,
    to_json,
    to_yaml,
    validate_intent,
)
from intent_kit.pipeline import IntentKit
from intent_kit.scaffolder import (
    GenerateResult,
    ProjectGenerator,
    TemplateRegistry,
    TemplateRenderer,
)

__version__ = "0.1.0"

__all__ = [
    "ArchitectureType",
    "ClassifierStrategy",
    "Constraints",
    "GenerateResult",
    "Intent",
    "IntentKit",
    "IntentKitConfig",
    "IntentKitError",
    "IntentParseError",
    "ProjectGenerator",
    "ScaleLevel",
    "Stack",
    "StackRecommendation",
    "TemplateRegistry",
    "TemplateRenderer",
    "UnsupportedFormatError",
    "ValidationResult",
    "classify_architecture",
    "create_default_intent",
    "create_intent",
    "generate_stack_recommendation",
    "is_architecture_suitable",
    "load_intent_file",
    "parse_json",
    "parse_natural_language",
    "parse_yaml",
    "select_stack",
    "to_json",
    "to_yaml",
    "validate_intent",
]
