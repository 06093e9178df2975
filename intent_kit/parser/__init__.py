"""intent-kit decision engine.

Turns a declared project intent into a technology stack: intake (YAML, JSON
or natural language), structural validation, architecture classification,
and technology/infrastructure selection.

Usage::

    from intent_kit.parser import parse_yaml, select_stack

    intent = parse_yaml(Path("intent.yaml").read_text())
    stack = select_stack(intent)
    print(stack.architecture, stack.technologies)
"""

from intent_kit.parser.architect import (
    classify_architecture,
    generate_stack_recommendation,
    is_architecture_suitable,
)
from intent_kit.parser.dsl import (
    IntentKitError,
    IntentParseError,
    UnsupportedFormatError,
    load_intent_file,
    parse_json,
    parse_yaml,
    to_json,
    to_yaml,
)
from intent_kit.parser.models import (
    ArchitectureType,
    ClassifierStrategy,
    Constraints,
    Intent,
    ScaleLevel,
    Stack,
    StackRecommendation,
    ValidationResult,
    create_default_intent,
    create_intent,
)
from intent_kit.parser.natural_language import KeywordRule, parse_natural_language
from intent_kit.parser.stack import select_stack
from intent_kit.parser.validator import validate_intent

__all__ = [
    "ArchitectureType",
    "ClassifierStrategy",
    "Constraints",
    "Intent",
    "IntentKitError",
    "IntentParseError",
    "KeywordRule",
    "ScaleLevel",
    "Stack",
    "StackRecommendation",
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
