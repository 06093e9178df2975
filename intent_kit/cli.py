"""CLI entrypoints for intent-kit commands.

Usage::

    intent-kit init my-app --scale startup
    intent-kit validate intent.yaml
    intent-kit generate intent.yaml --output ./my-app
    intent-kit describe "A real-time chat app called chatter" --output ./chatter
    intent-kit recommend --scale team
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from intent_kit.config import IntentKitConfig
from intent_kit.logging import configure_logging
from intent_kit.parser.architect import is_architecture_suitable
from intent_kit.parser.dsl import IntentKitError, IntentParseError
from intent_kit.parser.models import (
    VALID_SCALE_LEVELS,
    ArchitectureType,
    ClassifierStrategy,
    Stack,
    create_default_intent,
    create_intent,
)
from intent_kit.pipeline import IntentKit
from intent_kit.scaffolder.generator import GenerateResult
from intent_kit.utils import (
    console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)

_STRATEGIES = [strategy.value for strategy in ClassifierStrategy]


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Enable debug logging.",
    )


def _add_strategy_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strategy",
        choices=_STRATEGIES,
        default=None,
        help="Architecture classification strategy (default from config).",
    )


def _build_parser(config: IntentKitConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intent-kit",
        description="Intent-driven development toolkit -- from project intent to scaffold.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Initialize a new intent file.")
    _add_verbose_option(init_parser, suppress_default=True)
    init_parser.add_argument("project_name", help="Name of the project.")
    init_parser.add_argument(
        "-s",
        "--scale",
        choices=VALID_SCALE_LEVELS,
        default=config.default_scale.value,
        help=f"Scale level (default: {config.default_scale.value}).",
    )
    init_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=config.intent_file,
        help=f"Output file path (default: {config.intent_file}).",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a project from an intent file."
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument("intent_file", type=Path, help="A .yaml, .yml or .json intent.")
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=config.output_dir,
        help=f"Output directory (default: {config.output_dir}).",
    )
    _add_strategy_option(generate_parser)

    describe_parser = subparsers.add_parser(
        "describe", help="Generate a project from a natural-language description."
    )
    _add_verbose_option(describe_parser, suppress_default=True)
    describe_parser.add_argument("description", help="What you want to build.")
    describe_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=config.output_dir,
        help=f"Output directory (default: {config.output_dir}).",
    )
    _add_strategy_option(describe_parser)

    validate_parser = subparsers.add_parser("validate", help="Validate an intent file.")
    _add_verbose_option(validate_parser, suppress_default=True)
    validate_parser.add_argument("intent_file", type=Path, help="A .yaml, .yml or .json intent.")

    recommend_parser = subparsers.add_parser(
        "recommend", help="Show the recommended architecture for a scale level."
    )
    _add_verbose_option(recommend_parser, suppress_default=True)
    recommend_parser.add_argument(
        "-s", "--scale", choices=VALID_SCALE_LEVELS, required=True, help="Scale level."
    )
    _add_strategy_option(recommend_parser)

    return parser


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _print_stack(stack: Stack) -> None:
    tech = stack.technologies
    print_summary_table(
        {
            "Architecture": stack.architecture.value,
            "Backend": tech.backend.framework if tech.backend else "N/A",
            "Frontend": tech.frontend.framework if tech.frontend else "N/A",
            "Database": tech.database.engine if tech.database else "N/A",
            "Messaging": tech.messaging.type if tech.messaging else "N/A",
            "Orchestration": stack.infrastructure.orchestration or "none",
            "CI/CD": stack.infrastructure.cicd or "none",
        },
        title=f"Selected stack: {stack.name}",
    )


def _print_generate_result(result: GenerateResult) -> None:
    if result.success:
        print_success("Project generated successfully!")
        console.print(f"[dim]Created {len(result.files_created)} files[/dim]")
        console.print(f"[dim]Created {len(result.directories_created)} directories[/dim]")
        return
    print_warning("Project generated with errors:")
    for error in result.errors:
        print_error(f"  - {error}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _run_init(kit: IntentKit, args: argparse.Namespace) -> int:
    intent = create_default_intent(args.project_name, args.scale)
    output: Path = args.output
    output.write_text(kit.export_yaml(intent), encoding="utf-8")
    print_success(f"Created intent file: {output}")
    console.print("[dim]Edit the file to add your requirements, then run:[/dim]")
    console.print(f"[cyan]  intent-kit generate {output}[/cyan]")
    return 0


def _run_generate(kit: IntentKit, args: argparse.Namespace) -> int:
    console.print("[blue]Reading intent file...[/blue]")
    intent = kit.load_intent_file(args.intent_file)

    console.print("[blue]Selecting stack...[/blue]")
    stack = kit.select_stack(intent, args.strategy)
    _print_stack(stack)

    console.print("[blue]Generating project...[/blue]")
    result = asyncio.run(kit.generate(intent, stack, args.output))
    _print_generate_result(result)
    return 0


def _run_describe(kit: IntentKit, args: argparse.Namespace) -> int:
    console.print("[blue]Parsing description...[/blue]")
    intent = kit.parse_natural_language(args.description)
    print_summary_table(
        {
            "Name": intent.name,
            "Scale": intent.scale.value,
            "Requirements": ", ".join(intent.requirements),
        },
        title="Interpreted intent",
    )

    console.print("[blue]Generating project...[/blue]")
    result = asyncio.run(kit.generate_from_intent(intent, args.output, args.strategy))
    _print_generate_result(result)
    return 0


def _run_validate(kit: IntentKit, args: argparse.Namespace) -> int:
    try:
        kit.load_intent_file(args.intent_file)
    except IntentParseError as exc:
        print_error(f"Invalid intent file: {args.intent_file}")
        for error in exc.errors or [str(exc)]:
            print_error(f"  - {error}")
        return 1
    print_success(f"Intent file is valid: {args.intent_file}")
    return 0


def _run_recommend(kit: IntentKit, args: argparse.Namespace) -> int:
    intent = create_intent("recommendation", args.scale, ["General requirement"])
    recommendation = kit.generate_stack_recommendation(intent, args.strategy)

    print_header(f"Recommended: {recommendation.architecture.value}")
    console.print(recommendation.rationale)
    console.print()
    for item in recommendation.considerations:
        console.print(f"  - {item}")
    console.print()
    print_summary_table(
        {
            architecture.value: "yes" if is_architecture_suitable(args.scale, architecture) else "no"
            for architecture in ArchitectureType
        },
        title=f"Suitable for {args.scale} scale",
    )
    return 0


_COMMANDS = {
    "init": _run_init,
    "generate": _run_generate,
    "describe": _run_describe,
    "validate": _run_validate,
    "recommend": _run_recommend,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for intent-kit commands. Returns the process exit code."""
    config = IntentKitConfig.from_env()
    parser = _build_parser(config)
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose) or config.verbose)

    kit = IntentKit(config)
    try:
        return _COMMANDS[args.command](kit, args)
    except (IntentKitError, OSError) as exc:
        print_error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
