"""intent-kit configuration.

Typed configuration for the CLI and the :class:`~intent_kit.pipeline.IntentKit`
facade.  Settings are Pydantic v2 models so they are validated at
construction time and serialise to/from JSON or environment variables
without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from intent_kit.parser.models import ClassifierStrategy, ScaleLevel

_TRUTHY = {"1", "true", "yes", "on"}


class IntentKitConfig(BaseModel):
    """Global intent-kit configuration.

    Instances are typically created once by the CLI entry point (usually via
    :meth:`from_env`) and then passed to :class:`~intent_kit.pipeline.IntentKit`.
    """

    classifier_strategy: ClassifierStrategy = Field(
        default=ClassifierStrategy.KEYWORD_AWARE,
        description="How requirements and scale are turned into an architecture",
    )
    default_scale: ScaleLevel = Field(
        default=ScaleLevel.SOLO, description="Scale used by `init` when none is given"
    )
    intent_file: Path = Field(
        default=Path("intent.yaml"), description="File written by `init` by default"
    )
    output_dir: Path = Field(
        default=Path("."), description="Where `generate` and `describe` write projects"
    )
    template_dir: Optional[Path] = Field(
        default=None,
        description="Directory of *.tmpl files registered on top of the built-ins",
    )
    verbose: bool = Field(default=False, description="Enable debug logging")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "IntentKitConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "IntentKitConfig":
        """Build an ``IntentKitConfig`` from environment variables.

        Recognised variables (all optional):
            INTENT_KIT_STRATEGY, INTENT_KIT_DEFAULT_SCALE, INTENT_KIT_INTENT_FILE,
            INTENT_KIT_OUTPUT_DIR, INTENT_KIT_TEMPLATE_DIR, INTENT_KIT_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("INTENT_KIT_STRATEGY"):
            kwargs["classifier_strategy"] = os.environ["INTENT_KIT_STRATEGY"]
        if os.environ.get("INTENT_KIT_DEFAULT_SCALE"):
            kwargs["default_scale"] = os.environ["INTENT_KIT_DEFAULT_SCALE"]
        if os.environ.get("INTENT_KIT_INTENT_FILE"):
            kwargs["intent_file"] = Path(os.environ["INTENT_KIT_INTENT_FILE"])
        if os.environ.get("INTENT_KIT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["INTENT_KIT_OUTPUT_DIR"])
        if os.environ.get("INTENT_KIT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["INTENT_KIT_TEMPLATE_DIR"])
        if os.environ.get("INTENT_KIT_VERBOSE"):
            kwargs["verbose"] = os.environ["INTENT_KIT_VERBOSE"].strip().lower() in _TRUTHY

        return cls(**kwargs)
