"""intent-kit scaffolder -- writes a selected stack to disk.

Takes an ``Intent`` and the ``Stack`` chosen for it, renders each of the
stack's file templates, and writes the project skeleton.

Quick usage::

    from intent_kit.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    result = await generator.generate(intent, stack, "/tmp/output")
    print(result.files_created)
"""

from intent_kit.scaffolder.generator import GenerateResult, ProjectGenerator
from intent_kit.scaffolder.templates import TemplateRegistry, TemplateRenderer

__all__ = [
    "GenerateResult",
    "ProjectGenerator",
    "TemplateRegistry",
    "TemplateRenderer",
]
