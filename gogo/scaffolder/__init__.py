"""gogo scaffolder -- resolves a ``ProjectConfig`` into a Go project tree.

This package renders the externalised Jinja2 templates under
``gogo/scaffolder/templates/`` into a generation plan and writes it to disk.

Quick usage::

    from gogo.config import config_for_type
    from gogo.scaffolder import ProjectGenerator

    config = config_for_type("library")
    config.name = "mylib"
    config.module = "github.com/me/mylib"
    project_path = ProjectGenerator(config).generate("/tmp/output")
"""

from gogo.scaffolder.generator import GenerationError, ProjectGenerator
from gogo.scaffolder.models import GeneratedFile
from gogo.scaffolder.templates import TemplateRenderer

__all__ = [
    "GeneratedFile",
    "GenerationError",
    "ProjectGenerator",
    "TemplateRenderer",
]
