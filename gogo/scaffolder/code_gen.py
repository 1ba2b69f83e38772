"""Initial source code generation, one strategy per project type.

Each strategy maps the template context to a list of
``(template, output path template)`` pairs.  ``CODE_GENERATORS`` selects the
strategy from ``ProjectConfig.type``; anything without an entry falls back to
the ``default`` strategy (a root ``main.go`` and its test).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from gogo.config import ProjectType

from .models import GeneratedFile
from .templates import TemplateRenderer

FileSpecs = list[tuple[str, str]]


def cli_files(context: dict[str, Any]) -> FileSpecs:
    """Cobra entry point, root command and version command."""
    return [
        ("code/cli/main.go.j2", "cmd/{{ project_name }}/main.go"),
        ("code/cli/root.go.j2", "cmd/{{ project_name }}/cmd/root.go"),
        ("code/cli/version.go.j2", "cmd/{{ project_name }}/cmd/version.go"),
    ]


def api_files(context: dict[str, Any]) -> FileSpecs:
    """HTTP entry point, env-based config loader and server setup."""
    server = "code/api/server_gin.go.j2" if context["use_gin"] else "code/api/server_http.go.j2"
    return [
        ("code/api/main.go.j2", "cmd/{{ project_name }}/main.go"),
        ("code/api/config.go.j2", "internal/config/config.go"),
        (server, "internal/api/server.go"),
    ]


def library_files(context: dict[str, Any]) -> FileSpecs:
    """Public package with a greeting function and its table-driven test."""
    return [
        ("code/library/library.go.j2", "pkg/{{ project_name }}/{{ project_name }}.go"),
        ("code/library/library_test.go.j2", "pkg/{{ project_name }}/{{ project_name }}_test.go"),
    ]


def default_files(context: dict[str, Any]) -> FileSpecs:
    """A root ``main.go`` printing a greeting, and a smoke test for it."""
    return [
        ("code/default/main.go.j2", "main.go"),
        ("code/default/main_test.go.j2", "main_test.go"),
    ]


CODE_GENERATORS: dict[ProjectType, Callable[[dict[str, Any]], FileSpecs]] = {
    ProjectType.DEFAULT: default_files,
    ProjectType.CLI: cli_files,
    ProjectType.API: api_files,
    ProjectType.LIBRARY: library_files,
}


class CodeGenerator:
    """Renders the initial Go sources for a project type."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def files(
        self,
        project_type: ProjectType | str,
        context: dict[str, Any],
    ) -> list[GeneratedFile]:
        """Render the file set for *project_type*.

        Args:
            project_type: Selects the strategy; unknown values use the
                ``default`` strategy.
            context: Template rendering context.

        Returns:
            Rendered files in a fixed order.
        """
        strategy = CODE_GENERATORS.get(project_type, default_files)
        return [
            GeneratedFile(
                path=self.renderer.render_string(output, context),
                content=self.renderer.render(template, context),
            )
            for template, output in strategy(context)
        ]
