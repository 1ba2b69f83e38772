"""GitHub Actions workflow generation."""

from __future__ import annotations

from typing import Any

from .models import GeneratedFile
from .templates import TemplateRenderer

WORKFLOW_DIR = ".github/workflows"


class WorkflowGenerator:
    """Generates the CI workflow and, with linters enabled, the lint workflow."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def files(self, context: dict[str, Any]) -> list[GeneratedFile]:
        """Return the workflow directory and its files.

        Args:
            context: Template rendering context. Must include
                ``use_github_actions`` and ``use_linters``.

        Returns:
            Plan entries (empty if GitHub Actions are disabled).
        """
        if not context.get("use_github_actions", False):
            return []

        entries = [
            GeneratedFile(WORKFLOW_DIR),
            GeneratedFile(
                f"{WORKFLOW_DIR}/ci.yml",
                self.renderer.render("github/workflows/ci.yml.j2", context),
            ),
        ]
        if context.get("use_linters", False):
            entries.append(
                GeneratedFile(
                    f"{WORKFLOW_DIR}/lint.yml",
                    self.renderer.render("github/workflows/lint.yml.j2", context),
                )
            )
        return entries
