"""Code quality tooling: golangci-lint, pre-commit/commitlint, git hooks.

Generates:
- ``.golangci.yml`` when linters are enabled
- ``.pre-commit-config.yaml`` and ``.commitlintrc.yaml`` when pre-commit
  hooks are enabled
- ``.githooks/pre-commit`` (executable) when git hooks are enabled
"""

from __future__ import annotations

from typing import Any

from .models import GeneratedFile
from .templates import TemplateRenderer

# (context flag, template, output path, executable)
_QUALITY_FILES: list[tuple[str, str, str, bool]] = [
    ("use_linters", "quality/golangci.yml.j2", ".golangci.yml", False),
    ("use_pre_commit_hooks", "quality/pre-commit-config.yaml.j2", ".pre-commit-config.yaml", False),
    ("use_pre_commit_hooks", "quality/commitlintrc.yaml.j2", ".commitlintrc.yaml", False),
    ("use_git_hooks", "quality/githooks-pre-commit.j2", ".githooks/pre-commit", True),
]


class QualityGenerator:
    """Generates linter, pre-commit and git hook configuration."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def files(self, context: dict[str, Any]) -> list[GeneratedFile]:
        """Return the enabled quality files in a fixed order."""
        return [
            GeneratedFile(
                path=output,
                content=self.renderer.render(template, context),
                executable=executable,
            )
            for flag, template, output, executable in _QUALITY_FILES
            if context.get(flag, False)
        ]
