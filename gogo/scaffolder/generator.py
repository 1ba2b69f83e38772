"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and resolves it into an ordered generation plan --
a list of ``GeneratedFile`` entries relative to ``<output_dir>/<name>/`` --
then writes that plan to disk, stopping at the first failure.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from gogo.config import KNOWN_LICENSES, InvalidConfigError, ProjectConfig
from gogo.utils import ensure_dir, go_package_name, make_executable, print_warning, write_text

from .code_gen import CodeGenerator
from .models import GeneratedFile
from .quality_gen import QualityGenerator
from .templates import TemplateRenderer
from .workflow_gen import WorkflowGenerator

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

GO_VERSION = "1.21"
METADATA_FILE = "gogo.yaml"
PLACEHOLDER_FILE = ".gitkeep"

# (config flag, module path, version) in go.mod order
GO_DEPENDENCIES: list[tuple[str, str, str]] = [
    ("use_cobra", "github.com/spf13/cobra", "v1.9.1"),
    ("use_viper", "github.com/spf13/viper", "v1.19.0"),
    ("use_gin", "github.com/gin-gonic/gin", "v1.10.0"),
]

# (config flag, directory) in creation order
STRUCTURE_DIRS: list[tuple[str, str]] = [
    ("use_cmd", "cmd"),
    ("use_internal", "internal"),
    ("use_pkg", "pkg"),
    ("use_docs", "docs"),
    ("use_test", "test"),
]

LICENSE_TEMPLATES: dict[str, str] = {
    "MIT": "licenses/MIT.j2",
}
GENERIC_LICENSE_TEMPLATE = "licenses/generic.j2"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when a directory or file of the project cannot be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause.strerror or cause}")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates a project directory containing:
    - ``gogo.yaml`` recording the configuration used
    - README, LICENSE, .gitignore and Makefile
    - Structural directories (cmd, internal, pkg, docs, test)
    - Initial Go sources for the project type
    - ``go.mod`` with the selected dependencies
    - GitHub Actions workflows
    - golangci-lint, pre-commit, commitlint and git hook configuration

    The clock is injectable so that the license year and the metadata
    timestamp are reproducible.
    """

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer | None = None,
        now: datetime | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.now = now
        self.code_gen = CodeGenerator(self.renderer)
        self.workflow_gen = WorkflowGenerator(self.renderer)
        self.quality_gen = QualityGenerator(self.renderer)

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path) -> Path:
        """Generate the project below *output_dir*.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  A subdirectory named after the project is created
                inside it; existing files are overwritten.

        Returns:
            Path to the generated project root.

        Raises:
            InvalidConfigError: If the project name is empty.
            GenerationError: On the first directory or file that cannot be
                written.  Files written before the failure are left in place.
        """
        if not self.config.name.strip():
            raise InvalidConfigError("project name must not be empty")

        entries = self.plan()
        project_root = Path(output_dir) / self.config.name

        # 1. Create the project root
        self._write_entry(project_root, GeneratedFile("."))

        # 2-10. Metadata, root files, structure, code, go.mod, CI, tooling
        for entry in entries:
            self._write_entry(project_root, entry)

        return project_root

    def plan(self) -> list[GeneratedFile]:
        """Resolve the configuration into the ordered list of plan entries.

        Pure: nothing is written.  For a fixed config and clock the result is
        identical between calls.
        """
        context = self._build_context()
        entries: list[GeneratedFile] = []

        # 2. Metadata file
        entries.append(self._render("gogo.yaml.j2", METADATA_FILE, context))

        # 3. Root files
        entries.extend(self._root_files(context))

        # 4. Structural directories
        entries.extend(self._structure_dirs())

        # 5. Initial code for the project type
        entries.extend(self.code_gen.files(self.config.type, context))

        # 6. Go module
        entries.append(self._render("go.mod.j2", "go.mod", context))

        # 7. GitHub Actions
        entries.extend(self.workflow_gen.files(context))

        # 8-10. Linters, pre-commit hooks, git hooks
        entries.extend(self.quality_gen.files(context))

        _check_unique_paths(entries)
        return entries

    def resolve_files(self) -> list[GeneratedFile]:
        """Return only the file entries of :meth:`plan`."""
        return [entry for entry in self.plan() if not entry.is_dir]

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        now = self.now or datetime.now(timezone.utc)
        cfg = self.config
        requires = [
            {"path": path, "version": version}
            for flag, path, version in GO_DEPENDENCIES
            if getattr(cfg, flag)
        ]
        return {
            **cfg.model_dump(mode="json"),
            "project_name": cfg.name,
            "project_type": cfg.type.value,
            "name_lower": cfg.lower_name,
            "package_name": go_package_name(cfg.name),
            "build_hook_id": f"{cfg.lower_name}-build",
            "go_version": GO_VERSION,
            "requires": requires,
            "year": now.year,
            "generated_at": now.isoformat(timespec="seconds"),
        }

    # -- Plan sections -----------------------------------------------------

    def _root_files(self, ctx: dict[str, Any]) -> list[GeneratedFile]:
        """README, LICENSE, .gitignore and Makefile, each gated by its flag."""
        cfg = self.config
        entries: list[GeneratedFile] = []

        if cfg.create_readme:
            entries.append(self._render("README.md.j2", "README.md", ctx))

        if cfg.has_license_file:
            if cfg.license not in KNOWN_LICENSES:
                print_warning(
                    f"Unknown license {cfg.license!r}; writing a generic LICENSE file"
                )
            template = LICENSE_TEMPLATES.get(cfg.license, GENERIC_LICENSE_TEMPLATE)
            entries.append(self._render(template, "LICENSE", ctx))

        entries.append(self._render("gitignore.j2", ".gitignore", ctx))

        if cfg.create_makefile:
            entries.append(self._render("Makefile.j2", "Makefile", ctx))

        return entries

    def _structure_dirs(self) -> list[GeneratedFile]:
        """Enabled structural directories, each with a placeholder file."""
        entries: list[GeneratedFile] = []
        for flag, directory in STRUCTURE_DIRS:
            if getattr(self.config, flag):
                entries.append(GeneratedFile(directory))
                entries.append(GeneratedFile(f"{directory}/{PLACEHOLDER_FILE}", ""))
        return entries

    def _render(self, template: str, output: str, ctx: dict[str, Any]) -> GeneratedFile:
        return GeneratedFile(output, self.renderer.render(template, ctx))

    # -- Writing -----------------------------------------------------------

    @staticmethod
    def _write_entry(project_root: Path, entry: GeneratedFile) -> None:
        target = project_root / entry.path
        try:
            if entry.is_dir:
                ensure_dir(target)
                return
            write_text(target, entry.content or "")
            if entry.executable:
                make_executable(target)
        except OSError as exc:
            raise GenerationError(target, exc) from exc


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_unique_paths(entries: list[GeneratedFile]) -> None:
    """Raise ``ValueError`` if two plan entries target the same path."""
    seen: set[str] = set()
    for entry in entries:
        if entry.path in seen:
            raise ValueError(f"Duplicate output path in generation plan: {entry.path}")
        seen.add(entry.path)
