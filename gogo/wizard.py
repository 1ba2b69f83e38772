"""Interactive project setup wizard.

Walks the user through the same fields ``ProjectConfig`` holds, section by
section, using Rich prompts.  The wizard mutates the config it is given; it
never generates anything itself.  Interrupting a prompt (Ctrl-C / Ctrl-D) or
declining the final confirmation raises ``WizardCancelled`` so the caller can
skip generation.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.rule import Rule

from gogo.config import KNOWN_LICENSES, ProjectConfig, ProjectType, apply_preset
from gogo.utils import console, print_summary_table


class WizardCancelled(Exception):
    """Raised when the user aborts the wizard."""


# ---------------------------------------------------------------------------
# Prompt catalogue
# ---------------------------------------------------------------------------

TYPE_DESCRIPTIONS: dict[ProjectType, str] = {
    ProjectType.DEFAULT: "Generic Go project",
    ProjectType.CLI: "Command-line application (includes Cobra and Viper)",
    ProjectType.API: "API/Web service (includes Gin)",
    ProjectType.LIBRARY: "Library/Package (no cmd directory)",
}

# (section title, [(config field, label), ...])
TOGGLE_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    ("Project Structure", [
        ("use_cmd", "cmd (application entrypoints)"),
        ("use_internal", "internal (private packages)"),
        ("use_pkg", "pkg (public packages)"),
        ("use_test", "test (test utilities)"),
        ("use_docs", "docs (documentation)"),
    ]),
    ("Project Files", [
        ("create_readme", "README.md"),
        ("create_license", "LICENSE"),
        ("create_makefile", "Makefile"),
    ]),
    ("Code Quality Tools", [
        ("use_linters", "Linters (golangci-lint)"),
        ("use_pre_commit_hooks", "Pre-commit hooks"),
        ("use_git_hooks", "Git hooks"),
    ]),
    ("Dependencies", [
        ("use_cobra", "Cobra (CLI framework)"),
        ("use_viper", "Viper (configuration)"),
        ("use_gin", "Gin (HTTP framework)"),
    ]),
    ("CI/CD", [
        ("use_github_actions", "GitHub Actions"),
    ]),
]


# ---------------------------------------------------------------------------
# Wizard
# ---------------------------------------------------------------------------


def run_wizard(config: ProjectConfig) -> ProjectConfig:
    """Run the interactive wizard, updating *config* in place.

    Returns:
        The same ``config`` instance.

    Raises:
        WizardCancelled: If the user interrupts a prompt or declines to
            generate the project.
    """
    try:
        _run(config)
    except (KeyboardInterrupt, EOFError) as exc:
        raise WizardCancelled("wizard cancelled") from exc
    return config


def _run(config: ProjectConfig) -> None:
    console.print()
    console.print(
        Panel(
            "[bold]Welcome to the gogo project generator[/bold]\n"
            "This wizard will help you set up a new Go project with best practices",
            style="magenta",
        )
    )

    _section("Project Information")
    config.name = Prompt.ask("Project name", default=config.name, console=console)
    config.module = Prompt.ask("Module path", default=config.module, console=console)
    config.description = Prompt.ask("Description", default=config.description, console=console)
    config.author = Prompt.ask("Author", default=config.author, console=console)
    config.license = Prompt.ask(
        "License",
        choices=KNOWN_LICENSES,
        default=config.license if config.license in KNOWN_LICENSES else KNOWN_LICENSES[0],
        console=console,
    )

    _section("Project Type")
    for project_type, description in TYPE_DESCRIPTIONS.items():
        console.print(f"  [cyan]{project_type.value:<8}[/cyan] {description}")
    selected = Prompt.ask(
        "Project type",
        choices=[t.value for t in ProjectType],
        default=config.type.value,
        console=console,
    )
    # Presets apply on selection only, so re-confirming the current type
    # keeps any flags the caller already adjusted.
    if selected != config.type.value:
        apply_preset(config, selected)

    for title, toggles in TOGGLE_SECTIONS:
        _section(title)
        for field_name, label in toggles:
            value = Confirm.ask(
                f"Include {label}?", default=getattr(config, field_name), console=console
            )
            setattr(config, field_name, value)

    console.print()
    print_summary_table(summarize(config), title="Configuration Summary")

    if not Confirm.ask("Generate project with these settings?", default=True, console=console):
        raise WizardCancelled("project generation cancelled")


def summarize(config: ProjectConfig) -> dict[str, str]:
    """Return the label/value rows shown in the wizard summary."""
    rows = {
        "Project": config.name,
        "Module": config.module,
        "Description": config.description,
        "Author": config.author,
        "License": config.license,
        "Type": config.type.value,
    }
    for title, toggles in TOGGLE_SECTIONS:
        enabled = [label for field_name, label in toggles if getattr(config, field_name)]
        rows[title] = ", ".join(enabled) or "-"
    return rows


def _section(title: str) -> None:
    console.print()
    console.print(Rule(f"[bold green]{title}[/bold green]", style="green"))
