"""Command-line interface for gogo.

Two sub-commands are provided::

    gogo new [name] [-o DIR] [-s] [-c FILE] [-t TYPE] [-m MODULE]
    gogo version

``new`` assembles a ``ProjectConfig`` from (lowest to highest precedence)
the built-in defaults or a type preset, a YAML config file, the positional
name and ``--module``; then optionally runs the interactive wizard, and
finally generates the project.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from gogo import BUILD_DATE, COMMIT, __version__
from gogo.config import (
    ConfigError,
    ProjectConfig,
    ProjectType,
    config_for_type,
    default_config,
    load_config,
)
from gogo.scaffolder import GenerationError, ProjectGenerator
from gogo.utils import console, print_error, print_success, print_warning
from gogo.wizard import WizardCancelled, run_wizard

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130

DEFAULT_MODULE_PREFIX = "github.com/username"


@dataclass
class NewOptions:
    """Parsed options of the ``new`` command."""

    name: str | None = None
    output: Path = Path(".")
    skip_wizard: bool = False
    config_path: Path | None = None
    project_type: str | None = None
    module: str | None = None


# ---------------------------------------------------------------------------
# new
# ---------------------------------------------------------------------------


def build_config(options: NewOptions) -> ProjectConfig:
    """Assemble the configuration for a ``new`` run, without prompting.

    A config file replaces the defaults entirely (``--type`` is ignored
    when one is given).  A positional name overrides the file's name and,
    when no file and no ``--module`` are given, also derives the module
    path.  ``--module`` always wins.

    Raises:
        ConfigError: If the config file is missing or malformed.
    """
    if options.config_path is not None:
        config = load_config(options.config_path)
    elif options.project_type:
        config = config_for_type(options.project_type)
    else:
        config = default_config()

    if options.name:
        config.name = options.name
        if options.config_path is None and not options.module:
            config.module = f"{DEFAULT_MODULE_PREFIX}/{options.name}"

    if options.module:
        config.module = options.module

    return config


def run_new(options: NewOptions) -> Path:
    """Build the config, run the wizard unless skipped, and generate.

    Returns:
        Path to the generated project root.

    Raises:
        ConfigError: On config load failures or an empty project name.
        WizardCancelled: If the user aborts the wizard.
        GenerationError: If a file or directory cannot be written.
    """
    config = build_config(options)
    if not options.skip_wizard:
        run_wizard(config)
    return ProjectGenerator(config).generate(options.output)


def _print_next_steps(project_root: Path) -> None:
    print_success(f"Project created successfully at {project_root.resolve()}")
    console.print()
    console.print("[bold]Next steps:[/bold]")
    console.print(f"  1. cd {project_root}")
    console.print("  2. git init")
    console.print("  3. go mod tidy")
    console.print("  4. make build")


def _cmd_new(args: argparse.Namespace) -> int:
    options = NewOptions(
        name=args.name,
        output=Path(args.output),
        skip_wizard=args.skip_wizard,
        config_path=Path(args.config) if args.config else None,
        project_type=args.type,
        module=args.module,
    )
    if options.config_path is not None and options.project_type:
        print_warning("--type is ignored when --config is given")

    try:
        project_root = run_new(options)
    except WizardCancelled as exc:
        print_warning(f"Aborted: {exc}")
        return EXIT_CANCELLED
    except (ConfigError, GenerationError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_FAILURE

    _print_next_steps(project_root)
    return EXIT_OK


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


def version_text() -> str:
    """Return the multi-line version block printed by ``gogo version``."""
    return (
        "gogo CLI\n"
        "--------\n"
        f"Version:    {__version__}\n"
        f"Commit:     {COMMIT}\n"
        f"Build Date: {BUILD_DATE}"
    )


def _cmd_version(args: argparse.Namespace) -> int:
    console.print(version_text(), highlight=False)
    return EXIT_OK


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gogo",
        description="gogo -- generate Go project skeletons with best practices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gogo new\n"
            "  gogo new my-tool --type cli --skip-wizard\n"
            "  gogo new --config gogo.yaml -o ./projects\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    new = subparsers.add_parser("new", help="Create a new Go project")
    new.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (overrides the config file's name)",
    )
    new.add_argument(
        "--output", "-o",
        default=".",
        help="Output directory (default: .)",
    )
    new.add_argument(
        "--skip-wizard", "-s",
        action="store_true",
        help="Skip the interactive wizard and use defaults",
    )
    new.add_argument(
        "--config", "-c",
        default=None,
        help="Path to a YAML config file",
    )
    new.add_argument(
        "--type", "-t",
        default=None,
        choices=[t.value for t in ProjectType],
        help="Project type (default: default)",
    )
    new.add_argument(
        "--module", "-m",
        default=None,
        help="Go module path (e.g. github.com/you/project)",
    )
    new.set_defaults(handler=_cmd_new)

    version = subparsers.add_parser("version", help="Print version information")
    version.set_defaults(handler=_cmd_version)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``gogo`` and ``python -m gogo``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return EXIT_OK
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
