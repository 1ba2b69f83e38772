"""gogo project configuration.

Typed configuration for a single scaffolding run. ``ProjectConfig`` is a
Pydantic v2 model whose field defaults are the *zero values* so that a
partially written YAML file loads exactly as written; the opinionated
defaults live in :func:`default_config` and the per-type presets in
:func:`config_for_type`.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from gogo.utils import print_warning

# ---------------------------------------------------------------------------
# Enumerations & constants
# ---------------------------------------------------------------------------


class ProjectType(str, Enum):
    """Kind of project to scaffold; selects presets and the initial code."""
    DEFAULT = "default"
    CLI = "cli"
    API = "api"
    LIBRARY = "library"


LICENSE_NONE = "None"

# Choices offered by the wizard. Values outside this list are still accepted
# and render the generic license template.
KNOWN_LICENSES: list[str] = ["MIT", "Apache-2.0", "GPL-3.0", "BSD-3-Clause", LICENSE_NONE]

# Field deltas applied on top of ``default_config()`` when a type is selected.
TYPE_PRESETS: dict[ProjectType, dict[str, bool]] = {
    ProjectType.DEFAULT: {},
    ProjectType.CLI: {"use_cobra": True, "use_viper": True},
    ProjectType.API: {"use_gin": True},
    ProjectType.LIBRARY: {"use_cmd": False},
}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Base class for configuration failures."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file does not exist."""


class ConfigDecodeError(ConfigError):
    """Raised when a config file is not well-formed YAML or has bad field types."""


class ConfigWriteError(ConfigError):
    """Raised when a config file (or its parent directory) cannot be written."""


class InvalidConfigError(ConfigError):
    """Raised when a required field is missing or empty."""


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Everything needed to scaffold one Go project.

    Field names double as the flat YAML keys used by :func:`load_config` and
    :func:`save_config`.
    """

    model_config = ConfigDict(validate_assignment=True)

    # General project information
    name: str = Field(default="", description="Project name (directory and display name)")
    module: str = Field(default="", description="Go module path")
    description: str = Field(default="")
    license: str = Field(default="", description="License identifier, or 'None'")
    author: str = Field(default="")
    type: ProjectType = Field(default=ProjectType.DEFAULT)

    # Project structure
    use_cmd: bool = False
    use_internal: bool = False
    use_pkg: bool = False
    use_test: bool = False
    use_docs: bool = False

    # Root files
    create_readme: bool = False
    create_license: bool = False
    create_makefile: bool = False

    # Code quality tools
    use_linters: bool = False
    use_pre_commit_hooks: bool = False
    use_git_hooks: bool = False

    # Dependencies
    use_cobra: bool = False
    use_viper: bool = False
    use_gin: bool = False

    # CI/CD
    use_github_actions: bool = False

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # An empty YAML value (``author:``) means "zero value", not an error.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> Any:
        return parse_project_type(value)

    @property
    def lower_name(self) -> str:
        """Lower-cased name used for binaries, hook ids and config lookups."""
        return self.name.lower()

    @property
    def has_license_file(self) -> bool:
        """Whether a LICENSE file should be written."""
        return self.create_license and self.license != LICENSE_NONE


def parse_project_type(value: Any) -> ProjectType:
    """Return the ``ProjectType`` for *value*, degrading to ``DEFAULT``.

    Unknown values are not an error: a warning is printed and the default
    type is used instead.
    """
    if isinstance(value, ProjectType):
        return value
    try:
        return ProjectType(str(value).strip().lower())
    except ValueError:
        print_warning(f"Unknown project type {value!r}; using '{ProjectType.DEFAULT.value}'")
        return ProjectType.DEFAULT


# ---------------------------------------------------------------------------
# Constructors & presets
# ---------------------------------------------------------------------------


def default_config() -> ProjectConfig:
    """Return the baseline configuration (type ``default``)."""
    return ProjectConfig(
        name="my-project",
        module="github.com/username/my-project",
        description="A Go project",
        license="MIT",
        author="",
        type=ProjectType.DEFAULT,
        use_cmd=True,
        use_internal=True,
        use_pkg=True,
        use_test=True,
        use_docs=True,
        create_readme=True,
        create_license=True,
        create_makefile=True,
        use_linters=True,
        use_pre_commit_hooks=True,
        use_git_hooks=True,
        use_cobra=False,
        use_viper=False,
        use_gin=False,
        use_github_actions=True,
    )


def apply_preset(config: ProjectConfig, project_type: ProjectType | str) -> ProjectConfig:
    """Select *project_type* on *config* and apply its preset deltas in place.

    Presets are applied only when a type is selected through this function;
    assigning ``config.type`` directly leaves the dependent flags untouched.
    """
    selected = parse_project_type(project_type)
    config.type = selected
    for field_name, value in TYPE_PRESETS[selected].items():
        setattr(config, field_name, value)
    return config


def config_for_type(project_type: ProjectType | str) -> ProjectConfig:
    """Return ``default_config()`` with the preset for *project_type* applied.

    Unknown types return ``default_config()`` unchanged.
    """
    return apply_preset(default_config(), project_type)


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def load_config(path: str | Path) -> ProjectConfig:
    """Load a flat YAML config file.

    Keys missing from the file take their zero value; the result is *not*
    merged with :func:`default_config`.

    Raises:
        ConfigNotFoundError: If *path* does not exist.
        ConfigDecodeError: If the file is not valid YAML, is not a mapping,
            or holds a value of the wrong type.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigNotFoundError("config file not found", file_path)

    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigDecodeError(f"cannot read config file: {exc}", file_path) from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigDecodeError(f"invalid YAML: {exc}", file_path) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigDecodeError("top-level YAML value must be a mapping", file_path)

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigDecodeError(f"invalid config values: {exc}", file_path) from exc


def save_config(config: ProjectConfig, path: str | Path) -> Path:
    """Persist *config* as flat YAML, creating parent directories.

    Returns:
        The path that was written.

    Raises:
        ConfigWriteError: If the directory or the file cannot be written.
    """
    target = Path(path)
    content = yaml.safe_dump(
        config.model_dump(mode="json"),
        sort_keys=False,
        allow_unicode=True,
    )
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(f"cannot write config file: {exc}", target) from exc
    return target
