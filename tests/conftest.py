"""Shared pytest fixtures for the gogo test suite.

Provides reusable fixtures for:
- A fixed clock for reproducible license years and metadata timestamps
- Ready-made configurations for each project type
- A template renderer bound to the packaged templates
- Output directories for generated projects
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from gogo.config import ProjectConfig, config_for_type, default_config
from gogo.scaffolder import TemplateRenderer


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed point in time used as the generator clock."""
    return datetime(2024, 3, 15, 12, 30, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


def _named(config: ProjectConfig, name: str, module: str) -> ProjectConfig:
    config.name = name
    config.module = module
    config.author = "Jane Doe"
    return config


@pytest.fixture
def default_project() -> ProjectConfig:
    """Default-type configuration named ``hello``."""
    return _named(default_config(), "hello", "example.com/hello")


@pytest.fixture
def cli_project() -> ProjectConfig:
    """CLI-type configuration named ``demo`` (cobra + viper)."""
    return _named(config_for_type("cli"), "demo", "example.com/demo")


@pytest.fixture
def api_project() -> ProjectConfig:
    """API-type configuration named ``svc`` (gin)."""
    return _named(config_for_type("api"), "svc", "example.com/svc")


@pytest.fixture
def library_project() -> ProjectConfig:
    """Library-type configuration named ``mylib`` (no cmd directory)."""
    return _named(config_for_type("library"), "mylib", "github.com/me/mylib")


# ---------------------------------------------------------------------------
# Rendering & output
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Template renderer bound to the packaged templates."""
    return TemplateRenderer()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "out"
    out.mkdir()
    return out
