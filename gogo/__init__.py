"""gogo -- an interactive scaffolder for Go projects.

Quick usage::

    from gogo.config import config_for_type
    from gogo.scaffolder import ProjectGenerator

    config = config_for_type("cli")
    config.name = "demo"
    config.module = "example.com/demo"
    ProjectGenerator(config).generate("/tmp/output")
"""

# Overwritten by release builds; the sentinels mark a development checkout.
__version__ = "dev"
COMMIT = "none"
BUILD_DATE = "unknown"
