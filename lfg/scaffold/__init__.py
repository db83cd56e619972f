"""Project scaffolding for ``lfg init``."""

from .writer import (
    DEFAULT_PROJECT_NAME,
    ScaffoldPlan,
    ScaffoldSettings,
    ScaffoldWriter,
    build_plan,
    remove_bootstrapper,
)

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "ScaffoldPlan",
    "ScaffoldSettings",
    "ScaffoldWriter",
    "build_plan",
    "remove_bootstrapper",
]
