"""Writes the bootstrap file tree and removes the bootstrapper."""

from __future__ import annotations

import json
import re
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple

from ..logging import get_logger
from ..prompting.templates import render_template
from . import content

DEFAULT_PROJECT_NAME = "universal-agentic-project"

_logger = get_logger("scaffold")


@dataclass
class ScaffoldSettings:
    """User-supplied knobs for the generated project."""

    project_name: str = DEFAULT_PROJECT_NAME

    @property
    def project_title(self) -> str:
        words = [word for word in re.split(r"[-_\s]+", self.project_name) if word]
        return " ".join(word[:1].upper() + word[1:] for word in words) or "Project"


@dataclass
class ScaffoldPlan:
    """Directories and files to materialise, in write order."""

    directories: Tuple[str, ...]
    files: Dict[str, str]
    executables: FrozenSet[str] = field(default_factory=frozenset)


def _to_json(payload: object) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_plan(settings: ScaffoldSettings | None = None) -> ScaffoldPlan:
    """Return the full file plan for ``settings``."""
    settings = settings or ScaffoldSettings()
    readme_params = {"project_title": settings.project_title}
    package_json = {
        "name": settings.project_name,
        "module": "src/index.ts",
        "type": "module",
        "scripts": dict(content.PACKAGE_SCRIPTS),
        "devDependencies": {"@types/bun": "latest"},
    }

    files = {
        "package.json": _to_json(package_json),
        ".devcontainer/devcontainer.json": _to_json(content.DEVCONTAINER),
        ".github/workflows/quality-gate.yml": content.CI_WORKFLOW,
        "AGENTS.md": content.AGENTS_MD,
        "README.md": render_template(content.README_EN, readme_params, name="README.md"),
        "README-DE.md": render_template(content.README_DE, readme_params, name="README-DE.md"),
        ".gitignore": content.GITIGNORE,
        "src/index.ts": content.SRC_INDEX,
        "tests/integrity.test.ts": content.TEST_INTEGRITY,
        "scripts/update-context.sh": content.SCRIPT_UPDATE_CONTEXT,
        "scripts/generate-full-dump.sh": content.SCRIPT_FULL_DUMP,
        "scripts/compose-prompt.sh": content.SCRIPT_COMPOSE,
        "docs/prompts/00_init_context.md": content.PROMPT_BOOT,
        "docs/prompts/feature.md": content.PROMPT_FEATURE,
    }
    executables = frozenset(path for path in files if path.startswith("scripts/"))
    return ScaffoldPlan(directories=content.DIRECTORIES, files=files, executables=executables)


class ScaffoldWriter:
    """Materialises a :class:`ScaffoldPlan`, overwriting existing files."""

    def write(self, plan: ScaffoldPlan, root: Path | str) -> List[Path]:
        root_path = Path(root).expanduser().resolve()
        _logger.info("Initializing project at %s", root_path)

        for directory in plan.directories:
            (root_path / directory).mkdir(parents=True, exist_ok=True)

        written: List[Path] = []
        for rel_path, text in plan.files.items():
            path = root_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8", newline="\n")
            if rel_path in plan.executables:
                mode = path.stat().st_mode
                path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
            _logger.debug("Wrote %s", rel_path)
            written.append(path)

        _logger.info("Bootstrap complete. Wrote %d files.", len(written))
        return written


def remove_bootstrapper(path: Path | str) -> bool:
    """Delete the bootstrapper file; failures are reported, never raised."""
    target = Path(path)
    try:
        target.unlink()
    except OSError as exc:
        _logger.info("Note: could not remove bootstrapper %s (%s). Please delete manually.", target, exc)
        return False
    _logger.info("Bootstrapper removed. Repository is clean.")
    return True


__all__ = [
    "DEFAULT_PROJECT_NAME",
    "ScaffoldPlan",
    "ScaffoldSettings",
    "ScaffoldWriter",
    "build_plan",
    "remove_bootstrapper",
]
