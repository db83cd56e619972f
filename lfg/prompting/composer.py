"""Composes agent prompts from the project snapshot and prompt templates."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, Tuple

from ..clipboard import Clipboard
from ..config import ContextConfig, LfgConfig, load_config
from ..context import build_context
from ..logging import get_logger
from .templates import TemplateNotFoundError, render_template

SEPARATOR = "---"


def _read_raw(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


class PromptComposer:
    """Builds the clipboard payload: snapshot, boot prompt, then the task."""

    def __init__(
        self,
        root: Path | str,
        config: LfgConfig | None = None,
        *,
        clipboard: Clipboard | None = None,
        context_builder: Callable[[Path, ContextConfig], Tuple[Path, Path]] | None = None,
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.config = config or load_config(self.root)
        self.clipboard = clipboard or Clipboard()
        self._build_context = context_builder or build_context
        self.logger = get_logger("prompting.composer")

    def template_path(self, name: str) -> Path:
        """Return the file backing template ``name``; raise if it is missing."""
        prompts_dir = (self.root / self.config.prompts.directory).resolve()
        path = (prompts_dir / f"{name}.md").resolve()
        if prompts_dir not in path.parents or not path.is_file():
            raise TemplateNotFoundError(f"Template not found: {name}")
        return path

    def compose(self, template: str, words: Sequence[str]) -> str:
        """Regenerate context and return the assembled prompt text."""
        task_path = self.template_path(template)
        boot_path = self.template_path(self.config.prompts.boot)

        boot = _read_raw(boot_path)
        task = render_template(
            _read_raw(task_path),
            {self.config.prompts.placeholder: " ".join(words)},
            name=template,
        )

        self.logger.debug("Regenerating context under %s", self.root)
        _, dump_path = self._build_context(self.root, self.config.context)
        snapshot = _read_raw(dump_path)
        return "\n".join([snapshot, SEPARATOR, boot, SEPARATOR, task])

    def copy(self, template: str, words: Sequence[str]) -> str:
        payload = self.compose(template, words)
        self.clipboard.copy(payload)
        self.logger.info("Prompt loaded to clipboard.")
        return payload


__all__ = ["PromptComposer", "SEPARATOR"]
