"""Configuration loading for lfg (.lfg.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

CONFIG_FILENAME = ".lfg.yml"

DEFAULT_IGNORE: Tuple[str, ...] = ("node_modules", ".git", "dist", "bun.lockb", "scripts")
DEFAULT_INDEX_EXTENSIONS: Tuple[str, ...] = (".md", ".ts", ".json")
DEFAULT_BINARY_SUFFIXES: Tuple[str, ...] = (".png", ".jpg", ".jpeg", ".gif", ".ico", ".webp")
DEFAULT_MAX_FILE_BYTES = 100 * 1024


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ContextConfig:
    """Settings shared by the indexer and the dumper."""

    index_output: str = "llms.txt"
    dump_output: str = "llms-full.txt"
    ignore: Tuple[str, ...] = DEFAULT_IGNORE
    index_extensions: Tuple[str, ...] = DEFAULT_INDEX_EXTENSIONS
    docs_root: str = "docs"
    src_root: str = "src"
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    binary_suffixes: Tuple[str, ...] = DEFAULT_BINARY_SUFFIXES

    @property
    def dump_ignore(self) -> Tuple[str, ...]:
        """Ignore tokens for the dumper, which must never read its own outputs."""
        extra = [name for name in (self.index_output, self.dump_output) if name not in self.ignore]
        return tuple(self.ignore) + tuple(extra)


@dataclass
class PromptConfig:
    """Where prompt templates live and how they are parameterised."""

    directory: str = "docs/prompts"
    boot: str = "00_init_context"
    placeholder: str = "USER_INPUT"


@dataclass
class LfgConfig:
    """Represents the settings defined in .lfg.yml."""

    root: Path
    context: ContextConfig = field(default_factory=ContextConfig)
    prompts: PromptConfig = field(default_factory=PromptConfig)


def load_config(config_path: Path) -> LfgConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return LfgConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    context = ContextConfig()
    context_data = _as_dict(data.get("context"))
    if context_data:
        context.index_output = _as_str(context_data.get("index_output")) or context.index_output
        context.dump_output = _as_str(context_data.get("dump_output")) or context.dump_output
        if "ignore" in context_data:
            context.ignore = tuple(_as_str_list(context_data.get("ignore")))
        if "index_extensions" in context_data:
            context.index_extensions = tuple(_as_str_list(context_data.get("index_extensions")))
        context.docs_root = _as_str(context_data.get("docs_root")) or context.docs_root
        context.src_root = _as_str(context_data.get("src_root")) or context.src_root
        max_bytes = _as_int(context_data.get("max_file_bytes"))
        if max_bytes is not None:
            if max_bytes <= 0:
                raise ConfigError("context.max_file_bytes must be a positive integer")
            context.max_file_bytes = max_bytes
        if "binary_suffixes" in context_data:
            context.binary_suffixes = tuple(_as_str_list(context_data.get("binary_suffixes")))

    prompts = PromptConfig()
    prompt_data = _as_dict(data.get("prompts"))
    if prompt_data:
        prompts.directory = _as_str(prompt_data.get("directory")) or prompts.directory
        prompts.boot = _as_str(prompt_data.get("boot")) or prompts.boot
        prompts.placeholder = _as_str(prompt_data.get("placeholder")) or prompts.placeholder

    return LfgConfig(root=root, context=context, prompts=prompts)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ContextConfig",
    "LfgConfig",
    "PromptConfig",
    "load_config",
]
