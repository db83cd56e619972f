"""CLI entrypoints for lfg commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .clipboard import ClipboardError
from .config import ConfigError, load_config
from .context import Dumper, Indexer, build_context, check_drift
from .logging import configure_logging
from .prompting import PromptComposer, TemplateNotFoundError, TemplateRenderError
from .scaffold import DEFAULT_PROJECT_NAME, ScaffoldSettings, ScaffoldWriter, build_plan, remove_bootstrapper


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help=f"{help_text} (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lfg",
        description="Bootstrap an agent-ready project and maintain its LLM context files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug-formatted log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init",
        help="Write the project skeleton, configuration and prompt templates.",
    )
    _add_verbose_option(init_parser, suppress_default=True)
    _add_path_argument(init_parser, "Directory to initialize")
    init_parser.add_argument(
        "--name",
        default=DEFAULT_PROJECT_NAME,
        help="Project name used in package.json and the README headings.",
    )
    init_parser.add_argument(
        "--bootstrapper",
        type=Path,
        default=None,
        help="Bootstrapper file to delete once the skeleton is written.",
    )

    context_parser = subparsers.add_parser(
        "context",
        help="Regenerate or verify llms.txt and llms-full.txt.",
    )
    _add_verbose_option(context_parser, suppress_default=True)
    context_parser.add_argument(
        "action",
        choices=("index", "dump", "build", "check"),
        help="index: llms.txt, dump: llms-full.txt, build: both, check: report drift.",
    )
    _add_path_argument(context_parser, "Project root")

    prompt_parser = subparsers.add_parser(
        "prompt",
        help="Compose a prompt from a template and copy it to the clipboard.",
    )
    _add_verbose_option(prompt_parser, suppress_default=True)
    prompt_parser.add_argument("template", help="Template name under the prompts directory.")
    prompt_parser.add_argument("input", nargs="+", help="Free-text request inserted into the template.")
    prompt_parser.add_argument(
        "--root",
        default=".",
        help="Project root (defaults to current directory).",
    )
    prompt_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the prompt instead of copying it to the clipboard.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for lfg commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "init":
        plan = build_plan(ScaffoldSettings(project_name=args.name))
        try:
            ScaffoldWriter().write(plan, args.path)
        except OSError as exc:
            parser.exit(1, f"lfg init failed: {exc}\n")
        if args.bootstrapper is not None:
            remove_bootstrapper(args.bootstrapper)
    elif args.command == "context":
        _run_context(parser, args.action, args.path)
    elif args.command == "prompt":
        _run_prompt(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_context(parser: argparse.ArgumentParser, action: str, path: str) -> None:
    root = Path(path).expanduser().resolve()
    try:
        config = load_config(root).context
        if action == "index":
            Indexer(config).write(root)
        elif action == "dump":
            Dumper(config).write(root)
        elif action == "build":
            build_context(root, config)
        else:
            stale = check_drift(root, config)
            if stale:
                parser.exit(
                    1,
                    f"Context out of sync: {', '.join(stale)}. Run `lfg context build`.\n",
                )
            print("Context up to date")
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"lfg context {action} failed: {exc}\nRun with --verbose for more details.\n")


def _run_prompt(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        composer = PromptComposer(args.root)
        if args.stdout:
            print(composer.compose(args.template, args.input))
        else:
            composer.copy(args.template, args.input)
    except (TemplateNotFoundError, ConfigError, TemplateRenderError, ClipboardError) as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"lfg prompt failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
