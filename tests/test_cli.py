"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from lfg.cli import _build_parser, main


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()

    before = parser.parse_args(["--verbose", "context", "build"])
    after = parser.parse_args(["context", "build", "--verbose"])

    assert before.verbose is True
    assert after.verbose is True
    assert after.command == "context"
    assert after.action == "build"
    assert after.path == "."


def test_cli_prompt_collects_free_text() -> None:
    args = _build_parser().parse_args(["prompt", "feature", "add", "login", "page"])

    assert args.template == "feature"
    assert args.input == ["add", "login", "page"]
    assert args.stdout is False


@pytest.mark.parametrize("argv", [["prompt"], ["prompt", "feature"]])
def test_prompt_requires_template_and_input(
    argv: list[str], tmp_path: Path, monkeypatch, capsys
) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code != 0
    assert "usage:" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_prompt_reports_missing_template(tmp_path: Path, capsys) -> None:
    (tmp_path / "docs" / "prompts").mkdir(parents=True)

    with pytest.raises(SystemExit) as excinfo:
        main(["prompt", "--root", str(tmp_path), "missing", "do", "it"])

    assert excinfo.value.code == 1
    assert "Template not found" in capsys.readouterr().err
    assert not (tmp_path / "llms-full.txt").exists()


def test_init_then_prompt_to_stdout(tmp_path: Path, capsys) -> None:
    main(["init", str(tmp_path), "--name", "demo-app", "--bootstrapper", str(tmp_path / "gone.py")])

    assert (tmp_path / "AGENTS.md").exists()
    assert (tmp_path / "README.md").read_text(encoding="utf-8").startswith("# Demo App\n")

    capsys.readouterr()
    main(["prompt", "--root", str(tmp_path), "--stdout", "feature", "add", "billing"])
    out = capsys.readouterr().out

    assert out.startswith("<project>\n")
    assert '<file path="AGENTS.md">' in out
    assert '<file path="scripts/' not in out
    assert out.rstrip("\n").endswith(
        'User Request: "add billing"\n'
        "Action: Analyze context. Implement strictly typed solution. Output Code only. No Emojis."
    )


def test_context_check_exits_on_drift(tmp_path: Path, capsys) -> None:
    (tmp_path / "README.md").write_text("# Readme\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["context", "check", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "Context out of sync" in capsys.readouterr().err

    main(["context", "build", str(tmp_path)])
    main(["context", "check", str(tmp_path)])

    assert "Context up to date" in capsys.readouterr().out


def test_context_index_and_dump_write_separately(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("# Readme\n", encoding="utf-8")

    main(["context", "index", str(tmp_path)])
    assert (tmp_path / "llms.txt").exists()
    assert not (tmp_path / "llms-full.txt").exists()

    main(["context", "dump", str(tmp_path)])
    assert (tmp_path / "llms-full.txt").exists()


def test_context_reports_missing_root(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["context", "build", str(tmp_path / "missing")])

    assert excinfo.value.code == 1
    assert "not found" in capsys.readouterr().err
