"""Tests for lfg.context.dumper."""

from __future__ import annotations

import pytest

from lfg.config import ContextConfig
from lfg.context import Dumper
from lfg.models import Snapshot, SnapshotBlock


def test_snapshot_skips_files_at_or_over_size_limit(repo_builder) -> None:
    repo_builder.write_bytes("big.txt", b"a" * (200 * 1024))
    repo_builder.write_bytes("small.txt", b"b" * 1024)

    snapshot = repo_builder.snapshot()

    assert [block.path for block in snapshot.blocks] == ["small.txt"]
    assert snapshot.skipped == ["big.txt"]


def test_snapshot_limit_is_exclusive(repo_builder) -> None:
    repo_builder.write_bytes("edge.txt", b"x" * (100 * 1024))
    repo_builder.write_bytes("under.txt", b"x" * (100 * 1024 - 1))

    snapshot = repo_builder.snapshot()

    assert [block.path for block in snapshot.blocks] == ["under.txt"]


def test_snapshot_skips_images_without_aborting_siblings(repo_builder) -> None:
    repo_builder.write_bytes("assets/logo.png", b"\x89PNG\r\n\x1a\n\x00\xff")
    repo_builder.write_bytes("assets/photo.JPG", b"\xff\xd8\xff\xe0")
    repo_builder.write({"assets/notes.md": "# Assets\n", "src/index.ts": "export {};\n"})

    snapshot = repo_builder.snapshot()

    assert [block.path for block in snapshot.blocks] == ["assets/notes.md", "src/index.ts"]
    assert sorted(snapshot.skipped) == ["assets/logo.png", "assets/photo.JPG"]


def test_snapshot_excludes_generated_artifacts_and_ignored_paths(repo_builder) -> None:
    repo_builder.write(
        {
            "llms.txt": "# Context Index\n",
            "llms-full.txt": "<project>\n</project>",
            "scripts/update-context.sh": "#!/bin/sh\n",
            ".git/HEAD": "ref: refs/heads/main\n",
            "README.md": "# Readme\n",
        }
    )

    snapshot = repo_builder.snapshot()

    assert [block.path for block in snapshot.blocks] == ["README.md"]


def test_snapshot_preserves_raw_content(repo_builder) -> None:
    repo_builder.write_bytes("windows.txt", b"line one\r\nline two\r\n")

    snapshot = repo_builder.snapshot()

    assert snapshot.blocks == [SnapshotBlock(path="windows.txt", content="line one\r\nline two\r\n")]


def test_snapshot_read_errors_abort_the_dump(repo_builder) -> None:
    repo_builder.write_bytes("broken.bin", b"\xff\xfe\x00invalid")

    with pytest.raises(UnicodeDecodeError):
        repo_builder.snapshot()


def test_render_wraps_blocks_in_project_tag() -> None:
    snapshot = Snapshot(
        root="/repo",
        blocks=[
            SnapshotBlock(path="README.md", content="# Readme\n"),
            SnapshotBlock(path="src/index.ts", content="export {};"),
        ],
    )

    rendered = Dumper().render(snapshot)

    assert rendered == (
        "<project>\n"
        '<file path="README.md">\n# Readme\n\n</file>\n'
        '<file path="src/index.ts">\nexport {};\n</file>\n'
        "</project>"
    )


def test_write_is_idempotent_and_skips_previous_output(repo_builder) -> None:
    repo_builder.write({"README.md": "# Readme\n", "src/index.ts": "export {};\n"})
    dumper = Dumper()

    output = dumper.write(repo_builder.path())
    first = output.read_bytes()
    dumper.write(repo_builder.path())

    assert output.name == "llms-full.txt"
    assert output.read_bytes() == first
    assert b"llms-full.txt" not in first


def test_custom_output_names_are_excluded(repo_builder) -> None:
    config = ContextConfig(index_output="context.md", dump_output="context-full.txt")
    repo_builder.write({"context.md": "old index\n", "README.md": "# Readme\n"})

    Dumper(config).write(repo_builder.path())
    text = repo_builder.read("context-full.txt")

    assert '<file path="README.md">' in text
    assert "old index" not in text
