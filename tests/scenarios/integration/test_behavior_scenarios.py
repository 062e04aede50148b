"""Scenario-style integration tests against a real git repository."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner
from prisma_safety.cli import SETUP_FAILURE_EXIT_CODE, UNSAFE_CHANGE_EXIT_CODE, cli, main
from prisma_safety.run_execution import SafetyCheckRequest, execute_schema_safety_check

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

_SCHEMA_V1 = """
model Foo {
  qid    String @id
  barQid String @map(name: "bar_qid")
  bar    Bar    @relation(fields: [barQid], references: [qid])
  legacy String @ignore
  notes  String
}

model Bar {
  qid  String @id
  foos Foo[]
}

model Archive {
  id Int @id
  @@ignore
}
"""

_SCHEMA_V2_SAFE = """
model Bar {
  qid String @id
}

model Foo {
  notes  String
  qid    String @id
  barQid String @map(name: "bar_qid")
}
"""

_SCHEMA_V2_UNSAFE = """
model Foo {
  qid    String @id
  barQid String @map(name: "bar_qid")
}
"""


def _git(repo: Path, *args: str) -> str:
    completed = subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout.strip()


def _repo_with_committed_schema(tmp_path: Path) -> tuple[Path, str]:
    repo = tmp_path / "repo"
    schema_path = repo / "prisma" / "schema.prisma"
    schema_path.parent.mkdir(parents=True)
    _git(repo, "init", "--quiet")
    schema_path.write_text(_SCHEMA_V1, encoding="utf-8")
    _git(repo, "add", "prisma/schema.prisma")
    _git(repo, "commit", "--quiet", "-m", "initial schema")
    return repo, _git(repo, "rev-parse", "HEAD")


def test_safe_change_against_committed_revision(tmp_path: Path) -> None:
    repo, base_sha = _repo_with_committed_schema(tmp_path)
    (repo / "prisma" / "schema.prisma").write_text(_SCHEMA_V2_SAFE, encoding="utf-8")

    outcome = execute_schema_safety_check(
        SafetyCheckRequest(base_revision=base_sha, working_dir=repo)
    )

    assert outcome.issues == ()


def test_unsafe_change_against_committed_revision(tmp_path: Path) -> None:
    repo, base_sha = _repo_with_committed_schema(tmp_path)
    (repo / "prisma" / "schema.prisma").write_text(_SCHEMA_V2_UNSAFE, encoding="utf-8")

    outcome = execute_schema_safety_check(
        SafetyCheckRequest(base_revision=base_sha, working_dir=repo)
    )

    # Bar is gone, so Foo.bar no longer counts as a relation.
    assert [issue.location for issue in outcome.issues] == ["Bar", "Foo.bar", "Foo.notes"]


def test_cli_check_against_committed_revision(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    repo, base_sha = _repo_with_committed_schema(tmp_path)
    (repo / "prisma" / "schema.prisma").write_text(_SCHEMA_V2_UNSAFE, encoding="utf-8")
    monkeypatch.chdir(repo)

    result = CliRunner().invoke(cli, ["check", base_sha])

    assert result.exit_code == UNSAFE_CHANGE_EXIT_CODE
    assert 'Unsafe change to "Foo.notes"' in result.output


def test_unknown_revision_is_a_setup_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    repo, _ = _repo_with_committed_schema(tmp_path)
    monkeypatch.chdir(repo)

    exit_code = main(["check", "deadbeef"])
    captured = capsys.readouterr()

    assert exit_code == SETUP_FAILURE_EXIT_CODE
    assert "git show failed" in captured.err
