"""Test the stamp module."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from rust_app import stamp


def test_resolve_git_revision_without_git(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Missing git executable yields no revision."""

    def mock_run(*args, **kwargs):
        raise FileNotFoundError("git not found")

    monkeypatch.setattr(subprocess, "run", mock_run)

    assert stamp.resolve_git_revision(tmp_path) is None


def test_resolve_git_revision_outside_repository(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def mock_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(128, cmd, stderr="fatal: not a git repository\n")

    monkeypatch.setattr(subprocess, "run", mock_run)

    assert stamp.resolve_git_revision(tmp_path) is None


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_resolve_git_revision_in_repository(tmp_path: Path) -> None:
    subprocess.run(["git", "init"], cwd=tmp_path, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    (tmp_path / "test.txt").write_text("test")
    subprocess.run(["git", "add", "."], cwd=tmp_path, check=True, capture_output=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )

    revision = stamp.resolve_git_revision(tmp_path)

    assert revision is not None
    assert len(revision) == 40


def test_choose_revision_prefers_explicit_value(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(stamp, "resolve_git_revision", lambda _source: "f" * 40)

    assert stamp.choose_revision(" abc123 ", tmp_path) == "abc123"
    assert stamp.choose_revision(None, tmp_path) == "f" * 40


def test_choose_revision_ignores_blank_explicit_value(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(stamp, "resolve_git_revision", lambda _source: None)

    assert stamp.choose_revision("   ", tmp_path) == "dev"


def test_resolve_git_revision_rejects_missing_source(tmp_path: Path) -> None:
    with pytest.raises(NotADirectoryError):
        stamp.resolve_git_revision(tmp_path / "missing")


def test_choose_revision_falls_back_to_dev(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(stamp, "resolve_git_revision", lambda _source: None)

    assert stamp.choose_revision(None, tmp_path) == stamp.FALLBACK_REVISION == "dev"


def test_render_build_constants_is_deterministic() -> None:
    text = stamp.render_build_constants("abc123")

    assert text == stamp.render_build_constants("abc123")
    assert 'GIT_REVISION = "abc123"\n' in text


@pytest.mark.parametrize("revision", ["", 'a"b', "a\\b", "a\nb"])
def test_render_build_constants_rejects_unsafe_revision(revision: str) -> None:
    with pytest.raises(ValueError):
        stamp.render_build_constants(revision)


def test_write_build_constants_produces_importable_module(tmp_path: Path) -> None:
    path = stamp.write_build_constants("abc123", tmp_path / "build_constants.py")

    namespace: dict[str, object] = {}
    exec(path.read_text(encoding="utf-8"), namespace)

    assert namespace["GIT_REVISION"] == "abc123"


def test_current_revision_reads_stamped_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(stamp.build_constants, "GIT_REVISION", "abc123")

    assert stamp.current_revision() == "abc123"


def test_current_revision_defaults_to_dev(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(stamp.build_constants, "GIT_REVISION", "")

    assert stamp.current_revision() == "dev"
