from __future__ import annotations

import csv
from pathlib import Path

import pytest

from core.errors import SoftDeleteError
from core.models import DeleteStatus
import infrastructure.delete_service as delete_service_module
from infrastructure.delete_service import DeleteService


@pytest.fixture
def trashed(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace send2trash with an in-memory recorder that unlinks the file."""
    calls: list[str] = []

    def fake_send2trash(path: str) -> None:
        calls.append(path)
        Path(path).unlink()

    monkeypatch.setattr(delete_service_module, "send2trash", fake_send2trash)
    return calls


def _read_log(log_path: str) -> list[list[str]]:
    with open(log_path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


def test_soft_delete_moves_existing_file(tmp_path: Path, trashed: list[str]) -> None:
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")

    DeleteService(audit_log=False).soft_delete(str(target))

    assert trashed == [str(target)]
    assert not target.exists()


def test_soft_delete_missing_file(tmp_path: Path, trashed: list[str]) -> None:
    with pytest.raises(SoftDeleteError) as info:
        DeleteService(audit_log=False).soft_delete(str(tmp_path / "gone.md"))

    assert info.value.reason == "File does not exist"
    assert trashed == []


def test_soft_delete_retries_with_absolute_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "a.txt").write_text("x", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    calls: list[str] = []

    def picky(path: str) -> None:
        calls.append(path)
        if not Path(path).is_absolute():
            raise OSError("relative paths not supported")

    monkeypatch.setattr(delete_service_module, "send2trash", picky)

    DeleteService(audit_log=False).soft_delete("a.txt")

    assert calls == ["a.txt", str(tmp_path / "a.txt")]


def test_soft_delete_reports_both_failures(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "a.txt").write_text("x", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    def broken(path: str) -> None:
        raise PermissionError(f"denied {path}")

    monkeypatch.setattr(delete_service_module, "send2trash", broken)

    with pytest.raises(SoftDeleteError) as info:
        DeleteService(audit_log=False).soft_delete("a.txt")

    assert "denied a.txt" in info.value.reason
    assert "/" in info.value.reason


def test_soft_delete_absolute_path_fails_once(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")
    calls: list[str] = []

    def broken(path: str) -> None:
        calls.append(path)
        raise OSError("trash unavailable")

    monkeypatch.setattr(delete_service_module, "send2trash", broken)

    with pytest.raises(SoftDeleteError, match="trash unavailable"):
        DeleteService(audit_log=False).soft_delete(str(target))

    assert calls == [str(target)]


def test_execute_delete_writes_audit_log(tmp_path: Path, trashed: list[str]) -> None:
    files = tmp_path / "files"
    files.mkdir()
    keep = files / "a.md"
    keep.write_text("x", encoding="utf-8")
    missing = files / "b.md"
    log_dir = tmp_path / "logs"

    result = DeleteService(log_dir=str(log_dir)).execute_delete("md", [str(keep), str(missing)])

    assert [o.status for o in result.outcomes] == [DeleteStatus.DELETED, DeleteStatus.FAILED]
    assert result.log_path is not None
    assert Path(result.log_path).parent == log_dir
    rows = _read_log(result.log_path)
    assert rows == [
        ["Extension", "FilePath", "Success", "Reason"],
        ["md", str(keep), "1", ""],
        ["md", str(missing), "0", "File does not exist"],
    ]


def test_execute_delete_without_audit_log(tmp_path: Path, trashed: list[str]) -> None:
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")

    result = DeleteService(audit_log=False, log_dir=str(tmp_path / "logs")).execute_delete(
        "txt", [str(target)]
    )

    assert result.success_paths == [str(target)]
    assert result.log_path is None
    assert not (tmp_path / "logs").exists()


def test_audit_log_failure_does_not_fail_delete(tmp_path: Path, trashed: list[str]) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")

    result = DeleteService(log_dir=str(blocker)).execute_delete("txt", [str(target)])

    assert result.success_paths == [str(target)]
    assert result.log_path is None


def test_encoding_error_fails_one_path_and_keeps_audit_rows(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    files = tmp_path / "files"
    files.mkdir()
    first = files / "a.txt"
    second = files / "b.txt"
    first.write_text("x", encoding="utf-8")
    second.write_text("x", encoding="utf-8")
    log_dir = tmp_path / "logs"

    def unencodable(path: str) -> None:
        if Path(path).name == "a.txt":
            raise UnicodeEncodeError("mbcs", path, 0, 1, "invalid character")
        Path(path).unlink()

    monkeypatch.setattr(delete_service_module, "send2trash", unencodable)

    result = DeleteService(log_dir=str(log_dir)).execute_delete("txt", [str(first), str(second)])

    assert [o.path for o in result.outcomes] == [str(first), str(second)]
    assert [o.status for o in result.outcomes] == [DeleteStatus.FAILED, DeleteStatus.DELETED]
    assert "invalid character" in result.outcomes[0].reason
    assert first.exists()
    assert not second.exists()
    assert result.log_path is not None
    rows = _read_log(result.log_path)
    assert [row[1:3] for row in rows[1:]] == [[str(first), "0"], [str(second), "1"]]


def test_runtime_error_becomes_soft_delete_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")

    def crashes(path: str) -> None:
        raise RuntimeError("no trash available")

    monkeypatch.setattr(delete_service_module, "send2trash", crashes)

    with pytest.raises(SoftDeleteError) as info:
        DeleteService(audit_log=False).soft_delete(str(target))

    assert info.value.reason == "Unexpected error: no trash available"
