"""Soft delete and audit logging service.

Moves files to the recycle bin / trash with `send2trash` and writes an audit
CSV for each bulk delete run.
"""

from __future__ import annotations

from collections.abc import Iterable
import csv
from datetime import datetime
import os
from pathlib import Path

from loguru import logger
from send2trash import send2trash

from core.errors import SoftDeleteError
from core.services.bulk_delete import delete_all
from core.services.interfaces import DeleteResult
from infrastructure.logging import get_delete_log_directory


class DeleteService:
    """Coordinates trash operations and audit logging."""

    def __init__(self, audit_log: bool = True, log_dir: str | None = None) -> None:
        """Create a DeleteService.

        Args:
            audit_log: Write a CSV audit log for every `execute_delete` run.
            log_dir: Directory for audit logs; defaults to
                `get_delete_log_directory()`.
        """
        self._audit_log = audit_log
        self._log_dir = log_dir

    def soft_delete(self, path: str) -> None:
        """Send one file to the trash, raising `SoftDeleteError` on failure."""
        normalized_path = os.path.normpath(path)
        if not os.path.lexists(normalized_path):
            raise SoftDeleteError(path, "File does not exist")

        try:
            send2trash(normalized_path)
            return
        except (UnicodeEncodeError, OSError) as ex:
            logger.warning("Failed to trash normalized path {}: {}", normalized_path, ex)
            first_error: Exception = ex
        except RuntimeError as ex:
            logger.error("Unexpected error with normalized path {}: {}", normalized_path, ex)
            raise SoftDeleteError(path, f"Unexpected error: {ex}") from ex

        # Some trash backends only accept absolute paths
        abs_path = os.path.abspath(path)
        if abs_path == normalized_path:
            raise SoftDeleteError(path, str(first_error)) from first_error
        try:
            send2trash(abs_path)
        except (UnicodeEncodeError, OSError) as ex:
            raise SoftDeleteError(path, f"{first_error} / {ex}") from ex
        except RuntimeError as ex:
            logger.error("Unexpected error with absolute path {}: {}", abs_path, ex)
            raise SoftDeleteError(path, f"Unexpected error: {ex}") from ex

    def execute_delete(self, extension: str, paths: Iterable[str]) -> DeleteResult:
        """Trash every path and, if enabled, write the audit CSV log."""
        paths = list(paths)
        logger.info("Deleting {} file(s) with extension {!r}", len(paths), extension)
        result = delete_all(paths, self.soft_delete)
        if self._audit_log and paths:
            result.log_path = self.write_audit_log(extension, result)
        return result

    def write_audit_log(self, extension: str, result: DeleteResult) -> str | None:
        """Write one CSV row per outcome; return the log path or None on failure."""
        try:
            base_dir = (
                os.path.expanduser(self._log_dir) if self._log_dir else get_delete_log_directory()
            )
            Path(base_dir).mkdir(parents=True, exist_ok=True)
            ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            log_path = os.path.join(base_dir, f"delete_{ts}.csv")
            with open(log_path, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(["Extension", "FilePath", "Success", "Reason"])
                for outcome in result.outcomes:
                    writer.writerow(
                        [extension, outcome.path, 1 if outcome.ok else 0, outcome.reason]
                    )
            logger.info(
                "Delete log written: {} ({} success, {} failed)",
                log_path,
                len(result.success_paths),
                len(result.failed),
            )
            return log_path
        except (OSError, ValueError) as ex:
            logger.error("Write delete log failed: {}", ex)
            return None
