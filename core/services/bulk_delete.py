"""Attempt-all bulk soft delete."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from core.errors import SoftDeleteError
from core.models import DeleteOutcome, DeleteStatus
from core.services.interfaces import DeleteResult, SoftDeleteFn


def delete_all(paths: Iterable[str], soft_delete_fn: SoftDeleteFn) -> DeleteResult:
    """Soft-delete every path in order and report one outcome per path.

    A failure on one path never stops the remaining paths from being
    attempted. Errors other than `SoftDeleteError` raised by the primitive
    are recorded as failures too.
    """
    outcomes: list[DeleteOutcome] = []
    for path in paths:
        try:
            soft_delete_fn(path)
        except SoftDeleteError as ex:
            logger.error("Soft delete failed for {}: {}", path, ex.reason)
            outcomes.append(DeleteOutcome(path, DeleteStatus.FAILED, ex.reason))
            continue
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.error("Unexpected error deleting {}: {}", path, ex)
            outcomes.append(DeleteOutcome(path, DeleteStatus.FAILED, f"Unexpected error: {ex}"))
            continue
        logger.info("Moved to trash: {}", path)
        outcomes.append(DeleteOutcome(path, DeleteStatus.DELETED))
    return DeleteResult(outcomes=outcomes)
