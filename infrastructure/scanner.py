"""Root validation and recursive file discovery.

Traversal never aborts because of a single entry: unreadable directories and
entries that cannot be stat'ed are recorded as `ScanWarning`s and logged.
"""

from __future__ import annotations

import os
from pathlib import Path
import stat

from loguru import logger

from core.errors import ValidationError
from core.models import FileEntry, ScanResult, ScanWarning

_QUOTES = ('"', "'")


def validate_root(text: str) -> Path:
    """Return the absolute directory named by `text` or raise `ValidationError`."""
    raw = text.strip()
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in _QUOTES:
        raw = raw[1:-1].strip()
    if not raw:
        raise ValidationError(text, "No path entered")

    path = Path(raw).expanduser()
    try:
        exists = path.exists()
    except (OSError, ValueError) as ex:
        raise ValidationError(text, f"Cannot access path ({ex})") from ex
    if not exists:
        raise ValidationError(raw, "Path does not exist")
    if not path.is_dir():
        raise ValidationError(raw, "Not a directory")
    return path.absolute()


def scan(root: str | os.PathLike[str]) -> ScanResult:
    """Collect every regular file under `root` to unbounded depth.

    Directories are walked with an explicit stack, so depth is not bounded
    by the interpreter's recursion limit. Symlinked directories are not
    followed.
    """
    root_str = os.fspath(root)
    result = ScanResult(root=root_str)

    def _skip(path: str, ex: OSError, kind: str) -> None:
        reason = ex.strerror or str(ex)
        logger.warning("Skipping unreadable {} {}: {}", kind, path, reason)
        result.warnings.append(ScanWarning(path=path, reason=reason))

    pending = [root_str]
    while pending:
        dirpath = pending.pop()
        try:
            with os.scandir(dirpath) as it:
                entries = list(it)
        except OSError as ex:
            _skip(os.fspath(ex.filename or dirpath), ex, "directory")
            continue

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if is_dir:
                pending.append(entry.path)
                continue
            try:
                st = entry.stat()
            except OSError as ex:
                _skip(entry.path, ex, "entry")
                continue
            if not stat.S_ISREG(st.st_mode):
                # sockets, fifos, device nodes, symlinked directories
                continue
            result.entries.append(FileEntry(path=entry.path, name=entry.name))

    logger.info(
        "Scanned {}: {} files, {} warnings",
        root_str,
        len(result.entries),
        len(result.warnings),
    )
    return result
