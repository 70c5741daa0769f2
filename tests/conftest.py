from __future__ import annotations

from pathlib import Path

import pytest

from tests.support import RecordingDisplay


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """a.txt, b.TXT, c.md and README directly under the root."""
    root = tmp_path / "root"
    root.mkdir()
    for name in ("a.txt", "b.TXT", "c.md", "README"):
        (root / name).write_text(name, encoding="utf-8")
    return root
