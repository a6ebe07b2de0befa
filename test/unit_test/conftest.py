import os
import shutil
from pathlib import Path

import pytest

CONTENT_DIR = Path(__file__).resolve().parents[2] / "content"


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep PHYSICS_DEMOS_* variables and stray .env files out of the tests."""
    for key in list(os.environ):
        if key.startswith("PHYSICS_DEMOS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def site_root(tmp_path) -> Path:
    """A writable copy of the bundled site content."""
    root = tmp_path / "site"
    shutil.copytree(CONTENT_DIR, root)
    return root
