# tests/conftest.py
"""
Pytest configuration and shared fixtures.

- Repo root on sys.path so `import docs_catalog` works without installing
- Sample record + catalog writer for tmp_path-based runs
"""

import copy
import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


# ============================================================
# Environment
# ============================================================

@pytest.fixture(autouse=True)
def clean_env():
    """Keep DOCS_CATALOG_* settings from the developer shell out of tests."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("DOCS_CATALOG_")}
    with patch.dict(os.environ, env, clear=True):
        yield


# ============================================================
# Sample Data
# ============================================================

SAMPLE_RECORD = {
    "id": "1",
    "title": "T",
    "description": "D",
    "category": "templates",
    "fileName": "a.txt",
    "uploadedBy": "u",
    "uploadedDate": "2024-01-01",
    "tags": ["x"],
}


@pytest.fixture
def record():
    """A record that passes every check when templates/a.txt exists."""
    return copy.deepcopy(SAMPLE_RECORD)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """
    tmp_path as the working directory, with a writer for docs.json and
    the referenced files.
    """
    monkeypatch.chdir(tmp_path)

    class Workspace:
        root = tmp_path

        def catalog(self, data, name="docs.json"):
            path = tmp_path / name
            text = data if isinstance(data, str) else json.dumps(data)
            path.write_text(text, encoding="utf-8")
            return path

        def file(self, rel, content="hello"):
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            return path

    return Workspace()
