import os
from pathlib import Path

import pytest

from blogassets.config import BuildConfig


@pytest.fixture
def project(tmp_path: Path) -> Path:
    for name in ("images", "scripts", "less", "styles"):
        (tmp_path / name).mkdir()
    return tmp_path


@pytest.fixture
def config(project: Path) -> BuildConfig:
    return BuildConfig(root=project)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("BLOG_ASSETS_"):
            monkeypatch.delenv(key)
