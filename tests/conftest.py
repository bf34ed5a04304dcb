"""Pytest configuration and fixtures for renderer tests."""
import itertools
from pathlib import Path

import pytest
from sanic import Sanic

from sanic_render.support import EnvHelper, Environment, Options
from sanic_render.middleware import CompilationPolicy

_app_ids = itertools.count()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep APP_ENV and .env lookups local to each test."""
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.chdir(tmp_path)
    EnvHelper.reset()
    yield
    EnvHelper.reset()


@pytest.fixture
def template_dir(tmp_path):
    """Return a helper writing template files under a fresh directory.

    Usage:
        root = template_dir({"layout.tmpl": "<{{ yield() }}>"})
    """
    root = tmp_path / "templates"
    root.mkdir()

    def write(files):
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return write


@pytest.fixture
def options_for():
    def build(root: Path) -> Options:
        return Options(directory=str(root))
    return build


@pytest.fixture
def production_policy():
    return CompilationPolicy(lambda: Environment.PRODUCTION)


@pytest.fixture
def development_policy():
    return CompilationPolicy(lambda: Environment.DEVELOPMENT)


@pytest.fixture
def app():
    """A fresh Sanic app with a unique name."""
    return Sanic(f"render_test_{next(_app_ids)}")
