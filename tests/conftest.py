"""Shared fixtures for hbyml tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hbyml.core.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run every test from an empty directory with fresh settings."""
    monkeypatch.chdir(tmp_path)
    for name in ("HBYML_VERSION_FILE", "HBYML_DEFAULT_VERSION", "HBYML_PARTIAL_EXTENSION"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A template, a data file and a partials directory."""
    (tmp_path / "template.hbs").write_text("<h1>{{> header}}</h1>\n{{#each items}}[{{this}}]{{/each}}")
    (tmp_path / "data.yaml").write_text("name: World\nitems:\n  - a\n  - b\n")
    partials = tmp_path / "partials"
    partials.mkdir()
    (partials / "header.hbs").write_text("Hi {{name}}")
    return tmp_path
