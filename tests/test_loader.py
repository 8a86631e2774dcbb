from pathlib import Path

import pytest

from hbyml.core.errors import DataLoadError, HbymlError
from hbyml.data.loader import load_data


def test_load_mapping(tmp_path: Path) -> None:
    path = tmp_path / "data.yaml"
    path.write_text("name: World\ncount: 3\nenabled: true\ntags: [x, y]\nnothing: null\n")

    assert load_data(path) == {
        "name": "World",
        "count": 3,
        "enabled": True,
        "tags": ["x", "y"],
        "nothing": None,
    }


def test_load_top_level_sequence(tmp_path: Path) -> None:
    path = tmp_path / "data.yaml"
    path.write_text("- 1\n- 2.5\n- three\n")

    assert load_data(path) == [1, 2.5, "three"]


def test_empty_document_is_none(tmp_path: Path) -> None:
    path = tmp_path / "data.yaml"
    path.write_text("")

    assert load_data(path) is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="Cannot read data file"):
        load_data(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("key: [unclosed\n")

    with pytest.raises(DataLoadError, match="Invalid YAML") as excinfo:
        load_data(path)
    assert isinstance(excinfo.value, HbymlError)


def test_safe_load_rejects_python_tags(tmp_path: Path) -> None:
    path = tmp_path / "tagged.yaml"
    path.write_text("!!python/object/apply:os.system ['echo hi']\n")

    with pytest.raises(DataLoadError):
        load_data(path)
