from pathlib import Path

from hbyml.core.version import read_version, version_string


def test_reads_and_strips(tmp_path: Path) -> None:
    path = tmp_path / "VERSION.txt"
    path.write_text("  1.4.2\n")

    assert read_version(path, "0.0.0-SNAPSHOT") == "1.4.2"


def test_missing_file_falls_back(tmp_path: Path) -> None:
    assert read_version(tmp_path / "VERSION.txt", "0.0.0-SNAPSHOT") == "0.0.0-SNAPSHOT"


def test_blank_file_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "VERSION.txt"
    path.write_text("\n")

    assert read_version(path, "dev") == "dev"


def test_directory_falls_back(tmp_path: Path) -> None:
    assert read_version(tmp_path, "dev") == "dev"


def test_version_string() -> None:
    assert version_string("hbyml", "1.0.0") == "hbyml v1.0.0"
