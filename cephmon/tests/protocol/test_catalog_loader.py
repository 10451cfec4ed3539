from pathlib import Path

import pytest

from cephmon.protocol.loader import DEFAULT_CATALOG_DIR, CatalogLoader


def _write(dirp: Path, text: str) -> None:
    (dirp / "commands.yml").write_text(text, encoding="utf-8")


def test_default_dir_ships_catalog():
    assert (DEFAULT_CATALOG_DIR / "commands.yml").exists()


def test_load_all_requires_file(tmp_path: Path) -> None:
    loader = CatalogLoader(tmp_path)
    with pytest.raises(FileNotFoundError):
        loader.load_all()


def test_load_all_populates_structures(tmp_path: Path) -> None:
    _write(tmp_path, "catalog_version: 3\ncommands:\n  version:\n    prefix: version\n    response: raw\n")

    loader = CatalogLoader(tmp_path)
    loader.load_all()

    assert loader.catalog_version == 3
    assert loader.commands == {"version": {"prefix": "version", "response": "raw"}}


def test_empty_file_is_an_empty_catalog(tmp_path: Path) -> None:
    _write(tmp_path, "")
    loader = CatalogLoader(tmp_path)
    loader.load_all()
    assert loader.commands == {}
    assert loader.catalog_version == 0


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "commands: [a, b]\n",
        "commands:\n  version: raw\n",
        "catalog_version: one\ncommands: {}\n",
    ],
)
def test_load_all_rejects_bad_shapes(tmp_path: Path, text: str) -> None:
    _write(tmp_path, text)
    with pytest.raises(ValueError):
        CatalogLoader(tmp_path).load_all()
