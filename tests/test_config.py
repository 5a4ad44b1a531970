"""Tests for configuration models and defaults."""

import os
from pathlib import Path

import pytest

from servedir.config.models import ServedRoot, ServerConfig
from servedir.config.settings import INDEX_FILENAME, get_default_server_config


def test_served_root_is_canonical(tmp_path: Path) -> None:
    (tmp_path / "www").mkdir()

    root = ServedRoot.from_path(tmp_path / "www" / ".." / "www")

    assert root.path == (tmp_path / "www").resolve()
    assert root.path.is_absolute()


def test_served_root_follows_symlinked_directory(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    os.symlink(real, tmp_path / "alias", target_is_directory=True)

    assert ServedRoot.from_path(tmp_path / "alias").path == real.resolve()


def test_served_root_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="does not exist"):
        ServedRoot.from_path(tmp_path / "missing")


def test_served_root_rejects_files(tmp_path: Path) -> None:
    (tmp_path / "file.txt").write_text("x")

    with pytest.raises(ValueError, match="Not a directory"):
        ServedRoot.from_path(tmp_path / "file.txt")


def test_server_config_defaults() -> None:
    config = ServerConfig()

    assert config.host == "0.0.0.0"
    assert config.port == 8080
    assert config.served_root == Path(".")
    assert config.compress is False
    assert INDEX_FILENAME == "index.html"


def test_server_config_validate_accepts_directory(tmp_path: Path) -> None:
    ServerConfig(served_root=tmp_path, log_level="debug").validate()


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"port": 80}, "Port"),
        ({"port": 70000}, "Port"),
        ({"log_level": "LOUD"}, "log level"),
        ({"compress_min_size": -1}, "must not be negative"),
    ],
)
def test_server_config_validate_rejects(tmp_path: Path, overrides: dict, message: str) -> None:
    config = ServerConfig(served_root=tmp_path, **overrides)

    with pytest.raises(ValueError, match=message):
        config.validate()


def test_server_config_validate_rejects_file_root(tmp_path: Path) -> None:
    (tmp_path / "file.txt").write_text("x")

    with pytest.raises(ValueError, match="Not a directory"):
        ServerConfig(served_root=tmp_path / "file.txt").validate()


def test_default_server_config_uses_given_root(tmp_path: Path) -> None:
    config = get_default_server_config(tmp_path)

    assert config.served_root == tmp_path
    assert config.root().path == tmp_path.resolve()


def test_server_config_accepts_zero_compress_min_size(tmp_path: Path) -> None:
    ServerConfig(served_root=tmp_path, compress_min_size=0).validate()
