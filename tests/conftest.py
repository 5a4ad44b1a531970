"""Shared fixtures: a served directory with symlinks pointing in and out."""

import logging
import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from servedir.config.models import ServedRoot, ServerConfig
from servedir.logging import LOGGER_NAME
from servedir.server.app import create_app

INDEX_BODY = "<h1>home</h1>\n"
DOCS_BODY = "<h1>docs</h1>\n"
SECRET_BODY = "top secret\n"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def outside(tmp_path: Path) -> Path:
    directory = tmp_path / "outside"
    directory.mkdir()
    (directory / "secret.txt").write_text(SECRET_BODY)
    (directory / "index.html").write_text("<h1>outside</h1>\n")
    return directory


@pytest.fixture
def site(tmp_path: Path, outside: Path) -> Path:
    """
    Build a served tree:

        site/index.html
        site/style.css
        site/data.unknownext
        site/README
        site/archive.tar.gz
        site/docs/index.html
        site/empty/
        site/link_in      -> site/style.css
        site/link_out     -> outside/secret.txt
        site/link_out_dir -> outside/
        site/loop_a <-> site/loop_b

    plus a sibling directory "site-evil" sharing the root's name as a
    string prefix.
    """
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text(INDEX_BODY)
    (root / "style.css").write_text("body { color: red; }\n")
    (root / "data.unknownext").write_bytes(b"\x00\x01opaque")
    (root / "README").write_text("plain text\n")
    (root / "archive.tar.gz").write_bytes(b"\x1f\x8b\x08\x00")
    (root / "docs").mkdir()
    (root / "docs" / "index.html").write_text(DOCS_BODY)
    (root / "empty").mkdir()

    os.symlink(root / "style.css", root / "link_in")
    os.symlink(outside / "secret.txt", root / "link_out")
    os.symlink(outside, root / "link_out_dir", target_is_directory=True)
    os.symlink(root / "loop_b", root / "loop_a")
    os.symlink(root / "loop_a", root / "loop_b")

    evil = tmp_path / "site-evil"
    evil.mkdir()
    (evil / "index.html").write_text("<h1>evil</h1>\n")

    return root


@pytest.fixture
def served_root(site: Path) -> ServedRoot:
    return ServedRoot.from_path(site)


@pytest.fixture
def config(site: Path) -> ServerConfig:
    return ServerConfig(served_root=site)


@pytest.fixture
def client(config: ServerConfig):
    with TestClient(create_app(config)) as test_client:
        yield test_client
