from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from file_share.backend.app.core import Settings
from file_share.backend.app.main import create_app


@pytest.fixture
def public_dir(tmp_path) -> Path:
    root = tmp_path / "public"
    root.mkdir()
    (root / "client.html").write_text("<html><body>file share</body></html>")
    (root / "client.js").write_text("listFiles();")
    return root


@pytest.fixture
def settings(tmp_path, public_dir) -> Settings:
    return Settings(
        FILE_STORAGE_DIR=tmp_path / "uploads",
        PUBLIC_DIR=public_dir,
        MAX_UPLOAD_BYTES=1024 * 1024,
        DOWNLOAD_CHUNK_SIZE=1024,
    )


@pytest.fixture
def storage_dir(settings) -> Path:
    return settings.FILE_STORAGE_DIR


@pytest.fixture
def client(settings):
    app = create_app(settings)
    # entering the context runs the lifespan, which creates the storage directory
    with TestClient(app) as c:
        yield c
