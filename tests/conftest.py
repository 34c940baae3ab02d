import pytest
from fastapi.testclient import TestClient

from filebrowser.core.file_browser import FileBrowserService
from main import create_app


@pytest.fixture
def root(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def service(root):
    return FileBrowserService(str(root))


@pytest.fixture
def client(root):
    return TestClient(create_app(str(root)))


@pytest.fixture
def populated(root):
    """docs/, music/ and three files at the top, plus a nested tree"""
    (root / "docs").mkdir()
    (root / "music").mkdir()
    (root / "docs" / "deep").mkdir()
    (root / "a.txt").write_text("hi")
    (root / "b.log").write_text("hello")
    (root / "report.txt").write_text("x" * 10)
    (root / "docs" / "report-2024.md").write_text("# report")
    (root / "docs" / "deep" / "old_report.txt").write_text("old")
    (root / "music" / "song.mp3").write_bytes(b"\x00" * 4)
    return root
