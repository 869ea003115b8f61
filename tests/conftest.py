import pytest
from click.testing import CliRunner

from .helper import write_index


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def index_file(tmp_path):
    """Factory writing an index document to tmp_path/index.json."""

    def _write(data):
        return write_index(tmp_path / "index.json", data)

    return _write


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setenv("PACKINDEX_CONFIG", str(tmp_path / "packindex.ini"))
    monkeypatch.delenv("PACKINDEX_LOG_LEVEL", raising=False)
