import pytest

from packindex.index.errors import IndexLoadError, ParseError, ReadError, ShapeError
from packindex.index.loader import load_index

from .helper import make_entry


def test_load_valid_index(index_file):
    path = index_file([make_entry(), {"anything": "goes"}])
    entries = load_index(path)
    assert len(entries) == 2
    assert entries[1] == {"anything": "goes"}


def test_load_empty_index(index_file):
    assert load_index(index_file([])) == []


def test_missing_file_is_read_error(tmp_path):
    path = str(tmp_path / "missing.json")
    with pytest.raises(ReadError) as exc_info:
        load_index(path)
    assert exc_info.value.path == path
    assert exc_info.value.message.startswith(f"Failed to read {path}: ")


def test_directory_is_read_error(tmp_path):
    with pytest.raises(ReadError):
        load_index(str(tmp_path))


def test_undecodable_bytes_are_read_error(tmp_path):
    path = tmp_path / "index.json"
    path.write_bytes(b"[\xff\xfe]")
    with pytest.raises(ReadError):
        load_index(str(path))


@pytest.mark.parametrize("text", ["", "[", "{'id': 1}", "[1,]", "[NaN]", "[Infinity]"])
def test_malformed_json_is_parse_error(index_file, text):
    path = index_file(text)
    with pytest.raises(ParseError) as exc_info:
        load_index(path)
    assert exc_info.value.message.startswith(f"Failed to read {path}: ")


@pytest.mark.parametrize("data", [{"entries": []}, '"index"', 42, None, True])
def test_non_array_is_shape_error(index_file, data):
    with pytest.raises(ShapeError) as exc_info:
        load_index(index_file(data))
    assert exc_info.value.message == "index.json must be an array of entries"


def test_load_errors_share_a_base():
    for error in (ReadError, ParseError, ShapeError):
        assert issubclass(error, IndexLoadError)


def test_too_deeply_nested_json_is_parse_error(index_file):
    depth = 100000
    path = index_file('[{"frameworks": ' + "[" * depth + "]" * depth + "}]")
    with pytest.raises(ParseError) as exc_info:
        load_index(path)
    assert exc_info.value.message.startswith(f"Failed to read {path}: ")
