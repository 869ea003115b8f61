import json
import logging
import os

from packindex.index.errors import ParseError, ReadError, ShapeError

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant {name}")


def read_index_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as fp:
            return fp.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, f"Failed to read {path}: {e}")


def load_index(path: str) -> list:
    """
    Load the index document at path and return its list of raw entries.

    Entries are returned untouched; validating them is up to the caller.

    :param path: path to the index JSON file
    :raises ReadError: the file cannot be opened, read or decoded
    :raises ParseError: the content is not valid JSON
    :raises ShapeError: the top-level value is not an array
    """
    logger.debug(f"Loading index from {path}")
    text = read_index_text(path)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ParseError(path, f"Failed to read {path}: {e}")

    if not isinstance(data, list):
        name = os.path.basename(path) or path
        raise ShapeError(path, f"{name} must be an array of entries")

    logger.debug(f"Loaded {len(data)} entries from {path}")
    return data
