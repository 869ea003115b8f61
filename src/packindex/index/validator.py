import calendar
import logging
import re
from typing import Iterator, NamedTuple, Set
from urllib.parse import urlsplit

from jsonschema import Draft7Validator

from packindex.index.schemas import ENTRY_FIELDS
from packindex.index.schemas import entry as entrySchema

logger = logging.getLogger(__name__)

MISSING = object()

_entry_validator = Draft7Validator(entrySchema)
_field_validators = {
    name: Draft7Validator(schema) for name, (schema, _) in ENTRY_FIELDS.items()
}

_iso_date = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_month_days = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Violation(NamedTuple):
    position: int
    message: str

    def __str__(self):
        return self.message


def _join_items(value: list) -> str:
    # nested arrays are walked with an explicit stack, depth is unbounded
    stack = [(iter(value), [])]
    while True:
        items, parts = stack[-1]
        item = next(items, MISSING)
        if item is MISSING:
            stack.pop()
            text = ",".join(parts)
            if not stack:
                return text
            stack[-1][1].append(text)
        elif isinstance(item, list):
            stack.append((iter(item), []))
        else:
            parts.append("" if item is None else as_text(item))


def as_text(value) -> str:
    """
    Loose textual form of a raw entry value.

    Strings are returned unchanged, an absent field reads as "undefined",
    null and booleans read as "null", "true" and "false", whole numbers lose
    their fraction, arrays join the text of their items with "," (null
    items read as "") and objects read as "[object Object]".
    """
    if value is MISSING:
        return "undefined"
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return _join_items(value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def is_https_url(value) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parts = urlsplit(value.strip())
        # raises ValueError on a malformed port
        parts.port
    except ValueError:
        return False
    return parts.scheme == "https" and bool(parts.hostname)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and calendar.isleap(year):
        return 29
    return _month_days[month - 1]


def is_iso_date(value) -> bool:
    """
    Check that a YYYY-MM-DD string names a real day of the proleptic
    Gregorian calendar, year 0000 included.
    """
    if not isinstance(value, str):
        return False
    match = _iso_date.fullmatch(value)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


_post_checks = {
    "packUrl": is_https_url,
    "publicKeyUrl": is_https_url,
    "createdAt": is_iso_date,
}


def check_field(name: str, value) -> bool:
    if name == "source":
        value = as_text(value)
    if value is MISSING or not _field_validators[name].is_valid(value):
        return False
    post_check = _post_checks.get(name)
    return post_check is None or post_check(value)


def identity_key(entry: dict) -> str:
    return f"{as_text(entry.get('id', MISSING))}@{as_text(entry.get('version', MISSING))}"


def validate_entry(
    entry, position: int, seen: Set[str], label: str = "index.json"
) -> list[Violation]:
    """
    Check one raw index entry and return every violation found in it.

    All field checks run, whatever the outcome of the previous ones. The
    duplicate check runs last and records the entry's id@version key in
    seen, so the set must be shared by all entries of one index.

    :param entry: raw entry value as parsed from the index
    :param position: zero based position of the entry in the index
    :param seen: id@version keys of the entries validated so far
    :param label: name used to prefix the messages
    """
    prefix = f"{label}[{position}]"
    if not _entry_validator.is_valid(entry):
        return [Violation(position, f"{prefix} must be an object")]

    violations = []
    for name, (_, text) in ENTRY_FIELDS.items():
        if not check_field(name, entry.get(name, MISSING)):
            violations.append(Violation(position, f"{prefix}.{name} {text}"))

    key = identity_key(entry)
    if key in seen:
        violations.append(Violation(position, f"{prefix} duplicates id+version {key}"))
    seen.add(key)
    return violations


def validate_index(entries: list, label: str = "index.json") -> Iterator[Violation]:
    """Yield the violations of all entries, in entry order."""
    seen: Set[str] = set()
    for position, entry in enumerate(entries):
        yield from validate_entry(entry, position, seen, label)
    logger.debug(f"Checked {len(entries)} entries, {len(seen)} distinct id@version keys")
