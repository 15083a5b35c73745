"""Rules for the names of :class:`~conststruct.record.ConstRecord` fields.

A valid field name starts with an ASCII letter, continues with ASCII letters, digits or underscores and is not a
Python keyword. Names starting with an underscore are never valid, which keeps the record's own attributes out of
the field namespace."""

from __future__ import annotations

import keyword
import re
from typing import Iterable

REGEX_FIELD_NAME = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
REGEX_WHITESPACE_WORD = re.compile(r"\s+(\S)")
REGEX_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")


def is_valid_field_name(name: object) -> bool:
    return isinstance(name, str) and REGEX_FIELD_NAME.fullmatch(name) is not None and not keyword.iskeyword(name)


def make_valid_field_name(name: str) -> str:
    """Convert *name* into a valid field name. Valid names are returned unchanged.

    * Whitespace is removed and the character following it is capitalized (`"my field"` becomes `"myField"`).
    * Any other invalid character is replaced by an underscore.
    * Keywords are prefixed with `x` and capitalized (`"for"` becomes `"xFor"`).
    * Names that do not start with a letter are prefixed with `x` (`"1st"` becomes `"x1st"`, `""` becomes `"x"`).
    """

    if is_valid_field_name(name):
        return name

    name = REGEX_WHITESPACE_WORD.sub(lambda m: m.group(1).upper(), name.strip())
    name = REGEX_INVALID_CHARS.sub("_", name)

    if keyword.iskeyword(name):
        return "x" + name[:1].upper() + name[1:]
    if not name[:1].isascii() or not name[:1].isalpha():
        name = "x" + name

    assert is_valid_field_name(name), name
    return name


def make_valid_field_names(names: Iterable[str]) -> list[str]:
    return [make_valid_field_name(name) for name in names]
