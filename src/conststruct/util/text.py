from __future__ import annotations

from typing import Iterable

from typing_extensions import Protocol


class Countable(Protocol):
    def __len__(self) -> int:
        ...


def pluralize(word: str, count: int | Countable) -> str:
    """Returns *word* with an `s` appended unless *count* (a number, or anything with a length) is exactly one."""

    n = count if isinstance(count, int) else len(count)
    return word + ("" if n == 1 else "s")


def tag_lines(lines: Iterable[tuple[bool, str]], tag: str, width: int | None = None) -> list[str]:
    """Prefix every line flagged `True` with *tag*. The other lines are padded with blanks so that they stay aligned
    with the tagged ones. The padding width defaults to the length of *tag*, and must be passed explicitly when
    *tag* contains ANSI escape sequences."""

    padding = " " * (len(tag) if width is None else width)
    return [(tag if tagged else padding) + line for tagged, line in lines]
