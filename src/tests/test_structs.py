from __future__ import annotations

from collections import OrderedDict
from typing import Any

import pytest

from conststruct.exceptions import ConstError, NonUniformOutputError, NotAStructError
from conststruct.record import ConstRecord
from conststruct.structs import format_struct, format_struct_lines, is_struct, structfun


def test__is_struct() -> None:
    assert is_struct({})
    assert is_struct(OrderedDict(a=1))
    assert is_struct(ConstRecord(a=1))
    assert not is_struct([{"a": 1}])
    assert not is_struct("a")
    assert not is_struct(None)


def test__format_struct__aligns_names() -> None:
    assert format_struct({"a": 1, "abc": "x", "ab": None}).splitlines() == [
        "      a: 1",
        "    abc: 'x'",
        "     ab: None",
    ]
    assert format_struct({}) == ""
    with pytest.raises(NotAStructError):
        format_struct([("a", 1)])  # type: ignore[arg-type]


def test__format_struct__keeps_nested_dict_order() -> None:
    assert format_struct({"d": {"z": 1, "a": 2}}, indent=0) == "d: {'z': 1, 'a': 2}"


def test__format_struct__wraps_long_values() -> None:
    lines = format_struct({"key": [str(i) * 10 for i in range(10)]}).splitlines()
    assert lines[0] == "    key: ['0000000000',"
    assert lines[1] == "          '1111111111',"
    assert len(lines) == 10


def test__format_struct_lines__flags_first_line_of_each_field() -> None:
    lines = format_struct_lines({"a": {n: str(n) * 30 for n in range(4)}, "b": True}, indent=0)
    assert [is_field for is_field, _line in lines] == [True, False, False, False, True]
    assert lines[1] == (False, "    1: '111111111111111111111111111111',")
    assert format_struct_lines({}) == []


def test__structfun__uniform_output() -> None:
    assert structfun(len, {"a": "x", "b": "yz"}) == [1, 2]
    assert structfun(bool, {"a": 0, "b": 3}) == [False, True]
    with pytest.raises(NonUniformOutputError) as excinfo:
        structfun(str, {"a": 1})
    assert excinfo.value.name == "a"
    assert isinstance(excinfo.value, ValueError)


def test__structfun__non_uniform_output() -> None:
    assert structfun(lambda v: [v] * 2, {"a": 1, "b": "x"}, uniform_output=False) == {"a": [1, 1], "b": ["x", "x"]}


def test__structfun__multiple_outputs() -> None:
    first, second = structfun(divmod_by_3, {"a": 7, "b": 9}, nargout=2)  # type: ignore[misc]
    assert first == [2, 3]
    assert second == [1, 0]

    with pytest.raises(ValueError, match="expected 3 outputs"):
        structfun(divmod_by_3, {"a": 7}, nargout=3)


def divmod_by_3(value: int) -> tuple[int, int]:
    return divmod(value, 3)


def test__structfun__no_outputs() -> None:
    seen: list[Any] = []
    assert structfun(seen.append, {"a": 1, "b": 2}, nargout=0) is None
    assert seen == [1, 2]


def test__structfun__error_handler() -> None:
    calls: list[tuple[str, Any]] = []

    def handler(exc: Exception, name: str, value: Any) -> int:
        calls.append((name, value))
        return -1

    assert structfun(int, {"a": "1", "b": "x", "c": "3"}, error_handler=handler) == [1, -1, 3]
    assert calls == [("b", "x")]

    with pytest.raises(ValueError):
        structfun(int, {"b": "x"})


def test__structfun__requires_struct() -> None:
    with pytest.raises(NotAStructError):
        structfun(len, ["a"])  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        structfun(len, {}, nargout=-1)


def test__ConstError__str_never_raises() -> None:
    class BrokenError(ConstError):
        def __safe_str__(self) -> str:
            raise RuntimeError("boom")

    message = str(BrokenError())
    assert message.startswith("<... ")
    assert "BrokenError (const:error)" in message
