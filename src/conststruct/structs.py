""" Helpers for plain structures, i.e. ordinary mappings of field names to values. A :class:`ConstRecord` converts
itself to a plain structure and delegates to these functions for rendering and field-wise function application. """

from __future__ import annotations

import logging
import numbers
import pprint
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from conststruct.exceptions import NonUniformOutputError, NotAStructError

logger = logging.getLogger(__name__)

#: The number of columns available to a single rendered field before values are wrapped over multiple lines.
LINE_WIDTH = 100

ErrorHandler = Callable[[Exception, str, Any], Any]
StructfunOutput = Union[List[Any], Dict[str, Any]]


def is_struct(value: Any) -> bool:
    """Returns `True` if *value* is a single plain structure. Sequences of mappings are not structures."""

    return isinstance(value, Mapping)


def format_struct_lines(struct: Mapping[str, Any], indent: int = 4) -> List[Tuple[bool, str]]:
    """Render *struct* with one `name: value` line per field. Field names are right-aligned to the longest name.
    Values that do not fit on one line continue on the following lines, aligned with the value column.

    Returns a list of `(is_field, line)` tuples, where *is_field* is `True` for the first line of every field and
    `False` for continuation lines. An empty structure renders as an empty list."""

    if not is_struct(struct):
        raise NotAStructError(struct)

    names = [str(key) for key in struct]
    width = max(map(len, names), default=0)
    lines: list[tuple[bool, str]] = []
    for name, value in zip(names, struct.values()):
        prefix = " " * indent + name.rjust(width) + ": "
        rendered = pprint.pformat(value, width=max(LINE_WIDTH - len(prefix), 20), sort_dicts=False).splitlines()
        lines.append((True, prefix + (rendered[0] if rendered else "")))
        lines.extend((False, " " * len(prefix) + line) for line in rendered[1:])
    return lines


def format_struct(struct: Mapping[str, Any], indent: int = 4) -> str:
    """Like :func:`format_struct_lines`, but joins the lines. An empty structure renders as an empty string."""

    return "\n".join(line for _is_field, line in format_struct_lines(struct, indent))


def _split_results(result: Any, nargout: int, name: str) -> Tuple[Any, ...]:
    if nargout == 1:
        return (result,)
    if not isinstance(result, tuple) or len(result) != nargout:
        raise ValueError(f"expected {nargout} outputs from function at field {name!r}, got {result!r}")
    return result


def structfun(
    func: Callable[[Any], Any],
    struct: Mapping[str, Any],
    *,
    uniform_output: bool = True,
    nargout: int = 1,
    error_handler: ErrorHandler | None = None,
) -> StructfunOutput | Tuple[StructfunOutput, ...] | None:
    """Apply *func* to the value of every field of *struct*, in iteration order.

    Args:
        func: The function to call with every field value.
        struct: The plain structure to map over.
        uniform_output: If enabled, every output must be a scalar number and the outputs are collected in a list.
            Otherwise, the outputs are collected in a dictionary keyed by field name.
        nargout: The number of outputs *func* produces. With more than one output, *func* must return a tuple
            of that length and one collection is returned per output. With zero, *func* is called only for its
            side effects and `None` is returned.
        error_handler: Called as `error_handler(exc, name, value)` when *func* raises; its return value is used in
            place of the result. Without a handler, the exception propagates.
    """

    if not is_struct(struct):
        raise NotAStructError(struct)
    if nargout < 0:
        raise ValueError(f"nargout must not be negative, got {nargout}")

    outputs: list[StructfunOutput] = [[] if uniform_output else {} for _ in range(nargout)]
    for name, value in struct.items():
        try:
            result = func(value)
        except Exception as exc:
            if error_handler is None:
                raise
            logger.debug("Function raised at field %r, invoking error handler: %s", name, exc)
            result = error_handler(exc, name, value)

        if nargout == 0:
            continue

        for output, item in zip(outputs, _split_results(result, nargout, name)):
            if isinstance(output, list):
                if not isinstance(item, numbers.Number):
                    raise NonUniformOutputError(name, item)
                output.append(item)
            else:
                output[name] = item

    if nargout == 0:
        return None
    if nargout == 1:
        return outputs[0]
    return tuple(outputs)
