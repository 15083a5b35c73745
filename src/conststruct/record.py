""" This module provides the :class:`ConstRecord`, a structure whose fields can be added freely but are read-only
after their first assignment.

.. code:: Example

    from conststruct import ConstRecord

    rec = ConstRecord()
    rec.answer = 42     # ok
    rec.answer = 43     # PermissionDeniedError: Attempt to change const value 'answer'.
    del rec.answer      # ClearingConstWarning: Clearing const 'answer'.
    rec.answer = 43     # ok
"""

from __future__ import annotations

import logging
import re
import warnings
from typing import IO, Any, Callable, Iterable, Iterator, Mapping

from conststruct.exceptions import (
    ClearingConstWarning,
    ConstnessLostWarning,
    FieldNameConvertedWarning,
    FieldNotFoundError,
    InvalidFieldNameError,
    InvalidPropertyNameError,
    MultiDimensionalNotSupportedError,
    NotAStructError,
    PermissionDeniedError,
)
from conststruct.naming import is_valid_field_name, make_valid_field_names
from conststruct.options import DisplayOptions
from conststruct.structs import format_struct_lines, is_struct, structfun
from conststruct.util.text import pluralize, tag_lines

logger = logging.getLogger(__name__)

#: Characters that turn a field name into an indexed or nested target.
REGEX_COMPOUND_TARGET = re.compile(r"[.\[\]()]")

EMPTY_MESSAGE = "ConstRecord with no fields."


class ConstRecord(Mapping[str, Any]):
    """A structure with constant fields.

    A field is either absent or present, and a present field cannot be assigned again. The only way to change the
    value of a field is to remove it with :meth:`clear` (which issues a :class:`ClearingConstWarning`) and to add it
    again. Fields are accessed as attributes or items::

        rec = ConstRecord("a", 1, "b", 2)
        rec.c = 3
        rec["d"] = 4
        assert rec.a == rec["a"] == 1

    The constructor accepts no arguments (an empty record), a single mapping whose fields are copied, or field
    name/value pairs given as alternating positional arguments or as keyword arguments. Names of pairs that are not
    valid field names are converted with :func:`~conststruct.naming.make_valid_field_name`, after a
    :class:`FieldNameConvertedWarning`.

    Filling a record from several fields is not atomic: if one field fails, the fields before it remain added. The
    record is available as :attr:`PermissionDeniedError.record` of the raised error.

    The record is a read-only :class:`~typing.Mapping`, so it compares equal to any mapping with the same fields and
    values, independent of the field order. Use :meth:`to_struct` to get a plain, mutable :class:`dict`.
    """

    _fields: dict[str, Any]

    def __init__(self, *args: Any, **fields: Any) -> None:
        object.__setattr__(self, "_fields", {})
        if len(args) == 1:
            self._add_struct(args[0], stacklevel=3)
        elif len(args) % 2 != 0:
            raise ValueError(f"expected field name/value pairs, got an odd number of arguments ({len(args)})")
        else:
            self._add_pairs(list(zip(args[0::2], args[1::2])), stacklevel=3)
        if fields:
            self._add_pairs(list(fields.items()), stacklevel=3)
        logger.debug("Created %s with %d %s", type(self).__name__, len(self), pluralize("field", self))

    # Constructors

    @classmethod
    def empty(cls) -> ConstRecord:
        return cls()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Any]]) -> ConstRecord:
        """Create a record from an iterable of `(name, value)` tuples, adding the fields in order."""

        record = cls()
        record._add_pairs(list(pairs), stacklevel=3)
        return record

    @classmethod
    def from_struct(cls, source: Mapping[str, Any]) -> ConstRecord:
        """Create a record with a copy of every field of the mapping *source*, in its iteration order."""

        record = cls()
        record._add_struct(source, stacklevel=3)
        return record

    def _add_struct(self, source: Any, stacklevel: int) -> None:
        if not is_struct(source):
            raise NotAStructError(source)
        self._add_pairs(list(source.items()), stacklevel + 1)

    def _add_pairs(self, pairs: list[tuple[str, Any]], stacklevel: int) -> None:
        names = [name for name, _value in pairs]
        invalid = [name for name in names if not isinstance(name, str)]
        if invalid:
            raise InvalidFieldNameError(invalid)

        valid_names = make_valid_field_names(names)
        if valid_names != names:
            converted = ", ".join(f"{old!r} -> {new!r}" for old, new in zip(names, valid_names) if old != new)
            warnings.warn(
                FieldNameConvertedWarning(f"Invalid field names found; these have been converted: {converted}"),
                stacklevel=stacklevel,
            )

        for name, (_name, value) in zip(valid_names, pairs):
            self.set(name, value)

    # Field access

    def set(self, name: str, value: Any) -> ConstRecord:
        """Add the field *name* with the given *value*. Raises a :class:`PermissionDeniedError` if the field is
        already present, leaving its value unchanged. Returns the record."""

        if isinstance(name, tuple) or (isinstance(name, str) and REGEX_COMPOUND_TARGET.search(name)):
            raise MultiDimensionalNotSupportedError(name)
        if not isinstance(name, str):
            raise InvalidFieldNameError([name])
        if not is_valid_field_name(name):
            raise InvalidFieldNameError([name], "Invalid field name")
        if name in self._fields:
            raise PermissionDeniedError(self, name)

        self._fields[name] = value
        logger.debug("Added const field %r", name)
        return self

    def clear(self, name: str) -> ConstRecord:
        """Remove the field *name*, so that it can be added again. Issues a :class:`ClearingConstWarning`."""

        return self._clear(name, stacklevel=3)

    rmfield = clear
    remove_field = clear

    def _clear(self, name: str, stacklevel: int) -> ConstRecord:
        if not isinstance(name, str):
            raise InvalidPropertyNameError(name)
        if name not in self._fields:
            raise FieldNotFoundError(name)

        warnings.warn(ClearingConstWarning(f"Clearing const {name!r}."), stacklevel=stacklevel)
        del self._fields[name]
        logger.debug("Cleared const field %r", name)
        return self

    def fieldnames(self) -> list[str]:
        return list(self._fields)

    def __getitem__(self, name: str) -> Any:
        if isinstance(name, tuple):
            raise MultiDimensionalNotSupportedError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise FieldNotFoundError(name) from None

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self._clear(name, stacklevel=3)

    def __getattr__(self, name: str) -> Any:
        # Only called if regular attribute lookup fails. Fields never start with an underscore, which also keeps
        # this from recursing while the record is being unpickled or copied.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no field {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        try:
            self._clear(name, stacklevel=3)
        except FieldNotFoundError as exc:
            raise AttributeError(str(exc)) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __dir__(self) -> Iterable[str]:
        return [*super().__dir__(), *self._fields]

    def __copy__(self) -> ConstRecord:
        # The default copy would share the field dictionary between both records.
        return type(self).from_struct(self._fields)

    # Conversion

    def to_struct(self, quiet: bool = False) -> dict[str, Any]:
        """Return a plain :class:`dict` with a shallow copy of all fields. Unless *quiet* is set, this issues a
        :class:`ConstnessLostWarning` since the fields of the returned dictionary can be changed."""

        if not quiet:
            warnings.warn(ConstnessLostWarning("Casting ConstRecord to regular structure."), stacklevel=2)
        return dict(self._fields)

    @staticmethod
    def type_name() -> str:
        """Returns the name of the plain structure type that a record stands in for."""

        return dict.__name__

    def map_fields(self, func: Callable[[Any], Any], **options: Any) -> Any:
        """Apply *func* to every field value. This accepts the same options as :func:`conststruct.structs.structfun`
        and returns its result."""

        return structfun(func, self.to_struct(quiet=True), **options)

    # Display

    def format(self, options: DisplayOptions | None = None) -> str:
        options = options or DisplayOptions()
        struct = self.to_struct(quiet=True)
        if not struct:
            return EMPTY_MESSAGE
        lines = format_struct_lines(struct, options.indent)
        return "\n".join(tag_lines(lines, options.render_marker(), len(options.marker)))

    def show(self, file: IO[str] | None = None, options: DisplayOptions | None = None) -> None:
        print(self.format(options), file=file)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"
