from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from conststruct.record import ConstRecord

logger = logging.getLogger(__name__)


class ConstError(Exception):
    """Base class for errors raised by :class:`~conststruct.record.ConstRecord`.

    Every error class carries an :attr:`identifier` that stays stable across releases and can be used to tell
    errors apart without relying on the message. Formatting the message never raises; an exception that occurs
    while building it is logged and replaced by a placeholder."""

    identifier: ClassVar[str] = "const:error"

    def __str__(self) -> str:
        try:
            return self.__safe_str__()
        except Exception:
            logger.exception(
                "An unhandled exception occurred converting object of type `%s` to string.",
                type(self).__qualname__,
            )
            return f"<... {type(self).__qualname__} ({self.identifier}) ...>"

    def __safe_str__(self) -> str:
        return super().__str__()


class NotAStructError(ConstError, TypeError):
    identifier = "const:not_a_struct"

    def __init__(self, value: Any) -> None:
        self.value = value

    def __safe_str__(self) -> str:
        return f"The input to ConstRecord must be a single mapping, got {type(self.value).__name__}."


class InvalidFieldNameError(ConstError, TypeError):
    """Raised when a field name is not a string, or when it is not a valid identifier in a place where names are
    not sanitized."""

    identifier = "const:invalid_fieldnames"

    def __init__(self, names: list[Any], reason: str = "All field names should be strings") -> None:
        self.names = names
        self.reason = reason

    def __safe_str__(self) -> str:
        return f"{self.reason}: " + ", ".join(map(repr, self.names))


class PermissionDeniedError(ConstError):
    """Raised on an attempt to assign to a field that is already present. The :attr:`record` that refused the write
    is attached so that callers of the batch constructors can inspect the fields that were added before the
    failure."""

    identifier = "const:permission_denied"

    def __init__(self, record: ConstRecord, name: str) -> None:
        self.record = record
        self.name = name

    def __safe_str__(self) -> str:
        return f"Attempt to change const value {self.name!r}."


class MultiDimensionalNotSupportedError(ConstError, NotImplementedError):
    identifier = "const:multiD_not_supported"

    def __init__(self, target: Any) -> None:
        self.target = target

    def __safe_str__(self) -> str:
        return f"Multi-dimensional ConstRecord is not supported (target {self.target!r})."


class InvalidPropertyNameError(ConstError, TypeError):
    identifier = "const:invalid_propertyname"

    def __init__(self, name: Any) -> None:
        self.name = name

    def __safe_str__(self) -> str:
        return f"Const names should be passed as 'str', got {type(self.name).__name__}."


class FieldNotFoundError(ConstError, KeyError):
    identifier = "const:property_not_found"

    def __init__(self, name: str) -> None:
        self.name = name

    def __safe_str__(self) -> str:
        return f"Reference to non-existent field {self.name!r}."


class NonUniformOutputError(ConstError, ValueError):
    identifier = "const:non_uniform_output"

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value

    def __safe_str__(self) -> str:
        return (
            f"Non-scalar {type(self.value).__name__} in uniform output, at field {self.name!r}. "
            "Set uniform_output=False."
        )


class ConstWarning(UserWarning):
    """Base category for the advisories issued by :class:`~conststruct.record.ConstRecord`. Filter on this class
    (or one of its subclasses) with the :mod:`warnings` module to silence or escalate them."""

    identifier: ClassVar[str] = "const:warning"


class FieldNameConvertedWarning(ConstWarning):
    identifier = "const:converting_fieldname"


class ClearingConstWarning(ConstWarning):
    identifier = "const:clearing_const"


class ConstnessLostWarning(ConstWarning):
    identifier = "const:constness_lost"
