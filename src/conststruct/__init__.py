__version__ = "0.1.0"

from conststruct.exceptions import (
    ClearingConstWarning,
    ConstError,
    ConstnessLostWarning,
    ConstWarning,
    FieldNameConvertedWarning,
    FieldNotFoundError,
    InvalidFieldNameError,
    InvalidPropertyNameError,
    MultiDimensionalNotSupportedError,
    NonUniformOutputError,
    NotAStructError,
    PermissionDeniedError,
)
from conststruct.options import DisplayOptions
from conststruct.record import ConstRecord
from conststruct.structs import format_struct, is_struct, structfun

__all__ = [
    "ClearingConstWarning",
    "ConstError",
    "ConstRecord",
    "ConstWarning",
    "ConstnessLostWarning",
    "DisplayOptions",
    "FieldNameConvertedWarning",
    "FieldNotFoundError",
    "InvalidFieldNameError",
    "InvalidPropertyNameError",
    "MultiDimensionalNotSupportedError",
    "NonUniformOutputError",
    "NotAStructError",
    "PermissionDeniedError",
    "format_struct",
    "is_struct",
    "structfun",
]
