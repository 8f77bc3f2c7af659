"""uulekit - encode and decode Google UULE location tokens."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("uulekit")
except PackageNotFoundError:
    __version__ = "0+local"
from uulekit._constants import (
    LOGGED_IN_USER_SPECIFIED,
    USER_SPECIFIED_FOR_REQUEST,
    UULEV1_PRODUCER,
    UULEV1_ROLE,
    meters_to_radius,
    radius_to_meters,
)
from uulekit.config import UuleDefaults
from uulekit.coordinates import coordinate_from_e7, coordinate_to_e7, parse_degrees
from uulekit.exceptions import (
    UuleBase64Error,
    UuleConfigError,
    UuleDecodeError,
    UuleEncodeError,
    UuleError,
    UuleInvalidFloatError,
    UuleInvalidIntegerError,
    UuleInvalidPrefixError,
    UuleMalformedRecordError,
    UuleMissingValueError,
    UuleNameTooLongError,
    UuleUnexpectedEndError,
    UuleUnexpectedLineError,
    UuleUtf8Error,
)
from uulekit.models import UuleRecord, UulevOneRecord, UulevTwoRecord
from uulekit.tokens import decode_token

__all__ = [
    "__version__",
    "LOGGED_IN_USER_SPECIFIED",
    "USER_SPECIFIED_FOR_REQUEST",
    "UULEV1_PRODUCER",
    "UULEV1_ROLE",
    "UuleBase64Error",
    "UuleConfigError",
    "UuleDecodeError",
    "UuleDefaults",
    "UuleEncodeError",
    "UuleError",
    "UuleInvalidFloatError",
    "UuleInvalidIntegerError",
    "UuleInvalidPrefixError",
    "UuleMalformedRecordError",
    "UuleMissingValueError",
    "UuleNameTooLongError",
    "UuleRecord",
    "UuleUnexpectedEndError",
    "UuleUnexpectedLineError",
    "UuleUtf8Error",
    "UulevOneRecord",
    "UulevTwoRecord",
    "coordinate_from_e7",
    "coordinate_to_e7",
    "decode_token",
    "meters_to_radius",
    "parse_degrees",
    "radius_to_meters",
]
