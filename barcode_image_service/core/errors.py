"""Error Hierarchy — typed, categorized exceptions for every rejected render request.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the query parameter it concerns (param), when there is one
    - Validation and encoder rejections are 400-level; nothing here is retried
    - message is the exact plain-text body returned to the client

Design Decisions:
    - Single hierarchy with BarcodeServiceError base: one global handler catches all
    - Encoder rejections wrapped as EncodingRejectedError so library exceptions
      never escape as 500s for bad client input
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ENCODING = "encoding"
    INTERNAL = "internal"


class BarcodeServiceError(Exception):
    """Base exception for all barcode service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        http_status: int = 400,
        param: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.param = param


# ─── Validation Errors (400-level) ──────────────────────────────

class MissingValueError(BarcodeServiceError):
    """The value parameter 'v' is absent."""
    def __init__(self):
        super().__init__(
            "No value 'v' specified. You must specify the value you wish to encode.",
            "MISSING_VALUE", ErrorCategory.VALIDATION, param="v",
        )


class ValueTooLongError(BarcodeServiceError):
    """The value parameter 'v' exceeds the maximum length."""
    def __init__(self, max_length: int):
        super().__init__(
            "Invalid length for value 'v'. This API will not render a barcode "
            f"longer than {max_length} characters.",
            "VALUE_TOO_LONG", ErrorCategory.VALIDATION, param="v",
        )
        self.max_length = max_length


class InvalidFormatError(BarcodeServiceError):
    """Output format 'fmt' is not one of the supported formats."""
    def __init__(self):
        super().__init__(
            "Invalid output file format 'fmt'. Value must be 'png' or 'svg'.",
            "INVALID_FORMAT", ErrorCategory.VALIDATION, param="fmt",
        )


class InvalidSymbologyError(BarcodeServiceError):
    """Symbology 'sym' does not name a known barcode format."""
    def __init__(self, valid_names: list[str]):
        super().__init__(
            "Invalid barcode symbology 'sym'. Value must be one of "
            f"{','.join(valid_names)}",
            "INVALID_SYMBOLOGY", ErrorCategory.VALIDATION, param="sym",
        )
        self.valid_names = valid_names


class _RangeError(BarcodeServiceError):
    """Numeric parameter outside its inclusive bounds."""
    def __init__(
        self, label: str, param: str, minimum: int, maximum: int, code: str,
    ):
        super().__init__(
            f"{label} '{param}' must be between {minimum} and {maximum}.",
            code, ErrorCategory.VALIDATION, param=param,
        )
        self.minimum = minimum
        self.maximum = maximum


class HeightOutOfRangeError(_RangeError):
    def __init__(self, minimum: int, maximum: int):
        super().__init__("Height", "h", minimum, maximum, "HEIGHT_OUT_OF_RANGE")


class WidthOutOfRangeError(_RangeError):
    def __init__(self, minimum: int, maximum: int):
        super().__init__("Width", "w", minimum, maximum, "WIDTH_OUT_OF_RANGE")


class MarginOutOfRangeError(_RangeError):
    def __init__(self, minimum: int, maximum: int):
        super().__init__("Margin", "m", minimum, maximum, "MARGIN_OUT_OF_RANGE")


# ─── Encoding Errors (400-level) ────────────────────────────────

class EncodingRejectedError(BarcodeServiceError):
    """The symbology encoder refused the value (bad characters, length, capacity)."""
    def __init__(self, symbology: str, reason: str):
        super().__init__(
            f"Value 'v' cannot be encoded as {symbology}: {reason}",
            "ENCODING_REJECTED", ErrorCategory.ENCODING, param="v",
        )
        self.symbology = symbology
        self.reason = reason
