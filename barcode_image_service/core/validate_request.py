"""Request Validation — ordered, fail-fast checks turning query params into a RenderRequest.

Invariants:
    - Checks run in a fixed order: v, len(v), fmt, sym, h, w, m
    - The first failing check raises; later parameters are never inspected
    - fmt is matched case-sensitively, sym case-insensitively
    - h, w, m use lenient integer parsing: unparsable text becomes 0
    - Pure: no IO, no logging, deterministic

Design Decisions:
    - Lenient parsing keeps the long-standing public behavior: "h=abc" trips the
      height range check, "w=abc" and "m=abc" mean auto width / default margin
"""

import re
from collections.abc import Mapping

from barcode_image_service.core.domain_types import (
    DEFAULT_HEIGHT, DEFAULT_MARGIN, DEFAULT_OUTPUT_FORMAT, DEFAULT_SYMBOLOGY,
    DEFAULT_WIDTH, MAX_HEIGHT, MAX_MARGIN, MAX_VALUE_LENGTH, MAX_WIDTH,
    MIN_HEIGHT, MIN_MARGIN, MIN_WIDTH,
    EncodingOptions, OutputFormat, RenderRequest, Symbology,
)
from barcode_image_service.core.errors import (
    HeightOutOfRangeError, InvalidFormatError, InvalidSymbologyError,
    MarginOutOfRangeError, MissingValueError, ValueTooLongError,
    WidthOutOfRangeError,
)

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int_or_zero(text: str) -> int:
    """Parse a 32-bit signed integer, returning 0 for anything unparsable.

    Surrounding whitespace and a leading sign are accepted. Decimals,
    underscores, empty strings and out-of-range numbers all yield 0.
    """
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        return 0
    number = int(stripped)
    if number < _INT32_MIN or number > _INT32_MAX:
        return 0
    return number


def symbology_names() -> list[str]:
    """All recognized symbology names, in declaration order."""
    return [s.value for s in Symbology]


def parse_symbology(name: str) -> Symbology | None:
    """Case-insensitive lookup by member name."""
    return Symbology.__members__.get(name.strip().upper())


def parse_render_request(params: Mapping[str, str]) -> RenderRequest:
    """Validate raw query parameters and build a RenderRequest.

    Raises the BarcodeServiceError subclass of the first failing check.
    """
    if "v" not in params:
        raise MissingValueError()
    value = params["v"]
    if len(value) > MAX_VALUE_LENGTH:
        raise ValueTooLongError(MAX_VALUE_LENGTH)

    output_format = _parse_output_format(params.get("fmt"))
    symbology = _parse_symbology_param(params.get("sym"))

    height = parse_int_or_zero(params.get("h", str(DEFAULT_HEIGHT)))
    if height < MIN_HEIGHT or height > MAX_HEIGHT:
        raise HeightOutOfRangeError(MIN_HEIGHT, MAX_HEIGHT)

    width = parse_int_or_zero(params.get("w", str(DEFAULT_WIDTH)))
    if width < MIN_WIDTH or width > MAX_WIDTH:
        raise WidthOutOfRangeError(MIN_WIDTH, MAX_WIDTH)

    margin = parse_int_or_zero(params.get("m", str(DEFAULT_MARGIN)))
    if margin < MIN_MARGIN or margin > MAX_MARGIN:
        raise MarginOutOfRangeError(MIN_MARGIN, MAX_MARGIN)

    return RenderRequest(
        value=value,
        output_format=output_format,
        symbology=symbology,
        height=height,
        width=width,
        margin=margin,
    )


def _parse_output_format(raw: str | None) -> OutputFormat:
    if raw is None:
        return DEFAULT_OUTPUT_FORMAT
    for fmt in OutputFormat:
        if raw == fmt.value:
            return fmt
    raise InvalidFormatError()


def _parse_symbology_param(raw: str | None) -> Symbology:
    if raw is None:
        return DEFAULT_SYMBOLOGY
    symbology = parse_symbology(raw)
    if symbology is None:
        raise InvalidSymbologyError(symbology_names())
    return symbology


def build_encoding_options(request: RenderRequest) -> EncodingOptions:
    """Height always set; width and margin only when positive."""
    return EncodingOptions(
        height=request.height,
        width=request.width if request.width > 0 else None,
        margin=request.margin if request.margin > 0 else None,
    )
