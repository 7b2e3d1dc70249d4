"""Domain Types — request, option and pixel value objects plus the fixed limits.

Invariants:
    - Limits are module-level constants, never mutated at runtime
    - RenderRequest, EncodingOptions and PixelData are frozen (request-local values)
    - EncodingOptions.width / margin are None when the encoder should pick its default
    - All valid formats and symbologies encoded as Enums — no raw string matching

Design Decisions:
    - Limits are constants, not Settings: they are part of the public API contract
    - Symbology member names mirror the query-string spelling (QR_CODE, CODE_128, ...)
"""

from dataclasses import dataclass
from enum import Enum


# ─── Limits ──────────────────────────────────────────────────────

MAX_VALUE_LENGTH = 2048

DEFAULT_HEIGHT = 40
MIN_HEIGHT = 10
MAX_HEIGHT = 2048

DEFAULT_WIDTH = 0
MIN_WIDTH = 0
MAX_WIDTH = 2048

DEFAULT_MARGIN = 0
MIN_MARGIN = 0
MAX_MARGIN = 200


# ─── Enums ───────────────────────────────────────────────────────

class OutputFormat(str, Enum):
    """Serialized image formats. Values are the exact accepted 'fmt' spellings."""
    PNG = "png"
    SVG = "svg"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    OutputFormat.PNG: "image/png",
    OutputFormat.SVG: "image/svg+xml",
}


class Symbology(str, Enum):
    """Barcode symbologies the encoder can write."""
    CODABAR = "CODABAR"
    CODE_39 = "CODE_39"
    CODE_128 = "CODE_128"
    EAN_8 = "EAN_8"
    EAN_13 = "EAN_13"
    ITF = "ITF"
    QR_CODE = "QR_CODE"
    UPC_A = "UPC_A"

    @property
    def default_margin(self) -> int:
        """Quiet zone in modules when the request leaves the margin unset."""
        if self is Symbology.QR_CODE:
            return 4
        if self in (Symbology.EAN_8, Symbology.EAN_13, Symbology.UPC_A):
            return 9
        return 10


DEFAULT_OUTPUT_FORMAT = OutputFormat.PNG
DEFAULT_SYMBOLOGY = Symbology.CODE_128


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class RenderRequest:
    """Validated query parameters for one render."""
    value: str
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    symbology: Symbology = DEFAULT_SYMBOLOGY
    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    margin: int = DEFAULT_MARGIN


@dataclass(frozen=True)
class EncodingOptions:
    """Rendering parameters forwarded to the raster encoder."""
    height: int
    width: int | None = None
    margin: int | None = None


@dataclass(frozen=True)
class PixelData:
    """Raw RGBA8888 pixel buffer, row-major, 4 bytes per pixel."""
    width: int
    height: int
    pixels: bytes


@dataclass(frozen=True)
class RenderedImage:
    """Serialized image ready to be sent as an HTTP body."""
    content: bytes
    media_type: str
