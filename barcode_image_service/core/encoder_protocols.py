"""Boundary Protocols — capability contracts between the render service and encoding libraries.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - encode() returns an output-resolution BitMatrix honoring EncodingOptions
    - encode_svg() uses the library's own default sizing (options are not forwarded)
    - Rejected input raises EncodingRejectedError, never a library exception

Design Decisions:
    - Protocol over ABC: structural subtyping, any conforming library can be swapped in
"""

from typing import Protocol

from barcode_image_service.core.bit_matrix import BitMatrix
from barcode_image_service.core.domain_types import EncodingOptions, PixelData


class SymbologyEncoder(Protocol):
    """Produces a raster bit matrix or a vector document for one symbology."""
    def encode(self, value: str, options: EncodingOptions) -> BitMatrix: ...
    def encode_svg(self, value: str) -> str: ...


class PngCodec(Protocol):
    """Serializes raw RGBA8888 pixels to a PNG byte stream."""
    def encode_png(self, pixel_data: PixelData) -> bytes: ...
