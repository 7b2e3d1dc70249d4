"""Image Codec — Pillow-backed serialization of raw RGBA pixels to PNG.

Invariants:
    - Input is RGBA8888, row-major, exactly width * height * 4 bytes
    - Output is a complete PNG byte stream; identical pixels give identical bytes
"""

import io

from PIL import Image

from barcode_image_service.core.domain_types import PixelData


class PillowPngCodec:
    """PngCodec implementation using Pillow."""

    def encode_png(self, pixel_data: PixelData) -> bytes:
        expected = pixel_data.width * pixel_data.height * 4
        if len(pixel_data.pixels) != expected:
            raise ValueError(
                f"RGBA buffer holds {len(pixel_data.pixels)} bytes, "
                f"expected {expected} for {pixel_data.width}x{pixel_data.height}"
            )
        image = Image.frombytes(
            "RGBA", (pixel_data.width, pixel_data.height), pixel_data.pixels,
        )
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
