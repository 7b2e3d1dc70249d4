"""Render Barcode — validate → configure → encode → serialize for one request.

Invariants:
    - Validation completes before any encoder is touched
    - PNG path forwards height/width/margin; SVG path forwards the symbology only
    - Returns a complete RenderedImage or raises; there is no partial result
    - No state survives the call: safe to run concurrently from worker threads

Design Decisions:
    - Encoder and codec injectable (Protocols) so tests can substitute fakes
"""

import logging
from collections.abc import Callable, Mapping

from barcode_image_service.core.bit_matrix import to_rgba
from barcode_image_service.core.domain_types import (
    OutputFormat, RenderedImage, RenderRequest, Symbology,
)
from barcode_image_service.core.encoder_protocols import PngCodec, SymbologyEncoder
from barcode_image_service.core.validate_request import (
    build_encoding_options, parse_render_request,
)
from barcode_image_service.infrastructure.image_codec import PillowPngCodec
from barcode_image_service.infrastructure.symbology_encoder import get_encoder

logger = logging.getLogger(__name__)


class BarcodeRenderer:
    """Turns validated render requests into image bytes."""

    def __init__(
        self,
        encoder_for: Callable[[Symbology], SymbologyEncoder] = get_encoder,
        png_codec: PngCodec | None = None,
    ):
        self.encoder_for = encoder_for
        self.png_codec = png_codec or PillowPngCodec()

    def render(self, request: RenderRequest) -> RenderedImage:
        encoder = self.encoder_for(request.symbology)
        if request.output_format is OutputFormat.PNG:
            content = self._render_png(encoder, request)
        else:
            content = encoder.encode_svg(request.value).encode("utf-8")
        logger.debug(
            "Rendered barcode",
            extra={
                "symbology": request.symbology,
                "output_format": request.output_format,
                "byte_count": len(content),
            },
        )
        return RenderedImage(content, request.output_format.media_type)

    def _render_png(
        self, encoder: SymbologyEncoder, request: RenderRequest,
    ) -> bytes:
        options = build_encoding_options(request)
        matrix = encoder.encode(request.value, options)
        return self.png_codec.encode_png(to_rgba(matrix))

    def render_query(self, params: Mapping[str, str]) -> RenderedImage:
        """Validate raw query parameters, then render."""
        return self.render(parse_render_request(params))


_default_renderer = BarcodeRenderer()


def get_renderer() -> BarcodeRenderer:
    """FastAPI dependency — the shared, stateless renderer."""
    return _default_renderer
