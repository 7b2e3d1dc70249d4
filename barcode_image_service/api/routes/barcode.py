"""Barcode Route — GET /api/barcode renders a barcode image from query parameters.

Invariants:
    - Query values are passed to the service as raw strings (validation is core's job)
    - A repeated parameter is read as its values joined with ","
    - Sync handler: encoding is CPU-bound, FastAPI runs it in the threadpool
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from barcode_image_service.services.render_barcode import (
    BarcodeRenderer, get_renderer,
)

router = APIRouter(prefix="/api", tags=["barcode"])


def collect_query_params(request: Request) -> dict[str, str]:
    """Flatten the multi-valued query string into one string per key."""
    query = request.query_params
    return {key: ",".join(query.getlist(key)) for key in query.keys()}


@router.get(
    "/barcode",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}, "image/svg+xml": {}}},
        400: {"content": {"text/plain": {}}},
    },
)
def render_barcode(
    request: Request, renderer: BarcodeRenderer = Depends(get_renderer),
):
    """Render v as a barcode. Params: v, fmt, sym, h, w, m."""
    image = renderer.render_query(collect_query_params(request))
    return Response(content=image.content, media_type=image.media_type)
