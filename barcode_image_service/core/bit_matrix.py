"""Bit Matrix — scales an encoded module pattern to the requested output size.

Invariants:
    - Modules are scaled by a whole-number factor, never stretched unevenly
    - Output is never smaller than the pattern plus its quiet zone
    - Linear symbols: side margin counts once in the full width, bars fill the full height
    - Matrix symbols: quiet zone on all four sides, symbol centered in the output
    - A margin of None means the symbology's default quiet zone

Design Decisions:
    - Rows stored as shared tuples: every row of a linear symbol and every
      repeated row of a matrix symbol is the same object
"""

from collections.abc import Sequence
from dataclasses import dataclass

from barcode_image_service.core.domain_types import EncodingOptions, PixelData

DARK_PIXEL = b"\x00\x00\x00\xff"
LIGHT_PIXEL = b"\xff\xff\xff\xff"


@dataclass(frozen=True)
class BitMatrix:
    """Output-resolution grid; True is a dark pixel."""
    width: int
    height: int
    rows: tuple[tuple[bool, ...], ...]

    def is_dark(self, x: int, y: int) -> bool:
        return self.rows[y][x]


def _scale_row(
    modules: Sequence[bool], output_width: int, left: int, scale: int,
) -> tuple[bool, ...]:
    row = [False] * output_width
    x = left
    for dark in modules:
        if dark:
            row[x:x + scale] = [True] * scale
        x += scale
    return tuple(row)


def scale_linear(
    pattern: Sequence[bool], options: EncodingOptions, default_margin: int,
) -> BitMatrix:
    """Scale a 1D bar pattern into a width x height matrix."""
    side_margin = options.margin if options.margin is not None else default_margin
    input_width = len(pattern)
    full_width = input_width + side_margin
    output_width = max(options.width or 0, full_width)
    output_height = max(1, options.height)

    scale = output_width // full_width
    left = (output_width - input_width * scale) // 2
    row = _scale_row(pattern, output_width, left, scale)
    return BitMatrix(output_width, output_height, (row,) * output_height)


def scale_matrix(
    modules: Sequence[Sequence[bool]],
    options: EncodingOptions,
    default_quiet_zone: int,
) -> BitMatrix:
    """Scale a 2D module grid into a centered width x height matrix."""
    quiet_zone = (
        options.margin if options.margin is not None else default_quiet_zone
    )
    input_height = len(modules)
    input_width = len(modules[0]) if modules else 0
    full_width = input_width + quiet_zone * 2
    full_height = input_height + quiet_zone * 2
    output_width = max(options.width or 0, full_width)
    output_height = max(options.height, full_height)

    scale = min(output_width // full_width, output_height // full_height)
    left = (output_width - input_width * scale) // 2
    top = (output_height - input_height * scale) // 2

    blank = (False,) * output_width
    rows: list[tuple[bool, ...]] = [blank] * top
    for module_row in modules:
        rows.extend([_scale_row(module_row, output_width, left, scale)] * scale)
    rows.extend([blank] * (output_height - len(rows)))
    return BitMatrix(output_width, output_height, tuple(rows))


def to_rgba(matrix: BitMatrix) -> PixelData:
    """Expand a bit matrix to an RGBA8888 buffer: dark black, light white, opaque."""
    encoded: dict[int, bytes] = {}
    chunks = []
    for row in matrix.rows:
        key = id(row)
        if key not in encoded:
            encoded[key] = b"".join(
                DARK_PIXEL if dark else LIGHT_PIXEL for dark in row
            )
        chunks.append(encoded[key])
    return PixelData(matrix.width, matrix.height, b"".join(chunks))
