"""Symbology Encoders — python-barcode and qrcode adapters behind the SymbologyEncoder protocol.

Invariants:
    - Linear symbologies encoded by python-barcode, QR Code by qrcode
    - Raster path: library module pattern → core.bit_matrix scaling (options honored)
    - SVG path: library writer with its default options
    - Every library rejection is mapped to EncodingRejectedError
    - Empty contents are rejected before reaching any library
    - EAN/UPC values are 7/8, 12/13 or 11/12 ASCII digits; a supplied check
      digit must be correct, never silently replaced
    - ITF values are an even number of ASCII digits, never zero-padded
    - SVG labels drop non-printable characters; the encoded value is unchanged

Design Decisions:
    - Module patterns taken from Barcode.build() so sizing follows EncodingOptions,
      not the writer's mm/dpi model
    - QR error correction level L, the lowest level that still scans reliably
"""

import io

import barcode
import qrcode
import qrcode.constants
import qrcode.exceptions
from barcode.base import Barcode
from barcode.errors import BarcodeError
from barcode.writer import SVGWriter
from qrcode.image.svg import SvgPathImage

from barcode_image_service.core.bit_matrix import (
    BitMatrix, scale_linear, scale_matrix,
)
from barcode_image_service.core.domain_types import EncodingOptions, Symbology
from barcode_image_service.core.encoder_protocols import SymbologyEncoder
from barcode_image_service.core.errors import EncodingRejectedError

_CODABAR_START_STOP = "ABCD"

# Data digits before the check digit
_CHECK_DIGIT_BODY_LENGTHS = {
    Symbology.EAN_8: 7,
    Symbology.EAN_13: 12,
    Symbology.UPC_A: 11,
}


def _reject_empty(value: str, symbology: Symbology) -> None:
    if not value:
        raise EncodingRejectedError(symbology.value, "Found empty contents")


def gs1_check_digit(body: str) -> int:
    """Mod-10 check digit; weights 3,1,3,... from the rightmost data digit."""
    total = sum(
        int(digit) * (3 if i % 2 == 0 else 1)
        for i, digit in enumerate(reversed(body))
    )
    return (10 - total % 10) % 10


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _printable(label: str) -> str:
    """Human-readable label with characters XML cannot carry removed."""
    return "".join(ch for ch in label if ch.isprintable())


class LinearEncoder:
    """1D symbologies via python-barcode."""

    def __init__(
        self, symbology: Symbology, barcode_name: str, **barcode_options,
    ):
        self.symbology = symbology
        self.barcode_name = barcode_name
        self.barcode_options = barcode_options

    def _prepare(self, value: str) -> str:
        if self.symbology is Symbology.CODABAR:
            upper = value.upper()
            if upper[0] not in _CODABAR_START_STOP:
                return f"A{upper}A"
            return upper
        if self.symbology is Symbology.CODE_128 and not value.isascii():
            raise EncodingRejectedError(
                self.symbology.value, "Code 128 only encodes ASCII characters",
            )
        if self.symbology in _CHECK_DIGIT_BODY_LENGTHS:
            return self._check_gs1(value)
        if self.symbology is Symbology.ITF:
            if not _is_ascii_digits(value):
                raise EncodingRejectedError(
                    self.symbology.value, "Input should only contain digits 0-9",
                )
            if len(value) % 2:
                raise EncodingRejectedError(
                    self.symbology.value, "The length of the input should be even",
                )
        return value

    def _check_gs1(self, value: str) -> str:
        """Accept data digits with or without a correct check digit; return the data digits."""
        body_length = _CHECK_DIGIT_BODY_LENGTHS[self.symbology]
        if not _is_ascii_digits(value):
            raise EncodingRejectedError(
                self.symbology.value, "Input should only contain digits 0-9",
            )
        if len(value) not in (body_length, body_length + 1):
            raise EncodingRejectedError(
                self.symbology.value,
                f"Requested contents should be {body_length} or "
                f"{body_length + 1} digits long, but got {len(value)}",
            )
        body = value[:body_length]
        if len(value) > body_length and int(value[-1]) != gs1_check_digit(body):
            raise EncodingRejectedError(
                self.symbology.value, "Contents do not pass checksum",
            )
        return body

    def _build(self, value: str, writer=None) -> Barcode:
        _reject_empty(value, self.symbology)
        barcode_class = barcode.get_barcode_class(self.barcode_name)
        try:
            return barcode_class(
                self._prepare(value), writer=writer, **self.barcode_options,
            )
        except (BarcodeError, ValueError) as exc:
            raise EncodingRejectedError(self.symbology.value, str(exc)) from exc

    def pattern(self, value: str) -> list[bool]:
        """Module pattern, True for a bar. Guard bars count as bars."""
        code = self._build(value)
        try:
            lines = code.build()
        except (BarcodeError, KeyError, ValueError) as exc:
            raise EncodingRejectedError(self.symbology.value, str(exc)) from exc
        return [module != "0" for module in lines[0]]

    def encode(self, value: str, options: EncodingOptions) -> BitMatrix:
        return scale_linear(
            self.pattern(value), options, self.symbology.default_margin,
        )

    def encode_svg(self, value: str) -> str:
        code = self._build(value, writer=SVGWriter())
        buffer = io.BytesIO()
        label = code.get_fullcode()
        try:
            code.write(buffer, text=_printable(label))
        except (BarcodeError, KeyError, ValueError) as exc:
            raise EncodingRejectedError(self.symbology.value, str(exc)) from exc
        return buffer.getvalue().decode("utf-8")


class QRCodeEncoder:
    """QR Code via qrcode."""

    symbology = Symbology.QR_CODE
    error_correction = qrcode.constants.ERROR_CORRECT_L

    def _make(self, value: str, **qr_options) -> qrcode.QRCode:
        _reject_empty(value, self.symbology)
        qr = qrcode.QRCode(error_correction=self.error_correction, **qr_options)
        qr.add_data(value)
        try:
            qr.make(fit=True)
        except qrcode.exceptions.DataOverflowError as exc:
            raise EncodingRejectedError(
                self.symbology.value, "Data too big for any QR Code version",
            ) from exc
        return qr

    def modules(self, value: str) -> list[list[bool]]:
        """Module grid without quiet zone, True for a dark module."""
        return self._make(value, border=0).get_matrix()

    def encode(self, value: str, options: EncodingOptions) -> BitMatrix:
        return scale_matrix(
            self.modules(value), options, self.symbology.default_margin,
        )

    def encode_svg(self, value: str) -> str:
        img = self._make(value, image_factory=SvgPathImage).make_image()
        buffer = io.BytesIO()
        img.save(buffer)
        return buffer.getvalue().decode("utf-8")


_ENCODERS: dict[Symbology, SymbologyEncoder] = {
    Symbology.CODABAR: LinearEncoder(
        Symbology.CODABAR, "codabar", narrow=1, wide=2,
    ),
    Symbology.CODE_39: LinearEncoder(
        Symbology.CODE_39, "code39", add_checksum=False,
    ),
    Symbology.CODE_128: LinearEncoder(Symbology.CODE_128, "code128"),
    Symbology.EAN_8: LinearEncoder(Symbology.EAN_8, "ean8"),
    Symbology.EAN_13: LinearEncoder(Symbology.EAN_13, "ean13"),
    Symbology.ITF: LinearEncoder(Symbology.ITF, "itf", narrow=1, wide=3),
    Symbology.QR_CODE: QRCodeEncoder(),
    Symbology.UPC_A: LinearEncoder(Symbology.UPC_A, "upca"),
}


def get_encoder(symbology: Symbology) -> SymbologyEncoder:
    """Stateless encoder for a symbology; safe to share across requests."""
    return _ENCODERS[symbology]
