"""Symbology Encoders — verifies the python-barcode and qrcode adapters.

Tests cover:
    - every symbology produces a raster matrix for a value it accepts
    - raster output honors height, width and default quiet zones
    - SVG output is a document rooted at <svg>
    - library rejections surface as EncodingRejectedError
"""

import xml.etree.ElementTree as ET

import pytest

from barcode_image_service.core.domain_types import EncodingOptions, Symbology
from barcode_image_service.core.errors import EncodingRejectedError
from barcode_image_service.infrastructure.symbology_encoder import (
    LinearEncoder, QRCodeEncoder, get_encoder, gs1_check_digit,
)

VALID_VALUES = {
    Symbology.CODABAR: "123456",
    Symbology.CODE_39: "HELLO",
    Symbology.CODE_128: "HELLO",
    Symbology.EAN_8: "9638507",
    Symbology.EAN_13: "590123412345",
    Symbology.ITF: "12345678",
    Symbology.QR_CODE: "HELLO",
    Symbology.UPC_A: "03600029145",
}


def test_every_symbology_has_an_encoder():
    assert set(VALID_VALUES) == set(Symbology)
    for symbology in Symbology:
        assert get_encoder(symbology) is get_encoder(symbology)


@pytest.mark.parametrize("symbology", list(Symbology))
def test_raster_encoding_for_each_symbology(symbology):
    matrix = get_encoder(symbology).encode(
        VALID_VALUES[symbology], EncodingOptions(height=40),
    )
    assert matrix.height >= 40
    assert matrix.width > 0
    assert any(matrix.is_dark(x, matrix.height // 2) for x in range(matrix.width))


@pytest.mark.parametrize("symbology", list(Symbology))
def test_svg_encoding_for_each_symbology(symbology):
    document = get_encoder(symbology).encode_svg(VALID_VALUES[symbology])
    root = ET.fromstring(document.encode("utf-8"))
    assert root.tag.endswith("svg")


# ─── linear ──────────────────────────────────────────────────────

def test_code128_width_is_pattern_plus_default_margin():
    encoder = get_encoder(Symbology.CODE_128)
    pattern = encoder.pattern("HELLO")
    matrix = encoder.encode("HELLO", EncodingOptions(height=40))
    assert matrix.height == 40
    assert matrix.width == len(pattern) + 10


def test_code128_pattern_starts_and_ends_with_bars():
    pattern = get_encoder(Symbology.CODE_128).pattern("HELLO")
    assert pattern[0] is True
    assert pattern[-1] is True


def test_code128_requested_width_is_exact():
    matrix = get_encoder(Symbology.CODE_128).encode(
        "HELLO", EncodingOptions(height=40, width=1000),
    )
    assert matrix.width == 1000


def test_codabar_adds_start_stop_when_missing():
    encoder = get_encoder(Symbology.CODABAR)
    assert encoder.pattern("123") == encoder.pattern("A123A")


def test_code39_does_not_append_checksum():
    encoder = get_encoder(Symbology.CODE_39)
    assert len(encoder.pattern("AB")) < len(encoder.pattern("ABC"))
    assert isinstance(encoder, LinearEncoder)
    assert encoder.barcode_options == {"add_checksum": False}


@pytest.mark.parametrize("symbology,value", [
    (Symbology.EAN_13, "ABCDEFGHIJKL"),
    (Symbology.EAN_13, "123"),
    (Symbology.EAN_8, "12"),
    (Symbology.ITF, "12AB"),
    (Symbology.UPC_A, "not-digits!"),
    (Symbology.CODE_128, "héllo"),
    (Symbology.CODE_39, "lower~case"),
    (Symbology.EAN_13, "5901234123459"),
    (Symbology.EAN_13, "59012341234579999"),
    (Symbology.EAN_13, "\u0665\u0669\u0660\u0661\u0662\u0663\u0664\u0661\u0662\u0663\u0664\u0665"),
    (Symbology.EAN_8, "96385075"),
    (Symbology.EAN_8, "963850741"),
    (Symbology.UPC_A, "036000291453"),
    (Symbology.UPC_A, "0360002914529999"),
    (Symbology.ITF, "1"),
    (Symbology.ITF, "123"),
    (Symbology.ITF, "\u0661\u0662"),
])
def test_library_rejections_mapped(symbology, value):
    with pytest.raises(EncodingRejectedError) as exc_info:
        get_encoder(symbology).encode(value, EncodingOptions(height=40))
    assert exc_info.value.symbology == symbology.value
    assert exc_info.value.http_status == 400


@pytest.mark.parametrize("symbology,body,check", [
    (Symbology.EAN_13, "590123412345", "7"),
    (Symbology.EAN_8, "9638507", "4"),
    (Symbology.UPC_A, "03600029145", "2"),
])
def test_correct_check_digit_encodes_same_symbol(symbology, body, check):
    encoder = get_encoder(symbology)
    assert gs1_check_digit(body) == int(check)
    assert encoder.pattern(body + check) == encoder.pattern(body)


def test_wrong_check_digit_message():
    with pytest.raises(EncodingRejectedError, match="Contents do not pass checksum"):
        get_encoder(Symbology.EAN_13).encode(
            "5901234123459", EncodingOptions(height=40),
        )


def test_itf_odd_length_not_zero_padded():
    with pytest.raises(EncodingRejectedError, match="should be even"):
        get_encoder(Symbology.ITF).pattern("1")
    assert get_encoder(Symbology.ITF).pattern("01")


def test_svg_label_drops_control_characters():
    document = get_encoder(Symbology.CODE_128).encode_svg("\x01abc")
    root = ET.fromstring(document.encode("utf-8"))
    assert root.tag.endswith("svg")
    assert "\x01" not in document
    assert get_encoder(Symbology.CODE_128).pattern("\x01abc") != (
        get_encoder(Symbology.CODE_128).pattern("abc")
    )


@pytest.mark.parametrize("symbology", list(Symbology))
def test_empty_contents_rejected(symbology):
    encoder = get_encoder(symbology)
    with pytest.raises(EncodingRejectedError, match="Found empty contents"):
        encoder.encode("", EncodingOptions(height=40))
    with pytest.raises(EncodingRejectedError, match="Found empty contents"):
        encoder.encode_svg("")


# ─── qr code ─────────────────────────────────────────────────────

def test_qr_modules_have_no_quiet_zone():
    modules = QRCodeEncoder().modules("HELLO")
    assert len(modules) == 21
    assert all(len(row) == 21 for row in modules)
    # finder pattern corner
    assert modules[0][0] is True


def test_qr_requested_size_is_exact():
    matrix = get_encoder(Symbology.QR_CODE).encode(
        "HELLO", EncodingOptions(height=200, width=200),
    )
    assert (matrix.width, matrix.height) == (200, 200)


def test_qr_default_size_is_symbol_plus_quiet_zone():
    matrix = get_encoder(Symbology.QR_CODE).encode(
        "HELLO", EncodingOptions(height=10),
    )
    assert (matrix.width, matrix.height) == (29, 29)


def test_qr_overflow_rejected():
    with pytest.raises(EncodingRejectedError, match="Data too big"):
        get_encoder(Symbology.QR_CODE).encode(
            "é" * 2048, EncodingOptions(height=40),
        )
