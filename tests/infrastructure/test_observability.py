"""Structured Logging — JSON formatter output and extras."""

import json
import logging

from barcode_image_service.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "barcode_image_service.test", logging.WARNING, __file__, 1,
        "Height 'h' must be between %d and %d.", (10, 2048), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "barcode_image_service.test"
    assert log["message"] == "Height 'h' must be between 10 and 2048."
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(_record(
        error_code="HEIGHT_OUT_OF_RANGE", param="h", unrelated="x",
    )))
    assert log["error_code"] == "HEIGHT_OUT_OF_RANGE"
    assert log["param"] == "h"
    assert "unrelated" not in log
    assert "symbology" not in log


def test_json_formatter_logs_enums_by_value():
    from barcode_image_service.core.domain_types import OutputFormat, Symbology

    log = json.loads(JSONFormatter().format(_record(
        symbology=Symbology.QR_CODE, output_format=OutputFormat.SVG,
    )))
    assert log["symbology"] == "QR_CODE"
    assert log["output_format"] == "svg"
