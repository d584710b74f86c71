"""Tests for the console log formatter."""

from __future__ import annotations

import json
import logging

from ezhik.core.logging import JSONExtrasFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("ezhik.test", logging.INFO, __file__, 1, "Asset stored", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_extras_as_json() -> None:
    line = JSONExtrasFormatter().format(_record(asset_filename="a.png", byte_size=3))

    head, extras = line.split(" {", 1)
    assert head.endswith("| INFO     | ezhik.test | Asset stored")
    assert json.loads("{" + extras) == {"asset_filename": "a.png", "byte_size": 3}


def test_formatter_masks_credentials() -> None:
    line = JSONExtrasFormatter().format(_record(api_key="gsk-secret", Authorization="Bearer x"))

    assert "gsk-secret" not in line
    assert "Bearer x" not in line
    assert '"api_key": "***"' in line


def test_formatter_without_extras_is_plain() -> None:
    assert JSONExtrasFormatter().format(_record()).endswith("Asset stored")
