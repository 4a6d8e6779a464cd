from decimal import Decimal

import pytest

from ledgertrack.app import create_app
from ledgertrack.config import TestingConfig, parse_tolerance


def test_app_tolerance_is_a_decimal(app):
    assert app.config["BALANCE_TOLERANCE"] == Decimal("0.01")


@pytest.mark.parametrize("raw, expected", [("0.01", Decimal("0.01")), (" 0.5 ", Decimal("0.5")), (0, Decimal("0"))])
def test_parse_tolerance(raw, expected):
    assert parse_tolerance(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "-0.01", "NaN", "Infinity"])
def test_parse_tolerance_rejects_malformed_values(raw):
    with pytest.raises(ValueError):
        parse_tolerance(raw)


def test_create_app_refuses_malformed_tolerance(monkeypatch):
    monkeypatch.setattr(TestingConfig, "BALANCE_TOLERANCE", "0,01 XAF")
    with pytest.raises(ValueError, match="BALANCE_TOLERANCE"):
        create_app("testing")
