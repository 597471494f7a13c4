"""Tests for quote request validation."""

import pytest

from src.api.routes.quote import parse_quote_request
from src.services.errors import ValidationError


@pytest.mark.parametrize("length", [999, 12001, 0, -5, "abc", None, "", "NaN"])
@pytest.mark.parametrize("thickness", ["0.5", "0.6", "0.7", "0.8"])
def test_length_out_of_range_is_rejected(length, thickness):
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request({"lengthMm": length, "thickness": thickness})

    assert excinfo.value.message == "Length must be 1000..12000 mm"
    assert excinfo.value.status_code == 400


def test_missing_length_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request({"thickness": "0.5"})

    assert excinfo.value.message == "Length must be 1000..12000 mm"


def test_fractional_length_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request({"lengthMm": 1500.5, "thickness": "0.5"})

    assert excinfo.value.message == "Length must be a whole number of mm"


@pytest.mark.parametrize("thickness", ["0.8", "0.4", "", None, "05"])
def test_unknown_thickness_is_rejected(thickness):
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request({"lengthMm": 2000, "thickness": thickness})

    assert excinfo.value.message == "Thickness must be 0.5/0.6/0.7"


def test_numeric_inputs_are_coerced():
    request = parse_quote_request({"lengthMm": "2500", "thickness": 0.7})

    assert request.length_mm == 2500
    assert request.thickness == "0.7"
    assert request.base_sku is None


@pytest.mark.parametrize("base_sku", ["WIDTH-1000-A", "WIDTH-12100", "SHEET-1210"])
def test_base_sku_prefix_mismatch_is_rejected(base_sku):
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request(
            {"lengthMm": 2000, "thickness": "0.5", "baseSku": base_sku}
        )

    assert excinfo.value.message == "Base SKU not allowed"


def test_base_sku_is_uppercased_before_check():
    request = parse_quote_request(
        {"lengthMm": 2000, "thickness": "0.5", "baseSku": "width-1210-x"}
    )

    assert request.base_sku == "WIDTH-1210-X"


def test_empty_base_sku_is_treated_as_absent():
    request = parse_quote_request({"lengthMm": 2000, "thickness": "0.5", "baseSku": ""})

    assert request.base_sku is None


def test_length_is_checked_before_thickness():
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request({"lengthMm": 1, "thickness": "9", "baseSku": "NOPE"})

    assert excinfo.value.message == "Length must be 1000..12000 mm"


def test_missing_thickness_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request({"lengthMm": 2000})

    assert excinfo.value.message == "Thickness must be 0.5/0.6/0.7"


def test_null_fields_are_rejected_with_constraint_message():
    with pytest.raises(ValidationError) as excinfo:
        parse_quote_request({"lengthMm": None, "thickness": None})

    assert excinfo.value.message == "Length must be 1000..12000 mm"


def test_base_sku_word_boundary_is_ascii_only():
    request = parse_quote_request(
        {"lengthMm": 2000, "thickness": "0.5", "baseSku": "width-1210é"}
    )

    assert request.base_sku == "WIDTH-1210É"
