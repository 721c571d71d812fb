"""
Calculator API — Schema and Encoding Unit Tests
=================================================

What:  Tests for operand decoding/conversion and result number formatting.
How:   Pydantic models validated directly; no HTTP involved.
"""

import math

import pytest
from pydantic import ValidationError

from calculator_api.exceptions import InputError
from calculator_api.responses import ResultResponse, format_number
from calculator_api.schemas.calculator import BinaryOperands, UnaryOperands, to_float


class TestOperandDecoding:
    """Operands are JSON numbers or strings in JSON number syntax."""

    @pytest.mark.parametrize("value", [2, 2.5, -3, 0, "2", "-2.5", "1e10", "1.5E-3", "0.25"])
    def test_accepts_numbers_and_numeric_strings(self, value):
        operands = UnaryOperands.model_validate({"a": value})
        assert operands.a == value

    @pytest.mark.parametrize(
        "value",
        ["foo", "", " 2", "2 ", "+2", ".5", "5.", "0x10", "NaN", "Infinity", "1,5", "01"],
    )
    def test_rejects_non_numeric_strings(self, value):
        with pytest.raises(ValidationError, match="must be a number or a numeric string"):
            UnaryOperands.model_validate({"a": value})

    @pytest.mark.parametrize("value", [True, False, None, [1], {"v": 1}])
    def test_rejects_other_json_types(self, value):
        with pytest.raises(ValidationError):
            UnaryOperands.model_validate({"a": value})

    def test_both_binary_operands_required(self):
        with pytest.raises(ValidationError):
            BinaryOperands.model_validate({"a": 1})
        with pytest.raises(ValidationError):
            BinaryOperands.model_validate({"b": 1})

    def test_extra_fields_ignored(self):
        operands = BinaryOperands.model_validate({"a": 1, "b": 2, "c": "x"})
        assert operands.as_floats() == (1.0, 2.0)

    def test_large_text_operand_loses_precision(self):
        operands = BinaryOperands.model_validate({"a": "98765432109876543210", "b": 3})
        a, b = operands.as_floats()
        assert a == float("98765432109876543210")
        assert a != 98765432109876543210
        assert b == 3.0


class TestToFloat:

    def test_converts_int_float_and_string(self):
        assert to_float(4) == 4.0
        assert to_float(0.5) == 0.5
        assert to_float("-12.75") == -12.75

    @pytest.mark.parametrize("value", ["1e999", "-1e999", 10 ** 400, math.inf, math.nan])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(InputError, match="out of range"):
            to_float(value, "a")

    def test_error_names_field(self):
        with pytest.raises(InputError) as exc_info:
            to_float("1e999", "b")
        assert exc_info.value.field == "b"
        assert exc_info.value.message.startswith("b:")


class TestFormatNumber:
    """Shortest round-trip digits, positional notation."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5.0, "5"),
            (-10.0, "-10"),
            (0.5, "0.5"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e-7, "0.0000001"),
            (100.0, "100"),
            (1e21, "1000000000000000000000"),
            (3.292181070329218e19, "32921810703292180000"),
            (0.0, "0"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [0.1, 1 / 3, 2 ** 0.5, 6.02214076e23, 5e-324])
    def test_round_trips(self, value):
        assert float(format_number(value)) == value

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            format_number(value)

    def test_result_response_body(self):
        response = ResultResponse(5.0)
        assert response.status_code == 200
        assert response.body == b'{"result":5}'
        assert response.headers["content-type"] == "application/json"
