"""Tests for hex and enumeration checks."""

import pytest

from rosetta_asserter.asserter import check_hex, curve_type, signature_type
from rosetta_asserter.errors import EmptyValue, ErrorKind, InvalidHex, UnsupportedEnumValue
from rosetta_asserter.models import CurveType, SignatureType


class TestCheckHex:
    """Test check_hex."""

    @pytest.mark.parametrize("value", ["00", "deadbeef", "DEADBEEF", "DeAdBeEf0123456789"])
    def test_valid_hex(self, value):
        assert check_hex(value) is None

    def test_empty_string(self):
        with pytest.raises(EmptyValue) as exc_info:
            check_hex("")

        assert exc_info.value.kind == ErrorKind.NIL_OR_EMPTY
        assert "hex string cannot be empty" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["zz", "abc", "ab cd", "0xab", "12g4", "é0"])
    def test_invalid_hex(self, value):
        with pytest.raises(InvalidHex) as exc_info:
            check_hex(value)

        assert exc_info.value.kind == ErrorKind.INVALID_ENCODING
        assert exc_info.value.value == value
        assert value in str(exc_info.value)


class TestCurveType:
    """Test curve_type."""

    @pytest.mark.parametrize("value", ["secp256k1", "edwards25519"])
    def test_supported(self, value):
        assert curve_type(value) is None

    def test_enum_member_accepted(self):
        assert curve_type(CurveType.EDWARDS25519) is None

    @pytest.mark.parametrize("value", ["", "bitcoin", "SECP256K1", "secp256r1", " secp256k1"])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedEnumValue) as exc_info:
            curve_type(value)

        assert exc_info.value.kind == ErrorKind.UNSUPPORTED_ENUM
        assert exc_info.value.value == value
        assert "is not a supported CurveType" in str(exc_info.value)

    def test_message_names_value(self):
        with pytest.raises(UnsupportedEnumValue, match="bitcoin is not a supported CurveType"):
            curve_type("bitcoin")


class TestSignatureType:
    """Test signature_type."""

    @pytest.mark.parametrize("value", ["ecdsa", "ecdsa_recovery", "ed25519"])
    def test_supported(self, value):
        assert signature_type(value) is None

    def test_enum_member_accepted(self):
        assert signature_type(SignatureType.ECDSA_RECOVERY) is None

    @pytest.mark.parametrize("value", ["", "schnorr", "ECDSA", "ed25519 "])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedEnumValue) as exc_info:
            signature_type(value)

        assert exc_info.value.kind == ErrorKind.UNSUPPORTED_ENUM
        assert "is not a supported SignatureType" in str(exc_info.value)
