"""Leaf checks: hex strings and the closed tag enumerations."""

import binascii

from rosetta_asserter.errors import EmptyValue, InvalidHex, UnsupportedEnumValue
from rosetta_asserter.models import CurveType, SignatureType

SUPPORTED_CURVE_TYPES = tuple(c.value for c in CurveType)
SUPPORTED_SIGNATURE_TYPES = tuple(s.value for s in SignatureType)


def check_hex(hex_string: str) -> None:
    """Raise if ``hex_string`` is empty or not decodable as hex.

    Decoding is strict: odd length, whitespace and a ``0x`` prefix are all
    rejected.
    """
    if not hex_string:
        raise EmptyValue("hex string cannot be empty")

    try:
        binascii.unhexlify(hex_string)
    except (binascii.Error, ValueError, TypeError) as e:
        raise InvalidHex(f"{hex_string} is not a valid hex string ({e})", value=hex_string) from e


def curve_type(curve: str) -> None:
    """Raise if ``curve`` is not a supported CurveType."""
    if curve not in SUPPORTED_CURVE_TYPES:
        raise UnsupportedEnumValue(f"{curve} is not a supported CurveType", value=curve)


def signature_type(signature: str) -> None:
    """Raise if ``signature`` is not a supported SignatureType."""
    if signature not in SUPPORTED_SIGNATURE_TYPES:
        raise UnsupportedEnumValue(f"{signature} is not a supported SignatureType", value=signature)
