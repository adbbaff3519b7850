"""Tests for construction wire models."""

from rosetta_asserter.models import (
    ConstructionMetadataResponse,
    ConstructionSubmitResponse,
    PublicKey,
    Signature,
    SigningPayload,
)


class TestDecoding:
    """Test decoding JSON documents into models."""

    def test_public_key_wire_names(self):
        key = PublicKey.model_validate({"hex_bytes": "02ab", "curve_type": "secp256k1"})
        assert key.hex_bytes == "02ab"

        key = PublicKey.model_validate({"bytes": "02ab", "curve_type": "secp256k1"})
        assert key.hex_bytes == "02ab"

    def test_unsupported_tags_survive_decoding(self):
        key = PublicKey.model_validate({"hex_bytes": "02ab", "curve_type": "bitcoin"})
        assert key.curve_type == "bitcoin"

    def test_missing_fields_default_empty(self):
        payload = SigningPayload.model_validate({})
        assert payload.address == ""
        assert payload.hex_bytes == ""
        assert payload.signature_type is None

    def test_nested_signature(self):
        signature = Signature.model_validate({
            "signing_payload": {"address": "a", "hex_bytes": "00"},
            "signature_type": "ecdsa",
            "hex_bytes": "01",
        })
        assert signature.signing_payload.address == "a"
        assert signature.public_key is None

    def test_metadata_absent_null_and_empty(self):
        assert ConstructionMetadataResponse.model_validate({}).metadata is None
        assert ConstructionMetadataResponse.model_validate({"metadata": None}).metadata is None
        assert ConstructionMetadataResponse.model_validate({"metadata": {}}).metadata == {}

    def test_serialises_hex_bytes_name(self):
        key = PublicKey(hex_bytes="02ab", curve_type="secp256k1")
        assert key.model_dump(by_alias=True) == {"hex_bytes": "02ab", "curve_type": "secp256k1"}

    def test_submit_identifier(self):
        response = ConstructionSubmitResponse.model_validate({"transaction_identifier": {"hash": "tx"}})
        assert response.transaction_identifier.hash == "tx"
