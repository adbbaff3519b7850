"""Models for Rosetta construction API objects and responses.

Tag fields (``curve_type``, ``signature_type``) are kept as raw strings so that
values outside the supported sets survive decoding and can be reported by the
asserter instead of being rejected by pydantic.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from rosetta_asserter.models.identifiers import TransactionIdentifier


class CurveType(str, Enum):
    """Elliptic curve families a public key may belong to."""
    SECP256K1 = "secp256k1"
    EDWARDS25519 = "edwards25519"


class SignatureType(str, Enum):
    """Signing algorithms a signature may be produced with."""
    ECDSA = "ecdsa"
    ECDSA_RECOVERY = "ecdsa_recovery"
    ED25519 = "ed25519"


def _hex_bytes_field(**kwargs: Any) -> Any:
    return Field(
        default="",
        validation_alias=AliasChoices("hex_bytes", "bytes"),
        serialization_alias="hex_bytes",
        **kwargs,
    )


class PublicKey(BaseModel):
    """Public key bytes tagged with their curve."""
    hex_bytes: str = _hex_bytes_field()
    curve_type: str = ""

    model_config = {"populate_by_name": True, "frozen": True}


class SigningPayload(BaseModel):
    """Bytes a signer is asked to sign, with signer address and requested algorithm."""
    address: str = ""
    hex_bytes: str = _hex_bytes_field()
    signature_type: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class Signature(BaseModel):
    """Signature returned for a signing payload."""
    signing_payload: SigningPayload | None = None
    public_key: PublicKey | None = None
    signature_type: str = ""
    hex_bytes: str = _hex_bytes_field()

    model_config = {"populate_by_name": True, "frozen": True}


class ConstructionMetadataResponse(BaseModel):
    """Response of /construction/metadata."""
    metadata: dict[str, Any] | None = None

    model_config = {"populate_by_name": True}


class ConstructionSubmitResponse(BaseModel):
    """Response of /construction/submit."""
    transaction_identifier: TransactionIdentifier | None = None
    metadata: dict[str, Any] | None = None

    model_config = {"populate_by_name": True}


class ConstructionDeriveResponse(BaseModel):
    """Response of /construction/derive."""
    address: str = ""
    metadata: dict[str, Any] | None = None

    model_config = {"populate_by_name": True}


class ConstructionCombineResponse(BaseModel):
    """Response of /construction/combine."""
    signed_transaction: str = ""

    model_config = {"populate_by_name": True}


class ConstructionPayloadsResponse(BaseModel):
    """Response of /construction/payloads."""
    unsigned_transaction: str = ""
    payloads: list[SigningPayload | None] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class ConstructionHashResponse(BaseModel):
    """Response of /construction/hash (a transaction identifier response)."""
    transaction_identifier: TransactionIdentifier | None = None
    metadata: dict[str, Any] | None = None

    model_config = {"populate_by_name": True}
