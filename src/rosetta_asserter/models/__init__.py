"""Pydantic data models for Rosetta construction responses."""

from rosetta_asserter.models.construction import (
    ConstructionCombineResponse,
    ConstructionDeriveResponse,
    ConstructionHashResponse,
    ConstructionMetadataResponse,
    ConstructionPayloadsResponse,
    ConstructionSubmitResponse,
    CurveType,
    PublicKey,
    Signature,
    SignatureType,
    SigningPayload,
)
from rosetta_asserter.models.identifiers import TransactionIdentifier

__all__ = [
    "CurveType",
    "SignatureType",
    "PublicKey",
    "SigningPayload",
    "Signature",
    "TransactionIdentifier",
    "ConstructionMetadataResponse",
    "ConstructionSubmitResponse",
    "ConstructionDeriveResponse",
    "ConstructionCombineResponse",
    "ConstructionPayloadsResponse",
    "ConstructionHashResponse",
]
