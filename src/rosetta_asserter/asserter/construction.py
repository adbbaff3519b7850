"""Checks for construction API objects and responses.

Every function returns ``None`` when its input is valid and raises an
:class:`~rosetta_asserter.errors.AsserterError` otherwise. Checks are
fail-fast: the first problem found is raised, wrapped with the context of
each enclosing check.
"""

from collections.abc import Sequence

from rosetta_asserter.asserter.identifiers import transaction_identifier
from rosetta_asserter.asserter.primitives import check_hex, curve_type, signature_type
from rosetta_asserter.errors import (
    AsserterError,
    EmptyAddress,
    EmptySignatureList,
    EmptyValue,
    NilMetadata,
    NilPublicKey,
    NilResponse,
    NilSignature,
    NilSigningPayload,
    SignatureTypeMismatch,
)
from rosetta_asserter.models import (
    ConstructionCombineResponse,
    ConstructionDeriveResponse,
    ConstructionHashResponse,
    ConstructionMetadataResponse,
    ConstructionPayloadsResponse,
    ConstructionSubmitResponse,
    PublicKey,
    Signature,
    SigningPayload,
)


def construction_metadata(response: ConstructionMetadataResponse | None) -> None:
    """Raise if the metadata object is missing.

    An empty object is valid; only an absent (``None``) one is rejected.
    """
    if response is None:
        raise NilResponse("construction metadata response cannot be nil")

    if response.metadata is None:
        raise NilMetadata("Metadata is nil")


def construction_submit(response: ConstructionSubmitResponse | None) -> None:
    """Raise if the submitted transaction identifier is invalid."""
    if response is None:
        raise NilResponse("construction submit response cannot be nil")

    transaction_identifier(response.transaction_identifier)


def public_key(key: PublicKey | None) -> None:
    """Raise if the key is missing, is not valid hex, or has an unsupported curve."""
    if key is None:
        raise NilPublicKey("PublicKey cannot be nil")

    try:
        check_hex(key.hex_bytes)
    except AsserterError as e:
        raise e.with_context("public key does not have valid hex") from e

    try:
        curve_type(key.curve_type)
    except AsserterError as e:
        raise e.with_context("public key curve type is not supported") from e


def signing_payload(payload: SigningPayload | None) -> None:
    """Raise if the payload is missing, has no address, has invalid hex,
    or requests an unsupported signature type.

    ``signature_type`` is optional on a payload; when absent nothing else
    is checked.
    """
    if payload is None:
        raise NilSigningPayload("signing payload cannot be nil")

    if not payload.address:
        raise EmptyAddress("signing payload address cannot be empty")

    try:
        check_hex(payload.hex_bytes)
    except AsserterError as e:
        raise e.with_context("signing payload is not a valid hex string") from e

    if not payload.signature_type:
        return

    try:
        signature_type(payload.signature_type)
    except AsserterError as e:
        raise e.with_context("signing payload signature type is not valid") from e


def signatures(signature_list: Sequence[Signature | None] | None) -> None:
    """Raise on the first invalid signature in ``signature_list``.

    Errors carry the offending element's ``index``; elements after it are
    not evaluated.
    """
    if not signature_list:
        raise EmptySignatureList("signatures cannot be empty")

    for i, signature in enumerate(signature_list):
        _signature(signature, i)


def _signature(signature: Signature | None, i: int) -> None:
    if signature is None:
        raise NilSignature(f"signature {i} cannot be nil", index=i)

    try:
        signing_payload(signature.signing_payload)
    except AsserterError as e:
        raise e.with_context(f"signature {i} has invalid signing payload", index=i) from e

    try:
        public_key(signature.public_key)
    except AsserterError as e:
        raise e.with_context(f"signature {i} has invalid public key", index=i) from e

    try:
        signature_type(signature.signature_type)
    except AsserterError as e:
        raise e.with_context(f"signature {i} has invalid signature type", index=i) from e

    requested = signature.signing_payload.signature_type
    if requested and requested != signature.signature_type:
        raise SignatureTypeMismatch(
            f"requested signature type {requested} does not match returned "
            f"signature type {signature.signature_type}: signature {i}",
            requested=requested,
            returned=signature.signature_type,
            index=i,
        )

    try:
        check_hex(signature.hex_bytes)
    except AsserterError as e:
        raise e.with_context(f"signature {i} has invalid hex", index=i) from e


def construction_derive(response: ConstructionDeriveResponse | None) -> None:
    """Raise if the derived address is empty."""
    if response is None:
        raise NilResponse("construction derive response cannot be nil")

    if not response.address:
        raise EmptyAddress("construction derive response address cannot be empty")


def construction_combine(response: ConstructionCombineResponse | None) -> None:
    """Raise if the combined (signed) transaction is empty."""
    if response is None:
        raise NilResponse("construction combine response cannot be nil")

    if not response.signed_transaction:
        raise EmptyValue("signed transaction cannot be empty")


def construction_payloads(response: ConstructionPayloadsResponse | None) -> None:
    """Raise if the unsigned transaction is empty or any payload is invalid."""
    if response is None:
        raise NilResponse("construction payloads response cannot be nil")

    if not response.unsigned_transaction:
        raise EmptyValue("unsigned transaction cannot be empty")

    if not response.payloads:
        raise EmptyValue("signing payloads cannot be empty")

    for i, payload in enumerate(response.payloads):
        try:
            signing_payload(payload)
        except AsserterError as e:
            raise e.with_context(f"signing payload {i} is invalid", index=i) from e


def construction_hash(response: ConstructionHashResponse | None) -> None:
    """Raise if the hashed transaction identifier is invalid."""
    if response is None:
        raise NilResponse("construction hash response cannot be nil")

    transaction_identifier(response.transaction_identifier)
