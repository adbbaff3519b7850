"""Construction response assertions.

Pure, side-effect free checks over decoded Rosetta construction objects.
Each check returns ``None`` on success and raises an
:class:`~rosetta_asserter.errors.AsserterError` describing the first
problem found.
"""

from .construction import (
    construction_combine,
    construction_derive,
    construction_hash,
    construction_metadata,
    construction_payloads,
    construction_submit,
    public_key,
    signatures,
    signing_payload,
)
from .identifiers import transaction_identifier
from .primitives import check_hex, curve_type, signature_type

__all__ = [
    "check_hex",
    "curve_type",
    "signature_type",
    "public_key",
    "signing_payload",
    "signatures",
    "transaction_identifier",
    "construction_metadata",
    "construction_submit",
    "construction_derive",
    "construction_combine",
    "construction_payloads",
    "construction_hash",
]
