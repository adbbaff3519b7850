"""Error taxonomy for construction response assertions.

Every check in :mod:`rosetta_asserter.asserter` raises a subclass of
:class:`AsserterError`. The ``kind`` attribute groups failures into the five
categories callers usually branch on; the concrete class names the field.
"""

import copy
from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories."""
    NIL_OR_EMPTY = "nil_or_empty"
    INVALID_ENCODING = "invalid_encoding"
    UNSUPPORTED_ENUM = "unsupported_enum"
    MISMATCH = "mismatch"
    DELEGATED_FAILURE = "delegated_failure"


class AsserterError(Exception):
    """Base class for all assertion failures."""

    kind: ErrorKind = ErrorKind.NIL_OR_EMPTY

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.message = message
        self.index = index

    def with_context(self, context: str, index: int | None = None) -> "AsserterError":
        """Return a copy of this error with ``context`` appended to the message.

        The copy keeps the concrete class (and therefore ``kind``) so callers
        can still match on it after several levels of wrapping.
        """
        wrapped = copy.copy(self)
        wrapped.message = f"{self.message}: {context}"
        wrapped.args = (wrapped.message,)
        if index is not None:
            wrapped.index = index
        return wrapped

    def __str__(self) -> str:
        return self.message


class EmptyValue(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class NilPublicKey(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class NilSigningPayload(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class NilSignature(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class EmptyAddress(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class EmptySignatureList(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class NilMetadata(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class NilResponse(AsserterError):
    kind = ErrorKind.NIL_OR_EMPTY


class InvalidHex(AsserterError):
    kind = ErrorKind.INVALID_ENCODING

    def __init__(self, message: str, value: str = "", index: int | None = None):
        super().__init__(message, index=index)
        self.value = value


class UnsupportedEnumValue(AsserterError):
    kind = ErrorKind.UNSUPPORTED_ENUM

    def __init__(self, message: str, value: str = "", index: int | None = None):
        super().__init__(message, index=index)
        self.value = value


class SignatureTypeMismatch(AsserterError):
    """Requested signature type differs from the one the signer returned."""
    kind = ErrorKind.MISMATCH

    def __init__(self, message: str, requested: str = "", returned: str = "",
                 index: int | None = None):
        super().__init__(message, index=index)
        self.requested = requested
        self.returned = returned


class NilTransactionIdentifier(AsserterError):
    kind = ErrorKind.DELEGATED_FAILURE


class EmptyTransactionHash(AsserterError):
    kind = ErrorKind.DELEGATED_FAILURE
