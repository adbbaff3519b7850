"""Identifier checks used by the submit and hash responses."""

from rosetta_asserter.errors import EmptyTransactionHash, NilTransactionIdentifier
from rosetta_asserter.models import TransactionIdentifier


def transaction_identifier(identifier: TransactionIdentifier | None) -> None:
    """Raise if the transaction identifier is missing or has an empty hash."""
    if identifier is None:
        raise NilTransactionIdentifier("TransactionIdentifier is nil")

    if not identifier.hash:
        raise EmptyTransactionHash("TransactionIdentifier.Hash is missing")
