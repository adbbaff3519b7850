"""Identifier models shared across Rosetta responses."""

from pydantic import BaseModel


class TransactionIdentifier(BaseModel):
    """Network-specific transaction hash."""
    hash: str = ""

    model_config = {"populate_by_name": True, "frozen": True}
