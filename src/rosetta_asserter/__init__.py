"""rosetta-asserter - Conformance checks for Rosetta construction API responses.

Validates public keys, signing payloads, signatures and construction endpoint
responses before a caller trusts them for signing or broadcast.
"""

__version__ = "0.1.0"
__description__ = "Conformance checks for Rosetta construction API responses"

from rosetta_asserter.config import AsserterConfig
from rosetta_asserter.errors import AsserterError, ErrorKind

__all__ = [
    "__version__",
    "__description__",
    "AsserterConfig",
    "AsserterError",
    "ErrorKind",
]
