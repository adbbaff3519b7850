"""Validation rules, one per construction endpoint.

Each rule decodes a JSON document into its pydantic model and runs the
matching asserter check on it.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .. import asserter
from ..config import AsserterConfig, Endpoint
from ..errors import AsserterError
from ..models import (
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
from .framework import ValidationResult, ValidationRule

logger = logging.getLogger(__name__)

DECODE_ERROR = "decode_error"


class AssertionRule(ValidationRule):
    """Decode a document into ``model`` and run ``check`` on the result."""

    def __init__(self, endpoint: Endpoint, model: Any, check: Callable[[Any], None]):
        self._endpoint = endpoint
        self._adapter = TypeAdapter(model)
        self._check = check

    @property
    def name(self) -> str:
        return f"construction_{self._endpoint.value}"

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    def validate(self, document: Any, config: AsserterConfig, result: ValidationResult) -> None:
        try:
            value = self._adapter.validate_python(document)
        except PydanticValidationError as e:
            for error in e.errors():
                path = "$" + "".join(
                    f"[{part}]" if isinstance(part, int) else f".{part}"
                    for part in error["loc"]
                )
                result.add_issue(self.name, DECODE_ERROR, error["msg"], path=path)
            return

        try:
            self._check(value)
        except AsserterError as e:
            logger.debug(f"{self.name} rejected document: {e}")
            result.add_issue(self.name, e.kind.value, e.message, index=e.index)
            return

        result.increment_counter(f"{self._endpoint.value}_valid")


def default_rules() -> list[AssertionRule]:
    """Build the rule set covering every construction endpoint."""
    return [
        AssertionRule(Endpoint.PUBLIC_KEY, PublicKey | None, asserter.public_key),
        AssertionRule(Endpoint.SIGNING_PAYLOAD, SigningPayload | None, asserter.signing_payload),
        AssertionRule(Endpoint.SIGNATURES, list[Signature | None] | None, asserter.signatures),
        AssertionRule(Endpoint.METADATA, ConstructionMetadataResponse, asserter.construction_metadata),
        AssertionRule(Endpoint.SUBMIT, ConstructionSubmitResponse, asserter.construction_submit),
        AssertionRule(Endpoint.DERIVE, ConstructionDeriveResponse, asserter.construction_derive),
        AssertionRule(Endpoint.COMBINE, ConstructionCombineResponse, asserter.construction_combine),
        AssertionRule(Endpoint.PAYLOADS, ConstructionPayloadsResponse, asserter.construction_payloads),
        AssertionRule(Endpoint.HASH, ConstructionHashResponse, asserter.construction_hash),
    ]
