"""Core validation framework for construction responses.

Runs asserter checks through pluggable rules and turns their failures into
reportable values (status, issues, counters) suitable for CI pipelines.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..config import AsserterConfig, Endpoint

logger = logging.getLogger(__name__)


class ValidationStatus(str, Enum):
    """Overall validation status."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class ValidationIssue:
    """A single failure found during validation."""
    rule: str
    kind: str
    message: str
    index: int | None = None
    document: int | None = None
    path: str | None = None

    def __str__(self) -> str:
        location = ""
        if self.document is not None:
            location += f" in document {self.document}"
        if self.path:
            location += f" at {self.path}"
        return f"[{self.kind.upper()}] {self.rule}: {self.message}{location}"


@dataclass
class ValidationResult:
    """Results of a validation run."""
    status: ValidationStatus
    issues: list[ValidationIssue] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.status == ValidationStatus.PASS else 1

    def add_issue(self, rule: str, kind: str, message: str,
                  index: int | None = None, path: str | None = None) -> ValidationIssue:
        """Add a failure and mark the result as failed."""
        issue = ValidationIssue(rule, kind, message, index=index, path=path)
        self.issues.append(issue)
        self.status = ValidationStatus.FAIL
        return issue

    def increment_counter(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        self.counters[name] = self.counters.get(name, 0) + value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "issues": [
                {
                    "rule": issue.rule,
                    "kind": issue.kind,
                    "message": issue.message,
                    "index": issue.index,
                    "document": issue.document,
                    "path": issue.path
                }
                for issue in self.issues
            ]
        }


class ValidationRule(ABC):
    """Base class for validation rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @property
    @abstractmethod
    def endpoint(self) -> Endpoint:
        """Endpoint whose documents this rule validates."""
        pass

    @abstractmethod
    def validate(self, document: Any, config: AsserterConfig, result: ValidationResult) -> None:
        """Execute validation rule.

        Args:
            document: Decoded JSON document (dict, list or None)
            config: asserter configuration
            result: Validation result to update with issues/counters
        """
        pass


class ValidationFramework:
    """Dispatches documents to the rule registered for their endpoint."""

    def __init__(self, config: AsserterConfig):
        self.config = config
        self.rules: list[ValidationRule] = []

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def rule_for(self, endpoint: str) -> ValidationRule:
        """Return the rule registered for ``endpoint``.

        Raises:
            ValueError: If the endpoint is unknown or disabled in configuration
        """
        if not self.config.endpoint_enabled(endpoint):
            raise ValueError(f"Endpoint '{endpoint}' is not enabled")

        for rule in self.rules:
            if rule.endpoint == endpoint:
                return rule

        raise ValueError(f"No validation rule registered for endpoint '{endpoint}'")

    def validate(self, endpoint: str, document: Any) -> ValidationResult:
        """Validate a single response document."""
        return self.validate_many(endpoint, [document])

    def validate_many(self, endpoint: str, documents: Iterable[Any]) -> ValidationResult:
        """Validate a sequence of response documents.

        With ``validation.fail_fast`` enabled (the default) the first failing
        document stops the run. Otherwise every document is checked and the
        issues of all of them are reported.

        Returns:
            ValidationResult with status, issues, and counters
        """
        rule = self.rule_for(endpoint)
        result = ValidationResult(status=ValidationStatus.PASS)

        logger.info(f"Validating {endpoint} documents with rule {rule.name}")

        for position, document in enumerate(documents):
            seen = len(result.issues)
            self._run_rule(rule, document, result)
            result.increment_counter("documents_checked")

            for issue in result.issues[seen:]:
                issue.document = position

            if len(result.issues) > seen and self.config.validation.fail_fast:
                logger.debug(f"Stopping after first failing document ({position})")
                break

        logger.info(f"Validation completed with status: {result.status.value}")
        logger.info(f"Found {len(result.issues)} issues")

        return result

    def _run_rule(self, rule: ValidationRule, document: Any, result: ValidationResult) -> None:
        logger.debug(f"Executing rule: {rule.name}")
        try:
            rule.validate(document, self.config, result)
        except Exception as e:
            logger.error(f"Rule {rule.name} failed with error: {e}")
            result.add_issue(rule.name, "rule_error", f"Rule execution failed: {e}")

    def create_default_rules(self) -> None:
        """Register one rule per construction endpoint."""
        from .rules import default_rules

        for rule in default_rules():
            self.add_rule(rule)
