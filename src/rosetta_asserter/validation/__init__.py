"""Validation layer for construction response documents.

Wraps the raising asserter checks in rules that report failures as values,
so a batch of responses can be checked and summarised in one run.
"""

from .framework import (
    ValidationFramework,
    ValidationIssue,
    ValidationResult,
    ValidationRule,
    ValidationStatus,
)
from .rules import AssertionRule, default_rules

__all__ = [
    "ValidationFramework",
    "ValidationIssue",
    "ValidationResult",
    "ValidationRule",
    "ValidationStatus",
    "AssertionRule",
    "default_rules",
]
