"""Run execution domain exports."""

from .run_contracts import SafetyCheckOutcome, SafetyCheckRequest
from .safety_check_use_case import SafetyCheckError, execute_schema_safety_check

__all__ = [
    "SafetyCheckRequest",
    "SafetyCheckOutcome",
    "SafetyCheckError",
    "execute_schema_safety_check",
]
