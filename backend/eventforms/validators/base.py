"""Base form validator — abstract class implementing the Strategy Pattern.

Each form validator is a standalone, independently testable unit.
New forms are registered with the engine without modifying it.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Collection, Mapping, Optional

from eventforms.validators.models import FormErrors, ValidationResult


class BaseFormValidator(ABC):
    """Abstract base for all aggregate form validators.

    Contract:
        - validate() is deterministic for a given `now`
        - validate() evaluates every field and stops at the first failure
          within a field
        - validate() returns a field → message map (empty = form is valid)
        - No I/O, no network calls, no randomness
    """

    @property
    @abstractmethod
    def form(self) -> str:
        """Registry key for this form, e.g. "event"."""
        ...

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def validate(self, data: Mapping[str, Any], now: Optional[datetime] = None) -> FormErrors:
        """Run every field check against the submitted form.

        Args:
            data: Submitted form values keyed by field name
            now: Reference instant for date checks (defaults to the local clock)

        Returns:
            Field → message for every failing field
        """
        ...

    # ── Helper Methods ──

    @staticmethod
    def _record(errors: FormErrors, field: str, result: ValidationResult) -> bool:
        """Store a failing result's message under `field`. Returns result.valid."""
        if not result.valid:
            errors[field] = result.message
        return result.valid

    @staticmethod
    def _get(data: Mapping[str, Any], field: str) -> Any:
        """Safely read a field; missing keys read as None."""
        return data.get(field)

    @staticmethod
    def _supplied(value: Any) -> bool:
        """A value the user actually entered. Zero counts, None and "" do not."""
        return value is not None and value != ""

    @staticmethod
    def _one_of(value: Any, allowed: Collection[str]) -> bool:
        """Membership test that tolerates unhashable form values."""
        return isinstance(value, str) and value in allowed
