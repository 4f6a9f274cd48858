"""Validation models — field results, option bags, and aggregate form results.

All validation is deterministic: same input → same output, no I/O, no clock
reads beyond what a caller injects or the current local date.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

Number = Union[int, float]

# Field name → message. Absence of a key means the field passed.
FormErrors = dict[str, str]


class ValidationResult(BaseModel):
    """Outcome of a single field check.

    Invariant:
        - valid=True  → message == "" (warning may still be set)
        - valid=False → message is non-empty
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    message: str = ""
    warning: Optional[str] = None  # Advisory, never blocks submission

    @model_validator(mode="after")
    def _check_message(self) -> "ValidationResult":
        if self.valid and self.message:
            raise ValueError("a passing result must not carry a message")
        if not self.valid and not self.message:
            raise ValueError("a failing result must carry a message")
        return self

    @classmethod
    def ok(cls, warning: Optional[str] = None) -> "ValidationResult":
        return cls(valid=True, message="", warning=warning)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)


class NumberOptions(BaseModel):
    """Constraints for validate_number. Bounds are inclusive."""

    model_config = ConfigDict(frozen=True)

    min: Optional[Number] = None
    max: Optional[Number] = None
    required: bool = True
    integer: bool = False


class TextLengthOptions(BaseModel):
    """Constraints for validate_text_length, measured on the trimmed text."""

    model_config = ConfigDict(frozen=True)

    min: Optional[int] = Field(default=None, ge=0)
    max: Optional[int] = Field(default=None, ge=0)
    required: bool = True


class AggregateResult(BaseModel):
    """Result of a whole-form validation — every failing field, not just the first."""

    form: str = ""
    valid: bool
    errors: FormErrors = Field(default_factory=dict)

    @classmethod
    def build(cls, errors: FormErrors, form: str = "") -> "AggregateResult":
        """Build a result from a collected error map."""
        return cls(form=form, valid=len(errors) == 0, errors=dict(errors))

    def error_for(self, field: str) -> Optional[str]:
        """Message for a field, or None if it passed."""
        return self.errors.get(field)
