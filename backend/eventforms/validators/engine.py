"""Validation Engine — routes a submitted form to its validator and builds the result.

This is the main entry point for form validation. Callers name the form and
pass the submitted values; the engine returns an AggregateResult with every
failing field.

Usage:
    result = validation_engine.validate("event", form_data)
    if not result.valid:
        # Render result.errors next to each field
"""

import time
from datetime import datetime
from typing import Any, Mapping, Optional

import structlog

from eventforms.validators.base import BaseFormValidator
from eventforms.validators.models import AggregateResult, FormErrors

# Import all form validators
from eventforms.validators.event_form_validator import EventFormValidator
from eventforms.validators.registration_form_validator import RegistrationFormValidator
from eventforms.validators.login_form_validator import LoginFormValidator
from eventforms.validators.event_schedule_validator import EventScheduleValidator

logger = structlog.get_logger()

# Key for errors that belong to the form as a whole rather than one field
FORM_ERROR_KEY = "_form"


class ValidationEngine:
    """Holds the registered form validators and runs them on request.

    Design principles:
        - Deterministic: same input (and `now`) → same output
        - Total: a registered form always yields a complete error map
        - Extensible: add forms without modifying the engine
        - Observable: logs every validation run with timing, never field values
    """

    def __init__(self, validators: Optional[list[BaseFormValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of form validators. If None, uses all defaults.
        """
        self._validators: dict[str, BaseFormValidator] = {}
        for validator in validators or self._default_validators():
            self.add_validator(validator)

    @staticmethod
    def _default_validators() -> list[BaseFormValidator]:
        return [
            EventFormValidator(),
            RegistrationFormValidator(),
            LoginFormValidator(),
            EventScheduleValidator(),
        ]

    @property
    def forms(self) -> list[str]:
        """Names of the registered forms."""
        return list(self._validators)

    def validate(
        self,
        form: str,
        data: Optional[Mapping[str, Any]],
        now: Optional[datetime] = None,
    ) -> AggregateResult:
        """Validate one submitted form.

        Args:
            form: Registered form name ("event", "registration", ...)
            data: Submitted values keyed by field name
            now: Reference instant for date rules (defaults to the local clock)

        Returns:
            AggregateResult with valid=True iff no field failed

        Raises:
            ValueError: if no validator is registered for `form`
        """
        validator = self._validators.get(form)
        if validator is None:
            raise ValueError(
                f"Unknown form '{form}'. Registered forms: {', '.join(self.forms)}"
            )

        start_time = time.perf_counter()
        errors: FormErrors
        try:
            errors = validator.validate(data or {}, now=now)
        except Exception as e:
            logger.error(
                "validator_failed",
                form=form,
                validator=validator.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            # Don't let one broken rule hide the form behind a stack trace
            errors = {FORM_ERROR_KEY: "This form could not be validated. Please try again."}

        result = AggregateResult.build(errors, form=form)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        log = logger.debug if result.valid else logger.info
        log(
            "form_validated",
            form=form,
            valid=result.valid,
            failed_fields=sorted(result.errors),
            duration_ms=duration_ms,
        )

        return result

    def add_validator(self, validator: BaseFormValidator) -> None:
        """Register a form validator, replacing any existing one for the same form."""
        self._validators[validator.form] = validator

    def remove_validator(self, form: str) -> None:
        """Unregister a form by name. Unknown names are ignored."""
        self._validators.pop(form, None)


# Module-level singleton
validation_engine = ValidationEngine()


def validate_event_form(data: Mapping[str, Any], now: Optional[datetime] = None) -> AggregateResult:
    return validation_engine.validate("event", data, now=now)


def validate_registration_form(data: Mapping[str, Any]) -> AggregateResult:
    return validation_engine.validate("registration", data)


def validate_login_form(data: Mapping[str, Any]) -> AggregateResult:
    return validation_engine.validate("login", data)


def validate_event_schedule(data: Mapping[str, Any], now: Optional[datetime] = None) -> AggregateResult:
    return validation_engine.validate("event_schedule", data, now=now)
