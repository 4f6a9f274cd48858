"""Form Validators — deterministic validation for event-management forms.

Usage:
    from eventforms.validators import validate_event_form

    result = validate_event_form(form_data)
    if not result.valid:
        # Show result.errors[field] under each field
"""

from eventforms.validators.engine import (
    ValidationEngine,
    validation_engine,
    validate_event_form,
    validate_event_schedule,
    validate_login_form,
    validate_registration_form,
)
from eventforms.validators.models import (
    AggregateResult,
    FormErrors,
    NumberOptions,
    TextLengthOptions,
    ValidationResult,
)
from eventforms.validators.rules import (
    check_eligibility,
    check_registration_open,
    is_institutional_email,
    participant_type,
    validate_date,
    validate_email,
    validate_future_date,
    validate_name,
    validate_number,
    validate_password,
    validate_phone,
    validate_required,
    validate_text_length,
    validate_time,
    validate_url,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate_event_form",
    "validate_event_schedule",
    "validate_login_form",
    "validate_registration_form",
    "AggregateResult",
    "FormErrors",
    "NumberOptions",
    "TextLengthOptions",
    "ValidationResult",
    "check_eligibility",
    "check_registration_open",
    "is_institutional_email",
    "participant_type",
    "validate_date",
    "validate_email",
    "validate_future_date",
    "validate_name",
    "validate_number",
    "validate_password",
    "validate_phone",
    "validate_required",
    "validate_text_length",
    "validate_time",
    "validate_url",
]
