"""Registration Form Validator — participant sign-up.

External registrants must name their college or organization; institutional
emails are exempt.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from eventforms.validators.base import BaseFormValidator
from eventforms.validators.models import FormErrors
from eventforms.validators.rules import (
    is_institutional_email,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
    validate_required,
)


class RegistrationFormValidator(BaseFormValidator):
    """Validates the participant registration form."""

    @property
    def form(self) -> str:
        return "registration"

    def validate(self, data: Mapping[str, Any], now: Optional[datetime] = None) -> FormErrors:
        errors: FormErrors = {}
        email = self._get(data, "email")
        password = self._get(data, "password")

        self._record(errors, "email", validate_email(email))
        self._record(errors, "password", validate_password(password))

        if password != self._get(data, "confirmPassword"):
            errors["confirmPassword"] = "Passwords do not match"

        self._record(errors, "firstName", validate_name(self._get(data, "firstName"), "First name"))
        self._record(errors, "lastName", validate_name(self._get(data, "lastName"), "Last name"))
        self._record(errors, "phoneNumber", validate_phone(self._get(data, "phoneNumber")))

        if not is_institutional_email(email):
            self._record(errors, "collegeName", validate_required(
                self._get(data, "collegeName"), "College/Organization name",
            ))

        return errors
