"""Login Form Validator."""

from datetime import datetime
from typing import Any, Mapping, Optional

from eventforms.validators.base import BaseFormValidator
from eventforms.validators.models import FormErrors
from eventforms.validators.rules import validate_email, validate_required


class LoginFormValidator(BaseFormValidator):
    """Email must be well-formed; the password only has to be present."""

    @property
    def form(self) -> str:
        return "login"

    def validate(self, data: Mapping[str, Any], now: Optional[datetime] = None) -> FormErrors:
        errors: FormErrors = {}
        self._record(errors, "email", validate_email(self._get(data, "email")))
        self._record(errors, "password", validate_required(self._get(data, "password"), "Password"))
        return errors
