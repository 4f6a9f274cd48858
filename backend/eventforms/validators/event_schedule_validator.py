"""Event Schedule Validator — the rules the events API enforces before persisting.

Checks event identity, date ordering against the current instant and against
each other, category and eligibility, and registration limits. Dates are optional while an
event is a draft; publishing requires all three.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from eventforms.validators import reference_data as ref
from eventforms.validators.base import BaseFormValidator
from eventforms.validators.models import FormErrors, NumberOptions
from eventforms.validators.rules import (
    as_local_naive,
    parse_date,
    validate_date,
    validate_number,
    validate_required,
)

# (field, label used in messages)
DATE_FIELDS = (
    ("eventStartDate", "Event start date"),
    ("eventEndDate", "Event end date"),
    ("registrationDeadline", "Registration deadline"),
)

PUBLISHED = "published"


class EventScheduleValidator(BaseFormValidator):
    """Validates an event create/update payload the way the events API does."""

    @property
    def form(self) -> str:
        return "event_schedule"

    def validate(self, data: Mapping[str, Any], now: Optional[datetime] = None) -> FormErrors:
        errors: FormErrors = {}
        now = as_local_naive(now or datetime.now())

        # ── 1. Identity ──
        self._record(errors, "eventName", validate_required(self._get(data, "eventName"), "Event name"))
        self._check_event_type(errors, self._get(data, "eventType"))

        # ── 2. Dates parse ──
        dates: dict[str, datetime] = {}
        for field, label in DATE_FIELDS:
            value = self._get(data, field)
            if not self._supplied(value):
                continue
            if self._record(errors, field, validate_date(value, label)):
                dates[field] = as_local_naive(parse_date(value))

        # ── 3. Ordering ──
        self._check_ordering(errors, dates, now)

        # ── 4. Publishing needs a complete schedule ──
        if self._get(data, "status") == PUBLISHED and any(
            not self._supplied(self._get(data, field)) for field, _ in DATE_FIELDS
        ):
            errors["schedule"] = "Event must have start date, end date, and registration deadline before publishing"

        # ── 5. Category ──
        category = self._get(data, "category")
        if self._supplied(category) and not self._one_of(category, ref.EVENT_CATEGORIES):
            errors["category"] = f"Unknown category '{category}'"

        # ── 6. Eligibility & limits ──
        eligibility = self._get(data, "eligibility")
        if self._supplied(eligibility) and not self._one_of(eligibility, ref.ELIGIBILITY_OPTIONS):
            errors["eligibility"] = (
                f"Eligibility must be one of: {', '.join(sorted(ref.ELIGIBILITY_OPTIONS))}"
            )

        self._record(errors, "registrationLimit", validate_number(
            self._get(data, "registrationLimit"), "Registration limit",
            NumberOptions(min=1, integer=True, required=False),
        ))
        self._record(errors, "registrationFee", validate_number(
            self._get(data, "registrationFee"), "Registration fee",
            NumberOptions(min=0, required=False),
        ))

        return errors

    def _check_event_type(self, errors: FormErrors, event_type: Any) -> None:
        if not self._record(errors, "eventType", validate_required(event_type, "Event type")):
            return
        if not self._one_of(event_type, ref.EVENT_TYPES):
            errors["eventType"] = f"Event type must be one of: {', '.join(sorted(ref.EVENT_TYPES))}"

    @staticmethod
    def _check_ordering(errors: FormErrors, dates: dict[str, datetime], now: datetime) -> None:
        start = dates.get("eventStartDate")
        end = dates.get("eventEndDate")
        deadline = dates.get("registrationDeadline")

        if start is not None and start < now:
            errors["eventStartDate"] = "Event start date cannot be in the past"

        if end is not None:
            if end < now:
                errors["eventEndDate"] = "Event end date cannot be in the past"
            elif start is not None and end <= start:
                errors["eventEndDate"] = "Event end date must be after start date"

        if deadline is not None:
            if deadline < now:
                errors["registrationDeadline"] = "Registration deadline cannot be in the past"
            elif start is not None and deadline > start:
                errors["registrationDeadline"] = "Registration deadline must be before event start date"
