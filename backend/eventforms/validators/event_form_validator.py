"""Event Form Validator — name, date, time window, venue, description, capacity."""

from datetime import datetime
from typing import Any, Mapping, Optional

from eventforms.validators import reference_data as ref
from eventforms.validators.base import BaseFormValidator
from eventforms.validators.models import FormErrors, NumberOptions, TextLengthOptions
from eventforms.validators.rules import (
    local_day,
    time_to_minutes,
    validate_future_date,
    validate_number,
    validate_text_length,
    validate_time,
)


class EventFormValidator(BaseFormValidator):
    """Validates the organizer's create-event form."""

    @property
    def form(self) -> str:
        return "event"

    def validate(self, data: Mapping[str, Any], now: Optional[datetime] = None) -> FormErrors:
        errors: FormErrors = {}
        today = local_day(now) if now else None

        min_len, max_len = ref.EVENT_NAME_LENGTH
        self._record(errors, "eventName", validate_text_length(
            self._get(data, "eventName"), "Event name",
            TextLengthOptions(min=min_len, max=max_len),
        ))

        self._record(errors, "eventDate", validate_future_date(
            self._get(data, "eventDate"), "Event date", today=today,
        ))

        start_time = self._get(data, "startTime")
        end_time = self._get(data, "endTime")
        start_ok = self._record(errors, "startTime", validate_time(start_time, "Start time"))
        end_ok = self._record(errors, "endTime", validate_time(end_time, "End time"))

        # Ordering is only meaningful once both times parse
        if start_ok and end_ok and time_to_minutes(end_time) <= time_to_minutes(start_time):
            errors["endTime"] = "End time must be after start time"

        min_len, max_len = ref.VENUE_LENGTH
        self._record(errors, "venue", validate_text_length(
            self._get(data, "venue"), "Venue",
            TextLengthOptions(min=min_len, max=max_len),
        ))

        min_len, max_len = ref.DESCRIPTION_LENGTH
        self._record(errors, "description", validate_text_length(
            self._get(data, "description"), "Description",
            TextLengthOptions(min=min_len, max=max_len),
        ))

        capacity = self._get(data, "maxCapacity")
        if self._supplied(capacity):
            low, high = ref.CAPACITY_RANGE
            self._record(errors, "maxCapacity", validate_number(
                capacity, "Max capacity",
                NumberOptions(min=low, max=high, integer=True, required=False),
            ))

        return errors
