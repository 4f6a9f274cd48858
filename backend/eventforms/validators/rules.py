"""Primitive field rules — pure functions from a candidate value to a ValidationResult.

Contract for every rule:
    - never raises, whatever the input
    - no I/O, no logging
    - same input → same output (future-date checks read the local date
      unless the caller injects one)

"Absent" means None or a blank string. Numeric zero is a present value.
"""

import ipaddress
import math
import re
from datetime import date, datetime, time
from typing import Any, Iterable, Optional
from urllib.parse import urlsplit

from eventforms.config import get_settings
from eventforms.validators import reference_data as ref
from eventforms.validators.models import Number, NumberOptions, TextLengthOptions, ValidationResult

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[6-9][0-9]{9}")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")
NAME_PATTERN = re.compile(r"[A-Za-z\s\-']+")
TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")
LETTER_PATTERN = re.compile(r"[A-Za-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
# Characters a URL host may not contain
HOST_FORBIDDEN = re.compile(r"[\x00-\x20\x7f#/<>?@\[\\\]^|]")

PASSWORD_STRENGTH_HINT = "For better security, use a mix of letters and numbers"


# ── Helpers ──

def _is_blank(value: Any) -> bool:
    """None, or a string that is empty after trimming."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def _is_missing(value: Any) -> bool:
    """None or the empty string. Whitespace-only strings are present."""
    return value is None or (isinstance(value, str) and value == "")


def _format_bound(bound: Number) -> str:
    """Render a bound the way a user typed it: 1, not 1.0."""
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def to_number(value: Any) -> Optional[Number]:
    """Coerce a form value to a finite number, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            num = float(text)
        except ValueError:
            return None
        return num if math.isfinite(num) else None
    return None


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a date/datetime/ISO-8601 string. Returns None when unparseable."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def local_day(moment: datetime) -> date:
    """Calendar day of a datetime in local time. Naive datetimes are already local."""
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def as_local_naive(moment: datetime) -> datetime:
    """Drop tzinfo after converting to local time so aware and naive values compare."""
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment


def _is_valid_host(host: str) -> bool:
    """A registered name without forbidden characters, or an IP literal."""
    if ":" in host:
        try:
            ipaddress.ip_address(host)
        except ValueError:
            return False
        return True
    return HOST_FORBIDDEN.search(host) is None


def time_to_minutes(value: str) -> int:
    """Minutes since midnight for a string already accepted by validate_time."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


# ── Identity ──

def validate_email(email: Optional[str]) -> ValidationResult:
    if _is_blank(email):
        return ValidationResult.fail("Email is required")

    if not EMAIL_PATTERN.fullmatch(str(email)):
        return ValidationResult.fail("Please enter a valid email address")

    return ValidationResult.ok()


def is_institutional_email(email: Optional[str], domains: Optional[Iterable[str]] = None) -> bool:
    """True if the email ends with the primary or student institutional domain."""
    if not isinstance(email, str):
        return False
    if domains is None:
        domains = get_settings().institutional_domains
    return email.endswith(tuple(domains))


def participant_type(email: Optional[str], domains: Optional[Iterable[str]] = None) -> str:
    """Classify a registrant as "iiit" or "non-iiit" from their email.

    Staff domains (faculty, research) count as IIIT here, unlike
    is_institutional_email.
    """
    if domains is None:
        domains = get_settings().participant_domains
    if is_institutional_email(email, domains):
        return ref.PARTICIPANT_IIIT
    return ref.PARTICIPANT_NON_IIIT


def check_eligibility(email: Optional[str], eligibility: Optional[str]) -> ValidationResult:
    """Check whether a participant may register for an event with this eligibility."""
    if _is_missing(eligibility) or eligibility == ref.ELIGIBILITY_ALL:
        return ValidationResult.ok()

    if not isinstance(eligibility, str) or eligibility not in ref.ELIGIBILITY_OPTIONS:
        return ValidationResult.fail(f"Unknown eligibility '{eligibility}'")

    kind = participant_type(email)
    if eligibility == ref.PARTICIPANT_IIIT and kind != ref.PARTICIPANT_IIIT:
        return ValidationResult.fail("This event is restricted to IIIT students only")
    if eligibility == ref.PARTICIPANT_NON_IIIT and kind != ref.PARTICIPANT_NON_IIIT:
        return ValidationResult.fail("This event is restricted to Non-IIIT participants only")

    return ValidationResult.ok()


def validate_password(password: Optional[str]) -> ValidationResult:
    if _is_blank(password):
        return ValidationResult.fail("Password is required")

    password = str(password)
    if len(password) < ref.PASSWORD_MIN_LENGTH:
        return ValidationResult.fail(
            f"Password must be at least {ref.PASSWORD_MIN_LENGTH} characters long"
        )
    if len(password) > ref.PASSWORD_MAX_LENGTH:
        return ValidationResult.fail(
            f"Password must not exceed {ref.PASSWORD_MAX_LENGTH} characters"
        )

    if not LETTER_PATTERN.search(password) or not DIGIT_PATTERN.search(password):
        return ValidationResult.ok(warning=PASSWORD_STRENGTH_HINT)

    return ValidationResult.ok()


def validate_phone(phone: Optional[str], required: bool = True) -> ValidationResult:
    if _is_blank(phone):
        if required:
            return ValidationResult.fail("Phone number is required")
        return ValidationResult.ok()

    digits = PHONE_SEPARATORS.sub("", str(phone))
    if not PHONE_PATTERN.fullmatch(digits):
        return ValidationResult.fail("Please enter a valid 10-digit Indian phone number")

    return ValidationResult.ok()


def validate_name(name: Optional[str], field_name: str = "Name") -> ValidationResult:
    if _is_blank(name):
        return ValidationResult.fail(f"{field_name} is required")

    name = str(name)
    length = len(name.strip())
    if length < ref.NAME_MIN_LENGTH:
        return ValidationResult.fail(
            f"{field_name} must be at least {ref.NAME_MIN_LENGTH} characters long"
        )
    if length > ref.NAME_MAX_LENGTH:
        return ValidationResult.fail(
            f"{field_name} must not exceed {ref.NAME_MAX_LENGTH} characters"
        )

    if not NAME_PATTERN.fullmatch(name):
        return ValidationResult.fail(
            f"{field_name} can only contain letters, spaces, hyphens, and apostrophes"
        )

    return ValidationResult.ok()


# ── Generic ──

def validate_required(value: Any, field_name: str) -> ValidationResult:
    if _is_blank(value):
        return ValidationResult.fail(f"{field_name} is required")
    return ValidationResult.ok()


def validate_url(url: Optional[str], required: bool = False) -> ValidationResult:
    if _is_blank(url):
        if required:
            return ValidationResult.fail("URL is required")
        return ValidationResult.ok()

    try:
        parts = urlsplit(str(url).strip())
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError:
        return ValidationResult.fail("Please enter a valid URL")

    if not parts.scheme:
        return ValidationResult.fail("Please enter a valid URL")
    if parts.scheme not in ref.ALLOWED_URL_SCHEMES:
        return ValidationResult.fail("URL must start with http:// or https://")
    if not parts.hostname or not _is_valid_host(parts.hostname):
        return ValidationResult.fail("Please enter a valid URL")

    return ValidationResult.ok()


def validate_number(
    value: Any,
    field_name: str,
    options: Optional[NumberOptions] = None,
) -> ValidationResult:
    options = options or NumberOptions()

    if _is_blank(value):
        if options.required:
            return ValidationResult.fail(f"{field_name} is required")
        return ValidationResult.ok()

    num = to_number(value)
    if num is None:
        return ValidationResult.fail(f"{field_name} must be a number")

    if options.integer and not (isinstance(num, int) or num.is_integer()):
        return ValidationResult.fail(f"{field_name} must be a whole number")

    if options.min is not None and num < options.min:
        return ValidationResult.fail(f"{field_name} must be at least {_format_bound(options.min)}")

    if options.max is not None and num > options.max:
        return ValidationResult.fail(f"{field_name} must not exceed {_format_bound(options.max)}")

    return ValidationResult.ok()


def validate_text_length(
    text: Optional[str],
    field_name: str,
    options: Optional[TextLengthOptions] = None,
) -> ValidationResult:
    options = options or TextLengthOptions()

    if _is_blank(text):
        if options.required:
            return ValidationResult.fail(f"{field_name} is required")
        return ValidationResult.ok()

    length = len(str(text).strip())

    if options.min is not None and length < options.min:
        return ValidationResult.fail(f"{field_name} must be at least {options.min} characters")

    if options.max is not None and length > options.max:
        return ValidationResult.fail(f"{field_name} must not exceed {options.max} characters")

    return ValidationResult.ok()


# ── Dates & times ──

def validate_date(value: Any, field_name: str = "Date") -> ValidationResult:
    if _is_missing(value):
        return ValidationResult.fail(f"{field_name} is required")

    if parse_date(value) is None:
        return ValidationResult.fail(f"Please enter a valid {field_name.lower()}")

    return ValidationResult.ok()


def validate_future_date(
    value: Any,
    field_name: str = "Date",
    today: Optional[date] = None,
) -> ValidationResult:
    """Valid date that is today or later. Time of day is ignored."""
    basic = validate_date(value, field_name)
    if not basic.valid:
        return basic

    today = today or date.today()
    if local_day(parse_date(value)) < today:
        return ValidationResult.fail(f"{field_name} must be in the future")

    return ValidationResult.ok()


def validate_time(value: Optional[str], field_name: str = "Time") -> ValidationResult:
    if _is_missing(value):
        return ValidationResult.fail(f"{field_name} is required")

    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        return ValidationResult.fail(f"Please enter a valid {field_name.lower()} in HH:MM format")

    return ValidationResult.ok()


def check_registration_open(deadline: Any, now: Optional[datetime] = None) -> ValidationResult:
    """A registration attempt after the event's deadline is rejected."""
    parsed = parse_date(deadline)
    if parsed is None:
        return ValidationResult.ok()

    now = now or datetime.now()
    if as_local_naive(now) > as_local_naive(parsed):
        return ValidationResult.fail("Registration deadline has passed for this event")

    return ValidationResult.ok()
