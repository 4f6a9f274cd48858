"""Reference data — participant types, event types, eligibility, categories, field limits.

The single source of truth for the closed sets the validators check against.
Institutional email domains live in settings (see eventforms.config).
"""

# ──────────────────────────────────────────────────────────────────────
# PARTICIPANT TYPES
# ──────────────────────────────────────────────────────────────────────

PARTICIPANT_IIIT = "iiit"
PARTICIPANT_NON_IIIT = "non-iiit"

# ──────────────────────────────────────────────────────────────────────
# EVENTS
# ──────────────────────────────────────────────────────────────────────

EVENT_TYPES: frozenset[str] = frozenset({"normal", "merchandise"})

ELIGIBILITY_ALL = "all"

ELIGIBILITY_OPTIONS: dict[str, str] = {
    ELIGIBILITY_ALL: "All Participants",
    PARTICIPANT_IIIT: "IIIT Students Only",
    PARTICIPANT_NON_IIIT: "Non-IIIT Only",
}

EVENT_CATEGORIES: list[str] = [
    "Technical",
    "Cultural",
    "Sports",
    "Literary",
    "Gaming",
    "Music",
    "Art & Design",
    "Photography",
    "Robotics",
    "AI/ML",
    "Web Development",
    "Entrepreneurship",
    "Film Making",
    "Dance",
    "Debate",
    "Quiz",
    "Social Service",
    "General",
    "Other",
]

# ──────────────────────────────────────────────────────────────────────
# FIELD LIMITS
# ──────────────────────────────────────────────────────────────────────

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

EVENT_NAME_LENGTH = (3, 100)
VENUE_LENGTH = (3, 200)
DESCRIPTION_LENGTH = (10, 2000)
CAPACITY_RANGE = (1, 10_000)

ALLOWED_URL_SCHEMES: frozenset[str] = frozenset({"http", "https"})
