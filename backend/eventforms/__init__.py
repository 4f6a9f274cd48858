"""eventforms — validation rules for an event-management platform's forms.

Logging is left to the host application. Call ``configure_logging()`` from
your entry point to get the structlog setup this package ships with.
"""

from eventforms.logging_config import configure_logging

__all__ = ["configure_logging"]

__version__ = "1.0.0"
