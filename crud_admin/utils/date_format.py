"""Timestamp parsing and formatting for date-valued properties.

Record values arrive in whatever shape the data-access layer produced them:
datetime/date objects, ISO 8601 strings or unix timestamps. Anything that
cannot be read as a point in time formats to INVALID_DATE instead of raising,
so a bad value never breaks a whole list page.
"""

from datetime import date, datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from crud_admin.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

INVALID_DATE = "Invalid date"

_datetime_adapter = TypeAdapter(datetime)
_date_adapter = TypeAdapter(date)


def parse_timestamp(value: Any) -> datetime | None:
    """Coerce a raw record value into a datetime.

    Args:
        value: Raw value read from a record

    Returns:
        Parsed datetime, or None if the value is missing or unparseable
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        return _datetime_adapter.validate_python(value)
    except ValidationError:
        pass

    # date-only strings such as "2024-03-01"
    try:
        parsed = _date_adapter.validate_python(value)
    except ValidationError:
        log_with_context(
            logger,
            "debug",
            "Unparseable timestamp value",
            value=repr(value),
            value_type=type(value).__name__,
            event_type="timestamp_invalid",
        )
        return None
    return datetime(parsed.year, parsed.month, parsed.day)


def format_timestamp(value: Any, pattern: str) -> str:
    """Format a raw record value with a strftime pattern.

    Args:
        value: Raw value read from a record
        pattern: strftime pattern, e.g. "%Y-%m-%d %H:%M"

    Returns:
        Formatted string, or INVALID_DATE when the value cannot be parsed
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime(pattern)
