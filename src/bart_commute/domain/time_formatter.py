"""Date and clock-time formats used by the BART schedule API."""

from datetime import datetime

SCHEDULE_DATETIME_FORMAT = "%m/%d/%Y %I:%M %p"


def format_date(instant: datetime) -> str:
    """Format a date as MM/DD/YYYY."""
    return instant.strftime("%m/%d/%Y")


def format_clock_time(instant: datetime) -> str:
    """Format a clock time as "hh:mm AM" for display."""
    meridiem = "AM" if instant.hour < 12 else "PM"
    hour = instant.hour % 12 or 12
    return f"{hour:02d}:{instant.minute:02d} {meridiem}"


def format_time(instant: datetime) -> str:
    """Format a clock time as "hh:mm+AM" for use in a schedule query.

    The space is replaced with "+" because the value is placed in the query
    string unencoded.
    """
    return format_clock_time(instant).replace(" ", "+")


def parse_schedule_datetime(date_label: str, time_label: str) -> datetime:
    """Parse a schedule date ("01/26/2023") and clock label ("8:10 AM") into a datetime.

    Raises:
        ValueError: If either label is not in the expected format.
    """
    return datetime.strptime(
        f"{date_label.strip()} {time_label.strip().upper()}", SCHEDULE_DATETIME_FORMAT
    )
