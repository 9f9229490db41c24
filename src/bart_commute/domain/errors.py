"""Errors raised while planning a commute."""


class CommuteError(Exception):
    """Base exception for commute planning failures."""


class ScheduleUnavailableError(CommuteError):
    """The schedule lookup could not be reached or did not return JSON."""


class ScheduleApiError(CommuteError):
    """The schedule API answered with an error message of its own."""


class TripNotFoundError(CommuteError):
    """The schedule response contains no trip for the requested time."""


class MalformedScheduleResponseError(CommuteError):
    """The schedule response is missing expected fields or holds invalid values."""
