# SPDX-License-Identifier: MIT


class PlanningError(Exception):
    """Base class for every error raised by planning."""


class DateParseError(PlanningError, ValueError):
    def __init__(self, message: str, expression: str) -> None:
        super().__init__(message)
        self.expression = expression


class MalformedDateError(DateParseError):
    """A single date token is not `<day> <month name> <year>`."""


class MalformedRangeError(DateParseError):
    """A range expression does not split into exactly two dates."""


class NoValidTasksError(PlanningError):
    """No record survived filtering, so no timeline can be laid out."""


class CallerPreconditionError(PlanningError, ValueError):
    pass


class PlanningNotFoundError(PlanningError, LookupError):
    pass


class PlanningSourceError(PlanningError):
    """A planning file exists but cannot be read as CSV text."""
