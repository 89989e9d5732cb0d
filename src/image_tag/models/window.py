"""Maintenance window domain model."""

from dataclasses import dataclass
from datetime import date
from enum import IntEnum

from image_tag.exceptions import InvalidWindowError, WindowParseError


class Weekday(IntEnum):
    """Day of week, Sunday=0 through Saturday=6."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, moment: date) -> "Weekday":
        """Get the weekday of a date or datetime."""
        # isoweekday() is Monday=1 .. Sunday=7
        return cls(moment.isoweekday() % 7)


@dataclass(frozen=True)
class MaintenanceWindow:
    """Weekly instant (day of week, hour) at which maintenance is due."""

    day: int
    hour: int

    def __post_init__(self) -> None:
        if not 0 <= self.day <= 6:
            raise InvalidWindowError(f"day {self.day} is outside 0-6")
        if not 0 <= self.hour <= 23:
            raise InvalidWindowError(f"hour {self.hour} is outside 0-23")

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.day)


def parse_window(day: str, hour: str) -> MaintenanceWindow:
    """
    Parse raw day and hour path segments into a MaintenanceWindow.

    Args:
        day: Day of week as a decimal string, Sunday=0.
        hour: Hour of day as a decimal string.

    Returns:
        The validated window.

    Raises:
        WindowParseError: If either value is not an integer.
        InvalidWindowError: If either value is out of range.
    """
    try:
        parsed_day = int(day)
    except ValueError as e:
        raise WindowParseError(f"error parsing day: {e}") from e
    try:
        parsed_hour = int(hour)
    except ValueError as e:
        raise WindowParseError(f"error parsing hour: {e}") from e
    return MaintenanceWindow(day=parsed_day, hour=parsed_hour)
