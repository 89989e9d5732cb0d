"""Path convertors enforcing the window URL acceptance rules.

A path segment that does not match a convertor's regex never matches the
route, so the router answers 404 before any handler runs.
"""

from starlette.convertors import Convertor, register_url_convertor


class WeekdayConvertor(Convertor[str]):
    """Single digit day of week, 0-6."""

    regex = "[0-6]"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


class HourConvertor(Convertor[str]):
    """Two digit hour of day, 00-23."""

    regex = "2[0-3]|[01][0-9]"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("weekday", WeekdayConvertor())
register_url_convertor("hour", HourConvertor())
