"""Tag resolution for weekly maintenance windows."""

from datetime import date, datetime, timedelta

from ..models.window import MaintenanceWindow, Weekday

TAG_FORMAT = "%Y%m%d"


def format_tag(day: date) -> str:
    """Format a calendar date as a YYYYMMDD tag."""
    return day.strftime(TAG_FORMAT)


class TagResolver:
    """Resolves the dated image tag that applies to a maintenance window.

    The resolver only holds the image day, the weekday on which a dated
    image is produced. It has no other state, so one instance can serve
    concurrent requests.
    """

    def __init__(self, image_day: int = Weekday.MONDAY) -> None:
        """
        Initialize the resolver.

        Args:
            image_day: Weekday the image is built on, Sunday=0.
        """
        self.image_day = Weekday(image_day)

    def resolve(self, day: int, hour: int, current_time: datetime) -> str:
        """
        Resolve the tag for a maintenance window at the given time.

        If this week's window has already passed, the tag of the current
        cycle is returned, otherwise the tag of the previous cycle.

        Args:
            day: Window day of week, Sunday=0.
            hour: Window hour of day.
            current_time: The moment to resolve for, in local wall-clock time.

        Returns:
            The tag in YYYYMMDD format.

        Raises:
            InvalidWindowError: If day or hour is out of range.
        """
        window = MaintenanceWindow(day=day, hour=hour)

        # Minutes and seconds are kept, so the window is met only once the
        # current minute reaches it.
        window_instant = current_time + timedelta(
            days=window.weekday - Weekday.of(current_time),
            hours=window.hour - current_time.hour,
        )

        if current_time >= window_instant:
            return self.current_tag(current_time)
        return self.previous_tag(current_time)

    def current_tag(self, current_time: datetime | date) -> str:
        """Get the tag of the image built on or before current_time."""
        return format_tag(self.floor_to_image_day(current_time))

    def previous_tag(self, current_time: datetime | date) -> str:
        """Get the tag of the image from the previous cycle."""
        # Before the image day the walk back already lands in last week.
        if Weekday.of(current_time) < self.image_day:
            return self.current_tag(current_time)
        return self.current_tag(current_time - timedelta(days=7))

    def floor_to_image_day(self, moment: datetime | date) -> date:
        """Walk back from moment to the nearest date on the image day."""
        day = moment.date() if isinstance(moment, datetime) else moment
        while Weekday.of(day) != self.image_day:
            day -= timedelta(days=1)
        return day


def resolve_tag(image_day: int, day: int, hour: int, current_time: datetime) -> str:
    """Resolve the tag for a window without keeping a resolver around."""
    return TagResolver(image_day).resolve(day, hour, current_time)
