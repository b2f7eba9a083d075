"""DateRange value object - inclusive calendar window."""

from dataclasses import dataclass
from datetime import date as DateType


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates.

    Attributes:
        start_date: First day of the window
        end_date: Last day of the window
    """

    start_date: DateType
    end_date: DateType

    def __post_init__(self) -> None:
        """Validate ordering.

        Raises:
            ValueError: If start_date is after end_date
        """
        if self.start_date > self.end_date:
            raise ValueError(
                f"start_date {self.start_date} is after end_date {self.end_date}"
            )

    def contains(self, day: DateType) -> bool:
        return self.start_date <= day <= self.end_date

    @property
    def days(self) -> int:
        """Number of calendar days in the window."""
        return (self.end_date - self.start_date).days + 1
