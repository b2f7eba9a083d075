"""WalkRecord entity - a single logged walk."""

from dataclasses import dataclass, field
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class HeartRateSummary:
    """Heart rate recorded during a walk (BPM).

    Attributes:
        average_bpm: Average heart rate over the walk
        max_bpm: Peak heart rate over the walk
    """

    average_bpm: Optional[int] = None
    max_bpm: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate BPM values are positive when present.

        Raises:
            ValueError: If a BPM value is not positive
        """
        for name, value in (("average_bpm", self.average_bpm), ("max_bpm", self.max_bpm)):
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class WalkRecord:
    """One logged walk.

    Owned by a user, created on logging and deleted on user action. Several
    walks may share the same calendar date; the daily aggregate for that
    date is the sum of their steps.

    Attributes:
        id: Unique walk identifier
        user_id: Owning user
        date: Calendar date of the walk (no time component)
        steps: Step count (non-negative)
        duration_minutes: Optional duration in minutes
        distance_meters: Optional distance in meters
        heart_rate: Optional heart rate summary
        auto_detected: True when the walk was detected by the device
        created_at: Creation timestamp (UTC)
    """

    id: UUID
    user_id: str
    date: DateType
    steps: int
    duration_minutes: Optional[int] = None
    distance_meters: Optional[float] = None
    heart_rate: Optional[HeartRateSummary] = None
    auto_detected: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate walk data.

        Raises:
            ValueError: If steps, duration or distance are negative
        """
        if self.steps < 0:
            raise ValueError(f"Steps must be non-negative, got {self.steps}")

        if self.duration_minutes is not None and self.duration_minutes < 0:
            raise ValueError(
                f"Duration must be non-negative, got {self.duration_minutes}"
            )

        if self.distance_meters is not None and self.distance_meters < 0:
            raise ValueError(
                f"Distance must be non-negative, got {self.distance_meters}"
            )

    @classmethod
    def create(
        cls,
        user_id: str,
        date: DateType,
        steps: int,
        duration_minutes: Optional[int] = None,
        distance_meters: Optional[float] = None,
        heart_rate: Optional[HeartRateSummary] = None,
        auto_detected: bool = False,
    ) -> "WalkRecord":
        """Create a new walk with a generated id.

        Example:
            >>> walk = WalkRecord.create("user-1", DateType(2025, 3, 1), 4200)
            >>> walk.steps
            4200
        """
        return cls(
            id=uuid4(),
            user_id=user_id,
            date=date,
            steps=steps,
            duration_minutes=duration_minutes,
            distance_meters=distance_meters,
            heart_rate=heart_rate,
            auto_detected=auto_detected,
        )
