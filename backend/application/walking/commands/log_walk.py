"""Log walk command and handler.

Ingestion path for new walks: the walk is stored, then the day's aggregate
and the streak are recomputed through the recalculation cascade.
"""

import logging
from dataclasses import dataclass
from datetime import date as DateType
from typing import Optional

from application.walking.orchestrators.recalculation_cascade import RecalculationCascade
from domain.shared.ports.event_bus import IEventBus
from domain.walking.core.entities import (
    DailyAggregate,
    HeartRateSummary,
    StreakState,
    UserProfile,
    WalkRecord,
)
from domain.walking.core.events import StreakRecalculated, WalkLogged
from domain.walking.core.exceptions import InvalidInputError
from domain.walking.core.ports.repository import IWalkingRepository

logger = logging.getLogger(__name__)

# Average stride used when the device reports no distance
METERS_PER_STEP = 0.762


@dataclass(frozen=True)
class LogWalkCommand:
    """
    Command: Log a walk.

    Attributes:
        user_id: Owning user
        date: Calendar date of the walk
        steps: Step count (must be positive)
        duration_minutes: Optional duration
        distance_meters: Optional distance (estimated from steps if missing)
        average_heart_rate: Optional average BPM
        max_heart_rate: Optional peak BPM
        auto_detected: True when detected by the device
    """

    user_id: str
    date: DateType
    steps: int
    duration_minutes: Optional[int] = None
    distance_meters: Optional[float] = None
    average_heart_rate: Optional[int] = None
    max_heart_rate: Optional[int] = None
    auto_detected: bool = False


@dataclass(frozen=True)
class LogWalkResult:
    """Stored walk plus the derived rows it produced."""

    walk: WalkRecord
    aggregate: Optional[DailyAggregate]
    streak: StreakState


class LogWalkCommandHandler:
    """Handler for LogWalkCommand."""

    def __init__(
        self,
        repository: IWalkingRepository,
        event_bus: IEventBus,
        cascade: Optional[RecalculationCascade] = None,
    ):
        """
        Initialize handler.

        Args:
            repository: Walking repository port
            event_bus: Event bus port
            cascade: Recalculation cascade (default: built on repository)
        """
        self._repository = repository
        self._event_bus = event_bus
        self._cascade = cascade or RecalculationCascade(repository)

    async def handle(self, command: LogWalkCommand) -> LogWalkResult:
        """
        Execute log walk command.

        Flow:
        1. Validate input
        2. Create the profile with the default goal on first walk
        3. Store the walk
        4. Recompute the day's aggregate and the streak through the cascade
        5. Publish WalkLogged and StreakRecalculated

        Raises:
            InvalidInputError: If steps, duration, distance or heart rate are invalid
            StoreFailureError: If the store fails
        """
        self._validate(command)

        logger.info(
            "Logging walk",
            extra={
                "user_id": command.user_id,
                "date": command.date.isoformat(),
                "steps": command.steps,
            },
        )

        if await self._repository.get_profile(command.user_id) is None:
            await self._repository.save_profile(UserProfile(user_id=command.user_id))
            logger.info("Created default profile", extra={"user_id": command.user_id})

        walk = WalkRecord.create(
            user_id=command.user_id,
            date=command.date,
            steps=command.steps,
            duration_minutes=command.duration_minutes,
            distance_meters=(
                command.distance_meters
                if command.distance_meters is not None
                else round(command.steps * METERS_PER_STEP, 1)
            ),
            heart_rate=self._heart_rate(command),
            auto_detected=command.auto_detected,
        )
        await self._repository.save_walk(walk)

        result = await self._cascade.recalculate_dates(command.user_id, [command.date])
        aggregate = result.aggregates.get(command.date)
        streak = result.streak

        await self._event_bus.publish_all(
            [
                WalkLogged.create(
                    walk_id=walk.id,
                    user_id=walk.user_id,
                    date=walk.date,
                    steps=walk.steps,
                    day_total_steps=aggregate.total_steps if aggregate else 0,
                    goal_met=aggregate.goal_met if aggregate else False,
                ),
                StreakRecalculated.create(
                    user_id=streak.user_id,
                    previous_streak=result.previous_streak,
                    current_streak=streak.current_streak,
                    longest_streak=streak.longest_streak,
                    last_activity_date=streak.last_activity_date,
                ),
            ]
        )

        return LogWalkResult(walk=walk, aggregate=aggregate, streak=streak)

    @staticmethod
    def _validate(command: LogWalkCommand) -> None:
        if command.steps <= 0:
            raise InvalidInputError(f"Steps must be positive, got {command.steps}")
        if command.duration_minutes is not None and command.duration_minutes < 0:
            raise InvalidInputError(
                f"Duration must be non-negative, got {command.duration_minutes}"
            )
        if command.distance_meters is not None and command.distance_meters < 0:
            raise InvalidInputError(
                f"Distance must be non-negative, got {command.distance_meters}"
            )
        for name, bpm in (
            ("average_heart_rate", command.average_heart_rate),
            ("max_heart_rate", command.max_heart_rate),
        ):
            if bpm is not None and bpm <= 0:
                raise InvalidInputError(f"{name} must be positive, got {bpm}")

    @staticmethod
    def _heart_rate(command: LogWalkCommand) -> Optional[HeartRateSummary]:
        if command.average_heart_rate is None and command.max_heart_rate is None:
            return None
        return HeartRateSummary(
            average_bpm=command.average_heart_rate,
            max_bpm=command.max_heart_rate,
        )
