"""Set step goal command and handler."""

import logging
from dataclasses import dataclass

from domain.walking.core.entities import UserProfile
from domain.walking.core.exceptions import InvalidInputError
from domain.walking.core.ports.repository import IWalkingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetStepGoalCommand:
    """
    Command: Change the user's daily step goal.

    Existing aggregates keep the goal_met flag computed with the goal in
    force at the time; only later recomputations use the new goal.
    """

    user_id: str
    daily_step_goal: int


class SetStepGoalCommandHandler:
    """Handler for SetStepGoalCommand."""

    def __init__(self, repository: IWalkingRepository):
        self._repository = repository

    async def handle(self, command: SetStepGoalCommand) -> UserProfile:
        """
        Raises:
            InvalidInputError: If the goal is not positive
        """
        if command.daily_step_goal <= 0:
            raise InvalidInputError(
                f"Step goal must be positive, got {command.daily_step_goal}"
            )

        profile = UserProfile(user_id=command.user_id, daily_step_goal=command.daily_step_goal)
        await self._repository.save_profile(profile)

        logger.info(
            "Step goal updated",
            extra={"user_id": command.user_id, "daily_step_goal": command.daily_step_goal},
        )
        return profile
