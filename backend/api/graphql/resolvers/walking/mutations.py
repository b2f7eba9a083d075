"""Mutation resolvers for walking domain.

These resolvers execute CQRS commands:
- logWalk: Log a walk and recompute the day and the streak
- deleteWalk: Delete one walk (recalculation cascade)
- deleteWalks: Delete several walks (one cascade)
- recalculate: Full recomputation of a user's aggregates and streak
- setStepGoal: Change the daily step goal

Domain errors are returned as WalkingError with a code instead of raised.
"""

import logging
from typing import Any

import strawberry
from strawberry.types import Info

from api.graphql.resolvers.walking.parsing import parse_date, parse_walk_id
from api.graphql.types_walking import (
    DeleteWalksInput,
    DeleteWalksResult,
    DeleteWalksSuccess,
    LogWalkInput,
    LogWalkResult,
    LogWalkSuccess,
    RecalculateResult,
    RecalculateSuccess,
    StepGoalResult,
    StepGoalSuccess,
    WalkingError,
    error_code,
    map_aggregate,
    map_streak,
    map_walk,
)
from application.walking.commands import (
    DeleteWalkCommand,
    DeleteWalksCommand,
    LogWalkCommand,
    SetStepGoalCommand,
)
from application.walking.orchestrators.recalculation_cascade import CascadeResult
from domain.walking.core.exceptions import WalkingDomainError

logger = logging.getLogger(__name__)


def _error(operation: str, error: WalkingDomainError) -> WalkingError:
    code = error_code(error)
    logger.warning(
        "Walking mutation failed",
        extra={"operation": operation, "code": code, "error": str(error)},
    )
    return WalkingError(message=str(error), code=code)


def _deleted(result: CascadeResult) -> DeleteWalksSuccess:
    return DeleteWalksSuccess(
        deleted_walk_ids=[str(walk_id) for walk_id in result.deleted_walk_ids],
        affected_dates=[day.isoformat() for day in result.affected_dates],
        aggregates=[map_aggregate(a) for a in result.aggregates.values() if a is not None],
        streak=map_streak(result.streak),
    )


@strawberry.type
class WalkingMutations:
    """Mutations for walking domain operations."""

    @strawberry.mutation
    async def log_walk(self, info: Info[Any, Any], input: LogWalkInput) -> LogWalkResult:
        """Log a walk.

        Example:
            mutation {
              walking {
                logWalk(input: {userId: "user123", date: "2025-03-14", steps: 4200}) {
                  ... on LogWalkSuccess { aggregate { totalSteps, goalMet } }
                  ... on WalkingError { message, code }
                }
              }
            }
        """
        try:
            result = await info.context.get("log_walk_handler").handle(
                LogWalkCommand(
                    user_id=input.user_id,
                    date=parse_date(input.date),
                    steps=input.steps,
                    duration_minutes=input.duration_minutes,
                    distance_meters=input.distance_meters,
                    average_heart_rate=input.average_heart_rate,
                    max_heart_rate=input.max_heart_rate,
                    auto_detected=input.auto_detected,
                )
            )
        except WalkingDomainError as e:
            return _error("log_walk", e)

        return LogWalkSuccess(
            walk=map_walk(result.walk),
            aggregate=map_aggregate(result.aggregate) if result.aggregate else None,
            streak=map_streak(result.streak),
        )

    @strawberry.mutation
    async def delete_walk(
        self, info: Info[Any, Any], user_id: str, walk_id: str
    ) -> DeleteWalksResult:
        try:
            result = await info.context.get("delete_walk_handler").handle(
                DeleteWalkCommand(user_id=user_id, walk_id=parse_walk_id(walk_id))
            )
        except WalkingDomainError as e:
            return _error("delete_walk", e)
        return _deleted(result)

    @strawberry.mutation
    async def delete_walks(
        self, info: Info[Any, Any], input: DeleteWalksInput
    ) -> DeleteWalksResult:
        try:
            result = await info.context.get("delete_walks_handler").handle(
                DeleteWalksCommand(
                    user_id=input.user_id,
                    walk_ids=tuple(parse_walk_id(walk_id) for walk_id in input.walk_ids),
                )
            )
        except WalkingDomainError as e:
            return _error("delete_walks", e)
        return _deleted(result)

    @strawberry.mutation
    async def recalculate(self, info: Info[Any, Any], user_id: str) -> RecalculateResult:
        """Rebuild every aggregate and the streak of a user from their walks."""
        try:
            result = await info.context.get("recalculation_cascade").recalculate_all(user_id)
        except WalkingDomainError as e:
            return _error("recalculate", e)
        return RecalculateSuccess(
            affected_dates=[day.isoformat() for day in result.affected_dates],
            streak=map_streak(result.streak),
        )

    @strawberry.mutation
    async def set_step_goal(
        self, info: Info[Any, Any], user_id: str, daily_step_goal: int
    ) -> StepGoalResult:
        try:
            profile = await info.context.get("set_step_goal_handler").handle(
                SetStepGoalCommand(user_id=user_id, daily_step_goal=daily_step_goal)
            )
        except WalkingDomainError as e:
            return _error("set_step_goal", e)
        return StepGoalSuccess(user_id=profile.user_id, daily_step_goal=profile.step_goal)
