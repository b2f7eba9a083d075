"""Main GraphQL schema for the walking backend.

Usage:
    from api.graphql.schema import create_schema
    schema = create_schema()
"""

from datetime import datetime, timezone

import strawberry

from api.graphql.resolvers.walking import WalkingMutations, WalkingQueries


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Walking history, insights and streak")  # type: ignore[misc]
    def walking(self) -> WalkingQueries:
        """Walking queries.

        Example:
            query {
              walking {
                history(userId: "user123", period: WEEK) { stats { totalSteps } }
                streak(userId: "user123") { currentStreak }
              }
            }
        """
        return WalkingQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Walking mutations")  # type: ignore[misc]
    def walking(self) -> WalkingMutations:
        return WalkingMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all walking resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
