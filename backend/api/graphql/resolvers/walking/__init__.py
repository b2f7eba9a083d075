"""Walking GraphQL resolvers."""

from .mutations import WalkingMutations
from .queries import WalkingQueries

__all__ = ["WalkingQueries", "WalkingMutations"]
