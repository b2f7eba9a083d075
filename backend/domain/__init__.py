"""Domain layer for walk tracking.

Business logic for walks, daily aggregates, streaks and insights, decoupled
from the GraphQL presentation and from the persistence infrastructure.
"""
