"""SummaryStats value object - window statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryStats:
    """Statistics over a history window.

    Attributes:
        total_steps: Sum of daily aggregate totals
        total_walks: Number of walks logged in the window
        average_steps: Average steps per active day (rounded)
        days_goal_met: Days with goal met
        goal_met_percentage: days_goal_met / active days * 100 (rounded)
    """

    total_steps: int = 0
    total_walks: int = 0
    average_steps: int = 0
    days_goal_met: int = 0
    goal_met_percentage: int = 0
