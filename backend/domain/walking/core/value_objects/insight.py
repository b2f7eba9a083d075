"""Insight value object - ephemeral, ranked user-facing message."""

from dataclasses import dataclass
from enum import Enum


class InsightCategory(str, Enum):
    """Kind of insight.

    - POSITIVE: reinforcement of what the user already does
    - NUDGE: gentle push towards a near target
    - MILESTONE: one-time celebration of an exact value
    """

    POSITIVE = "positive"
    NUDGE = "nudge"
    MILESTONE = "milestone"


@dataclass(frozen=True)
class Insight:
    """Insight computed per view and never persisted.

    Attributes:
        id: Stable identifier of the insight kind (e.g. "current-streak")
        category: Insight category
        icon: Icon name hint for clients
        title: Short display title
        description: Display sentence
        priority: Ranking weight, higher first
    """

    id: str
    category: InsightCategory
    icon: str
    title: str
    description: str
    priority: int
