"""Event bus port (interface).

Defines contract for event publishing and subscription.
Follows the Dependency Inversion Principle: domain defines the port,
infrastructure provides the implementation.
"""

from typing import Awaitable, Callable, Iterable, Protocol, Type, TypeVar

from domain.walking.core.events.base import DomainEvent

# Type variable for domain events
TEvent = TypeVar("TEvent", bound=DomainEvent)

# Event handler type: async function that takes an event and returns None
EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """
    Interface for event publishing and subscription.

    Walking mutations publish WalkLogged, WalksDeleted and
    StreakRecalculated through this port; notification collaborators
    subscribe to them.

    Example usage (application layer):
        >>> async def on_streak(event: StreakRecalculated) -> None:
        ...     print(f"Streak for {event.user_id}: {event.current_streak}")
        ...
        >>> event_bus.subscribe(StreakRecalculated, on_streak)
        >>> await event_bus.publish(event)
    """

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Args:
            event_type: Type of event to listen for (e.g., WalksDeleted)
            handler: Async function to call when event is published
        """
        ...

    async def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Args:
            event: Domain event to publish

        Note:
            - Handlers are called in subscription order
            - If a handler fails, other handlers still execute
            - Failed handlers should log errors but not raise
        """
        ...

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events one after another, in the given order."""
        ...

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        ...

    def clear(self) -> None:
        """
        Clear all event subscriptions.

        Note: Utility method for testing - not always part of production implementations
        """
        ...
