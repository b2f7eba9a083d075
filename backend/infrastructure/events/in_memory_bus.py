"""In-memory event bus implementation.

Delivers walking domain events (WalkLogged, WalksDeleted, StreakRecalculated)
to in-process subscribers such as a notification collaborator.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Type, TypeVar

from domain.walking.core.events.base import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__name__", repr(handler))


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Thread safety: NOT thread-safe
    Persistence: Handlers lost on process restart (in-memory only)
    Error handling: Failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> async def on_deleted(event: WalksDeleted) -> None:
        ...     print(f"Affected dates: {event.affected_dates}")
        >>>
        >>> bus.subscribe(WalksDeleted, on_deleted)
        >>> await bus.publish(WalksDeleted.create(...))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Awaitable[None]]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """Subscribe a handler; handlers run in subscription order."""
        self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(
            "Handler subscribed",
            extra={"event_type": event_type.__name__, "handler": _handler_name(handler)},
        )

    async def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Only handlers registered for the exact event type are called. A
        failing handler is logged and skipped so the mutation that emitted
        the event is never rolled back by a subscriber.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug("No handlers for event", extra={"event_type": event_type.__name__})
            return

        logger.info(
            "Publishing event",
            extra={
                "event_type": event_type.__name__,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "event_id": str(event.event_id),
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events one after another, in the given order."""
        for event in events:
            await self.publish(event)

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False

        handlers.remove(handler)
        logger.debug(
            "Handler unsubscribed",
            extra={"event_type": event_type.__name__, "handler": _handler_name(handler)},
        )
        return True

    def clear(self) -> None:
        """Clear all event subscriptions (testing utility)."""
        self._handlers.clear()
        logger.debug("All event handlers cleared")

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        return len(self._handlers.get(event_type, []))
