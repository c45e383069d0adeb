"""In-memory event bus implementation.

Handlers are stored in memory and awaited in subscription order.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Type, TypeVar

from mealmate.domain.shared.events import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Thread safety: NOT thread-safe
    Persistence: Handlers lost on process restart
    Error handling: Failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> async def log_event(event: PalateProfileUpdated) -> None:
        ...     print(f"Palate updated: {event.user_id}")
        >>>
        >>> bus.subscribe(PalateProfileUpdated, log_event)
        >>> await bus.publish(PalateProfileUpdated.create(...))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Awaitable[None]]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Note:
            - Same handler can be subscribed multiple times
            - Handlers are called in subscription order
        """
        self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(
            "Handler subscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": getattr(handler, "__name__", repr(handler)),
            },
        )

    async def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        A failing handler is logged and does not stop the others.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            logger.debug(
                "No handlers for event",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.info(
            "Publishing event",
            extra={
                "event_type": event_type.__name__,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in list(handlers):
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "event_id": str(event.event_id),
                        "handler": getattr(handler, "__name__", repr(handler)),
                        "error": str(e),
                    },
                    exc_info=True,
                )

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
        if not handlers:
            return False

        try:
            handlers.remove(handler)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()
        logger.debug("All event handlers cleared")

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        return len(self._handlers.get(event_type, []))
