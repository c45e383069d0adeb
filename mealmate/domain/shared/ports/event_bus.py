"""Event bus port (interface).

Defines contract for event publishing and subscription.
The domain defines the port, infrastructure provides the implementation.
"""

from typing import Awaitable, Callable, Protocol, Type, TypeVar

from mealmate.domain.shared.events import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

# Event handler type: async function that takes an event and returns None
EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """Interface for event publishing and subscription.

    Example usage (application layer):
        >>> async def on_palate_updated(event: PalateProfileUpdated) -> None:
        ...     print(f"Palate of {event.user_id} updated")
        ...
        >>> event_bus.subscribe(PalateProfileUpdated, on_palate_updated)
        >>> await event_bus.publish(event)
    """

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> None:
        """Subscribe a handler to an event type."""
        ...

    async def publish(self, event: TEvent) -> None:
        """Publish an event to all subscribed handlers.

        Note:
            - Handlers are called in subscription order
            - If a handler fails, other handlers still execute
        """
        ...

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> bool:
        """Unsubscribe a handler. Returns True if it was registered."""
        ...

    def clear(self) -> None:
        """Clear all event subscriptions."""
        ...
