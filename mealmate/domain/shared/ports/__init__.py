"""Shared ports."""

from .event_bus import EventHandler, IEventBus

__all__ = [
    "IEventBus",
    "EventHandler",
]
