"""Typed event bus — decoupled communication between the range and its observers.

Renderers, scoring and recorders subscribe to target lifecycle events
instead of polling the target field.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Type, TypeVar

T = TypeVar("T")


# -- Target events -------------------------------------------------------

@dataclass(frozen=True)
class TargetSpawned:
    """A target was placed on the range."""
    target_id: int
    moving: bool


@dataclass(frozen=True)
class TargetDespawned:
    """A target was removed from the range."""
    target_id: int


@dataclass(frozen=True)
class TargetHit:
    """A shot landed within a target's hit radius."""
    target_id: int
    time_ms: float
    impact_y: float
    impact_z: float


class EventBus:
    """Simple synchronous event bus with typed events.

    Usage:
        bus = EventBus()
        bus.on(TargetHit, lambda e: print(e.target_id))
        bus.emit(TargetHit(target_id=1, time_ms=250.0, impact_y=0.0, impact_z=0.1))
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def on(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for an event type."""
        self._handlers[event_type].append(handler)

    def off(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Unregister a handler."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: object) -> None:
        """Emit an event to all registered handlers."""
        for handler in self._handlers.get(type(event), []):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
