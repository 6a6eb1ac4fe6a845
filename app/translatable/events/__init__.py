"""Lifecycle event system - in-process event dispatcher.

Delivers record lifecycle notifications (saving, saved, created, updated)
to registered observers.

Usage:

    from translatable.events import RecordEvent, register_event_handler

    @register_event_handler("product.saving")
    def check_product(event: RecordEvent):
        # Returning False from a "saving" handler cancels the save
        return event.attributes.get("sku") is not None

    emitter = DispatcherLifecycleEmitter("product")
    emitter.fire_event("saving", record)
"""

from translatable.events.dispatcher import (
    clear_handlers,
    dispatch_event,
    get_handlers_for_event,
    get_registered_events,
    register_event_handler,
)
from translatable.events.emitter import DispatcherLifecycleEmitter, LifecycleEmitter
from translatable.events.models import RecordEvent

__all__ = [
    "RecordEvent",
    "LifecycleEmitter",
    "DispatcherLifecycleEmitter",
    "dispatch_event",
    "register_event_handler",
    "get_registered_events",
    "get_handlers_for_event",
    "clear_handlers",
]
