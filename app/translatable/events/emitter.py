"""Lifecycle emitter collaborators used by TranslatableRecord.save()."""

from typing import Protocol

from translatable.events.dispatcher import dispatch_event
from translatable.events.models import RecordEvent
from translatable.persistence.records import Record


class LifecycleEmitter(Protocol):
    """Receives record lifecycle notifications.

    ``fire_event`` returns False to veto the operation; only ``saving`` is
    vetoable, the return value of the other notifications is ignored.
    """

    def fire_event(self, name: str, record: Record) -> bool: ...


class DispatcherLifecycleEmitter:
    """LifecycleEmitter backed by the in-process event dispatcher.

    Notifications are dispatched as ``"{model}.{name}"`` events, e.g.
    ``product.saving``. Any handler returning exactly False vetoes.
    """

    def __init__(self, model: str):
        self.model = model

    def fire_event(self, name: str, record: Record) -> bool:
        event = RecordEvent(
            event_type=f"{self.model}.{name}",
            model=self.model,
            record_key=record.key,
            attributes=dict(record.attributes),
        )
        results = dispatch_event(event)
        return not any(result is False for result in results)
