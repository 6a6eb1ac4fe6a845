"""Event models for record lifecycle notifications."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass
class RecordEvent:
    """A lifecycle notification about one record.

    Events are records of something that happened (or is about to happen,
    for ``saving``) to a translatable record.
    """

    event_type: str
    """The type of event (e.g., 'product.saved')."""

    model: str
    """Translatable model name the record belongs to."""

    record_key: Any = None
    """Primary key of the record, None before its first insert."""

    attributes: Dict[str, Any] = field(default_factory=dict)
    """Snapshot of the record's attributes when the event fired."""

    timestamp: datetime = field(default_factory=datetime.now)
    """When the event occurred."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events."""

    @property
    def name(self) -> str:
        """Lifecycle name without the model prefix (e.g. 'saved')."""
        return self.event_type.rsplit(".", 1)[-1]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary.

        Returns:
            Dictionary with ISO format timestamp and UUID as string.
        """
        return {
            "event_type": self.event_type,
            "model": self.model,
            "record_key": self.record_key,
            "attributes": dict(self.attributes),
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": str(self.correlation_id),
        }

    def __hash__(self) -> int:
        return hash((self.correlation_id, self.timestamp))
