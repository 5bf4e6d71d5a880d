"""
Notification Target Value Object

Architectural Intent:
- Describes who or what gets paged for an alert: a (type, id) pair
- Closed set of target types, each bound to the entity lookup it needs

Design Decisions:
- Type tags are matched case-insensitively; the stored type is always the
  canonical capitalised form expected by the API
- Unknown tags are rejected at parse time with InvalidNotificationTargetType
- Targets are immutable; re-resolving an id produces a new value
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum

from rootly_alert.domain.value_objects.entity_kind import EntityKind


class InvalidNotificationTargetType(ValueError):
    """Raised when a notification target type tag is not recognised."""

    def __init__(self, raw_type: str = "") -> None:
        super().__init__("Invalid notification target type")
        self.raw_type = raw_type


class NotificationTargetType(Enum):
    USER = ("User", EntityKind.USER)
    SERVICE = ("Service", EntityKind.SERVICE)
    ESCALATION_POLICY = ("EscalationPolicy", EntityKind.ESCALATION_POLICY)
    GROUP = ("Group", EntityKind.GROUP)

    def __init__(self, label: str, entity_kind: EntityKind) -> None:
        self.label = label
        self.entity_kind = entity_kind

    @staticmethod
    def parse(raw_type: str) -> NotificationTargetType:
        wanted = raw_type.lower()
        for member in NotificationTargetType:
            if member.label.lower() == wanted:
                return member
        raise InvalidNotificationTargetType(raw_type)


@dataclass(frozen=True)
class NotificationTarget:
    """Resolved notification target sent with the alert."""

    id: str
    type: str

    @staticmethod
    def empty() -> NotificationTarget:
        return NotificationTarget(id="", type="")

    @property
    def is_empty(self) -> bool:
        return self.id == "" and self.type == ""

    def with_id(self, target_id: str) -> NotificationTarget:
        return replace(self, id=target_id)

    def __str__(self) -> str:
        return f"{{type: {self.type}, id: {self.id}}}"
