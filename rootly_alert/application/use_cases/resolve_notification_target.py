"""
Resolve Notification Target Use Case

Architectural Intent:
- Turns a (type tag, name) pair into a NotificationTarget with a remote id
- Dispatches on NotificationTargetType to the matching directory lookup

Design Decisions:
- An unrecognised tag raises InvalidNotificationTargetType; this is the one
  failure in the pipeline that is not softened into ""
- Returns new NotificationTarget values instead of mutating the caller's
"""

from rootly_alert.domain.ports.entity_directory_port import EntityDirectoryPort
from rootly_alert.domain.value_objects.notification_target import (
    NotificationTarget,
    NotificationTargetType,
)


class ResolveNotificationTarget:
    def __init__(self, directory: EntityDirectoryPort):
        self.directory = directory

    async def execute(self, target_type: str, name: str) -> NotificationTarget:
        kind = NotificationTargetType.parse(target_type)
        target_id = await self.directory.lookup_id(kind.entity_kind, name)
        return NotificationTarget(id=target_id, type=kind.label)

    async def resolve_id(
        self, target: NotificationTarget, name: str
    ) -> NotificationTarget:
        """Look the id up again using the type already stored on ``target``."""
        kind = NotificationTargetType.parse(target.type)
        target_id = await self.directory.lookup_id(kind.entity_kind, name)
        return target.with_id(target_id)
