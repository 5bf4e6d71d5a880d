"""
Entity Directory Port

Architectural Intent:
- Abstract interface for turning human-readable names into remote ids
- Lets use cases resolve users, services, groups and so on without knowing
  about HTTP

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- Lookups never raise for "not found" or transport problems; they return ""
"""

from typing import Protocol, runtime_checkable

from rootly_alert.domain.value_objects.entity_kind import EntityKind


@runtime_checkable
class EntityDirectoryPort(Protocol):
    """Port for name-to-id lookups."""

    async def lookup_id(self, kind: EntityKind, name: str) -> str:
        """Return the id of the first entity of ``kind`` matching ``name``, or ""."""
        ...

    async def get_user_id(self, email: str) -> str:
        ...

    async def get_service_id(self, name: str) -> str:
        ...

    async def get_group_id(self, name: str) -> str:
        ...

    async def get_escalation_policy_id(self, name: str) -> str:
        ...

    async def get_alert_urgency_id(self, name: str) -> str:
        ...

    async def get_environment_id(self, name: str) -> str:
        ...
