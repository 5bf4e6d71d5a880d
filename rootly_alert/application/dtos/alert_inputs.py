"""
Alert Input DTOs

Architectural Intent:
- Data Transfer Object for the raw, unresolved action inputs
- Decouples where inputs come from (INPUT_* variables, CLI flags) from the
  TriggerAlert use case
"""

from dataclasses import dataclass, fields, replace
from typing import Any

INPUT_NAMES = (
    "api_key",
    "summary",
    "details",
    "set_as_noise",
    "notification_target_type",
    "notification_target",
    "alert_urgency",
    "external_id",
    "external_url",
    "deduplication_key",
    "services",
    "groups",
    "labels",
    "environments",
)


@dataclass(frozen=True)
class AlertInputs:
    """Action inputs exactly as the caller supplied them.

    services, groups and environments are comma-separated names; labels is a
    comma-separated list of key:value pairs.
    """

    api_key: str = ""
    summary: str = ""
    details: str = ""
    set_as_noise: bool = False
    notification_target_type: str = ""
    notification_target: str = ""
    alert_urgency: str = ""
    external_id: str = ""
    external_url: str = ""
    deduplication_key: str = ""
    services: str = ""
    groups: str = ""
    labels: str = ""
    environments: str = ""

    def merged(self, **overrides: Any) -> "AlertInputs":
        """Return a copy with every non-None override applied."""
        valid = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in valid and v is not None}
        return replace(self, **changes)
