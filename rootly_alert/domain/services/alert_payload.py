"""
Alert Payload Builder

Architectural Intent:
- Pure construction of the JSON:API body for POST /v1/alerts
- Keeps the request shape out of the HTTP adapter so it can be tested alone

Design Decisions:
- noise is always sent as a boolean
- Optional scalars (external_id, external_url, deduplication_key) are
  omitted entirely when empty, never sent as ""
- Optional collections go through add_non_empty so blank entries never reach
  the API
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from rootly_alert.domain.services.attribute_filter import add_non_empty
from rootly_alert.domain.value_objects.label import Label
from rootly_alert.domain.value_objects.notification_target import NotificationTarget

ALERT_SOURCE = "api"
ALERT_STATUS = "triggered"
ALERT_RESOURCE_TYPE = "alerts"


@dataclass(frozen=True)
class AlertRequest:
    """Everything needed to create one alert."""

    summary: str
    description: str
    set_as_noise: bool
    notification_target: NotificationTarget
    alert_urgency_id: str
    external_id: Optional[str] = None
    external_url: Optional[str] = None
    service_ids: Optional[Sequence[str]] = None
    group_ids: Optional[Sequence[str]] = None
    labels: Optional[Sequence[Label]] = None
    environment_ids: Optional[Sequence[str]] = None
    deduplication_key: Optional[str] = None


def build_alert_attributes(request: AlertRequest) -> dict[str, Any]:
    attributes: dict[str, Any] = {
        "source": ALERT_SOURCE,
        "summary": request.summary,
        "description": request.description,
        "noise": request.set_as_noise,
        "status": ALERT_STATUS,
        "notification_target_type": request.notification_target.type,
        "notification_target_id": request.notification_target.id,
        "alert_urgency_id": request.alert_urgency_id,
    }

    if request.external_id:
        attributes["external_id"] = request.external_id
    if request.external_url:
        attributes["external_url"] = request.external_url

    add_non_empty(request.service_ids, "service_ids", attributes)
    add_non_empty(request.group_ids, "group_ids", attributes)
    add_non_empty(request.labels, "labels", attributes)
    add_non_empty(request.environment_ids, "environment_ids", attributes)

    if request.deduplication_key:
        attributes["deduplication_key"] = request.deduplication_key

    return attributes


def build_alert_body(request: AlertRequest) -> dict[str, Any]:
    """Build the full request body, with labels rendered as JSON objects."""
    attributes = build_alert_attributes(request)
    if "labels" in attributes:
        attributes["labels"] = [label.to_dict() for label in attributes["labels"]]

    return {
        "data": {
            "type": ALERT_RESOURCE_TYPE,
            "attributes": attributes,
        }
    }
