"""
Alert Sink Port

Architectural Intent:
- Abstract interface for submitting a fully resolved alert
- Returns the created alert's id, or "" when creation failed
"""

from typing import Protocol, runtime_checkable

from rootly_alert.domain.services.alert_payload import AlertRequest


@runtime_checkable
class AlertSinkPort(Protocol):
    """Port for creating alerts in the incident-management system."""

    async def create_alert(self, request: AlertRequest) -> str:
        """Create an alert. Returns the alert id, or "" on failure."""
        ...
