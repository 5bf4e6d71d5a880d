"""
Entity Kind Value Object

Architectural Intent:
- Names the six kinds of Rootly entity the action resolves by name
- Keys the adapter's lookup routes and the notification target types

Design Decisions:
- The enum value doubles as the label in "<Kind> '<name>' not found"
  warnings
"""

from enum import Enum


class EntityKind(Enum):
    """Remote entities that can be looked up by name.

    The value is the human-readable label used in not-found warnings.
    """

    USER = "User"
    SERVICE = "Service"
    GROUP = "Alert group"
    ESCALATION_POLICY = "Escalation policy"
    ALERT_URGENCY = "Alert urgency"
    ENVIRONMENT = "Environment"
