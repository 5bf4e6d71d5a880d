"""
Domain Services Package

Architectural Intent:
- Pure functions that shape alert data before it leaves the process
- No I/O; everything here is safe to call from tests without mocks
"""

from rootly_alert.domain.services.attribute_filter import add_non_empty
from rootly_alert.domain.services.alert_payload import (
    AlertRequest,
    build_alert_attributes,
    build_alert_body,
)

__all__ = [
    "add_non_empty",
    "AlertRequest",
    "build_alert_attributes",
    "build_alert_body",
]
