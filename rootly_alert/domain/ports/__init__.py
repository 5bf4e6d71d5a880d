"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from rootly_alert.domain.ports.entity_directory_port import EntityDirectoryPort
from rootly_alert.domain.ports.alert_sink_port import AlertSinkPort

__all__ = [
    "EntityDirectoryPort",
    "AlertSinkPort",
]
