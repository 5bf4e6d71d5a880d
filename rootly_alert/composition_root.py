"""
Composition Root

Architectural Intent:
- Dependency injection composition root for the rootly-alert application
- Single place where the adapter and use cases are wired together
- No adapter instantiation should occur outside this module (except tests)

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- The API key is an action input, so a container is built per invocation
"""

from dataclasses import dataclass
from typing import Optional

import httpx

from rootly_alert.application.use_cases.resolve_notification_target import (
    ResolveNotificationTarget,
)
from rootly_alert.application.use_cases.trigger_alert import TriggerAlert
from rootly_alert.infrastructure.adapters.rootly_adapter import RootlyAdapter
from rootly_alert.infrastructure.config import AppConfig


@dataclass
class RootlyAlertContainer:
    """DI container holding all wired dependencies."""

    rootly_adapter: RootlyAdapter
    resolve_target: ResolveNotificationTarget
    trigger_alert: TriggerAlert


def create_container(
    api_key: str,
    config: Optional[AppConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> RootlyAlertContainer:
    """Create and wire all dependencies."""
    config = config or AppConfig()
    rootly_adapter = RootlyAdapter(
        api_key=api_key,
        base_url=config.api.base_url,
        timeout=config.api.timeout_seconds,
        client=client,
    )

    resolve_target = ResolveNotificationTarget(rootly_adapter)
    trigger_alert = TriggerAlert(rootly_adapter, rootly_adapter, resolve_target)

    return RootlyAlertContainer(
        rootly_adapter=rootly_adapter,
        resolve_target=resolve_target,
        trigger_alert=trigger_alert,
    )
