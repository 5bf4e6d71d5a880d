"""
Trigger Alert Use Case

Architectural Intent:
- Top-level flow of the action: resolve every named input, then create the
  alert and hand back its id
- Depends only on ports, so tests can swap in AsyncMock directories/sinks

Design Decisions:
- List inputs are resolved one at a time, in input order
- A failed lookup stays in the id list as "" rather than being dropped
- Alert urgency falls back to "High" when none is given
- The notification target stays empty unless both its type and name are set
"""

import logging
from typing import Awaitable, Callable

from rootly_alert.application.dtos.alert_inputs import AlertInputs
from rootly_alert.application.use_cases.resolve_notification_target import (
    ResolveNotificationTarget,
)
from rootly_alert.domain.ports.alert_sink_port import AlertSinkPort
from rootly_alert.domain.ports.entity_directory_port import EntityDirectoryPort
from rootly_alert.domain.services.alert_payload import AlertRequest
from rootly_alert.domain.value_objects.label import format_labels, parse_labels
from rootly_alert.domain.value_objects.notification_target import NotificationTarget

logger = logging.getLogger(__name__)

DEFAULT_ALERT_URGENCY = "High"


async def _resolve_each(
    names: str, resolver: Callable[[str], Awaitable[str]]
) -> list[str]:
    ids: list[str] = []
    for name in names.split(","):
        if name != "":
            ids.append(await resolver(name))
    return ids


class TriggerAlert:
    def __init__(
        self,
        directory: EntityDirectoryPort,
        alert_sink: AlertSinkPort,
        resolve_target: ResolveNotificationTarget,
    ):
        self.directory = directory
        self.alert_sink = alert_sink
        self.resolve_target = resolve_target

    def _log_inputs(self, inputs: AlertInputs) -> None:
        # Never log the key itself.
        logger.debug("Api Key Length: %d", len(inputs.api_key))
        logger.debug("Summary: %s", inputs.summary)
        logger.debug("Details: %s", inputs.details)
        logger.debug("Set as noise: %s", inputs.set_as_noise)
        logger.debug("Notification target type: %s", inputs.notification_target_type)
        logger.debug("Notification target: %s", inputs.notification_target)
        logger.debug("Alert urgency: %s", inputs.alert_urgency)
        logger.debug("External ID: %s", inputs.external_id)
        logger.debug("External URL: %s", inputs.external_url)
        logger.debug("Services: %s", inputs.services)
        logger.debug("Groups: %s", inputs.groups)
        logger.debug("Labels: %s", inputs.labels)
        logger.debug("Environments: %s", inputs.environments)
        logger.debug("Deduplication Key: %s", inputs.deduplication_key)

    async def execute(self, inputs: AlertInputs) -> str:
        self._log_inputs(inputs)

        service_ids = await _resolve_each(
            inputs.services, self.directory.get_service_id
        )
        alert_urgency_id = await self.directory.get_alert_urgency_id(
            inputs.alert_urgency or DEFAULT_ALERT_URGENCY
        )
        group_ids = await _resolve_each(inputs.groups, self.directory.get_group_id)
        environment_ids = await _resolve_each(
            inputs.environments, self.directory.get_environment_id
        )
        labels = parse_labels(inputs.labels)
        logger.debug("Parsed labels: %s", format_labels(labels))

        target = NotificationTarget.empty()
        if inputs.notification_target_type and inputs.notification_target:
            target = await self.resolve_target.execute(
                inputs.notification_target_type, inputs.notification_target
            )
        logger.debug("Resolved notification target: %s", target)

        request = AlertRequest(
            summary=inputs.summary,
            description=inputs.details,
            set_as_noise=inputs.set_as_noise,
            notification_target=target,
            alert_urgency_id=alert_urgency_id,
            external_id=inputs.external_id,
            external_url=inputs.external_url,
            service_ids=service_ids,
            group_ids=group_ids,
            labels=labels,
            environment_ids=environment_ids,
            deduplication_key=inputs.deduplication_key,
        )
        alert_id = await self.alert_sink.create_alert(request)

        logger.debug("Created Alert ID: %s", alert_id)
        return alert_id
