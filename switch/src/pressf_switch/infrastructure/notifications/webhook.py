"""Reminder notifiers: a webhook client and a log-only fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

import httpx

from pressf_commons.errors import NotificationError

logger = logging.getLogger("pressf_switch.notifications")


@dataclass
class WebhookNotifier:
    """Posts reminders as JSON to an operator-supplied URL."""

    url: str
    timeout_seconds: float = 10.0
    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("webhook url must not be empty")

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout_seconds, transport=self.transport)

    def notify(self, *, message: str, deadline_ms: int) -> None:
        payload = {
            "event": "checkin_reminder",
            "message": message,
            "deadline": datetime.fromtimestamp(deadline_ms / 1000, tz=UTC).isoformat(),
            "deadlineMs": deadline_ms,
        }
        try:
            with self._client() as client:
                response = client.post(self.url, json=payload, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            raise NotificationError(f"webhook request to {self.url} failed: {exc}") from exc
        if response.is_error:
            raise NotificationError(f"webhook returned {response.status_code} for POST {self.url}")


class LoggingNotifier:
    """Writes reminders to the log when no delivery channel is configured."""

    def notify(self, *, message: str, deadline_ms: int) -> None:
        logger.warning(message, extra={"data": {"deadline_ms": deadline_ms}})


__all__ = ["LoggingNotifier", "WebhookNotifier"]
