"""Bark push notification client with exponential backoff retry logic"""

import asyncio
import httpx
from billday.config import settings
from billday.domain.exceptions import NotificationError
from billday.infrastructure.observability.metrics import notify_latency_histogram, notify_failure_counter


class BarkClient:
    """Client for sending push notifications through a Bark endpoint"""

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url or settings.bark_api_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = settings.notify_max_retries
        self.backoff_base = settings.notify_backoff_base
        self.transport = transport

    async def send(self, title: str, body: str, api_url: str | None = None) -> None:
        """
        Push a notification with retry logic.

        Retry strategy:
        - Exponential backoff: base * 2^(attempt-1) between attempts
        - Retries on non-2xx responses and network failures

        Raises:
            NotificationError: Empty URL, or delivery failed after all retries
        """
        url = api_url or self.api_url
        if not url:
            raise NotificationError("Bark API URL is empty")

        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with notify_latency_histogram.time():
                        response = await client.post(url, json={"title": title, "body": body})
                        response.raise_for_status()
                        return

                except (httpx.HTTPStatusError, httpx.RequestError) as e:
                    attempt += 1
                    notify_failure_counter.inc()

                    if attempt >= self.max_retries:
                        raise NotificationError(f"Bark delivery failed after {attempt} attempts: {e}") from e

                    backoff = self.backoff_base * (2 ** (attempt - 1))
                    await asyncio.sleep(backoff)
