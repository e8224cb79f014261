"""Email API client.

Sends through a Resend-compatible HTTP API (``POST {api_url}/emails``).
"""

import httpx
import logfire

from exchange.adapter.error import EmailDeliveryError
from exchange.domain.service.email_service import EmailMessage, EmailSender


class RealEmailSender(EmailSender):
    """HTTP email sender."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        from_address: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize email sender.

        Args:
            api_url: Email API base URL
            api_key: Email API key
            from_address: Sender address, e.g. "Exchange <hello@example.com>"
            timeout: Seconds before a send fails
            http_client: Optional shared client (a new one is opened per call
                otherwise)
        """
        self.emails_url = f"{api_url.rstrip('/')}/emails"
        self.api_key = api_key
        self.from_address = from_address
        self.timeout = timeout
        self._http_client = http_client

    async def send(self, message: EmailMessage) -> None:
        """Send a message.

        Raises:
            EmailDeliveryError: If the API is unreachable or rejects the message
        """
        payload = {
            "from": self.from_address,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
        }

        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    self.emails_url,
                    json=payload,
                    headers=headers,
                    timeout=self.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(
                        self.emails_url, json=payload, headers=headers
                    )
        except httpx.HTTPError as e:
            logfire.error("Email API HTTP error", error=str(e))
            raise EmailDeliveryError(f"HTTP error sending email: {e}") from e

        if response.status_code >= 400:
            logfire.error(
                "Email API rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            raise EmailDeliveryError(
                f"Email send failed: {response.status_code}",
                status_code=response.status_code,
            )

        logfire.info("Email sent", to=message.to, subject=message.subject)


class MockEmailSender(EmailSender):
    """Mock email sender for testing.

    Records messages in ``sent`` instead of delivering them.
    """

    def __init__(self):
        self.sent: list[EmailMessage] = []
        self.fail = False

    async def send(self, message: EmailMessage) -> None:
        if self.fail:
            raise EmailDeliveryError("Mock email failure")
        self.sent.append(message)
