"""Email domain service."""

from html import escape

import logfire

from exchange.domain.value.common import ValueObject

from .base import Service


class EmailMessage(ValueObject):
    """Outbound email."""

    to: str
    subject: str
    html: str
    text: str


class EmailSender:
    """Email delivery interface."""

    async def send(self, message: EmailMessage) -> None:
        """Deliver a message.

        Raises:
            ProviderError: If delivery fails
        """
        raise NotImplementedError


class EmailService(Service):
    """Composes and sends registration emails."""

    def __init__(self, sender: EmailSender, app_url: str) -> None:
        """Initialize email service.

        Args:
            sender: Email delivery implementation
            app_url: Frontend URL linked from emails
        """
        self.sender = sender
        self.app_url = app_url

    async def send_welcome(self, email: str, name: str, event_name: str) -> None:
        """Send the welcome email to a new user."""
        with logfire.span("email_service.send_welcome", to=email):
            greeting = f"Hi {name},"
            body = (
                f"Welcome to {event_name}! Complete your profile and add a few "
                "wishlist ideas so whoever draws you knows what to get you."
            )
            await self.sender.send(
                EmailMessage(
                    to=email,
                    subject=f"Welcome to {event_name}!",
                    html=_render(greeting, body, self.app_url),
                    text=f"{greeting}\n\n{body}\n\n{self.app_url}",
                )
            )

    async def send_friend_joined(self, email: str, name: str, friend_name: str) -> None:
        """Tell an inviter by email that their friend joined."""
        with logfire.span("email_service.send_friend_joined", to=email):
            greeting = f"Hi {name},"
            body = f"{friend_name} just joined using your invite code!"
            await self.sender.send(
                EmailMessage(
                    to=email,
                    subject=f"{friend_name} joined the exchange",
                    html=_render(greeting, body, self.app_url),
                    text=f"{greeting}\n\n{body}\n\n{self.app_url}",
                )
            )


def _render(greeting: str, body: str, link: str) -> str:
    return (
        f"<p>{escape(greeting)}</p>"
        f"<p>{escape(body)}</p>"
        f'<p><a href="{escape(link)}">Open the exchange</a></p>'
    )
