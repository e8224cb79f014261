"""Unit tests for EmailService."""

import pytest

from exchange.adapter.mail import MockEmailSender
from exchange.domain.service import EmailService


@pytest.fixture
def sender():
    return MockEmailSender()


@pytest.fixture
def email_service(sender):
    return EmailService(sender=sender, app_url="https://exchange.example.com")


class TestSendWelcome:
    @pytest.mark.asyncio
    async def test_welcome_email_addressed_to_new_user(self, email_service, sender):
        await email_service.send_welcome("a@x.com", "Ann", "Valentine Exchange")

        [message] = sender.sent
        assert message.to == "a@x.com"
        assert message.subject == "Welcome to Valentine Exchange!"
        assert "Hi Ann," in message.text
        assert "https://exchange.example.com" in message.html

    @pytest.mark.asyncio
    async def test_names_are_escaped_in_html(self, email_service, sender):
        await email_service.send_welcome("a@x.com", "<b>Ann</b>", "Valentine Exchange")

        [message] = sender.sent
        assert "<b>Ann</b>" not in message.html
        assert "&lt;b&gt;Ann&lt;/b&gt;" in message.html


class TestSendFriendJoined:
    @pytest.mark.asyncio
    async def test_friend_joined_email_names_friend(self, email_service, sender):
        await email_service.send_friend_joined("ivy@x.com", "Ivy", "Ann")

        [message] = sender.sent
        assert message.to == "ivy@x.com"
        assert message.subject == "Ann joined the exchange"
        assert "Ann just joined using your invite code!" in message.text
