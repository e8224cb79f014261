"""Domain services."""

from .activity_log_service import ActivityLogService
from .base import Service
from .email_service import EmailMessage, EmailSender, EmailService
from .event_service import EventService
from .identity_service import IdentityAdminClient, IdentityService
from .invitation_service import InvitationService
from .notification_service import NotificationService
from .user_service import UserService, default_display_name

__all__ = [
    "ActivityLogService",
    "EmailMessage",
    "EmailSender",
    "EmailService",
    "EventService",
    "IdentityAdminClient",
    "IdentityService",
    "InvitationService",
    "NotificationService",
    "Service",
    "UserService",
    "default_display_name",
]
