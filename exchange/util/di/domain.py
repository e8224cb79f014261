"""Domain layer DI providers."""

from dishka import Scope, provide

from exchange.config import Settings
from exchange.domain.repository import (
    ActivityLogRepository,
    EventRepository,
    InvitationRepository,
    NotificationRepository,
    UserRepository,
)
from exchange.domain.service import (
    ActivityLogService,
    EmailSender,
    EmailService,
    EventService,
    IdentityAdminClient,
    IdentityService,
    InvitationService,
    NotificationService,
    UserService,
)
from exchange.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_event_service(self, event_repository: EventRepository) -> EventService:
        """Provide event domain service."""
        return EventService(event_repository=event_repository)

    @provide
    def get_invitation_service(
        self, invitation_repository: InvitationRepository
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(invitation_repository=invitation_repository)

    @provide
    def get_identity_service(self, admin_client: IdentityAdminClient) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(admin_client=admin_client)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_activity_log_service(
        self, activity_log_repository: ActivityLogRepository
    ) -> ActivityLogService:
        """Provide activity log domain service."""
        return ActivityLogService(activity_log_repository=activity_log_repository)

    @provide
    def get_email_service(self, sender: EmailSender, settings: Settings) -> EmailService:
        """Provide email domain service.

        Emails link to the frontend, not the API.
        """
        return EmailService(sender=sender, app_url=settings.api.frontend_url)
