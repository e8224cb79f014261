"""Application layer DI providers."""

from dishka import Scope, provide

from exchange.application.usecase.auth import RegisterUseCase
from exchange.config import Settings
from exchange.domain.repository import UnitOfWork
from exchange.domain.service import (
    ActivityLogService,
    EmailService,
    EventService,
    IdentityService,
    InvitationService,
    NotificationService,
    UserService,
)
from exchange.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        event_service: EventService,
        invitation_service: InvitationService,
        identity_service: IdentityService,
        user_service: UserService,
        notification_service: NotificationService,
        email_service: EmailService,
        activity_log_service: ActivityLogService,
        unit_of_work: UnitOfWork,
        settings: Settings,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            event_service=event_service,
            invitation_service=invitation_service,
            identity_service=identity_service,
            user_service=user_service,
            notification_service=notification_service,
            email_service=email_service,
            activity_log_service=activity_log_service,
            unit_of_work=unit_of_work,
            settings=settings,
        )
