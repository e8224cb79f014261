"""Register use case."""

import logfire
from pydantic import BaseModel

from exchange.config import Settings
from exchange.domain.error import InvalidCredentialsError
from exchange.domain.model import Invitation, User
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
from exchange.domain.value import EventId

from ..base import BaseUseCase


class RegisterRequest(BaseModel):
    """Registration request.

    Email and password are optional here so that missing values are reported
    as INVALID_CREDENTIALS rather than a schema error.
    """

    email: str | None = None
    password: str | None = None
    name: str | None = None
    invite_code: str | None = None


class RegisteredUser(BaseModel):
    """Created profile as returned to the caller."""

    id: str
    email: str
    name: str
    profile_complete: bool


class RegisterResponse(BaseModel):
    """Registration response."""

    user: RegisteredUser


class RegisterUseCase(BaseUseCase):
    """Use case for email/password registration.

    Runs as a saga: identity creation and profile creation are the only
    steps that decide success. Invitation bookkeeping, notifications, emails
    and the activity log are best-effort and never change the outcome once
    the profile is committed. Nothing is rolled back; an identity without a
    profile (profile insert or commit failed) is an accepted inconsistency
    window.
    """

    def __init__(
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
    ) -> None:
        """Initialize register use case.

        Args:
            event_service: Event domain service
            invitation_service: Invitation domain service
            identity_service: Identity domain service
            user_service: User domain service
            notification_service: Notification domain service
            email_service: Email domain service
            activity_log_service: Activity log domain service
            unit_of_work: Commits the request transaction
            settings: Application settings
        """
        self.event_service = event_service
        self.invitation_service = invitation_service
        self.identity_service = identity_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.email_service = email_service
        self.activity_log_service = activity_log_service
        self.unit_of_work = unit_of_work
        self.settings = settings

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration.

        Steps:
        1. Validate email and password are present
        2. Check the event is open for registration
        3. Resolve the invite code, if one was supplied
        4. Create the identity account (pre-confirmed)
        5. Create the user profile and commit it
        6. Redeem the invitation and fan out notifications/emails
        7. Record the registration in the activity log and commit again

        Args:
            request: Registration request

        Returns:
            The created user

        Raises:
            InvalidCredentialsError: If email or password is missing
            RegistrationClosedError: If the event is not open
            InvalidInviteCodeError: If the invite code is not redeemable
            EmailAlreadyExistsError: If the email already has an account
            ServerError: If the event cannot be loaded or is misconfigured
        """
        if not request.email or not request.password:
            raise InvalidCredentialsError("Email and password are required")

        email = request.email
        event_id = EventId(self.settings.registration.event_id)

        with logfire.span(
            "register.execute",
            email=email,
            event_id=event_id,
            has_invite_code=bool(request.invite_code),
        ):
            await self.event_service.ensure_registration_open(
                event_id,
                enforce_deadline=self.settings.registration.enforce_deadline,
            )

            invitation = None
            if request.invite_code:
                invitation = await self.invitation_service.resolve_code(
                    request.invite_code
                )

            account = await self.identity_service.create_account(email, request.password)

            try:
                user = await self.user_service.create_profile(account, request.name)
                await self.unit_of_work.commit()
            except Exception as e:
                logfire.error(
                    "Identity created but profile creation failed",
                    user_id=str(account.id),
                    error=str(e),
                )
                raise

            if invitation is not None:
                await self._complete_invitation(invitation, user, event_id)

            await self._record_activity(user, event_id, request.invite_code)
            await self._commit_follow_up(user)

            logfire.info("User registered", user_id=str(user.id))

            return RegisterResponse(
                user=RegisteredUser(
                    id=str(user.id),
                    email=user.email,
                    name=user.name or "",
                    profile_complete=user.profile_complete,
                )
            )

    async def _complete_invitation(
        self, invitation: Invitation, user: User, event_id: EventId
    ) -> None:
        """Redeem the invitation and send welcome/friend-joined messages.

        Every step is isolated; failures are logged and skipped.
        """
        redeemed = True
        try:
            redeemed = await self.invitation_service.redeem(invitation, user.id)
        except Exception as e:
            logfire.error(
                "Failed to update invitation",
                invitation_id=str(invitation.id),
                error=str(e),
            )

        try:
            await self.notification_service.notify_welcome(
                user, event_id, self.settings.registration.event_name
            )
        except Exception as e:
            logfire.error("Failed to create welcome notification", error=str(e))

        try:
            await self.email_service.send_welcome(
                user.email, user.name or "", self.settings.registration.event_name
            )
        except Exception as e:
            logfire.error("Failed to send welcome email", error=str(e))

        if invitation.inviter_id is None:
            return

        if not redeemed:
            # Another registration consumed the code first; the inviter was
            # already told about that one.
            return

        try:
            await self.notification_service.notify_friend_joined(
                invitation.inviter_id, user
            )
        except Exception as e:
            logfire.error("Failed to create friend joined notification", error=str(e))

        try:
            inviter = await self.user_service.get_by_id(invitation.inviter_id)
            await self.email_service.send_friend_joined(
                inviter.email, inviter.name or "", user.name or ""
            )
        except Exception as e:
            logfire.error("Failed to send friend joined email", error=str(e))

    async def _record_activity(
        self, user: User, event_id: EventId, invite_code: str | None
    ) -> None:
        """Append the registration to the activity log, ignoring failures."""
        try:
            await self.activity_log_service.record_registration(
                user.id, event_id, invite_code
            )
        except Exception as e:
            logfire.error(
                "Failed to record registration activity",
                user_id=str(user.id),
                error=str(e),
            )

    async def _commit_follow_up(self, user: User) -> None:
        """Commit the best-effort writes made after the profile."""
        try:
            await self.unit_of_work.commit()
        except Exception as e:
            logfire.error(
                "Failed to commit registration follow-up",
                user_id=str(user.id),
                error=str(e),
            )
