"""Session/profile synchronizer.

Keeps a cached user profile consistent with the identity provider's current
session. A session without a profile row is treated as orphaned and signed
out, so subscribers never see "authenticated, no profile" once a fetch has
settled.
"""

from typing import Callable

import logfire

from exchange.domain.value import Session, SessionEvent, UserId

from .error import NotAuthenticatedError
from .gateway import ProfileGateway
from .registration import RegisteredAccount, RegistrationClient
from .session import SessionClient
from .state import ProfileUpdate, SessionState, UserProfile

StateListener = Callable[[SessionState], None]


class SessionSynchronizer:
    """Owns the client-side session and profile cache.

    Lifecycle: ``start()`` subscribes to the provider and restores any
    existing session; ``close()`` unsubscribes. Both are also run by
    ``async with``. Consumers observe changes through ``subscribe``.
    """

    def __init__(
        self,
        session_client: SessionClient,
        profile_gateway: ProfileGateway,
        registration_client: RegistrationClient,
    ) -> None:
        """Initialize synchronizer.

        Args:
            session_client: Identity provider session client
            profile_gateway: Profile row access
            registration_client: Registration endpoint client
        """
        self.session_client = session_client
        self.profile_gateway = profile_gateway
        self.registration_client = registration_client
        self._state = SessionState()
        self._listeners: list[StateListener] = []
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def state(self) -> SessionState:
        """Current snapshot.

        Returns:
            The latest SessionState published to subscribers
        """
        return self._state

    async def start(self) -> None:
        """Subscribe to session changes and restore the current session.

        ``is_loading`` is cleared once the initial lookup settles, whatever
        its outcome.
        """
        if self._unsubscribe is None:
            self._unsubscribe = self.session_client.on_session_change(
                self._on_session_change
            )

        with logfire.span("session_sync.bootstrap"):
            try:
                session = await self.session_client.get_session()
            except Exception as e:
                logfire.warn("Could not restore session", error=str(e))
                session = None

            if session is not None:
                self._set_state(session=session)
                await self._fetch_profile(session)

            self._set_state(is_loading=False)

    async def close(self) -> None:
        """Stop following session changes and drop all subscribers."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._listeners.clear()

    async def __aenter__(self) -> "SessionSynchronizer":
        """Start the synchronizer.

        Returns:
            The started synchronizer
        """
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        """Close the synchronizer."""
        await self.close()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for state snapshots.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
        invite_code: str | None = None,
    ) -> RegisteredAccount:
        """Register, then sign in with the same credentials.

        Raises:
            RegistrationFailedError: If the server rejects the registration
            AuthProviderError: If the follow-up sign-in fails
        """
        account = await self.registration_client.register(
            email, password, name=name, invite_code=invite_code
        )
        await self.login(email, password)
        return account

    async def login(self, email: str, password: str) -> Session:
        """Sign in with a password and load the profile.

        An identity without a profile row is signed out again; the call
        still returns and the state settles unauthenticated.

        Args:
            email: Account email
            password: Account password

        Returns:
            The session issued by the provider

        Raises:
            AuthProviderError: If the provider rejects the sign-in
        """
        session = await self.session_client.sign_in_with_password(email, password)
        if self._unsubscribe is None:
            # Not following provider events, so apply the sign-in here
            self._set_state(session=session, is_loading=False)
        elif not self._is_current(session.user.id):
            # The sign-in listener already signed an orphaned session out
            return session
        await self._fetch_profile(session)
        return session

    async def logout(self) -> None:
        """Sign out and clear the cache.

        Raises:
            AuthProviderError: If the provider fails to sign out
        """
        await self.session_client.sign_out()
        self._set_state(session=None, profile=None)

    async def update_profile(self, update: ProfileUpdate) -> None:
        """Write the supplied profile fields, then reload the profile.

        Args:
            update: Fields to change; unset fields are left alone

        Raises:
            NotAuthenticatedError: If there is no session, or it could not
                be refreshed
        """
        if self._state.session is None:
            raise NotAuthenticatedError()

        session = await self.session_client.get_session()
        if session is None:
            self._set_state(session=None, profile=None)
            raise NotAuthenticatedError()

        fields = update.to_fields()
        if fields:
            await self.profile_gateway.update_profile(session, fields)
        await self._fetch_profile(session)

    async def refresh_user(self) -> None:
        """Reload the profile for the current session, if any."""
        session = self._state.session
        if session is not None:
            await self._fetch_profile(session)

    async def _on_session_change(
        self, event: SessionEvent, session: Session | None
    ) -> None:
        logfire.debug("Session changed", session_event=event.value)
        if session is None:
            self._set_state(session=None, profile=None, is_loading=False)
            return

        if event == SessionEvent.TOKEN_REFRESHED and self._is_current(session.user.id):
            # Same user with new tokens; the cached profile still applies
            self._set_state(session=session)
            return

        self._set_state(session=session, is_loading=False)
        await self._fetch_profile(session)

    async def _fetch_profile(self, session: Session) -> None:
        user_id = session.user.id
        with logfire.span("session_sync.fetch_profile", user_id=str(user_id)):
            try:
                # Refreshes an expired access token before it is used
                active = await self.session_client.get_session()
                if active is None or active.user.id != user_id:
                    if active is None and self._is_current(user_id):
                        self._set_state(session=None, profile=None)
                    return
                user = await self.profile_gateway.fetch_profile(active)
            except Exception as e:
                if not self._is_current(user_id):
                    return
                logfire.warn("Profile fetch failed, signing out", error=str(e))
                await self._force_sign_out()
                return

            # Session changed while the fetch was in flight
            if not self._is_current(user_id):
                return

            if user is None:
                logfire.warn("No profile for session, signing out")
                await self._force_sign_out()
                return

            self._set_state(profile=UserProfile.from_user(user))

    async def _force_sign_out(self) -> None:
        try:
            await self.session_client.sign_out()
        except Exception as e:
            logfire.error("Forced sign-out failed", error=str(e))
        self._set_state(session=None, profile=None)

    def _is_current(self, user_id: UserId) -> bool:
        session = self._state.session
        return session is not None and session.user.id == user_id

    def _set_state(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self._state)
