"""Identity provider session port used by the client."""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from exchange.domain.value import Session, SessionEvent

SessionListener = Callable[[SessionEvent, Session | None], Awaitable[None]]


class SessionClient(ABC):
    """Session side of the identity provider.

    Implementations hold the current session locally and announce every
    change to subscribed listeners, in subscription order.
    """

    def __init__(self) -> None:
        self._listeners: list[SessionListener] = []

    @abstractmethod
    async def get_session(self) -> Session | None:
        """Return the current session, refreshing it first if expired.

        Returns:
            The current session, or None when signed out
        """
        pass

    @abstractmethod
    async def sign_in_with_password(self, email: str, password: str) -> Session:
        """Sign in with email and password.

        Raises:
            AuthProviderError: If the provider rejects the credentials
        """
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """Sign out of the current session.

        Raises:
            AuthProviderError: If the provider fails to sign out
        """
        pass

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        """Subscribe to session changes.

        Args:
            listener: Awaited with the event and the new session (or None)

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _emit(self, event: SessionEvent, session: Session | None) -> None:
        for listener in list(self._listeners):
            await listener(event, session)
