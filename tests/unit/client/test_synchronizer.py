"""Unit tests for SessionSynchronizer."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import pytest

from exchange.adapter.error import AuthProviderError
from exchange.adapter.identity import MockAccount, MockSessionClient
from exchange.client import (
    NotAuthenticatedError,
    ProfileGateway,
    ProfileUpdate,
    RegisteredAccount,
    RegistrationClient,
    SessionState,
    SessionSynchronizer,
)
from exchange.domain.model import User
from exchange.domain.value import IdentityAccount, Session, SessionEvent, UserId


class StubProfileGateway(ProfileGateway):
    """Profiles keyed by user id, with optional per-user gates and failures."""

    def __init__(self):
        self.profiles: dict[UserId, User] = {}
        self.gates: dict[UserId, asyncio.Event] = {}
        self.error: Exception | None = None
        self.updates: list[dict[str, Any]] = []
        self.fetches = 0

    async def fetch_profile(self, session: Session) -> User | None:
        self.fetches += 1
        gate = self.gates.get(session.user.id)
        if gate is not None:
            await gate.wait()
        if self.error is not None:
            raise self.error
        return self.profiles.get(session.user.id)

    async def update_profile(self, session: Session, fields: dict[str, Any]) -> None:
        self.updates.append(fields)
        user = self.profiles[session.user.id]
        self.profiles[session.user.id] = user.model_copy(update=fields)


class StubRegistrationClient(RegistrationClient):
    def __init__(self, session_client: MockSessionClient, gateway: StubProfileGateway):
        self.session_client = session_client
        self.gateway = gateway

    async def register(self, email, password, name=None, invite_code=None):
        account = IdentityAccount(id=UserId(uuid4()), email=email)
        self.session_client.accounts[email.lower()] = MockAccount(
            account=account, password=password
        )
        self.gateway.profiles[account.id] = User(id=account.id, email=email, name=name)
        return RegisteredAccount(
            id=str(account.id), email=email, name=name or "", profile_complete=False
        )


def _session(email: str = "ann@x.com") -> Session:
    return Session(
        access_token=f"access-{uuid4()}",
        refresh_token="refresh",
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
        user=IdentityAccount(id=UserId(uuid4()), email=email),
    )


@pytest.fixture
def session_client():
    return MockSessionClient()


@pytest.fixture
def gateway():
    return StubProfileGateway()


@pytest.fixture
def synchronizer(session_client, gateway):
    return SessionSynchronizer(
        session_client=session_client,
        profile_gateway=gateway,
        registration_client=StubRegistrationClient(session_client, gateway),
    )


def _with_profile(gateway: StubProfileGateway, session: Session, **fields) -> User:
    user = User(id=session.user.id, email=session.user.email, **fields)
    gateway.profiles[user.id] = user
    return user


class TestBootstrap:
    @pytest.mark.asyncio
    async def test_no_session(self, synchronizer):
        await synchronizer.start()

        assert synchronizer.state == SessionState(is_loading=False)
        assert synchronizer.state.is_authenticated is False

    @pytest.mark.asyncio
    async def test_restores_session_with_profile(
        self, synchronizer, session_client, gateway
    ):
        # Arrange
        session = _session()
        session_client.session = session
        _with_profile(gateway, session, name="Ann", bio=None)

        # Act
        await synchronizer.start()

        # Assert
        state = synchronizer.state
        assert state.is_loading is False
        assert state.session == session
        assert state.profile.name == "Ann"
        assert state.profile.bio == ""

    @pytest.mark.asyncio
    async def test_orphaned_session_signed_out(self, synchronizer, session_client):
        """A session whose profile row is missing is never left authenticated."""
        session_client.session = _session()

        await synchronizer.start()

        assert session_client.sign_out_calls == 1
        assert synchronizer.state.session is None
        assert synchronizer.state.profile is None
        assert synchronizer.state.is_loading is False

    @pytest.mark.asyncio
    async def test_fetch_failure_signs_out(self, synchronizer, session_client, gateway):
        session_client.session = _session()
        gateway.error = RuntimeError("data api down")

        await synchronizer.start()

        assert session_client.sign_out_calls == 1
        assert synchronizer.state.is_authenticated is False

    @pytest.mark.asyncio
    async def test_failed_forced_sign_out_still_clears(
        self, synchronizer, session_client
    ):
        session_client.session = _session()
        session_client.sign_out_error = AuthProviderError("offline")

        await synchronizer.start()

        assert synchronizer.state.session is None
        assert synchronizer.state.profile is None

    @pytest.mark.asyncio
    async def test_session_lookup_failure_treated_as_signed_out(
        self, synchronizer, session_client
    ):
        async def broken():
            raise AuthProviderError("offline")

        session_client.get_session = broken

        await synchronizer.start()

        assert synchronizer.state == SessionState(is_loading=False)


class TestSessionChanges:
    @pytest.mark.asyncio
    async def test_signed_in_elsewhere_loads_profile(
        self, synchronizer, session_client, gateway
    ):
        await synchronizer.start()
        session = _session()
        _with_profile(gateway, session, name="Ann")

        await session_client.change_session(SessionEvent.SIGNED_IN, session)

        assert synchronizer.state.session == session
        assert synchronizer.state.profile.name == "Ann"

    @pytest.mark.asyncio
    async def test_signed_out_clears(self, synchronizer, session_client, gateway):
        session = _session()
        session_client.session = session
        _with_profile(gateway, session)
        await synchronizer.start()

        await session_client.change_session(SessionEvent.SIGNED_OUT, None)

        assert synchronizer.state == SessionState(is_loading=False)

    @pytest.mark.asyncio
    async def test_stale_fetch_discarded(self, synchronizer, session_client, gateway):
        """A profile loaded for a superseded session never reaches the cache."""
        # Arrange
        await synchronizer.start()
        first, second = _session("ann@x.com"), _session("bob@x.com")
        _with_profile(gateway, first, name="Ann")
        _with_profile(gateway, second, name="Bob")
        gateway.gates[first.user.id] = asyncio.Event()
        gateway.gates[second.user.id] = asyncio.Event()

        # Act
        first_change = asyncio.create_task(
            session_client.change_session(SessionEvent.SIGNED_IN, first)
        )
        await asyncio.sleep(0)
        second_change = asyncio.create_task(
            session_client.change_session(SessionEvent.SIGNED_IN, second)
        )
        await asyncio.sleep(0)

        gateway.gates[second.user.id].set()
        await second_change
        gateway.gates[first.user.id].set()
        await first_change

        # Assert
        assert synchronizer.state.session == second
        assert synchronizer.state.profile.name == "Bob"

    @pytest.mark.asyncio
    async def test_stale_missing_profile_does_not_sign_out(
        self, synchronizer, session_client, gateway
    ):
        await synchronizer.start()
        orphan, current = _session("ann@x.com"), _session("bob@x.com")
        _with_profile(gateway, current, name="Bob")
        gateway.gates[orphan.user.id] = asyncio.Event()

        orphan_change = asyncio.create_task(
            session_client.change_session(SessionEvent.SIGNED_IN, orphan)
        )
        await asyncio.sleep(0)
        await session_client.change_session(SessionEvent.SIGNED_IN, current)
        gateway.gates[orphan.user.id].set()
        await orphan_change

        assert session_client.sign_out_calls == 0
        assert synchronizer.state.profile.name == "Bob"

    @pytest.mark.asyncio
    async def test_closed_synchronizer_ignores_changes(
        self, synchronizer, session_client
    ):
        await synchronizer.start()
        await synchronizer.close()

        await session_client.change_session(SessionEvent.SIGNED_IN, _session())

        assert synchronizer.state.session is None


class TestSubscribe:
    @pytest.mark.asyncio
    async def test_listeners_receive_snapshots(self, synchronizer):
        states = []
        synchronizer.subscribe(states.append)

        await synchronizer.start()

        assert states[-1] == SessionState(is_loading=False)

    @pytest.mark.asyncio
    async def test_unsubscribe(self, synchronizer):
        states = []
        unsubscribe = synchronizer.subscribe(states.append)
        unsubscribe()

        await synchronizer.start()

        assert states == []


class TestCommands:
    @pytest.mark.asyncio
    async def test_register_signs_in(self, synchronizer):
        async with synchronizer:
            account = await synchronizer.register(
                "ann@x.com", "pw123456", name="Ann", invite_code="FRIEND42"
            )

            assert account.email == "ann@x.com"
            assert synchronizer.state.is_authenticated
            assert synchronizer.state.profile.id == account.id
            assert synchronizer.state.profile.name == "Ann"

    @pytest.mark.asyncio
    async def test_login_rejected(self, synchronizer):
        await synchronizer.start()

        with pytest.raises(AuthProviderError, match="Invalid login credentials"):
            await synchronizer.login("nobody@x.com", "pw123456")

        assert synchronizer.state.is_authenticated is False

    @pytest.mark.asyncio
    async def test_logout_clears(self, synchronizer, session_client, gateway):
        session = _session()
        session_client.session = session
        _with_profile(gateway, session)
        await synchronizer.start()

        await synchronizer.logout()

        assert synchronizer.state.session is None
        assert synchronizer.state.profile is None

    @pytest.mark.asyncio
    async def test_logout_failure_propagates(self, synchronizer, session_client, gateway):
        session = _session()
        session_client.session = session
        _with_profile(gateway, session)
        await synchronizer.start()
        session_client.sign_out_error = AuthProviderError("offline")

        with pytest.raises(AuthProviderError):
            await synchronizer.logout()

        assert synchronizer.state.session == session

    @pytest.mark.asyncio
    async def test_update_profile_requires_session(self, synchronizer):
        await synchronizer.start()

        with pytest.raises(NotAuthenticatedError):
            await synchronizer.update_profile(ProfileUpdate(bio="Hi"))

    @pytest.mark.asyncio
    async def test_update_profile_writes_only_set_fields(
        self, synchronizer, session_client, gateway
    ):
        session = _session()
        session_client.session = session
        _with_profile(gateway, session, name="Ann", work="Baker")
        await synchronizer.start()

        await synchronizer.update_profile(ProfileUpdate(bio="Likes tea", profile_complete=True))

        assert gateway.updates == [{"bio": "Likes tea", "profile_complete": True}]
        assert synchronizer.state.profile.bio == "Likes tea"
        assert synchronizer.state.profile.work == "Baker"
        assert synchronizer.state.profile.profile_complete is True

    @pytest.mark.asyncio
    async def test_empty_update_only_refetches(
        self, synchronizer, session_client, gateway
    ):
        session = _session()
        session_client.session = session
        _with_profile(gateway, session)
        await synchronizer.start()
        fetches = gateway.fetches

        await synchronizer.update_profile(ProfileUpdate())

        assert gateway.updates == []
        assert gateway.fetches == fetches + 1

    @pytest.mark.asyncio
    async def test_refresh_user_reloads(self, synchronizer, session_client, gateway):
        session = _session()
        session_client.session = session
        user = _with_profile(gateway, session, name="Ann")
        await synchronizer.start()
        gateway.profiles[user.id] = user.model_copy(update={"name": "Annie"})

        await synchronizer.refresh_user()

        assert synchronizer.state.profile.name == "Annie"

    @pytest.mark.asyncio
    async def test_refresh_user_without_session_is_noop(self, synchronizer, gateway):
        await synchronizer.start()

        await synchronizer.refresh_user()

        assert gateway.fetches == 0

    @pytest.mark.asyncio
    async def test_login_without_profile_settles_signed_out(
        self, synchronizer, session_client, gateway
    ):
        """The sign-in listener signs the orphan out before login returns."""
        # Arrange
        account = IdentityAccount(id=UserId(uuid4()), email="ann@x.com")
        session_client.accounts["ann@x.com"] = MockAccount(
            account=account, password="pw123456"
        )
        await synchronizer.start()

        # Act
        session = await synchronizer.login("ann@x.com", "pw123456")

        # Assert
        assert session.user == account
        assert session_client.sign_out_calls == 1
        assert gateway.fetches == 1
        assert synchronizer.state == SessionState(is_loading=False)

    @pytest.mark.asyncio
    async def test_login_before_start_without_profile_signs_out(
        self, synchronizer, session_client, gateway
    ):
        account = IdentityAccount(id=UserId(uuid4()), email="ann@x.com")
        session_client.accounts["ann@x.com"] = MockAccount(
            account=account, password="pw123456"
        )

        session = await synchronizer.login("ann@x.com", "pw123456")

        assert session.user == account
        assert session_client.sign_out_calls == 1
        assert synchronizer.state.session is None
        assert synchronizer.state.profile is None

    @pytest.mark.asyncio
    async def test_login_before_start_loads_profile(
        self, synchronizer, session_client, gateway
    ):
        account = IdentityAccount(id=UserId(uuid4()), email="ann@x.com")
        session_client.accounts["ann@x.com"] = MockAccount(
            account=account, password="pw123456"
        )
        gateway.profiles[account.id] = User(id=account.id, email="ann@x.com", name="Ann")

        session = await synchronizer.login("ann@x.com", "pw123456")

        assert synchronizer.state.session == session
        assert synchronizer.state.is_loading is False
        assert synchronizer.state.profile.name == "Ann"
