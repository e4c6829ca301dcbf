# authkeeper/core/flow.py

import logging
from contextlib import contextmanager
from enum import Enum
from authkeeper.core.credentials import CredentialStore
from authkeeper.core.errors import (
    DuplicateUsername,
    InvalidCredentials,
    UnknownUser,
    ValidationError,
)
from authkeeper.core.session import SessionContext, SessionFlag


logger = logging.getLogger(__name__)


class AuthState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


class AuthFlow:
    """
    Login, registration and logout on top of the credential store and the
    session context.

    A failed submission leaves the state and the stored session exactly as
    they were before it started.
    """

    def __init__(self, store: CredentialStore, session: SessionContext):
        self.store = store
        self.session = session
        self.state = (
            AuthState.AUTHENTICATED if session.is_authenticated else AuthState.UNAUTHENTICATED
        )

    @classmethod
    def start(cls, store: CredentialStore, flag: SessionFlag) -> "AuthFlow":
        return cls(store, SessionContext.load(flag))

    @property
    def current_user(self) -> str | None:
        return self.session.current_user

    @contextmanager
    def _authenticating(self):
        previous = self.state
        self.state = AuthState.AUTHENTICATING
        try:
            yield
        except Exception:
            self.state = previous
            raise
        self.state = AuthState.AUTHENTICATED

    def submit_login(self, username: str | None, password: str | None) -> str:
        if not username or not password:
            raise ValidationError("Please enter both username and password")

        try:
            with self._authenticating():
                # Existence first, then the pair, so an unknown user and a
                # wrong password stay distinguishable.
                if self.store.find_by_username(username) is None:
                    raise UnknownUser()
                if self.store.find_by_username_and_password(username, password) is None:
                    raise InvalidCredentials()
                self.session.set(username)
        except (UnknownUser, InvalidCredentials) as e:
            logger.info("Login rejected for %r: %s", username, e.message)
            raise

        logger.info("User %r logged in", username)
        return username

    def submit_register(
        self, username: str | None, password: str | None, confirm_password: str | None
    ) -> str:
        if not username or not password or not confirm_password:
            raise ValidationError("Please enter all the fields.")
        if password != confirm_password:
            raise ValidationError("Passwords do not match")

        try:
            with self._authenticating():
                if self.store.find_by_username(username) is not None:
                    raise DuplicateUsername()
                self.store.insert(username, password)
                self.session.set(username)
        except DuplicateUsername:
            logger.info("Registration rejected: %r is taken", username)
            raise

        logger.info("User %r registered and logged in", username)
        return username

    def logout(self):
        username = self.session.current_user
        self.session.clear()
        self.state = AuthState.UNAUTHENTICATED
        if username:
            logger.info("User %r logged out", username)
