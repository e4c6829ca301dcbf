# authkeeper/core/session.py

import json
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from authkeeper.config import SESSION_KEY
from authkeeper.core.errors import StoreError
from authkeeper.models import Base
from authkeeper.models.storage import KeyValue


logger = logging.getLogger(__name__)


class SessionFlag:
    """
    Persisted marker of the username that is logged in on this device.
    The marker is a JSON object {"username": ...} stored under a fixed key.
    """

    def __init__(self, storage: Session, key: str = SESSION_KEY):
        self.storage = storage
        self.key = key

    def initialize(self):
        try:
            Base.metadata.create_all(bind=self.storage.get_bind(), tables=[KeyValue.__table__])
        except SQLAlchemyError as e:
            logger.error("Error while initializing the key-value storage: %s", e)

    def get_current_user(self) -> str | None:
        """Return the stored username, or None if the marker is absent or unusable."""
        try:
            entry = self.storage.get(KeyValue, self.key)
        except SQLAlchemyError as e:
            logger.warning("Error checking login status: %s", e)
            return None

        if entry is None or entry.value is None:
            return None

        try:
            payload = json.loads(entry.value)
        except ValueError:
            logger.warning("Ignoring malformed session marker under %r", self.key)
            return None

        username = payload.get("username") if isinstance(payload, dict) else None
        if not isinstance(username, str) or not username:
            logger.warning("Session marker under %r has no username", self.key)
            return None
        return username

    def set_current_user(self, username: str):
        value = json.dumps({"username": username})
        try:
            entry = self.storage.get(KeyValue, self.key)
            if entry is None:
                self.storage.add(KeyValue(key=self.key, value=value))
            else:
                entry.value = value
            self.storage.commit()
        except SQLAlchemyError as e:
            self.storage.rollback()
            logger.error("Could not write the session marker: %s", e)
            raise StoreError("Could not save the session") from e

    def clear_current_user(self):
        try:
            self.storage.query(KeyValue).filter(KeyValue.key == self.key).delete()
            self.storage.commit()
        except SQLAlchemyError as e:
            self.storage.rollback()
            logger.error("Could not remove the session marker: %s", e)
            raise StoreError("Could not clear the session") from e


class SessionContext:
    """
    Explicit session state handed to the code that needs it.

    `load` performs the one startup read of the flag; afterwards `set` and
    `clear` write through to the flag and keep `current_user` in step.
    """

    def __init__(self, flag: SessionFlag, current_user: str | None = None):
        self.flag = flag
        self.current_user = current_user

    @classmethod
    def load(cls, flag: SessionFlag) -> "SessionContext":
        return cls(flag, flag.get_current_user())

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def set(self, username: str):
        self.flag.set_current_user(username)
        self.current_user = username

    def clear(self):
        self.flag.clear_current_user()
        self.current_user = None
