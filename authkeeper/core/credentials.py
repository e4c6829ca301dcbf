# authkeeper/core/credentials.py

import logging
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from authkeeper.core.errors import DuplicateUsername, StoreError
from authkeeper.models import Base
from authkeeper.models.user import User


logger = logging.getLogger(__name__)


def _store_failure(action: str, exc: Exception) -> StoreError:
    logger.error("Credential store failed to %s: %s", action, exc)
    return StoreError(f"Could not {action}")


class CredentialStore:
    """
    Durable storage and lookup of username/password pairs.

    Usernames and passwords are compared as raw strings: lookups are
    case-sensitive exact matches with no trimming or hashing.
    """

    def __init__(self, db: Session):
        self.db = db

    def initialize(self):
        """
        Create the users table unless it already exists.
        Failures are logged and otherwise ignored so that startup can proceed.
        """
        try:
            bind = self.db.get_bind()
            if inspect(bind).has_table(User.__tablename__):
                logger.info("Database already initialized.")
                return

            if bind.dialect.name == "sqlite":
                with bind.connect() as conn:
                    conn.exec_driver_sql("PRAGMA journal_mode=WAL")

            Base.metadata.create_all(bind=bind, tables=[User.__table__])
            logger.info("Database initialized!")
        except SQLAlchemyError as e:
            logger.error("Error while initializing the database: %s", e)

    def find_by_username(self, username: str) -> User | None:
        try:
            return self.db.query(User).filter(User.username == username).first()
        except SQLAlchemyError as e:
            raise _store_failure("look up the user", e) from e

    def find_by_username_and_password(self, username: str, password: str) -> User | None:
        try:
            return (
                self.db.query(User)
                .filter(User.username == username, User.password == password)
                .first()
            )
        except SQLAlchemyError as e:
            raise _store_failure("check the credentials", e) from e

    def insert(self, username: str, password: str) -> User:
        if self.find_by_username(username) is not None:
            raise DuplicateUsername()

        user = User(username=username, password=password)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateUsername() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise _store_failure("save the user", e) from e

        logger.info("Stored new user %r (id=%s)", user.username, user.id)
        return user

    def count(self, username: str | None = None) -> int:
        try:
            query = self.db.query(User)
            if username is not None:
                query = query.filter(User.username == username)
            return query.count()
        except SQLAlchemyError as e:
            raise _store_failure("count users", e) from e
