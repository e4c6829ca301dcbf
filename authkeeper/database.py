# authkeeper/database.py

from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from authkeeper.config import AUTH_DATABASE_URL, STORAGE_DATABASE_URL
from authkeeper.core.credentials import CredentialStore
from authkeeper.core.session import SessionFlag

def create_local_engine(url: str):
    database = make_url(url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(url, connect_args={"check_same_thread": False})

def create_session_factory(engine):
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )

engine = create_local_engine(AUTH_DATABASE_URL)
storage_engine = create_local_engine(STORAGE_DATABASE_URL)

SessionLocal = create_session_factory(engine)
StorageLocal = create_session_factory(storage_engine)

def init_db():
    db = SessionLocal()
    storage = StorageLocal()
    try:
        CredentialStore(db).initialize()
        SessionFlag(storage).initialize()
    finally:
        db.close()
        storage.close()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_storage():
    storage = StorageLocal()
    try:
        yield storage
    finally:
        storage.close()
