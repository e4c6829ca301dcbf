# authkeeper/models/storage.py

from sqlalchemy import Column, String, Text
from . import Base


class KeyValue(Base):
    __tablename__ = "storage"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=True)
