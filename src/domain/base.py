"""Shared base for persisted domain entities"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns.
IdType = BigInteger().with_variant(Integer, "sqlite")


class BaseModel(SQLModel):
    pass


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
