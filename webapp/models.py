from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime
from .extensions import db

# Using Flask-SQLAlchemy's declarative base
Base = db.Model


def _utcnow():
    return datetime.now(timezone.utc)


class KVItem(Base):
    __tablename__ = "kv_items"

    # "<namespace>/<group>", same addressing as the DynamoDB table
    namespace = Column(String, primary_key=True)
    item = Column(String, primary_key=True)
    value = Column(Text, nullable=False)  # JSON string, stored verbatim
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)
