from sqlalchemy.exc import SQLAlchemyError

from src.handlers.kv import KVError
from .extensions import db
from .models import KVItem


class SqlKV:
    """KV store over the kv_items table. put() overwrites; last writer wins."""

    def __init__(self, session=None, namespace: str = "default", group: str = "default"):
        self.session = db.session if session is None else session
        self.namespace = f"{namespace}/{group}"

    def put(self, key: str, value: str):
        # sqlite binds raise UnicodeEncodeError unwrapped for unencodable text
        try:
            self.session.merge(KVItem(namespace=self.namespace, item=key, value=value))
            self.session.commit()
        except (SQLAlchemyError, UnicodeError) as e:
            self.session.rollback()
            raise KVError(str(e)) from e

    def get(self, key: str):
        try:
            row = self.session.get(KVItem, (self.namespace, key))
        except (SQLAlchemyError, UnicodeError) as e:
            raise KVError(str(e)) from e
        return row.value if row else None
