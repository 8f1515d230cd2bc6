# src/handlers/kv.py
import time

from botocore.exceptions import BotoCoreError, ClientError


class KVError(Exception):
    """The store refused or failed a write; safe for the sender to retry."""


def _now_str():
    return str(int(time.time()))


class DynamoKV:
    """Key-value view over one DynamoDB table.

    Items are addressed by (namespace, item) where namespace is "<namespace>/<group>".
    Writes are unconditional put_item calls, so the last writer wins.
    """

    def __init__(self, client, table_name: str, namespace: str = "default", group: str = "default"):
        self.client = client
        self.table_name = table_name
        self.namespace = f"{namespace}/{group}"

    def _key(self, key: str):
        return {"namespace": {"S": self.namespace}, "item": {"S": key}}

    def put(self, key: str, value: str):
        try:
            self.client.put_item(
                TableName=self.table_name,
                Item={**self._key(key), "value": {"S": value}, "updatedAt": {"S": _now_str()}},
            )
        except (ClientError, BotoCoreError, UnicodeError) as e:
            raise KVError(str(e)) from e

    def get(self, key: str):
        try:
            res = self.client.get_item(TableName=self.table_name, Key=self._key(key))
        except (ClientError, BotoCoreError, UnicodeError) as e:
            raise KVError(str(e)) from e
        item = res.get("Item")
        return item["value"]["S"] if item else None
