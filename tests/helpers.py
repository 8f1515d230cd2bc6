# tests/helpers.py
import hashlib
import hmac
import json

SECRET = "whsec_test"
EVENT = "project.web_sdk_artifact_upload"


def make_sig(payload, secret: str = SECRET) -> str:
    body = payload.encode("utf-8") if isinstance(payload, str) else payload
    return "sha1=" + hmac.new(secret.encode("utf-8"), body, hashlib.sha1).hexdigest()


def artifact_body(project_id="42", data=None, event=EVENT) -> str:
    payload = {"event": event, "project_id": project_id, "data": data or {"url": "https://x/y.js"}}
    return json.dumps(payload)


class FakeKV:
    def __init__(self, error=None):
        self.puts = []
        self.data = {}
        self.error = error

    def put(self, key, value):
        self.puts.append((key, value))
        if self.error:
            raise self.error
        self.data[key] = value

    def get(self, key):
        return self.data.get(key)
