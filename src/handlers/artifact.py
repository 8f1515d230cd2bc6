# src/handlers/artifact.py
"""Artifact-upload webhook pipeline: classify -> verify -> ingest.

Transport-agnostic. Adapters (Lambda, Flask) build an InboundRequest, pick a
store and hand both to handle_webhook together with the shared secret.
"""
import json
import traceback

from .kv import KVError
from .log import log
from .outcomes import Outcome, Response, respond
from .signature import SIGNATURE_HEADER, verify_signature

ARTIFACT_EVENT = "project.web_sdk_artifact_upload"


class InboundRequest:
    """One HTTP call as received. Header names are case-insensitive and may repeat."""

    def __init__(self, method: str, headers=None, body=b""):
        self.method = method
        self.headers = {}
        for name, v in (headers or {}).items():
            values = list(v) if isinstance(v, (list, tuple)) else [v]
            self.headers.setdefault(name.lower(), []).extend(values)
        if body is None:
            body = b""
        self.body = body.encode("utf-8") if isinstance(body, str) else bytes(body)

    def header(self, name: str):
        values = self.headers.get(name.lower())
        return values[0] if values else None


def _reject_constant(name):
    raise ValueError(f"Unexpected token {name} in JSON")


def classify_request(request: InboundRequest):
    """Return (payload, None) to continue, or (None, Response) to stop here."""
    if request.method != "POST":
        return None, respond(Outcome.METHOD_NOT_ALLOWED)
    try:
        payload = json.loads(request.body.decode("utf-8"), parse_constant=_reject_constant)
    except ValueError as e:  # JSONDecodeError and UnicodeDecodeError both land here
        return None, respond(Outcome.INVALID_JSON, e)
    return payload, None


def _key_from(project_id):
    # bools and containers are not identifiers
    if project_id is None or isinstance(project_id, bool):
        return None
    if isinstance(project_id, str):
        return project_id or None
    if isinstance(project_id, int):
        return str(project_id)
    if isinstance(project_id, float):
        # integral floats below 1e21 print as plain digits, larger ones as 1e+300
        if project_id.is_integer() and abs(project_id) < 1e21:
            return str(int(project_id))
        return repr(project_id)
    return None


def _value_from(payload: dict):
    if "data" not in payload:
        return None
    value = json.dumps(payload["data"], separators=(",", ":"), ensure_ascii=False)
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # lone surrogates from \udXXX escapes; keep them escaped
        value = json.dumps(payload["data"], separators=(",", ":"))
    return value


def extract_record(payload: dict):
    """(key, value) for the store; either may be None when the payload lacks it."""
    return _key_from(payload.get("project_id")), _value_from(payload)


def ingest_artifact(payload, store) -> Response:
    event = payload.get("event") if isinstance(payload, dict) else None
    if event != ARTIFACT_EVENT:
        log("info", "event_ignored", event=event if isinstance(event, str) else None)
        return respond(Outcome.EVENT_IGNORED)

    key, value = extract_record(payload)
    if not key or not value:
        log("warn", "missing_key_or_value", has_key=bool(key), has_value=bool(value))
        return respond(Outcome.MISSING_KEY_OR_VALUE)

    # Exactly one write; the sender owns redelivery.
    try:
        store.put(key, value)
    except KVError as e:
        log("error", "kv_put_failed", key=key, error=str(e))
        return respond(Outcome.STORE_FAILED, e)

    log("info", "kv_updated", key=key)
    return respond(Outcome.STORED, key)


def handle_webhook(request: InboundRequest, store, secret) -> Response:
    """Run the whole pipeline. Never raises; every fault becomes a Response."""
    try:
        payload, stop = classify_request(request)
        if stop is not None:
            return stop

        # Authenticate before routing on the event, even for events we ignore.
        if not verify_signature(request.body, request.header(SIGNATURE_HEADER), secret):
            return respond(Outcome.INVALID_SIGNATURE)

        return ingest_artifact(payload, store)
    except Exception as e:
        log("error", "unhandled_error", error=repr(e), trace=traceback.format_exc())
        return respond(Outcome.INTERNAL_ERROR, e)
