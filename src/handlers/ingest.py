# src/handlers/ingest.py
import base64
import boto3

from .artifact import InboundRequest, handle_webhook
from .config import load_settings
from .kv import DynamoKV
from .log import log
from .outcomes import Outcome, respond

# Single DynamoDB client (wrapped by Stubber in tests)
ddb = boto3.client("dynamodb")


def request_from_event(event: dict) -> InboundRequest:
    """API Gateway proxy event (REST v1 or HTTP API v2) -> InboundRequest."""
    method = event.get("httpMethod") or (
        (event.get("requestContext") or {}).get("http") or {}
    ).get("method")

    body = event.get("body") or ""
    body_bytes = base64.b64decode(body) if event.get("isBase64Encoded") else body.encode("utf-8")

    # multiValueHeaders keeps repeated headers apart; v2 only has headers
    headers = event.get("multiValueHeaders") or event.get("headers") or {}
    return InboundRequest(method, headers, body_bytes)


def to_lambda(res) -> dict:
    return {"statusCode": res.status, "headers": res.headers, "body": res.body}


def handler(event, context):
    try:
        cfg = load_settings()
        request = request_from_event(event)
    except Exception as e:
        log("error", "bad_invocation", error=repr(e))
        return to_lambda(respond(Outcome.INTERNAL_ERROR, e))

    store = DynamoKV(ddb, cfg.table_name, cfg.namespace, cfg.group)
    return to_lambda(handle_webhook(request, store, cfg.webhook_secret))
