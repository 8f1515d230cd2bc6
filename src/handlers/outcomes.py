# src/handlers/outcomes.py
import enum

TEXT_PLAIN = {"Content-Type": "text/plain"}


class Outcome(enum.Enum):
    """Every way a webhook invocation can end: (status, body template)."""

    METHOD_NOT_ALLOWED = (405, "Send a POST request with JSON body containing webhook payload.")
    INVALID_JSON = (400, "Invalid JSON body: {detail}")
    INVALID_SIGNATURE = (401, "Invalid webhook signature")
    EVENT_IGNORED = (200, "Event ignored")
    MISSING_KEY_OR_VALUE = (400, "Missing key or value in request body")
    STORE_FAILED = (500, "Failed to update EdgeKV: {detail}")
    STORED = (200, "Successfully updated key: {detail}")
    INTERNAL_ERROR = (500, "Internal server error: {detail}")

    def __init__(self, status, template):
        self.status = status
        self.template = template


class Response:
    __slots__ = ("status", "body", "headers")

    def __init__(self, status: int, body: str, headers=None):
        self.status = status
        self.body = body
        self.headers = dict(headers or TEXT_PLAIN)

    def __repr__(self):
        return f"Response({self.status}, {self.body!r})"


def respond(outcome: Outcome, detail="") -> Response:
    return Response(outcome.status, outcome.template.format(detail=detail))
