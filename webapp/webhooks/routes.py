# webapp/webhooks/routes.py
from flask import Blueprint, current_app, request, url_for

from src.handlers.artifact import InboundRequest, handle_webhook
from src.handlers.outcomes import Outcome, respond

webhooks_bp = Blueprint("webhooks", __name__)

# common methods reach the view; anything else (TRACE, custom verbs) is
# answered by method_not_allowed below with the same plain-text 405
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@webhooks_bp.route("/artifact", methods=ALL_METHODS, provide_automatic_options=False)
def artifact_webhook():
    inbound = InboundRequest(
        request.method,
        {name: request.headers.getlist(name) for name in request.headers.keys()},
        request.get_data(),
    )
    res = handle_webhook(
        inbound,
        current_app.extensions["kv_store"],
        current_app.config.get("WEBHOOK_SECRET", ""),
    )
    if res.status >= 500:
        current_app.logger.warning(f"artifact webhook failed: {res.status}")
    return res.body, res.status, res.headers


# Routing rejects unlisted methods before any blueprint is matched, so this
# has to be registered app-wide and filter on the path itself.
@webhooks_bp.app_errorhandler(405)
def method_not_allowed(e):
    if request.script_root + request.path != url_for("webhooks.artifact_webhook"):
        return e
    res = respond(Outcome.METHOD_NOT_ALLOWED)
    return res.body, res.status, res.headers
