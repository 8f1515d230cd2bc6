import boto3
from flask import Flask
from .config import Config
from .extensions import db, migrate, configure_logging
from .store import SqlKV
from . import models  # noqa: F401

from src.handlers.kv import DynamoKV
from .webhooks.routes import webhooks_bp


def _build_store(app):
    cfg = app.config
    if cfg["KV_BACKEND"] == "dynamodb":
        if not cfg.get("KV_TABLE_NAME"):
            raise RuntimeError("KV_BACKEND=dynamodb needs KV_TABLE_NAME")
        return DynamoKV(boto3.client("dynamodb"), cfg["KV_TABLE_NAME"], cfg["KV_NAMESPACE"], cfg["KV_GROUP"])
    if cfg["KV_BACKEND"] == "sql":
        return SqlKV(namespace=cfg["KV_NAMESPACE"], group=cfg["KV_GROUP"])
    raise RuntimeError(f"Unknown KV_BACKEND: {cfg['KV_BACKEND']}")


def create_app(config=None, store=None):
    app = Flask(__name__)
    app.config.from_object(Config())
    if config:
        app.config.update(config)
    if not app.config.get("WEBHOOK_SECRET"):
        raise RuntimeError("Missing required config: WEBHOOK_SECRET")

    # init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    configure_logging(app)

    # resolved once; routes read it from app.extensions
    app.extensions["kv_store"] = store if store is not None else _build_store(app)

    # blueprints
    app.register_blueprint(webhooks_bp, url_prefix="/webhooks")

    @app.get("/healthz")
    def healthz():
        return {"ok": True}, 200

    return app
