import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    WEBHOOK_SECRET = os.getenv("WEBHOOK_SECRET", "")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///kv.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # "sql" keeps records in kv_items; "dynamodb" writes to KV_TABLE_NAME
    KV_BACKEND = os.getenv("KV_BACKEND", "sql")
    KV_TABLE_NAME = os.getenv("KV_TABLE_NAME", "")
    KV_NAMESPACE = os.getenv("KV_NAMESPACE", "default")
    KV_GROUP = os.getenv("KV_GROUP", "default")
