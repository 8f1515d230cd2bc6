# src/handlers/log.py
import json


def log(lvl: str, msg: str, **fields):
    """One JSON object per line on stdout (CloudWatch picks these up as-is)."""
    print(json.dumps({"lvl": lvl, "msg": msg, **fields}), flush=True)
