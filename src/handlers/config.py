# src/handlers/config.py
import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    webhook_secret: str
    table_name: str
    namespace: str = "default"
    group: str = "default"

    def __repr__(self):
        # keep the secret out of logs and tracebacks
        return (
            f"Settings(table_name={self.table_name!r}, "
            f"namespace={self.namespace!r}, group={self.group!r})"
        )


def _required(name: str) -> str:
    v = os.environ.get(name)
    if not v:
        # Avoid import-time KeyError; raise a clear runtime error instead.
        raise RuntimeError(f"Missing required env var: {name}")
    return v


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Resolve settings once per process (first invocation of a cold Lambda)."""
    return Settings(
        webhook_secret=_required("WEBHOOK_SECRET"),
        table_name=_required("KV_TABLE_NAME"),
        namespace=os.environ.get("KV_NAMESPACE", "default"),
        group=os.environ.get("KV_GROUP", "default"),
    )
