# src/handlers/signature.py
import binascii
import hashlib
import hmac

from .log import log

SIGNATURE_HEADER = "X-Hub-Signature"
SIGNATURE_PREFIX = "sha1="


def verify_signature(raw_body: bytes, header_value, secret) -> bool:
    """GitHub-style verifier: 'sha1=<hex>' where hex = HMAC_SHA1(secret, raw_body).

    Works on the exact bytes received. Every failure returns False; the reason
    only goes to the log so callers cannot tell a bad prefix from a bad secret.
    """
    if not header_value or not header_value.startswith(SIGNATURE_PREFIX):
        log("warn", "bad_sig", reason="missing" if not header_value else "bad_prefix")
        return False
    if not secret:
        log("warn", "bad_sig", reason="no_secret")
        return False

    try:
        claimed = binascii.unhexlify(header_value[len(SIGNATURE_PREFIX):])
    except (binascii.Error, ValueError):
        log("warn", "bad_sig", reason="bad_hex")
        return False

    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    expected = hmac.new(key, raw_body, hashlib.sha1).digest()
    if not hmac.compare_digest(expected, claimed):
        log("warn", "bad_sig", reason="mismatch")
        return False
    return True
