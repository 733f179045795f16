# backend/services/slugs.py
import re
import time

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def slugify(text: str) -> str:
    return _NON_ALNUM.sub("-", (text or "").lower()).strip("-")


def base36(n: int) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(_DIGITS[r])
    return "".join(reversed(out))


def product_slug(name: str, now_ms: int = None) -> str:
    """Name slug plus a base-36 millisecond suffix, unique without a lookup."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{slugify(name)}-{base36(now_ms)}"
