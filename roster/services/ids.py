# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Identifier generation — opaque, globally-unique string ids.
"""

import random
import time
import uuid

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def fallback_id() -> str:
    """Millisecond timestamp plus a random suffix, both base-36."""
    millis = int(time.time() * 1000)
    return _base36(millis) + _base36(random.getrandbits(52))


def new_id() -> str:
    """Return a UUID4 string, or a timestamp-based id if no OS randomness exists."""
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return fallback_id()
