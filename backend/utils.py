import random
import string
from typing import Any, Dict, Mapping

TICKET_PREFIX = "TKT"
TICKET_ALPHABET = string.digits + string.ascii_uppercase


def generate_ticket_id() -> str:
    # fallback only: not unique, not secure
    token = "".join(random.choices(TICKET_ALPHABET, k=9))
    return f"{TICKET_PREFIX}{token}"


def present_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Drops fields sent as null so they fall back to their defaults,
    the same as fields that were never sent.
    """
    return {k: v for k, v in data.items() if v is not None}
