from __future__ import annotations

import math
from typing import Optional

from core.errors import ValidationError


def normalize_key(key: str) -> str:
    key_clean = (key or "").strip()
    if not key_clean:
        raise ValidationError("key must be non-empty")
    return key_clean


def normalize_timestamp(value: float, name: str) -> float:
    # Reject bools and NaN/inf so window comparisons stay meaningful
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number")
    ts = float(value)
    if not math.isfinite(ts):
        raise ValidationError(f"{name} must be finite")
    return ts


def resolve_expires_at(
    now: float,
    expires_at: Optional[float],
    ttl_seconds: Optional[float],
) -> float:
    """Return an absolute expiry from either expires_at or now + ttl_seconds.

    Exactly one of the two must be given.
    """
    if (expires_at is None) == (ttl_seconds is None):
        raise ValidationError("Provide exactly one of expires_at or ttl_seconds")

    if expires_at is not None:
        return normalize_timestamp(expires_at, "expires_at")

    ttl = normalize_timestamp(ttl_seconds, "ttl_seconds")
    if ttl <= 0:
        raise ValidationError("ttl_seconds must be positive")
    return now + ttl
