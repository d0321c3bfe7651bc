from __future__ import annotations

import math
import re

_RANGE_RE = re.compile(r"^(\d+)(?:-(\d+))?$")
# Locale thousand separators, e.g. "16.000" or "16,000"
_SEPARATORS = str.maketrans("", "", ".,")


def parse_price_range(price_range: str | None) -> tuple[int, int] | None:
    """
    Parse ``"<min>-<max>"`` or a bare ``"<value>"`` into an integer pair.

    Returns None for anything else.
    """
    if not price_range:
        return None
    cleaned = re.sub(r"\s+", "", price_range).translate(_SEPARATORS)
    match = _RANGE_RE.match(cleaned)
    if not match:
        return None
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    return low, high


def price_range_matches(
    price_range: str | None,
    price_min: int | None = None,
    price_max: int | None = None,
) -> bool:
    """Interval-overlap test between a tenant's price range and the filter bounds."""
    bounds = parse_price_range(price_range)
    if bounds is None:
        return False
    tenant_min, tenant_max = bounds
    filter_min = price_min if price_min is not None else 0
    filter_max = price_max if price_max is not None else math.inf
    return tenant_max >= filter_min and tenant_min <= filter_max
